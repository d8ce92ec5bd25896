"""Dashboard visibility flags."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from lotwise.common.storage import get_visibility_path

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

VISIBLE_KEY = "visible"


@dataclass(slots=True)
class InMemoryDashboardVisibility:
    visible: bool = False

    def is_visible(self) -> bool:
        return self.visible

    def set_visible(self, visible: bool) -> None:  # noqa: FBT001
        self.visible = visible


@dataclass(slots=True)
class FileDashboardVisibility:
    """Visibility flag persisted as a small JSON document in the data directory."""

    path: Path = field(default_factory=get_visibility_path)
    default: bool = False

    def is_visible(self) -> bool:
        if not self.path.exists():
            return self.default
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Could not read dashboard visibility from %s: %s", self.path, exc)
            return self.default
        value = payload.get(VISIBLE_KEY) if isinstance(payload, dict) else None
        return value if isinstance(value, bool) else self.default

    def set_visible(self, visible: bool) -> None:  # noqa: FBT001
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({VISIBLE_KEY: visible}), encoding="utf-8")
        log.debug("Dashboard visibility set to %s", visible)


__all__ = ["FileDashboardVisibility", "InMemoryDashboardVisibility"]
