"""Port for the externally persisted market dashboard visibility flag."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DashboardVisibility(Protocol):
    def is_visible(self) -> bool: ...


__all__ = ["DashboardVisibility"]
