"""Port for classifying raw item words into taxonomy categories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lotwise.domain.model import TermClassification


@runtime_checkable
class TermTaxonomy(Protocol):
    """Pure lookup of materials, periods, styles and colors mentioned in a text."""

    def classify(self, text: str) -> TermClassification: ...


__all__ = ["TermTaxonomy"]
