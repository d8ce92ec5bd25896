"""Brand spelling records."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import BrandIssueSource


@dataclass(slots=True, frozen=True)
class KnownBrand:
    """A brand name with its documented misspellings."""

    name: str
    variants: tuple[str, ...]
    category: str
    confidence: float = 0.9


@dataclass(slots=True, frozen=True)
class BrandIssue:
    original_brand: str
    suggested_brand: str
    confidence: float
    category: str
    source: BrandIssueSource
    similarity: float | None = None
