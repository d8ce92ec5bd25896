"""Candidate terms and the canonical search query built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from .enums import AnalysisType, LookupScope, TermSource, TermType


def term_key(text: str) -> str:
    """Uniqueness key of a term: case-folded, quote-stripped and trimmed."""

    return text.replace('"', "").replace("'", "").casefold().strip()


@dataclass(slots=True, frozen=True)
class CandidateTerm:
    term: str
    type: TermType
    source: TermSource = TermSource.CANDIDATE_PROCESSING
    priority: float = 0.0
    is_selected: bool = False
    is_core: bool = False
    description: str | None = None

    @property
    def key(self) -> str:
        return term_key(self.term)

    @property
    def is_precision_quoted(self) -> bool:
        return '"' in self.term


@dataclass(slots=True, frozen=True)
class TermClassification:
    """Classified word lists produced by a term taxonomy."""

    materials: tuple[str, ...] = ()
    periods: tuple[str, ...] = ()
    styles: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()
    object_type: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (
            self.materials or self.periods or self.styles or self.colors or self.object_type
        )


@dataclass(slots=True, frozen=True)
class QueryMetadata:
    confidence: float = 0.8
    source: AnalysisType | None = None
    reasoning: str = ""
    original_title: str = ""
    candidate_count: int = 0
    updated_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class SearchContext:
    """Read-only view of the canonical query handed to market lookups."""

    primary_search: str
    confidence: float
    reasoning: str
    source: str
    scope: LookupScope = LookupScope.FREETEXT
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    is_empty: bool = False

    @property
    def has_valid_query(self) -> bool:
        return not self.is_empty and bool(self.primary_search.strip())

    @classmethod
    def empty(cls) -> SearchContext:
        return cls(
            primary_search="",
            confidence=0.1,
            reasoning="No search query has been set",
            source="no_query",
            is_empty=True,
        )


__all__ = [
    "CandidateTerm",
    "QueryMetadata",
    "SearchContext",
    "TermClassification",
    "term_key",
]
