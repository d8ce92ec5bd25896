"""Single source of truth for the canonical market search query.

One ``SearchQueryState`` is owned per item analysis. ``initialize`` is the only
writer: it builds a complete snapshot and swaps it in with one assignment, so
readers never observe a half-updated query. Everything else is a pure read.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from lotwise.domain.model import (
    AnalysisType,
    CandidateTerm,
    LookupScope,
    QueryMetadata,
    SearchContext,
    TermType,
    term_key,
)
from lotwise.domain.terms.query import DEFAULT_SEARCH_BASE_URL, SearchUrls, build_search_urls

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)

SSOT_CONTEXT_SOURCE = "ssot"


@dataclass(slots=True, frozen=True)
class QuerySnapshot:
    query: str
    candidates: tuple[CandidateTerm, ...]
    analysis_type: AnalysisType
    metadata: QueryMetadata

    @property
    def selected(self) -> tuple[CandidateTerm, ...]:
        return tuple(term for term in self.candidates if term.is_selected)


def derive_query(candidates: Iterable[CandidateTerm]) -> str:
    return " ".join(
        term.term.strip() for term in candidates if term.is_selected and term.term.strip()
    )


class SearchQueryState:
    def __init__(self) -> None:
        self._snapshot: QuerySnapshot | None = None

    def initialize(
        self,
        query: str,
        candidates: Iterable[CandidateTerm],
        analysis_type: AnalysisType,
        *,
        confidence: float = 0.8,
        reasoning: str = "",
        original_title: str = "",
    ) -> bool:
        """Replace the whole state. Returns ``False`` when the candidate set is empty."""

        candidate_tuple = tuple(candidates)
        if not candidate_tuple:
            log.warning("Ignoring search state initialisation without candidates")
            return False

        effective_query = query.strip() or derive_query(candidate_tuple)
        metadata = QueryMetadata(
            confidence=confidence,
            source=analysis_type,
            reasoning=reasoning,
            original_title=original_title,
            candidate_count=len(candidate_tuple),
            updated_at=datetime.now(UTC),
        )
        self._snapshot = QuerySnapshot(
            query=effective_query,
            candidates=candidate_tuple,
            analysis_type=analysis_type,
            metadata=metadata,
        )
        log.debug(
            "Search state initialised: query=%r, candidates=%d, type=%s",
            effective_query,
            len(candidate_tuple),
            analysis_type,
        )
        return True

    @property
    def snapshot(self) -> QuerySnapshot | None:
        return self._snapshot

    @property
    def current_query(self) -> str:
        return self._snapshot.query if self._snapshot else ""

    @property
    def current_metadata(self) -> QueryMetadata | None:
        return self._snapshot.metadata if self._snapshot else None

    @property
    def analysis_type(self) -> AnalysisType | None:
        return self._snapshot.analysis_type if self._snapshot else None

    @property
    def candidates(self) -> tuple[CandidateTerm, ...]:
        return self._snapshot.candidates if self._snapshot else ()

    @property
    def selected_terms(self) -> tuple[CandidateTerm, ...]:
        return self._snapshot.selected if self._snapshot else ()

    def is_term_selected(self, term: str) -> bool:
        if not term.strip():
            return False
        key = term_key(term)
        return any(candidate.key == key for candidate in self.selected_terms)

    def build_search_context(self) -> SearchContext:
        snapshot = self._snapshot
        if snapshot is None or not snapshot.query:
            return SearchContext.empty()

        selected_types = {term.type for term in snapshot.selected}
        if TermType.ARTIST in selected_types:
            scope = LookupScope.ARTIST
        elif TermType.BRAND in selected_types:
            scope = LookupScope.BRAND
        else:
            scope = LookupScope.FREETEXT

        return SearchContext(
            primary_search=snapshot.query,
            confidence=snapshot.metadata.confidence,
            reasoning=snapshot.metadata.reasoning or "Generated from search state",
            source=SSOT_CONTEXT_SOURCE,
            scope=scope,
            generated_at=snapshot.metadata.updated_at or datetime.now(UTC),
        )

    def search_urls(self, base_url: str = DEFAULT_SEARCH_BASE_URL) -> SearchUrls:
        return build_search_urls(self.current_query, base_url)


__all__ = ["QuerySnapshot", "SearchQueryState", "derive_query"]
