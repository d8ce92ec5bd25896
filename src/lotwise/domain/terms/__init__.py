"""Candidate term building and conflict resolution."""

from __future__ import annotations

from .candidates import build_candidate_terms, detect_term_type, make_candidate, term_priority
from .conflicts import (
    DEFAULT_MAX_DISPLAY_TERMS,
    ConflictWeights,
    TermConflictResolver,
    score_term,
)
from .query import (
    FallbackQuery,
    SearchUrls,
    build_search_urls,
    emergency_fallback_query,
    format_artist_for_search,
    parse_query_preserving_quotes,
)

__all__ = [
    "DEFAULT_MAX_DISPLAY_TERMS",
    "ConflictWeights",
    "FallbackQuery",
    "SearchUrls",
    "TermConflictResolver",
    "build_candidate_terms",
    "build_search_urls",
    "detect_term_type",
    "emergency_fallback_query",
    "format_artist_for_search",
    "make_candidate",
    "parse_query_preserving_quotes",
    "score_term",
    "term_priority",
]
