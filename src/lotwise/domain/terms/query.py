"""Helpers for turning terms into market search queries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

FALLBACK_OBJECT_TYPES: tuple[str, ...] = (
    "skulptur",
    "målning",
    "tavla",
    "keramik",
    "fat",
    "vas",
    "armbandsur",
    "klocka",
    "ur",
    "halsband",
    "ring",
    "brosch",
)
FALLBACK_STOP_WORDS: frozenset[str] = frozenset(
    {"och", "med", "för", "från", "till", "signerad", "numrerad", "höjd", "diameter"}
)
DEFAULT_SEARCH_BASE_URL = "https://auctionet.com/sv/search"

_NON_WORD = re.compile(r"[^\w\s-]", re.UNICODE)
_QUOTED_OR_WORD = re.compile(r'"[^"]*"|\S+')


@dataclass(slots=True, frozen=True)
class FallbackQuery:
    query: str
    terms: tuple[str, ...]
    confidence: float
    reasoning: str


@dataclass(slots=True, frozen=True)
class SearchUrls:
    historical: str
    live: str
    all: str


def format_artist_for_search(name: str) -> str:
    """Quote multi-word names so the search treats them as one phrase."""

    clean = name.strip().rstrip(",").strip().strip('"').strip()
    if not clean:
        return ""
    if len(clean.split()) > 1:
        return f'"{clean}"'
    return clean


def parse_query_preserving_quotes(query: str) -> list[str]:
    """Split a query on whitespace, keeping double-quoted phrases intact."""

    return [match.group(0) for match in _QUOTED_OR_WORD.finditer(query) if match.group(0) != '""']


def _significant_words(title: str) -> list[str]:
    return [word for word in _NON_WORD.sub(" ", title.lower()).split() if len(word) > 2]


def emergency_fallback_query(title: str, artist: str = "") -> FallbackQuery:
    """Build a minimal query when no candidate terms could be produced."""

    terms: list[str] = []
    reasons: list[str] = []

    formatted_artist = format_artist_for_search(artist)
    if formatted_artist:
        terms.append(formatted_artist)
        reasons.append(f"artist field {formatted_artist} used as primary term")

    title_words = set(_NON_WORD.sub(" ", title.lower()).split())
    if len(terms) < 2:
        for object_type in FALLBACK_OBJECT_TYPES:
            if object_type in title_words and not any(object_type in t.lower() for t in terms):
                terms.append(object_type)
                reasons.append(f"object type {object_type} detected")
                break

    if len(terms) < 3:
        words = [
            word
            for word in _significant_words(title)
            if word not in FALLBACK_STOP_WORDS and not any(word in t.lower() for t in terms)
        ][: 3 - len(terms)]
        if words:
            terms.extend(words)
            reasons.append(f"significant title words: {', '.join(words)}")

    if not terms:
        terms = _significant_words(title)[:2]
        reasons.append("basic word extraction")

    return FallbackQuery(
        query=" ".join(terms),
        terms=tuple(terms),
        confidence=0.7 if formatted_artist else 0.2,
        reasoning="Emergency fallback: " + "; ".join(reasons),
    )


def build_search_urls(query: str, base_url: str = DEFAULT_SEARCH_BASE_URL) -> SearchUrls:
    if not query.strip():
        return SearchUrls(historical="#", live="#", all="#")
    encoded = quote(query, safe="")
    return SearchUrls(
        historical=f"{base_url}?event_id=&is=ended&q={encoded}",
        live=f"{base_url}?event_id=&is=&q={encoded}",
        all=f"{base_url}?event_id=&is=&q={encoded}",
    )


__all__ = [
    "DEFAULT_SEARCH_BASE_URL",
    "FallbackQuery",
    "SearchUrls",
    "build_search_urls",
    "emergency_fallback_query",
    "format_artist_for_search",
    "parse_query_preserving_quotes",
]
