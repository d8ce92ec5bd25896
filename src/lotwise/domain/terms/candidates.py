"""Build candidate search terms from an item and its taxonomy classification."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lotwise.domain.model import CandidateTerm, TermSource, TermType, term_key

from .conflicts import TermConflictResolver
from .query import format_artist_for_search

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lotwise.domain.model import ItemRecord, TermClassification

TYPE_PRIORITIES: dict[TermType, float] = {
    TermType.ARTIST: 90,
    TermType.BRAND: 85,
    TermType.OBJECT_TYPE: 80,
    TermType.PERIOD: 70,
    TermType.MATERIAL: 65,
    TermType.STYLE: 60,
    TermType.COLOR: 55,
    TermType.KEYWORD: 50,
}

TYPE_DESCRIPTIONS: dict[TermType, str] = {
    TermType.ARTIST: "Artist/maker",
    TermType.BRAND: "Brand/manufacturer",
    TermType.OBJECT_TYPE: "Object type",
    TermType.PERIOD: "Period",
    TermType.MATERIAL: "Material",
    TermType.STYLE: "Style",
    TermType.COLOR: "Color",
    TermType.KEYWORD: "Keyword",
}

BRAND_WORDS: frozenset[str] = frozenset(
    {"omega", "rolex", "patek", "cartier", "breitling", "tag", "heuer", "atelje", "lyktan"}
)
OBJECT_TYPE_WORDS: frozenset[str] = frozenset(
    {"golvlampa", "lampa", "armbandsur", "klocka", "ur", "tavla", "målning", "skulptur", "vas"}
)
MATERIAL_WORDS: frozenset[str] = frozenset(
    {"guld", "silver", "stål", "platina", "metall", "keramik", "glas"}
)

_PERSON_NAME = re.compile(r"^[A-ZÅÄÖÉ][a-zåäöéü]+ [A-ZÅÄÖÉ][a-zåäöéü]+")
_YEAR = re.compile(r"^\d{4}$")
_DECADE = re.compile(r"\d{4}[-\s]tal")
_CORE_TERM_COUNT = 2


def detect_term_type(term: str) -> TermType:
    """Guess the type of a free keyword."""

    if _PERSON_NAME.match(term):
        return TermType.ARTIST
    lowered = term_key(term)
    if lowered in BRAND_WORDS:
        return TermType.BRAND
    if lowered in OBJECT_TYPE_WORDS:
        return TermType.OBJECT_TYPE
    if _YEAR.match(term) or _DECADE.search(lowered):
        return TermType.PERIOD
    if lowered in MATERIAL_WORDS:
        return TermType.MATERIAL
    return TermType.KEYWORD


def term_priority(
    term: str,
    term_type: TermType,
    *,
    is_selected: bool = False,
    is_core: bool = False,
) -> float:
    priority = TYPE_PRIORITIES.get(term_type, 50)
    if is_selected:
        priority += 100
    if is_core:
        priority += 200
    if term_type is TermType.ARTIST and '"' in term:
        priority += 150
    return priority + min(len(term), 20)


def make_candidate(
    term: str,
    term_type: TermType,
    source: TermSource,
    *,
    is_selected: bool = False,
    is_core: bool = False,
) -> CandidateTerm:
    return CandidateTerm(
        term=term,
        type=term_type,
        source=source,
        priority=term_priority(term, term_type, is_selected=is_selected, is_core=is_core),
        is_selected=is_selected,
        is_core=is_core,
        description=TYPE_DESCRIPTIONS.get(term_type),
    )


def build_candidate_terms(
    item: ItemRecord,
    classification: TermClassification,
    *,
    artist: str | None = None,
    artist_source: TermSource = TermSource.ARTIST_FIELD,
    resolver: TermConflictResolver | None = None,
) -> list[CandidateTerm]:
    """Collect candidates for one item and resolve conflicts between them.

    Artist and object type are pre-selected; materials, periods, styles and
    colors are offered unselected. The first two selected terms are core terms.
    """

    drafts: list[tuple[str, TermType, TermSource, bool]] = []

    artist_name = artist if artist is not None else item.artist
    formatted_artist = format_artist_for_search(artist_name) if artist_name else ""
    if formatted_artist:
        drafts.append((formatted_artist, TermType.ARTIST, artist_source, True))

    if classification.object_type:
        drafts.append(
            (classification.object_type, TermType.OBJECT_TYPE, TermSource.TAXONOMY, True)
        )

    for keyword in item.keywords:
        keyword_type = detect_term_type(keyword)
        preselect = keyword_type in {TermType.ARTIST, TermType.BRAND}
        drafts.append((keyword, keyword_type, TermSource.CANDIDATE_PROCESSING, preselect))

    drafts.extend(_unselected(classification.materials, TermType.MATERIAL))
    drafts.extend(_unselected(classification.periods, TermType.PERIOD))
    drafts.extend(_unselected(classification.styles, TermType.STYLE))
    drafts.extend(_unselected(classification.colors, TermType.COLOR))

    candidates: list[CandidateTerm] = []
    core_remaining = _CORE_TERM_COUNT
    for text, term_type, source, selected in drafts:
        is_core = selected and core_remaining > 0
        if is_core:
            core_remaining -= 1
        candidates.append(
            make_candidate(text, term_type, source, is_selected=selected, is_core=is_core)
        )

    return (resolver or TermConflictResolver()).resolve(candidates)


def _unselected(
    words: Iterable[str], term_type: TermType
) -> list[tuple[str, TermType, TermSource, bool]]:
    return [(word, term_type, TermSource.TAXONOMY, False) for word in words if word.strip()]


__all__ = [
    "TYPE_PRIORITIES",
    "build_candidate_terms",
    "detect_term_type",
    "make_candidate",
    "term_priority",
]
