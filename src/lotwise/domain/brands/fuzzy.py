"""Rule-based detection of misspelled brand names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger

from lotwise.domain.model import BrandIssue, BrandIssueSource, KnownBrand

from .known_brands import KNOWN_BRANDS
from .similarity import similarity

log = getLogger(__name__)

STOP_WORDS: frozenset[str] = frozenset(
    {"och", "med", "för", "från", "till", "som", "var", "är", "den", "det", "att", "på", "av"}
)
UNIT_TOKENS: frozenset[str] = frozenset({"cm", "mm", "st", "stk"})
MAX_PHRASE_WORDS = 3
MIN_CANDIDATE_LENGTH = 3

_SEGMENT_SPLIT = re.compile(r"[,.;:!?()\[\]\"/\n]+")
_WORD = re.compile(r"^[^\W\d_]{2,}$")
_NUMBER = re.compile(r"^\d+$")


@dataclass(slots=True, frozen=True)
class BrandMatchThresholds:
    variant_similarity: float = 0.8
    correct_name_similarity: float = 0.9


def candidate_phrases(text: str) -> list[str]:
    """Return 1-3 word phrases found inside punctuation-delimited segments.

    Phrases never span punctuation. Stop words, pure numbers, unit tokens and
    strings shorter than three characters are not candidates.
    """

    phrases: list[str] = []
    seen: set[str] = set()
    for segment in _SEGMENT_SPLIT.split(text):
        words = segment.split()
        for start in range(len(words)):
            for size in range(1, MAX_PHRASE_WORDS + 1):
                window = words[start : start + size]
                if len(window) < size or not all(_WORD.match(word) for word in window):
                    break
                phrase = " ".join(window)
                if not _is_candidate(phrase) or phrase.casefold() in seen:
                    continue
                seen.add(phrase.casefold())
                phrases.append(phrase)
    return phrases


def _is_candidate(phrase: str) -> bool:
    lowered = phrase.casefold()
    return (
        len(phrase) >= MIN_CANDIDATE_LENGTH
        and lowered not in STOP_WORDS
        and lowered not in UNIT_TOKENS
        and not _NUMBER.match(lowered)
    )


def _inside_correct_name(lowered: str, brand_name: str, text: str) -> bool:
    """True when the phrase is a shorter part of a correctly written brand name in the text.

    "Kosta" inside "Kosta Boda" is part of the correct name, not a misspelling.
    """

    name_words = brand_name.casefold().split()
    words = lowered.split()
    size = len(words)
    if size >= len(name_words):
        return False
    if not any(
        name_words[start : start + size] == words
        for start in range(len(name_words) - size + 1)
    ):
        return False
    pattern = rf"(?<![\w-]){re.escape(brand_name)}(?![\w-])"
    return re.search(pattern, text, flags=re.IGNORECASE) is not None


class FuzzyBrandMatcher:
    def __init__(
        self,
        brands: tuple[KnownBrand, ...] = KNOWN_BRANDS,
        thresholds: BrandMatchThresholds | None = None,
    ) -> None:
        self._brands = brands
        self._thresholds = thresholds or BrandMatchThresholds()

    def detect(self, title: str, description: str = "") -> list[BrandIssue]:
        text = f"{title}\n{description}" if description else title
        issues: list[BrandIssue] = []
        for candidate in candidate_phrases(text):
            lowered = candidate.casefold()
            for brand in self._brands:
                if _inside_correct_name(lowered, brand.name, text):
                    continue
                issue = self._match(candidate, lowered, brand)
                if issue is not None:
                    issues.append(issue)
        if issues:
            log.debug("Fuzzy brand matching flagged %d candidates", len(issues))
        return issues

    def _match(self, candidate: str, lowered: str, brand: KnownBrand) -> BrandIssue | None:
        for variant in brand.variants:
            variant_similarity = similarity(lowered, variant.casefold())
            if variant_similarity <= self._thresholds.variant_similarity:
                continue
            correct_similarity = similarity(lowered, brand.name.casefold())
            if correct_similarity > self._thresholds.correct_name_similarity:
                return None
            return BrandIssue(
                original_brand=candidate,
                suggested_brand=brand.name,
                confidence=brand.confidence,
                category=brand.category,
                source=BrandIssueSource.FUZZY_MATCHING,
                similarity=variant_similarity,
            )
        return None


__all__ = ["BrandMatchThresholds", "FuzzyBrandMatcher", "candidate_phrases"]
