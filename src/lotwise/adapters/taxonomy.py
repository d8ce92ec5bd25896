"""Static word-table taxonomy for Swedish and English catalog texts."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from lotwise.domain.model import TermClassification

MATERIALS: tuple[str, ...] = (
    "guld",
    "silver",
    "nysilver",
    "tenn",
    "mässing",
    "koppar",
    "brons",
    "stål",
    "platina",
    "porslin",
    "stengods",
    "keramik",
    "fajans",
    "glas",
    "kristall",
    "ek",
    "teak",
    "mahogny",
    "björk",
    "jakaranda",
    "marmor",
    "läder",
    "gold",
    "bronze",
    "brass",
    "copper",
    "steel",
    "porcelain",
    "ceramic",
    "glass",
    "crystal",
    "oak",
    "mahogany",
    "marble",
    "leather",
)

STYLES: tuple[str, ...] = (
    "gustaviansk",
    "rokoko",
    "barock",
    "empire",
    "karl johan",
    "jugend",
    "art deco",
    "art nouveau",
    "funkis",
    "swedish grace",
    "modernism",
    "modernist",
    "skandinavisk design",
    "scandinavian modern",
    "mid-century",
    "allmoge",
)

COLORS: tuple[str, ...] = (
    "vit",
    "svart",
    "röd",
    "blå",
    "grön",
    "gul",
    "brun",
    "grå",
    "rosa",
    "turkos",
    "white",
    "black",
    "red",
    "blue",
    "green",
    "yellow",
    "brown",
    "grey",
    "gray",
)

OBJECT_TYPES: tuple[str, ...] = (
    "armbandsur",
    "fickur",
    "golvlampa",
    "bordslampa",
    "taklampa",
    "lampa",
    "ljusstake",
    "vas",
    "skål",
    "fat",
    "tallrik",
    "servis",
    "kanna",
    "skulptur",
    "tavla",
    "målning",
    "litografi",
    "grafik",
    "matta",
    "byrå",
    "fåtölj",
    "stol",
    "soffa",
    "bord",
    "skåp",
    "spegel",
    "ring",
    "halsband",
    "armband",
    "brosch",
    "klocka",
    "wristwatch",
    "watch",
    "vase",
    "bowl",
    "sculpture",
    "painting",
    "lithograph",
    "lamp",
    "chair",
    "table",
)

_PERIOD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b1[5-9]\d0-tal(?:ets?)?\b"),
    re.compile(r"\b1[5-9]\d0s\b"),
    re.compile(r"\b1[5-9]th century\b"),
)


def _word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    # longest first so "art deco" wins over shorter overlapping entries
    alternatives = sorted(words, key=len, reverse=True)
    joined = "|".join(re.escape(word) for word in alternatives)
    return re.compile(rf"(?<![\w-])(?:{joined})(?![\w-])")


def _unique(matches: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(matches))


@dataclass(slots=True)
class StaticTermTaxonomy:
    """Match fixed word tables against a text on word boundaries."""

    materials: tuple[str, ...] = MATERIALS
    styles: tuple[str, ...] = STYLES
    colors: tuple[str, ...] = COLORS
    object_types: tuple[str, ...] = OBJECT_TYPES
    _patterns: dict[str, re.Pattern[str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._patterns = {
            "materials": _word_pattern(self.materials),
            "styles": _word_pattern(self.styles),
            "colors": _word_pattern(self.colors),
            "object_types": _word_pattern(self.object_types),
        }

    def classify(self, text: str) -> TermClassification:
        lowered = text.casefold()
        if not lowered.strip():
            return TermClassification()

        periods: list[str] = []
        for pattern in _PERIOD_PATTERNS:
            periods.extend(match.group(0) for match in pattern.finditer(lowered))

        object_match = self._patterns["object_types"].search(lowered)
        return TermClassification(
            materials=_unique(self._patterns["materials"].findall(lowered)),
            periods=_unique(periods),
            styles=_unique(self._patterns["styles"].findall(lowered)),
            colors=_unique(self._patterns["colors"].findall(lowered)),
            object_type=object_match.group(0) if object_match else None,
        )


__all__ = ["StaticTermTaxonomy"]
