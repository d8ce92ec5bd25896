"""Raw item record as entered by the cataloger."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass


def _as_amount(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            amount = float(value)
        except OverflowError as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    else:
        text = "".join(str(value).split()).replace(",", ".")
        if not text:
            return None
        try:
            amount = float(text)
        except ValueError as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    if not math.isfinite(amount):
        raise ValueError(f"Invalid amount: {value!r}")
    return amount if amount > 0 else None


@dataclass(slots=True, frozen=True)
class ItemRecord:
    title: str
    description: str = ""
    condition: str = ""
    artist: str = ""
    estimate: float | None = None
    upper_estimate: float | None = None
    accepted_reserve: float | None = None
    keywords: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(part for part in (self.title, self.description) if part)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ItemRecord:
        """Build a record from form data, accepting camelCase or snake_case keys."""

        def pick(*names: str) -> object:
            for name in names:
                if name in data and data[name] is not None:
                    return data[name]
            return None

        title = pick("title")
        if not isinstance(title, str) or not title.strip():
            raise ValueError("Item record requires a non-empty title")

        raw_keywords = pick("keywords")
        if isinstance(raw_keywords, str):
            keywords = tuple(
                word.strip() for word in raw_keywords.replace(";", ",").split(",") if word.strip()
            )
        elif isinstance(raw_keywords, list | tuple):
            keywords = tuple(str(word).strip() for word in raw_keywords if str(word).strip())
        else:
            keywords = ()

        return cls(
            title=title.strip(),
            description=str(pick("description") or ""),
            condition=str(pick("condition") or ""),
            artist=str(pick("artist") or "").strip(),
            estimate=_as_amount(pick("estimate")),
            upper_estimate=_as_amount(pick("upper_estimate", "upperEstimate")),
            accepted_reserve=_as_amount(pick("accepted_reserve", "acceptedReserve")),
            keywords=keywords,
        )
