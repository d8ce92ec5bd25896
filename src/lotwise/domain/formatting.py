"""Swedish-style amount formatting."""

from __future__ import annotations

GROUP_SEPARATOR = " "


def format_amount(value: float) -> str:
    """Round to whole kronor and group thousands with spaces (``12 500``)."""

    return f"{round(value):,}".replace(",", GROUP_SEPARATOR)


def format_sek(value: float) -> str:
    return f"{format_amount(value)} SEK"


def format_sek_range(low: float, high: float) -> str:
    return f"{format_amount(low)}-{format_amount(high)} SEK"
