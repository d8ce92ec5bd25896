"""Plain-data market notes for the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from lotwise.domain.formatting import format_sek_range
from lotwise.domain.model import Significance

if TYPE_CHECKING:
    from lotwise.domain.model import MarketSnapshot

HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6
LIMITED_DATA_CONFIDENCE = 0.5
STRONG_MARKET_RESERVES_MET = 80.0
WEAK_MARKET_RESERVES_MET = 20.0


class NoteKind(StrEnum):
    PRIMARY = "market-primary"
    INSIGHT = "market-insight"
    ACTIVITY = "market-activity"
    DATA = "market-data"
    NOTE = "market-note"


@dataclass(slots=True, frozen=True)
class MarketNote:
    field: str
    message: str
    kind: NoteKind


def confidence_label(confidence: float) -> str:
    if confidence >= HIGH_CONFIDENCE:
        return "High confidence"
    if confidence >= MEDIUM_CONFIDENCE:
        return "Medium confidence"
    return "Low confidence"


def summarize_market(snapshot: MarketSnapshot) -> list[MarketNote]:
    if not snapshot.has_comparable_data:
        return []

    notes: list[MarketNote] = []
    price_range = snapshot.price_range
    if price_range is not None:
        notes.append(
            MarketNote(
                field="Valuation",
                message=(
                    f"{format_sek_range(price_range.low, price_range.high)} "
                    f"({confidence_label(snapshot.confidence)} {round(snapshot.confidence * 100)}%)"
                ),
                kind=NoteKind.PRIMARY,
            )
        )

    significant = [i for i in snapshot.insights if i.significance is Significance.HIGH]
    if significant:
        insight = significant[0]
        kind = (
            NoteKind.ACTIVITY
            if insight.type in {"market_strength", "market_weakness"}
            else NoteKind.INSIGHT
        )
        notes.append(MarketNote(field="Market trend", message=insight.message, kind=kind))

    notes.append(
        MarketNote(
            field="Data basis",
            message=(
                f"{snapshot.historical.analyzed_sales} historical, "
                f"{snapshot.live.analyzed_live_items} ongoing sales analysed"
            ),
            kind=NoteKind.DATA,
        )
    )

    reserves_met = snapshot.live.market_activity.reserves_met_percentage
    if reserves_met is not None:
        if reserves_met > STRONG_MARKET_RESERVES_MET:
            notes.append(
                MarketNote(
                    field="Market activity",
                    message=f"Strong market ({reserves_met:.0f}% reach the reserve)",
                    kind=NoteKind.ACTIVITY,
                )
            )
        elif reserves_met < WEAK_MARKET_RESERVES_MET:
            notes.append(
                MarketNote(
                    field="Market activity",
                    message=f"Weak market ({reserves_met:.0f}% reach the reserve)",
                    kind=NoteKind.ACTIVITY,
                )
            )

    if snapshot.confidence < LIMITED_DATA_CONFIDENCE:
        notes.append(MarketNote(field="Note", message="Limited data", kind=NoteKind.NOTE))

    return notes


__all__ = ["MarketNote", "NoteKind", "confidence_label", "summarize_market"]
