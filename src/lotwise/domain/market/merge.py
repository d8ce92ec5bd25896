"""Merge an artist-scoped market result with an earlier broader result."""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from lotwise.domain.model import BroaderMarket, Insight

if TYPE_CHECKING:
    from lotwise.domain.model import MarketSnapshot

log = getLogger(__name__)

BROADER_MARKET_NOTE = "(broader market)"
ENRICHED_WITH_FREETEXT = "freetext"


def _annotate(text: str) -> str:
    if BROADER_MARKET_NOTE in text:
        return text
    return f"{text} {BROADER_MARKET_NOTE}"


def _is_duplicate(insight: Insight, existing: tuple[Insight, ...]) -> bool:
    return any(
        other.type == insight.type and other.message == insight.message for other in existing
    )


def merge_market_snapshots(primary: MarketSnapshot, broader: MarketSnapshot) -> MarketSnapshot:
    """Fold broader-context data into an artist-scoped snapshot.

    The primary snapshot keeps its price range and confidence. Exceptional sales
    are borrowed only when the primary has none, the broader match count is kept
    when it is larger, and broader insights that are not duplicates (same type and
    same message) are appended with an annotation.
    """

    historical = primary.historical
    broader_exceptional = broader.historical.exceptional_sales
    if historical.exceptional_sales is None and broader_exceptional is not None:
        historical = replace(
            historical,
            exceptional_sales=replace(
                broader_exceptional, description=_annotate(broader_exceptional.description)
            ),
        )

    broader_market = primary.broader_market
    if broader.historical.total_matches > primary.historical.total_matches:
        broader_market = BroaderMarket(
            total_matches=broader.historical.total_matches,
            search_query=broader.historical.actual_search_query,
        )

    insights = primary.insights
    for insight in broader.insights:
        if _is_duplicate(insight, primary.insights):
            continue
        insights = (*insights, replace(insight, message=_annotate(insight.message)))

    log.debug(
        "Merged broader market data: %d insights added, exceptional=%s",
        len(insights) - len(primary.insights),
        historical.exceptional_sales is not primary.historical.exceptional_sales,
    )
    return replace(
        primary,
        historical=historical,
        insights=insights,
        broader_market=broader_market,
        enriched_with=ENRICHED_WITH_FREETEXT,
    )


__all__ = ["BROADER_MARKET_NOTE", "merge_market_snapshots"]
