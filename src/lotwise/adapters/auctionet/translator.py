"""Translate Auctionet search results into market snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from logging import getLogger
from statistics import mean, median
from typing import TYPE_CHECKING

from lotwise.domain.formatting import format_sek
from lotwise.domain.model import (
    ExceptionalSales,
    HistoricalSales,
    Insight,
    LiveMarket,
    MarketActivity,
    MarketSnapshot,
    PriceRange,
    Significance,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .schema import AuctionetItem, ItemsResponse

log = getLogger(__name__)

SWEDISH_CURRENCY = "SEK"
LIVE_STATE = "published"
DATA_SOURCE = "auctionet"
MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.95
BASE_CONFIDENCE = 0.5
MIN_RANGE_WIDTH_SHARE = 0.15
SMALL_SAMPLE_SIZE = 3
RECENT_SALES_WINDOW = timedelta(days=730)


@dataclass(slots=True, frozen=True)
class SoldItem:
    title: str
    price: float
    estimate: float | None
    sold_at: datetime


def _is_excluded(item: AuctionetItem, exclude_company_id: int | None) -> bool:
    return exclude_company_id is not None and item.company_id == exclude_company_id


def _is_swedish(item: AuctionetItem) -> bool:
    return item.currency is None or item.currency == SWEDISH_CURRENCY


def extract_sold_items(
    items: Sequence[AuctionetItem],
    *,
    exclude_company_id: int | None = None,
) -> list[SoldItem]:
    """Keep hammered SEK items with a positive winning bid."""

    sold: list[SoldItem] = []
    for item in items:
        if not _is_swedish(item) or _is_excluded(item, exclude_company_id) or not item.hammered:
            continue
        price = item.leading_bid
        if price is None or price <= 0:
            continue
        timestamp = item.sold_at
        sold_at = datetime.fromtimestamp(timestamp, UTC) if timestamp else datetime.now(UTC)
        sold.append(
            SoldItem(title=item.title, price=price, estimate=item.estimate, sold_at=sold_at)
        )
    return sold


def extract_live_items(
    items: Sequence[AuctionetItem],
    *,
    now: datetime,
    exclude_company_id: int | None = None,
) -> list[AuctionetItem]:
    cutoff = now.timestamp()
    return [
        item
        for item in items
        if _is_swedish(item)
        and not _is_excluded(item, exclude_company_id)
        and not item.hammered
        and item.state == LIVE_STATE
        and (item.ends_at is None or item.ends_at > cutoff)
    ]


def calculate_price_range(prices: Sequence[float]) -> PriceRange:
    """Min/max of the sold prices, widened to 15% of the mean for tiny samples."""

    low = float(round(min(prices)))
    high = float(round(max(prices)))
    if len(prices) <= SMALL_SAMPLE_SIZE:
        min_width = mean(prices) * MIN_RANGE_WIDTH_SHARE
        width = high - low
        if width < min_width:
            center = (low + high) / 2
            low = float(max(0, round(center - min_width / 2)))
            high = float(round(center + min_width / 2))
    return PriceRange(low=low, high=high)


def detect_exceptional_sales(prices: Sequence[float]) -> ExceptionalSales | None:
    if len(prices) < SMALL_SAMPLE_SIZE:
        return None
    ordered = sorted(prices)
    middle = median(ordered)
    q3 = ordered[int(len(ordered) * 0.75)]
    threshold = max(middle * 3, q3 * 2)
    exceptional = tuple(price for price in ordered if price > threshold)
    if not exceptional:
        return None
    if len(exceptional) == 1:
        share = round(exceptional[0] / middle * 100)
        description = (
            f"One exceptional confirmed sale at {format_sek(exceptional[0])} "
            f"({share}% of the median price)"
        )
    else:
        description = (
            f"{len(exceptional)} exceptional confirmed sales above {format_sek(threshold)}"
        )
    return ExceptionalSales(
        count=len(exceptional),
        description=description,
        threshold=threshold,
        prices=exceptional,
    )


def calculate_confidence(
    sold: Sequence[SoldItem],
    *,
    total_matches: int,
    now: datetime,
    artist: str | None = None,
) -> float:
    confidence = BASE_CONFIDENCE

    if total_matches >= 500:
        confidence += 0.4
    elif total_matches >= 100:
        confidence += 0.3
    elif total_matches >= 50:
        confidence += 0.2
    elif total_matches >= 20:
        confidence += 0.1

    count = len(sold)
    if count >= 20:
        confidence += 0.2
    elif count >= 10:
        confidence += 0.15
    elif count >= 5:
        confidence += 0.1
    elif count >= 3:
        confidence += 0.05

    recent = sum(1 for item in sold if now - item.sold_at <= RECENT_SALES_WINDOW)
    if recent >= count * 0.7:
        confidence += 0.15
    elif recent >= count * 0.5:
        confidence += 0.1

    if artist:
        needle = artist.casefold()
        matches = sum(1 for item in sold if needle in item.title.casefold())
        if matches >= count * 0.8:
            confidence += 0.15
        elif matches >= count * 0.5:
            confidence += 0.1

    return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence))


def _trend(message: str, significance: Significance) -> Insight:
    return Insight(type="trend", message=message, significance=significance)


def analyze_trend(sold: Sequence[SoldItem]) -> Insight | None:
    """Compare the average price of the older and newer half of the sales."""

    if len(sold) < SMALL_SAMPLE_SIZE:
        return None
    ordered = sorted(sold, key=lambda item: item.sold_at)
    midpoint = len(ordered) // 2
    older = mean(item.price for item in ordered[:midpoint])
    newer = mean(item.price for item in ordered[midpoint:])
    change = (newer - older) / older * 100

    # swings beyond 500% point at mixed search results rather than a real trend
    if abs(change) > 500:
        direction = "rising" if change > 0 else "falling"
        return _trend(
            f"Strongly {direction} hammer prices (likely mixed market data)", Significance.MEDIUM
        )
    if change > 15:
        return _trend(f"Strong rise: +{round(change)}%", Significance.HIGH)
    if change > 5:
        return _trend(f"Rising: +{round(change)}%", Significance.MEDIUM)
    if change < -15:
        return _trend(f"Strong decline: {round(change)}%", Significance.HIGH)
    if change < -5:
        return _trend(f"Falling: {round(change)}%", Significance.MEDIUM)
    return _trend("Stable hammer prices", Significance.LOW)


def price_vs_estimate_insight(sold: Sequence[SoldItem]) -> Insight | None:
    estimated = [item for item in sold if item.estimate]
    if len(estimated) < SMALL_SAMPLE_SIZE:
        return None
    ratio = mean(item.price for item in estimated) / mean(
        item.estimate for item in estimated if item.estimate
    )
    if ratio > 1.2:
        message = "Typically sells above estimate"
    elif ratio < 0.8:
        message = "Typically sells below estimate"
    else:
        message = "Typically sells close to estimate"
    return Insight(type="price_vs_estimate", message=message, significance=Significance.LOW)


def analyze_live_market(live: Sequence[AuctionetItem], *, total_matches: int) -> LiveMarket:
    if not live:
        return LiveMarket(total_matches=total_matches)
    reserves_met = sum(1 for item in live if item.reserve_met)
    total_bids = sum(len(item.bids) for item in live)
    return LiveMarket(
        analyzed_live_items=len(live),
        total_matches=total_matches,
        market_activity=MarketActivity(
            reserves_met_percentage=round(reserves_met / len(live) * 100),
            average_bids_per_item=total_bids / len(live),
        ),
    )


def live_activity_insight(live: LiveMarket) -> Insight | None:
    percentage = live.market_activity.reserves_met_percentage
    if not live.analyzed_live_items or percentage is None:
        return None
    if percentage > 70:
        return Insight(
            type="market_strength",
            message=f"Strong live market: {percentage:.0f}% of ongoing lots have met their reserve",
            significance=Significance.HIGH,
        )
    if percentage < 20:
        return Insight(
            type="market_weakness",
            message=f"Weak live market: {percentage:.0f}% of ongoing lots have met their reserve",
            significance=Significance.HIGH,
        )
    return None


def build_market_snapshot(
    historical: ItemsResponse,
    live: ItemsResponse | None,
    *,
    query: str,
    now: datetime,
    artist: str | None = None,
    exclude_company_id: int | None = None,
) -> MarketSnapshot:
    sold = extract_sold_items(historical.items, exclude_company_id=exclude_company_id)
    live_items = (
        extract_live_items(live.items, now=now, exclude_company_id=exclude_company_id)
        if live is not None
        else []
    )
    live_market = analyze_live_market(
        live_items, total_matches=live.pagination.total_entries if live is not None else 0
    )
    total_matches = historical.pagination.total_entries

    if not sold:
        log.info("No confirmed sales for %r (%d matches)", query, total_matches)
        return MarketSnapshot(
            has_comparable_data=False,
            historical=HistoricalSales(total_matches=total_matches, actual_search_query=query),
            live=live_market,
            data_source=DATA_SOURCE,
            reasoning="No confirmed sales found for the search query",
        )

    prices = [item.price for item in sold]
    insights = [
        insight
        for insight in (
            analyze_trend(sold),
            live_activity_insight(live_market),
            price_vs_estimate_insight(sold),
        )
        if insight is not None
    ]
    confidence = calculate_confidence(sold, total_matches=total_matches, now=now, artist=artist)
    return MarketSnapshot(
        has_comparable_data=True,
        price_range=calculate_price_range(prices),
        confidence=confidence,
        historical=HistoricalSales(
            analyzed_sales=len(sold),
            total_matches=total_matches,
            actual_search_query=query,
            exceptional_sales=detect_exceptional_sales(prices),
        ),
        live=live_market,
        insights=tuple(insights),
        data_source=DATA_SOURCE,
        reasoning=f"Based on {len(sold)} confirmed sales out of {total_matches} matches",
    )


__all__ = [
    "SoldItem",
    "analyze_live_market",
    "analyze_trend",
    "build_market_snapshot",
    "calculate_confidence",
    "calculate_price_range",
    "detect_exceptional_sales",
    "extract_live_items",
    "extract_sold_items",
]
