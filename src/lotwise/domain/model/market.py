"""Market snapshot records returned by market data lookups."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import LookupState, Significance
from .terms import CandidateTerm, SearchContext

PLACEHOLDER_SOURCE = "deferred_pending"
NO_MARKET_DATA_SOURCE = "no_market_data"


@dataclass(slots=True, frozen=True)
class PriceRange:
    low: float
    high: float
    currency: str = "SEK"

    @property
    def mid(self) -> float:
        return (self.low + self.high) / 2


@dataclass(slots=True, frozen=True)
class ExceptionalSales:
    count: int
    description: str
    threshold: float | None = None
    prices: tuple[float, ...] = ()


@dataclass(slots=True, frozen=True)
class HistoricalSales:
    analyzed_sales: int = 0
    total_matches: int = 0
    actual_search_query: str | None = None
    exceptional_sales: ExceptionalSales | None = None


@dataclass(slots=True, frozen=True)
class MarketActivity:
    reserves_met_percentage: float | None = None
    average_bids_per_item: float | None = None


@dataclass(slots=True, frozen=True)
class LiveMarket:
    analyzed_live_items: int = 0
    total_matches: int = 0
    market_activity: MarketActivity = field(default_factory=MarketActivity)


@dataclass(slots=True, frozen=True)
class Insight:
    type: str
    message: str
    significance: Significance = Significance.MEDIUM


@dataclass(slots=True, frozen=True)
class BroaderMarket:
    total_matches: int
    search_query: str | None = None


@dataclass(slots=True, frozen=True)
class MarketSnapshot:
    has_comparable_data: bool
    price_range: PriceRange | None = None
    confidence: float = 0.0
    historical: HistoricalSales = field(default_factory=HistoricalSales)
    live: LiveMarket = field(default_factory=LiveMarket)
    insights: tuple[Insight, ...] = ()
    data_source: str = "auctionet"
    reasoning: str = ""
    enriched_with: str | None = None
    broader_market: BroaderMarket | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.data_source == PLACEHOLDER_SOURCE

    @classmethod
    def no_data(
        cls, data_source: str, reasoning: str = "", *, confidence: float = 0.0
    ) -> MarketSnapshot:
        return cls(
            has_comparable_data=False,
            confidence=confidence,
            data_source=data_source,
            reasoning=reasoning,
        )

    @classmethod
    def placeholder(cls) -> MarketSnapshot:
        return cls.no_data(PLACEHOLDER_SOURCE, "Market analysis deferred until the dashboard opens")


@dataclass(slots=True)
class DeferredLookup:
    """A market lookup postponed until its result can be shown."""

    search_context: SearchContext
    candidate_terms: tuple[CandidateTerm, ...]
    source: str
    state: LookupState = LookupState.PENDING


__all__ = [
    "NO_MARKET_DATA_SOURCE",
    "PLACEHOLDER_SOURCE",
    "BroaderMarket",
    "DeferredLookup",
    "ExceptionalSales",
    "HistoricalSales",
    "Insight",
    "LiveMarket",
    "MarketActivity",
    "MarketSnapshot",
    "PriceRange",
]
