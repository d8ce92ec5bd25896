"""Domain records shared across the analysis pipeline."""

from __future__ import annotations

from .brands import BrandIssue, KnownBrand
from .enums import (
    AnalysisType,
    BrandIssueSource,
    LookupScope,
    LookupState,
    Severity,
    Significance,
    TermSource,
    TermType,
    ValuationField,
)
from .item import ItemRecord
from .market import (
    NO_MARKET_DATA_SOURCE,
    PLACEHOLDER_SOURCE,
    BroaderMarket,
    DeferredLookup,
    ExceptionalSales,
    HistoricalSales,
    Insight,
    LiveMarket,
    MarketActivity,
    MarketSnapshot,
    PriceRange,
)
from .terms import CandidateTerm, QueryMetadata, SearchContext, TermClassification, term_key
from .valuation import ValuationSuggestion

__all__ = [
    "NO_MARKET_DATA_SOURCE",
    "PLACEHOLDER_SOURCE",
    "AnalysisType",
    "BrandIssue",
    "BrandIssueSource",
    "BroaderMarket",
    "CandidateTerm",
    "DeferredLookup",
    "ExceptionalSales",
    "HistoricalSales",
    "Insight",
    "ItemRecord",
    "KnownBrand",
    "LiveMarket",
    "LookupScope",
    "LookupState",
    "MarketActivity",
    "MarketSnapshot",
    "PriceRange",
    "QueryMetadata",
    "SearchContext",
    "Severity",
    "Significance",
    "TermClassification",
    "TermSource",
    "TermType",
    "ValuationField",
    "ValuationSuggestion",
    "term_key",
]
