"""Domain port definitions for adapters."""

from __future__ import annotations

from .completion import (
    CompletionError,
    CompletionRequest,
    TextCompletionService,
    extract_json_object,
)
from .market_data import MarketDataError, MarketDataService
from .taxonomy import TermTaxonomy
from .visibility import DashboardVisibility

__all__ = [
    "CompletionError",
    "CompletionRequest",
    "DashboardVisibility",
    "MarketDataError",
    "MarketDataService",
    "TermTaxonomy",
    "TextCompletionService",
    "extract_json_object",
]
