"""Auctionet market data adapter."""

from __future__ import annotations

from .client import AuctionetMarketDataService, artist_from_context
from .schema import AuctionetBid, AuctionetItem, ItemsResponse, Pagination
from .translator import build_market_snapshot

__all__ = [
    "AuctionetBid",
    "AuctionetItem",
    "AuctionetMarketDataService",
    "ItemsResponse",
    "Pagination",
    "artist_from_context",
    "build_market_snapshot",
]
