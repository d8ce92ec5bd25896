"""HTTP client for the Auctionet items search API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from lotwise.adapters.http_resilience import ResilienceConfig, ResilientClient
from lotwise.config.auctionet import AuctionetConfig, get_auctionet_config
from lotwise.domain.model import LookupScope
from lotwise.domain.ports.market_data import MarketDataError
from lotwise.domain.terms.query import parse_query_preserving_quotes

from .schema import ItemsResponse
from .translator import build_market_snapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from lotwise.domain.model import MarketSnapshot, SearchContext

log = getLogger(__name__)

ITEMS_PATH = "items.json"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def artist_from_context(search_context: SearchContext) -> str | None:
    """The artist name an artist-scoped query leads with, if any."""

    if search_context.scope is not LookupScope.ARTIST:
        return None
    tokens = parse_query_preserving_quotes(search_context.primary_search)
    if not tokens:
        return None
    return tokens[0].strip('"') or None


@dataclass(slots=True)
class AuctionetMarketDataService:
    config: AuctionetConfig = field(default_factory=get_auctionet_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    clock: Callable[[], datetime] = field(default=_utcnow)

    def analyze_sales(self, search_context: SearchContext) -> MarketSnapshot:
        return asyncio.run(self._analyze_sales_async(search_context))

    async def _analyze_sales_async(self, search_context: SearchContext) -> MarketSnapshot:
        query = search_context.primary_search.strip()
        log.info("Looking up Auctionet sales for %r (%s)", query, search_context.scope)

        try:
            async with self.client_factory(self.config.resilience) as client:
                historical = await self._fetch_items(client, query, ended=True)
                live = await self._fetch_items(client, query, ended=False)
        except httpx.HTTPError as exc:
            raise MarketDataError(f"Auctionet request failed: {exc}") from exc

        return build_market_snapshot(
            historical,
            live,
            query=query,
            now=self.clock(),
            artist=artist_from_context(search_context),
            exclude_company_id=self.config.exclude_company_id,
        )

    async def _fetch_items(
        self, client: ResilientClient, query: str, *, ended: bool
    ) -> ItemsResponse:
        params = {
            "q": query,
            "per_page": str(self.config.per_page),
            "is": "ended" if ended else "",
        }
        response = await client.get(ITEMS_PATH, params=params)
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as exc:
            raise MarketDataError("Auctionet response was not JSON") from exc
        try:
            return ItemsResponse.model_validate(payload)
        except ValidationError as exc:
            raise MarketDataError("Unexpected Auctionet response payload") from exc


__all__ = ["AuctionetMarketDataService", "artist_from_context"]
