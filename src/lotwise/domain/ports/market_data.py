"""Port for the external market data service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lotwise.domain.model import MarketSnapshot, SearchContext


class MarketDataError(RuntimeError):
    """Raised by market data services when a lookup cannot be completed."""


@runtime_checkable
class MarketDataService(Protocol):
    """Look up comparable sales for a search context.

    Implementations raise :class:`MarketDataError` on transport or payload failures.
    """

    def analyze_sales(self, search_context: SearchContext) -> MarketSnapshot: ...


__all__ = ["MarketDataError", "MarketDataService"]
