"""Visibility-gated scheduling of market lookups.

Responsibilities of this stage:
- run the lookup right away when the market dashboard is visible
- otherwise keep exactly one deferred lookup (last request wins) and publish a
  placeholder snapshot so the UI can offer a trigger
- execute the deferred lookup at most once, clearing the slot first
- degrade every lookup failure to an explicit no-data snapshot
- fold an earlier broader result into a later artist-scoped result
"""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from lotwise.domain.model import (
    NO_MARKET_DATA_SOURCE,
    DeferredLookup,
    LookupScope,
    LookupState,
    MarketSnapshot,
)
from lotwise.domain.ports.market_data import MarketDataError

from .merge import merge_market_snapshots

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lotwise.domain.model import CandidateTerm, SearchContext
    from lotwise.domain.ports import DashboardVisibility, MarketDataService

log = getLogger(__name__)

type SnapshotSink = Callable[[MarketSnapshot, str], None]

NO_QUERY_SOURCE = "no_query"
UNCONFIGURED_SOURCE = "market_unconfigured"
LOOKUP_FAILED_SOURCE = "market_error"
NO_MARKET_DATA_CONFIDENCE = 0.3


class MarketQueryScheduler:
    def __init__(
        self,
        market: MarketDataService | None,
        visibility: DashboardVisibility,
        *,
        sink: SnapshotSink | None = None,
    ) -> None:
        self._market = market
        self._visibility = visibility
        self._sink = sink
        self._pending: DeferredLookup | None = None
        self._placeholder: MarketSnapshot | None = None
        self._broader: MarketSnapshot | None = None
        self.lookups_performed = 0

    @property
    def pending(self) -> DeferredLookup | None:
        return self._pending

    @property
    def placeholder(self) -> MarketSnapshot | None:
        """Snapshot the UI shows while a deferred lookup is waiting."""

        return self._placeholder

    def run_or_defer(
        self,
        search_context: SearchContext,
        candidate_terms: Iterable[CandidateTerm],
        source: str,
    ) -> MarketSnapshot | None:
        """Look up market data now, or defer it while the dashboard is hidden.

        Returns ``None`` only when the lookup was deferred.
        """

        if not search_context.has_valid_query:
            log.info("Skipping market lookup for %s: no search query", source)
            return MarketSnapshot.no_data(NO_QUERY_SOURCE, search_context.reasoning)

        if self._visibility.is_visible():
            return self._lookup(search_context, source)

        if self._pending is not None:
            log.debug("Replacing pending market lookup from %s", self._pending.source)
        self._pending = DeferredLookup(
            search_context=search_context,
            candidate_terms=tuple(candidate_terms),
            source=source,
        )
        self._placeholder = MarketSnapshot.placeholder()
        self._publish(self._placeholder, f"{source}_deferred")
        log.info("Deferred market lookup for %r (%s)", search_context.primary_search, source)
        return None

    def execute_deferred_analysis(self) -> MarketSnapshot | None:
        """Run the pending lookup, if any. A second call without a new deferral is a no-op."""

        lookup = self._pending
        if lookup is None:
            return None
        self._pending = None
        self._placeholder = None

        lookup.state = LookupState.EXECUTING
        snapshot = self._lookup(lookup.search_context, lookup.source, publish=False)
        lookup.state = LookupState.DONE

        if snapshot.has_comparable_data:
            self._publish(snapshot, lookup.source)
            return snapshot

        empty = MarketSnapshot.no_data(
            NO_MARKET_DATA_SOURCE,
            snapshot.reasoning or "No comparable market data found, refine the search terms",
            confidence=NO_MARKET_DATA_CONFIDENCE,
        )
        self._publish(empty, f"{lookup.source}_no_data")
        return empty

    def reset(self) -> None:
        """Forget pending and remembered results at the end of an item analysis."""

        self._pending = None
        self._placeholder = None
        self._broader = None

    def _lookup(
        self,
        search_context: SearchContext,
        source: str,
        *,
        publish: bool = True,
    ) -> MarketSnapshot:
        if self._market is None:
            log.debug("Market data service not configured; returning empty snapshot")
            return MarketSnapshot.no_data(UNCONFIGURED_SOURCE, "Market data service not configured")

        self.lookups_performed += 1
        try:
            snapshot = self._market.analyze_sales(search_context)
        except MarketDataError as exc:
            log.warning("Market lookup for %r failed: %s", search_context.primary_search, exc)
            return MarketSnapshot.no_data(LOOKUP_FAILED_SOURCE, f"Market lookup failed: {exc}")

        if search_context.scope is LookupScope.ARTIST:
            if self._broader is not None:
                snapshot = merge_market_snapshots(snapshot, self._broader)
        elif snapshot.has_comparable_data:
            self._broader = snapshot

        if publish:
            self._publish(snapshot, source)
        return snapshot

    def _publish(self, snapshot: MarketSnapshot, source: str) -> None:
        if self._sink is not None:
            self._sink(snapshot, source)


__all__ = ["MarketQueryScheduler", "SnapshotSink"]
