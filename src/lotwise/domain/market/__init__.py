"""Market lookup scheduling, merging and summaries."""

from __future__ import annotations

from .merge import BROADER_MARKET_NOTE, merge_market_snapshots
from .scheduler import MarketQueryScheduler, SnapshotSink
from .summary import MarketNote, NoteKind, confidence_label, summarize_market

__all__ = [
    "BROADER_MARKET_NOTE",
    "MarketNote",
    "MarketQueryScheduler",
    "NoteKind",
    "SnapshotSink",
    "confidence_label",
    "merge_market_snapshots",
    "summarize_market",
]
