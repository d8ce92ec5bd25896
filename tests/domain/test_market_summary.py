from __future__ import annotations

from dataclasses import replace

import pytest

from lotwise.domain.market import NoteKind, confidence_label, summarize_market
from lotwise.domain.model import (
    Insight,
    LiveMarket,
    MarketActivity,
    MarketSnapshot,
    Significance,
)
from tests.helpers.market import make_snapshot


@pytest.mark.parametrize(
    ("confidence", "label"),
    [
        (0.95, "High confidence"),
        (0.8, "High confidence"),
        (0.6, "Medium confidence"),
        (0.2, "Low confidence"),
    ],
)
def test_confidence_label(confidence: float, label: str) -> None:
    assert confidence_label(confidence) == label


def test_summary_without_data_is_empty() -> None:
    assert summarize_market(MarketSnapshot.no_data("auctionet")) == []
    assert summarize_market(MarketSnapshot.placeholder()) == []


def test_summary_leads_with_valuation_range() -> None:
    notes = summarize_market(make_snapshot(5000, 7000, confidence=0.85))

    assert notes[0].kind is NoteKind.PRIMARY
    assert notes[0].message == "5 000-7 000 SEK (High confidence 85%)"
    assert [note.kind for note in notes] == [NoteKind.PRIMARY, NoteKind.DATA]


def test_summary_includes_significant_insight_activity_and_limited_data() -> None:
    snapshot = replace(
        make_snapshot(confidence=0.4),
        insights=(
            Insight(type="trend", message="Stable", significance=Significance.LOW),
            Insight(type="trend", message="Strong rise: +40%", significance=Significance.HIGH),
        ),
        live=LiveMarket(
            analyzed_live_items=4,
            total_matches=4,
            market_activity=MarketActivity(reserves_met_percentage=85.0),
        ),
    )

    notes = summarize_market(snapshot)

    messages = [note.message for note in notes]
    assert "Strong rise: +40%" in messages
    assert "Strong market (85% reach the reserve)" in messages
    assert messages[-1] == "Limited data"
    assert "12 historical, 4 ongoing sales analysed" in messages
