from __future__ import annotations

from dataclasses import replace

import pytest

from lotwise.domain.model import ItemRecord, MarketSnapshot, Severity, ValuationField
from lotwise.domain.valuation import ValuationComparator, ValuationThresholds
from tests.helpers.market import make_snapshot

LOW, HIGH = 5000.0, 7000.0


@pytest.fixture
def comparator() -> ValuationComparator:
    return ValuationComparator()


def test_estimate_inside_market_range_is_positive(comparator: ValuationComparator) -> None:
    suggestion = comparator.compare(6000, LOW, HIGH)

    assert suggestion.severity is Severity.POSITIVE
    assert suggestion.field is ValuationField.ESTIMATE
    assert suggestion.suggested_range == "Comparable items: 5 000-7 000 SEK"


def test_estimate_above_tolerance_band_is_medium(comparator: ValuationComparator) -> None:
    suggestion = comparator.compare(10000, LOW, HIGH)

    assert suggestion.severity is Severity.MEDIUM
    assert suggestion.suggested_low == 6000
    assert suggestion.suggested_high == 8400
    assert suggestion.suggested_range == "Consider: 6 000-8 400 SEK"


def test_estimate_below_tolerance_band_is_medium(comparator: ValuationComparator) -> None:
    suggestion = comparator.compare(3000, LOW, HIGH)

    assert suggestion.severity is Severity.MEDIUM
    assert (suggestion.suggested_low, suggestion.suggested_high) == (4000, 6000)


def test_estimate_far_above_market_is_high(comparator: ValuationComparator) -> None:
    suggestion = comparator.compare(30000, LOW, HIGH)

    assert suggestion.severity is Severity.HIGH
    assert "far above" in suggestion.message
    assert suggestion.suggested_range == "Market data indicates: 5 000-7 000 SEK"


def test_estimate_far_below_market_is_high(comparator: ValuationComparator) -> None:
    assert comparator.compare(1000, LOW, HIGH).severity is Severity.HIGH


@pytest.mark.parametrize(
    ("current", "low", "high"), [(0, LOW, HIGH), (6000, 0, HIGH), (6000, HIGH, LOW)]
)
def test_compare_rejects_invalid_input(
    comparator: ValuationComparator, current: float, low: float, high: float
) -> None:
    with pytest.raises(ValueError):
        comparator.compare(current, low, high)


def test_custom_thresholds(comparator: ValuationComparator) -> None:
    strict = ValuationComparator(ValuationThresholds(tolerance=0.0))

    assert comparator.compare(7500, LOW, HIGH).severity is Severity.POSITIVE
    assert strict.compare(7500, LOW, HIGH).severity is Severity.MEDIUM


def test_upper_estimate_too_close_to_estimate(comparator: ValuationComparator) -> None:
    suggestion = comparator.analyze_upper_estimate(6000, 6500, LOW, HIGH)

    assert suggestion is not None
    assert suggestion.severity is Severity.LOW
    assert suggestion.field is ValuationField.UPPER_ESTIMATE
    assert (suggestion.suggested_low, suggestion.suggested_high) == (7200, 9000)


def test_upper_estimate_above_market_cap(comparator: ValuationComparator) -> None:
    suggestion = comparator.analyze_upper_estimate(6000, 9000, LOW, HIGH)

    assert suggestion is not None
    assert suggestion.suggested_range == "Max 8 400 SEK"


def test_upper_estimate_wide_spread(comparator: ValuationComparator) -> None:
    suggestion = comparator.analyze_upper_estimate(5000, 8000, LOW, HIGH)

    assert suggestion is not None
    assert "unusually high" in suggestion.message


def test_upper_estimate_within_expectations(comparator: ValuationComparator) -> None:
    assert comparator.analyze_upper_estimate(5000, 7000, LOW, HIGH) is None


@pytest.mark.parametrize(
    ("reserve", "severity"),
    [
        (3000, Severity.LOW),
        (5000, Severity.LOW),
        (4700, Severity.LOW),
        (4000, Severity.POSITIVE),
    ],
)
def test_reserve_against_estimate(
    comparator: ValuationComparator, reserve: float, severity: Severity
) -> None:
    suggestion = comparator.analyze_accepted_reserve(6000, reserve, LOW, HIGH)

    assert suggestion is not None
    assert suggestion.field is ValuationField.RESERVE
    assert suggestion.severity is severity


def test_reserve_above_market_ceiling_mentions_market(comparator: ValuationComparator) -> None:
    suggestion = comparator.analyze_accepted_reserve(6000, 4700, LOW, HIGH)

    assert suggestion is not None
    assert suggestion.suggested_high == 4500
    assert "market" in suggestion.suggested_range


@pytest.mark.parametrize(
    ("estimate", "reserve", "severity"),
    [
        (None, 5000, Severity.MEDIUM),
        (None, 1000, Severity.MEDIUM),
        (None, 3000, Severity.POSITIVE),
        (50000, 3000, Severity.POSITIVE),
    ],
)
def test_reserve_against_market_only(
    comparator: ValuationComparator,
    estimate: float | None,
    reserve: float,
    severity: Severity,
) -> None:
    suggestion = comparator.analyze_accepted_reserve(estimate, reserve, LOW, HIGH)

    assert suggestion is not None
    assert suggestion.severity is severity


def test_reserve_between_market_bands_has_no_suggestion(comparator: ValuationComparator) -> None:
    assert comparator.analyze_accepted_reserve(None, 2000, LOW, HIGH) is None


def test_analyze_runs_every_applicable_check(
    comparator: ValuationComparator, watch_item: ItemRecord
) -> None:
    item = replace(watch_item, upper_estimate=6500)

    suggestions = comparator.analyze(item, make_snapshot(LOW, HIGH))

    assert [s.field for s in suggestions] == [
        ValuationField.ESTIMATE,
        ValuationField.UPPER_ESTIMATE,
        ValuationField.RESERVE,
    ]


def test_analyze_without_market_data(
    comparator: ValuationComparator, watch_item: ItemRecord
) -> None:
    assert comparator.analyze(watch_item, MarketSnapshot.no_data("auctionet")) == []
    assert comparator.analyze(watch_item, MarketSnapshot.placeholder()) == []
