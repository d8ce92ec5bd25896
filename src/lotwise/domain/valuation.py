"""Graded comparison of cataloger valuations against a market price range.

Three checks share one set of thresholds:
- ``compare``: estimate vs. market (extreme tier, tolerance band, aligned)
- ``analyze_upper_estimate``: spread against the estimate and a market cap
- ``analyze_accepted_reserve``: estimate-based bands, or market-only bands when
  the estimate itself is far from the market
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from lotwise.domain.formatting import format_sek, format_sek_range
from lotwise.domain.model import Severity, ValuationField, ValuationSuggestion

if TYPE_CHECKING:
    from lotwise.domain.model import ItemRecord, MarketSnapshot

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ValuationThresholds:
    extreme_high_ratio: float = 3.0
    extreme_low_ratio: float = 0.3
    tolerance: float = 0.3
    below_band_low_factor: float = 0.8
    above_band_high_factor: float = 1.2
    upper_min_factor: float = 1.2
    upper_max_factor: float = 1.5
    upper_market_factor: float = 1.2
    reserve_ideal_factor: float = 0.7
    reserve_max_factor: float = 0.9
    reserve_very_low_factor: float = 0.5
    reserve_aligned_factor: float = 0.7
    reserve_min_of_estimate: float = 0.6
    reserve_max_of_estimate: float = 0.8


def _require_market_range(market_low: float, market_high: float) -> None:
    if market_low <= 0 or market_high <= 0:
        raise ValueError(f"Market range must be positive, got {market_low}-{market_high}")
    if market_low > market_high:
        raise ValueError(f"Market low {market_low} exceeds market high {market_high}")


class ValuationComparator:
    def __init__(self, thresholds: ValuationThresholds | None = None) -> None:
        self.thresholds = thresholds or ValuationThresholds()

    def compare(
        self,
        current: float,
        market_low: float,
        market_high: float,
        *,
        field: ValuationField = ValuationField.ESTIMATE,
    ) -> ValuationSuggestion:
        _require_market_range(market_low, market_high)
        if current <= 0:
            raise ValueError(f"Valuation must be positive, got {current}")

        t = self.thresholds
        market_mid = (market_low + market_high) / 2
        label = f"Valuation ({format_sek(current)})"

        if current / market_high > t.extreme_high_ratio:
            return self._suggest(
                field,
                f"{label} far above comparable sales",
                "Market data indicates",
                market_low,
                market_high,
                Severity.HIGH,
            )
        if current / market_low < t.extreme_low_ratio:
            return self._suggest(
                field,
                f"{label} far below comparable sales",
                "Market data indicates",
                market_low,
                market_high,
                Severity.HIGH,
            )

        if current < market_low * (1 - t.tolerance):
            return self._suggest(
                field,
                f"{label} below comparable sales",
                "Consider",
                market_low * t.below_band_low_factor,
                market_mid,
                Severity.MEDIUM,
            )
        if current > market_high * (1 + t.tolerance):
            return self._suggest(
                field,
                f"{label} above comparable sales",
                "Consider",
                market_mid,
                market_high * t.above_band_high_factor,
                Severity.MEDIUM,
            )

        return self._suggest(
            field,
            f"{label} well aligned with market",
            "Comparable items",
            market_low,
            market_high,
            Severity.POSITIVE,
        )

    def analyze_upper_estimate(
        self,
        estimate: float,
        upper_estimate: float,
        market_low: float,
        market_high: float,
    ) -> ValuationSuggestion | None:
        _require_market_range(market_low, market_high)
        t = self.thresholds
        expected_min = estimate * t.upper_min_factor
        expected_max = estimate * t.upper_max_factor
        market_cap = market_high * t.upper_market_factor
        label = f"Upper estimate ({format_sek(upper_estimate)})"

        if upper_estimate < expected_min:
            return self._suggest(
                ValuationField.UPPER_ESTIMATE,
                f"{label} too low relative to the estimate",
                "Expected",
                expected_min,
                expected_max,
                Severity.LOW,
            )
        if upper_estimate > market_cap:
            return ValuationSuggestion(
                field=ValuationField.UPPER_ESTIMATE,
                message=f"{label} may be too high relative to market value",
                suggested_range=f"Max {format_sek(market_cap)}",
                severity=Severity.LOW,
                suggested_high=round(market_cap),
            )
        if upper_estimate > expected_max:
            return self._suggest(
                ValuationField.UPPER_ESTIMATE,
                f"{label} unusually high relative to the estimate",
                "Expected",
                expected_min,
                expected_max,
                Severity.LOW,
            )
        return None

    def analyze_accepted_reserve(
        self,
        estimate: float | None,
        reserve: float,
        market_low: float,
        market_high: float,
    ) -> ValuationSuggestion | None:
        _require_market_range(market_low, market_high)
        t = self.thresholds
        market_ideal = market_low * t.reserve_ideal_factor
        market_max = market_low * t.reserve_max_factor
        label = f"Accepted reserve ({format_sek(reserve)})"

        estimate_ratio = (estimate or 0) / market_high
        if estimate is None or not t.extreme_low_ratio <= estimate_ratio <= t.extreme_high_ratio:
            log.debug(
                "Estimate ratio %.2f outside market bounds, judging reserve by market",
                estimate_ratio,
            )
            if reserve > market_max:
                return ValuationSuggestion(
                    field=ValuationField.RESERVE,
                    message=f"{label} too high relative to market value",
                    suggested_range=f"Max {format_sek(market_max)} based on market",
                    severity=Severity.MEDIUM,
                    suggested_high=round(market_max),
                )
            if reserve < market_ideal * t.reserve_very_low_factor:
                return self._suggest(
                    ValuationField.RESERVE,
                    f"{label} very low relative to market value",
                    "Consider",
                    market_ideal * t.reserve_aligned_factor,
                    market_ideal,
                    Severity.MEDIUM,
                )
            if reserve >= market_ideal * t.reserve_aligned_factor:
                return self._suggest(
                    ValuationField.RESERVE,
                    f"{label} well aligned with market value",
                    "Market basis",
                    market_ideal,
                    market_max,
                    Severity.POSITIVE,
                )
            return None

        expected_min = estimate * t.reserve_min_of_estimate
        expected_max = estimate * t.reserve_max_of_estimate
        if reserve < expected_min:
            return self._suggest(
                ValuationField.RESERVE,
                f"{label} low relative to the estimate",
                "Expected",
                expected_min,
                expected_max,
                Severity.LOW,
            )
        if reserve > expected_max:
            return ValuationSuggestion(
                field=ValuationField.RESERVE,
                message=f"{label} high relative to the estimate",
                suggested_range=f"Max {format_sek(expected_max)}",
                severity=Severity.LOW,
                suggested_high=round(expected_max),
            )
        if reserve > market_max:
            return ValuationSuggestion(
                field=ValuationField.RESERVE,
                message=f"{label} may be too high relative to market value",
                suggested_range=f"Consider at most {format_sek(market_max)} based on market",
                severity=Severity.LOW,
                suggested_high=round(market_max),
            )
        return self._suggest(
            ValuationField.RESERVE,
            f"{label} well aligned with the estimate",
            "Expected",
            expected_min,
            expected_max,
            Severity.POSITIVE,
        )

    def analyze(self, item: ItemRecord, snapshot: MarketSnapshot) -> list[ValuationSuggestion]:
        """Run every applicable check for the valuations present on ``item``."""

        price_range = snapshot.price_range
        if not snapshot.has_comparable_data or price_range is None:
            return []
        low, high = price_range.low, price_range.high
        if low <= 0 or high <= 0:
            log.warning("Ignoring market range with non-positive bounds: %s-%s", low, high)
            return []

        suggestions: list[ValuationSuggestion] = []
        if item.estimate:
            suggestions.append(self.compare(item.estimate, low, high))
        if item.estimate and item.upper_estimate:
            upper = self.analyze_upper_estimate(item.estimate, item.upper_estimate, low, high)
            if upper is not None:
                suggestions.append(upper)
        if item.accepted_reserve:
            reserve = self.analyze_accepted_reserve(item.estimate, item.accepted_reserve, low, high)
            if reserve is not None:
                suggestions.append(reserve)
        return suggestions

    @staticmethod
    def _suggest(
        field: ValuationField,
        message: str,
        prefix: str,
        low: float,
        high: float,
        severity: Severity,
    ) -> ValuationSuggestion:
        return ValuationSuggestion(
            field=field,
            message=message,
            suggested_range=f"{prefix}: {format_sek_range(low, high)}",
            severity=severity,
            suggested_low=round(low),
            suggested_high=round(high),
        )


__all__ = ["ValuationComparator", "ValuationThresholds"]
