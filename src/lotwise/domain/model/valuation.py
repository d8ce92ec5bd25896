"""Valuation feedback records."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Severity, ValuationField


@dataclass(slots=True, frozen=True)
class ValuationSuggestion:
    field: ValuationField
    message: str
    suggested_range: str
    severity: Severity
    suggested_low: float | None = None
    suggested_high: float | None = None
