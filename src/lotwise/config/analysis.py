"""Analysis session defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_bool, optional_env_int

DEFAULT_MAX_DISPLAY_TERMS = 12


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    max_display_terms: int = DEFAULT_MAX_DISPLAY_TERMS
    ai_brand_check: bool = True


def get_analysis_config() -> AnalysisConfig:
    return AnalysisConfig(
        max_display_terms=optional_env_int("LOTWISE_MAX_DISPLAY_TERMS")
        or DEFAULT_MAX_DISPLAY_TERMS,
        ai_brand_check=optional_env_bool("LOTWISE_AI_BRAND_CHECK", default=True),
    )
