"""Anthropic Messages API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

ANTHROPIC_BASE_URL = "https://api.anthropic.com/v1/"
ANTHROPIC_API_VERSION = "2023-06-01"
DEFAULT_ANTHROPIC_MODEL = "claude-haiku-4-5"
ANTHROPIC_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class AnthropicConfig:
    """Holds Anthropic API configuration values."""

    api_key: str
    model: str
    resilience: ResilienceConfig


def get_anthropic_config(*, resilience: ResilienceConfig | None = None) -> AnthropicConfig:
    values = require_env_vars(("ANTHROPIC_API_KEY",))
    return AnthropicConfig(
        api_key=values["ANTHROPIC_API_KEY"],
        model=optional_env_var("ANTHROPIC_MODEL") or DEFAULT_ANTHROPIC_MODEL,
        resilience=resilience
        or ResilienceConfig(
            name="anthropic",
            base_url=ANTHROPIC_BASE_URL,
            timeout_seconds=ANTHROPIC_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            cache=None,
            default_headers={"anthropic-version": ANTHROPIC_API_VERSION},
        ),
    )
