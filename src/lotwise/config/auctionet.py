"""Auctionet market data configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_int, optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

AUCTIONET_BASE_URL = "https://auctionet.com/api/v2/"
AUCTIONET_TIMEOUT_SECONDS = 15.0
AUCTIONET_CACHE_TTL_SECONDS = 30 * 60
DEFAULT_PER_PAGE = 200


def should_cache_items_payload(payload: object) -> bool:
    """Only item listings are cached, never error bodies."""

    return isinstance(payload, dict) and isinstance(payload.get("items"), list)


@dataclass(frozen=True)
class AuctionetConfig:
    """Holds Auctionet API configuration values."""

    per_page: int
    exclude_company_id: int | None
    resilience: ResilienceConfig


def get_auctionet_config(*, resilience: ResilienceConfig | None = None) -> AuctionetConfig:
    base_url = optional_env_var("AUCTIONET_BASE_URL") or AUCTIONET_BASE_URL
    return AuctionetConfig(
        per_page=optional_env_int("AUCTIONET_PER_PAGE") or DEFAULT_PER_PAGE,
        exclude_company_id=optional_env_int("AUCTIONET_EXCLUDE_COMPANY_ID"),
        resilience=resilience
        or ResilienceConfig(
            name="auctionet",
            base_url=base_url,
            timeout_seconds=AUCTIONET_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            cache=CacheConfig(
                backend="sqlite",
                default_ttl_seconds=AUCTIONET_CACHE_TTL_SECONDS,
                should_cache=should_cache_items_payload,
            ),
        ),
    )
