"""Application configuration helpers."""

from __future__ import annotations

from .analysis import AnalysisConfig, get_analysis_config
from .anthropic import AnthropicConfig, get_anthropic_config
from .auctionet import AuctionetConfig, get_auctionet_config
from .env import optional_env_bool, optional_env_int, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .storage import StorageConfig, get_storage_config

__all__ = [
    "AnalysisConfig",
    "AnthropicConfig",
    "AuctionetConfig",
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "get_analysis_config",
    "get_anthropic_config",
    "get_auctionet_config",
    "get_storage_config",
    "optional_env_bool",
    "optional_env_int",
    "optional_env_var",
    "require_env_vars",
]
