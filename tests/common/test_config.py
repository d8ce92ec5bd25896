from __future__ import annotations

import pytest

from lotwise.config import (
    ConfigurationError,
    MissingConfigurationError,
    get_analysis_config,
    get_anthropic_config,
    get_auctionet_config,
    optional_env_bool,
    optional_env_int,
    require_env_vars,
)
from lotwise.config.auctionet import (
    AUCTIONET_BASE_URL,
    DEFAULT_PER_PAGE,
    should_cache_items_payload,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_lists_missing_and_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)
    monkeypatch.setenv("BLANK_VAR", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert exc.value.names == ("BLANK_VAR", "MISSING_VAR")
    assert "BLANK_VAR, MISSING_VAR" in str(exc.value)


def test_optional_env_int_rejects_non_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_INT", "many")

    with pytest.raises(ConfigurationError):
        optional_env_int("EXAMPLE_INT")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("Yes", True), ("off", False), ("FALSE", False)],
)
def test_optional_env_bool_parses_flags(
    monkeypatch: pytest.MonkeyPatch, raw: str, *, expected: bool
) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", raw)

    assert optional_env_bool("EXAMPLE_FLAG") is expected


def test_optional_env_bool_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")

    with pytest.raises(ConfigurationError):
        optional_env_bool("EXAMPLE_FLAG", default=True)


def test_anthropic_config_requires_api_key() -> None:
    with pytest.raises(MissingConfigurationError):
        get_anthropic_config()


def test_anthropic_config_reads_model_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANTHROPIC_API_KEY", "secret")
    monkeypatch.setenv("ANTHROPIC_MODEL", "custom-model")

    config = get_anthropic_config()

    assert config.api_key == "secret"
    assert config.model == "custom-model"
    assert config.resilience.cache is None


def test_auctionet_config_defaults() -> None:
    config = get_auctionet_config()

    assert config.per_page == DEFAULT_PER_PAGE
    assert config.exclude_company_id is None
    assert config.resilience.base_url == AUCTIONET_BASE_URL
    assert config.resilience.cache is not None


def test_auctionet_config_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUCTIONET_BASE_URL", "https://auctionet.test/api/")
    monkeypatch.setenv("AUCTIONET_PER_PAGE", "50")
    monkeypatch.setenv("AUCTIONET_EXCLUDE_COMPANY_ID", "11")

    config = get_auctionet_config()

    assert config.per_page == 50
    assert config.exclude_company_id == 11
    assert config.resilience.base_url == "https://auctionet.test/api/"


def test_analysis_config_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_analysis_config().max_display_terms == 12

    monkeypatch.setenv("LOTWISE_MAX_DISPLAY_TERMS", "5")
    monkeypatch.setenv("LOTWISE_AI_BRAND_CHECK", "no")

    config = get_analysis_config()

    assert config.max_display_terms == 5
    assert config.ai_brand_check is False


def test_anthropic_config_sends_api_version_header(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANTHROPIC_API_KEY", "secret")

    config = get_anthropic_config()

    assert config.resilience.default_headers == {"anthropic-version": "2023-06-01"}


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"items": [], "pagination": {"total_entries": 0}}, True),
        ({"error": "not found"}, False),
        (["items"], False),
    ],
)
def test_auctionet_cache_keeps_only_item_listings(payload: object, *, expected: bool) -> None:
    assert should_cache_items_payload(payload) is expected
