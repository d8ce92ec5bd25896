from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lotwise.domain.model import ItemRecord

if TYPE_CHECKING:
    from pathlib import Path

_CONFIG_ENV_VARS = (
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "AUCTIONET_BASE_URL",
    "AUCTIONET_PER_PAGE",
    "AUCTIONET_EXCLUDE_COMPANY_ID",
    "LOTWISE_MAX_DISPLAY_TERMS",
    "LOTWISE_AI_BRAND_CHECK",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    data_dir = tmp_path / "lotwise-data"
    monkeypatch.setenv("LOTWISE_DATA_DIR", str(data_dir))
    return data_dir


@pytest.fixture
def watch_item() -> ItemRecord:
    return ItemRecord(
        title="Armbandsur, Omega Seamaster, stål, 1960-tal",
        description="Automatiskt verk, boett i stål.",
        estimate=6000,
        upper_estimate=8000,
        accepted_reserve=4000,
        keywords=("Omega", "Seamaster"),
    )


@pytest.fixture
def art_item() -> ItemRecord:
    return ItemRecord(
        title="Lisa Larson, skulptur, stengods",
        description="Katt, Gustavsberg.",
        artist="Lisa Larson",
        estimate=3000,
    )
