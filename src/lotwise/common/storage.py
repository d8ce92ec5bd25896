"""Data storage helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lotwise.config.storage import get_storage_config

if TYPE_CHECKING:
    from pathlib import Path


def get_data_dir() -> Path:
    """Return the directory where lotwise stores its cache and flags."""

    return get_storage_config().resolve_data_dir()


def get_http_cache_path() -> Path:
    """Return the sqlite HTTP cache path, ensuring the data directory exists."""

    return get_storage_config().http_cache_path()


def get_visibility_path() -> Path:
    return get_storage_config().visibility_path()
