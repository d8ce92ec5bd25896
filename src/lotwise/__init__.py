"""Cataloging assistant comparing auction item valuations with market data."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("lotwise")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"
