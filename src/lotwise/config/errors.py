"""Errors raised while reading lotwise settings from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """An environment setting is present but cannot be parsed."""


class MissingConfigurationError(ConfigurationError):
    """One or more required environment settings are absent or blank."""

    def __init__(self, names: list[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Missing configuration for: {', '.join(self.names)}")
