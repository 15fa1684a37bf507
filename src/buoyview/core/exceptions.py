"""BuoyView exception hierarchy."""

from __future__ import annotations


class BuoyViewError(Exception):
    """Base class for every failure BuoyView reports to the user."""


class ConfigError(BuoyViewError):
    """Invalid configuration value (environment or CLI)."""


class FetchError(BuoyViewError):
    """The feed could not be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url
        self.reason = reason


class ParseError(BuoyViewError):
    """The feed body could not be turned into rows."""
