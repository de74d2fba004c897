"""Errors raised while binding configuration values."""

from __future__ import annotations

from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Base class for configuration failures that must abort startup."""


class MissingConfigurationKey(ConfigurationError):
    """One or more required keys have no resolvable value."""

    def __init__(self, keys: Iterable[str]) -> None:
        self.keys: tuple[str, ...] = tuple(keys)
        if len(self.keys) == 1:
            message = f"Missing required configuration key: {self.keys[0]}"
        else:
            message = "Missing required configuration keys: " + ", ".join(self.keys)
        super().__init__(message)


class MalformedConfigurationValue(ConfigurationError):
    """A value exists but cannot be read or coerced.

    Only the key, the source and the reason are kept; the raw value is
    never stored on the exception.
    """

    def __init__(self, key: str, source: str, reason: str) -> None:
        self.key = key
        self.source = source
        self.reason = reason
        super().__init__(
            f"Malformed value for configuration key {key} in {source}: {reason}"
        )


__all__ = [
    "ConfigurationError",
    "MalformedConfigurationValue",
    "MissingConfigurationKey",
]
