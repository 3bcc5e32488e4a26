"""Custom exceptions for camux.gcp types."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when a required configuration value is missing or empty."""

    __slots__ = ()


class ResourceOperationError(RuntimeError):
    """Raised when a long-running remote operation completes with an error."""

    __slots__ = ()


__all__ = ["ConfigurationError", "ResourceOperationError"]
