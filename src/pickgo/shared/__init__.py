"""Shared primitives reused across features."""

from pickgo.shared.errors import (
    ConfigurationError,
    FetchError,
    FilesystemError,
    InvariantViolation,
    NotCachedError,
    PickGoError,
    RefreshUnavailableError,
    TemplateNotFoundError,
    UnsupportedImportError,
)

__all__ = [
    "ConfigurationError",
    "FetchError",
    "FilesystemError",
    "InvariantViolation",
    "NotCachedError",
    "PickGoError",
    "RefreshUnavailableError",
    "TemplateNotFoundError",
    "UnsupportedImportError",
]
