"""
Summary: Exception hierarchy shared by the cache, fetch, copy and rewrite layers.
Why: Let the CLI map failures to exit codes without inspecting message text.
"""

from __future__ import annotations

from pathlib import Path


class PickGoError(Exception):
    """Base exception for all scaffolding failures."""


class ConfigurationError(PickGoError):
    """Raised when required user input or configuration is missing or invalid."""


class TemplateNotFoundError(ConfigurationError):
    """Raised when an architecture has no registered template."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Template not found for architecture type: {identifier}")
        self.identifier = identifier


class NotCachedError(PickGoError):
    """Raised when a template has no valid cache entry."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Template not cached: {key}")
        self.key = key


class FetchError(PickGoError):
    """Raised when a remote template could not be retrieved."""


class RefreshUnavailableError(FetchError):
    """Raised when a cached checkout cannot be refreshed in place."""


class FilesystemError(PickGoError):
    """Raised for directory-level I/O failures; always names the path involved."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class InvariantViolation(PickGoError):
    """Raised when a caller breaks a documented precondition."""


class UnsupportedImportError(PickGoError):
    """Raised when an import path uses syntax the line scanner refuses to rewrite."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"Unsupported import path syntax on line {line_number}: {line.strip()}"
        )
        self.line_number = line_number


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
