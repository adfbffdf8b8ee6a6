"""Git integration for template fetches."""

from .client import GitClient, RefreshUnavailableError, build_authenticated_url, redact

__all__ = ["GitClient", "RefreshUnavailableError", "build_authenticated_url", "redact"]
