"""Shared path utilities for configuration, cache and log locations.

This module centralizes how the application discovers where it keeps
its files.

Policy (per-user by default):
- Config: ``<user config dir>/pickgo/config.toml`` unless overridden by
  ``PICKGO_CONFIG``.
- Template cache: ``<user cache dir>/.pick-your-go`` unless overridden by
  ``PICKGO_CACHE_DIR``.
- Logs: ``<user cache dir>/pickgo/logs/pickgo.log``, outside the template
  cache root.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_CONFIG_PATH: Final[str] = "PICKGO_CONFIG"
_ENV_CACHE_DIR: Final[str] = "PICKGO_CACHE_DIR"

CACHE_DIR_NAME: Final[str] = ".pick-your-go"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _user_cache_root(env: Mapping[str, str] | None = None) -> Path:
    """Return the platform's per-user cache directory.

    Mirrors the usual conventions: ``%LOCALAPPDATA%`` on Windows,
    ``~/Library/Caches`` on macOS and ``$XDG_CACHE_HOME`` (or ``~/.cache``)
    elsewhere.
    """
    mapping = env if env is not None else os.environ
    if sys.platform.startswith("win"):
        local = mapping.get("LOCALAPPDATA", "").strip()
        if local:
            return Path(local)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    xdg = mapping.get("XDG_CACHE_HOME", "").strip()
    return Path(xdg) if xdg else Path.home() / ".cache"


def _user_config_root(env: Mapping[str, str] | None = None) -> Path:
    """Return the platform's per-user configuration directory."""

    mapping = env if env is not None else os.environ
    if sys.platform.startswith("win"):
        roaming = mapping.get("APPDATA", "").strip()
        if roaming:
            return Path(roaming)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = mapping.get("XDG_CONFIG_HOME", "").strip()
    return Path(xdg) if xdg else Path.home() / ".config"


def default_config_path() -> Path:
    """Get the default path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _user_config_root() / "pickgo" / "config.toml",
    )


def default_cache_dir() -> Path:
    """Get the default root directory for cached templates."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_CACHE_DIR,
        default_factory=lambda: _user_cache_root() / CACHE_DIR_NAME,
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_user_cache_root() / "pickgo" / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "pickgo.log").resolve()


__all__ = [
    "CACHE_DIR_NAME",
    "default_cache_dir",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
