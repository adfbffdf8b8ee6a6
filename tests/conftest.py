"""Shared pytest fixtures isolating tests from the real user directories."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from pickgo.config.config import Config
from pickgo.config.settings import DEFAULT_TOKEN_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_user_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config, cache and log discovery at a per-test directory."""

    home = tmp_path / "user-home"
    monkeypatch.setenv("PICKGO_CONFIG", str(home / "config" / "pickgo" / "config.toml"))
    monkeypatch.setenv("PICKGO_CACHE_DIR", str(home / "cache" / ".pick-your-go"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / "cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / "config"))
    monkeypatch.delenv(DEFAULT_TOKEN_ENV_VAR, raising=False)

    Config.reset()
    try:
        yield home
    finally:
        Config.reset()
