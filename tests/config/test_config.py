"""Test configuration management."""

from pathlib import Path

import pytest

from pickgo.config.config import Config
from pickgo.config.paths import default_config_path
from pickgo.config.settings import DEFAULT_TOKEN_ENV_VAR
from pickgo.shared.errors import ConfigurationError


def test_load_creates_commented_default() -> None:
    """A missing config file is created from the template and yields defaults."""

    config = Config.load()

    assert default_config_path().exists()
    assert config.cache_dir is None
    assert config.log_file is None
    assert config.default_output_dir == "."
    assert config.default_author is None
    assert config.token_env_var == DEFAULT_TOKEN_ENV_VAR


def test_save_load_toml() -> None:
    """Saved values round-trip through the TOML file."""

    original_config = Config(
        cache_dir=Path("/test/cache"),
        log_file=Path("/test/logs/pickgo.log"),
        default_output_dir="/work",
        default_author="Jane Doe",
        token_env_var="MY_TOKEN",
    )
    _ = original_config.save()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.cache_dir == Path("/test/cache")
    assert loaded_config.log_file == Path("/test/logs/pickgo.log")
    assert loaded_config.default_output_dir == "/work"
    assert loaded_config.default_author == "Jane Doe"
    assert loaded_config.token_env_var == "MY_TOKEN"


def test_save_load_none_values() -> None:
    """Unset optional values stay unset after a round-trip."""

    _ = Config(cache_dir=None, log_file=None).save()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.cache_dir is None
    assert loaded_config.log_file is None
    assert loaded_config.default_author is None


def test_singleton_behavior() -> None:
    """Loading the same file twice returns the cached instance."""

    config1 = Config.load()
    config2 = Config.load()
    assert config2 is config1


def test_explicit_file_bypasses_cached_instance(tmp_path: Path) -> None:
    """A different target path is read fresh."""

    first = Config.load()
    other = tmp_path / "other.toml"
    _ = other.write_text('default_output_dir = "projects"\n', encoding="utf-8")

    second = Config.load(other)

    assert second is not first
    assert second.default_output_dir == "projects"


def test_empty_path_values_become_none(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text('cache_dir = ""\nlog_file = "  "\n', encoding="utf-8")

    config = Config.load(target)

    assert config.cache_dir is None
    assert config.log_file is None


def test_invalid_toml_raises_configuration_error(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text("cache_dir = [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid configuration file"):
        _ = Config.load(target)


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text('base_path = "/music"\n', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="base_path"):
        _ = Config.load(target)


def test_empty_token_env_var_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text('token_env_var = ""\n', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="token_env_var"):
        _ = Config.load(target)


def test_toml_comments() -> None:
    """Saved TOML carries inline guidance comments."""

    _ = Config(cache_dir=Path("/test/cache")).save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# pickgo configuration file (TOML)" in content
    assert "# Directory holding cached templates (optional)" in content
    assert "# Log file path (optional)" in content
