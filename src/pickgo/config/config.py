"""Configuration management for pickgo."""

from __future__ import annotations

import textwrap
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pickgo.config.file_ops import ensure_file_with_template, write_text_file
from pickgo.config.paths import default_config_path
from pickgo.config.settings import DEFAULT_TOKEN_ENV_VAR
from pickgo.platform.logging import logger
from pickgo.shared.errors import ConfigurationError

_TEMPLATE = textwrap.dedent(
    """
    # pickgo configuration file (TOML)

    # Directory holding cached templates (optional)
    # Example: cache_dir = "/home/me/.cache/.pick-your-go"

    # Log file path (optional)
    # Example: log_file = "/home/me/.cache/pickgo/logs/pickgo.log"

    # Directory where new projects are created when --output is omitted
    default_output_dir = "."

    # Author recorded in the generation summary (optional)
    # Example: default_author = "Jane Doe"

    # Environment variable holding the access token for private template repositories
    token_env_var = "PICK_YOUR_GO_GITHUB_TOKEN"
    """
).strip() + "\n"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Template cache root
    cache_dir: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    default_output_dir: str = "."
    default_author: str | None = None
    token_env_var: str = DEFAULT_TOKEN_ENV_VAR

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        write_text_file(destination, self._render_toml(config_dict))
        logger.info("Configuration saved to %s", destination)
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# pickgo configuration file (TOML)", ""]

        lines.append("# Directory holding cached templates (optional)")
        if config["cache_dir"] is not None:
            lines.append(f"cache_dir = {self._format_toml_value(config['cache_dir'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Directory where new projects are created when --output is omitted")
        lines.append(
            f"default_output_dir = {self._format_toml_value(config['default_output_dir'])}"
        )
        lines.append("")

        lines.append("# Author recorded in the generation summary (optional)")
        if config.get("default_author"):
            lines.append(f"default_author = {self._format_toml_value(config['default_author'])}")
        lines.append("")

        lines.append("# Environment variable holding the access token for private template repositories")
        lines.append(f"token_env_var = {self._format_toml_value(config['token_env_var'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, creating a commented default when absent.

        Args:
            config_file: Explicit config location; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigurationError: If the file exists but is not valid TOML or
                contains unknown keys.
        """
        target = config_file or default_config_path()
        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        try:
            created = ensure_file_with_template(target, template_provider=lambda: _TEMPLATE)
        except OSError as exc:
            # Unwritable config locations fall back to in-memory defaults.
            logger.debug("Could not create default configuration at %s: %s", target, exc)
            created = False
        if created:
            logger.debug("Created default configuration at %s", target)

        config_dict: dict[str, Any] = {}
        if target.exists():
            try:
                with open(target, "rb") as handle:
                    config_dict = tomllib.load(handle)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigurationError(f"Invalid configuration file {target}: {exc}") from exc

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys in {target}: {', '.join(unknown)}"
            )

        instance = cls(**config_dict)
        if not instance.token_env_var.strip():
            raise ConfigurationError(f"token_env_var must not be empty in {target}")

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
