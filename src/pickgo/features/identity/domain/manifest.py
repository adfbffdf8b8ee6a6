"""Read and rewrite the module declaration of a ``go.mod`` manifest."""

from __future__ import annotations

from pathlib import Path

from pickgo.config.file_ops import replace_text_file
from pickgo.config.settings import DECLARATION_KEYWORD
from pickgo.shared.errors import ConfigurationError, FilesystemError, InvariantViolation

_DECLARATION_PREFIX = f"{DECLARATION_KEYWORD} "


def _read_manifest(manifest_path: Path) -> str:
    try:
        return manifest_path.read_bytes().decode("utf-8")
    except FileNotFoundError as exc:
        raise FilesystemError("Manifest file not found", manifest_path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(f"Failed to read manifest ({exc})", manifest_path) from exc


def _find_declaration(lines: list[str]) -> int | None:
    for index, line in enumerate(lines):
        if line.startswith(_DECLARATION_PREFIX):
            return index
    return None


def extract_declared_identity(manifest_path: Path) -> str:
    """Return the identity declared on the first ``module`` line of ``manifest_path``.

    Raises:
        FilesystemError: If the manifest is missing or unreadable.
        ConfigurationError: If no declaration line exists or it names nothing.
    """
    lines = _read_manifest(manifest_path).split("\n")
    index = _find_declaration(lines)
    if index is None:
        raise ConfigurationError(f"No module declaration found in {manifest_path}")

    identity = lines[index][len(_DECLARATION_PREFIX) :].strip()
    if not identity:
        raise ConfigurationError(f"Empty module declaration in {manifest_path}")
    return identity


def set_declared_identity(manifest_path: Path, new_identity: str) -> None:
    """Replace the first ``module`` line with ``module <new_identity>``.

    Every other line, including trailing newlines, is written back unchanged.
    Once this runs the previous identity can no longer be read from the file.
    """
    if not new_identity:
        raise InvariantViolation("New module identity must not be empty")

    lines = _read_manifest(manifest_path).split("\n")
    index = _find_declaration(lines)
    if index is None:
        raise ConfigurationError(f"No module declaration found in {manifest_path}")

    carriage = "\r" if lines[index].endswith("\r") else ""
    lines[index] = f"{_DECLARATION_PREFIX}{new_identity}{carriage}"
    try:
        replace_text_file(manifest_path, "\n".join(lines))
    except OSError as exc:
        raise FilesystemError(f"Failed to write manifest ({exc})", manifest_path) from exc


__all__ = ["extract_declared_identity", "set_declared_identity"]
