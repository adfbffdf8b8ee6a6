"""
Summary: Materialize a cached template tree into a fresh destination directory.
Why: Preserve relative layout and permission bits while never reading version-control metadata.
"""

from __future__ import annotations

import os
import shutil
from logging import Logger
from pathlib import Path

from pickgo.config.settings import VCS_METADATA_DIRS
from pickgo.platform.logging import logger as app_logger
from pickgo.shared.errors import FilesystemError, InvariantViolation


def copy_tree(source_root: Path, destination: Path, *, logger: Logger | None = None) -> int:
    """Copy every file under ``source_root`` into ``destination``.

    ``destination`` must be absolute and must not exist yet; callers check the
    latter before invoking. A failure aborts the walk immediately and files
    already copied stay in place.

    Args:
        source_root: Cached template checkout.
        destination: Absolute directory to create.
        logger: Optional logger override.

    Returns:
        int: Number of files and symlinks copied. Symlinks are recreated with
        their original target, never followed.

    Raises:
        InvariantViolation: If ``destination`` is relative.
        FilesystemError: If the source is missing or any directory/file copy fails.
    """
    log = logger or app_logger
    if not destination.is_absolute():
        raise InvariantViolation(f"Destination path is not absolute: {destination}")
    if not source_root.is_dir():
        raise FilesystemError("Cached template directory does not exist", source_root)

    copied = 0
    for current, dirnames, filenames in os.walk(source_root):
        current_path = Path(current)
        target_dir = destination / current_path.relative_to(source_root)
        # os.walk lists directory symlinks without descending into them.
        linked_dirs = sorted(name for name in dirnames if (current_path / name).is_symlink())
        dirnames[:] = sorted(
            name for name in dirnames if name not in VCS_METADATA_DIRS and name not in linked_dirs
        )

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            shutil.copymode(current_path, target_dir)
        except OSError as exc:
            raise FilesystemError(f"Failed to create directory ({exc})", target_dir) from exc

        for name in linked_dirs:
            source_link = current_path / name
            try:
                os.symlink(os.readlink(source_link), target_dir / name, target_is_directory=True)
            except OSError as exc:
                raise FilesystemError(f"Failed to recreate symlink ({exc})", source_link) from exc
            copied += 1

        for name in sorted(filenames):
            source_file = current_path / name
            target_file = target_dir / name
            try:
                _ = shutil.copyfile(source_file, target_file, follow_symlinks=False)
                shutil.copymode(source_file, target_file, follow_symlinks=False)
            except OSError as exc:
                raise FilesystemError(f"Failed to copy file ({exc})", source_file) from exc
            copied += 1

    log.info(
        "Copied %d files into %s",
        copied,
        destination,
        extra={"scaffold_event": "copy.complete", "path": str(destination), "files": copied},
    )
    return copied


__all__ = ["copy_tree"]
