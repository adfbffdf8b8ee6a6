"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Callable
from pathlib import Path
from typing import Any


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _clear_readonly(func: Callable[..., Any], path: str, _exc: BaseException) -> None:
    """``shutil.rmtree`` error hook that retries after dropping the read-only bit."""

    os.chmod(path, stat.S_IWRITE | stat.S_IREAD | stat.S_IEXEC)
    func(path)


def remove_tree(path: Path) -> bool:
    """Remove ``path`` recursively; return ``False`` when it was already missing.

    Git object files are written read-only, so removal retries such entries
    after making them writable.
    """

    if not path.exists() and not path.is_symlink():
        return False
    if path.is_file() or path.is_symlink():
        path.unlink()
        return True
    shutil.rmtree(path, onexc=_clear_readonly)
    return True


def directory_size(root: Path) -> int:
    """Return the total size in bytes of regular files beneath ``root``."""

    if not root.exists():
        return 0

    total = 0
    for current, _, filenames in os.walk(root):
        for name in filenames:
            candidate = Path(current) / name
            try:
                if not candidate.is_symlink():
                    total += candidate.stat().st_size
            except OSError:
                continue
    return total


__all__ = ["directory_size", "ensure_directory", "remove_tree"]
