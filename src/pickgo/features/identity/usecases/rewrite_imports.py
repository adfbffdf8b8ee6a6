"""Use case rewriting import paths across a generated source tree."""

from __future__ import annotations

import os
from collections.abc import Iterator
from logging import Logger
from pathlib import Path

from pickgo.config.file_ops import replace_text_file
from pickgo.config.settings import REWRITE_SKIP_DIRS, SOURCE_SUFFIX
from pickgo.platform.logging import logger as app_logger
from pickgo.shared.errors import FilesystemError, UnsupportedImportError

from ..domain.import_scanner import require_distinct_identities, rewrite_import_paths
from ..domain.models import RewriteReport


def _is_skipped_directory(name: str) -> bool:
    return name in REWRITE_SKIP_DIRS or name.startswith(".")


def iter_source_files(root: Path) -> Iterator[Path]:
    """Yield source files beneath ``root`` in a stable order."""

    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if not _is_skipped_directory(name))
        for name in sorted(filenames):
            if name.endswith(SOURCE_SUFFIX):
                yield Path(current) / name


def _rewrite_file(path: Path, old_identity: str, new_identity: str) -> bool:
    original = path.read_bytes().decode("utf-8")
    updated = rewrite_import_paths(original, old_identity, new_identity)
    if updated == original:
        return False
    replace_text_file(path, updated)
    return True


def rewrite_imports(
    root: Path,
    old_identity: str,
    new_identity: str,
    *,
    logger: Logger | None = None,
) -> RewriteReport:
    """Point every import of ``old_identity`` under ``root`` at ``new_identity``.

    Per-file failures are logged and collected in the report; the walk always
    visits every remaining file.

    Raises:
        InvariantViolation: If the identities are empty or equal.
        FilesystemError: If ``root`` is not a directory.
    """
    log = logger or app_logger
    require_distinct_identities(old_identity, new_identity)
    if not root.is_dir():
        raise FilesystemError("Project directory does not exist", root)

    report = RewriteReport()
    for path in iter_source_files(root):
        report.files_scanned += 1
        try:
            changed = _rewrite_file(path, old_identity, new_identity)
        except (OSError, UnicodeDecodeError, UnsupportedImportError) as exc:
            log.warning(
                "Failed to update import paths in %s: %s",
                path,
                exc,
                extra={
                    "scaffold_event": "rewrite.failure",
                    "path": str(path),
                    "base_path": str(root),
                    "error_message": str(exc),
                },
            )
            report.record_failure(path, exc)
            continue

        if changed:
            report.files_changed.append(path)
            log.debug(
                "Rewrote imports in %s",
                path,
                extra={"scaffold_event": "rewrite.file", "path": str(path), "base_path": str(root)},
            )

    log.info(
        "Updated import paths from '%s' to '%s'",
        old_identity,
        new_identity,
        extra={
            "scaffold_event": "rewrite.complete",
            "files": report.files_scanned,
            "changed": len(report.files_changed),
            "failed": len(report.failures),
        },
    )
    return report


__all__ = ["iter_source_files", "rewrite_imports"]
