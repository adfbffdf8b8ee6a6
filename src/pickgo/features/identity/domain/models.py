"""Value objects produced while rewriting module identities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportReference:
    """A quoted import path recognized on a candidate line."""

    path: str
    line_number: int
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class RewriteFailure:
    """A source file the rewrite walk could not process."""

    path: Path
    error: str


@dataclass(slots=True)
class RewriteReport:
    """Aggregated outcome of a tree-wide import rewrite."""

    files_scanned: int = 0
    files_changed: list[Path] = field(default_factory=list)
    failures: list[RewriteFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    def record_failure(self, path: Path, error: Exception | str) -> None:
        self.failures.append(RewriteFailure(path=path, error=str(error)))


__all__ = ["ImportReference", "RewriteFailure", "RewriteReport"]
