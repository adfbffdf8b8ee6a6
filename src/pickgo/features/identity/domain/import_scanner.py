"""
Summary: Line-oriented recognition and rewriting of quoted import paths.
Why: Only quoted paths inside import statements carry the module identity, so a full parse is unnecessary.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Final

from pickgo.config.settings import (
    IMPORT_BLOCK_CLOSER,
    IMPORT_BLOCK_OPENER,
    IMPORT_KEYWORD_PREFIX,
)
from pickgo.shared.errors import InvariantViolation, UnsupportedImportError

from .models import ImportReference

QUOTE: Final[str] = '"'
PATH_SEPARATOR: Final[str] = "/"
RAW_QUOTE: Final[str] = "`"
ESCAPE: Final[str] = "\\"
LINE_COMMENT: Final[str] = "//"
# Characters that signal escaped quotes or raw-string import paths.
UNSUPPORTED_MARKERS: Final[tuple[str, ...]] = (ESCAPE, RAW_QUOTE)


class ScanState(str, Enum):
    """Where the scanner cursor sits relative to import declarations."""

    OUTSIDE = "outside"
    SINGLE_LINE_IMPORT = "single_line_import"
    IMPORT_BLOCK = "import_block"


def require_distinct_identities(old_identity: str, new_identity: str) -> None:
    """Raise ``InvariantViolation`` unless both identities are non-empty and differ."""

    if not old_identity:
        raise InvariantViolation("Old module identity must not be empty")
    if not new_identity:
        raise InvariantViolation("New module identity must not be empty")
    if old_identity == new_identity:
        raise InvariantViolation(f"Old and new module identity are identical: {old_identity}")


def iter_candidate_lines(lines: list[str]) -> Iterator[tuple[int, str, ScanState]]:
    """Yield ``(index, line, state)`` for every line that may hold import paths.

    The block opener and closer lines themselves are never candidates.
    """

    in_block = False
    for index, line in enumerate(lines):
        trimmed = line.strip()

        if trimmed == IMPORT_BLOCK_OPENER:
            in_block = True
            continue

        if in_block and trimmed == IMPORT_BLOCK_CLOSER:
            in_block = False
            continue

        if in_block:
            yield index, line, ScanState.IMPORT_BLOCK
        elif trimmed.startswith(IMPORT_KEYWORD_PREFIX):
            yield index, line, ScanState.SINGLE_LINE_IMPORT


def _matches_identity(quoted: str, identity: str) -> bool:
    return quoted == identity or quoted.startswith(identity + PATH_SEPARATOR)


def replace_module_path_in_line(line: str, old_identity: str, new_identity: str) -> str:
    """Rewrite every quoted value on ``line`` that equals or extends ``old_identity``.

    Quotes are paired left to right without escape handling. After a
    replacement the scan resumes just past the inserted text, so several
    paths on one line are all handled.
    """

    start = 0
    while True:
        quote_start = line.find(QUOTE, start)
        if quote_start == -1:
            break
        quote_end = line.find(QUOTE, quote_start + 1)
        if quote_end == -1:
            break

        quoted = line[quote_start + 1 : quote_end]
        if _matches_identity(quoted, old_identity):
            replaced = new_identity + quoted[len(old_identity) :]
            line = line[: quote_start + 1] + replaced + line[quote_end:]
            quote_end = quote_start + 1 + len(replaced)

        start = quote_end + 1

    return line


def strip_line_comment(line: str) -> str:
    """Return ``line`` up to a trailing ``//`` comment that sits outside any string."""

    open_quote: str | None = None
    index = 0
    while index < len(line):
        char = line[index]
        if open_quote is not None:
            if char == ESCAPE and open_quote == QUOTE:
                index += 1
            elif char == open_quote:
                open_quote = None
        elif char in (QUOTE, RAW_QUOTE):
            open_quote = char
        elif line.startswith(LINE_COMMENT, index):
            return line[:index]
        index += 1
    return line


def rewrite_import_paths(text: str, old_identity: str, new_identity: str) -> str:
    """Return ``text`` with every import of ``old_identity`` pointed at ``new_identity``.

    Newline layout is preserved exactly; non-candidate lines pass through
    untouched.

    Raises:
        InvariantViolation: If the identities are empty or equal.
        UnsupportedImportError: If a candidate line naming ``old_identity``
            also carries an escaped quote or a raw-string path outside its
            trailing comment.
    """
    require_distinct_identities(old_identity, new_identity)

    lines = text.split("\n")
    for index, line, _ in iter_candidate_lines(lines):
        if old_identity not in line:
            continue
        code = strip_line_comment(line)
        if old_identity in code and any(marker in code for marker in UNSUPPORTED_MARKERS):
            raise UnsupportedImportError(index + 1, line)
        lines[index] = replace_module_path_in_line(line, old_identity, new_identity)
    return "\n".join(lines)


def _alias_before(segment: str) -> str | None:
    token = segment.strip()
    keyword = IMPORT_KEYWORD_PREFIX.strip()
    if token == keyword or token.startswith(IMPORT_KEYWORD_PREFIX):
        token = token[len(keyword) :].strip()
    if not token or " " in token:
        return None
    return token


def scan_imports(text: str) -> list[ImportReference]:
    """List every quoted import path found on candidate lines of ``text``."""

    references: list[ImportReference] = []
    for index, line, _ in iter_candidate_lines(text.split("\n")):
        start = 0
        while True:
            quote_start = line.find(QUOTE, start)
            if quote_start == -1:
                break
            quote_end = line.find(QUOTE, quote_start + 1)
            if quote_end == -1:
                break
            references.append(
                ImportReference(
                    path=line[quote_start + 1 : quote_end],
                    line_number=index + 1,
                    alias=_alias_before(line[start:quote_start]),
                )
            )
            start = quote_end + 1
    return references


__all__ = [
    "ScanState",
    "iter_candidate_lines",
    "replace_module_path_in_line",
    "require_distinct_identities",
    "rewrite_import_paths",
    "scan_imports",
    "strip_line_comment",
]
