"""Custom Rich handler rendering scaffold events.

Where: platform/logging/handlers.py
What: Render structured ``scaffold_event`` log records with icons and compact paths.
Why: Keep fetch/copy/rewrite progress readable without hand-built console output.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ScaffoldRichHandler(RichHandler):
    """Rich handler that styles scaffold events and shortens long paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "fetch.start": ("⬇️", "cyan"),
        "fetch.complete": ("✅", "green"),
        "fetch.refresh_unavailable": ("♻️", "yellow"),
        "fetch.error": ("❌", "red"),
        "cache.hit": ("♻️", "green"),
        "cache.invalidate": ("🧹", "yellow"),
        "copy.complete": ("📦", "magenta"),
        "rewrite.file": ("✏️", "blue"),
        "rewrite.failure": ("⛔", "red"),
        "rewrite.complete": ("🎉", "green"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "fetch.start": "Fetching template ",
        "fetch.complete": "Fetched template ",
        "fetch.refresh_unavailable": "Refresh unavailable, refetching ",
        "fetch.error": "Fetch failed for ",
        "cache.hit": "Using cached template ",
        "cache.invalidate": "Invalidated cache for ",
        "copy.complete": "Copied template ",
        "rewrite.file": "Rewrote imports in ",
        "rewrite.failure": "Could not rewrite ",
        "rewrite.complete": "Import rewrite complete ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with ellipsis truncation of leading segments.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and self._is_relative_to(pure_path, base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor if anchor.endswith(separator) else anchor + separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = "."

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _is_relative_to(path: PurePath, other: PurePath) -> bool:
        try:
            _ = path.relative_to(other)
            return True
        except ValueError:
            return False

    def _render_scaffold_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured scaffold events with dedicated styling."""

        event = getattr(record, "scaffold_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        label = self._EVENT_LABELS.get(event)
        if label:
            _ = body.append(label)

        template = getattr(record, "template", None)
        if template:
            _ = body.append(str(template))

        path = getattr(record, "path", None)
        if path:
            if template:
                _ = body.append(" @ ")
            _ = body.append_text(
                self._format_path(str(path), base=getattr(record, "base_path", None))
            )

        details: list[str] = []
        files = getattr(record, "files", None)
        if isinstance(files, int):
            details.append(f"files={files}")
        changed = getattr(record, "changed", None)
        if isinstance(changed, int):
            details.append(f"changed={changed}")
        failed = getattr(record, "failed", None)
        if isinstance(failed, int):
            details.append(f"failed={failed}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for scaffold events."""

        scaffold_text = self._render_scaffold_message(record)
        if scaffold_text is not None:
            return scaffold_text
        return super().render_message(record, message)


__all__ = ["ScaffoldRichHandler"]
