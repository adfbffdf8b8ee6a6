"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from datetime import timedelta

from rich import box
from rich.console import Console
from rich.table import Table

from pickgo.application.services.scaffold_service import ScaffoldRequest


def format_age(age: timedelta | None) -> str:
    """Render a cache age as a compact ``1d 2h`` style string."""

    if age is None:
        return "-"
    seconds = max(int(age.total_seconds()), 0)
    days, remainder = divmod(seconds, 86_400)
    hours, remainder = divmod(remainder, 3_600)
    minutes = remainder // 60
    if days:
        return f"{days}d {hours}h"
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_size(size_bytes: int) -> str:
    """Render a byte count with a binary unit suffix."""

    value = float(size_bytes)
    for unit in ("B", "KiB", "MiB"):
        if value < 1024:
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GiB"


def render_project_summary(console: Console, request: ScaffoldRequest) -> None:
    """Render the configuration about to be generated.

    Args:
        console: Rich console instance used to render output.
        request: Validated generation request.
    """
    table = Table(
        title="Project Configuration Summary",
        show_header=False,
        box=box.SIMPLE,
        title_style="bold cyan",
    )
    table.add_column("Field", style="bold blue", justify="right")
    table.add_column("Value")

    table.add_row("Project Name:", request.project_name)
    table.add_row("Module Path:", request.module_path)
    table.add_row("Architecture:", request.architecture.display_name)
    table.add_row("Output Directory:", str(request.output_dir))
    if request.author:
        table.add_row("Author:", request.author)
    if request.description:
        table.add_row("Description:", request.description)
    table.add_row("Project Path:", str(request.project_path))

    console.print(table)


__all__ = ["format_age", "format_size", "render_project_summary"]
