"""Display management for CLI interface."""

from pickgo.ui.cli.display.form import InitForm
from pickgo.ui.cli.display.result import ScaffoldResultDisplay
from pickgo.ui.cli.display.summary import format_age, format_size, render_project_summary

__all__ = [
    "InitForm",
    "ScaffoldResultDisplay",
    "format_age",
    "format_size",
    "render_project_summary",
]
