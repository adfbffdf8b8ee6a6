"""src/pickgo/ui/cli/commands/templates.py
What: Implement ``templates list`` and ``templates update``.
Why: Let users see what is cached and refresh templates ahead of generation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from pickgo.application.services.scaffold_service import ScaffoldService, TemplateStatus
from pickgo.platform.logging import logger
from pickgo.ui.cli.args.options import TemplatesListArgs, TemplatesUpdateArgs
from pickgo.ui.cli.display.summary import format_age


@final
class TemplatesCommand:
    """List or refresh registered templates."""

    def __init__(
        self,
        args: TemplatesListArgs | TemplatesUpdateArgs,
        *,
        service_factory: Callable[[], ScaffoldService] | None = None,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._service = (service_factory or ScaffoldService)()
        self._console = console or Console()

    def execute(self) -> bool:
        """Run the requested action and report whether it fully succeeded."""

        if isinstance(self._args, TemplatesListArgs):
            self._console.print(self._build_table(self._service.template_statuses()))
            return True

        targets = self._args.architectures or None
        summary = self._service.update_templates(targets)
        if self._args.quiet:
            return summary.success

        for key in summary.refreshed:
            self._console.print(f"[green]✓ {key} updated[/green]")
        for key, error in summary.failures.items():
            self._console.print(f"[red]✗ {key}: {error}[/red]")
        if summary.success:
            logger.info("All templates updated successfully")
        return summary.success

    @staticmethod
    def _build_table(statuses: list[TemplateStatus]) -> Table:
        table = Table(
            title="Available Templates",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Key", style="bold")
        table.add_column("Template")
        table.add_column("Description", style="dim")
        table.add_column("Status")
        table.add_column("Age", justify="right")

        for status in statuses:
            table.add_row(
                status.descriptor.key,
                status.descriptor.name,
                status.descriptor.description,
                TemplatesCommand._format_status(status),
                format_age(status.age),
            )
        return table

    @staticmethod
    def _format_status(status: TemplateStatus) -> Text:
        if not status.cached:
            return Text("not cached", style="dim")
        if status.fresh:
            return Text("cached", style="green")
        return Text("stale", style="yellow")


__all__ = ["TemplatesCommand"]
