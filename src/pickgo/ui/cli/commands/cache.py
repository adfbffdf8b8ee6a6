"""Cache command implementation for the CLI."""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from rich.console import Console

from pickgo.application.services.scaffold_service import ScaffoldService
from pickgo.ui.cli.args.options import CacheClearArgs, CacheInfoArgs
from pickgo.ui.cli.display.summary import format_age, format_size


@final
class CacheCommand:
    """Show or clear the template cache."""

    def __init__(
        self,
        args: CacheInfoArgs | CacheClearArgs,
        *,
        service_factory: Callable[[], ScaffoldService] | None = None,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._service = (service_factory or ScaffoldService)()
        self._console = console or Console()

    def execute(self) -> bool:
        if isinstance(self._args, CacheInfoArgs):
            self._show_info()
            return True

        architecture = self._args.architecture
        self._service.clear_cache(architecture)
        if not self._args.quiet:
            target = architecture.value if architecture else "all templates"
            self._console.print(f"[green]Cleared cache for {target}[/green]")
        return True

    def _show_info(self) -> None:
        info = self._service.cache_info()
        self._console.print(f"[bold]Cache directory:[/bold] {info.cache_dir}")
        self._console.print(f"[bold]Size:[/bold] {format_size(info.size_bytes)}")
        for status in info.templates:
            if status.cached:
                state = "fresh" if status.fresh else "stale"
                self._console.print(f"  • {status.descriptor.key}: {state}, age {format_age(status.age)}")
            else:
                self._console.print(f"  • {status.descriptor.key}: [dim]not cached[/dim]")


__all__ = ["CacheCommand"]
