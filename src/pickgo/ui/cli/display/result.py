"""src/pickgo/ui/cli/display/result.py
What: Render the outcome of a project generation.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.panel import Panel

from pickgo.application.services.scaffold_service import ScaffoldResult


@final
class ScaffoldResultDisplay:
    """Handles generation result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_success(self, result: ScaffoldResult, quiet: bool = False) -> None:
        """Display the success panel, next steps and architecture notes.

        Args:
            result: Outcome of the generation.
            quiet: Whether to suppress non-error output. Files needing manual
                import fixes are still listed.
        """
        if quiet:
            self.show_rewrite_failures(result)
            return

        body = [
            "[bold green]✓ Project generated successfully![/bold green]",
            "",
            f"Files copied: {result.files_copied}",
        ]
        if result.identity_changed:
            body.append(f"Module: {result.old_identity} → {result.new_identity}")
        report = result.rewrite_report
        if report is not None:
            body.append(
                f"Import paths updated in {len(report.files_changed)} of "
                f"{report.files_scanned} Go files"
            )
        self.console.print(Panel("\n".join(body), title=result.template.name, expand=False))

        self.console.print("Next steps:")
        self.console.print(f"  1. cd {result.project_path}")
        self.console.print("  2. Review the generated structure")
        self.console.print("  3. Start building your application!")

        if result.template.notes:
            self.console.print()
            self.console.print(f"[cyan]{result.template.display_name} Notes:[/cyan]")
            for note in result.template.notes:
                self.console.print(f"  - {note}")

        self.show_rewrite_failures(result)

    def show_rewrite_failures(self, result: ScaffoldResult) -> None:
        """List files whose imports could not be updated."""

        report = result.rewrite_report
        if report is None or report.success:
            return

        self.console.print()
        self.console.print(
            f"[yellow]⚠ {len(report.failures)} file(s) could not be updated; "
            "fix their imports manually:[/yellow]"
        )
        for failure in report.failures:
            try:
                shown = failure.path.relative_to(result.project_path)
            except ValueError:
                shown = failure.path
            self.console.print(f"[yellow]  • {shown}: {failure.error}[/yellow]")


__all__ = ["ScaffoldResultDisplay"]
