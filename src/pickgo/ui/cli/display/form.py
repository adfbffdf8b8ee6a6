"""src/pickgo/ui/cli/display/form.py
What: Prompt for the init values that were not given on the command line.
Why: Let ``pickgo init`` run fully interactive or fully scripted with the same validation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import final

from rich.console import Console
from rich.prompt import Confirm, Prompt

from pickgo.features.templates.domain.models import ArchitectureType
from pickgo.features.templates.domain.registry import TemplateRegistry
from pickgo.ui.cli.args.options import InitArgs

Validator = Callable[[str], str | None]


def validate_not_empty(value: str) -> str | None:
    """Return an error message when ``value`` is blank."""

    if not value.strip():
        return "This field cannot be empty"
    return None


def validate_module_path(value: str) -> str | None:
    """Return an error message unless ``value`` looks like a module path."""

    if not value.strip():
        return "Module path cannot be empty"
    if "/" not in value:
        return "Module path should be a valid path (e.g. github.com/username/project)"
    return None


@final
class InitForm:
    """Interactive form filling the gaps of an ``InitArgs``."""

    console: Console

    def __init__(self, registry: TemplateRegistry, console: Console | None = None) -> None:
        self._registry = registry
        self.console = console or Console()

    def complete(self, args: InitArgs) -> InitArgs:
        """Return ``args`` with every missing value answered by the user."""

        self.show_banner()

        architecture = args.architecture or self._ask_architecture()
        project_name = args.project_name or self._ask(
            "Project name (e.g. my-awesome-app)", validate_not_empty
        )
        module_path = args.module_path or self._ask(
            "Go module path (e.g. github.com/username/project)", validate_module_path
        )
        output_dir = Path(
            Prompt.ask("Output directory", default=str(args.output_dir), console=self.console)
        )
        author = args.author or _optional(Prompt.ask("Author name", default="", console=self.console))
        description = args.description or _optional(
            Prompt.ask("Project description", default="", console=self.console)
        )

        return replace(
            args,
            architecture=architecture,
            project_name=project_name,
            module_path=module_path,
            output_dir=output_dir,
            author=author,
            description=description,
        )

    def confirm_generation(self) -> bool:
        return Confirm.ask(
            "Generate project? This will create a new directory with the selected architecture",
            default=True,
            console=self.console,
        )

    def show_banner(self) -> None:
        self.console.print()
        self.console.rule("[bold cyan]PICK YOUR GO[/bold cyan]")
        self.console.print("[dim]Interactive Go Project Scaffolder[/dim]", justify="center")
        self.console.print()

    def _ask_architecture(self) -> ArchitectureType:
        self.console.print("[bold]Choose your architecture pattern[/bold]")
        descriptors = self._registry.descriptors()
        for descriptor in descriptors:
            self.console.print(
                f"  [cyan]{descriptor.key}[/cyan] - {descriptor.display_name}: "
                f"[dim]{descriptor.description}[/dim]"
            )
        selection = Prompt.ask(
            "Architecture",
            choices=[descriptor.key for descriptor in descriptors],
            default=descriptors[0].key,
            console=self.console,
        )
        return ArchitectureType.from_user_input(selection)

    def _ask(self, label: str, validator: Validator) -> str:
        while True:
            value = Prompt.ask(label, console=self.console).strip()
            error = validator(value)
            if error is None:
                return value
            self.console.print(f"[red]{error}[/red]")


def _optional(value: str) -> str | None:
    stripped = value.strip()
    return stripped or None


__all__ = ["InitForm", "validate_module_path", "validate_not_empty"]
