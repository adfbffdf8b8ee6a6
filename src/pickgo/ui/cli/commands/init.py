"""Init command implementation for the CLI."""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from rich.console import Console

from pickgo.application.services.scaffold_service import (
    ScaffoldRequest,
    ScaffoldResult,
    ScaffoldService,
)
from pickgo.platform.logging import logger
from pickgo.shared.errors import ConfigurationError
from pickgo.ui.cli.args.options import InitArgs
from pickgo.ui.cli.display.form import InitForm
from pickgo.ui.cli.display.result import ScaffoldResultDisplay
from pickgo.ui.cli.display.summary import render_project_summary


@final
class InitCommand:
    """Collect init values, confirm them and generate the project."""

    def __init__(
        self,
        args: InitArgs,
        *,
        service_factory: Callable[[], ScaffoldService] | None = None,
        form_factory: Callable[[ScaffoldService], InitForm] | None = None,
        console: Console | None = None,
    ) -> None:
        self.args = args
        self.service = (service_factory or ScaffoldService)()
        self.console = console or Console()
        self.form = (
            form_factory(self.service)
            if form_factory is not None
            else InitForm(self.service.registry, console=self.console)
        )
        self.display = ScaffoldResultDisplay(console=self.console)

    def execute(self) -> ScaffoldResult | None:
        """Execute the init command.

        Returns:
            ScaffoldResult | None: ``None`` when the user declined generation.
        """
        args = self.args if self.args.is_complete else self.form.complete(self.args)
        request = self._build_request(args)
        request.validate()

        if not args.quiet:
            render_project_summary(self.console, request)

        if not args.assume_yes and not self.form.confirm_generation():
            logger.info("Project generation cancelled")
            return None

        result = self.service.generate(request)
        self.display.show_success(result, quiet=args.quiet)
        return result

    @staticmethod
    def _build_request(args: InitArgs) -> ScaffoldRequest:
        if args.architecture is None:
            raise ConfigurationError("Architecture is required")
        return ScaffoldRequest(
            architecture=args.architecture,
            project_name=args.project_name or "",
            module_path=args.module_path or "",
            output_dir=args.output_dir,
            author=args.author,
            description=args.description,
        )


__all__ = ["InitCommand"]
