"""Tests for the templates command."""

from datetime import timedelta
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from pickgo.application.services.scaffold_service import ScaffoldService, TemplateStatus
from pickgo.features.templates.domain.models import ArchitectureType
from pickgo.features.templates.domain.registry import default_registry
from pickgo.features.templates.usecases.provider import RefreshSummary
from pickgo.ui.cli.args.options import TemplatesListArgs, TemplatesUpdateArgs
from pickgo.ui.cli.commands import TemplatesCommand


@pytest.fixture
def service(mocker: MockerFixture) -> MagicMock:
    return mocker.create_autospec(ScaffoldService, instance=True)


def _run(args: TemplatesListArgs | TemplatesUpdateArgs, service: MagicMock) -> tuple[bool, str]:
    buffer = StringIO()
    command = TemplatesCommand(
        args,
        service_factory=lambda: service,
        console=Console(file=buffer, force_terminal=False, width=240),
    )
    succeeded = command.execute()
    return succeeded, buffer.getvalue()


def test_list_renders_table(service: MagicMock) -> None:
    registry = default_registry()
    service.template_statuses.return_value = [
        TemplateStatus(
            descriptor=registry.get_template(ArchitectureType.LAYERED),
            storage_path=Path("/cache/layered"),
            cached=True,
            fresh=True,
            age=timedelta(hours=2, minutes=10),
        ),
        TemplateStatus(
            descriptor=registry.get_template(ArchitectureType.MODULAR),
            storage_path=Path("/cache/modular"),
            cached=True,
            fresh=False,
            age=timedelta(days=3),
        ),
        TemplateStatus(
            descriptor=registry.get_template(ArchitectureType.HEXAGONAL),
            storage_path=Path("/cache/hexagonal"),
            cached=False,
            fresh=False,
            age=None,
        ),
    ]

    succeeded, output = _run(
        TemplatesListArgs(command="templates", action="list", verbose=False, quiet=False),
        service,
    )

    assert succeeded
    assert "Available Templates" in output
    assert "2h 10m" in output
    assert "stale" in output
    assert "not cached" in output


def test_update_reports_each_template(service: MagicMock) -> None:
    service.update_templates.return_value = RefreshSummary(
        refreshed=["layered"], failures={"modular": "auth required"}
    )
    args = TemplatesUpdateArgs(
        command="templates",
        action="update",
        verbose=False,
        quiet=False,
        architectures=[ArchitectureType.LAYERED, ArchitectureType.MODULAR],
    )

    succeeded, output = _run(args, service)

    assert not succeeded
    service.update_templates.assert_called_once_with(
        [ArchitectureType.LAYERED, ArchitectureType.MODULAR]
    )
    assert "✓ layered updated" in output
    assert "✗ modular: auth required" in output


def test_update_without_selection_updates_all(service: MagicMock) -> None:
    service.update_templates.return_value = RefreshSummary(refreshed=["layered"])
    args = TemplatesUpdateArgs(command="templates", action="update", verbose=False, quiet=True)

    succeeded, output = _run(args, service)

    assert succeeded
    service.update_templates.assert_called_once_with(None)
    assert output == ""
