"""Tests for the cache command."""

from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from pickgo.application.services.scaffold_service import CacheInfo, ScaffoldService, TemplateStatus
from pickgo.features.templates.domain.models import ArchitectureType
from pickgo.features.templates.domain.registry import default_registry
from pickgo.ui.cli.args.options import CacheClearArgs, CacheInfoArgs
from pickgo.ui.cli.commands import CacheCommand


@pytest.fixture
def service(mocker: MockerFixture) -> MagicMock:
    return mocker.create_autospec(ScaffoldService, instance=True)


def _run(args: CacheInfoArgs | CacheClearArgs, service: MagicMock) -> str:
    buffer = StringIO()
    command = CacheCommand(
        args,
        service_factory=lambda: service,
        console=Console(file=buffer, force_terminal=False, width=200),
    )
    assert command.execute()
    return buffer.getvalue()


def test_info_shows_location_size_and_templates(service: MagicMock) -> None:
    descriptor = default_registry().get_template(ArchitectureType.HEXAGONAL)
    service.cache_info.return_value = CacheInfo(
        cache_dir=Path("/cache/pickgo"),
        size_bytes=2048,
        templates=[
            TemplateStatus(
                descriptor=descriptor,
                storage_path=Path("/cache/pickgo/hexagonal"),
                cached=False,
                fresh=False,
                age=None,
            )
        ],
    )

    output = _run(CacheInfoArgs(command="cache", action="info", verbose=False, quiet=False), service)

    assert "Cache directory: /cache/pickgo" in output
    assert "Size: 2.0 KiB" in output
    assert "hexagonal: not cached" in output


def test_clear_single_template(service: MagicMock) -> None:
    args = CacheClearArgs(
        command="cache",
        action="clear",
        verbose=False,
        quiet=False,
        architecture=ArchitectureType.MODULAR,
    )

    output = _run(args, service)

    service.clear_cache.assert_called_once_with(ArchitectureType.MODULAR)
    assert "Cleared cache for modular" in output


def test_clear_everything(service: MagicMock) -> None:
    output = _run(CacheClearArgs(command="cache", action="clear", verbose=False, quiet=False), service)

    service.clear_cache.assert_called_once_with(None)
    assert "Cleared cache for all templates" in output
