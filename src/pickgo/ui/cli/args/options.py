"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final

from pickgo.features.templates.domain.models import ArchitectureType


@final
@dataclass(slots=True)
class InitArgs:
    """Command line arguments for the ``init`` subcommand.

    ``architecture``, ``project_name`` and ``module_path`` stay ``None`` when
    omitted so the interactive form can ask for them.
    """

    command: Literal["init"]
    architecture: ArchitectureType | None
    project_name: str | None
    module_path: str | None
    output_dir: Path
    author: str | None
    description: str | None
    assume_yes: bool
    verbose: bool
    quiet: bool

    @property
    def is_complete(self) -> bool:
        return bool(self.architecture and self.project_name and self.module_path)


@final
@dataclass(slots=True)
class TemplatesListArgs:
    """Command line arguments for ``templates list``."""

    command: Literal["templates"]
    action: Literal["list"]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TemplatesUpdateArgs:
    """Command line arguments for ``templates update``."""

    command: Literal["templates"]
    action: Literal["update"]
    verbose: bool
    quiet: bool
    architectures: list[ArchitectureType] = field(default_factory=list)


@final
@dataclass(slots=True)
class CacheInfoArgs:
    """Command line arguments for ``cache info``."""

    command: Literal["cache"]
    action: Literal["info"]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class CacheClearArgs:
    """Command line arguments for ``cache clear``."""

    command: Literal["cache"]
    action: Literal["clear"]
    verbose: bool
    quiet: bool
    architecture: ArchitectureType | None = None


CLIArgs = InitArgs | TemplatesListArgs | TemplatesUpdateArgs | CacheInfoArgs | CacheClearArgs

__all__ = [
    "CLIArgs",
    "CacheClearArgs",
    "CacheInfoArgs",
    "InitArgs",
    "TemplatesListArgs",
    "TemplatesUpdateArgs",
]
