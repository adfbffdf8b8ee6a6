"""Application service for generating projects from cached templates.

This layer wires the template cache, the git fetcher and the identity
rewriter together so the CLI only deals with requests and results.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import final

from pickgo.config.config import Config
from pickgo.config.paths import default_cache_dir
from pickgo.config.settings import MANIFEST_FILE_NAME
from pickgo.features.identity import (
    RewriteReport,
    extract_declared_identity,
    rewrite_imports,
    set_declared_identity,
)
from pickgo.features.templates import (
    ArchitectureType,
    JsonCacheStore,
    RefreshSummary,
    TemplateDescriptor,
    TemplateProvider,
    TemplateRegistry,
    copy_tree,
    default_registry,
)
from pickgo.features.templates.usecases.ports import CacheStorePort, RemoteFetcherPort
from pickgo.platform.git import GitClient
from pickgo.platform.logging import logger
from pickgo.shared.errors import (
    ConfigurationError,
    FetchError,
    FilesystemError,
    NotCachedError,
)


@dataclass(frozen=True)
class ScaffoldRequest:
    """Input parameters for generating one project.

    Attributes:
        architecture: Template to generate from.
        project_name: Directory name of the new project.
        module_path: Module identity written to ``go.mod`` and every import.
        output_dir: Parent directory of the new project.
        author: Optional author shown in the summary.
        description: Optional project description shown in the summary.
    """

    architecture: ArchitectureType
    project_name: str
    module_path: str
    output_dir: Path = Path(".")
    author: str | None = None
    description: str | None = None

    @property
    def project_path(self) -> Path:
        """Absolute location of the generated project."""

        return (self.output_dir.expanduser() / self.project_name).resolve()

    def validate(self) -> None:
        """Reject requests that cannot produce a usable project.

        Raises:
            ConfigurationError: If the name or module path is missing or malformed.
        """
        if not self.project_name.strip():
            raise ConfigurationError("Project name is required")
        if any(sep in self.project_name for sep in ("/", "\\")):
            raise ConfigurationError(
                f"Project name must be a single directory name: {self.project_name}"
            )
        if not self.module_path.strip():
            raise ConfigurationError("Module path is required")
        if "/" not in self.module_path:
            raise ConfigurationError(
                f"Module path should be a valid Go module path (e.g. github.com/user/project): "
                f"{self.module_path}"
            )
        if any(char.isspace() for char in self.module_path.strip()):
            raise ConfigurationError(f"Module path must not contain whitespace: {self.module_path}")


@dataclass(frozen=True)
class ScaffoldResult:
    """Outcome of a successful generation."""

    project_path: Path
    template: TemplateDescriptor
    files_copied: int
    old_identity: str
    new_identity: str
    rewrite_report: RewriteReport | None

    @property
    def identity_changed(self) -> bool:
        return self.old_identity != self.new_identity


@dataclass(frozen=True)
class TemplateStatus:
    """Cache state of one registered template."""

    descriptor: TemplateDescriptor
    storage_path: Path
    cached: bool
    fresh: bool
    age: timedelta | None


@dataclass(frozen=True)
class CacheInfo:
    """Summary of the template cache root."""

    cache_dir: Path
    size_bytes: int
    templates: list[TemplateStatus]


@final
class ScaffoldService:
    """Orchestrate fetch, copy and identity rewrite for new projects."""

    def __init__(
        self,
        *,
        config: Config | None = None,
        registry: TemplateRegistry | None = None,
        cache_factory: Callable[[Path], CacheStorePort] | None = None,
        fetcher: RemoteFetcherPort | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests inject a fake fetcher and a temporary cache root; production code
        relies on ``GitClient`` and ``JsonCacheStore``.
        """

        self._config = config or Config.load()
        self._registry = registry or default_registry()
        self._env: Mapping[str, str] = env if env is not None else os.environ
        factory: Callable[[Path], CacheStorePort] = cache_factory or JsonCacheStore
        self._cache = factory(self.cache_dir)
        self._provider = TemplateProvider(
            cache=self._cache,
            fetcher=fetcher or GitClient(),
            logger=logger,
        )

    @property
    def registry(self) -> TemplateRegistry:
        return self._registry

    @property
    def cache_dir(self) -> Path:
        return self._config.cache_dir or default_cache_dir()

    def credential(self) -> str | None:
        """Return the access token from the configured environment variable."""

        value = self._env.get(self._config.token_env_var, "").strip()
        return value or None

    def generate(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Create a new project for ``request``.

        Raises:
            ConfigurationError: If the request is invalid or the template lacks
                a module declaration.
            FilesystemError: If the destination exists or copying fails; a
                failed copy leaves a partially populated destination.
            FetchError: If the template cannot be downloaded.
        """
        request.validate()
        project_path = request.project_path
        if project_path.exists():
            raise FilesystemError("Destination already exists", project_path)

        descriptor = self._registry.get_template(request.architecture)
        source = self._ensure_template(descriptor)

        try:
            files_copied = copy_tree(source, project_path, logger=logger)
        except FilesystemError:
            if project_path.exists():
                logger.error("Project directory left partially populated: %s", project_path)
            raise

        manifest = project_path / MANIFEST_FILE_NAME
        old_identity = extract_declared_identity(manifest)
        set_declared_identity(manifest, request.module_path)

        report: RewriteReport | None = None
        if old_identity != request.module_path:
            report = rewrite_imports(
                project_path, old_identity, request.module_path, logger=logger
            )

        return ScaffoldResult(
            project_path=project_path,
            template=descriptor,
            files_copied=files_copied,
            old_identity=old_identity,
            new_identity=request.module_path,
            rewrite_report=report,
        )

    def template_statuses(self) -> list[TemplateStatus]:
        """Report cache state for every registered template."""

        statuses: list[TemplateStatus] = []
        for descriptor in self._registry.descriptors():
            storage_path = self._provider.storage_path(descriptor)
            try:
                age: timedelta | None = self._cache.age(descriptor.key)
            except NotCachedError:
                age = None
            statuses.append(
                TemplateStatus(
                    descriptor=descriptor,
                    storage_path=storage_path,
                    cached=age is not None and storage_path.is_dir(),
                    fresh=self._cache.is_fresh(descriptor.key),
                    age=age,
                )
            )
        return statuses

    def update_templates(
        self, architectures: Iterable[ArchitectureType] | None = None
    ) -> RefreshSummary:
        """Force-fetch ``architectures`` (all templates when omitted)."""

        if architectures is None:
            descriptors = self._registry.descriptors()
        else:
            descriptors = [self._registry.get_template(arch) for arch in architectures]
        return self._provider.refresh_all(descriptors, self.credential())

    def cache_info(self) -> CacheInfo:
        return CacheInfo(
            cache_dir=self.cache_dir,
            size_bytes=self._cache.size_bytes(),
            templates=self.template_statuses(),
        )

    def clear_cache(self, architecture: ArchitectureType | None = None) -> None:
        """Invalidate one template, or the whole cache when none is given."""

        if architecture is None:
            self._cache.invalidate_all()
            return
        descriptor = self._registry.get_template(architecture)
        self._cache.invalidate(descriptor.key)

    def _ensure_template(self, descriptor: TemplateDescriptor) -> Path:
        try:
            return self._provider.ensure_cached(descriptor, self.credential())
        except FetchError:
            # Drop half-written checkouts so the next run starts clean.
            self._cache.invalidate(descriptor.key)
            raise


__all__ = [
    "CacheInfo",
    "ScaffoldRequest",
    "ScaffoldResult",
    "ScaffoldService",
    "TemplateStatus",
]
