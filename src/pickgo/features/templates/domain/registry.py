"""
Summary: Immutable lookup table mapping architecture identifiers to template descriptors.
Why: Build the registry once at startup and pass it by reference instead of sharing mutable globals.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import final

from pickgo.shared.errors import TemplateNotFoundError

from .models import ArchitectureType, TemplateDescriptor


@final
class TemplateRegistry(Mapping[str, TemplateDescriptor]):
    """Read-only mapping of template key to descriptor, in registration order."""

    __slots__ = ("_templates",)

    _templates: Mapping[str, TemplateDescriptor]

    def __init__(self, descriptors: Iterable[TemplateDescriptor]) -> None:
        templates: dict[str, TemplateDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.key in templates:
                raise ValueError(f"Duplicate template identifier: {descriptor.key}")
            templates[descriptor.key] = descriptor
        self._templates = MappingProxyType(templates)

    def __getitem__(self, key: str) -> TemplateDescriptor:
        return self._templates[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def get_template(self, identifier: ArchitectureType | str) -> TemplateDescriptor:
        """Return the descriptor for ``identifier``.

        Raises:
            TemplateNotFoundError: If no template is registered for it.
        """
        key = identifier.value if isinstance(identifier, ArchitectureType) else identifier
        try:
            return self._templates[key]
        except KeyError:
            raise TemplateNotFoundError(key) from None

    def descriptors(self) -> list[TemplateDescriptor]:
        return list(self._templates.values())


def default_registry() -> TemplateRegistry:
    """Build the registry of the built-in Go architecture templates."""

    return TemplateRegistry(
        [
            TemplateDescriptor(
                identifier=ArchitectureType.LAYERED,
                name="Layered Architecture Template",
                description=(
                    "Traditional layered architecture with clear separation between "
                    "presentation, business logic, and data layers"
                ),
                repository="https://github.com/PickHD/go-layered-template.git",
                ref="main",
                structure=(
                    "cmd/",
                    "internal/domain/",
                    "internal/presentation/http/",
                    "internal/infrastructure/database/",
                    "internal/infrastructure/cache/",
                    "pkg/",
                    "configs/",
                    "docs/",
                ),
                notes=(
                    "Presentation layer is in /internal/presentation",
                    "Business logic is in /internal/domain",
                    "Data access is in /internal/infrastructure",
                ),
            ),
            TemplateDescriptor(
                identifier=ArchitectureType.MODULAR,
                name="Modular Architecture Template",
                description="Modular monolithic architecture with domain-driven design principles",
                repository="https://github.com/PickHD/go-modular-template.git",
                ref="main",
                structure=(
                    "cmd/",
                    "internal/modules/",
                    "internal/shared/",
                    "internal/shared/domain/",
                    "internal/shared/infrastructure/",
                    "pkg/",
                    "configs/",
                    "docs/",
                ),
                notes=(
                    "Each module is self-contained in /internal/modules",
                    "Shared code is in /internal/shared",
                    "Follow DDD principles for module boundaries",
                ),
            ),
            TemplateDescriptor(
                identifier=ArchitectureType.HEXAGONAL,
                name="Hexagonal Architecture Template",
                description=(
                    "Hexagonal architecture (ports and adapters) with isolation of core "
                    "logic from external concerns"
                ),
                repository="https://github.com/PickHD/go-hexagonal-template.git",
                ref="main",
                structure=(
                    "cmd/",
                    "internal/domain/",
                    "internal/ports/",
                    "internal/adapters/",
                    "pkg/",
                    "configs/",
                    "docs/",
                ),
                notes=(
                    "Domain logic is in /internal/domain",
                    "Ports are in /internal/ports",
                    "Adapters are in /internal/adapters",
                ),
            ),
        ]
    )


__all__ = ["TemplateRegistry", "default_registry"]
