"""Tests for the immutable template registry."""

from __future__ import annotations

import pytest

from pickgo.features.templates.domain.models import ArchitectureType, TemplateDescriptor
from pickgo.features.templates.domain.registry import TemplateRegistry, default_registry
from pickgo.shared.errors import ConfigurationError, TemplateNotFoundError


def test_default_registry_covers_every_architecture() -> None:
    registry = default_registry()

    assert list(registry) == ["layered", "modular", "hexagonal"]
    for architecture in ArchitectureType:
        descriptor = registry.get_template(architecture)
        assert descriptor.identifier is architecture
        assert descriptor.repository == f"https://github.com/PickHD/go-{architecture.value}-template.git"
        assert descriptor.ref == "main"
        assert descriptor.structure
        assert descriptor.notes


def test_registry_is_read_only() -> None:
    registry = default_registry()

    with pytest.raises(TypeError):
        registry["onion"] = registry["layered"]  # type: ignore[index]


def test_unknown_template_raises_not_found() -> None:
    registry = default_registry()

    with pytest.raises(TemplateNotFoundError, match="Template not found for architecture type: onion"):
        _ = registry.get_template("onion")


def test_not_found_is_a_configuration_error() -> None:
    assert issubclass(TemplateNotFoundError, ConfigurationError)


def test_duplicate_identifiers_are_rejected() -> None:
    descriptor = TemplateDescriptor(
        identifier=ArchitectureType.LAYERED,
        name="Layered",
        description="",
        repository="https://example.com/layered.git",
    )

    with pytest.raises(ValueError, match="Duplicate template identifier"):
        _ = TemplateRegistry([descriptor, descriptor])
