"""Domain models for architecture templates."""

from .models import ArchitectureType, CacheEntry, TemplateDescriptor
from .registry import TemplateRegistry, default_registry

__all__ = [
    "ArchitectureType",
    "CacheEntry",
    "TemplateDescriptor",
    "TemplateRegistry",
    "default_registry",
]
