# Where: pickgo.features.templates.__init__
# What: Expose template registry, cache and provider entry points.
# Why: Give the application layer one import surface for template handling.

from .adapters import JsonCacheStore
from .domain import (
    ArchitectureType,
    CacheEntry,
    TemplateDescriptor,
    TemplateRegistry,
    default_registry,
)
from .usecases import (
    CacheStorePort,
    FetchPath,
    RefreshSummary,
    RemoteFetcherPort,
    TemplateProvider,
    copy_tree,
)

__all__ = [
    "ArchitectureType",
    "CacheEntry",
    "CacheStorePort",
    "FetchPath",
    "JsonCacheStore",
    "RefreshSummary",
    "RemoteFetcherPort",
    "TemplateDescriptor",
    "TemplateProvider",
    "TemplateRegistry",
    "copy_tree",
    "default_registry",
]
