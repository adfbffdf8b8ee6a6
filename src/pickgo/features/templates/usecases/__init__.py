"""Use cases for fetching, caching and copying templates."""

from .ports import CacheStorePort, RemoteFetcherPort
from .provider import FetchPath, RefreshSummary, TemplateProvider
from .tree_copier import copy_tree

__all__ = [
    "CacheStorePort",
    "FetchPath",
    "RefreshSummary",
    "RemoteFetcherPort",
    "TemplateProvider",
    "copy_tree",
]
