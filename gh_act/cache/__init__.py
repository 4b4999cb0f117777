"""Cache module for gh-act."""

from gh_act.cache.base import BaseCacheManager
from gh_act.cache.store import ResponseCache, resource_key

__all__ = [
    "BaseCacheManager",
    "ResponseCache",
    "resource_key",
]
