"""Base cache class for all cache implementations."""

import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from gh_act.exceptions import CacheError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseCacheManager(ABC, Generic[T]):
    """Abstract base class for cache managers rooted at one directory."""

    def __init__(self, cache_dir: Path) -> None:
        """Initialize cache manager.

        Args:
            cache_dir: Root directory of the cache namespace
        """
        self.cache_path = Path(cache_dir)
        logger.debug(f"Using cache at {self.cache_path}")

    def ensure_dir(self) -> None:
        """Create the cache directory if it does not exist yet."""
        self.cache_path.mkdir(parents=True, exist_ok=True)

    def purge_all(self) -> None:
        """Remove the whole cache directory.

        Raises:
            CacheError: If the directory exists but cannot be removed
        """
        try:
            shutil.rmtree(self.cache_path)
            logger.info(f"Removed cache directory {self.cache_path}")
        except FileNotFoundError:
            logger.debug(f"Cache directory {self.cache_path} does not exist")
        except OSError as e:
            raise CacheError(f"unable to remove cache directory {self.cache_path}: {e}") from e

    @abstractmethod
    def save(self, key: str, data: T) -> None:
        """Save data to cache.

        Args:
            key: Cache key
            data: Data to cache
        """
        pass

    @abstractmethod
    def load(self, key: str) -> T | None:
        """Load data from cache.

        Args:
            key: Cache key

        Returns:
            Cached data or None if not found
        """
        pass

    @abstractmethod
    def evict(self, key: str) -> bool:
        """Delete a specific cache item.

        Args:
            key: Cache key to delete

        Returns:
            True if item was deleted, False if not found
        """
        pass
