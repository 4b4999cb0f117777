"""File-backed cache of GitHub API responses."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gh_act.cache.base import BaseCacheManager
from gh_act.core.constants import FormattingConstants, ResourceKind
from gh_act.exceptions import CacheError
from gh_act.models.cache import CacheEnvelope

logger = logging.getLogger(__name__)


def resource_key(account_name: str, kind: ResourceKind) -> str:
    """Build the cache key of one resource of an account, e.g. ``octocat.events``."""
    return f"{account_name}.{kind}"


class ResponseCache(BaseCacheManager[CacheEnvelope]):
    """Stores one JSON envelope file per resource key.

    Nothing is kept in memory between calls; every load reads the disk.
    """

    def path_for(self, key: str) -> Path:
        """Map a key to its file directly inside the cache directory.

        Raises:
            CacheError: If the key would place the file anywhere else
        """
        path = self.cache_path / f"{key}{FormattingConstants.CACHE_FILE_SUFFIX}"
        if path.resolve().parent != self.cache_path.resolve():
            raise CacheError(f"cache key {key!r} points outside {self.cache_path}")
        return path

    def load(self, key: str) -> CacheEnvelope | None:
        """Load a cached envelope.

        Missing, unreadable and malformed files all load as None.
        """
        path = self.path_for(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"Cache miss for {key}")
            return None
        except OSError as e:
            logger.debug(f"Cache file {path} could not be read: {e}")
            return None

        try:
            envelope = CacheEnvelope.model_validate_json(raw)
        except ValidationError as e:
            logger.debug(f"Ignoring corrupt cache file {path}: {e.error_count()} validation errors")
            return None

        logger.debug(f"Cache hit for {key} (etag={envelope.etag})")
        return envelope

    def save(self, key: str, data: CacheEnvelope) -> None:
        """Write an envelope, replacing any previous one in a single rename."""
        self.ensure_dir()
        path = self.path_for(key)

        fd, tmp = tempfile.mkstemp(dir=self.cache_path, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data.model_dump_json())
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

        logger.debug(f"Cached {key} at {path}")

    def store(self, key: str, payload: Any, etag: str | None) -> CacheEnvelope:
        """Wrap ``payload`` and its revalidation tag in an envelope and save it."""
        envelope = CacheEnvelope(data=payload, etag=etag)
        self.save(key, envelope)
        return envelope

    def evict(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        logger.info(f"Evicted cache entry {key}")
        return True
