"""Cache-related data models."""

import time
from typing import Any

from pydantic import BaseModel, Field


class CacheEnvelope(BaseModel):
    """A cached payload and the revalidation tag it was served with.

    The tag lives beside the payload, never inside it, so object and
    list payloads are stored the same way.
    """

    data: Any
    etag: str | None = None
    cached_at: float = Field(default_factory=time.time)
