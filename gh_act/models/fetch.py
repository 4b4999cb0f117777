"""Outcome types for a single conditional API request."""

from typing import Any, Literal

from pydantic import BaseModel

from gh_act.core.constants import APIConstants


class Fresh(BaseModel):
    """The server sent a new representation of the resource."""

    kind: Literal["fresh"] = "fresh"
    payload: Any
    etag: str | None = None


class NotModified(BaseModel):
    """The server confirmed the cached representation is current (HTTP 304)."""

    kind: Literal["not_modified"] = "not_modified"


class Failure(BaseModel):
    """The request failed.

    ``status_code`` is None when no HTTP response was received at all.
    """

    kind: Literal["failure"] = "failure"
    status_code: int | None = None
    body: Any = None

    @property
    def transient(self) -> bool:
        """True for failures that say nothing about whether the resource exists."""
        return self.status_code is None or self.status_code >= APIConstants.HTTP_SERVER_ERROR

    def describe(self) -> str:
        status = "no response" if self.status_code is None else f"HTTP {self.status_code}"
        message = self.body.get("message") if isinstance(self.body, dict) else self.body
        return f"{status}: {message}" if message else status


FetchResult = Fresh | NotModified | Failure
