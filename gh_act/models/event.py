"""GitHub activity event models."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gh_act.core.events import EventType
from gh_act.models.identity import Identity


def _capitalize(value: Any) -> str:
    text = str(value or "")
    return text[:1].upper() + text[1:]


def _describe_create(event: "ActivityEvent") -> str:
    ref_type = event.payload.get("ref_type")
    if ref_type == "repository":
        return f"Created repository {event.repo_name}"
    return f"Created {ref_type} {event.payload.get('ref')} in repository {event.repo_name}"


def _describe_push(event: "ActivityEvent") -> str:
    size = event.payload.get("size", 0)
    return f"Pushed {size} commit{'' if size == 1 else 's'} to repository {event.repo_name}"


# Sentence templates keyed by event type
_PHRASES: dict[str, Callable[["ActivityEvent"], str]] = {
    EventType.COMMIT_COMMENT: lambda e: f"{e.action} a commit comment in repository {e.repo_name}",
    EventType.CREATE: _describe_create,
    EventType.DELETE: lambda e: (
        f"Deleted {e.payload.get('ref_type')} {e.payload.get('ref')} in repository {e.repo_name}"
    ),
    EventType.FORK: lambda e: f"Forked repository {e.repo_name}",
    EventType.GOLLUM: lambda e: f"Created or Updated a Wiki page for repository {e.repo_name}",
    EventType.ISSUE_COMMENT: lambda e: f"{e.action} a comment on an issue in repository {e.repo_name}",
    EventType.ISSUES: lambda e: f"{e.action} an issue in repository {e.repo_name}",
    EventType.MEMBER: lambda e: (
        f"Added a member to or edited a member permissions for collaborators of repository {e.repo_name}"
    ),
    EventType.PUBLIC: lambda e: f"Private repository {e.repo_name} is made public.",
    EventType.PULL_REQUEST: lambda e: f"{e.action} a pull request in repository {e.repo_name}",
    EventType.PULL_REQUEST_REVIEW: lambda e: f"{e.action} a pull request review in repository {e.repo_name}",
    EventType.PULL_REQUEST_REVIEW_COMMENT: lambda e: (
        f"{e.action} a pull request review comment in repository {e.repo_name}"
    ),
    EventType.PULL_REQUEST_REVIEW_THREAD: lambda e: (
        f"{e.action} a pull request review thread in repository {e.repo_name}"
    ),
    EventType.PUSH: _describe_push,
    EventType.RELEASE: lambda e: f"{e.action} repository {e.repo_name}",
    EventType.SPONSORSHIP: lambda e: f"SponsorshipEvent pertaining to {e.repo_name}",
    EventType.WATCH: lambda e: f"Starred repository {e.repo_name}",
}


class ActivityEvent(BaseModel):
    """A single record of the public events feed.

    Nested records and fields not modelled here are passed through as
    returned by the API.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: str
    actor: dict[str, Any] = Field(default_factory=dict)
    repo: dict[str, Any] = Field(default_factory=dict)
    org: dict[str, Any] = Field(default_factory=dict)
    payload: dict[str, Any] = Field(default_factory=dict)
    is_public: bool = Field(default=True, alias="public")
    created_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Accept numeric ids; they are opaque strings everywhere else."""
        return str(v) if isinstance(v, int) else v

    @field_validator("actor", "repo", "org", "payload", mode="before")
    @classmethod
    def default_missing_record(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def repo_name(self) -> str:
        return str(self.repo.get("name", ""))

    @property
    def action(self) -> str:
        return _capitalize(self.payload.get("action"))

    @property
    def phrase(self) -> str:
        """Describe the event as a sentence; unknown kinds yield an empty string."""
        describe = _PHRASES.get(self.type)
        return describe(self) if describe else ""

    def to_row(self) -> dict[str, Any]:
        """Flatten the event for tabular output."""
        return {
            "id": self.id,
            "type": self.type,
            "created_at": self.created_at or "",
            "repo": self.repo_name,
            "actor": self.actor.get("login", ""),
            "description": self.phrase,
        }


class ActivityFeed(BaseModel):
    """Result of a full pipeline run: the resolved identity and its events, newest first."""

    identity: Identity
    events: list[ActivityEvent] = Field(default_factory=list)

    def filter_by_type(self, event_type: str | None) -> list[ActivityEvent]:
        if not event_type:
            return list(self.events)
        return [event for event in self.events if event.type == event_type]
