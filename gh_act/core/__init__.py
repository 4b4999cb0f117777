"""Core functionality module."""

from gh_act.core.constants import FormattingConstants, ResourceKind
from gh_act.core.events import EVENT_DESCRIPTIONS, EventType

__all__ = [
    "EVENT_DESCRIPTIONS",
    "EventType",
    "FormattingConstants",
    "ResourceKind",
]
