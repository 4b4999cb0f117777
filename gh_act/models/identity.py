"""Resolved GitHub account identity."""

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from gh_act.core.constants import API_BASE_URL

# URL templates carry optional segments such as "{/privacy}"
_URL_TEMPLATE_PLACEHOLDER = re.compile(r"\{.*\}")


class AccountKind(StrEnum):
    """Namespaces an account name can belong to."""

    ORGANIZATION = "Organization"
    USER = "User"

    @property
    def endpoint(self) -> str:
        return "orgs" if self is AccountKind.ORGANIZATION else "users"

    def lookup_url(self, account_name: str) -> str:
        """Get the REST URL that describes ``account_name`` in this namespace."""
        return f"{API_BASE_URL}/{self.endpoint}/{account_name}"


class Identity(BaseModel):
    """An account name resolved to an organization or a user."""

    kind: AccountKind
    account_name: str
    feed_url: str
    payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_payload(cls, account_name: str, payload: dict[str, Any], resolved_as: AccountKind) -> "Identity":
        """Build an identity from an organization or user API payload.

        Args:
            account_name: Account name as supplied by the caller
            payload: JSON object returned by the lookup endpoint
            resolved_as: Namespace whose endpoint produced the payload

        Returns:
            Identity with a concrete activity feed URL

        """
        kind = resolved_as
        if payload.get("type") in AccountKind._value2member_map_:
            kind = AccountKind(payload["type"])

        events_url = payload.get("events_url") or f"{resolved_as.lookup_url(account_name)}/events"
        return cls(
            kind=kind,
            account_name=account_name,
            feed_url=_URL_TEMPLATE_PLACEHOLDER.sub("", events_url),
            payload=payload,
        )
