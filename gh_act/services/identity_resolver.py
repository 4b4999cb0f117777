"""Resolution of an account name to a GitHub organization or user."""

import logging
from typing import Any

from pydantic import BaseModel

from gh_act.api.client import GitHubClient
from gh_act.exceptions import AccountNotFoundError
from gh_act.models.cache import CacheEnvelope
from gh_act.models.fetch import Failure, Fresh, NotModified
from gh_act.models.identity import AccountKind, Identity

logger = logging.getLogger(__name__)

# Organizations are tried before users; the two namespaces never overlap.
RESOLUTION_ORDER = (AccountKind.ORGANIZATION, AccountKind.USER)


class IdentityResolution(BaseModel):
    """A resolved identity and whether it came from a fresh response."""

    identity: Identity
    modified: bool
    etag: str | None = None


class IdentityResolver:
    """Service that finds which namespace an account name belongs to."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize identity resolver.

        Args:
            client: Open API client used for the lookups
        """
        self.client = client

    def resolve(self, account_name: str, cached: CacheEnvelope | None = None) -> IdentityResolution:
        """Resolve an account name, revalidating a cached identity when one exists.

        Args:
            account_name: Account name, case preserved
            cached: Previously cached identity payload and its revalidation tag

        Returns:
            The resolution. When the server answers "not modified" the cached
            payload is used verbatim.

        Raises:
            AccountNotFoundError: If no namespace produced a usable identity.
                ``details["transient"]`` is True when at least one lookup failed
                without a definitive answer from the server.
        """
        etag = cached.etag if cached else None
        failures: dict[str, Failure] = {}

        for kind in RESOLUTION_ORDER:
            result = self.client.fetch(kind.lookup_url(account_name), etag)

            if isinstance(result, NotModified):
                if cached is None:
                    failures[kind] = Failure(status_code=304, body="not modified without a cached identity")
                    continue
                logger.debug(f"Cached identity for {account_name} is current")
                return IdentityResolution(
                    identity=Identity.from_payload(account_name, cached.data, kind),
                    modified=False,
                    etag=cached.etag,
                )

            if isinstance(result, Fresh):
                if not isinstance(result.payload, dict) or not result.payload:
                    failures[kind] = Failure(status_code=200, body="malformed identity payload")
                    continue
                logger.info(f"Resolved {account_name} as {kind}")
                return IdentityResolution(
                    identity=Identity.from_payload(account_name, result.payload, kind),
                    modified=True,
                    etag=result.etag,
                )

            logger.debug(f"{kind} lookup for {account_name} failed: {result.describe()}")
            failures[kind] = result

        raise AccountNotFoundError(account_name, details=self._failure_details(failures))

    @staticmethod
    def _failure_details(failures: dict[str, Failure]) -> dict[str, Any]:
        return {
            "failures": {str(kind): failure.describe() for kind, failure in failures.items()},
            "transient": any(failure.transient for failure in failures.values()),
        }
