"""Two-stage fetch pipeline: resolve the account, then fetch its activity feed."""

import logging
import re
from collections.abc import Callable
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from gh_act.api.client import GitHubClient
from gh_act.cache.store import ResponseCache, resource_key
from gh_act.config import Config
from gh_act.core.constants import ACCOUNT_NAME_PATTERN, ResourceKind
from gh_act.exceptions import AccountNotFoundError, CredentialMissingError, FeedUnavailableError
from gh_act.models.cache import CacheEnvelope
from gh_act.models.event import ActivityEvent, ActivityFeed
from gh_act.models.fetch import Fresh, NotModified
from gh_act.models.identity import AccountKind, Identity
from gh_act.services.identity_resolver import IdentityResolver

logger = logging.getLogger(__name__)

_EVENTS = TypeAdapter(list[ActivityEvent])
_ACCOUNT_NAME = re.compile(ACCOUNT_NAME_PATTERN)


def check_account_name(account_name: str) -> None:
    """Reject names GitHub cannot issue before they reach a URL or a cache file name.

    Raises:
        AccountNotFoundError: If the name is not a valid login
    """
    if not _ACCOUNT_NAME.fullmatch(account_name):
        raise AccountNotFoundError(account_name, details={"reason": "invalid account name"})


class FetchPipeline:
    """Resolves an account and fetches its events, reusing cached responses.

    Each stage loads its cache entry, makes a conditional request with the
    cached revalidation tag and then either persists the fresh payload,
    keeps the cached one, or evicts it when the server says it is gone.
    Transient failures (no response, 5xx) fall back to a cached payload
    when there is one and leave it in place.
    """

    def __init__(self, config: Config, client: GitHubClient, cache: ResponseCache | None = None) -> None:
        """Initialize the pipeline.

        Args:
            config: Application configuration
            client: Open API client
            cache: Response cache; built from ``config.cache_dir`` when omitted.
                Ignored when caching is disabled.

        Raises:
            CredentialMissingError: In test mode when no token is configured
        """
        if config.test_mode and config.token is None:
            raise CredentialMissingError()

        self.config = config
        self.client = client
        self.resolver = IdentityResolver(client)
        self.cache: ResponseCache | None = None
        if config.cache_enabled:
            self.cache = cache or ResponseCache(config.cache_dir)

    def run(self, account_name: str) -> ActivityFeed:
        """Run both stages for one account.

        Raises:
            AccountNotFoundError: If the account cannot be resolved
            FeedUnavailableError: If the activity feed cannot be fetched
        """
        if self.cache:
            self.cache.ensure_dir()

        identity = self.resolve_identity(account_name)
        events = self.fetch_feed(identity)
        return ActivityFeed(identity=identity, events=events)

    def resolve_identity(self, account_name: str) -> Identity:
        """Resolve ``account_name`` to an organization or user identity."""
        check_account_name(account_name)
        key = resource_key(account_name, ResourceKind.IDENTITY)
        cached = self._load(key, self._valid_identity)

        try:
            resolution = self.resolver.resolve(account_name, cached)
        except AccountNotFoundError as e:
            if cached and e.details.get("transient"):
                logger.warning(f"Using cached identity for {account_name}: {e.details.get('failures')}")
                return Identity.from_payload(account_name, cached.data, AccountKind.USER)
            self._evict(key)
            raise

        if resolution.modified and self.cache:
            self.cache.store(key, resolution.identity.payload, resolution.etag)
        return resolution.identity

    def fetch_feed(self, identity: Identity) -> list[ActivityEvent]:
        """Fetch the activity feed of a resolved identity, newest first."""
        account_name = identity.account_name
        check_account_name(account_name)
        key = resource_key(account_name, ResourceKind.FEED)
        cached = self._load(key, self._valid_feed)

        result = self.client.fetch(identity.feed_url, cached.etag if cached else None)

        if isinstance(result, NotModified):
            if cached is None:
                raise FeedUnavailableError(account_name, details={"failure": "not modified without a cached feed"})
            logger.debug(f"Cached events for {account_name} are current")
            return _EVENTS.validate_python(cached.data)

        if isinstance(result, Fresh):
            try:
                events = _EVENTS.validate_python(result.payload)
            except ValidationError as e:
                logger.warning(f"Malformed events payload for {account_name}: {e.error_count()} errors")
                self._evict(key)
                raise FeedUnavailableError(account_name, details={"reason": "malformed payload"}) from None

            if self.cache:
                self.cache.store(key, result.payload, result.etag)
            logger.info(f"Fetched {len(events)} events for {account_name}")
            return events

        if cached and result.transient:
            logger.warning(f"Using cached events for {account_name}: {result.describe()}")
            return _EVENTS.validate_python(cached.data)

        self._evict(key)
        raise FeedUnavailableError(account_name, details={"failure": result.describe()})

    def _load(self, key: str, is_valid: Callable[[Any], bool]) -> CacheEnvelope | None:
        """Load a cache entry, treating payloads of the wrong shape as absent."""
        if not self.cache:
            return None
        envelope = self.cache.load(key)
        if envelope is None:
            return None
        if not is_valid(envelope.data):
            logger.debug(f"Ignoring cache entry {key} with unexpected payload shape")
            return None
        return envelope

    def _evict(self, key: str) -> None:
        if self.cache:
            self.cache.evict(key)

    @staticmethod
    def _valid_identity(data: Any) -> bool:
        return isinstance(data, dict) and bool(data)

    @staticmethod
    def _valid_feed(data: Any) -> bool:
        try:
            _EVENTS.validate_python(data)
        except ValidationError:
            return False
        return True


def fetch_activity(account_name: str, config: Config, session: requests.Session | None = None) -> ActivityFeed:
    """Run the full pipeline for one account with a client scoped to the call."""
    with GitHubClient(config, session=session) as client:
        return FetchPipeline(config, client).run(account_name)


def run_fetch_pipeline(
    account_name: str, config: Config, session: requests.Session | None = None
) -> list[ActivityEvent]:
    """Fetch the events of an account.

    Args:
        account_name: Organization or user name
        config: Application configuration (cache, debug flag, token, cache directory)
        session: Optional HTTP session to issue requests through

    Returns:
        The account's events, newest first

    Raises:
        AccountNotFoundError: If neither namespace knows the account
        FeedUnavailableError: If the feed cannot be fetched and no cache applies
        CredentialMissingError: In test mode without a token
    """
    return fetch_activity(account_name, config, session).events
