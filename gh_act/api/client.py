"""GitHub REST API client implementation."""

import logging
import re
from typing import Any

import requests
from rich.console import Console

from gh_act.config import Config
from gh_act.core.constants import APIConstants
from gh_act.models.fetch import Failure, FetchResult, Fresh, NotModified

_NON_HEX = re.compile(r"[^a-fA-F0-9]")


def normalize_etag(etag: str | None) -> str | None:
    """Reduce an HTTP entity tag to its hexadecimal characters.

    ``W/"1a2b"`` and ``"1a2b"`` both become ``1a2b``; a tag with no hex
    characters normalizes to None.
    """
    if not etag:
        return None
    return _NON_HEX.sub("", etag) or None


class GitHubClient:
    """Client issuing single, conditional GET requests against the GitHub API."""

    def __init__(self, config: Config, session: requests.Session | None = None) -> None:
        """Initialize the API client.

        Args:
            config: Application configuration (token, identification headers, debug flags)
            session: Optional pre-built session, used instead of opening a new one

        """
        self.logger = logging.getLogger(__name__)
        self.err_console = Console(stderr=True, highlight=False, soft_wrap=True)

        self.config = config
        self.session: requests.Session | None = session
        self._owns_session = session is None

        self.logger.debug(f"Initializing GitHubClient (authenticated={config.token is not None})")

    def __enter__(self) -> "GitHubClient":
        """Enter context."""
        if self.session is None:
            self.logger.debug("Opening client session")
            self.session = requests.Session()
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context."""
        if self.session and self._owns_session:
            self.session.close()
            self.session = None
            self.logger.debug("Client session closed")

    @property
    def headers(self) -> dict[str, str]:
        """Get request headers."""
        headers = {
            "User-Agent": self.config.user_agent,
            "X-GitHub-Api-Version": self.config.api_version,
        }
        if self.config.token:
            headers["Authorization"] = f"token {self.config.token.get_secret_value()}"
        return headers

    @property
    def dump_exchanges(self) -> bool:
        return self.config.debug and not self.config.test_mode

    def fetch(self, url: str, etag: str | None = None) -> FetchResult:
        """Make one GET request, conditional when a revalidation tag is given.

        Args:
            url: Absolute API URL
            etag: Normalized revalidation tag from a previous response

        Returns:
            Fresh with the parsed payload and its normalized tag, NotModified
            for HTTP 304, or Failure for any other outcome

        """
        if not self.session:
            raise RuntimeError("Client not initialized. Use context manager.")

        headers = self.headers
        if etag:
            headers["If-None-Match"] = f'"{etag}"'

        self.logger.info(f"GET {url} ({'conditional' if etag else 'unconditional'})")

        try:
            response = self.session.get(url, headers=headers, timeout=self.config.request_timeout)
        except requests.RequestException as e:
            self.logger.warning(f"Request to {url} failed: {e}")
            return Failure(status_code=None, body=str(e))

        if self.dump_exchanges:
            self._dump_exchange(response)

        status = response.status_code
        if status == APIConstants.HTTP_NOT_MODIFIED:
            self.logger.debug(f"{url} not modified")
            return NotModified()

        try:
            body = response.json() if response.content else {}
        except ValueError:
            body = None

        if 200 <= status < 400:
            if body is None:
                self.logger.warning(f"Response from {url} is not valid JSON")
                return Failure(status_code=status, body=response.text)
            return Fresh(payload=body, etag=normalize_etag(response.headers.get("ETag")))

        self.logger.debug(f"{url} failed with status {status}")
        return Failure(status_code=status, body=body if body is not None else response.text)

    def _dump_exchange(self, response: requests.Response) -> None:
        """Write the raw request and response to stderr."""
        out = self.err_console
        request = response.request
        http_version = {10: "1.0", 11: "1.1", 20: "2"}.get(getattr(response.raw, "version", 11), "1.1")

        if request is not None:
            out.print(f"> {request.method} {request.url} HTTP/{http_version}", markup=False)
            for name, value in request.headers.items():
                out.print(f"> {name}: {value}", markup=False)
            out.print("> ")
            out.print()

        out.print(f"< HTTP/{http_version} {response.status_code} {response.reason or ''}".rstrip(), markup=False)
        for name, value in response.headers.items():
            out.print(f"< {name}: {value}", markup=False)
        out.print("< ")
        out.print(response.text, markup=False)
        out.print()

