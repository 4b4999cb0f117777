"""Shared fixtures: an in-process stand-in for the GitHub API."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import requests

from gh_act.config import Config, load_config

API = "https://api.github.com"

Handler = Callable[[str, dict[str, str]], requests.Response]


def make_response(
    url: str,
    status: int,
    body: Any = None,
    request_headers: dict[str, str] | None = None,
    etag: str | None = None,
    raw_body: bytes | None = None,
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = {200: "OK", 304: "Not Modified", 404: "Not Found", 500: "Internal Server Error"}.get(status, "")
    response.encoding = "utf-8"
    if raw_body is not None:
        response._content = raw_body
    else:
        response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json; charset=utf-8"
    if etag:
        response.headers["ETag"] = etag
    response.request = requests.Request("GET", url, headers=request_headers or {}).prepare()
    return response


def conditional(body: Any, etag: str) -> Handler:
    """Serve ``body`` with a weak ETag, answering 304 when the client already has it."""

    def handler(url: str, headers: dict[str, str]) -> requests.Response:
        if headers.get("If-None-Match") == f'"{etag}"':
            return make_response(url, 304, None, headers)
        return make_response(url, 200, body, headers, etag=f'W/"{etag}"')

    return handler


def status(code: int, body: Any = None) -> Handler:
    def handler(url: str, headers: dict[str, str]) -> requests.Response:
        return make_response(url, code, body if body is not None else {"message": "Not Found"}, headers)

    return handler


def unreachable(url: str, headers: dict[str, str]) -> requests.Response:
    raise requests.ConnectionError(f"connection refused: {url}")


class FakeSession:
    """Minimal ``requests.Session`` replacement routing GETs by exact URL.

    Unknown URLs answer 404, like GitHub does for unknown accounts.
    """

    def __init__(self, routes: dict[str, Handler] | None = None) -> None:
        self.routes: dict[str, Handler] = dict(routes or {})
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    def get(self, url: str, headers: dict[str, str] | None = None, timeout: float | None = None) -> requests.Response:
        headers = dict(headers or {})
        self.calls.append((url, headers))
        handler = self.routes.get(url, status(404))
        return handler(url, headers)

    def close(self) -> None:
        self.closed = True

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]


def org_payload(login: str) -> dict[str, Any]:
    return {
        "login": login,
        "type": "Organization",
        "url": f"{API}/orgs/{login}",
        "events_url": f"{API}/orgs/{login}/events",
    }


def user_payload(login: str) -> dict[str, Any]:
    return {
        "login": login,
        "type": "User",
        "url": f"{API}/users/{login}",
        "events_url": f"{API}/users/{login}/events{{/privacy}}",
    }


def event_payload(event_id: str, event_type: str = "PushEvent", repo: str = "octo/hello", **payload: Any) -> dict:
    return {
        "id": event_id,
        "type": event_type,
        "actor": {"id": 1, "login": "octocat"},
        "repo": {"id": 2, "name": repo, "url": f"{API}/repos/{repo}"},
        "payload": payload or {"size": 1},
        "public": True,
        "created_at": "2025-02-02T15:21:48Z",
    }


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty directory with no gh-act settings in the environment."""
    for name in (
        "GH_ACT_TOKEN",
        "GH_ACT_TOKEN_FILE",
        "GH_ACT_CACHE_DIR",
        "GH_ACT_CACHE",
        "GH_ACT_DEBUG",
        "GH_ACT_TEST",
        "GH_ACT_USER_AGENT",
        "GH_ACT_API_VERSION",
        "GH_ACT_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def config(cache_dir: Path) -> Config:
    return load_config(cache_dir=cache_dir)
