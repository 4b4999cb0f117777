"""Tests for the file-backed response cache."""

import json
from pathlib import Path

import pytest

from gh_act.cache import ResponseCache, resource_key
from gh_act.core.constants import ResourceKind
from gh_act.exceptions import CacheError


@pytest.fixture
def cache(cache_dir: Path) -> ResponseCache:
    return ResponseCache(cache_dir)


def test_resource_keys_follow_file_layout(cache: ResponseCache, cache_dir: Path) -> None:
    assert resource_key("Octocat", ResourceKind.IDENTITY) == "Octocat.user"
    assert resource_key("Octocat", ResourceKind.FEED) == "Octocat.events"
    assert cache.path_for("Octocat.events") == cache_dir / "Octocat.events.json"


def test_load_missing_entry_returns_none(cache: ResponseCache) -> None:
    assert cache.load("nobody.user") is None


def test_store_then_load_keeps_tag_outside_payload(cache: ResponseCache, cache_dir: Path) -> None:
    events = [{"id": "2", "type": "WatchEvent"}, {"id": "1", "type": "ForkEvent"}]

    cache.store("octocat.events", events, "abc123")
    envelope = cache.load("octocat.events")

    assert envelope is not None
    assert envelope.data == events
    assert envelope.etag == "abc123"
    on_disk = json.loads((cache_dir / "octocat.events.json").read_text())
    assert on_disk["data"] == events
    assert on_disk["etag"] == "abc123"


def test_store_overwrites_previous_entry(cache: ResponseCache) -> None:
    cache.store("acme.user", {"login": "acme"}, "aaa")
    cache.store("acme.user", {"login": "acme", "name": "Acme"}, None)

    envelope = cache.load("acme.user")
    assert envelope is not None
    assert envelope.data == {"login": "acme", "name": "Acme"}
    assert envelope.etag is None


def test_save_leaves_no_temporary_files(cache: ResponseCache, cache_dir: Path) -> None:
    cache.store("acme.user", {"login": "acme"}, "aaa")

    assert sorted(p.name for p in cache_dir.iterdir()) == ["acme.user.json"]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '[{"id": "1"}, {"etag": "abc"}]',
        '{"url": "https://api.github.com/orgs/acme", "etag": "abc123"}',
        "",
    ],
)
def test_corrupt_or_legacy_files_load_as_none(cache: ResponseCache, cache_dir: Path, content: str) -> None:
    cache_dir.mkdir(parents=True)
    (cache_dir / "acme.user.json").write_text(content)

    assert cache.load("acme.user") is None


def test_evict(cache: ResponseCache) -> None:
    cache.store("acme.user", {"login": "acme"}, None)

    assert cache.evict("acme.user") is True
    assert not cache.path_for("acme.user").exists()
    assert cache.evict("acme.user") is False


def test_purge_all_removes_directory(cache: ResponseCache, cache_dir: Path) -> None:
    cache.store("acme.user", {"login": "acme"}, None)
    cache.store("acme.events", [], None)

    cache.purge_all()

    assert not cache_dir.exists()
    # Purging an absent cache is not an error
    cache.purge_all()


def test_purge_all_reports_undeletable_cache(tmp_path: Path) -> None:
    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("x")

    with pytest.raises(CacheError):
        ResponseCache(not_a_dir).purge_all()


@pytest.mark.parametrize("key", ["../victim.user", "a/b.user", "/etc/passwd"])
def test_keys_cannot_leave_cache_directory(cache: ResponseCache, key: str) -> None:
    with pytest.raises(CacheError):
        cache.path_for(key)
    with pytest.raises(CacheError):
        cache.store(key, {"login": "x"}, None)
