"""Tests for the gh-act command line."""

import json
from pathlib import Path

import pytest
import requests
from conftest import API, FakeSession, conditional, event_payload, user_payload
from typer.testing import CliRunner

from gh_act.cli.main import app

runner = CliRunner()

EVENTS = [
    event_payload("2", "PushEvent", "octo/hello", size=2),
    event_payload("1", "WatchEvent", "octo/stars", action="started"),
]


@pytest.fixture
def github(monkeypatch: pytest.MonkeyPatch, cache_dir: Path) -> FakeSession:
    """Route the CLI's HTTP session to a fake GitHub serving one user."""
    session = FakeSession(
        {
            f"{API}/users/octocat": conditional(user_payload("octocat"), "1d1d"),
            f"{API}/users/octocat/events": conditional(EVENTS, "e0e0"),
            f"{API}/users/quiet": conditional(user_payload("quiet"), "2d2d"),
            f"{API}/users/quiet/events": conditional([], "e1e1"),
        }
    )
    monkeypatch.setattr(requests, "Session", lambda: session)
    monkeypatch.setenv("GH_ACT_CACHE_DIR", str(cache_dir))
    return session


def test_verbose_output_is_default(github: FakeSession) -> None:
    result = runner.invoke(app, ["octocat"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "- Pushed 2 commits to repository octo/hello",
        "- Starred repository octo/stars",
    ]


def test_json_output(github: FakeSession) -> None:
    result = runner.invoke(app, ["-j", "octocat"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [event["id"] for event in data] == ["2", "1"]
    assert data[0]["public"] is True


def test_csv_output(github: FakeSession) -> None:
    result = runner.invoke(app, ["--csv", "octocat"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "id,type,created_at,repo,actor,description"
    assert lines[1].startswith("2,PushEvent,")


def test_table_output(github: FakeSession) -> None:
    result = runner.invoke(app, ["--format", "table", "octocat"])

    assert result.exit_code == 0
    assert "PushEvent" in result.output
    assert "octo/stars" in result.output


def test_type_filter(github: FakeSession) -> None:
    result = runner.invoke(app, ["-t", "WatchEvent", "octocat"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["- Starred repository octo/stars"]


def test_empty_feed_reports_no_activity(github: FakeSession) -> None:
    result = runner.invoke(app, ["quiet"])

    assert result.exit_code == 0
    assert result.output.strip() == "No recent activity for 'quiet'"


def test_filter_matching_nothing_reports_no_activity(github: FakeSession) -> None:
    result = runner.invoke(app, ["--type", "ForkEvent", "octocat"])

    assert result.exit_code == 0
    assert "No recent activity for 'octocat'" in result.output


def test_user_information(github: FakeSession, cache_dir: Path) -> None:
    result = runner.invoke(app, ["--user", "--json", "octocat"])

    assert result.exit_code == 0
    assert json.loads(result.output)["login"] == "octocat"
    assert f"{API}/users/octocat/events" not in github.urls
    assert not (cache_dir / "octocat.events.json").exists()


def test_unknown_account(github: FakeSession) -> None:
    result = runner.invoke(app, ["ghost"])

    assert result.exit_code == 1
    assert "gh-act: GitHub user 'ghost' not found" in result.output
    assert "Try 'gh-act --help' for more information." in result.output


def test_invalid_account_name(github: FakeSession) -> None:
    result = runner.invoke(app, ["../victim"])

    assert result.exit_code == 1
    assert "gh-act: GitHub user '../victim' not found" in result.output
    assert github.calls == []


def test_unknown_event_type(github: FakeSession) -> None:
    result = runner.invoke(app, ["-t", "TeleportEvent", "octocat"])

    assert result.exit_code == 1
    assert "gh-act: unrecognized GitHub event type 'TeleportEvent'" in result.output
    assert "Try 'gh-act --list' for more information." in result.output
    assert github.calls == []


def test_missing_account(github: FakeSession) -> None:
    result = runner.invoke(app, ["--json"])

    assert result.exit_code == 1
    assert "gh-act: no GitHub user given" in result.output


def test_nocache_alone_clears_cache(github: FakeSession, cache_dir: Path) -> None:
    assert runner.invoke(app, ["octocat"]).exit_code == 0
    assert cache_dir.exists()

    result = runner.invoke(app, ["--nocache"])

    assert result.exit_code == 0
    assert not cache_dir.exists()
    assert github.urls.count(f"{API}/users/octocat/events") == 1


def test_nocache_with_account_skips_cache(github: FakeSession, cache_dir: Path) -> None:
    result = runner.invoke(app, ["--nocache", "octocat"])

    assert result.exit_code == 0
    assert not cache_dir.exists()


def test_second_run_uses_conditional_requests(github: FakeSession) -> None:
    first = runner.invoke(app, ["octocat"])
    github.calls.clear()

    second = runner.invoke(app, ["octocat"])

    assert second.output == first.output
    assert all(headers.get("If-None-Match") for _, headers in github.calls)


def test_test_mode_without_token(github: FakeSession, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GH_ACT_TEST", "fetchAct")

    result = runner.invoke(app, ["octocat"])

    assert result.exit_code == 1
    assert "gh-act: unable to read the authorization token" in result.output


def test_token_file_is_sent(github: FakeSession, isolated_env: Path) -> None:
    (isolated_env / ".auth-token").write_text("ghp_abc\n")

    assert runner.invoke(app, ["octocat"]).exit_code == 0
    assert github.calls[0][1]["Authorization"] == "token ghp_abc"


def test_list_event_types(github: FakeSession) -> None:
    result = runner.invoke(app, ["--list"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 17
    assert lines[0].startswith("CommitCommentEvent ....")
    assert lines[0].endswith(".... A commit comment is created.")


def test_version(github: FakeSession) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == "v1.0.0"
