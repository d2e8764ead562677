from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

import lrclib_lyrics.cli as cli
from tests.mocks.client_mock import FakeLrcLib, lrclib_record

runner = CliRunner()

SEARCH_ARGS = [
    "search",
    "-a", "Rick Astley",
    "-t", "Never Gonna Give You Up",
    "--album", "Whenever You Need Somebody",
    "-d", "213",
]


@pytest.fixture
def lrclib(monkeypatch):
    fake = FakeLrcLib()
    monkeypatch.setattr(cli, "_make_client", fake.client)
    monkeypatch.setattr(cli, "setup_logging", lambda debug: None)
    monkeypatch.delenv("LRCLIB_LYRICS_PROVIDER_NAME", raising=False)
    return fake


def test_search_lists_results(lrclib):
    lrclib.route("/api/get", body=lrclib_record(42, plain="p", synced="[00:01.00]s"))

    result = runner.invoke(cli.app, SEARCH_ARGS)

    assert result.exit_code == 0, result.output
    assert "1. Rick Astley - Never Gonna Give You Up (3:33) [plain]" in result.output
    assert "ID: 42_plain" in result.output
    assert "ID: 42_synced" in result.output
    assert lrclib.requests[0].url.params["duration"] == "213"
    assert lrclib.requests[0].headers["User-Agent"].startswith("lrclib-lyrics/")
    assert all(c.is_closed for c in lrclib.clients)


def test_search_json(lrclib):
    lrclib.route("/api/get", body=lrclib_record(42, synced="[00:01.00]s"))

    result = runner.invoke(cli.app, SEARCH_ARGS + ["--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data == [
        {
            "id": "42_synced",
            "provider_name": "LrcLib",
            "metadata": {
                "album": "Whenever You Need Somebody",
                "artist": "Rick Astley",
                "title": "Never Gonna Give You Up",
                "length_ticks": 2_130_000_000,
                "is_synced": True,
            },
        }
    ]


def test_search_missing_album_reports_no_results(lrclib):
    result = runner.invoke(cli.app, ["search", "-a", "Rick Astley", "-t", "Song", "-d", "10"])
    assert result.exit_code == 0
    assert "No results found" in result.output
    assert lrclib.requests == []


def test_fetch_to_stdout(lrclib):
    lrclib.route("/api/get/42", body=lrclib_record(42, synced="[00:01.00]hello"))

    result = runner.invoke(cli.app, ["fetch", "42_synced"])

    assert result.exit_code == 0, result.output
    assert "[00:01.00]hello" in result.output


def test_fetch_to_file(lrclib, tmp_path):
    lrclib.route("/api/get/42", body=lrclib_record(42, plain="hello"))
    out = tmp_path / "song.txt"

    result = runner.invoke(cli.app, ["fetch", "42_plain", "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "hello"
    assert "Saved txt lyrics" in result.output


def test_fetch_not_found_exits_1(lrclib):
    lrclib.route("/api/get/42", body=lrclib_record(42, plain=""))
    result = runner.invoke(cli.app, ["fetch", "42_plain"])
    assert result.exit_code == 1


def test_fetch_malformed_id_is_usage_error(lrclib):
    result = runner.invoke(cli.app, ["fetch", "not-an-id"])
    assert result.exit_code == 2
    assert lrclib.requests == []
