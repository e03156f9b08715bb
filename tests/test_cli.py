# test_cli.py
import sys

import pytest

from tv_info.cli import browse_shows, search_shows
from tv_info.db import SearchResponse, ShowSummary, StatusError, TMDBClient
from tv_info.session import Session, State


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("TMDB_API_KEY", raising=False)


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("TMDB_API_KEY", "test-key")
    return "test-key"


# --- browse-shows ------------------------------------------------------------

def test_browse_without_key_returns_before_loop(no_api_key, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    calls: list[tuple] = []
    monkeypatch.setattr(browse_shows, "run", lambda *args: calls.append(args))
    monkeypatch.setattr(sys, "argv", ["browse-shows"])

    browse_shows.main()

    assert "Please set TMDB_API_KEY environment variable" in capsys.readouterr().out
    assert calls == []


def test_browse_with_key_starts_in_query(api_key: str, monkeypatch: pytest.MonkeyPatch):
    calls: list[tuple] = []
    monkeypatch.setattr(browse_shows, "run", lambda *args: calls.append(args))
    monkeypatch.setattr(sys, "argv", ["browse-shows", "--timeout", "3.5"])

    browse_shows.main()

    assert len(calls) == 1
    session, _prompt, client = calls[0]
    assert isinstance(session, Session)
    assert session.api_key == api_key
    assert session.state == State.QUERY
    assert isinstance(client, TMDBClient)
    assert client.timeout == 3.5


# --- search-shows ------------------------------------------------------------

def fake_search(response: SearchResponse | Exception):
    queries: list[str] = []

    def search_tv(self: TMDBClient, query: str) -> SearchResponse:
        queries.append(query)
        if isinstance(response, Exception):
            raise response
        return response

    return search_tv, queries


def test_search_without_key(no_api_key, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    search_tv, queries = fake_search(SearchResponse())
    monkeypatch.setattr(TMDBClient, "search_tv", search_tv)
    monkeypatch.setattr(sys, "argv", ["search-shows", "friends"])

    search_shows.main()

    assert "Please set TMDB_API_KEY environment variable" in capsys.readouterr().out
    assert queries == []


def test_search_no_results(api_key: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    search_tv, queries = fake_search(SearchResponse(page=1, results=[], total_pages=0))
    monkeypatch.setattr(TMDBClient, "search_tv", search_tv)
    monkeypatch.setattr(sys, "argv", ["search-shows", "zzzzqqqq"])

    search_shows.main()

    assert capsys.readouterr().out == "No results found.\n"
    assert queries == ["zzzzqqqq"]


def test_search_lists_results(api_key: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    response = SearchResponse(
        page=1,
        results=[ShowSummary(id=1668, name="Friends"), ShowSummary(id=2000, name="Friends from College")],
        total_results=42,
        total_pages=3,
    )
    search_tv, _ = fake_search(response)
    monkeypatch.setattr(TMDBClient, "search_tv", search_tv)
    monkeypatch.setattr(sys, "argv", ["search-shows", "friends"])

    search_shows.main()

    assert capsys.readouterr().out == (
        "1668: Friends\n"
        "2000: Friends from College\n"
        "(42 results over 3 pages, showing page 1)\n"
    )


def test_search_fetch_error_exits(api_key: str, monkeypatch: pytest.MonkeyPatch):
    search_tv, _ = fake_search(StatusError(401, "/3/search/tv returned HTTP 401"))
    monkeypatch.setattr(TMDBClient, "search_tv", search_tv)
    monkeypatch.setattr(sys, "argv", ["search-shows", "friends"])

    with pytest.raises(SystemExit) as exc_info:
        search_shows.main()
    assert exc_info.value.code == "Error: /3/search/tv returned HTTP 401"
