"""
TMDB catalog client
~~~~~~~~~~~~~~~~~~~

A very thin wrapper around the three TMDB v3 endpoints the show browser
needs: TV search, show details and season details.  Every request goes
through :func:`fetch`, which performs one blocking GET and decodes the body
into a caller supplied pydantic shape.

Environment
-----------
Set **TMDB_API_KEY** (v3 auth key) or pass *api_key="…"* to ``TMDBClient``.
"""

import logging
import os
from types import ModuleType
from typing import TypeVar
from urllib.parse import quote, urlencode, urlsplit

import requests
from pydantic import ValidationError

from tv_info.db.core import SearchResponse, SeasonDetails, Shape, ShowDetails

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# 0.  Basic constants / helpers                                               #
# --------------------------------------------------------------------------- #
TMDB_API_ROOT = "https://api.themoviedb.org/3"
DEFAULT_TIMEOUT = 10.0

SessionType = requests.Session | ModuleType | None

ShapeT = TypeVar("ShapeT", bound=Shape)


def get_api_key() -> str | None:
    """Fetch the TMDB API key from the environment, ``None`` if unset or empty."""
    api_key = os.getenv("TMDB_API_KEY")
    if not api_key:
        return None
    return api_key


# --------------------------------------------------------------------------- #
# 1.  Failure kinds                                                           #
# --------------------------------------------------------------------------- #
class FetchError(Exception):
    """Base class for every way a catalog request can fail."""


class TransportError(FetchError):
    """The service could not be reached (DNS, refused connection, timeout...)."""


class StatusError(FetchError):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class ShapeError(FetchError):
    """The body is not JSON or does not fit the requested shape."""


# --------------------------------------------------------------------------- #
# 2.  Low-level REST helpers                                                  #
# --------------------------------------------------------------------------- #
def _redacted(uri: str) -> str:
    # the query string carries the api key
    return urlsplit(uri).path


def fetch(
    uri: str,
    shape: type[ShapeT],
    *,
    session: SessionType = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ShapeT:
    """
    GET *uri* and decode the JSON body into *shape*.

    Raises
    ------
    TransportError
        The request never produced a response.
    StatusError
        The service answered with a non-success status.
    ShapeError
        The body could not be decoded into *shape*.
    """
    sess = session or requests
    logger.debug("GET %s -> %s", _redacted(uri), shape.__name__)
    try:
        resp = sess.get(uri, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"request to {_redacted(uri)} failed: {exc}") from exc

    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise StatusError(resp.status_code, f"{_redacted(uri)} returned HTTP {resp.status_code}") from exc

    try:
        return shape.model_validate_json(resp.content)
    except ValidationError as exc:
        raise ShapeError(f"unexpected {shape.__name__} payload from {_redacted(uri)}: {exc}") from exc


def search_url(api_key: str, query: str) -> str:
    params = urlencode({"api_key": api_key, "query": query, "include_adult": "false"})
    return f"{TMDB_API_ROOT}/search/tv?{params}"


def show_url(api_key: str, show_id: int) -> str:
    return f"{TMDB_API_ROOT}/tv/{show_id}?{urlencode({'api_key': api_key})}"


def season_url(api_key: str, show_id: int, season_label: str) -> str:
    # the label goes into the path exactly as the user typed it
    return f"{TMDB_API_ROOT}/tv/{show_id}/season/{quote(season_label, safe='')}?{urlencode({'api_key': api_key})}"


# --------------------------------------------------------------------------- #
# 3.  High-level facade                                                       #
# --------------------------------------------------------------------------- #
class TMDBClient:
    """
    Binds an API key (and optionally a ``requests.Session``) to the three
    catalog lookups.  Every method performs exactly one request.
    """

    def __init__(self, api_key: str, session: SessionType = None, timeout: float = DEFAULT_TIMEOUT):
        if not api_key:
            raise ValueError("TMDBClient needs a non-empty api_key")
        self.api_key = api_key
        self.session = session
        self.timeout = timeout

    def search_tv(self, query: str) -> SearchResponse:
        return fetch(search_url(self.api_key, query), SearchResponse, session=self.session, timeout=self.timeout)

    def get_show(self, show_id: int) -> ShowDetails:
        return fetch(show_url(self.api_key, show_id), ShowDetails, session=self.session, timeout=self.timeout)

    def get_season(self, show_id: int, season_label: str) -> SeasonDetails:
        return fetch(
            season_url(self.api_key, show_id, season_label),
            SeasonDetails,
            session=self.session,
            timeout=self.timeout,
        )
