"""
Interaction state machine
~~~~~~~~~~~~~~~~~~~~~~~~~

Four states drive a browsing session::

    QUERY -> SELECT_SHOW -> SELECT_SEASON -> SELECT_EPISODE -> QUERY

Each handler runs the action of its state and returns either ``STAY`` (run
the same state again, re-prompting) or ``Advance(next_state)``.  Only
:func:`step` changes ``session.state``.  A handler that fails validation or
a lookup never touches what earlier states stored in the session.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from tv_info.db.core import SearchResponse, SeasonDetails, ShowDetails
from tv_info.db.tmdb import FetchError
from tv_info.prompt import InputParseError, Prompt, parse_int
from tv_info.session import STAY, Advance, Session, State, Transition

logger = logging.getLogger(__name__)

# Hard limit on the show prompt, independent of how many results came back.
MAX_SHOW_CHOICES = 20


class CatalogClient(Protocol):
    def search_tv(self, query: str) -> SearchResponse: ...

    def get_show(self, show_id: int) -> ShowDetails: ...

    def get_season(self, show_id: int, season_label: str) -> SeasonDetails: ...


Handler = Callable[[Session, Prompt, CatalogClient], Transition]


def _lookup_failed(prompt: Prompt, exc: FetchError) -> None:
    logger.warning("catalog lookup failed: %s", exc)
    prompt.echo(f"Lookup failed: {exc}")


def query(session: Session, prompt: Prompt, client: CatalogClient) -> Transition:
    text = prompt.ask("Search for TV show (enter keywords or type 'q' to exit)")
    if text == "":
        return STAY

    try:
        response = client.search_tv(text)
    except FetchError as exc:
        _lookup_failed(prompt, exc)
        return STAY

    if not response.results:
        prompt.echo(f"Sorry, didn't find anything for '{text}'")
        return STAY

    session.new_search(response.results, more_pages=response.total_pages > 1)
    logger.debug("search %r: %d results", text, len(response.results))
    return Advance(State.SELECT_SHOW)


def select_show(session: Session, prompt: Prompt, client: CatalogClient) -> Transition:
    for idx, show in enumerate(session.search_results[:MAX_SHOW_CHOICES], start=1):
        prompt.echo(f"{idx}: {show.name}")
    if session.more_pages:
        prompt.echo(" -- more than 20 entries found, please add more keywords --")

    try:
        choice = prompt.ask_int("Select TV show")
    except InputParseError:
        prompt.echo("Please enter a number")
        return STAY

    if choice < 1 or choice > MAX_SHOW_CHOICES:
        prompt.echo("No valid selection")
        return STAY
    # the list may hold fewer than MAX_SHOW_CHOICES entries
    if choice > len(session.search_results):
        prompt.echo("No valid selection")
        return STAY

    show = session.search_results[choice - 1]
    try:
        details = client.get_show(show.id)
    except FetchError as exc:
        _lookup_failed(prompt, exc)
        return STAY

    session.selected_show_id = show.id
    session.season_count = details.number_of_seasons
    return Advance(State.SELECT_SEASON)


def select_season(session: Session, prompt: Prompt, client: CatalogClient) -> Transition:
    season_count = session.season_count or 0
    label = prompt.ask_raw(f"Select Season 1 to {season_count}")
    try:
        season = parse_int(label)
    except InputParseError:
        prompt.echo("Please enter a number")
        return STAY

    # 0 is let through on purpose, it is the "specials" season on TMDB
    if season < 0 or season > season_count:
        prompt.echo("No valid selection!")
        return STAY

    session.selected_season_label = label
    session.episodes = None
    return Advance(State.SELECT_EPISODE)


def select_episode(session: Session, prompt: Prompt, client: CatalogClient) -> Transition:
    if session.selected_show_id is None or session.selected_season_label is None:
        raise RuntimeError("SELECT_EPISODE entered without a show and season")
    label = session.selected_season_label

    if session.episodes is None:
        try:
            season = client.get_season(session.selected_show_id, label)
        except FetchError as exc:
            _lookup_failed(prompt, exc)
            # staying would refetch with no prompt in between, so ask for the season again
            return Advance(State.SELECT_SEASON)
        session.episodes = list(season.episodes)
    episodes = session.episodes

    prompt.echo(f"Episodes from Season {label}:")
    for episode in episodes:
        prompt.echo(f"{episode.episode_number} - {episode.name}")

    try:
        choice = prompt.ask_int(f"Select Episode 1 to {len(episodes)}")
    except InputParseError:
        prompt.echo("Please enter a number")
        return STAY

    if choice < 1 or choice > len(episodes):
        prompt.echo("there's no such episode!")
        return STAY

    episode = episodes[choice - 1]
    prompt.echo()
    prompt.echo(f"Overview of Season {label} Episode {choice}: {episode.name}")
    prompt.echo(f"    {episode.overview}")
    session.episodes = None
    return Advance(State.QUERY)


HANDLERS: dict[State, Handler] = {
    State.QUERY: query,
    State.SELECT_SHOW: select_show,
    State.SELECT_SEASON: select_season,
    State.SELECT_EPISODE: select_episode,
}


def step(session: Session, prompt: Prompt, client: CatalogClient) -> Transition:
    """Run the current state's action once and apply the transition it asks for."""
    transition = HANDLERS[session.state](session, prompt, client)
    if isinstance(transition, Advance):
        logger.debug("%s -> %s", session.state.name, transition.state.name)
        session.state = transition.state
    return transition


def run(session: Session, prompt: Prompt, client: CatalogClient) -> None:
    """Drive the session until the input runs out. Entering 'q' exits the process."""
    while True:
        try:
            _ = step(session, prompt, client)
        except EOFError:
            logger.debug("input exhausted in state %s", session.state.name)
            return
