from dataclasses import dataclass, field
from enum import Enum

from tv_info.db.core import EpisodeSummary, ShowSummary


class State(Enum):
    QUERY = "query"
    SELECT_SHOW = "select_show"
    SELECT_SEASON = "select_season"
    SELECT_EPISODE = "select_episode"


@dataclass(frozen=True)
class Stay:
    pass


@dataclass(frozen=True)
class Advance:
    state: State


Transition = Stay | Advance

STAY = Stay()


@dataclass
class Session:
    """
    Everything one run of the browser knows.

    ``selected_show_id`` and ``season_count`` only mean something while the
    state is SELECT_SEASON or SELECT_EPISODE.
    """
    api_key: str
    state: State = State.QUERY
    search_results: list[ShowSummary] = field(default_factory=list)
    more_pages: bool = False
    selected_show_id: int | None = None
    season_count: int | None = None
    selected_season_label: str | None = None
    episodes: list[EpisodeSummary] | None = None

    def __post_init__(self):
        if not self.api_key:
            raise ValueError("Session needs a non-empty api_key")

    def new_search(self, results: list[ShowSummary], more_pages: bool) -> None:
        self.search_results = list(results)
        self.more_pages = more_pages
        self.selected_show_id = None
        self.season_count = None
        self.selected_season_label = None
        self.episodes = None
