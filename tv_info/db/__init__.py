from tv_info.db.core import Shape, ShowSummary, SearchResponse, ShowDetails, EpisodeSummary, SeasonDetails
from tv_info.db.tmdb import TMDBClient, FetchError, TransportError, StatusError, ShapeError, fetch, get_api_key

__all__ = [
    "Shape",
    "ShowSummary",
    "SearchResponse",
    "ShowDetails",
    "EpisodeSummary",
    "SeasonDetails",
    "TMDBClient",
    "FetchError",
    "TransportError",
    "StatusError",
    "ShapeError",
    "fetch",
    "get_api_key",
]
