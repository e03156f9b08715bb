from pydantic import BaseModel, ConfigDict, field_validator


class Shape(BaseModel):
    """
    Base for every TMDB response shape.

    Unknown fields are ignored, missing fields fall back to their zero value
    and a value of the wrong JSON type is rejected.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)


class ShowSummary(Shape):
    id: int = 0
    name: str = ""
    overview: str = ""

    @field_validator("name", "overview", mode="before")
    @classmethod
    def _null_text(cls, value: object) -> object:
        return "" if value is None else value


class SearchResponse(Shape):
    page: int = 0
    results: list[ShowSummary] = []
    total_results: int = 0
    total_pages: int = 0


class ShowDetails(Shape):
    number_of_seasons: int = 0


class EpisodeSummary(Shape):
    episode_number: int = 0
    name: str = ""
    overview: str = ""

    @field_validator("name", "overview", mode="before")
    @classmethod
    def _null_text(cls, value: object) -> object:
        return "" if value is None else value


class SeasonDetails(Shape):
    episodes: list[EpisodeSummary] = []
