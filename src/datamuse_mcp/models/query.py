from enum import StrEnum

from pydantic import BaseModel, Field
from yarl import URL

MIN_RESULTS = 1
MAX_RESULTS = 1000


class DatamuseEndpoint(StrEnum):
    WORDS = "words"
    SUGGESTIONS = "sug"


class DatamuseQuery(BaseModel):
    """The parameters of a single request to the Datamuse API."""

    endpoint: DatamuseEndpoint = DatamuseEndpoint.WORDS

    means_like: str | None = Field(default=None, serialization_alias="rd")
    sounds_like: str | None = Field(default=None, serialization_alias="sl")
    spelled_like: str | None = Field(default=None, serialization_alias="sp")
    suggest: str | None = Field(default=None, serialization_alias="s")

    max_results: int = Field(default=MAX_RESULTS, ge=MIN_RESULTS, le=MAX_RESULTS, serialization_alias="max")

    def to_params(self) -> dict[str, str]:
        """The query string parameters, keyed by their wire names."""
        params = self.model_dump(by_alias=True, exclude_none=True, exclude={"endpoint"})
        return {key: str(value) for key, value in params.items()}

    def to_url(self, base_url: str | URL) -> URL:
        return (URL(base_url) / self.endpoint.value).with_query(self.to_params())
