from types import TracebackType
from typing import Self

from fastmcp.utilities.logging import get_logger
from yarl import URL

from datamuse_mcp.clients.fetch.base import BaseFetchClient
from datamuse_mcp.clients.fetch.simple import SimpleFetchClient
from datamuse_mcp.errors import InvalidMaxResultsError
from datamuse_mcp.models.pattern import build_pattern
from datamuse_mcp.models.query import MAX_RESULTS, MIN_RESULTS, DatamuseEndpoint, DatamuseQuery

logger = get_logger(__name__)

DATAMUSE_BASE_URL = "http://api.datamuse.com"


def validate_max_results(max_results: int) -> int:
    if not isinstance(max_results, int) or isinstance(max_results, bool):
        raise InvalidMaxResultsError(max_results, minimum=MIN_RESULTS, maximum=MAX_RESULTS)
    if not MIN_RESULTS <= max_results <= MAX_RESULTS:
        raise InvalidMaxResultsError(max_results, minimum=MIN_RESULTS, maximum=MAX_RESULTS)
    return max_results


class DatamuseClient:
    """A client for the Datamuse word-finding API.

    Every query method returns the raw response body. The service answers with a JSON array of result objects, which
    is left to the caller to interpret.
    """

    fetch_client: BaseFetchClient

    def __init__(
        self,
        max_results: int = MAX_RESULTS,
        base_url: str | URL = DATAMUSE_BASE_URL,
        fetch_client: BaseFetchClient | None = None,
    ):
        self._max_results = validate_max_results(max_results)
        self.base_url = URL(base_url)
        self.fetch_client = fetch_client or SimpleFetchClient()

    @property
    def max_results(self) -> int:
        """The maximum number of results to return from a query."""
        return self._max_results

    @max_results.setter
    def max_results(self, max_results: int) -> None:
        self._max_results = validate_max_results(max_results)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: TracebackType | None
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self.fetch_client.close()

    def _build_url(self, endpoint: DatamuseEndpoint = DatamuseEndpoint.WORDS, **params: str) -> URL:
        query = DatamuseQuery(endpoint=endpoint, max_results=self._max_results, **params)
        return query.to_url(self.base_url)

    async def _query(self, url: URL) -> str:
        logger.info(f"Querying Datamuse: {url}")
        return await self.fetch_client.fetch(url)

    # URL construction

    def find_similar_url(self, word: str) -> URL:
        return self._build_url(means_like=word)

    def find_similar_starts_with_url(self, word: str, start_letter: str) -> URL:
        return self._build_url(means_like=word, spelled_like=build_pattern(start=start_letter))

    def find_similar_ends_with_url(self, word: str, end_letter: str) -> URL:
        return self._build_url(means_like=word, spelled_like=build_pattern(end=end_letter))

    def words_starting_with_url(self, start_letter: str, number_missing: int | None = None) -> URL:
        return self._build_url(spelled_like=build_pattern(start=start_letter, number_missing=number_missing))

    def words_starting_with_ending_with_url(self, start_letter: str, end_letter: str, number_missing: int | None = None) -> URL:
        return self._build_url(spelled_like=build_pattern(start=start_letter, end=end_letter, number_missing=number_missing))

    def sounds_similar_url(self, word: str) -> URL:
        return self._build_url(sounds_like=word)

    def spelt_similar_url(self, word: str) -> URL:
        return self._build_url(spelled_like=word)

    def prefix_hint_suggestions_url(self, word: str) -> URL:
        return self._build_url(DatamuseEndpoint.SUGGESTIONS, suggest=word)

    # Queries

    async def find_similar(self, word: str) -> str:
        """Find words with a similar meaning to the word or phrase."""
        return await self._query(self.find_similar_url(word))

    async def find_similar_starts_with(self, word: str, start_letter: str) -> str:
        """Find words with a similar meaning to the word or phrase that begin with `start_letter`."""
        return await self._query(self.find_similar_starts_with_url(word, start_letter))

    async def find_similar_ends_with(self, word: str, end_letter: str) -> str:
        """Find words with a similar meaning to the word or phrase that end with `end_letter`."""
        return await self._query(self.find_similar_ends_with_url(word, end_letter))

    async def words_starting_with(self, start_letter: str, number_missing: int | None = None) -> str:
        """Find words beginning with `start_letter`.

        If `number_missing` is given, only words with exactly that many letters after `start_letter` match.
        """
        return await self._query(self.words_starting_with_url(start_letter, number_missing))

    async def words_starting_with_ending_with(self, start_letter: str, end_letter: str, number_missing: int | None = None) -> str:
        """Find words beginning with `start_letter` and ending with `end_letter`.

        If `number_missing` is given, only words with exactly that many letters in between match. Otherwise any number
        of letters may sit in between.
        """
        return await self._query(self.words_starting_with_ending_with_url(start_letter, end_letter, number_missing))

    async def sounds_similar(self, word: str) -> str:
        """Find words or phrases which sound like the word or phrase when spoken."""
        return await self._query(self.sounds_similar_url(word))

    async def spelt_similar(self, word: str) -> str:
        """Find words or phrases which are spelt like the word or phrase."""
        return await self._query(self.spelt_similar_url(word))

    async def prefix_hint_suggestions(self, word: str) -> str:
        """Suggest what the user may be typing based on what they have typed so far."""
        return await self._query(self.prefix_hint_suggestions_url(word))
