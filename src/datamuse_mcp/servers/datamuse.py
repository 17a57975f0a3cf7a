from fastmcp.contrib.mcp_mixin.mcp_mixin import MCPMixin, mcp_tool
from fastmcp.utilities.logging import get_logger
from pydantic import Field

from datamuse_mcp.clients.datamuse import DatamuseClient
from datamuse_mcp.models.pattern import MAX_NUMBER_MISSING

logger = get_logger(__name__)

WORD_FIELD = Field(..., description="A word or phrase.")
START_LETTER_FIELD = Field(..., description="The letter(s) the matching words should start with.")
END_LETTER_FIELD = Field(..., description="The letter(s) the matching words should end with.")
NUMBER_MISSING_FIELD = Field(
    default=None,
    ge=0,
    le=MAX_NUMBER_MISSING,
    description="The exact number of unknown letters. Leave unset to allow any number of letters.",
)


class DatamuseServer(MCPMixin):
    def __init__(self, client: DatamuseClient):
        super().__init__()
        self.client = client

    @mcp_tool()
    async def find_similar(self, word: str = WORD_FIELD) -> str:
        """Find words with a similar meaning to a word or phrase.

        Returns:
            A JSON array of matching words, as returned by Datamuse.
        """
        logger.info(f"Finding words similar to {word!r}")
        return await self.client.find_similar(word)

    @mcp_tool()
    async def find_similar_starts_with(self, word: str = WORD_FIELD, start_letter: str = START_LETTER_FIELD) -> str:
        """Find words with a similar meaning to a word or phrase that start with the given letter(s)."""
        logger.info(f"Finding words similar to {word!r} starting with {start_letter!r}")
        return await self.client.find_similar_starts_with(word, start_letter)

    @mcp_tool()
    async def find_similar_ends_with(self, word: str = WORD_FIELD, end_letter: str = END_LETTER_FIELD) -> str:
        """Find words with a similar meaning to a word or phrase that end with the given letter(s)."""
        logger.info(f"Finding words similar to {word!r} ending with {end_letter!r}")
        return await self.client.find_similar_ends_with(word, end_letter)

    @mcp_tool()
    async def words_starting_with(
        self, start_letter: str = START_LETTER_FIELD, number_missing: int | None = NUMBER_MISSING_FIELD
    ) -> str:
        """Find words that start with the given letter(s), optionally followed by an exact number of unknown letters."""
        logger.info(f"Finding words starting with {start_letter!r} with {number_missing} missing letters")
        return await self.client.words_starting_with(start_letter, number_missing)

    @mcp_tool()
    async def words_starting_with_ending_with(
        self,
        start_letter: str = START_LETTER_FIELD,
        end_letter: str = END_LETTER_FIELD,
        number_missing: int | None = NUMBER_MISSING_FIELD,
    ) -> str:
        """Find words that start and end with the given letters.

        Useful for crosswords: `start_letter="b"`, `end_letter="d"`, `number_missing=2` matches four letter words
        like `bird` and `bold`.
        """
        logger.info(f"Finding words starting with {start_letter!r} and ending with {end_letter!r} with {number_missing} missing letters")
        return await self.client.words_starting_with_ending_with(start_letter, end_letter, number_missing)

    @mcp_tool()
    async def sounds_similar(self, word: str = WORD_FIELD) -> str:
        """Find words or phrases which sound like a word or phrase when spoken."""
        logger.info(f"Finding words that sound like {word!r}")
        return await self.client.sounds_similar(word)

    @mcp_tool()
    async def spelt_similar(self, word: str = WORD_FIELD) -> str:
        """Find words or phrases which are spelt like a word or phrase."""
        logger.info(f"Finding words spelt like {word!r}")
        return await self.client.spelt_similar(word)

    @mcp_tool()
    async def prefix_hint_suggestions(self, word: str = WORD_FIELD) -> str:
        """Suggest what a user may be typing based on what they have typed so far."""
        logger.info(f"Suggesting completions for {word!r}")
        return await self.client.prefix_hint_suggestions(word)
