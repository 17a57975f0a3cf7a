from typing_extensions import override

from aiohttp import ClientError, ClientSession
from fastmcp.utilities.logging import get_logger
from yarl import URL

from datamuse_mcp.clients.fetch.base import BaseFetchClient
from datamuse_mcp.errors import DatamuseTransportError

logger = get_logger(__name__)


class SimpleFetchClient(BaseFetchClient):
    session: ClientSession | None

    def __init__(self, session: ClientSession | None = None):
        self.session = session
        self._owns_session = session is None

    @override
    async def fetch(self, url: str | URL) -> str:
        """Perform a single GET and return the body as text.

        Raises:
            DatamuseTransportError: The URL is malformed, the connection failed, or the service answered with an
                error status.
        """
        if self.session is None:
            self.session = ClientSession()

        try:
            async with self.session.get(url) as response:
                response.raise_for_status()

                return await response.text(encoding="utf-8")
        except (ClientError, ValueError, TimeoutError) as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise DatamuseTransportError(url=str(url), reason=str(e) or type(e).__name__) from e

    @override
    async def close(self) -> None:
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None
