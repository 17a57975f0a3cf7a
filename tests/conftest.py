from collections.abc import AsyncGenerator

import pytest

from datamuse_mcp.clients.datamuse import DatamuseClient


@pytest.fixture
async def datamuse_client() -> AsyncGenerator[DatamuseClient, None]:
    async with DatamuseClient() as client:
        yield client


@pytest.fixture
def sample_response() -> str:
    return '[{"word":"bird","score":1234},{"word":"bold","score":987}]'
