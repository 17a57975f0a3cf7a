import re

import pytest
from aiohttp import ClientConnectionError
from aioresponses import aioresponses
from fastmcp import FastMCP
from fastmcp.client import Client
from fastmcp.exceptions import ToolError
from mcp.types import TextContent

from datamuse_mcp.clients.datamuse import DatamuseClient
from datamuse_mcp.servers.datamuse import DatamuseServer

DATAMUSE_URL_PATTERN = re.compile(r"^http://api\.datamuse\.com/(words|sug)\?.*$")


@pytest.fixture
def datamuse_server(datamuse_client: DatamuseClient):
    return DatamuseServer(client=datamuse_client)


@pytest.fixture
def fastmcp_server(datamuse_server: DatamuseServer):
    fastmcp = FastMCP[None](name="Datamuse MCP")
    datamuse_server.register_all(fastmcp)
    return fastmcp


@pytest.fixture
def fastmcp_client(fastmcp_server: FastMCP[None]):
    return Client(transport=fastmcp_server)


async def test_init(datamuse_client: DatamuseClient):
    assert DatamuseServer(client=datamuse_client)


async def test_list_tools(fastmcp_client: Client):
    async with fastmcp_client as client:
        tools = await client.list_tools()

    assert sorted(tool.name for tool in tools) == [
        "find_similar",
        "find_similar_ends_with",
        "find_similar_starts_with",
        "prefix_hint_suggestions",
        "sounds_similar",
        "spelt_similar",
        "words_starting_with",
        "words_starting_with_ending_with",
    ]


async def test_words_starting_with_ending_with(fastmcp_client: Client, sample_response: str):
    with aioresponses() as m:
        m.get(DATAMUSE_URL_PATTERN, body=sample_response)

        async with fastmcp_client as client:
            result = await client.call_tool(
                "words_starting_with_ending_with", arguments={"start_letter": "b", "end_letter": "d", "number_missing": 2}
            )

    content = result.content[0]
    assert isinstance(content, TextContent)
    assert content.text == sample_response


async def test_find_similar(datamuse_server: DatamuseServer, sample_response: str):
    with aioresponses() as m:
        m.get(DATAMUSE_URL_PATTERN, body=sample_response)

        assert await datamuse_server.find_similar(word="hello world") == sample_response


async def test_tool_error_on_transport_failure(fastmcp_client: Client):
    with aioresponses() as m:
        m.get(DATAMUSE_URL_PATTERN, exception=ClientConnectionError("Connection refused"))

        async with fastmcp_client as client:
            with pytest.raises(ToolError):
                await client.call_tool("sounds_similar", arguments={"word": "jirraf"})


async def test_tool_rejects_negative_number_missing(fastmcp_client: Client):
    async with fastmcp_client as client:
        with pytest.raises(ToolError):
            await client.call_tool("words_starting_with", arguments={"start_letter": "b", "number_missing": -1})


async def test_tool_rejects_oversized_number_missing(fastmcp_client: Client):
    async with fastmcp_client as client:
        with pytest.raises(ToolError):
            await client.call_tool(
                "words_starting_with_ending_with", arguments={"start_letter": "b", "end_letter": "d", "number_missing": 10**9}
            )
