import asyncio
from typing import Literal

import asyncclick as click
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from datamuse_mcp.clients.datamuse import DATAMUSE_BASE_URL, DatamuseClient
from datamuse_mcp.models.query import MAX_RESULTS, MIN_RESULTS
from datamuse_mcp.servers.datamuse import DatamuseServer

logger = get_logger("datamuse-mcp")


@click.command()
@click.option(
    "--transport", type=click.Choice(["stdio", "sse", "streamable-http"]), default="stdio", help="The transport to use for the MCP server."
)
@click.option(
    "--max-results",
    type=click.IntRange(MIN_RESULTS, MAX_RESULTS),
    default=MAX_RESULTS,
    envvar="DATAMUSE_MAX_RESULTS",
    help="The maximum number of results to return from a query.",
)
@click.option("--base-url", type=str, default=DATAMUSE_BASE_URL, envvar="DATAMUSE_BASE_URL", help="The Datamuse API to query.")
async def cli(transport: Literal["stdio", "sse", "streamable-http"], max_results: int, base_url: str):
    mcp = FastMCP(name="Datamuse MCP")

    async with DatamuseClient(max_results=max_results, base_url=base_url) as client:
        datamuse_server = DatamuseServer(client=client)
        datamuse_server.register_all(mcp)

        logger.info(f"Starting MCP server against {base_url} with max_results={max_results}...")
        await mcp.run_async(transport=transport)


def run_mcp():
    asyncio.run(cli())


if __name__ == "__main__":
    run_mcp()
