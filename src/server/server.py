"""Server bootstrap for the TTL cache MCP service.

Creates the FastMCP instance, builds the cache from configuration,
registers the cache tools and starts the MCP server (stdio transport).
"""

import logging

from mcp.server.fastmcp import FastMCP

from config import CACHE_CAPACITY, CACHE_DEFAULT_TTL_MS, LOG_LEVEL
from core.cache import BoundedTTLCache

from tools.cache_tools import register as register_cache_tools

mcp = FastMCP("ttl-cache-mcp")


def register_tools() -> None:
    cache = BoundedTTLCache(CACHE_CAPACITY, default_ttl_ms=CACHE_DEFAULT_TTL_MS)
    register_cache_tools(mcp, cache=cache)


register_tools()


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
