"""MCP tools that expose a BoundedTTLCache.

Registers 'cache_put', 'cache_get', 'cache_delete', 'cache_clear' and
'cache_stats'. The cache instance is injected so several servers (or tests)
can each own their own store.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from core.cache import BoundedTTLCache
from core.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _require_key(key: str) -> str:
    if not key or not key.strip():
        raise ValidationError("Missing cache key")
    return key


def register(mcp: FastMCP, *, cache: BoundedTTLCache) -> None:
    @mcp.tool(name="cache_put")
    async def cache_put(key: str, value: Any, ttl_ms: Optional[int] = None) -> Dict[str, Any]:
        """Store a value under a key with an optional TTL.

        Params:
          - key: non-empty cache key.
          - value: any JSON value.
          - ttl_ms: time-to-live in milliseconds (default: the server's default TTL).

        Returns:
          {"key": ..., "stored": true, "size": <entries now held>}.

        Raises:
          ValidationError for an empty key or a negative ttl_ms.
        """
        cache.put(_require_key(key), value, ttl_ms)
        return {"key": key, "stored": True, "size": len(cache)}

    @mcp.tool(name="cache_get")
    async def cache_get(key: str, required: bool = False) -> Any:
        """Return the value stored under a key, or null when absent or expired.

        With required=True an absent key raises NotFoundError instead.
        """
        _require_key(key)
        marker = object()
        value = cache.get(key, marker)
        if value is marker:
            if required:
                raise NotFoundError(f"Cache key not found: {key}")
            return None
        return value

    @mcp.tool(name="cache_delete")
    async def cache_delete(key: str) -> bool:
        """Remove a key. Returns true if it was stored."""
        return cache.delete(_require_key(key))

    @mcp.tool(name="cache_clear")
    async def cache_clear() -> Dict[str, int]:
        """Remove every entry and report how many were dropped."""
        count = cache.clear()
        logger.info("Cache cleared (%d entries)", count)
        return {"cleared": count}

    @mcp.tool(name="cache_stats")
    async def cache_stats() -> Dict[str, int]:
        """Report current size, capacity and default TTL."""
        return {
            "size": len(cache),
            "capacity": cache.capacity,
            "default_ttl_ms": cache.default_ttl_ms,
        }
