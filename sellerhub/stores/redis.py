"""Redis store for caching.

Handles:
- Caching with TTL policies

TTL policies:
- Visible seller snapshot (directory): 0-3600 seconds, configurable (DIRECTORY_CACHE_TTL)
"""

import json
import logging
from typing import Any

import redis.asyncio as redis

from sellerhub.settings import get_settings

# Key prefixes
PREFIX_DIRECTORY = "directory:"

KEY_VISIBLE_SELLERS = f"{PREFIX_DIRECTORY}visible"

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    _redis = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    # Validate connectivity early (especially for `rediss://` in production).
    await _redis.ping()
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def _get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Generic cache operations
# ============================================================


async def cache_get(key: str) -> str | None:
    """Get value from cache.

    Args:
        key: Cache key.

    Returns:
        Cached value or None if not found.
    """
    return await _get_redis().get(key)


async def cache_set(key: str, value: str, ttl: int) -> None:
    """Set value in cache with TTL.

    Args:
        key: Cache key.
        value: Value to cache.
        ttl: Time-to-live in seconds.
    """
    await _get_redis().setex(key, ttl, value)


async def cache_delete(key: str) -> None:
    """Delete value from cache.

    Args:
        key: Cache key.
    """
    await _get_redis().delete(key)


async def cache_get_json(key: str) -> Any | None:
    """Get JSON value from cache.

    Args:
        key: Cache key.

    Returns:
        Parsed JSON value or None if not found.
    """
    value = await cache_get(key)
    if value:
        return json.loads(value)
    return None


async def cache_set_json(key: str, value: Any, ttl: int) -> None:
    """Set JSON value in cache.

    Args:
        key: Cache key.
        value: JSON-serializable value to cache.
        ttl: Time-to-live in seconds.
    """
    await cache_set(key, json.dumps(value), ttl)


# ============================================================
# Directory snapshot cache
# ============================================================


async def get_visible_sellers_cache() -> list[dict[str, Any]] | None:
    """Get cached snapshot of visible sellers (JSON-mode dumps)."""
    payload = await cache_get_json(KEY_VISIBLE_SELLERS)
    if isinstance(payload, list):
        return payload
    return None


async def set_visible_sellers_cache(sellers: list[dict[str, Any]], ttl: int) -> None:
    """Cache snapshot of visible sellers."""
    await cache_set_json(KEY_VISIBLE_SELLERS, sellers, ttl)


async def clear_visible_sellers_cache() -> None:
    """Drop the visible sellers snapshot."""
    await cache_delete(KEY_VISIBLE_SELLERS)
