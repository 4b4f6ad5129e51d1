"""
Redis cache for zone lookups.

Only successful lookups are cached (24 hours, keyed by normalized address).
When REDIS_URL is empty or Redis is unreachable the cache is skipped and
every lookup goes to V-World.
"""

from __future__ import annotations

import json
import hashlib
import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from app.config import settings
from app.models.schemas import LandUseResult
from app.services.land_use import search_land_use

logger = logging.getLogger(__name__)

_redis_client: Optional[redis.Redis] = None

TTL_LAND_USE = 86400  # 24 hours


async def get_redis() -> Optional[redis.Redis]:
    """Get or create Redis client. Returns None if Redis is not configured."""
    global _redis_client
    if _redis_client is not None:
        return _redis_client

    redis_url = settings.redis_url
    if not redis_url:
        return None

    try:
        _redis_client = redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=3,
            socket_timeout=3,
        )
        await _redis_client.ping()
        return _redis_client
    except (RedisError, ValueError) as e:
        # ValueError: malformed REDIS_URL
        logger.warning("Redis unavailable, lookup cache disabled: %s", e)
        _redis_client = None
        return None


def _make_key(prefix: str, identifier: str) -> str:
    return f"permit_check:{prefix}:{identifier}"


def _normalize_address(address: str) -> str:
    """Normalize an address for cache keying."""
    return hashlib.md5(" ".join(address.split()).lower().encode()).hexdigest()


async def cache_get(prefix: str, identifier: str) -> Optional[dict]:
    """Get a cached value. Returns None on miss or Redis unavailable."""
    r = await get_redis()
    if not r:
        return None
    try:
        val = await r.get(_make_key(prefix, identifier))
        if val:
            return json.loads(val)
    except (RedisError, ValueError) as e:
        logger.warning("Cache read failed for %s: %s", prefix, e)
    return None


async def cache_set(prefix: str, identifier: str, data: dict, ttl: int = TTL_LAND_USE) -> bool:
    """Set a cached value. Returns True on success."""
    r = await get_redis()
    if not r:
        return False
    try:
        await r.setex(_make_key(prefix, identifier), ttl, json.dumps(data, ensure_ascii=False))
        return True
    except RedisError as e:
        logger.warning("Cache write failed for %s: %s", prefix, e)
        return False


async def cached_search_land_use(address: str) -> LandUseResult:
    """search_land_use with a read-through cache for successful results."""
    key = _normalize_address(address)
    cached = await cache_get("land_use", key)
    if cached:
        return LandUseResult.model_validate(cached)

    result = await search_land_use(address)
    if result.success and result.zones:
        await cache_set("land_use", key, result.model_dump(mode="json"))
    return result
