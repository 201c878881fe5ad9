import json
from typing import Any, Optional

import redis.asyncio as redis
from loguru import logger

from odyssey.core.config import settings


class RedisCache:
    """
    Generic Redis cache wrapper for the application.
    Handles connection pooling, serialization, and error handling.
    """

    _instance: Optional["RedisCache"] = None

    def __init__(self, url: str | None = None):
        self.url = settings.REDIS_URL if url is None else url
        self._client: redis.Redis | None = None

    @classmethod
    def get_instance(cls) -> "RedisCache":
        if cls._instance is None:
            cls._instance = RedisCache()
        return cls._instance

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    async def get_client(self) -> redis.Redis:
        if self._client is None:
            if not self.url:
                raise RuntimeError("REDIS_URL is not configured")

            logger.info("Initializing Redis Cache Client")
            self._client = redis.from_url(
                self.url,
                decode_responses=True,
                encoding="utf-8",
                socket_connect_timeout=5,
                socket_timeout=5,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                health_check_interval=30,
            )
        return self._client

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(self, key: str) -> str | None:
        try:
            client = await self.get_client()
            return await client.get(key)
        except (redis.RedisError, OSError, RuntimeError) as e:
            logger.warning(f"Redis GET failed for {key}: {e}")
            return None

    async def get_json(self, key: str) -> Any:
        raw = await self.get(key)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding undecodable cache entry {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        try:
            client = await self.get_client()
            val = value if isinstance(value, str) else json.dumps(value, default=str)
            if ttl:
                await client.setex(key, ttl, val)
            else:
                await client.set(key, val)
            return True
        except (redis.RedisError, OSError, RuntimeError) as e:
            logger.warning(f"Redis SET failed for {key}: {e}")
            return False


cache = RedisCache.get_instance()
