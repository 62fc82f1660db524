"""Redis client management and the thumbnail URL cache."""

import logging
import time

import redis.asyncio as redis
import redis.exceptions

from vimeo_thumbnail.config import settings
from vimeo_thumbnail.exceptions import CacheError

logger = logging.getLogger(__name__)


async def create_redis_client() -> redis.Redis:
    """Create and return Redis async client.

    Connections are opened lazily from the client's pool on first command.

    Returns:
        Redis async client instance
    """
    client = redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_timeout=settings.redis_timeout_seconds,
        socket_connect_timeout=settings.redis_timeout_seconds,
    )
    logger.info("Redis client created for %s", settings.redis_url)
    return client


async def close_redis_client(client: redis.Redis | None) -> None:
    """Close Redis client connection."""
    if client is not None:
        await client.aclose()
        logger.info("Redis client closed")


class ThumbnailCache:
    """Redis-backed cache of resolved thumbnail URLs, keyed by video id and size."""

    def __init__(
        self,
        client: redis.Redis,
        key_prefix: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the thumbnail cache.

        Args:
            client: Redis async client
            key_prefix: Prefix of every cache key (defaults to settings.cache_key_prefix)
            ttl: Seconds from write time until an entry expires
                (defaults to settings.cache_ttl_seconds)
        """
        self.client = client
        self.key_prefix = settings.cache_key_prefix if key_prefix is None else key_prefix
        self.ttl = settings.cache_ttl_seconds if ttl is None else ttl

    def cache_key(self, video_id: str, size: str) -> str:
        """Build the cache key for a video id and thumbnail size."""
        return f"{self.key_prefix}{video_id}:{size}"

    async def get(self, video_id: str, size: str) -> str | None:
        """Get the cached URL for a video id and size.

        Args:
            video_id: Video identifier
            size: Requested thumbnail size

        Returns:
            Cached value or None if not found

        Raises:
            CacheError: If the Redis command fails or the stored value is not valid UTF-8
        """
        key = self.cache_key(video_id, size)
        try:
            value = await self.client.get(key)
        except (redis.exceptions.RedisError, UnicodeDecodeError) as exc:
            raise CacheError("get", key, exc) from exc
        if value is not None:
            logger.debug("Cache hit for key: %s", key)
        else:
            logger.debug("Cache miss for key: %s", key)
        return value

    async def set(self, video_id: str, size: str, url: str) -> None:
        """Store a URL with an absolute expiration ``ttl`` seconds from now.

        Args:
            video_id: Video identifier
            size: Requested thumbnail size
            url: Resolved thumbnail URL

        Raises:
            CacheError: If the Redis command fails
        """
        key = self.cache_key(video_id, size)
        expire_at = int(time.time()) + self.ttl
        try:
            await self.client.set(key, url, exat=expire_at)
        except redis.exceptions.RedisError as exc:
            raise CacheError("set", key, exc) from exc
        logger.debug("Cached %s to key: %s until %d", url, key, expire_at)
