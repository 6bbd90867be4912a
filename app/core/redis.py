"""
Redis caching utilities.
Sitemaps are cached per content kind and language; the cache is best effort
and every method degrades to a no-op when Redis is unreachable.
"""
import redis
import json
import logging
from typing import Optional, Any

from app.core.config import settings

logger = logging.getLogger(__name__)


class RedisCache:
    """Redis cache manager with connection pooling."""

    def __init__(self):
        """Initialize Redis connection pool."""
        self._pool: Optional[redis.ConnectionPool] = None
        self._client: Optional[redis.Redis] = None
        self._connected = False

    def connect(self):
        """
        Connect to Redis server.
        Safe to call multiple times - will reuse existing connection.
        """
        if self._connected and self._client:
            return

        try:
            self._pool = redis.ConnectionPool.from_url(
                settings.REDIS_URL,
                max_connections=20,
                decode_responses=True,
                socket_timeout=5,
                socket_connect_timeout=5,
            )
            self._client = redis.Redis(connection_pool=self._pool)

            # Test connection
            self._client.ping()
            self._connected = True
            logger.info("Redis cache connected")
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            self._connected = False
            self._client = None

    def disconnect(self):
        """Disconnect from Redis."""
        if self._pool:
            self._pool.disconnect()
        self._connected = False
        self._client = None
        logger.info("Redis cache disconnected")

    @property
    def is_connected(self) -> bool:
        """Check if Redis is connected."""
        return self._connected and self._client is not None

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found/error
        """
        if not self.is_connected:
            return None

        try:
            value = self._client.get(key)
            if value:
                try:
                    return json.loads(value)
                except json.JSONDecodeError:
                    return value
            return None
        except redis.RedisError as e:
            logger.warning(f"Redis GET error for key '{key}': {e}")
            return None

    def set(self, key: str, value: Any, ttl: int = 3600) -> bool:
        """
        Set value in cache with TTL.

        Args:
            key: Cache key
            value: Value to cache (will be JSON serialized)
            ttl: Time to live in seconds (default: 1 hour)

        Returns:
            True if successful, False otherwise
        """
        if not self.is_connected:
            return False

        try:
            if not isinstance(value, str):
                value = json.dumps(value)

            self._client.setex(key, ttl, value)
            return True
        except redis.RedisError as e:
            logger.warning(f"Redis SET error for key '{key}': {e}")
            return False

    def delete_pattern(self, pattern: str) -> int:
        """
        Delete all keys matching pattern.

        Args:
            pattern: Pattern to match (e.g., "sitemap:blog:*")

        Returns:
            Number of keys deleted
        """
        if not self.is_connected:
            return 0

        try:
            keys = list(self._client.scan_iter(match=pattern))
            if keys:
                return self._client.delete(*keys)
            return 0
        except redis.RedisError as e:
            logger.warning(f"Redis DELETE_PATTERN error for pattern '{pattern}': {e}")
            return 0


def sitemap_cache_key(kind: str, lang: str) -> str:
    return f"sitemap:{kind}:{lang}"


def invalidate_sitemaps(kind: str) -> None:
    """Drop cached sitemaps of one content kind."""
    cache.delete_pattern(f"sitemap:{kind}:*")


# Global cache instance, connected on application startup
cache = RedisCache()
