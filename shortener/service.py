"""Business logic service for URL shortener."""

import asyncio
import logging
from typing import Optional, Dict, Any, Awaitable, TypeVar
from datetime import datetime, timezone

from .shortid import ShortIdGenerator
from .database.base import URLShortenerDBBase
from .database.cache import RedisCache
from .common.validators import is_valid_url, is_valid_short_id
from .errors import InvalidURLError, ShortIdCollisionError, StoreError

T = TypeVar("T")


class URLShortenerService:
    """Service layer: create-or-fetch mappings and resolve short ids."""

    def __init__(
        self,
        db: URLShortenerDBBase,
        cache: Optional[RedisCache] = None,
        short_id_generator: Optional[ShortIdGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 5,
        store_timeout_seconds: float = 5.0,
    ):
        """Initialize URL shortener service.

        Args:
            db: Store instance
            cache: Optional cache instance
            short_id_generator: Optional short id generator
            logger: Optional logger
            max_collision_retries: Regenerations allowed after a short id collision
            store_timeout_seconds: Upper bound for a single store operation
        """
        self.db = db
        self.cache = cache
        self.generator = short_id_generator or ShortIdGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries
        self.store_timeout_seconds = store_timeout_seconds

    async def _store_call(self, operation: str, call: Awaitable[T]) -> T:
        """Run one store operation under the timeout, mapping failures to StoreError."""
        try:
            return await asyncio.wait_for(call, timeout=self.store_timeout_seconds)
        except ShortIdCollisionError:
            raise
        except asyncio.TimeoutError as e:
            self.logger.error(f"Store {operation} timed out after {self.store_timeout_seconds}s")
            raise StoreError(f"Store {operation} timed out") from e
        except Exception as e:
            self.logger.exception(f"Store {operation} failed: {e}")
            raise StoreError(f"Store {operation} failed") from e

    async def create_or_fetch(self, original_url: str) -> Dict[str, Any]:
        """Return the short id for a URL, creating the mapping on first use.

        Repeated and concurrent calls for the same URL all return the id of
        the single stored row.

        Args:
            original_url: The original long URL

        Returns:
            Dictionary with short_id, original_url, created_at and created
            (True when this call inserted the row)

        Raises:
            InvalidURLError: If the URL fails validation (store not touched)
            StoreError: If the store fails, times out, or no free id was found
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise InvalidURLError(f"Invalid URL: {error}")

        created_at = datetime.now(timezone.utc)

        for attempt in range(self.max_collision_retries + 1):
            candidate = self.generator.generate()
            try:
                mapping = await self._store_call(
                    "create_or_fetch",
                    self.db.create_or_fetch(candidate, original_url, created_at),
                )
                break
            except ShortIdCollisionError:
                self.logger.warning(
                    f"Short id collision for {candidate} (attempt {attempt + 1}), regenerating"
                )
        else:
            self.logger.error(
                f"Unable to allocate a short id for {original_url} "
                f"after {self.max_collision_retries + 1} attempts"
            )
            raise StoreError("Unable to generate unique short id after multiple attempts")

        created = mapping.short_id == candidate

        # Cache the mapping
        if self.cache:
            await self.cache.set(self.cache.get_cache_key(mapping.short_id), mapping.original_url)

        if created:
            self.logger.info(f"Created short URL: {mapping.short_id} -> {original_url}")
        else:
            self.logger.info(f"Existing short URL: {mapping.short_id} -> {original_url}")

        return {
            "short_id": mapping.short_id,
            "original_url": mapping.original_url,
            "created_at": mapping.created_at or created_at,
            "created": created,
        }

    async def resolve(self, short_id: str) -> Optional[str]:
        """Get the original URL for a short id.

        Args:
            short_id: The short id to lookup

        Returns:
            Original URL or None if there is no mapping

        Raises:
            StoreError: If the store fails or times out
        """
        is_valid, _ = is_valid_short_id(short_id)
        if not is_valid:
            self.logger.debug(f"Rejected malformed short id: {short_id!r}")
            return None

        # Try cache first
        if self.cache:
            cached_url = await self.cache.get(self.cache.get_cache_key(short_id))
            if cached_url:
                self.logger.debug(f"Cache hit for {short_id}")
                return cached_url

        original_url = await self._store_call("lookup", self.db.get_original_url(short_id))

        if original_url is None:
            self.logger.info(f"Short id not found: {short_id}")
            return None

        if self.cache:
            await self.cache.set(self.cache.get_cache_key(short_id), original_url)

        self.logger.debug(f"Resolved: {short_id} -> {original_url}")
        return original_url

    async def get_url_info(self, short_id: str) -> Optional[Dict[str, Any]]:
        """Get the stored mapping for a short id.

        Args:
            short_id: The short id to lookup

        Returns:
            Dictionary with short_id, original_url, created_at or None
        """
        is_valid, _ = is_valid_short_id(short_id)
        if not is_valid:
            return None

        mapping = await self._store_call("get_url_mapping", self.db.get_url_mapping(short_id))
        if mapping is None:
            return None
        return {
            "short_id": mapping.short_id,
            "original_url": mapping.original_url,
            "created_at": mapping.created_at,
        }

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        try:
            db_healthy = await asyncio.wait_for(
                self.db.health_check(), timeout=self.store_timeout_seconds
            )
        except asyncio.TimeoutError:
            self.logger.error("Database health check timed out")
            db_healthy = False

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.db.close()
        if self.cache:
            await self.cache.close()
