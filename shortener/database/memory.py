"""In-memory implementation for URL shortener (tests and local development)."""

import asyncio
import logging
from typing import Optional, Dict
from datetime import datetime, timezone

from .base import URLShortenerDBBase
from .models import URLMapping
from ..errors import ShortIdCollisionError


class URLShortenerMemoryDB(URLShortenerDBBase):
    """Dict-backed mapping store with the same contract as the SQL backend.
    
    Two indexes are kept, by short id and by original URL, and both are
    updated under one lock so a create-or-fetch is atomic.
    """
    
    def __init__(self, db_config: str = "memory://", logger: Optional[logging.Logger] = None):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._by_short_id: Dict[str, URLMapping] = {}
        self._by_url: Dict[str, URLMapping] = {}
        self._lock = asyncio.Lock()
    
    async def create_or_fetch(
        self,
        short_id: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> URLMapping:
        async with self._lock:
            existing = self._by_url.get(original_url)
            if existing is not None:
                self.logger.debug(f"Reused short URL: {existing.short_id} -> {original_url}")
                return existing
            
            if short_id in self._by_short_id:
                self.logger.warning(f"Short id collision on insert: {short_id}")
                raise ShortIdCollisionError(short_id)
            
            mapping = URLMapping(
                short_id=short_id,
                original_url=original_url,
                created_at=created_at or datetime.now(timezone.utc),
            )
            self._by_short_id[short_id] = mapping
            self._by_url[original_url] = mapping
        
        self.logger.info(f"Created short URL: {short_id} -> {original_url}")
        return mapping
    
    async def get_original_url(self, short_id: str) -> Optional[str]:
        mapping = self._by_short_id.get(short_id)
        return mapping.original_url if mapping else None
    
    async def get_url_mapping(self, short_id: str) -> Optional[URLMapping]:
        return self._by_short_id.get(short_id)
    
    async def count_mappings(self, original_url: Optional[str] = None) -> int:
        if original_url is None:
            return len(self._by_short_id)
        return sum(1 for m in self._by_short_id.values() if m.original_url == original_url)
    
    async def ensure_schema(self) -> None:
        pass
    
    async def health_check(self) -> bool:
        return True
    
    async def close(self) -> None:
        self._by_short_id.clear()
        self._by_url.clear()
