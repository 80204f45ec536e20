"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class URLMapping:
    """Represents a short id -> original URL mapping in the store."""
    
    short_id: str
    original_url: str
    created_at: Optional[datetime] = None
    
    @classmethod
    def from_record(cls, record) -> "URLMapping":
        """Create from a database row (asyncpg Record or mapping)."""
        return cls(
            short_id=record["short_id"],
            original_url=record["original_url"],
            created_at=record["created_at"],
        )
