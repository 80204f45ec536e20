"""Abstract base class for URL shortener store implementations."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime

from .models import URLMapping


class URLShortenerDBBase(ABC):
    """Abstract base class for URL mapping store operations."""
    
    def __init__(self, db_config: str):
        """Initialize store.
        
        Args:
            db_config: Store connection string
        """
        self.db_config = db_config
    
    @abstractmethod
    async def create_or_fetch(
        self,
        short_id: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> URLMapping:
        """Atomically insert a mapping, or return the existing one for the URL.
        
        Concurrent calls for the same ``original_url`` must converge on a
        single row.
        
        Args:
            short_id: Candidate short id for a new row
            original_url: The original long URL
            created_at: Optional creation timestamp (defaults to now)
            
        Returns:
            The mapping now associated with ``original_url``. Its ``short_id``
            equals the candidate only when a new row was inserted.
            
        Raises:
            ShortIdCollisionError: ``short_id`` already maps to a different URL
        """
        pass
    
    @abstractmethod
    async def get_original_url(self, short_id: str) -> Optional[str]:
        """Get the original URL for a short id.
        
        Args:
            short_id: The short id to lookup
            
        Returns:
            The original URL if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def get_url_mapping(self, short_id: str) -> Optional[URLMapping]:
        """Get the complete mapping for a short id.
        
        Args:
            short_id: The short id to lookup
            
        Returns:
            URLMapping or None if not found
        """
        pass
    
    @abstractmethod
    async def count_mappings(self, original_url: Optional[str] = None) -> int:
        """Count stored mappings, optionally only those for one URL.
        
        Args:
            original_url: Restrict the count to this URL
            
        Returns:
            Number of rows
        """
        pass
    
    @abstractmethod
    async def ensure_schema(self) -> None:
        """Create the mapping table if it does not exist."""
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
