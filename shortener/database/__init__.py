"""Store layer for URL shortener."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import URLShortenerDBBase
from .memory import URLShortenerMemoryDB
from .postgres import URLShortenerPostgresDB
from .models import URLMapping

POSTGRES_SCHEMES = {"postgres", "postgresql"}
MEMORY_SCHEMES = {"memory"}


def create_database(
    database_url: str,
    pool_max_size: int = 10,
    connection_timeout_seconds: float = 30,
    logger: Optional[logging.Logger] = None,
) -> URLShortenerDBBase:
    """Create the store backend matching the connection string scheme.
    
    Args:
        database_url: postgresql://... or memory://
        pool_max_size: Maximum connection pool size (PostgreSQL only)
        connection_timeout_seconds: Connect and command timeout (PostgreSQL only)
        logger: Optional logger instance
        
    Returns:
        Store instance
        
    Raises:
        ValueError: If the scheme is not supported
    """
    scheme = urlparse(database_url).scheme.lower()
    
    if scheme in POSTGRES_SCHEMES:
        return URLShortenerPostgresDB(
            db_config=database_url,
            pool_max_size=pool_max_size,
            connection_timeout_seconds=connection_timeout_seconds,
            logger=logger,
        )
    if scheme in MEMORY_SCHEMES:
        return URLShortenerMemoryDB(db_config=database_url, logger=logger)
    
    raise ValueError(f"Unsupported database URL scheme: '{scheme}'")


__all__ = [
    "URLShortenerDBBase",
    "URLShortenerMemoryDB",
    "URLShortenerPostgresDB",
    "URLMapping",
    "create_database",
]
