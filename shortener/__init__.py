"""Core business logic for URL shortener."""

from .shortid import ShortIdGenerator
from .service import URLShortenerService
from .errors import URLShortenerError, InvalidURLError, ShortIdCollisionError, StoreError

__all__ = [
    "ShortIdGenerator",
    "URLShortenerService",
    "URLShortenerError",
    "InvalidURLError",
    "ShortIdCollisionError",
    "StoreError",
]
