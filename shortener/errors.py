"""
Error classes for the URL shortener core.

The web layer maps these onto HTTP responses:
    InvalidURLError -> 400
    StoreError      -> 500 (generic message, details only in the log)
"""

from typing import Optional


class URLShortenerError(Exception):
    """
    Base error class.

    Attributes:
        message: Error message
    """
    message: str = "URL shortener error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidURLError(URLShortenerError, ValueError):
    """Submitted URL is missing, of the wrong type or malformed."""
    message = "Invalid URL"


class ShortIdCollisionError(URLShortenerError):
    """A generated short id is already used by a different URL."""
    message = "Short id collision"

    def __init__(self, short_id: str):
        self.short_id = short_id
        super().__init__(f"Short id '{short_id}' is already taken")


class StoreError(URLShortenerError):
    """Any failure talking to the persistence layer (connection, timeout, constraint)."""
    message = "Store failure"
