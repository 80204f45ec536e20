"""Validation utilities for URL shortener."""

from urllib.parse import urlparse
from typing import Tuple

from ..shortid import ShortIdGenerator

MAX_URL_LENGTH = 2048
MAX_SHORT_ID_LENGTH = 64


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.
    
    Args:
        url: The URL to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"
    
    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"
    
    if url != url.strip():
        return False, "URL must not contain surrounding whitespace"
    
    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"
    
    # Check if scheme is http or https
    if result.scheme not in ["http", "https"]:
        return False, "URL must use http or https protocol"
    
    # Check if netloc (domain) exists
    if not result.netloc:
        return False, "URL must have a valid domain"
    
    return True, ""


def is_valid_short_id(short_id: str) -> Tuple[bool, str]:
    """Validate a short id taken from a request path.
    
    Args:
        short_id: The short id to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_id or not isinstance(short_id, str):
        return False, "Short id is required"
    
    if len(short_id) > MAX_SHORT_ID_LENGTH:
        return False, f"Short id must be at most {MAX_SHORT_ID_LENGTH} characters"
    
    if not ShortIdGenerator.is_valid_format(short_id):
        return False, "Short id can only contain letters, numbers, hyphens, and underscores"
    
    return True, ""
