"""Common utilities for URL shortener."""

from .validators import is_valid_url, is_valid_short_id
from .headers import build_base_url, get_forwarded_path_prefix
from .url_builder import build_short_url, normalize_path_prefix
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "is_valid_short_id",
    "build_base_url",
    "get_forwarded_path_prefix",
    "build_short_url",
    "normalize_path_prefix",
    "setup_logging",
]
