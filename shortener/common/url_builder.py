"""URL building utilities for URL shortener."""


def normalize_path_prefix(path_prefix: str) -> str:
    """Normalize a path prefix to '/prefix' form, or '' when empty."""
    p = (path_prefix or "").strip().strip("/")
    return "/" + p if p else ""


def build_short_url(
    short_id: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.
    
    Args:
        short_id: The short id
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Optional path prefix (e.g., /s)
        
    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    return f"{base}{normalize_path_prefix(path_prefix)}/{short_id}"
