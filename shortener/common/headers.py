"""Request header helpers for building the public short URL."""

from typing import Mapping, Optional

from .url_builder import normalize_path_prefix


def _lower_keys(headers: Mapping[str, str]) -> dict:
    return {k.lower(): v for k, v in headers.items()}


def _first_hop(value: Optional[str]) -> Optional[str]:
    """First entry of a comma-separated value appended to by chained proxies."""
    if not value:
        return None
    return value.split(",")[0].strip() or None


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
) -> str:
    """Scheme and host visitors use to reach the service.

    X-Forwarded-Proto and X-Forwarded-Host win when both are present.
    Otherwise the Host header is paired with the Protocol header, the
    request's own scheme, or http. Without a Host header the configured
    base URL is returned.

    Args:
        headers: Request headers
        fallback_base_url: Configured base URL
        request_scheme: Scheme the request arrived on

    Returns:
        Base URL without trailing slash (e.g., https://sho.rt)
    """
    h = _lower_keys(headers)

    proto = _first_hop(h.get("x-forwarded-proto"))
    host = _first_hop(h.get("x-forwarded-host"))
    if proto and host:
        return f"{proto}://{host}"

    host = h.get("host")
    if host:
        scheme = h.get("protocol") or request_scheme or "http"
        return f"{scheme}://{host}"

    return fallback_base_url.rstrip("/")


def get_forwarded_path_prefix(headers: Mapping[str, str]) -> str:
    """X-Forwarded-Prefix normalized to '/prefix', or '' when absent."""
    return normalize_path_prefix(_lower_keys(headers).get("x-forwarded-prefix", ""))
