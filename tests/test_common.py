"""Tests for common utilities."""

import json
import logging

from shortener.common.validators import is_valid_url, is_valid_short_id
from shortener.common.headers import (
    build_base_url,
    get_forwarded_path_prefix,
)
from shortener.common.url_builder import build_short_url, normalize_path_prefix
from shortener.common.logging_config import JSONFormatter, setup_logging


class TestValidators:
    """Test validation utilities."""
    
    def test_valid_urls(self):
        """Test valid URL validation."""
        valid, _ = is_valid_url("https://example.com")
        assert valid
        
        valid, _ = is_valid_url("http://example.com/path")
        assert valid
        
        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value")
        assert valid
    
    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()
        
        valid, error = is_valid_url(None)
        assert not valid
        
        valid, error = is_valid_url("not-a-url")
        assert not valid
        
        valid, error = is_valid_url("javascript:alert(1)")
        assert not valid
        
        valid, error = is_valid_url("ftp://example.com")
        assert not valid
        assert "http" in error.lower()
        
        valid, error = is_valid_url("https://example.com/" + "a" * 2048)
        assert not valid
        assert "too long" in error.lower()
        
        valid, error = is_valid_url(" https://example.com")
        assert not valid
    
    def test_valid_short_ids(self):
        """Test valid short id validation."""
        for short_id in ("abc123", "V1St-X", "a_b"):
            valid, _ = is_valid_short_id(short_id)
            assert valid
    
    def test_invalid_short_ids(self):
        """Test invalid short id validation."""
        valid, _ = is_valid_short_id("")
        assert not valid
        
        valid, error = is_valid_short_id("a" * 65)
        assert not valid
        assert "at most" in error.lower()
        
        valid, error = is_valid_short_id("abc@123")
        assert not valid


class TestHeaders:
    """Test header utilities."""
    
    def test_build_base_url_from_forwarded_headers(self):
        """Forwarded headers win over Host."""
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "sho.rt",
            "Host": "internal:9200",
        }
        
        assert build_base_url(headers, "http://localhost:9200") == "https://sho.rt"

    def test_build_base_url_chained_proxies(self):
        """Only the first hop of a comma-separated forwarded value is used."""
        headers = {
            "x-forwarded-proto": "https, http",
            "x-forwarded-host": "sho.rt, lb.internal",
        }

        assert build_base_url(headers, "http://localhost:9200") == "https://sho.rt"

    def test_build_base_url_needs_both_forwarded_headers(self):
        """A lone X-Forwarded-Proto falls through to Host."""
        headers = {"X-Forwarded-Proto": "https", "Host": "sho.rt"}

        assert build_base_url(headers, "http://localhost:9200") == "http://sho.rt"

    def test_build_base_url_from_host_defaults_to_http(self):
        """Host header without Protocol header uses http."""
        assert build_base_url({"host": "sho.rt"}, "http://localhost:9200") == "http://sho.rt"
    
    def test_build_base_url_protocol_header(self):
        """Protocol header selects the scheme."""
        headers = {"Host": "sho.rt", "Protocol": "https"}
        
        assert build_base_url(headers, "http://localhost:9200") == "https://sho.rt"
    
    def test_build_base_url_request_scheme(self):
        """Request scheme is used when no Protocol header is present."""
        base_url = build_base_url({"host": "sho.rt"}, "http://localhost", request_scheme="https")
        
        assert base_url == "https://sho.rt"
    
    def test_build_base_url_fallback(self):
        """Test base URL fallback."""
        assert build_base_url({}, "http://localhost:9200/") == "http://localhost:9200"
    
    def test_forwarded_path_prefix(self):
        """Prefix is normalized to a leading slash."""
        assert get_forwarded_path_prefix({"X-Forwarded-Prefix": "/u_s/"}) == "/u_s"
        assert get_forwarded_path_prefix({"X-Forwarded-Prefix": "/"}) == ""
        assert get_forwarded_path_prefix({}) == ""


class TestURLBuilder:
    """Test URL building utilities."""
    
    def test_build_short_url_no_prefix(self):
        """Test short URL building without prefix."""
        url = build_short_url(
            short_id="abc123",
            base_url="https://example.com/",
            path_prefix=""
        )
        
        assert url == "https://example.com/abc123"
    
    def test_build_short_url_with_prefix(self):
        """Test short URL building with prefix."""
        url = build_short_url(
            short_id="abc123",
            base_url="https://example.com",
            path_prefix="s/"
        )
        
        assert url == "https://example.com/s/abc123"
    
    def test_normalize_path_prefix(self):
        assert normalize_path_prefix("") == ""
        assert normalize_path_prefix(None) == ""
        assert normalize_path_prefix("/a/b/") == "/a/b"


class TestLogging:
    """Test logging configuration."""
    
    def test_setup_logging_replaces_handlers(self):
        logger = setup_logging(level="WARNING")
        logger = setup_logging(level="DEBUG")
        
        assert logger.name == "url_shortener"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    
    def test_json_formatter_escapes_message(self):
        record = logging.LogRecord(
            "url_shortener", logging.INFO, __file__, 1,
            'Created short URL: %s -> %s', ("abc123", 'https://e.com/"q"'), None,
        )
        
        payload = json.loads(JSONFormatter().format(record))
        assert payload["level"] == "INFO"
        assert payload["message"] == 'Created short URL: abc123 -> https://e.com/"q"'
