"""Tests for short id generation."""

import random

import pytest
from shortener.shortid import ShortIdGenerator


class TestShortIdGenerator:
    """Test short id generation."""
    
    def test_alphabet_is_url_safe_64(self):
        """Alphabet has 64 distinct URL-safe symbols."""
        chars = ShortIdGenerator.URL_SAFE_CHARS
        assert len(chars) == 64
        assert len(set(chars)) == 64
        assert "-" in chars and "_" in chars
    
    def test_generate_default_length(self):
        """Test random id generation."""
        generator = ShortIdGenerator()
        
        for _ in range(200):
            short_id = generator.generate()
            assert len(short_id) == 6
            assert ShortIdGenerator.is_valid_format(short_id)
    
    def test_generate_custom_length(self):
        """Test random id with custom length."""
        generator = ShortIdGenerator(default_length=6)
        
        assert len(generator.generate(length=10)) == 10
        assert len(ShortIdGenerator(default_length=8).generate()) == 8
    
    def test_no_fixed_seed(self):
        """Default source produces different values across calls."""
        generator = ShortIdGenerator()
        
        ids = {generator.generate() for _ in range(100)}
        assert len(ids) > 90
    
    def test_injected_rng_is_deterministic(self):
        """Same seed, same sequence of ids."""
        first = ShortIdGenerator(rng=random.Random(1234))
        second = ShortIdGenerator(rng=random.Random(1234))
        
        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]
    
    def test_injected_rng_covers_alphabet(self):
        """Seeded source only ever yields alphabet characters."""
        generator = ShortIdGenerator(default_length=64, rng=random.Random(7))
        
        seen = set()
        for _ in range(50):
            seen.update(generator.generate())
        
        assert seen <= set(ShortIdGenerator.URL_SAFE_CHARS)
        assert len(seen) > 60
    
    def test_invalid_length(self):
        """Lengths below one are rejected."""
        with pytest.raises(ValueError):
            ShortIdGenerator(default_length=0)
        with pytest.raises(ValueError):
            ShortIdGenerator().generate(length=0)
    
    def test_is_valid_format(self):
        """Test format validation."""
        assert ShortIdGenerator.is_valid_format("abc123")
        assert ShortIdGenerator.is_valid_format("ABC_12")
        assert ShortIdGenerator.is_valid_format("te-st")
        
        # Invalid formats
        assert not ShortIdGenerator.is_valid_format("")
        assert not ShortIdGenerator.is_valid_format(None)
        assert not ShortIdGenerator.is_valid_format("abc 123")
        assert not ShortIdGenerator.is_valid_format("abc@123")
        assert not ShortIdGenerator.is_valid_format("abc/12")
