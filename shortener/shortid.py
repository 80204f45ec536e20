"""Short id generation."""

import secrets
import string
from typing import Optional


class ShortIdGenerator:
    """Generate random short ids for URLs."""
    
    # URL-safe alphabet (64 symbols), same set nanoid uses
    URL_SAFE_CHARS = string.ascii_letters + string.digits + "-_"
    
    def __init__(self, default_length: int = 6, rng=None):
        """Initialize short id generator.
        
        Args:
            default_length: Default length for generated ids
            rng: Random source with a ``choices`` method. Defaults to
                ``secrets.SystemRandom()``; pass ``random.Random(seed)`` in tests.
        """
        if default_length < 1:
            raise ValueError("default_length must be at least 1")
        self.default_length = default_length
        self.rng = rng if rng is not None else secrets.SystemRandom()
    
    def generate(self, length: Optional[int] = None) -> str:
        """Generate a random short id.
        
        Args:
            length: Length of the id (uses default if not specified)
            
        Returns:
            Random short id
        """
        length = self.default_length if length is None else length
        if length < 1:
            raise ValueError("length must be at least 1")
        return ''.join(self.rng.choices(self.URL_SAFE_CHARS, k=length))
    
    @staticmethod
    def is_valid_format(short_id: str) -> bool:
        """Check if a short id only uses the URL-safe alphabet.
        
        Args:
            short_id: Id to validate
            
        Returns:
            True if valid format
        """
        if not short_id or not isinstance(short_id, str):
            return False
        return all(c in ShortIdGenerator.URL_SAFE_CHARS for c in short_id)
