"""Test doubles shared across test modules."""

import asyncio

from shortener.database.memory import URLShortenerMemoryDB
from shortener.shortid import ShortIdGenerator


class ScriptedGenerator(ShortIdGenerator):
    """Generator that hands out a fixed sequence of ids."""

    def __init__(self, ids):
        super().__init__(default_length=6)
        self._ids = iter(ids)

    def generate(self, length=None):
        return next(self._ids)


class FailingDB(URLShortenerMemoryDB):
    """Store whose every operation raises, like a dropped connection."""

    def __init__(self):
        super().__init__()
        self.calls = 0

    async def create_or_fetch(self, short_id, original_url, created_at=None):
        self.calls += 1
        raise ConnectionError("connection refused: password=hunter2")

    async def get_original_url(self, short_id):
        self.calls += 1
        raise ConnectionError("connection refused: password=hunter2")

    async def get_url_mapping(self, short_id):
        self.calls += 1
        raise ConnectionError("connection refused: password=hunter2")

    async def health_check(self):
        return False


class SlowDB(URLShortenerMemoryDB):
    """Store that never answers within the service timeout."""

    async def create_or_fetch(self, short_id, original_url, created_at=None):
        await asyncio.sleep(10)

    async def get_original_url(self, short_id):
        await asyncio.sleep(10)


class FakeRedisClient:
    """Minimal async stand-in for redis.asyncio.Redis."""

    def __init__(self):
        self.data = {}
        self.get_calls = 0

    async def get(self, key):
        self.get_calls += 1
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self.data[key] = value
        return True

    async def ping(self):
        return True

    async def aclose(self):
        pass
