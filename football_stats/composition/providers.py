from __future__ import annotations

import threading

from .. import settings
from ..adapters.fotmob import FotMobAdapter
from ..cache import TTLCache
from ..fotmob_client import FotMobClient

_lock = threading.Lock()
_cache = None
_client = None
_adapter = None


def shared_cache() -> TTLCache:
    """The one process-wide cache; every FotMob call goes through it."""
    global _cache
    with _lock:
        if _cache is None:
            _cache = TTLCache(ttl_sec=settings.CACHE_TTL_SECONDS)
        return _cache


def fotmob_client() -> FotMobClient:
    global _client
    cache = shared_cache()
    with _lock:
        if _client is None:
            _client = FotMobClient(
                cache,
                base_url=settings.FOTMOB_BASE,
                timeout_ms=settings.FOTMOB_TIMEOUT_MS,
                max_retries=settings.FOTMOB_MAX_RETRIES,
                token=settings.FOTMOB_TOKEN,
            )
        return _client


def fotmob_adapter() -> FotMobAdapter:
    global _adapter
    client = fotmob_client()
    with _lock:
        if _adapter is None:
            _adapter = FotMobAdapter(client, fixtures_limit=settings.FIXTURES_LIMIT)
        return _adapter


def reset() -> None:
    """Drop the singletons (tests)."""
    global _cache, _client, _adapter
    with _lock:
        _cache = None
        _client = None
        _adapter = None
