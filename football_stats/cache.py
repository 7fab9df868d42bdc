"""Process-wide TTL cache for upstream JSON, keyed by the exact request URL."""
from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple


class TTLCache:
    """
    Key -> (timestamp, value) store with a fixed time-to-live.

    Expiry is lazy: a stale entry is only dropped when ``get`` runs into it.
    There is no capacity bound; the key space is one entry per distinct URL.
    """

    def __init__(self, ttl_sec: float = 600.0, clock: Callable[[], float] = time.time) -> None:
        self.ttl = float(ttl_sec)
        self._clock = clock
        self._d: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        now = self._clock()
        with self._lock:
            v = self._d.get(key)
            if v is None:
                return None
            ts, data = v
            if now - ts >= self.ttl:
                self._d.pop(key, None)
                return None
            return data

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._d[key] = (self._clock(), value)

    def clear(self) -> None:
        with self._lock:
            self._d.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._d)

    def __contains__(self, key: object) -> bool:
        # presence only; does not evict
        with self._lock:
            return key in self._d
