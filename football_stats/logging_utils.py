"""Throttled and one-shot log helpers."""
from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Set, Tuple


class RateLimitedLogger:
    """
    Emit at most one record per key per window.

    Used by the penalty enricher, where a FotMob outage would otherwise log
    one warning per player per request. When a key is emitted again after a
    quiet period, the number of records swallowed in between is appended as
    ``suppressed=N``.
    """

    def __init__(
        self,
        logger: logging.Logger,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._logger = logger
        self._window = max(float(window_seconds), 0.0)
        self._clock = clock
        # key -> (last emitted at, suppressed since)
        self._state: Dict[Tuple[Any, ...], Tuple[float, int]] = {}
        self._lock = threading.Lock()

    def _admit(self, key: Tuple[Any, ...]) -> Optional[int]:
        now = self._clock()
        with self._lock:
            last, dropped = self._state.get(key, (None, 0))
            if last is not None and now - last < self._window:
                self._state[key] = (last, dropped + 1)
                return None
            self._state[key] = (now, 0)
            return dropped

    def log(self, level: int, key: Any, msg: str, *args: Any) -> bool:
        key_tuple = tuple(key) if isinstance(key, (tuple, list)) else (key,)
        dropped = self._admit(key_tuple)
        if dropped is None:
            return False
        if dropped:
            msg = f"{msg} suppressed={dropped}"
        self._logger.log(level, msg, *args)
        return True

    def info(self, key: Any, msg: str, *args: Any) -> bool:
        return self.log(logging.INFO, key, msg, *args)

    def warning(self, key: Any, msg: str, *args: Any) -> bool:
        return self.log(logging.WARNING, key, msg, *args)


_once_lock = threading.Lock()
_once_keys: Set[Hashable] = set()


def warn_once(key: Hashable, msg: str, *, logger: Optional[logging.Logger] = None) -> bool:
    """Log ``msg`` at WARNING the first time ``key`` is seen in this process."""
    with _once_lock:
        if key in _once_keys:
            return False
        _once_keys.add(key)
    (logger or logging.getLogger(__name__)).warning(msg)
    return True


def reset_warn_once_cache() -> None:
    with _once_lock:
        _once_keys.clear()
