# football_stats/net_retry.py
"""Shared GET-with-retry helper for the upstream client."""
from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Any, Callable, Iterable, Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import setup_logger

_logger = setup_logger(__name__)

_DEFAULT_STATUS_FORCELIST: Tuple[int, ...] = (429, 500, 502, 503, 504)
_ALLOWED_METHODS = frozenset(["HEAD", "GET", "OPTIONS"])


def scrub_url(url: Optional[str]) -> str:
    """Strip the querystring so tokens never land in logs."""
    if not url:
        return ""
    try:
        parts = urlsplit(url)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "", parts.fragment))
    except ValueError:
        return url or ""


def _normalize_status_list(status_forcelist: Iterable[int] | None) -> Tuple[int, ...]:
    if not status_forcelist:
        return _DEFAULT_STATUS_FORCELIST
    return tuple(sorted(set(int(s) for s in status_forcelist)))


@lru_cache(maxsize=8)
def get_session(pool_size: int = 16) -> requests.Session:
    """Shared session; urllib3 retries are disabled so the loop below owns them."""

    adapter = HTTPAdapter(
        pool_connections=pool_size,
        pool_maxsize=pool_size,
        max_retries=Retry(total=0, connect=0, read=0, raise_on_status=False),
    )
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def request_with_retries(
    method: str,
    url: str,
    *,
    attempts: int = 1,
    backoff_factor: float = 0.5,
    status_forcelist: Iterable[int] | None = None,
    timeout: Optional[float] = None,
    logger: Optional[logging.Logger] = None,
    session: Optional[Any] = None,  # anything with .request(...)
    sanitize: Optional[Callable[[str], str]] = None,
    **kwargs: Any,
) -> requests.Response:
    """
    Perform an HTTP request, retrying transport errors and retryable statuses.

    ``attempts`` is the total number of tries (1 = no retry). The final failure
    is re-raised as the underlying ``requests`` exception; non-retryable HTTP
    statuses raise ``requests.HTTPError`` immediately.
    """

    attempts = max(1, int(attempts))
    statuses = _normalize_status_list(status_forcelist)
    session_obj = session or get_session()
    active_logger = logger or _logger
    clean = sanitize or scrub_url

    retry_state = Retry(
        total=attempts,
        connect=attempts,
        read=attempts,
        backoff_factor=backoff_factor,
        status_forcelist=statuses,
        allowed_methods=_ALLOWED_METHODS,
        raise_on_status=False,
    )

    tries = 0
    while True:
        tries += 1
        response: Optional[requests.Response] = None
        try:
            response = session_obj.request(method, url, timeout=timeout, **kwargs)
            response.raise_for_status()
            return response
        except requests.exceptions.RequestException as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            retryable = isinstance(
                exc, (requests.exceptions.Timeout, requests.exceptions.ConnectionError)
            ) or status_code in statuses
            if not retryable or tries >= attempts:
                if tries > 1:
                    active_logger.error(
                        "Failed %s %s after %d attempts: %s", method, clean(url), tries, exc
                    )
                raise

            retry_state = retry_state.increment(
                method=method,
                url=url,
                response=getattr(exc, "response", None) or response,
                error=exc,
            )
            backoff = retry_state.get_backoff_time()
            active_logger.warning(
                "Retrying %s %s (%d/%d): %s", method, clean(url), tries, attempts, exc
            )
            if backoff > 0:
                time.sleep(backoff)


__all__ = ["get_session", "request_with_retries", "scrub_url"]
