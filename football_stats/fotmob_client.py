"""
FotMob HTTP client.

Every upstream call in the pipeline goes through :meth:`FotMobClient.fetch`,
which consults the shared TTL cache first and stores successful bodies under
the exact request URL.
"""
from __future__ import annotations

import time
from typing import Any, Dict, Optional

import requests

from .cache import TTLCache
from .config import setup_logger
from .errors import NetworkError, UpstreamError
from .logging_utils import warn_once
from .net_retry import request_with_retries
from . import settings

log = setup_logger(__name__)

# FotMob blocks requests that don't look like they come from its own web app.
DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://www.fotmob.com/",
}


class FotMobClient:
    def __init__(
        self,
        cache: TTLCache,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        max_retries: Optional[int] = None,
        token: Optional[str] = None,
        session: Optional[Any] = None,
    ) -> None:
        self.cache = cache
        self.base_url = (base_url or settings.FOTMOB_BASE).rstrip("/")
        timeout_ms = settings.FOTMOB_TIMEOUT_MS if timeout_ms is None else timeout_ms
        self.timeout_s = timeout_ms / 1000.0 if timeout_ms and timeout_ms > 0 else None
        retries = settings.FOTMOB_MAX_RETRIES if max_retries is None else max_retries
        self.attempts = 1 + max(0, int(retries))
        self.session = session
        self.headers = dict(DEFAULT_HEADERS)
        if token:
            self.headers["x-mas"] = token
        else:
            warn_once(
                "fotmob_token_missing",
                "fotmob_token_missing: requests go out without x-mas header; some endpoints may refuse",
                logger=log,
            )

    # -------- URL builders --------
    def league_url(self, competition_id: int) -> str:
        return f"{self.base_url}/leagues?id={competition_id}"

    def deep_stats_url(self, competition_id: int, season_id: int, stat: str) -> str:
        return (
            f"{self.base_url}/leagueseasondeepstats?id={competition_id}"
            f"&season={season_id}&type=players&stat={stat}"
        )

    def team_url(self, team_id: int) -> str:
        return f"{self.base_url}/teams?id={team_id}"

    def player_url(self, player_id: int, season_entry: Optional[str] = None) -> str:
        url = f"{self.base_url}/playerData?id={player_id}"
        if season_entry is not None:
            url += f"&season={season_entry}"
        return url

    # -------- transport --------
    def fetch(self, url: str) -> Any:
        """GET ``url`` and return parsed JSON, serving from cache when fresh."""

        t0 = time.perf_counter()
        cached = self.cache.get(url)
        if cached is not None:
            log.debug(
                "provider=fotmob op=fetch url=%s took_ms=%d result=cache",
                url,
                int((time.perf_counter() - t0) * 1000),
            )
            return cached

        try:
            response = request_with_retries(
                "GET",
                url,
                attempts=self.attempts,
                timeout=self.timeout_s,
                headers=self.headers,
                session=self.session,
                logger=log,
                sanitize=str,
            )
        except requests.exceptions.HTTPError as exc:
            status = getattr(getattr(exc, "response", None), "status_code", None)
            log.warning(
                "provider=fotmob op=fetch url=%s took_ms=%d result=error status=%s",
                url,
                int((time.perf_counter() - t0) * 1000),
                status,
            )
            raise UpstreamError(status, url, details=str(exc)) from exc
        except requests.exceptions.Timeout as exc:
            log.warning("provider=fotmob op=fetch url=%s result=timeout", url)
            raise NetworkError(url, str(exc), timeout=True) from exc
        except requests.exceptions.RequestException as exc:
            log.warning(
                "provider=fotmob op=fetch url=%s result=network_error err=%s",
                url,
                exc,
            )
            raise NetworkError(url, str(exc)) from exc

        try:
            data = response.json()
        except ValueError as exc:
            log.warning("provider=fotmob op=fetch url=%s result=parse_error", url)
            raise UpstreamError(
                response.status_code, url, code="PARSE_ERROR", details=str(exc)
            ) from exc

        self.cache.put(url, data)
        log.info(
            "provider=fotmob op=fetch url=%s took_ms=%d result=ok",
            url,
            int((time.perf_counter() - t0) * 1000),
        )
        return data
