import threading

import pytest

from football_stats.errors import UpstreamError
from football_stats.fotmob_client import FotMobClient
from football_stats.logging_utils import reset_warn_once_cache

BASE = "https://fotmob.test/api"


class FakeClient:
    """Serves canned payloads by URL; exceptions in the map are raised."""

    base_url = BASE
    league_url = FotMobClient.league_url
    deep_stats_url = FotMobClient.deep_stats_url
    team_url = FotMobClient.team_url
    player_url = FotMobClient.player_url

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self._lock = threading.Lock()

    def fetch(self, url):
        with self._lock:
            self.calls.append(url)
        if url not in self.routes:
            raise UpstreamError(404, url)
        value = self.routes[url]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture(autouse=True)
def _reset_warn_once():
    reset_warn_once_cache()
    yield
    reset_warn_once_cache()
