import threading

import pytest
from conftest import BASE, FakeClient

from football_stats.constants import COMPETITIONS
from football_stats.errors import UpstreamError
from football_stats.services import league_view


class RecordingAdapter:
    def __init__(self, fail_on=None, scorer_penalties=0):
        self.events = []
        self.fail_on = fail_on
        self.scorer_penalties = scorer_penalties
        self._lock = threading.Lock()

    def _record(self, name):
        with self._lock:
            self.events.append(name)
        if name == self.fail_on:
            raise UpstreamError(500, name)

    def get_standings(self, cid):
        self._record("standings")
        return [{"rank": 1, "team": {"id": 9825, "name": "Arsenal", "logo": ""}}]

    def get_team_names(self, cid):
        self._record("team_names")
        return {9825: "Arsenal"}

    def _row(self, pid):
        return {
            "rank": 1,
            "player": {"id": pid, "name": "P", "firstname": "P", "lastname": "", "age": 0,
                       "nationality": "", "photo": ""},
            "team": {"id": 9825, "name": "", "logo": ""},
            "goals": 1, "assists": 1, "penalties": 0, "penaltyMissed": 0,
            "appearances": 1, "minutes": 90, "rating": None, "yellowCards": 0, "redCards": 0,
        }

    def get_top_scorers(self, cid):
        self._record("scorers")
        row = self._row(1)
        row["penalties"] = self.scorer_penalties
        return [row]

    def get_top_assists(self, cid):
        self._record("assists")
        return [self._row(2)]

    def get_fixtures(self, cid):
        self._record("fixtures")
        return []

    def get_team_stats(self, team_id):
        return {"overview": {"id": team_id}, "scorers": [], "assisters": [], "form": [], "nextMatch": None}

    def get_todays_matches(self, competitions):
        self._record("today")
        return [{"leagueId": c["id"]} for c in list(competitions)[:1]]


def test_league_view_shape_and_order():
    adapter = RecordingAdapter()
    comp = COMPETITIONS[47]

    view = league_view.build_league_view(comp, adapter, client=None)

    assert adapter.events[0] == "standings"
    assert set(adapter.events[1:4]) == {"scorers", "assists", "fixtures"}
    assert adapter.events[4:] == ["team_names", "team_names"]
    assert view["league"] == {
        "id": 47,
        "name": comp["name"],
        "country": comp["country"],
        "flag": comp["flag"],
        "logo": "https://images.fotmob.com/image_resources/logo/leaguelogo/47.png",
    }
    assert view["topScorers"][0]["team"]["name"] == "Arsenal"
    assert view["topAssists"][0]["team"]["name"] == "Arsenal"
    assert view["standings"][0]["rank"] == 1
    assert view["fixtures"] == []
    assert view["lastUpdated"].endswith("Z")


@pytest.mark.parametrize("stage", ["standings", "scorers", "fixtures"])
def test_league_view_aggregator_failure_propagates(stage):
    adapter = RecordingAdapter(fail_on=stage)
    with pytest.raises(UpstreamError):
        league_view.build_league_view(COMPETITIONS[47], adapter, client=None)


def test_team_view_adds_timestamp():
    view = league_view.build_team_view(9825, RecordingAdapter())
    assert view["overview"] == {"id": 9825}
    assert "lastUpdated" in view


def test_todays_matches_swallows_errors():
    adapter = RecordingAdapter(fail_on="today")
    assert league_view.build_todays_matches(adapter) == []


def test_todays_matches_passes_catalog():
    assert league_view.build_todays_matches(RecordingAdapter()) == [{"leagueId": 47}]


def test_list_competitions_includes_logo_and_broadcasts():
    comps = league_view.list_competitions()
    assert len(comps) == len(COMPETITIONS)
    epl = comps[0]
    assert epl["id"] == 47
    assert epl["logo"].endswith("/leaguelogo/47.png")
    assert set(epl["broadcasts"]) == {"poland", "uk", "usa"}


def test_league_view_recounts_penalties_on_named_scorers():
    client = FakeClient(
        {
            f"{BASE}/playerData?id=1": {
                "statSeasons": [{"tournaments": [{"tournamentId": 47, "entryId": "2024/2025-47"}]}]
            },
            f"{BASE}/playerData?id=1&season=2024/2025-47": {
                "firstSeasonStats": {
                    "shotmap": [
                        {"situation": "Penalty", "eventType": "Goal"},
                        {"situation": "Penalty", "eventType": "AttemptSaved"},
                        {"situation": "Penalty", "eventType": "Miss"},
                        {"situation": "RegularPlay", "eventType": "Goal"},
                    ]
                }
            },
        }
    )
    adapter = RecordingAdapter(scorer_penalties=4)

    view = league_view.build_league_view(COMPETITIONS[47], adapter, client)

    top = view["topScorers"][0]
    assert (top["penalties"], top["penaltyMissed"]) == (1, 2)
    assert top["team"]["name"] == "Arsenal"
    assert view["topAssists"][0]["penaltyMissed"] == 0
    assert f"{BASE}/playerData?id=2" not in client.calls
