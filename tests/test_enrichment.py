from conftest import BASE, FakeClient

from football_stats.errors import NetworkError, UpstreamError
from football_stats.services import enrichment


def scorer(pid, team_id, penalties=0, rank=1):
    return {
        "rank": rank,
        "player": {"id": pid, "name": f"P{pid}", "firstname": "", "lastname": "", "age": 0,
                   "nationality": "", "photo": ""},
        "team": {"id": team_id, "name": "", "logo": ""},
        "goals": 10,
        "assists": 0,
        "penalties": penalties,
        "penaltyMissed": 0,
        "appearances": 0,
        "minutes": 0,
        "rating": None,
        "yellowCards": 0,
        "redCards": 0,
    }


class FakeTeamNames:
    def __init__(self, names=None, error=None):
        self.names = names or {}
        self.error = error

    def get_team_names(self, competition_id):
        if self.error:
            raise self.error
        return self.names


def test_team_names_filled_from_tables():
    adapter = FakeTeamNames({9825: "Arsenal", 8456: "Man City"})
    players = [scorer(1, 9825), scorer(2, 4242)]

    out = enrichment.enrich_with_team_names(adapter, players, 47)

    assert [p["team"]["name"] for p in out] == ["Arsenal", "Team 4242"]
    assert players[0]["team"]["name"] == ""


def test_team_names_fall_back_when_lookup_fails():
    adapter = FakeTeamNames(error=UpstreamError(500, "x"))

    out = enrichment.enrich_with_team_names(adapter, [scorer(1, 9825)], 47)
    assert out[0]["team"]["name"] == "Team 9825"


def test_count_penalties():
    shotmap = [
        {"situation": "Penalty", "eventType": "Goal"},
        {"situation": "Penalty", "eventType": "Goal"},
        {"situation": "Penalty", "eventType": "AttemptSaved"},
        {"situation": "Penalty", "eventType": "Miss"},
        {"situation": "RegularPlay", "eventType": "Goal"},
        "junk",
    ]
    assert enrichment.count_penalties(shotmap) == (2, 2)
    assert enrichment.count_penalties([]) == (0, 0)


def player_routes(pid, shotmap, entry="2024/2025-47", competition_id=47):
    return {
        f"{BASE}/playerData?id={pid}": {
            "statSeasons": [
                {"tournaments": [{"tournamentId": 55, "entryId": "other"},
                                 {"tournamentId": competition_id, "entryId": entry}]}
            ]
        },
        f"{BASE}/playerData?id={pid}&season={entry}": {"firstSeasonStats": {"shotmap": shotmap}},
    }


def test_penalties_recounted_from_shotmap():
    client = FakeClient(
        player_routes(
            10,
            [
                {"situation": "Penalty", "eventType": "Goal"},
                {"situation": "Penalty", "eventType": "Miss"},
                {"situation": "OpenPlay", "eventType": "Goal"},
            ],
        )
    )
    players = [scorer(10, 1, penalties=3), scorer(11, 1, penalties=0, rank=2)]

    out = enrichment.enrich_with_penalty_data(client, players, 47)

    assert out[0]["penalties"] == 1
    assert out[0]["penaltyMissed"] == 1
    assert out[1] == players[1]
    assert not any("id=11" in url for url in client.calls)


def test_shotmap_without_penalties_recounts_to_zero():
    client = FakeClient(player_routes(10, [{"situation": "OpenPlay", "eventType": "Goal"}]))
    [row] = enrichment.enrich_with_penalty_data(client, [scorer(10, 1, penalties=2)], 47)
    assert (row["penalties"], row["penaltyMissed"]) == (0, 0)


def test_fallback_keeps_original_count():
    routes = player_routes(10, [])
    routes.update(player_routes(12, [{"situation": "Penalty", "eventType": "Goal"}], competition_id=99))
    routes[f"{BASE}/playerData?id=13"] = NetworkError("x", timeout=True)
    client = FakeClient(routes)
    players = [
        scorer(10, 1, penalties=4),  # empty shot map
        scorer(12, 1, penalties=2),  # no entry for this competition
        scorer(13, 1, penalties=1),  # upstream failure
    ]

    out = enrichment.enrich_with_penalty_data(client, players, 47, max_workers=2)

    assert [(p["penalties"], p["penaltyMissed"]) for p in out] == [(4, 0), (2, 0), (1, 0)]


def test_order_preserved_with_mixed_outcomes():
    routes = player_routes(1, [{"situation": "Penalty", "eventType": "Goal"}])
    routes.update(player_routes(3, [{"situation": "Penalty", "eventType": "Miss"}]))
    client = FakeClient(routes)
    players = [scorer(1, 1, 2, rank=1), scorer(2, 1, 5, rank=2), scorer(3, 1, 1, rank=3)]

    out = enrichment.enrich_with_penalty_data(client, players, 47, max_workers=1)

    assert [p["rank"] for p in out] == [1, 2, 3]
    assert [(p["penalties"], p["penaltyMissed"]) for p in out] == [(1, 0), (5, 0), (0, 1)]


def test_no_targets_makes_no_calls():
    client = FakeClient()
    players = [scorer(1, 1, 0)]
    assert enrichment.enrich_with_penalty_data(client, players, 47) == players
    assert client.calls == []
