from conftest import BASE, FakeClient

from football_stats.adapters.fotmob_seasons import SeasonResolver, season_candidates
from football_stats.errors import NetworkError, UpstreamError

LEAGUE = f"{BASE}/leagues?id=47"


def deep(season, stat="goals"):
    return f"{BASE}/leagueseasondeepstats?id=47&season={season}&type=players&stat={stat}"


def league_payload(*ids):
    return {"stats": {"seasonStatLinks": [{"TournamentId": i, "Name": "x"} for i in ids]}}


def test_season_candidates_reads_tournament_ids():
    payload = {
        "stats": {
            "seasonStatLinks": [
                {"TournamentId": 300},
                {"TournamentId": "200"},
                {"Name": "no id"},
                "junk",
            ]
        }
    }
    assert season_candidates(payload) == [300, 200]
    assert season_candidates({}) == []


def test_first_candidate_with_data_wins():
    client = FakeClient(
        {
            LEAGUE: league_payload(300, 200, 100),
            deep(300): {"statsData": []},
            deep(200): {"statsData": [{"id": 1}]},
        }
    )
    assert SeasonResolver(client).resolve(47) == 200
    assert deep(100) not in client.calls


def test_probe_errors_count_as_empty():
    client = FakeClient(
        {
            LEAGUE: league_payload(300, 200),
            deep(300): NetworkError(deep(300)),
            deep(200): {"statsData": [{"id": 1}]},
        }
    )
    assert SeasonResolver(client).resolve(47) == 200


def test_only_three_candidates_are_probed():
    client = FakeClient(
        {
            LEAGUE: league_payload(400, 300, 200, 100),
            deep(400): {"statsData": []},
            deep(300): {"statsData": []},
            deep(200): {"statsData": []},
            deep(100): {"statsData": [{"id": 1}]},
        }
    )
    assert SeasonResolver(client).resolve(47) == 400
    assert deep(100) not in client.calls


def test_single_empty_candidate_is_still_used():
    client = FakeClient({LEAGUE: league_payload(300), deep(300): {"statsData": []}})
    assert SeasonResolver(client).resolve(47) == 300


def test_no_candidates_falls_back_to_competition_id():
    client = FakeClient({LEAGUE: {"stats": {}}})
    assert SeasonResolver(client).resolve(47) == 47


def test_league_fetch_failure_falls_back_to_competition_id():
    client = FakeClient({LEAGUE: UpstreamError(500, LEAGUE)})
    assert SeasonResolver(client).resolve(47) == 47
    assert client.calls == [LEAGUE]
