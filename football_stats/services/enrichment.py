"""
Post-processing stages for leaderboard rows.

Both stages are best effort: a failure affects only the rows it touches and
never fails the whole response.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple

from ..config import setup_logger
from ..constants import GOAL_EVENT, PENALTY_SITUATION
from ..errors import APIError, EmptyResultError
from ..fotmob_shared import as_dict, as_int, as_list, as_str, dig
from ..logging_utils import RateLimitedLogger
from ..ports.stats import TopScorer
from .. import settings

logger = setup_logger(__name__)
_throttled = RateLimitedLogger(logger, window_seconds=300)


# ----------------------------------------------------------------------
# Team names
# ----------------------------------------------------------------------
def team_name_lookup(adapter, competition_id: int) -> Dict[int, str]:
    try:
        return adapter.get_team_names(competition_id)
    except APIError as exc:
        logger.warning("team_names_lookup_failed comp=%s code=%s", competition_id, exc.code)
        return {}


def enrich_with_team_names(adapter, players: List[TopScorer], competition_id: int) -> List[TopScorer]:
    """Fill ``team.name`` from the competition's tables, else "Team {id}"."""

    names = team_name_lookup(adapter, competition_id)
    out: List[TopScorer] = []
    for p in players:
        team = dict(p["team"])
        team["name"] = names.get(team["id"]) or f"Team {team['id']}"
        out.append({**p, "team": team})  # type: ignore[typeddict-item]
    return out


# ----------------------------------------------------------------------
# Penalties from shot maps
# ----------------------------------------------------------------------
def _season_entry(player_payload, competition_id: int) -> str:
    for t in as_list(dig(player_payload, "statSeasons", 0, "tournaments")):
        t = as_dict(t)
        if as_int(t.get("tournamentId"), -1) == competition_id and t.get("entryId"):
            return as_str(t.get("entryId"))
    raise EmptyResultError("season entry", f"tournament={competition_id}")


def count_penalties(shotmap) -> Tuple[int, int]:
    """(scored, missed) among shots taken from the spot."""

    pens = [
        s for s in as_list(shotmap)
        if isinstance(s, dict) and s.get("situation") == PENALTY_SITUATION
    ]
    scored = sum(1 for s in pens if s.get("eventType") == GOAL_EVENT)
    return scored, len(pens) - scored


def player_penalties(client, player_id: int, competition_id: int) -> Tuple[int, int]:
    """Recount one player's penalties from the shot map of the matching season entry."""

    profile = client.fetch(client.player_url(player_id))
    entry = _season_entry(profile, competition_id)
    detail = client.fetch(client.player_url(player_id, entry))
    shotmap = as_list(dig(detail, "firstSeasonStats", "shotmap"))
    if not shotmap:
        raise EmptyResultError("shot map", f"player={player_id} entry={entry}")
    return count_penalties(shotmap)


def enrich_with_penalty_data(
    client,
    players: List[TopScorer],
    competition_id: int,
    max_workers: Optional[int] = None,
) -> List[TopScorer]:
    """
    Replace the provider's penalty goal counts with counts taken from shot maps.

    Only rows with ``penalties > 0`` are looked up, at most ``max_workers`` at a
    time. A player whose lookup fails keeps the original count with
    ``penaltyMissed`` forced to 0.
    """

    targets = [p for p in players if p["penalties"] > 0]
    if not targets:
        return list(players)

    def _one(p: TopScorer) -> Tuple[int, Tuple[int, int]]:
        player_id = p["player"]["id"]
        try:
            return player_id, player_penalties(client, player_id, competition_id)
        except APIError as exc:
            _throttled.warning(
                ("penalties", player_id, competition_id),
                "penalty_enrich_fallback player=%s comp=%s code=%s",
                player_id,
                competition_id,
                exc.code,
            )
            return player_id, (p["penalties"], 0)

    workers = max(1, min(max_workers or settings.PENALTY_ENRICH_CONCURRENCY, len(targets)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = dict(executor.map(_one, targets))

    logger.info(
        "penalty_enrich comp=%s players=%d workers=%d", competition_id, len(targets), workers
    )
    out: List[TopScorer] = []
    for p in players:
        counts = results.get(p["player"]["id"])
        if counts is None:
            out.append(p)
        else:
            scored, missed = counts
            out.append({**p, "penalties": scored, "penaltyMissed": missed})  # type: ignore[typeddict-item]
    return out
