"""
Assembles the payloads served by the HTTP layer.

The league view has a fixed fetch order: standings first, which caches the
league payload that team-name lookup reads; then scorers, assists and fixtures
in parallel; then team names on both leaderboards in parallel; penalties last.
"""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..config import setup_logger
from ..constants import COMPETITIONS, Competition, broadcasts_for, league_logo_url
from ..errors import APIError
from ..fotmob_shared import to_iso_utc
from ..ports.fixtures import TodaysMatchesGroup
from .enrichment import enrich_with_penalty_data, enrich_with_team_names

logger = setup_logger(__name__)


def _now_iso() -> str:
    return to_iso_utc(datetime.now(timezone.utc))


def build_league_view(
    competition: Competition,
    adapter,
    client,
    *,
    penalty_workers: Optional[int] = None,
) -> Dict[str, Any]:
    """Everything the league page needs; raises APIError if an aggregator fails."""

    t0 = time.perf_counter()
    cid = competition["id"]

    standings = adapter.get_standings(cid)

    with ThreadPoolExecutor(max_workers=3) as executor:
        scorers_f = executor.submit(adapter.get_top_scorers, cid)
        assists_f = executor.submit(adapter.get_top_assists, cid)
        fixtures_f = executor.submit(adapter.get_fixtures, cid)
        raw_scorers = scorers_f.result()
        raw_assists = assists_f.result()
        fixtures = fixtures_f.result()

    with ThreadPoolExecutor(max_workers=2) as executor:
        scorers_f = executor.submit(enrich_with_team_names, adapter, raw_scorers, cid)
        assists_f = executor.submit(enrich_with_team_names, adapter, raw_assists, cid)
        named_scorers = scorers_f.result()
        top_assists = assists_f.result()

    top_scorers = enrich_with_penalty_data(client, named_scorers, cid, max_workers=penalty_workers)

    logger.info(
        "league_view comp=%s took_ms=%d scorers=%d assists=%d standings=%d fixtures=%d",
        cid,
        int((time.perf_counter() - t0) * 1000),
        len(top_scorers),
        len(top_assists),
        len(standings),
        len(fixtures),
    )
    return {
        "league": {
            "id": cid,
            "name": competition["name"],
            "country": competition["country"],
            "flag": competition["flag"],
            "logo": league_logo_url(cid),
        },
        "topScorers": top_scorers,
        "topAssists": top_assists,
        "standings": standings,
        "fixtures": fixtures,
        "lastUpdated": _now_iso(),
    }


def build_team_view(team_id: int, adapter) -> Dict[str, Any]:
    data = adapter.get_team_stats(team_id)
    return {**data, "lastUpdated": _now_iso()}


def build_player_view(player_id: int, adapter) -> Dict[str, Any]:
    return dict(adapter.get_player_profile(player_id))


def build_todays_matches(adapter) -> List[TodaysMatchesGroup]:
    """Today's matches across the catalog; an empty list if anything goes wrong."""

    try:
        return adapter.get_todays_matches(COMPETITIONS.values())
    except APIError as exc:
        logger.warning("todays_matches_failed code=%s", exc.code)
    except Exception:
        logger.exception("todays_matches_failed")
    return []


def list_competitions() -> List[Dict[str, Any]]:
    return [
        {
            **comp,
            "logo": league_logo_url(comp["id"]),
            "broadcasts": broadcasts_for(comp["id"]),
        }
        for comp in COMPETITIONS.values()
    ]
