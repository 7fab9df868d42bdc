from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..config import MAX_SEASON_PROBES
from ..constants import STAT_GOALS
from ..errors import APIError
from ..fotmob_shared import as_list, dig

log = logging.getLogger(__name__)


def season_candidates(league_payload: Any) -> List[int]:
    """TournamentIds from stats.seasonStatLinks, most recent first as FotMob lists them."""

    out: List[int] = []
    for link in as_list(dig(league_payload, "stats", "seasonStatLinks")):
        if not isinstance(link, dict):
            continue
        tid = link.get("TournamentId")
        if isinstance(tid, bool):
            continue
        try:
            out.append(int(tid))
        except (TypeError, ValueError):
            continue
    return out


class SeasonResolver:
    """
    Picks the season id to use for a competition's deep stats.

    FotMob lists upcoming seasons before they have any data, so the first
    few candidates are probed with a goals query and the first non-empty one
    wins. Never raises: when nothing answers, the first candidate is used.
    """

    def __init__(self, client, max_probes: int = MAX_SEASON_PROBES):
        self.client = client
        self.max_probes = max_probes

    def _probe(self, competition_id: int, season_id: int) -> bool:
        url = self.client.deep_stats_url(competition_id, season_id, STAT_GOALS)
        try:
            data = self.client.fetch(url)
        except APIError as exc:
            log.info(
                "season_probe_failed comp=%s season=%s code=%s",
                competition_id,
                season_id,
                exc.code,
            )
            return False
        return bool(as_list(dig(data, "statsData")))

    def resolve(self, competition_id: int) -> int:
        candidates: Optional[List[int]] = None
        try:
            payload = self.client.fetch(self.client.league_url(competition_id))
            candidates = season_candidates(payload)
        except APIError as exc:
            log.warning(
                "season_candidates_unavailable comp=%s code=%s", competition_id, exc.code
            )

        if not candidates:
            # Last-resort guess; downstream aggregation comes back empty if wrong.
            log.warning("season_fallback_to_competition comp=%s", competition_id)
            return competition_id

        for season_id in candidates[: self.max_probes]:
            if self._probe(competition_id, season_id):
                log.info("season_resolved comp=%s season=%s", competition_id, season_id)
                return season_id

        log.info(
            "season_fallback_first comp=%s season=%s probed=%d",
            competition_id,
            candidates[0],
            min(len(candidates), self.max_probes),
        )
        return candidates[0]
