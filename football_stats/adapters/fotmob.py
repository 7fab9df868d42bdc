from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from ..config import TEAM_FORM_SIZE, TOP_LIST_SIZE
from ..constants import (
    STAT_ASSISTS,
    STAT_GOALS,
    STAT_MINUTES,
    TEAM_ASSISTS_TITLE,
    TEAM_GOALS_TITLE,
    Competition,
    broadcasts_for,
    get_competition,
    league_logo_url,
    player_photo_url,
    team_logo_url,
)
from ..errors import APIError, EmptyResultError
from ..fotmob_shared import (
    as_dict,
    as_int,
    as_list,
    as_str,
    dig,
    normalize_rating,
    parse_score_pair,
    parse_utc,
    split_name,
)
from ..ports.fixtures import Fixture, FixturesPort, FixtureStatus, TodaysMatch, TodaysMatchesGroup
from ..ports.players import PlayerMatchEntry, PlayerProfile, PlayerProfilePort
from ..ports.standings import StandingRow, StandingsPort
from ..ports.stats import PlayerStatsPort, TopScorer
from ..ports.teams import FormEntry, NextMatch, TeamPlayerStat, TeamStats, TeamStatsPort
from .. import settings
from .fotmob_seasons import SeasonResolver

log = logging.getLogger(__name__)


def _fixture_status(status: Dict[str, Any]) -> FixtureStatus:
    started = bool(status.get("started"))
    finished = bool(status.get("finished"))
    if finished:
        return "finished"
    if started:
        return "live"
    return "upcoming"


def _fixture_team(raw: Any) -> Dict[str, Any]:
    side = as_dict(raw)
    return {
        "id": as_int(side.get("id")),
        "name": as_str(side.get("name")),
        "shortName": as_str(side.get("shortName") or side.get("name")),
    }


def _map_fixture(m: Dict[str, Any]) -> Fixture:
    status = as_dict(m.get("status"))
    state = _fixture_status(status)
    score = status.get("scoreStr") if state != "upcoming" else None
    return {
        "id": as_str(m.get("id")),
        "round": as_str(m.get("round") if m.get("round") is not None else m.get("roundName")),
        "homeTeam": _fixture_team(m.get("home")),
        "awayTeam": _fixture_team(m.get("away")),
        "utcTime": as_str(status.get("utcTime")),
        "status": state,
        "score": as_str(score) if score is not None else None,
    }


def _kickoff_key(m: Dict[str, Any]):
    ko = parse_utc(dig(m, "status", "utcTime"))
    # unparseable kickoffs sort last
    return (ko is None, ko or datetime.max.replace(tzinfo=timezone.utc))


def _kickoff_date(m: Dict[str, Any]) -> Optional[date]:
    ko = parse_utc(dig(m, "status", "utcTime"))
    return ko.date() if ko else None


def _all_matches(league_payload: Any) -> Iterable[Dict[str, Any]]:
    for m in as_list(dig(league_payload, "fixtures", "allMatches")):
        if isinstance(m, dict):
            yield m


def _standings_table(league_payload: Any) -> List[Dict[str, Any]]:
    """table[0].data.table.all, or the first group of a grouped competition."""

    data = dig(league_payload, "table", 0, "data")
    rows = dig(data, "table", "all")
    if rows is None:
        rows = dig(data, "tables", 0, "table", "all")
    rows = [r for r in as_list(rows) if isinstance(r, dict)]
    if not rows:
        raise EmptyResultError("standings")
    return rows


def _all_group_rows(league_payload: Any) -> Iterable[Dict[str, Any]]:
    """Rows from the single table plus every group table."""

    data = dig(league_payload, "table", 0, "data")
    rows = as_list(dig(data, "table", "all"))
    for group in as_list(dig(data, "tables")):
        rows = rows + as_list(dig(group, "table", "all"))
    return (r for r in rows if isinstance(r, dict))


def _form_string(league_payload: Any, team_id: int) -> str:
    team_form = as_dict(dig(league_payload, "table", 0, "teamForm"))
    entry = team_form.get(str(team_id)) or team_form.get(team_id)
    raw = as_dict(entry).get("formRaw") if isinstance(entry, dict) else entry
    if isinstance(raw, list):
        return "".join(str(x) for x in raw if x is not None)
    return as_str(raw)


class FotMobAdapter(
    PlayerStatsPort,
    StandingsPort,
    FixturesPort,
    TeamStatsPort,
    PlayerProfilePort,
):
    """
    Maps FotMob's undocumented JSON into the shapes in ``football_stats.ports``.

    Upstream field names stop here; nothing past this class sees them.
    """

    def __init__(
        self,
        client,
        resolver: Optional[SeasonResolver] = None,
        fixtures_limit: Optional[int] = None,
    ) -> None:
        self.client = client
        self.resolver = resolver or SeasonResolver(client)
        self.fixtures_limit = settings.FIXTURES_LIMIT if fixtures_limit is None else fixtures_limit

    # -------- PlayerStatsPort --------
    def _deep_stats(self, competition_id: int, season_id: int, stat: str) -> List[Dict[str, Any]]:
        data = self.client.fetch(self.client.deep_stats_url(competition_id, season_id, stat))
        return [p for p in as_list(dig(data, "statsData")) if isinstance(p, dict)]

    def _join_partner(self, competition_id: int, season_id: int, stat: str) -> List[Dict[str, Any]]:
        try:
            return self._deep_stats(competition_id, season_id, stat)
        except APIError as exc:
            log.warning(
                "deep_stats_join_failed comp=%s season=%s stat=%s code=%s",
                competition_id,
                season_id,
                stat,
                exc.code,
            )
            return []

    def _leaderboard(self, competition_id: int, primary: str, secondary: str) -> List[TopScorer]:
        t0 = time.perf_counter()
        season_id = self.resolver.resolve(competition_id)

        with ThreadPoolExecutor(max_workers=3) as executor:
            primary_f = executor.submit(self._deep_stats, competition_id, season_id, primary)
            secondary_f = executor.submit(self._join_partner, competition_id, season_id, secondary)
            minutes_f = executor.submit(self._join_partner, competition_id, season_id, STAT_MINUTES)
            primary_rows = primary_f.result()
            secondary_rows = secondary_f.result()
            minutes_rows = minutes_f.result()

        secondary_by_id = {
            as_int(p.get("id")): as_int(dig(p, "statValue", "value")) for p in secondary_rows
        }
        minutes_by_id = {
            as_int(p.get("id")): (
                as_int(dig(p, "statValue", "value")),
                as_int(dig(p, "substatValue", "value")),
            )
            for p in minutes_rows
        }

        out: List[TopScorer] = []
        for idx, p in enumerate(primary_rows[:TOP_LIST_SIZE]):
            player_id = as_int(p.get("id"))
            team_id = as_int(p.get("teamId"))
            name = as_str(p.get("name"))
            firstname, lastname = split_name(name)
            value = as_int(dig(p, "statValue", "value"))
            sub_value = as_int(dig(p, "substatValue", "value"))
            minutes, appearances = minutes_by_id.get(player_id, (0, 0))
            is_goals = primary == STAT_GOALS
            out.append(
                {
                    "rank": idx + 1,
                    "player": {
                        "id": player_id,
                        "name": name,
                        "firstname": firstname,
                        "lastname": lastname,
                        "age": 0,
                        "nationality": "",
                        "photo": player_photo_url(player_id),
                    },
                    "team": {"id": team_id, "name": "", "logo": team_logo_url(team_id)},
                    "goals": value if is_goals else secondary_by_id.get(player_id, 0),
                    "assists": secondary_by_id.get(player_id, 0) if is_goals else value,
                    "penalties": sub_value if is_goals else 0,
                    "penaltyMissed": 0,
                    "appearances": appearances,
                    "minutes": minutes,
                    "rating": None,
                    "yellowCards": 0,
                    "redCards": 0,
                }
            )

        log.info(
            "provider=fotmob op=leaderboard stat=%s comp=%s season=%s took_ms=%d count=%d",
            primary,
            competition_id,
            season_id,
            int((time.perf_counter() - t0) * 1000),
            len(out),
        )
        return out

    def get_top_scorers(self, competition_id: int) -> List[TopScorer]:
        return self._leaderboard(competition_id, STAT_GOALS, STAT_ASSISTS)

    def get_top_assists(self, competition_id: int) -> List[TopScorer]:
        return self._leaderboard(competition_id, STAT_ASSISTS, STAT_GOALS)

    # -------- StandingsPort --------
    def get_standings(self, competition_id: int) -> List[StandingRow]:
        payload = self.client.fetch(self.client.league_url(competition_id))
        try:
            rows = _standings_table(payload)
        except EmptyResultError:
            log.info("standings_empty comp=%s", competition_id)
            return []

        out: List[StandingRow] = []
        for pos, row in enumerate(rows, start=1):
            team_id = as_int(row.get("id"))
            goals_for, goals_against = parse_score_pair(row.get("scoresStr"))
            out.append(
                {
                    "rank": as_int(row.get("idx"), pos) or pos,
                    "team": {
                        "id": team_id,
                        "name": as_str(row.get("name")),
                        "logo": team_logo_url(team_id),
                    },
                    "points": as_int(row.get("pts")),
                    "played": as_int(row.get("played")),
                    "win": as_int(row.get("wins")),
                    "draw": as_int(row.get("draws")),
                    "lose": as_int(row.get("losses")),
                    "goalsFor": goals_for,
                    "goalsAgainst": goals_against,
                    "goalsDiff": as_int(row.get("goalConDiff")),
                    "form": _form_string(payload, team_id),
                }
            )
        return out

    def get_team_names(self, competition_id: int) -> Dict[int, str]:
        """Team id -> name across all groups, not only the displayed table."""

        payload = self.client.fetch(self.client.league_url(competition_id))
        names: Dict[int, str] = {}
        for row in _all_group_rows(payload):
            team_id = as_int(row.get("id"))
            name = as_str(row.get("name"))
            if team_id and name:
                names.setdefault(team_id, name)
        return names

    # -------- FixturesPort --------
    def get_fixtures(self, competition_id: int, limit: Optional[int] = None) -> List[Fixture]:
        payload = self.client.fetch(self.client.league_url(competition_id))
        cap = self.fixtures_limit if limit is None else limit

        pending = [
            m
            for m in _all_matches(payload)
            if not as_dict(m.get("status")).get("cancelled")
            and not as_dict(m.get("status")).get("finished")
        ]
        pending.sort(key=_kickoff_key)
        fixtures = [_map_fixture(m) for m in pending[: max(0, cap)]]
        if not fixtures:
            log.info("fixtures_empty comp=%s", competition_id)
        return fixtures

    def get_todays_matches(
        self,
        competitions: Iterable[Competition],
        today: Optional[date] = None,
    ) -> List[TodaysMatchesGroup]:
        """Matches kicking off today (UTC), grouped per competition in catalog order."""

        day = today or datetime.now(timezone.utc).date()
        comps = list(competitions)

        def _load(comp: Competition) -> Optional[TodaysMatchesGroup]:
            try:
                payload = self.client.fetch(self.client.league_url(comp["id"]))
            except APIError as exc:
                log.warning("todays_matches_skip comp=%s code=%s", comp["id"], exc.code)
                return None

            todays = [
                m
                for m in _all_matches(payload)
                if not as_dict(m.get("status")).get("cancelled")
                and _kickoff_date(m) == day
            ]
            if not todays:
                return None
            todays.sort(key=_kickoff_key)
            matches: List[TodaysMatch] = []
            for m in todays:
                fx = _map_fixture(m)
                matches.append({**fx, "leagueId": comp["id"], "leagueName": comp["name"]})  # type: ignore[typeddict-item]
            return {
                "leagueId": comp["id"],
                "leagueName": comp["name"],
                "leagueCountry": comp["country"],
                "leagueLogo": league_logo_url(comp["id"]),
                "broadcasts": broadcasts_for(comp["id"]),
                "matches": matches,
            }

        if not comps:
            return []
        with ThreadPoolExecutor(max_workers=min(8, len(comps))) as executor:
            groups = list(executor.map(_load, comps))
        return [g for g in groups if g]

    # -------- TeamStatsPort --------
    def _team_leaderboard(self, url: Optional[str], team_id: int) -> List[TeamPlayerStat]:
        if not url:
            return []
        data = self.client.fetch(url)
        out: List[TeamPlayerStat] = []
        for p in as_list(dig(data, "TopLists", 0, "StatList")):
            if not isinstance(p, dict) or as_int(p.get("TeamId")) != team_id:
                continue
            # FotMob spells it "ParticiantId"
            player_id = as_int(p.get("ParticiantId", p.get("ParticipantId")))
            out.append(
                {
                    "id": player_id,
                    "name": as_str(p.get("ParticipantName")),
                    "photo": player_photo_url(player_id),
                    "value": as_int(p.get("StatValue")),
                    "subValue": as_int(p.get("SubStatValue")),
                    "appearances": as_int(p.get("MatchesPlayed")),
                    "minutes": as_int(p.get("MinutesPlayed")),
                    "rank": as_int(p.get("Rank")),
                    "country": as_str(p.get("ParticipantCountryCode")),
                }
            )
        return out

    def get_team_stats(self, team_id: int) -> TeamStats:
        data = self.client.fetch(self.client.team_url(team_id))
        details = as_dict(dig(data, "details"))
        stats = as_dict(dig(data, "stats"))
        team_name = as_str(details.get("name"))
        league_id = as_int(stats.get("primaryLeagueId"))
        league = get_competition(league_id)

        overview = {
            "id": as_int(details.get("id"), team_id) or team_id,
            "name": team_name,
            "logo": team_logo_url(as_int(details.get("id"), team_id) or team_id),
            "country": as_str(details.get("country")),
            "leagueId": league_id,
            "leagueName": league["name"] if league else "",
            "seasonId": as_int(stats.get("primarySeasonId")),
        }

        fetch_all: Dict[str, Optional[str]] = {TEAM_GOALS_TITLE: None, TEAM_ASSISTS_TITLE: None}
        for board in as_list(stats.get("players")):
            key = as_dict(board).get("localizedTitleId")
            if key in fetch_all and fetch_all[key] is None:
                fetch_all[key] = as_dict(board).get("fetchAllUrl") or None

        with ThreadPoolExecutor(max_workers=2) as executor:
            scorers_f = executor.submit(self._team_leaderboard, fetch_all[TEAM_GOALS_TITLE], team_id)
            assisters_f = executor.submit(self._team_leaderboard, fetch_all[TEAM_ASSISTS_TITLE], team_id)
            scorers = scorers_f.result()
            assisters = assisters_f.result()

        form: List[FormEntry] = []
        for f in as_list(dig(data, "overview", "teamForm"))[:TEAM_FORM_SIZE]:
            f = as_dict(f)
            tip = as_dict(f.get("tooltipText"))
            home = as_str(tip.get("homeTeam"))
            away = as_str(tip.get("awayTeam"))
            form.append(
                {
                    "result": as_str(f.get("resultString")),
                    "opponent": away if home == team_name else home,
                    "score": as_str(f.get("score")),
                    "date": as_str(tip.get("utcTime")),
                }
            )

        next_match: Optional[NextMatch] = None
        nm = dig(data, "overview", "nextMatch")
        if isinstance(nm, dict):
            next_match = {
                "home": as_str(dig(nm, "home", "name")),
                "away": as_str(dig(nm, "away", "name")),
                "date": as_str(dig(nm, "status", "utcTime")),
                "tournament": as_str(dig(nm, "tournament", "name")),
            }

        return {
            "overview": overview,  # type: ignore[typeddict-item]
            "scorers": scorers,
            "assisters": assisters,
            "form": form,
            "nextMatch": next_match,
        }

    # -------- PlayerProfilePort --------
    def get_player_profile(self, player_id: int) -> PlayerProfile:
        data = as_dict(self.client.fetch(self.client.player_url(player_id)))

        info: Dict[str, Dict[str, Any]] = {}
        for item in as_list(data.get("playerInformation")):
            item = as_dict(item)
            key = item.get("translationKey")
            if key and key not in info:
                info[key] = item

        def _info_value(key: str, field: str) -> Any:
            return dig(info.get(key), "value", field)

        main_stats = {
            s.get("localizedTitleId"): s.get("value")
            for s in as_list(dig(data, "mainLeague", "stats"))
            if isinstance(s, dict)
        }

        pid = as_int(data.get("id"), player_id) or player_id
        team_id = as_int(dig(data, "primaryTeam", "teamId"))
        shirt = as_int(_info_value("shirt", "numberValue"))

        matches: List[PlayerMatchEntry] = []
        for m in as_list(data.get("recentMatches")):
            if not isinstance(m, dict):
                continue
            goals = as_int(m.get("goals"))
            assists = as_int(m.get("assists"))
            if goals <= 0 and assists <= 0:
                continue
            stage = m.get("stage")
            matches.append(
                {
                    "matchId": as_str(m.get("id")),
                    "date": as_str(dig(m, "matchDate", "utcTime")),
                    "leagueId": as_int(m.get("leagueId")),
                    "leagueName": as_str(m.get("leagueName")),
                    "stage": as_str(stage) if stage is not None else None,
                    "teamName": as_str(m.get("teamName")),
                    "teamId": as_int(m.get("teamId")),
                    "opponentName": as_str(m.get("opponentTeamName")),
                    "opponentId": as_int(m.get("opponentTeamId")),
                    "isHome": bool(m.get("isHomeTeam")),
                    "homeScore": as_int(m.get("homeScore")),
                    "awayScore": as_int(m.get("awayScore")),
                    "goals": goals,
                    "assists": assists,
                    "minutesPlayed": as_int(m.get("minutesPlayed")),
                    "rating": normalize_rating(dig(m, "ratingProps", "rating")),
                    "isTopRating": bool(dig(m, "ratingProps", "isTopRating")),
                    "playerOfTheMatch": bool(m.get("playerOfTheMatch")),
                    "yellowCards": as_int(m.get("yellowCards")),
                    "redCards": as_int(m.get("redCards")),
                    "onBench": bool(m.get("onBench")),
                }
            )

        return {
            "id": pid,
            "name": as_str(data.get("name")),
            "photo": player_photo_url(pid),
            "teamId": team_id,
            "teamName": as_str(dig(data, "primaryTeam", "teamName")),
            "teamLogo": team_logo_url(team_id),
            "position": as_str(dig(data, "positionDescription", "primaryPosition", "label")) or "Unknown",
            "country": as_str(_info_value("country_sentencecase", "fallback")),
            "countryCode": as_str(dig(info.get("country_sentencecase"), "icon", "id")),
            "age": as_int(_info_value("age_sentencecase", "numberValue")),
            "height": as_str(_info_value("height_sentencecase", "fallback")),
            "shirtNumber": shirt or None,
            "seasonGoals": as_int(main_stats.get("goals")),
            "seasonAssists": as_int(main_stats.get("assists")),
            "seasonAppearances": as_int(main_stats.get("matches_uppercase")),
            "seasonMinutes": as_int(main_stats.get("minutes_played")),
            # season rating keeps a literal 0, unlike per-match ratings
            "seasonRating": as_str(main_stats.get("rating")).strip() or None,
            "matches": matches,
        }
