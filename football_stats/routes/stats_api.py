from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, request

from ..app_utils import make_error, make_ok
from ..composition import providers
from ..config import LEAGUE_CACHE_CONTROL, TODAY_CACHE_CONTROL, setup_logger
from ..errors import APIError, ValidationError
from ..services.league_view import (
    build_league_view,
    build_player_view,
    build_team_view,
    build_todays_matches,
    list_competitions,
)
from ..validators import validate_league, validate_player_id, validate_team_id

bp = Blueprint("stats_api", __name__)

logger = setup_logger(__name__)


def _log_failure(route: str, exc: Exception) -> None:
    if isinstance(exc, APIError):
        logger.error("route=%s result=error %s", route, exc.to_dict())
    else:
        logger.exception("route=%s result=error", route)


@bp.get("/stats")
def league_stats():
    try:
        competition = validate_league(request.args.get("league"))
    except ValidationError as exc:
        return make_error(exc, 400)

    try:
        adapter = providers.fotmob_adapter()
        payload = build_league_view(competition, adapter, providers.fotmob_client())
    except Exception as exc:
        _log_failure("stats", exc)
        return make_error("Failed to fetch data", 500)
    return make_ok(payload, cache_control=LEAGUE_CACHE_CONTROL)


@bp.get("/team-stats")
def team_stats():
    try:
        team_id = validate_team_id(request.args.get("team"))
    except ValidationError as exc:
        return make_error(exc, 400)

    try:
        payload = build_team_view(team_id, providers.fotmob_adapter())
    except Exception as exc:
        _log_failure("team-stats", exc)
        return make_error("Failed to fetch team data", 500)
    return make_ok(payload, cache_control=LEAGUE_CACHE_CONTROL)


@bp.get("/player-stats")
def player_stats():
    try:
        player_id = validate_player_id(request.args.get("id"))
    except ValidationError as exc:
        return make_error(exc, 400)

    try:
        payload = build_player_view(player_id, providers.fotmob_adapter())
    except Exception as exc:
        _log_failure("player-stats", exc)
        return make_error("Failed to fetch player data", 500)
    return make_ok(payload, cache_control=LEAGUE_CACHE_CONTROL)


@bp.get("/today-matches")
def today_matches():
    groups = build_todays_matches(providers.fotmob_adapter())
    return make_ok(groups, cache_control=TODAY_CACHE_CONTROL)


@bp.get("/leagues")
def leagues():
    return make_ok(list_competitions())


@bp.get("/health")
def health():
    return make_ok({"ok": True, "ts": datetime.now(timezone.utc).isoformat()})
