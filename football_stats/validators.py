from typing import Any, Optional

from .config import setup_logger
from .constants import Competition, get_competition
from .errors import ValidationError

logger = setup_logger(__name__)


def parse_positive_id(raw: Optional[Any], name: str) -> int:
    """Coerce a query-string id to a positive int or raise ValidationError."""
    if raw is None or not str(raw).strip():
        raise ValidationError(f"{name} required")
    text = str(raw).strip()
    try:
        value = int(text)
    except ValueError:
        logger.warning("%s_invalid: %s", name.replace(" ", "_").lower(), text)
        raise ValidationError(f"Invalid {name}", text) from None
    if value <= 0:
        raise ValidationError(f"Invalid {name}", text)
    return value


def validate_league(raw: Optional[Any]) -> Competition:
    """Return the catalog entry for ``raw``; unknown ids are rejected before any fetch."""
    league_id = parse_positive_id(raw, "League ID")
    competition = get_competition(league_id)
    if competition is None:
        logger.warning("league_unknown: %s", league_id)
        raise ValidationError("Invalid league ID", str(league_id))
    return competition


def validate_team_id(raw: Optional[Any]) -> int:
    return parse_positive_id(raw, "Team ID")


def validate_player_id(raw: Optional[Any]) -> int:
    return parse_positive_id(raw, "Player ID")
