from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

ISO = "%Y-%m-%dT%H:%M:%SZ"


def to_iso_utc(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime(ISO)


def parse_utc(value: Any) -> Optional[datetime]:
    """Parse FotMob's utcTime ("2025-03-01T15:00:00.000Z") into an aware datetime."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone(timezone.utc)
    except ValueError:
        return None


def as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def dig(obj: Any, *path: Any) -> Any:
    """Walk nested dicts/lists; None as soon as a step is missing."""
    cur = obj
    for step in path:
        if isinstance(step, int):
            if not isinstance(cur, list) or not -len(cur) <= step < len(cur):
                return None
            cur = cur[step]
        else:
            if not isinstance(cur, dict):
                return None
            cur = cur.get(step)
        if cur is None:
            return None
    return cur


def as_int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return default


def as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def parse_score_pair(raw: Any) -> Tuple[int, int]:
    """
    "49-17" -> (49, 17). Missing halves default to 0; never raises.
    """
    if raw is None:
        return 0, 0
    parts = str(raw).split("-")
    first = as_int(parts[0].strip()) if parts else 0
    second = as_int(parts[1].strip()) if len(parts) > 1 else 0
    return first, second


def normalize_rating(raw: Any) -> Optional[str]:
    """
    Ratings arrive as 0 (no rating), a number, or a string.
    Returns None for "no rating", otherwise the rating as text.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        if raw == 0:
            return None
        return str(raw)
    text = str(raw).strip()
    return text or None


def split_name(full_name: str) -> Tuple[str, str]:
    parts = (full_name or "").split(" ")
    return parts[0] if parts else "", " ".join(parts[1:])
