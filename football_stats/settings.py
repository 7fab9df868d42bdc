import os
from dotenv import load_dotenv

# Load .env from repo root (dotenv auto-walks up from CWD)
load_dotenv()


def _get_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not str(val).strip():
        return default
    try:
        return int(str(val).strip())
    except ValueError:
        return default


def _read_secret_file(path: str | None) -> str | None:
    if not path:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return None


# --- FotMob upstream ---
FOTMOB_BASE = os.getenv("FOTMOB_BASE", "https://www.fotmob.com/api").rstrip("/")
FOTMOB_TOKEN = os.getenv("FOTMOB_TOKEN") or _read_secret_file(os.getenv("FOTMOB_TOKEN_FILE"))
FOTMOB_TIMEOUT_MS = _get_int("FOTMOB_TIMEOUT_MS", 10000)   # per-call timeout
FOTMOB_MAX_RETRIES = _get_int("FOTMOB_MAX_RETRIES", 0)     # 0 = single attempt

# --- Cache & pipeline tunables ---
CACHE_TTL_SECONDS = _get_int("CACHE_TTL_SECONDS", 600)
FIXTURES_LIMIT = _get_int("FIXTURES_LIMIT", 30)
PENALTY_ENRICH_CONCURRENCY = max(1, _get_int("PENALTY_ENRICH_CONCURRENCY", 8))
