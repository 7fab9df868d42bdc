"""FotMob-backed league, team and player statistics service."""
import logging
import os

__version__ = "0.1.0"

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

# connection-pool chatter drowns out the fetch=... lines
for _noisy in ("urllib3", "requests"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
