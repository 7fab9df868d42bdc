"""
Configuration constants for the football stats service
Centralizes logger setup and the HTTP cache windows advertised to clients
"""

import logging
import os
from logging.handlers import RotatingFileHandler


TOP_LIST_SIZE = 25
"""Leaderboards are truncated to this many rows."""

TEAM_FORM_SIZE = 10
"""Most recent form entries surfaced on the team view."""

MAX_SEASON_PROBES = 3
"""Season candidates probed before falling back to the first one."""

LEAGUE_CACHE_CONTROL = "public, s-maxage=600, stale-while-revalidate=60"
TODAY_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"


def setup_logger(name: str) -> logging.Logger:
    """Create or retrieve a configured logger for the application."""

    logger = logging.getLogger(name)

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    logger.setLevel(log_level)

    if logging.getLogger().handlers:
        logger.propagate = True
        return logger

    if not logger.handlers:
        log_file = os.path.join(os.path.dirname(os.path.dirname(__file__)), "football_stats.log")
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        logger.addHandler(handler)
        logger.propagate = False

    return logger
