"""Operator settings read from the environment."""

import os


def log_level():
    return os.getenv("LOG_LEVEL", "INFO").upper()


def check_timeout() -> float:
    """Deadline in seconds for a single component check."""
    return float(os.getenv("CHECK_TIMEOUT", "10"))


def check_interval() -> float:
    """Seconds between two evaluations of the same QuayRegistry."""
    return float(os.getenv("CHECK_INTERVAL", "30"))


def worker_limit() -> int:
    return int(os.getenv("WORKER_LIMIT", "5"))


def posting_enabled() -> bool:
    return os.getenv("POSTING_ENABLED", "false").lower() == "true"


def server_timeout() -> int:
    return int(os.getenv("SERVER_TIMEOUT", "60"))
