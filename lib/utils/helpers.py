"""General helper utilities."""

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LONG_TIME_FORMAT = "%A, %d %B %Y - %H:%M:%S"


def local_now() -> datetime:
    """Current wall-clock time in the process' local timezone (naive)."""
    return datetime.now()


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def format_long_time(moment: datetime) -> str:
    """Render ``moment`` as e.g. ``Friday, 15 March 2024 - 10:30:00``."""
    return moment.strftime(LONG_TIME_FORMAT)
