import logging
import sys
from datetime import datetime
import pytz


def utc_now() -> datetime:
    """Returns the current instant as a timezone-aware UTC datetime"""
    return datetime.now(pytz.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the database"""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def setup_logging(level: str = "INFO"):
    """Configure a single stderr handler on the root logger. Call once, early."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Remove any pre-existing handlers to avoid duplicates
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
