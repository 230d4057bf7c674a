"""Runtime settings and logging configuration.

Settings come from ``FINTRACK_*`` environment variables; explicit values
(typically command line options) take precedence. The resulting ``Settings``
object is created once at the composition root and passed down explicitly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_OWNER = "local"
DEFAULT_CURRENCY = "USD"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Resolved application settings."""

    db_path: Optional[str]
    owner_id: str = DEFAULT_OWNER
    currency: str = DEFAULT_CURRENCY
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(
    db_path: Optional[str] = None,
    owner_id: Optional[str] = None,
    currency: Optional[str] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Resolve settings from explicit values, then the environment, then defaults."""
    return Settings(
        db_path=db_path or os.environ.get("FINTRACK_DB_PATH") or None,
        owner_id=owner_id or os.environ.get("FINTRACK_OWNER") or DEFAULT_OWNER,
        currency=(currency or os.environ.get("FINTRACK_CURRENCY") or DEFAULT_CURRENCY).upper(),
        log_level=(log_level or os.environ.get("FINTRACK_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send fintrack log records to stderr at the given level."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    # No-op when the root logger already has handlers (e.g. under pytest)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("fintrack").setLevel(numeric_level)
