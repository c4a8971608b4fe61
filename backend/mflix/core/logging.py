"""
Logging setup for the data-access layer.
"""
import logging
from typing import Optional

from mflix.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.
    
    Args:
        level: Level name (e.g. "DEBUG"). Defaults to settings.log_level.
    """
    if level is None:
        level = get_settings().log_level
    
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
