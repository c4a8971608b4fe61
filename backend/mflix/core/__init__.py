"""
Core module - Error taxonomy and logging setup.
"""
from mflix.core.exceptions import (
    DaoError,
    DuplicateOrInvalidWrite,
    InvalidArgument,
)
from mflix.core.logging import configure_logging

__all__ = [
    "DaoError",
    "DuplicateOrInvalidWrite",
    "InvalidArgument",
    "configure_logging",
]
