"""
Errors raised by the data-access layer.
"""


class DaoError(Exception):
    """Base class for data-access errors."""


class DuplicateOrInvalidWrite(DaoError):
    """
    The store rejected an insert.
    
    Raised when a unique index is violated (e.g. an email that is already
    registered) or the document is otherwise refused. The message is the
    driver's own error message.
    """


class InvalidArgument(DaoError, ValueError):
    """An argument was rejected before any store access."""
