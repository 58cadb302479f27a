"""
Error kinds raised by the persistence layer.

Store failures (constraint violations, lost connections, bad SQL) are not
represented here; they propagate as raised by SQLAlchemy.
"""

from typing import Any, Optional


class JobBoardError(Exception):
    """Base error carrying a message and an HTTP-style status code."""

    status = 500

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class BadRequestError(JobBoardError):
    """Raised when the caller supplied malformed or missing input."""

    status = 400


class NotFoundError(JobBoardError):
    """Raised when the targeted record does not exist."""

    status = 404

    def __init__(self, message: str, ident: Any = None):
        super().__init__(message)
        self.ident = ident
