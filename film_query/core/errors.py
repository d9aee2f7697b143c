"""Error types for the Film Query service.

Defines a small hierarchy of exceptions raised by the service layer to signal
data access failures, and by the API layer to signal invalid request
parameters. The HTTP mapping of each type lives in
``film_query.server.exception_handlers``.
"""

from __future__ import annotations

from typing import Optional


class FilmQueryError(RuntimeError):
    """Base error for failures while querying films."""

    default_message = "An unexpected error occurred while searching films"

    def __init__(self, message: Optional[str] = None, *, letter: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.letter = letter


class FilmDataAccessError(FilmQueryError):
    """Raised when the database cannot be reached or a query fails."""

    default_message = "Database error occurred while searching films. Please try again later."


class FilmDataIntegrityError(FilmDataAccessError):
    """Raised when the database reports a constraint violation."""

    default_message = "Database integrity error occurred while searching films"


class InvalidParameterError(ValueError):
    """Raised when a query parameter fails validation.

    Args:
        detail: Human-readable description returned to the client.
        parameter: Name of the offending parameter.
    """

    def __init__(self, detail: str, *, parameter: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.parameter = parameter
