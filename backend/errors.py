"""Domain errors raised by the resource handlers.

Each error carries the HTTP status it maps to. The app in ``main`` turns them
into ``{"error": message}`` responses.
"""

from fastapi import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """A required field is missing or has an invalid value."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ApiError):
    """The request is well formed but the record's state does not allow it."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class MethodNotAllowedError(ApiError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
