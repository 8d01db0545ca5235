from __future__ import annotations

from typing import Any, Optional


class ApiClientError(Exception):
    """Base error for every outcome the client raises."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BadRequestError(ApiClientError):
    def __init__(
        self, message: str, errors: Any = None, *, status_code: Optional[int] = 400
    ):
        super().__init__(message, status_code=status_code)
        self.errors = errors


class InvalidCredentialsError(ApiClientError):
    def __init__(self, *, status_code: Optional[int] = 401):
        super().__init__("Invalid username/password", status_code=status_code)


class NotFoundError(ApiClientError):
    def __init__(self, message: str, *, status_code: Optional[int] = 404):
        super().__init__(f"RECORD NOT FOUND: {message}", status_code=status_code)


class BadEntityError(ApiClientError):
    """Validation failure; `entity` holds the server's field errors."""

    def __init__(
        self, message: str, entity: Any = None, *, status_code: Optional[int] = 422
    ):
        super().__init__(f"ENTITY Error: {message}", status_code=status_code)
        self.entity = entity


class RecordConflictError(ApiClientError):
    def __init__(
        self, message: str, errors: Any = None, *, status_code: Optional[int] = 409
    ):
        super().__init__(message, status_code=status_code)
        self.errors = errors


class ApiServiceError(ApiClientError):
    def __init__(self, message: Any, *, status_code: Optional[int] = 502):
        super().__init__(f"API SERVICE_ERROR: {message}", status_code=status_code)


class ApiError(ApiClientError):
    """Catch-all outcome, also raised for every transport-level failure."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(f"API ERROR: {message}", status_code=status_code)


__all__ = [
    "ApiClientError",
    "BadRequestError",
    "InvalidCredentialsError",
    "NotFoundError",
    "BadEntityError",
    "RecordConflictError",
    "ApiServiceError",
    "ApiError",
]
