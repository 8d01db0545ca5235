from __future__ import annotations

from typing import Any, Optional, Tuple

import httpx

from .errors import (
    ApiClientError,
    ApiError,
    ApiServiceError,
    BadEntityError,
    BadRequestError,
    InvalidCredentialsError,
    NotFoundError,
    RecordConflictError,
)

SUCCESS_STATUSES = frozenset({200, 201})
GENERIC_ERROR_MESSAGE = "An internal server error has occured"

Outcome = Tuple[Any, Optional[ApiClientError]]


def _extract_errors(resp: httpx.Response) -> Any:
    """Best-effort read of the `errors` field; never raises."""
    if not resp.content:
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    return body.get("errors")


def interpret(resp: Optional[httpx.Response]) -> Outcome:
    """
    Classify a response into (payload, error). Exactly one side is set.

    - 200/201: parsed JSON body, no error
    - 400/401/404/422/409/502: the matching typed error
    - anything else, or no response at all: generic ApiError
    """
    if resp is None:
        return None, ApiError(GENERIC_ERROR_MESSAGE)

    status = resp.status_code
    if status in SUCCESS_STATUSES:
        try:
            return resp.json(), None
        except ValueError as exc:
            error = ApiError(GENERIC_ERROR_MESSAGE, status_code=status)
            error.__cause__ = exc
            return None, error

    errors = _extract_errors(resp)
    status_text = resp.reason_phrase

    if status == 400:
        return None, BadRequestError(status_text, errors)
    if status == 401:
        return None, InvalidCredentialsError()
    if status == 404:
        return None, NotFoundError(status_text)
    if status == 422:
        return None, BadEntityError(status_text, errors)
    if status == 409:
        return None, RecordConflictError(status_text, errors)
    if status == 502:
        return None, ApiServiceError(errors or "Gateway Error")

    return None, ApiError(GENERIC_ERROR_MESSAGE, status_code=status)


__all__ = ["interpret", "Outcome", "SUCCESS_STATUSES", "GENERIC_ERROR_MESSAGE"]
