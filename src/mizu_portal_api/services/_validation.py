from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from mizu_portal_api.core.errors import ApiError
from mizu_portal_api.core.responses import GENERIC_ERROR_MESSAGE

M = TypeVar("M", bound=BaseModel)

log = logging.getLogger("mizu_portal_api.services")


def validate_payload(model: Type[M], payload: Any) -> M:
    """
    Coerce a success payload into `model`.
    A mismatch is a server contract breach: raises the generic ApiError,
    chained to the pydantic ValidationError.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        log.warning(
            "payload.invalid",
            extra={"model": model.__name__, "error_count": exc.error_count()},
        )
        raise ApiError(GENERIC_ERROR_MESSAGE) from exc


def maybe_validate(model: Optional[Type[M]], payload: Any) -> Any:
    """Pass payloads through untouched unless the caller opted into a model."""
    if model is None:
        return payload
    return validate_payload(model, payload)


__all__ = ["validate_payload", "maybe_validate"]
