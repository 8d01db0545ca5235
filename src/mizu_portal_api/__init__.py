"""mizu_portal_api package exports."""

from .core import (
    AnonymousAuth,
    ApiClient,
    ApiClientError,
    ApiError,
    ApiEvent,
    ApiServiceError,
    AuthCapability,
    BadEntityError,
    BadRequestError,
    EventHub,
    InvalidCredentialsError,
    NotFoundError,
    RecordConflictError,
    RequestEvent,
    StaticTokenAuth,
    Subscription,
    create_client_from_env,
)
from .core.logging import setup_logging
from .services.auth import SessionAuth

__all__ = [
    # Client
    "ApiClient",
    "create_client_from_env",
    "setup_logging",
    # Auth
    "AuthCapability",
    "AnonymousAuth",
    "StaticTokenAuth",
    "SessionAuth",
    # Exceptions
    "ApiClientError",
    "BadRequestError",
    "InvalidCredentialsError",
    "NotFoundError",
    "BadEntityError",
    "RecordConflictError",
    "ApiServiceError",
    "ApiError",
    # Events
    "ApiEvent",
    "EventHub",
    "RequestEvent",
    "Subscription",
]
