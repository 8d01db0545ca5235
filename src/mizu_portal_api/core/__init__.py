"""Core client surface for mizu-portal-api (no domain endpoints)."""

from .auth import AnonymousAuth, AuthCapability, StaticTokenAuth
from .client import ApiClient, create_client_from_env
from .config import ClientConfig, load_env_config, normalize_base_url
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
from .events import ApiEvent, EventHub, RequestEvent, Subscription
from .headers import build_headers
from .responses import interpret
from .urls import build_url

__all__ = [
    # Client
    "ApiClient",
    "create_client_from_env",
    # Auth
    "AuthCapability",
    "AnonymousAuth",
    "StaticTokenAuth",
    # Config helpers
    "ClientConfig",
    "load_env_config",
    "normalize_base_url",
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
    # Builders
    "build_url",
    "build_headers",
    "interpret",
]
