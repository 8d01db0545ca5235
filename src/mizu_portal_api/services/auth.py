from __future__ import annotations

import logging
from typing import Optional

from mizu_portal_api.core.client import ApiClient
from mizu_portal_api.models import AuthSession, SessionUser
from mizu_portal_api.services._validation import validate_payload

LOGIN_URI = "auth/login/"

log = logging.getLogger("mizu_portal_api.services.auth")


def login_payload(identifier: str, password: str) -> dict[str, str]:
    """Identifiers containing '@' log in by email, anything else by phone."""
    payload = {"password": password}
    if "@" in identifier:
        payload["email"] = identifier
    else:
        payload["phoneNumber"] = identifier
    return payload


class SessionAuth:
    """
    In-memory login session. Implements the auth capability, so the same
    instance is handed to ApiClient(auth=...) and updated by login/logout.
    """

    def __init__(self, session: Optional[AuthSession] = None):
        self.user: Optional[SessionUser] = session.user if session else None
        self._token: Optional[str] = session.token if session else None

    def is_authenticated(self) -> bool:
        return bool(self._token)

    def token(self) -> Optional[str]:
        return self._token

    @property
    def display_name(self) -> str:
        if self.user is None:
            return "User"
        return self.user.name or self.user.email or "User"

    async def login(
        self, client: ApiClient, identifier: str, password: str
    ) -> AuthSession:
        """
        POST credentials and keep the returned token and user.
        Raises InvalidCredentialsError on 401, and ApiError when the response
        lacks a token or user; the session is left untouched either way.
        """
        payload = await client.post(LOGIN_URI, login_payload(identifier, password))
        session = validate_payload(AuthSession, payload)
        self._token = session.token
        self.user = session.user
        log.info("auth.login", extra={"user_id": session.user.id})
        return session

    def logout(self) -> None:
        self.user = None
        self._token = None


__all__ = ["SessionAuth", "login_payload", "LOGIN_URI"]
