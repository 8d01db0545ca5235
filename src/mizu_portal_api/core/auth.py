"""Auth capability contract queried by the client on every request."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class AuthCapability(Protocol):
    def is_authenticated(self) -> bool: ...

    def token(self) -> Optional[str]: ...


class AnonymousAuth:
    """Never authenticated; requests go out without Authorization."""

    def is_authenticated(self) -> bool:
        return False

    def token(self) -> Optional[str]:
        return None


class StaticTokenAuth:
    """Fixed bearer token, e.g. for scripts and service accounts."""

    def __init__(self, token: Optional[str]):
        self._token = token or None

    def is_authenticated(self) -> bool:
        return self._token is not None

    def token(self) -> Optional[str]:
        return self._token


__all__ = ["AuthCapability", "AnonymousAuth", "StaticTokenAuth"]
