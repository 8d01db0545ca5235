from __future__ import annotations

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageLink(BaseModel):
    url: Optional[str] = None
    label: str
    active: bool = False

    model_config = ConfigDict(extra="ignore")


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Listing envelope returned by paginated endpoints.
    The client never coerces payloads into this; callers opt in with
    PaginatedResponse.model_validate(payload).
    """

    data: List[T] = Field(default_factory=list)
    current_page: int = 1
    first_page_url: Optional[str] = None
    from_: Optional[int] = Field(default=None, alias="from")
    last_page: Optional[int] = None
    last_page_url: Optional[str] = None
    links: List[PageLink] = Field(default_factory=list)
    next_page_url: Optional[str] = None
    path: Optional[str] = None
    per_page: Optional[int] = None
    prev_page_url: Optional[str] = None
    to: Optional[int] = None
    total: int = 0

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def has_next(self) -> bool:
        return self.next_page_url is not None


class SessionUser(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    email_verified_at: Optional[str] = None
    deactivated_at: Optional[str] = None
    role: Optional[str] = None
    permissions: List[dict[str, Any]] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class AuthSession(BaseModel):
    """Payload of POST auth/login/."""

    user: SessionUser
    token: str

    model_config = ConfigDict(extra="ignore")


__all__ = ["PageLink", "PaginatedResponse", "SessionUser", "AuthSession"]
