from __future__ import annotations

from typing import Any, Optional, Type

from pydantic import BaseModel

from mizu_portal_api.core.client import ApiClient, Params
from mizu_portal_api.services._validation import maybe_validate


async def list_groups(
    client: ApiClient,
    params: Optional[Params] = None,
    *,
    model: Optional[Type[BaseModel]] = None,
) -> Any:
    """Pass model=PaginatedResponse to get the envelope validated."""
    return maybe_validate(model, await client.get("groups", params))


async def list_pending_groups(client: ApiClient) -> Any:
    return await client.get("/groups?status=PENDING")


async def get_group(client: ApiClient, group_id: int) -> Any:
    return await client.get(f"/groups/{group_id}")


async def list_group_members(client: ApiClient, group_id: int) -> Any:
    return await client.get(f"/groups/{group_id}/members")


# Status changes answer with an envelope; callers only need its `data`.


async def approve_group(client: ApiClient, group_id: int) -> Any:
    payload = await client.patch(f"/groups/{group_id}/approve", {})
    return _data(payload)


async def reject_group(
    client: ApiClient, group_id: int, reason: Optional[str] = None
) -> Any:
    payload = await client.patch(f"/groups/{group_id}/reject", {"reason": reason})
    return _data(payload)


async def update_group_status(client: ApiClient, group_id: int, status: str) -> Any:
    payload = await client.patch(f"/groups/{group_id}/status", {"status": status})
    return _data(payload)


def _data(payload: Any) -> Any:
    return payload.get("data") if isinstance(payload, dict) else None
