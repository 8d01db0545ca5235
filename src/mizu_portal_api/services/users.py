from __future__ import annotations

from typing import Any, Optional, Type

from pydantic import BaseModel

from mizu_portal_api.core.client import ApiClient, Params
from mizu_portal_api.services._validation import maybe_validate


async def list_users(
    client: ApiClient,
    params: Optional[Params] = None,
    *,
    model: Optional[Type[BaseModel]] = None,
) -> Any:
    return maybe_validate(model, await client.get("users", params))


async def get_user(client: ApiClient, user_id: int) -> Any:
    return await client.get(f"/users/{user_id}")


async def update_user_status(client: ApiClient, user_id: int, status: str) -> Any:
    return await client.patch(f"/users/{user_id}/status", {"status": status})


async def list_user_groups(client: ApiClient, user_id: int) -> Any:
    return await client.get(f"/users/{user_id}/groups")


async def list_user_transactions(
    client: ApiClient, user_id: int, params: Optional[Params] = None
) -> Any:
    return await client.get(f"/users/{user_id}/transactions", params)


async def get_user_stats(client: ApiClient, user_id: int) -> Any:
    return await client.get(f"/users/{user_id}/stats")
