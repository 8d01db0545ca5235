from __future__ import annotations

from typing import Any, Optional, Type

from pydantic import BaseModel

from mizu_portal_api.core.client import ApiClient, Params
from mizu_portal_api.services._validation import maybe_validate

DEPOSIT = "DEPOSIT"
WITHDRAWAL = "WITHDRAWAL"


async def list_transactions(
    client: ApiClient,
    params: Optional[Params] = None,
    *,
    model: Optional[Type[BaseModel]] = None,
) -> Any:
    return maybe_validate(model, await client.get("transactions", params))


async def list_pending_transactions(client: ApiClient) -> Any:
    return await client.get("transactions", {"status": "PENDING"})


async def list_deposits(client: ApiClient, params: Optional[Params] = None) -> Any:
    return await client.get("transactions", {**(params or {}), "type": DEPOSIT})


async def list_withdrawals(client: ApiClient, params: Optional[Params] = None) -> Any:
    return await client.get("transactions", {**(params or {}), "type": WITHDRAWAL})


async def get_transaction(client: ApiClient, transaction_id: int) -> Any:
    return await client.get(f"/transactions/{transaction_id}")


async def approve_transaction(client: ApiClient, transaction_id: int) -> Any:
    return await client.patch(f"/transactions/{transaction_id}/approve", {})


async def reject_transaction(
    client: ApiClient, transaction_id: int, reason: Optional[str] = None
) -> Any:
    return await client.patch(
        f"/transactions/{transaction_id}/reject", {"reason": reason}
    )


async def get_transaction_stats(
    client: ApiClient, params: Optional[Params] = None
) -> Any:
    """Aggregates live under the envelope's `data` key."""
    payload = await client.get("/transactions/stats", params)
    return payload.get("data") if isinstance(payload, dict) else None
