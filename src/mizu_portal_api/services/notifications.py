from __future__ import annotations

from typing import Any, Dict, Optional

from mizu_portal_api.core.client import ApiClient, Params

NOTIFICATION_TYPES = frozenset(
    {
        "SAVINGS_REMINDER",
        "LOAN_APPROVAL",
        "REPAYMENT_DUE",
        "GROUP_UPDATE",
        "DONOR_REPORT",
    }
)
RECENT_LIMIT = 10


async def list_notifications(
    client: ApiClient, params: Optional[Params] = None
) -> Dict[str, Any]:
    """Returns {"data": [...], "unreadCount": n}."""
    return await client.get("/notifications", params)


async def get_unread_count(client: ApiClient) -> Dict[str, Any]:
    return await client.get("/notifications/unread-count")


async def mark_as_read(client: ApiClient, notification_id: str) -> Dict[str, Any]:
    return await client.patch(f"/notifications/{notification_id}/read", {})


async def mark_all_as_read(client: ApiClient) -> Dict[str, Any]:
    return await client.patch("/notifications/mark-all-read", {})


async def create_notification(
    client: ApiClient,
    *,
    user_id: str,
    title: str,
    message: str,
    type: str,
) -> Dict[str, Any]:
    """Admin only. `type` must be one of NOTIFICATION_TYPES."""
    if type not in NOTIFICATION_TYPES:
        raise ValueError(f"Unknown notification type: {type}")
    return await client.post(
        "/notifications",
        {"userId": user_id, "title": title, "message": message, "type": type},
    )


async def delete_notification(
    client: ApiClient, notification_id: str
) -> Dict[str, str]:
    await client.delete(f"/notifications/{notification_id}")
    return {"message": "Notification deleted successfully"}


async def list_recent_notifications(client: ApiClient) -> Dict[str, Any]:
    return await list_notifications(client, {"limit": RECENT_LIMIT, "offset": 0})


async def list_unread_notifications(client: ApiClient) -> Dict[str, Any]:
    return await list_notifications(client, {"read": False})
