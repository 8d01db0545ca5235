from __future__ import annotations

import asyncio
import os
import sys
from typing import Optional

from mizu_portal_api import ApiClient, ApiClientError, SessionAuth
from mizu_portal_api.core.logging import setup_logging
from mizu_portal_api.services import groups, notifications, transactions


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val else default


def _print_step(title: str) -> None:
    print(f"\n== {title}")


def _fail(msg: str) -> int:
    print(f"FAILED: {msg}")
    return 1


async def run_smoke_test() -> int:
    # --- Config ---
    identifier = _env("SMOKE_LOGIN")
    password = _env("SMOKE_PASSWORD")
    if not identifier or not password:
        return _fail("Missing SMOKE_LOGIN or SMOKE_PASSWORD.")

    auth = SessionAuth()
    client = ApiClient.from_env(auth=auth)
    clashes: list[None] = []
    client.on("serverClash", lambda: clashes.append(None))

    print("Config:")
    print(f"  base_url: {client.base_url}")
    print(f"  timeout: {client.timeout_seconds}")

    async with client:
        _print_step("Login")
        try:
            session = await auth.login(client, identifier, password)
        except ApiClientError as exc:
            if clashes:
                return _fail(f"API unreachable: {exc}")
            return _fail(f"Login rejected: {exc}")
        print(f"Logged in as {auth.display_name} (id={session.user.id})")

        _print_step("Pending groups")
        pending = await groups.list_pending_groups(client)
        print(f"  total: {pending.get('total') if isinstance(pending, dict) else '?'}")

        _print_step("Pending transactions")
        txs = await transactions.list_pending_transactions(client)
        print(f"  total: {txs.get('total') if isinstance(txs, dict) else '?'}")

        _print_step("Unread notifications")
        unread = await notifications.get_unread_count(client)
        print(f"  count: {unread.get('count')}")

    auth.logout()
    print("\nOK")
    return 0


if __name__ == "__main__":
    setup_logging(_env("SMOKE_LOG_LEVEL", "INFO"))
    sys.exit(asyncio.run(run_smoke_test()))
