from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "http://localhost:5000/api/"
BASE_URL_ENV = "MIZU_API_BASE_URL"
TIMEOUT_ENV = "MIZU_API_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    # None keeps the transport unbounded; there is no implicit default.
    timeout_seconds: Optional[float] = None


def normalize_base_url(base_url: Optional[str]) -> str:
    """Blank falls back to the default; the result always ends with '/'."""
    base_url = (base_url or "").strip() or DEFAULT_BASE_URL
    return base_url if base_url.endswith("/") else base_url + "/"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value


def load_env_config(*, use_dotenv: bool = True) -> ClientConfig:
    """Load base URL and timeout from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    return ClientConfig(
        base_url=normalize_base_url(os.getenv(BASE_URL_ENV)),
        timeout_seconds=_parse_timeout(os.getenv(TIMEOUT_ENV)),
    )


__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "BASE_URL_ENV",
    "TIMEOUT_ENV",
    "load_env_config",
    "normalize_base_url",
]
