from typing import Dict

from .auth import AuthCapability

JSON_CONTENT_TYPE = "application/json"


def build_headers(auth: AuthCapability) -> Dict[str, str]:
    """Content-Type always; Authorization only while the session is authenticated."""
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    if auth.is_authenticated():
        headers["Authorization"] = f"Bearer {auth.token()}"
    return headers


__all__ = ["build_headers", "JSON_CONTENT_TYPE"]
