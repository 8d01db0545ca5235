from typing import Any, Mapping, Optional


def format_param(value: Any) -> str:
    """
    Render a query value the way the portal backend reads it.
    Example: True -> 'true', None -> 'null', 3 -> '3'
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def parameterize(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Append `key=value` pairs in insertion order after a single '?'.
    Values are not percent-encoded; absent or empty params leave url untouched.
    """
    if not params:
        return url
    query = "&".join(f"{key}={format_param(value)}" for key, value in params.items())
    return f"{url}?{query}"


def build_url(
    base_path: str, relative_uri: str, params: Optional[Mapping[str, Any]] = None
) -> str:
    """
    Expand a relative URI into a full endpoint URL.
    Example: build_url('http://h/', '/users', {'a': 1}) -> 'http://h/users?a=1'
    """
    clean_uri = relative_uri[1:] if relative_uri.startswith("/") else relative_uri
    return f"{base_path}{parameterize(clean_uri, params)}"


__all__ = ["build_url", "parameterize", "format_param"]
