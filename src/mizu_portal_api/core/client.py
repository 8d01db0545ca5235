import dataclasses
import logging
import re
import time
from typing import Any, Mapping, Optional

import httpx

from .auth import AnonymousAuth, AuthCapability
from .config import load_env_config, normalize_base_url
from .events import ApiEvent, EventHub, Listener, RequestEvent, Subscription
from .headers import build_headers
from .observability import log_event
from .responses import interpret
from .urls import build_url

METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})
NETWORK_FAILURE_RE = re.compile(r"NetworkError|Failed to fetch", re.IGNORECASE)

Params = Mapping[str, Any]


def describe_failure(exc: BaseException) -> str:
    """
    Text matched against NETWORK_FAILURE_RE: class hierarchy plus message.
    Example: httpx.ConnectError('x') -> 'ConnectError NetworkError ... : x'
    """
    names = " ".join(cls.__name__ for cls in type(exc).__mro__ if cls is not object)
    return f"{names}: {exc}"


class ApiClient:
    """
    Single chokepoint for every call to the portal API.
    - Builds URLs from the base URL, injects the bearer token per request
    - Publishes beforeRequest/afterRequest/serverClash on its EventHub
    - Returns parsed JSON on 200/201, raises a typed ApiClientError otherwise
    - No retries, no caching; each failure is raised exactly once
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        auth: Optional[AuthCapability] = None,
        timeout_seconds: Optional[float] = None,
        events: Optional[EventHub] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = normalize_base_url(base_url)
        self.auth = auth if auth is not None else AnonymousAuth()
        self.timeout_seconds = timeout_seconds
        self.events = events if events is not None else EventHub()
        self.log = logger or logging.getLogger("mizu_portal_api.client")

        # timeout=None disables httpx's own 5s default.
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=timeout_seconds)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ApiClient":
        config = load_env_config()
        kwargs.setdefault("timeout_seconds", config.timeout_seconds)
        return cls(base_url=config.base_url, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def on(self, event: str, listener: Listener) -> Subscription:
        return self.events.subscribe(event, listener)

    def off(self, subscription: Subscription) -> None:
        self.events.unsubscribe(subscription)

    async def request(
        self,
        method: str,
        uri: str,
        *,
        params: Optional[Params] = None,
        data: Any = None,
    ) -> Any:
        """
        Core request method.
        - Raises the typed error for 400/401/404/409/422/502
        - Raises ApiError for any other status and for every transport failure,
          chained to the original httpx exception (InvalidURL included)
        - Publishes serverClash when a transport failure looks like a network outage
        """
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        event = RequestEvent(uri=uri, method=method, params=params, data=data)
        self.events.publish(ApiEvent.BEFORE_REQUEST, event)

        url = build_url(self.base_url, uri, params)
        headers = build_headers(self.auth)
        start = time.perf_counter()

        try:
            # json=None sends no body; an empty dict is still serialized.
            resp = await self.http.request(method, url, headers=headers, json=data)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log_event(
                "api_call",
                self.log,
                level=logging.WARNING,
                exc_info=exc,
                method=method,
                endpoint=uri,
                status="exception",
                error_type=type(exc).__name__,
                duration_ms=int((time.perf_counter() - start) * 1000),
            )
            if NETWORK_FAILURE_RE.search(describe_failure(exc)):
                self.events.publish(ApiEvent.SERVER_CLASH)
            _, error = interpret(None)
            raise error from exc

        log_event(
            "api_call",
            self.log,
            method=method,
            endpoint=uri,
            status=resp.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        self.events.publish(
            ApiEvent.AFTER_REQUEST, dataclasses.replace(event, response=resp)
        )

        payload, error = interpret(resp)
        if error is not None:
            raise error
        return payload

    async def get(self, uri: str, params: Optional[Params] = None) -> Any:
        return await self.request("GET", uri, params=params)

    async def post(
        self, uri: str, data: Any = None, params: Optional[Params] = None
    ) -> Any:
        return await self.request("POST", uri, params=params, data=data)

    async def put(
        self, uri: str, data: Any = None, params: Optional[Params] = None
    ) -> Any:
        return await self.request("PUT", uri, params=params, data=data)

    async def patch(
        self, uri: str, data: Any = None, params: Optional[Params] = None
    ) -> Any:
        return await self.request("PATCH", uri, params=params, data=data)

    async def delete(
        self, uri: str, params: Optional[Params] = None, data: Any = None
    ) -> None:
        await self.request("DELETE", uri, params=params, data=data)


def create_client_from_env(**kwargs: Any) -> ApiClient:
    """Create an ApiClient from MIZU_API_* environment variables."""
    return ApiClient.from_env(**kwargs)


__all__ = [
    "ApiClient",
    "METHODS",
    "NETWORK_FAILURE_RE",
    "create_client_from_env",
    "describe_failure",
]
