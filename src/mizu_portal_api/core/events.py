"""In-process publish/subscribe for request lifecycle hooks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import httpx

Listener = Callable[..., None]


class ApiEvent(str, Enum):
    BEFORE_REQUEST = "beforeRequest"
    AFTER_REQUEST = "afterRequest"
    SERVER_CLASH = "serverClash"


TopicLike = Union[ApiEvent, str]


@dataclass(frozen=True)
class RequestEvent:
    """Snapshot of one call handed to lifecycle listeners. Read-only."""

    uri: str
    method: str
    params: Optional[Mapping[str, Any]] = None
    data: Any = None
    response: Optional[httpx.Response] = None


@dataclass(frozen=True, eq=False)
class Subscription:
    """Opaque handle returned by EventHub.subscribe; compared by identity."""

    topic: ApiEvent
    listener: Listener = field(repr=False)


def _as_topic(topic: TopicLike) -> ApiEvent:
    try:
        return ApiEvent(topic)
    except ValueError:
        raise ValueError(
            f"Unknown event {topic!r}; expected one of "
            f"{', '.join(e.value for e in ApiEvent)}"
        ) from None


class EventHub:
    """
    Ordered listener registry keyed by the three fixed topics.

    Listener exceptions are not caught: they surface to whoever published.
    Not thread-safe; publish/subscribe are expected on the event loop thread.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.log = logger or logging.getLogger("mizu_portal_api.events")
        self._subscriptions: Dict[ApiEvent, List[Subscription]] = {
            topic: [] for topic in ApiEvent
        }

    def subscribe(self, topic: TopicLike, listener: Listener) -> Subscription:
        sub = Subscription(topic=_as_topic(topic), listener=listener)
        self._subscriptions[sub.topic].append(sub)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        subs = self._subscriptions.get(subscription.topic, [])
        for index, candidate in enumerate(subs):
            if candidate is subscription:
                del subs[index]
                return

    def listeners(self, topic: TopicLike) -> Tuple[Listener, ...]:
        return tuple(sub.listener for sub in self._subscriptions[_as_topic(topic)])

    def publish(self, topic: TopicLike, payload: Any = None) -> None:
        event = _as_topic(topic)
        # Snapshot so a listener that unsubscribes itself does not skip others.
        subs = tuple(self._subscriptions[event])
        self.log.debug(
            "event.publish", extra={"topic": event.value, "listeners": len(subs)}
        )
        for sub in subs:
            if payload is None:
                sub.listener()
            else:
                sub.listener(payload)


__all__ = [
    "ApiEvent",
    "EventHub",
    "Listener",
    "RequestEvent",
    "Subscription",
]
