import pytest
from mizu_portal_api.core.events import ApiEvent, EventHub


def test_publish_calls_listeners_in_subscription_order():
    hub = EventHub()
    calls = []
    hub.subscribe("beforeRequest", lambda p: calls.append(("a", p)))
    hub.subscribe(ApiEvent.BEFORE_REQUEST, lambda p: calls.append(("b", p)))

    hub.publish("beforeRequest", {"uri": "users"})

    assert calls == [("a", {"uri": "users"}), ("b", {"uri": "users"})]


def test_topics_are_independent():
    hub = EventHub()
    calls = []
    hub.subscribe("afterRequest", calls.append)

    hub.publish("beforeRequest", "x")

    assert calls == []


def test_unsubscribe_removes_only_that_handle():
    hub = EventHub()
    calls = []

    def listener(p):
        calls.append(p)

    first = hub.subscribe("afterRequest", listener)
    hub.subscribe("afterRequest", listener)
    hub.unsubscribe(first)

    hub.publish("afterRequest", 1)

    assert calls == [1]
    assert hub.listeners("afterRequest") == (listener,)


def test_unsubscribe_is_noop_when_absent():
    hub = EventHub()
    other = EventHub()
    foreign = other.subscribe("serverClash", lambda: None)

    hub.unsubscribe(foreign)

    sub = hub.subscribe("serverClash", lambda: None)
    hub.unsubscribe(sub)
    hub.unsubscribe(sub)
    assert hub.listeners("serverClash") == ()
    assert len(other.listeners("serverClash")) == 1


def test_server_clash_listeners_take_no_arguments():
    hub = EventHub()
    calls = []
    hub.subscribe("serverClash", lambda: calls.append("clash"))

    hub.publish("serverClash")

    assert calls == ["clash"]


def test_unknown_topic_rejected():
    hub = EventHub()
    with pytest.raises(ValueError):
        hub.subscribe("onError", lambda p: None)
    with pytest.raises(ValueError):
        hub.publish("onError", None)


def test_listener_exception_propagates_and_stops_delivery():
    hub = EventHub()
    calls = []

    def broken(_p):
        raise RuntimeError("boom")

    hub.subscribe("beforeRequest", broken)
    hub.subscribe("beforeRequest", calls.append)

    with pytest.raises(RuntimeError):
        hub.publish("beforeRequest", 1)
    assert calls == []


def test_self_unsubscribe_during_publish_does_not_skip_others():
    hub = EventHub()
    calls = []
    holder = {}

    def once(p):
        calls.append(("once", p))
        hub.unsubscribe(holder["sub"])

    holder["sub"] = hub.subscribe("afterRequest", once)
    hub.subscribe("afterRequest", lambda p: calls.append(("always", p)))

    hub.publish("afterRequest", 1)
    hub.publish("afterRequest", 2)

    assert calls == [("once", 1), ("always", 1), ("always", 2)]
