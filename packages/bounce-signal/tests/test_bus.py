"""Unit tests for SignalBus and CancelToken."""
from __future__ import annotations

from bounce_signal import CancelToken, SignalBus


def test_subscribe_and_flush():
    """Subscribe handler, publish signal, flush dispatches to handler."""
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append((signal_name, data))

    bus.subscribe("resized", handler)
    bus.publish("resized", width=300, height=200)
    bus.flush()

    assert received == [("resized", {"width": 300, "height": 200})]


def test_publish_without_subscribe():
    """Publish signal with no subscribers, flush is a no-op (no error)."""
    bus = SignalBus()
    bus.publish("no_subscribers", value=123)
    bus.flush()


def test_handler_registration_order():
    bus = SignalBus()
    order = []

    bus.subscribe("event", lambda name, data: order.append(1))
    bus.subscribe("event", lambda name, data: order.append(2))
    bus.subscribe("event", lambda name, data: order.append(3))

    bus.publish("event")
    bus.flush()

    assert order == [1, 2, 3]


def test_fifo_ordering():
    """Publish A then B, handlers called in A-then-B order."""
    bus = SignalBus()
    order = []

    def handler(signal_name: str, data: dict) -> None:
        order.append(signal_name)

    bus.subscribe("signal_a", handler)
    bus.subscribe("signal_b", handler)

    bus.publish("signal_a", value=1)
    bus.publish("signal_b", value=2)
    bus.flush()

    assert order == ["signal_a", "signal_b"]


def test_flush_clears_queue():
    """After flush, queue is empty, second flush dispatches nothing."""
    bus = SignalBus()
    calls = []

    bus.subscribe("test", lambda name, data: calls.append(data))
    bus.publish("test", value=1)
    bus.flush()
    bus.flush()

    assert calls == [{"value": 1}]


def test_clear_without_dispatch():
    """Clear removes queued signals, subsequent flush dispatches nothing."""
    bus = SignalBus()
    calls = []

    bus.subscribe("test", lambda name, data: calls.append(data))
    bus.publish("test", value=1)
    bus.clear()
    bus.flush()

    assert calls == []


def test_signals_during_flush_deferred():
    """Handler publishes new signal during flush, deferred to next flush."""
    bus = SignalBus()
    received = []

    def handler_initial(signal_name: str, data: dict) -> None:
        received.append(signal_name)
        bus.publish("deferred", nested=True)

    bus.subscribe("initial", handler_initial)
    bus.subscribe("deferred", lambda name, data: received.append(name))

    bus.publish("initial")
    bus.flush()
    assert received == ["initial"]

    bus.flush()
    assert received == ["initial", "deferred"]


# --- Cancellation tokens ---


def test_token_cancel_unsubscribes():
    bus = SignalBus()
    received = []

    token = bus.subscribe("test", lambda name, data: received.append(data))
    assert bus.subscriber_count("test") == 1

    token.cancel()
    bus.publish("test", value=42)
    bus.flush()

    assert token.cancelled
    assert received == []
    assert bus.subscriber_count("test") == 0


def test_token_cancel_is_idempotent():
    bus = SignalBus()
    token = bus.subscribe("test", lambda name, data: None)
    token.cancel()
    token.cancel()
    assert bus.subscriber_count("test") == 0


def test_cancel_during_flush_skips_later_handler():
    """A handler cancelled by an earlier handler in the same flush is not called."""
    bus = SignalBus()
    received = []
    tokens: list[CancelToken] = []

    def first(signal_name: str, data: dict) -> None:
        received.append("first")
        tokens[1].cancel()

    def second(signal_name: str, data: dict) -> None:
        received.append("second")

    tokens.append(bus.subscribe("event", first))
    tokens.append(bus.subscribe("event", second))

    bus.publish("event")
    bus.flush()

    assert received == ["first"]


def test_same_handler_twice_cancel_one():
    bus = SignalBus()
    calls = []

    def handler(signal_name: str, data: dict) -> None:
        calls.append(data)

    first = bus.subscribe("test", handler)
    bus.subscribe("test", handler)
    first.cancel()

    bus.publish("test", n=1)
    bus.flush()

    assert calls == [{"n": 1}]


def test_standalone_token_runs_callback_once():
    calls = []
    token = CancelToken(lambda: calls.append("cancelled"))
    assert not token.cancelled

    token.cancel()
    token.cancel()

    assert token.cancelled
    assert calls == ["cancelled"]
