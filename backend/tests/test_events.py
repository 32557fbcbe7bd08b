"""
Tests for engine/events.py - the publish/subscribe registry.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from engine.events import EventEmitter


class TestEventEmitter:
    """Tests for the EventEmitter class."""

    def test_emit_calls_listener_with_payload(self):
        """Listeners receive the emitted payload."""
        emitter = EventEmitter()
        received = []
        emitter.on("tick", received.append)

        emitter.emit("tick", 7)

        assert received == [7]

    def test_emit_without_payload(self):
        """Events without a payload call listeners with no arguments."""
        emitter = EventEmitter()
        calls = []
        emitter.on("move", lambda: calls.append("move"))

        emitter.emit("move")

        assert calls == ["move"]

    def test_emit_without_listeners_is_noop(self):
        """Emitting an event nobody listens to does nothing."""
        emitter = EventEmitter()
        emitter.emit("nothing", 1)

    def test_listeners_called_in_subscription_order(self):
        """Listeners run in the order they subscribed."""
        emitter = EventEmitter()
        order = []
        emitter.on("tick", lambda tick: order.append("first"))
        emitter.on("tick", lambda tick: order.append("second"))
        emitter.on("tick", lambda tick: order.append("third"))

        emitter.emit("tick", 0)

        assert order == ["first", "second", "third"]

    def test_same_callback_subscribed_once(self):
        """Subscribing the same callback twice does not double-call it."""
        emitter = EventEmitter()
        received = []
        emitter.on("tick", received.append)
        emitter.on("tick", received.append)

        emitter.emit("tick", 1)

        assert received == [1]
        assert emitter.listener_count("tick") == 1

    def test_disposer_unsubscribes(self):
        """The returned disposer removes the listener."""
        emitter = EventEmitter()
        received = []
        dispose = emitter.on("tick", received.append)

        emitter.emit("tick", 1)
        dispose()
        emitter.emit("tick", 2)

        assert received == [1]
        assert emitter.listener_count("tick") == 0

    def test_disposer_is_idempotent(self):
        """Calling a disposer twice is harmless."""
        emitter = EventEmitter()
        dispose = emitter.on("tick", lambda tick: None)
        dispose()
        dispose()
        assert emitter.listener_count("tick") == 0

    def test_disposer_only_removes_its_listener(self):
        """Other listeners of the same event keep receiving it."""
        emitter = EventEmitter()
        first, second = [], []
        dispose_first = emitter.on("tick", first.append)
        emitter.on("tick", second.append)

        dispose_first()
        emitter.emit("tick", 3)

        assert first == []
        assert second == [3]

    def test_unsubscribe_during_emit(self):
        """A listener can remove itself while being dispatched."""
        emitter = EventEmitter()
        calls = []
        disposers = {}

        def once(tick):
            calls.append(tick)
            disposers["once"]()

        disposers["once"] = emitter.on("tick", once)
        emitter.on("tick", lambda tick: calls.append(("other", tick)))

        emitter.emit("tick", 0)
        emitter.emit("tick", 1)

        assert calls == [0, ("other", 0), ("other", 1)]

    def test_listener_exceptions_propagate(self):
        """Errors raised by listeners are not swallowed."""
        emitter = EventEmitter()

        def boom():
            raise ValueError("bad listener")

        emitter.on("move", boom)
        with pytest.raises(ValueError):
            emitter.emit("move")

    def test_events_are_independent(self):
        """Listeners only receive the event they subscribed to."""
        emitter = EventEmitter()
        received = []
        emitter.on("tick", received.append)

        emitter.emit("gameend", 5)

        assert received == []
