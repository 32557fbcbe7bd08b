"""
Minimal publish/subscribe registry used by the game engine.
"""

from typing import Any, Callable, Dict


class EventEmitter:
    """
    Maps an event name to an ordered set of listeners.

    Listeners are called in subscription order with the emitted payload
    (if any). Subscribing the same callback twice has no extra effect.
    """

    def __init__(self) -> None:
        # dict keys give us insertion-ordered set semantics
        self._listeners: Dict[str, Dict[Callable[..., Any], None]] = {}

    def on(self, name: str, callback: Callable[..., Any]) -> Callable[[], None]:
        """
        Subscribe ``callback`` to ``name``.

        Returns:
            A disposer; calling it removes the listener. Safe to call twice.
        """
        self._listeners.setdefault(name, {})[callback] = None

        def unsubscribe() -> None:
            listeners = self._listeners.get(name)
            if listeners is not None:
                listeners.pop(callback, None)

        return unsubscribe

    def emit(self, name: str, *payload: Any) -> None:
        listeners = self._listeners.get(name)
        if not listeners:
            return

        # Copy so a listener can unsubscribe itself mid-dispatch
        for callback in list(listeners):
            callback(*payload)

    def listener_count(self, name: str) -> int:
        return len(self._listeners.get(name, ()))
