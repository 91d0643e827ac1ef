"""
Store - shared mutable state cell with change notification

One value plus an ordered set of listeners. ``set_state`` is synchronous:
the new value is visible as soon as the call returns, and every listener
subscribed at the start of the round is notified in subscription order.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .types import Listener

T = TypeVar("T")


class Store(Generic[T]):
    """
    State cell with subscription

    Notification semantics:
    - listeners are snapshotted at the start of each round
    - a listener unsubscribed mid-round is skipped if not yet reached
    - a listener subscribed mid-round waits for the next round
    - ``set_state`` called from a listener queues a separate, later round
    """

    def __init__(self, initial: T):
        self._state = initial
        # listener -> registration token; dicts keep insertion order
        self._listeners: dict[Listener, object] = {}
        self._notifying = False
        self._pending_rounds = 0

    def get_state(self) -> T:
        return self._state

    def set_state(self, updater: Callable[[T], T]) -> None:
        """
        Replace the state with ``updater(prev)`` and notify listeners

        If the updater raises, the state is untouched and nobody is notified.
        """
        self._state = updater(self._state)
        self._pending_rounds += 1
        if self._notifying:
            return

        self._notifying = True
        try:
            while self._pending_rounds:
                self._pending_rounds -= 1
                self._notify()
        finally:
            self._notifying = False
            self._pending_rounds = 0

    def subscribe(self, listener: Listener) -> Callable[[], bool]:
        """
        Register a listener

        Returns:
            ``unsubscribe()``, which returns True if it removed the
            registration and False on every later call.
        """
        token = self._listeners.get(listener)
        if token is None:
            token = object()
            self._listeners[listener] = token

        def unsubscribe() -> bool:
            if self._listeners.get(listener) is not token:
                return False
            del self._listeners[listener]
            return True

        return unsubscribe

    def _notify(self) -> None:
        for listener, token in list(self._listeners.items()):
            if self._listeners.get(listener) is token:
                listener()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


def create_store(initial: T) -> Store[T]:
    return Store(initial)
