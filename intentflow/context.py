"""
IntentContext - per-dispatch view over the store, effects and emit

A context is built for one guard check or one dispatch and must not be
kept for use after that dispatch has finished.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from .paths import get_path, set_path
from .store import Store
from .types import Intent

E = TypeVar("E")


@dataclass(frozen=True)
class IntentContext(Generic[E]):
    store: Store[Any]
    effects: E
    _emit: Callable[[Intent], Awaitable[None]]

    def get(self, path: str, default: Any = None) -> Any:
        """Read the value at a dot-path of the current state."""
        return get_path(self.store.get_state(), path, default)

    def set(self, path: str, value: Any) -> None:
        """Write ``value`` at a dot-path, creating missing intermediates."""
        self.store.set_state(lambda prev: set_path(prev, path, value))

    async def emit(self, intent: Intent) -> None:
        # No depth limit unless the engine is configured with one; a handler
        # that re-emits its own type unconditionally recurses without end.
        await self._emit(intent)


def create_context(
    store: Store[Any],
    effects: E,
    emit: Callable[[Intent], Awaitable[None]],
) -> IntentContext[E]:
    return IntentContext(store=store, effects=effects, _emit=emit)
