"""Core type definitions, re-exported from sub-modules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, TypeVar, Union

from .intent import Intent, IntentStatus

if TYPE_CHECKING:
    from ..context import IntentContext

S = TypeVar("S")

EffectMap = Mapping[str, Any]
Listener = Callable[[], None]
Updater = Callable[[S], S]
Next = Callable[[], Awaitable[None]]
Handler = Callable[[Intent, "IntentContext"], Union[Awaitable[None], None]]
Guard = Callable[["IntentContext"], Union[Awaitable[bool], bool]]
Middleware = Callable[[Intent, Next], Union[Awaitable[None], None]]

__all__ = [
    "Intent", "IntentStatus",
    "EffectMap", "Listener", "Updater", "Next", "Handler", "Guard", "Middleware",
]
