"""
Binding boundary for UI layers

A UI layer needs the engine by reference: ``IntentProvider`` makes an
engine current for a block of code, ``use_engine`` fetches it. From there
the layer uses only the public surface (``store.subscribe``,
``store.get_state``, ``emit``).
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Any

from .engine import IntentEngine
from .errors import EngineNotProvidedError

_current_engine: ContextVar[IntentEngine[Any] | None] = ContextVar(
    "intentflow_current_engine", default=None
)


class IntentProvider:
    """
    Context manager providing an engine to the code it wraps

    Nested providers shadow outer ones until they exit. Works for both
    ``with`` and ``async with``.
    """

    def __init__(self, engine: IntentEngine[Any]):
        self.engine = engine
        self._tokens: list[Token[IntentEngine[Any] | None]] = []

    def __enter__(self) -> IntentEngine[Any]:
        self._tokens.append(_current_engine.set(self.engine))
        return self.engine

    def __exit__(self, *exc_info: object) -> None:
        _current_engine.reset(self._tokens.pop())

    async def __aenter__(self) -> IntentEngine[Any]:
        return self.__enter__()

    async def __aexit__(self, *exc_info: object) -> None:
        self.__exit__(*exc_info)


def use_engine() -> IntentEngine[Any]:
    engine = _current_engine.get()
    if engine is None:
        raise EngineNotProvidedError()
    return engine
