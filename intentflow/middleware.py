"""Middleware composition: onion-model pipeline around an intent handler."""

from __future__ import annotations

import inspect
import time
from typing import Any, Awaitable, Callable, Coroutine, Sequence

from .infra.logging import get_logger
from .types import Intent, Middleware, Next

logger = get_logger(__name__)


async def resolve(result: Any) -> Any:
    """Await ``result`` if it is awaitable, so sync and async callables mix."""
    if inspect.isawaitable(result):
        return await result
    return result


def compose_middleware(
    chain: Sequence[Middleware],
    intent: Intent,
    terminal: Callable[[], Awaitable[None]],
) -> Next:
    """
    Fold ``chain`` around ``terminal``

    The first middleware is the outermost wrapper. Each receives the intent
    and a ``next`` continuation; not calling it skips everything inside,
    calling it again re-runs everything inside. A continuation that the
    middleware created but never awaited is awaited once it returns.

    Args:
        chain: middleware in declaration order
        intent: the intent being dispatched
        terminal: innermost step, already bound to the intent and its context

    Returns:
        Zero-argument coroutine function running the whole pipeline
    """
    stages = tuple(chain)

    async def dispatch(i: int) -> None:
        if i >= len(stages):
            await terminal()
            return

        started: list[Coroutine[Any, Any, None]] = []

        def next() -> Coroutine[Any, Any, None]:
            coro = dispatch(i + 1)
            started.append(coro)
            return coro

        await resolve(stages[i](intent, next))
        # A plain-function middleware can only call next(), not await it
        for coro in started:
            if inspect.getcoroutinestate(coro) == inspect.CORO_CREATED:
                await coro

    async def pipeline() -> None:
        await dispatch(0)

    return pipeline


async def logging_middleware(intent: Intent, next: Next) -> None:
    """Log start, finish and failure of each intent."""
    log = logger.bind(intent_type=intent.type)
    start = time.perf_counter()
    log.debug("intent_started")
    try:
        await next()
    except Exception:
        log.warning("intent_failed", duration_ms=int((time.perf_counter() - start) * 1000))
        raise
    log.debug("intent_finished", duration_ms=int((time.perf_counter() - start) * 1000))
