"""
IntentEngine - registration, guarding, status tracking and dispatch

emit(intent):
1. guard check against a fresh context (rejection is a silent no-op)
2. status -> pending
3. global middleware folded around the handler lookup
4. status -> success, or error and the failure is re-raised

Status is one slot per intent type. Concurrent emissions of the same type
share it, so the last transition wins; there is no per-type serialization.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Generic, Iterable, TypeVar

from .config import EngineConfig
from .context import IntentContext, create_context
from .errors import EmitDepthExceededError, MissingHandlerError
from .infra.logging import get_logger
from .middleware import compose_middleware, resolve
from .store import Store
from .types import Guard, Handler, Intent, IntentStatus, Middleware

logger = get_logger(__name__)

S = TypeVar("S")

# Nesting of emit() calls within the current async context
_emit_depth: ContextVar[int] = ContextVar("intentflow_emit_depth", default=0)


class IntentEngine(Generic[S]):
    """
    In-process intent dispatcher over a shared Store

    Handlers and guards are keyed by intent type; registering again for the
    same type replaces the previous entry (last write wins, no merging).
    """

    def __init__(
        self,
        initial_state: S,
        effects: Any = None,
        middleware: Iterable[Middleware] | None = None,
        config: EngineConfig | None = None,
    ):
        self.store: Store[S] = Store(initial_state)
        self.effects = effects if effects is not None else {}
        self.config = config or EngineConfig()
        self._middleware: list[Middleware] = list(middleware or [])
        self._handlers: dict[str, Handler] = {}
        self._guards: dict[str, Guard] = {}
        self._status: dict[str, IntentStatus] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def on(self, intent_type: str, handler: Handler | None = None) -> Any:
        """
        Register the handler for ``intent_type``

        Usable directly, ``engine.on("INC", handler)``, or as a decorator,
        ``@engine.on("INC")``. Replaces any earlier handler for the type;
        emissions already in flight keep the handler they looked up.
        """
        if handler is None:

            def decorator(fn: Handler) -> Handler:
                self.on(intent_type, fn)
                return fn

            return decorator

        if intent_type in self._handlers:
            logger.debug("handler_replaced", intent_type=intent_type)
        self._handlers[intent_type] = handler
        return handler

    def off(self, intent_type: str) -> bool:
        return self._handlers.pop(intent_type, None) is not None

    def guard(self, intent_type: str, predicate: Guard | None = None) -> Any:
        """Register the guard for ``intent_type``; also usable as a decorator."""
        if predicate is None:

            def decorator(fn: Guard) -> Guard:
                self.guard(intent_type, fn)
                return fn

            return decorator

        self._guards[intent_type] = predicate
        return predicate

    def unguard(self, intent_type: str) -> bool:
        return self._guards.pop(intent_type, None) is not None

    def use(self, middleware: Middleware) -> None:
        """Append a global middleware; applies to emissions started afterwards."""
        self._middleware.append(middleware)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def get_status(self, intent_type: str) -> IntentStatus:
        return self._status.get(intent_type, IntentStatus.IDLE)

    def create_context(self) -> IntentContext[Any]:
        return create_context(self.store, self.effects, self.emit)

    async def emit(self, intent: Intent) -> None:
        """
        Dispatch ``intent`` through guard, middleware and handler

        Raises:
            EmitDepthExceededError: nesting exceeds ``config.max_emit_depth``
            MissingHandlerError: no handler and ``missing_handler="raise"``
            Exception: whatever the guard, a middleware or the handler raised
        """
        depth = _emit_depth.get()
        limit = self.config.max_emit_depth
        if limit is not None and depth >= limit:
            raise EmitDepthExceededError(intent.type, depth + 1, limit)

        token = _emit_depth.set(depth + 1)
        try:
            await self._dispatch(intent)
        finally:
            _emit_depth.reset(token)

    async def _dispatch(self, intent: Intent) -> None:
        log = logger.bind(intent_type=intent.type)

        predicate = self._guards.get(intent.type)
        if predicate is not None and not await resolve(predicate(self.create_context())):
            log.debug("intent_guard_rejected")
            return

        self._status[intent.type] = IntentStatus.PENDING
        ctx = self.create_context()

        async def terminal() -> None:
            handler = self._handlers.get(intent.type)
            if handler is None:
                if self.config.missing_handler == "raise":
                    raise MissingHandlerError(intent.type)
                log.debug("missing_handler")
                return
            await resolve(handler(intent, ctx))

        pipeline = compose_middleware(self._middleware, intent, terminal)
        try:
            await pipeline()
        except Exception:
            self._status[intent.type] = IntentStatus.ERROR
            log.debug("intent_failed")
            raise
        self._status[intent.type] = IntentStatus.SUCCESS


def create_intent_engine(
    initial_state: S,
    effects: Any = None,
    middleware: Iterable[Middleware] | None = None,
    config: EngineConfig | dict[str, Any] | None = None,
) -> IntentEngine[S]:
    """Build an engine; ``config`` may be an EngineConfig or a plain dict."""
    if isinstance(config, dict):
        config = EngineConfig(**config)
    return IntentEngine(initial_state, effects=effects, middleware=middleware, config=config)
