"""
intentflow - in-process intent dispatch engine

Callers emit intents; the engine routes each one through an optional guard,
the global middleware pipeline and the registered handler, tracks a status
per intent type, and owns a subscribable Store.

```python
from intentflow import Intent, create_intent_engine

engine = create_intent_engine(initial_state={"count": 0})

@engine.on("INC")
def increment(intent, ctx):
    ctx.set("count", ctx.get("count") + 1)

await engine.emit(Intent("INC"))
engine.store.get_state()   # {"count": 1}
engine.get_status("INC")   # IntentStatus.SUCCESS
```
"""

from .binding import IntentProvider, use_engine
from .config import EngineConfig
from .context import IntentContext, create_context
from .engine import IntentEngine, create_intent_engine
from .errors import (
    EmitDepthExceededError,
    EngineNotProvidedError,
    IntentFlowError,
    MissingHandlerError,
    StatePathError,
)
from .middleware import compose_middleware, logging_middleware
from .store import Store, create_store
from .types import EffectMap, Guard, Handler, Intent, IntentStatus, Middleware, Next

__all__ = [
    # Core
    "IntentEngine",
    "create_intent_engine",
    "EngineConfig",
    "Store",
    "create_store",
    "IntentContext",
    "create_context",
    "compose_middleware",
    "logging_middleware",
    # Binding
    "IntentProvider",
    "use_engine",
    # Types
    "Intent",
    "IntentStatus",
    "Handler",
    "Guard",
    "Middleware",
    "Next",
    "EffectMap",
    # Errors
    "IntentFlowError",
    "MissingHandlerError",
    "EmitDepthExceededError",
    "StatePathError",
    "EngineNotProvidedError",
]
