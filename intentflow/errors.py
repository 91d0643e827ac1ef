"""Structured error hierarchy."""

from __future__ import annotations


class IntentFlowError(Exception):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class MissingHandlerError(IntentFlowError):
    def __init__(self, intent_type: str) -> None:
        super().__init__("MISSING_HANDLER", f'No handler registered for intent "{intent_type}"')
        self.intent_type = intent_type


class EmitDepthExceededError(IntentFlowError):
    def __init__(self, intent_type: str, depth: int, limit: int) -> None:
        super().__init__(
            "EMIT_DEPTH_EXCEEDED",
            f'Emitting "{intent_type}" at depth {depth} exceeds limit {limit}',
        )
        self.intent_type = intent_type
        self.depth = depth
        self.limit = limit


class StatePathError(IntentFlowError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__("STATE_PATH", f'Invalid state path "{path}": {message}')
        self.path = path


class EngineNotProvidedError(IntentFlowError):
    def __init__(self) -> None:
        super().__init__(
            "ENGINE_NOT_PROVIDED", "use_engine() called outside of an IntentProvider block"
        )
