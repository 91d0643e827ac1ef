"""Intent and status types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IntentStatus(str, Enum):
    """Dispatch status tracked per intent type."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Intent:
    """A named request to change state or trigger a side effect.

    Identity is the ``type`` string. The payload is opaque to the engine.
    """

    type: str
    payload: Any = None
