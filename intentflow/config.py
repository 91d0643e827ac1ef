"""
Engine configuration

Pydantic model so that configuration loaded from files or dicts is
validated before an engine is built.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    """IntentEngine configuration"""

    missing_handler: Literal["ignore", "raise"] = Field(
        "ignore", description="Emitting a type with no handler: silent success or MissingHandlerError"
    )
    max_emit_depth: int | None = Field(
        None, ge=1, description="Maximum nesting of emit calls; None means unlimited"
    )
