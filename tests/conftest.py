"""
Pytest Configuration and Fixtures
"""

import pytest

from intentflow import IntentEngine, create_intent_engine


@pytest.fixture
def engine() -> IntentEngine:
    """Returns an engine over a fresh counter state."""
    return create_intent_engine(initial_state={"count": 0})


@pytest.fixture
def calls() -> list:
    """Shared call log for ordering assertions."""
    return []
