"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date

from zenith_app.config.defaults import SequenceParams
from zenith_app.persistence import InMemoryStore
from zenith_app.sequence import ManualTickSource, RoutineItem, SequenceParameters


@pytest.fixture
def store() -> InMemoryStore:
    """Empty in-memory key-value store."""
    return InMemoryStore()


@pytest.fixture
def ticks() -> ManualTickSource:
    """Deterministic tick source driven by advance()."""
    return ManualTickSource()


@pytest.fixture
def two_items() -> list:
    """[A:30, B:20] sequence used by the timing scenarios."""
    return [
        RoutineItem(id="a", name="A", duration_seconds=30),
        RoutineItem(id="b", name="B", duration_seconds=20),
    ]


@pytest.fixture
def three_items() -> list:
    return [
        RoutineItem(id="a", name="A", duration_seconds=3),
        RoutineItem(id="b", name="B", duration_seconds=2),
        RoutineItem(id="c", name="C", duration_seconds=4),
    ]


@pytest.fixture
def stretch_cfg() -> SequenceParameters:
    return SequenceParameters(transition_duration=3, min_item_duration=5)


@pytest.fixture
def fitness_cfg() -> SequenceParameters:
    return SequenceParameters(transition_duration=0, min_item_duration=1)


@pytest.fixture
def stretch_params() -> SequenceParams:
    return SequenceParams(transition_duration=3, min_item_duration=5, default_item_duration=30)


@pytest.fixture
def reference_day() -> date:
    """Fixed 'today' for chart windows."""
    return date(2024, 3, 10)
