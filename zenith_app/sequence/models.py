"""
Guided sequence timer data models.

This module defines immutable data structures for routine items, the
transient countdown state, per-instance timer parameters and the results
produced by each state transition.
"""

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class SequencePhase(str, Enum):
    """User-visible timer phases."""
    IDLE = "idle"
    RUNNING = "running"
    TRANSITIONING = "transitioning"
    PAUSED = "paused"


class SequenceEvent(str, Enum):
    """Notifications produced by sequence transitions."""
    STARTED = "started"
    ITEM_STARTED = "item_started"
    ITEM_COMPLETED = "item_completed"            # Counter reached zero naturally
    ITEM_SKIPPED = "item_skipped"
    TRANSITION_STARTED = "transition_started"
    PAUSED = "paused"
    RESUMED = "resumed"
    RESET = "reset"
    SEQUENCE_COMPLETED = "sequence_completed"
    NO_ITEMS = "no_items"


@dataclass(frozen=True)
class RoutineItem:
    """One timed entry of a routine."""

    id: str
    name: str
    duration_seconds: int

    @classmethod
    def create(cls, name: str, duration_seconds: int) -> "RoutineItem":
        """Create an item with a fresh unique id."""
        return cls(id=str(uuid.uuid4()), name=name, duration_seconds=duration_seconds)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "duration_seconds": self.duration_seconds}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoutineItem":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            duration_seconds=int(data["duration_seconds"]),
        )


@dataclass(frozen=True)
class SequenceParameters:
    """Per-instance timer configuration."""

    transition_duration: int = 0                 # Gap inserted between consecutive items
    min_item_duration: int = 1                   # Input floor for new items
    tick_interval_seconds: float = 1.0


@dataclass(frozen=True)
class SequenceState:
    """Transient countdown state for a single sequence instance."""

    current_item_index: Optional[int] = None
    seconds_remaining_in_item: int = 0
    is_running: bool = False
    is_transitioning: bool = False
    seconds_remaining_in_transition: int = 0

    @property
    def phase(self) -> SequencePhase:
        if self.current_item_index is None:
            return SequencePhase.IDLE
        if not self.is_running:
            return SequencePhase.PAUSED
        if self.is_transitioning:
            return SequencePhase.TRANSITIONING
        return SequencePhase.RUNNING

    @property
    def is_idle(self) -> bool:
        return self.current_item_index is None

    @property
    def is_paused(self) -> bool:
        return self.phase == SequencePhase.PAUSED

    def running_item(self, index: int, seconds: int) -> "SequenceState":
        """Counting down item ``index`` with ``seconds`` left."""
        return SequenceState(
            current_item_index=index,
            seconds_remaining_in_item=seconds,
            is_running=True,
        )

    def transitioning_to(self, index: int, seconds: int) -> "SequenceState":
        """Counting down the gap before item ``index``."""
        return SequenceState(
            current_item_index=index,
            seconds_remaining_in_item=0,
            is_running=True,
            is_transitioning=True,
            seconds_remaining_in_transition=seconds,
        )

    def with_running(self, is_running: bool) -> "SequenceState":
        return replace(self, is_running=is_running)

    def with_item_seconds(self, seconds: int) -> "SequenceState":
        return replace(self, seconds_remaining_in_item=seconds)

    def with_transition_seconds(self, seconds: int) -> "SequenceState":
        return replace(self, seconds_remaining_in_transition=seconds)

    def with_index(self, index: int) -> "SequenceState":
        return replace(self, current_item_index=index)


IDLE_STATE = SequenceState()


@dataclass(frozen=True)
class SequenceTransition:
    """Result of applying a command or tick to a sequence."""

    new_state: SequenceState
    events: tuple[SequenceEvent, ...] = ()
    trigger: str = ""
    item_id: Optional[str] = None                # Item the events refer to
    notice: Optional[str] = None                 # User-facing message, if any

    def has(self, event: SequenceEvent) -> bool:
        return event in self.events


@dataclass(frozen=True)
class DisplayState:
    """Everything a host page needs to render the timer."""

    phase: SequencePhase
    active_item_id: Optional[str]
    active_item_name: Optional[str]
    seconds_remaining: int
    is_running: bool
    is_paused: bool
    is_transitioning: bool
    progress_fraction: float
    total_duration_seconds: int
    item_index: Optional[int] = None
    item_count: int = 0
