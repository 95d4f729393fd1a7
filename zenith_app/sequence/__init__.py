"""Guided sequence timer: models, pure transitions, tick sources and runner."""

from .machine import (
    EMPTY_SEQUENCE_NOTICE,
    advance_tick,
    build_display_state,
    pause_sequence,
    progress_fraction,
    reconcile_items,
    reset_sequence,
    resume_sequence,
    skip_item,
    start_sequence,
    total_duration,
)
from .models import (
    IDLE_STATE,
    DisplayState,
    RoutineItem,
    SequenceEvent,
    SequenceParameters,
    SequencePhase,
    SequenceState,
    SequenceTransition,
)
from .runtime import SequenceRunner
from .ticker import ManualTickSource, ThreadingTickSource, TickHandle, TickSource

__all__ = [
    "EMPTY_SEQUENCE_NOTICE",
    "IDLE_STATE",
    "DisplayState",
    "ManualTickSource",
    "RoutineItem",
    "SequenceEvent",
    "SequenceParameters",
    "SequencePhase",
    "SequenceRunner",
    "SequenceState",
    "SequenceTransition",
    "ThreadingTickSource",
    "TickHandle",
    "TickSource",
    "advance_tick",
    "build_display_state",
    "pause_sequence",
    "progress_fraction",
    "reconcile_items",
    "reset_sequence",
    "resume_sequence",
    "skip_item",
    "start_sequence",
    "total_duration",
]
