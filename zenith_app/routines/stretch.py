"""Stretch routine: a timed sequence with a short rest between stretches."""

from typing import Optional

from ..config.defaults import SequenceParams
from ..persistence import KeyValueStore
from ..sequence import TickSource
from ..utils.time import format_clock
from .base import RoutineBook

STRETCH_STORAGE_KEY = "stretch_routine_exercises"

DEFAULT_STRETCHES = (
    ("Neck Side Stretch", 30),
    ("Shoulder Rolls", 30),
    ("Triceps Stretch", 20),
    ("Wrist Flexion/Extension", 30),
    ("Torso Twist", 40),
    ("Cat-Cow Stretch", 60),
    ("Hamstring Stretch (seated)", 30),
    ("Quad Stretch (standing)", 30),
    ("Ankle Circles", 30),
)


class StretchRoutine(RoutineBook):
    """Nine default stretches, three-second transitions."""

    storage_key = STRETCH_STORAGE_KEY
    sequence_name = "stretch"
    default_items = DEFAULT_STRETCHES
    completion_message = "Stretch Routine Complete!"
    empty_notice = "Add some stretches to start a routine."

    def __init__(self, store: KeyValueStore, params: Optional[SequenceParams] = None,
                 tick_source: Optional[TickSource] = None):
        super().__init__(
            store,
            params or SequenceParams(transition_duration=3, min_item_duration=5,
                                     default_item_duration=30),
            tick_source,
        )

    def status_text(self) -> str:
        """Heading shown above the countdown."""
        view = self.display()
        if view.active_item_name is None:
            return f"Total Duration: {format_clock(view.total_duration_seconds)}"
        if view.is_transitioning:
            return f"Prepare for: {view.active_item_name}"
        return f"Current: {view.active_item_name}"

    def item_progress_percentage(self) -> float:
        """Share of the current stretch already held, 0 outside a stretch."""
        view = self.display()
        if view.active_item_id is None or view.is_transitioning:
            return 0.0
        item = self.find_item(view.active_item_id)
        return (item.duration_seconds - view.seconds_remaining) / item.duration_seconds * 100
