"""
Fitness checklist: timed exercises with a persisted completion flag.

An exercise is marked complete when its countdown naturally reaches zero or
when the user ticks it off. Skipping an exercise never marks it complete,
including the last one.
"""

from typing import Any, Optional

from ..config.defaults import SequenceParams
from ..persistence import KeyValueStore
from ..sequence import RoutineItem, SequenceEvent, SequenceTransition, TickSource
from .base import RoutineBook

FITNESS_STORAGE_KEY = "fitness_exercises"

DEFAULT_EXERCISES = (
    ("Warm-up Stretch", 300),
    ("Jumping Jacks", 60),
    ("Push-ups", 60),
    ("Squats", 60),
    ("Plank", 60),
    ("Cool-down Stretch", 300),
)


class FitnessChecklist(RoutineBook):
    """Daily exercise checklist driven by the guided sequence timer."""

    storage_key = FITNESS_STORAGE_KEY
    sequence_name = "fitness"
    default_items = DEFAULT_EXERCISES
    completion_message = "Workout Complete!"
    empty_notice = "Add some exercises to start your workout."

    def __init__(self, store: KeyValueStore, params: Optional[SequenceParams] = None,
                 tick_source: Optional[TickSource] = None):
        self._completed: set[str] = set()
        super().__init__(
            store,
            params or SequenceParams(transition_duration=0, min_item_duration=1,
                                     default_item_duration=60),
            tick_source,
        )

    def _item_from_dict(self, data: dict[str, Any]) -> RoutineItem:
        item = RoutineItem.from_dict(data)
        if data.get("completed"):
            self._completed.add(item.id)
        return item

    def _item_to_dict(self, item: RoutineItem) -> dict[str, Any]:
        return {**item.to_dict(), "completed": item.id in self._completed}

    def is_completed(self, item_id: str) -> bool:
        return item_id in self._completed

    def toggle_complete(self, item_id: str) -> bool:
        """Flip an exercise's completed flag. Returns the new value."""
        self.find_item(item_id)
        if item_id in self._completed:
            self._completed.discard(item_id)
        else:
            self._completed.add(item_id)

        self._write(list(self.items))
        completed = item_id in self._completed
        self.logger.info("Exercise completion toggled", item_id=item_id, completed=completed)
        return completed

    def remove_item(self, item_id: str) -> RoutineItem:
        item = super().remove_item(item_id)
        self._completed.discard(item_id)
        return item

    def completed_count(self) -> int:
        return sum(1 for item in self.items if item.id in self._completed)

    def progress_percentage(self) -> float:
        if not self.items:
            return 0.0
        return self.completed_count() / len(self.items) * 100

    def summary_text(self) -> str:
        return f"{self.completed_count()} of {len(self.items)} exercises completed."

    def _on_transition(self, transition: SequenceTransition) -> None:
        super()._on_transition(transition)

        if transition.has(SequenceEvent.ITEM_COMPLETED) and transition.item_id:
            if transition.item_id not in self._completed:
                self._completed.add(transition.item_id)
                self._write(list(self.items))
                self.logger.info("Exercise completed", item_id=transition.item_id)
