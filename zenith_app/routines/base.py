"""
Shared behaviour for persisted, timed routines.

A routine book owns an ordered item list stored under a single key and a
``SequenceRunner`` that counts through it. Every edit is validated at the
input boundary, persisted, and then reconciled with the running sequence.
"""

from typing import Any, Optional

import structlog

from ..config.defaults import SequenceParams
from ..errors import (
    EmptyNameError,
    InvalidDurationError,
    OutOfRangeError,
    PersistenceError,
    UnknownItemError,
)
from ..persistence import KeyValueStore
from ..sequence import (
    DisplayState,
    RoutineItem,
    SequenceEvent,
    SequenceParameters,
    SequenceRunner,
    SequenceTransition,
    TickSource,
    total_duration,
)

logger = structlog.get_logger(__name__)


class RoutineBook:
    """Persisted item list driven by a guided sequence runner."""

    storage_key = ""
    sequence_name = "routine"
    default_items: tuple[tuple[str, int], ...] = ()
    completion_message = "Routine Complete!"
    empty_notice = "Add some items to start a routine."

    def __init__(self, store: KeyValueStore, params: SequenceParams,
                 tick_source: Optional[TickSource] = None):
        self.store = store
        self.params = params
        self.logger = logger.bind(routine=self.sequence_name)
        self.last_notice: Optional[str] = None

        self.runner = SequenceRunner(
            self.sequence_name,
            SequenceParameters(
                transition_duration=params.transition_duration,
                min_item_duration=params.min_item_duration,
                tick_interval_seconds=params.tick_interval_seconds,
            ),
            tick_source=tick_source,
            items=self._load_items(),
            empty_notice=self.empty_notice,
        )
        self.runner.add_listener(self._on_transition)

    @property
    def items(self) -> tuple[RoutineItem, ...]:
        return self.runner.items

    # Persistence

    def _load_items(self) -> list[RoutineItem]:
        raw = self.store.get(self.storage_key)
        if raw is None:
            items = [RoutineItem.create(name, seconds) for name, seconds in self.default_items]
            self._write(items)
            self.logger.info("Seeded default items", count=len(items))
            return items

        try:
            items = [self._item_from_dict(entry) for entry in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(
                f"Stored items under '{self.storage_key}' are malformed: {e}",
                operation="load",
                target=self.storage_key
            ) from e

        # Every item must last at least one tick
        short = [item.id for item in items if item.duration_seconds < 1]
        if short:
            raise PersistenceError(
                f"Stored items under '{self.storage_key}' have non-positive durations: {short}",
                operation="load",
                target=self.storage_key
            )
        return items

    def _item_from_dict(self, data: dict[str, Any]) -> RoutineItem:
        return RoutineItem.from_dict(data)

    def _item_to_dict(self, item: RoutineItem) -> dict[str, Any]:
        return item.to_dict()

    def _write(self, items: list[RoutineItem]) -> None:
        self.store.put(self.storage_key, [self._item_to_dict(item) for item in items])

    def _save(self, items: list[RoutineItem]) -> None:
        self._write(items)
        self.runner.set_items(items)

    # Editing

    def validate_new_item(self, name: str, duration_seconds: Any) -> tuple[str, int]:
        """
        Check a new item's name and duration.

        Raises:
            EmptyNameError: If the name is blank
            InvalidDurationError: If the duration is not a whole number of
                seconds at or above the routine's minimum
        """
        clean_name = (name or "").strip()
        if not clean_name:
            raise EmptyNameError("Please enter a valid name and duration.", field="name", value=name)

        minimum = self.params.min_item_duration
        if (isinstance(duration_seconds, bool) or not isinstance(duration_seconds, int)
                or duration_seconds < minimum):
            raise InvalidDurationError(
                f"Duration must be at least {minimum} seconds.",
                min_duration=minimum,
                field="duration_seconds",
                value=duration_seconds
            )

        return clean_name, duration_seconds

    def add_item(self, name: str, duration_seconds: Optional[int] = None) -> RoutineItem:
        """Append a new item; the duration defaults to the routine's pre-filled value."""
        if duration_seconds is None:
            duration_seconds = self.params.default_item_duration
        clean_name, seconds = self.validate_new_item(name, duration_seconds)

        item = RoutineItem.create(clean_name, seconds)
        self._save(list(self.items) + [item])
        self.logger.info("Item added", item_id=item.id, name=clean_name, duration_seconds=seconds)
        return item

    def find_item(self, item_id: str) -> RoutineItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise UnknownItemError("Item not found", field="id", value=item_id)

    def remove_item(self, item_id: str) -> RoutineItem:
        """Delete an item. Removing the in-progress item resets the sequence."""
        item = self.find_item(item_id)
        self._save([existing for existing in self.items if existing.id != item_id])
        self.logger.info("Item removed", item_id=item_id, name=item.name)
        return item

    def move_item(self, from_index: int, to_index: int) -> None:
        """Reorder one item; a running sequence keeps its active item."""
        items = list(self.items)
        for label, index in (("from_index", from_index), ("to_index", to_index)):
            if not 0 <= index < len(items):
                raise OutOfRangeError(
                    f"Position must be between 0 and {len(items) - 1}",
                    minimum=0,
                    maximum=len(items) - 1,
                    field=label,
                    value=index
                )

        items.insert(to_index, items.pop(from_index))
        self._save(items)

    def total_duration(self) -> int:
        return total_duration(self.items, self.runner.cfg)

    # Timer controls

    def start(self) -> bool:
        self.last_notice = None
        return self.runner.start()

    def pause(self) -> bool:
        return self.runner.pause()

    def resume(self) -> bool:
        self.last_notice = None
        return self.runner.resume()

    def skip(self) -> bool:
        return self.runner.skip()

    def reset(self) -> bool:
        self.last_notice = None
        return self.runner.reset()

    def display(self) -> DisplayState:
        return self.runner.display()

    def close(self) -> None:
        self.runner.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_transition(self, transition: SequenceTransition) -> None:
        if transition.has(SequenceEvent.NO_ITEMS):
            self.last_notice = transition.notice
        elif transition.has(SequenceEvent.SEQUENCE_COMPLETED):
            self.last_notice = self.completion_message
            self.logger.info("Routine complete", message=self.completion_message)
