"""
Runtime management for a single guided sequence.

The runner holds the transient ``SequenceState`` for one routine, applies the
pure transitions from ``machine`` under a lock, owns the single live tick
handle and notifies listeners of every transition.
"""

import functools
import threading
from typing import Callable, Iterable, Optional

from ..logging.config import get_sequence_logger, log_sequence_transition
from .machine import (
    EMPTY_SEQUENCE_NOTICE,
    advance_tick,
    build_display_state,
    pause_sequence,
    reconcile_items,
    reset_sequence,
    resume_sequence,
    skip_item,
    start_sequence,
)
from .models import (
    IDLE_STATE,
    DisplayState,
    RoutineItem,
    SequenceEvent,
    SequenceParameters,
    SequenceState,
    SequenceTransition,
)
from .ticker import ThreadingTickSource, TickHandle, TickSource

logger = get_sequence_logger(__name__)

TransitionListener = Callable[[SequenceTransition], None]


class SequenceRunner:
    """Drives one sequence instance with at most one live tick source."""

    def __init__(
        self,
        name: str,
        cfg: Optional[SequenceParameters] = None,
        tick_source: Optional[TickSource] = None,
        items: Iterable[RoutineItem] = (),
        empty_notice: str = EMPTY_SEQUENCE_NOTICE,
    ) -> None:
        self.name = name
        self.cfg = cfg or SequenceParameters()
        self.tick_source = tick_source or ThreadingTickSource()
        self.empty_notice = empty_notice
        self.logger = logger.bind(sequence=name)

        self._items: tuple[RoutineItem, ...] = tuple(items)
        self._state: SequenceState = IDLE_STATE
        self._handle: Optional[TickHandle] = None
        self._generation = 0
        self._listeners: list[TransitionListener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> SequenceState:
        return self._state

    @property
    def items(self) -> tuple[RoutineItem, ...]:
        return self._items

    @property
    def has_live_handle(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    def display(self) -> DisplayState:
        with self._lock:
            return build_display_state(self._state, self._items, self.cfg)

    def add_listener(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TransitionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Commands

    def start(self) -> bool:
        """Start from Idle. Returns True if a run began."""
        with self._lock:
            transition = start_sequence(self._state, self._items, self.cfg, self.empty_notice)
            return self._apply_command(transition)

    def pause(self) -> bool:
        with self._lock:
            return self._apply_command(pause_sequence(self._state))

    def resume(self) -> bool:
        """Resume from Paused, or start when nothing was selected yet."""
        with self._lock:
            transition = resume_sequence(self._state, self._items, self.cfg, self.empty_notice)
            return self._apply_command(transition)

    def skip(self) -> bool:
        with self._lock:
            return self._apply_command(skip_item(self._state, self._items, self.cfg))

    def reset(self) -> bool:
        with self._lock:
            return self._apply_command(reset_sequence(self._state))

    def set_items(self, items: Iterable[RoutineItem]) -> Optional[SequenceTransition]:
        """Replace the item list, keeping the active item or resetting if it was removed."""
        with self._lock:
            old_items = self._items
            self._items = tuple(items)
            transition = reconcile_items(self._state, old_items, self._items)
            if transition:
                self._apply(transition)
            return transition

    def close(self) -> None:
        """Tear down: cancel any live tick source."""
        with self._lock:
            if self._handle is not None:
                self.logger.info("Sequence runner closed", phase=self._state.phase.value)
            self._release()

    def __enter__(self) -> "SequenceRunner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Internals

    def _apply_command(self, transition: Optional[SequenceTransition]) -> bool:
        if transition is None:
            return False

        self._apply(transition)

        if transition.has(SequenceEvent.NO_ITEMS):
            self.logger.warning("Start requested with no items", notice=transition.notice)
            return False

        if self._state.is_running and not self.has_live_handle:
            self._schedule()
        return True

    def _apply(self, transition: SequenceTransition) -> None:
        old_state = self._state
        self._state = transition.new_state

        log_sequence_transition(
            self.logger,
            sequence=self.name,
            from_phase=old_state.phase.value,
            to_phase=self._state.phase.value,
            trigger=transition.trigger,
            context={
                "events": [event.value for event in transition.events],
                "item_index": self._state.current_item_index,
                "item_id": transition.item_id,
            } if transition.events else None,
        )

        if not self._state.is_running:
            self._release()

        if transition.has(SequenceEvent.SEQUENCE_COMPLETED):
            self.logger.info("Sequence completed", item_count=len(self._items))

        for listener in list(self._listeners):
            try:
                listener(transition)
            except Exception as e:
                self.logger.error("Sequence listener failed", error=str(e), exc_info=True)

    def _schedule(self) -> None:
        # Replace, never stack
        self._release()
        self._generation += 1
        self._handle = self.tick_source.schedule(
            self.cfg.tick_interval_seconds,
            functools.partial(self._on_tick, self._generation),
        )

    def _release(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            if self._handle is None or generation != self._generation:
                self.logger.debug("Ignoring stale tick", generation=generation)
                return

            transition = advance_tick(self._state, self._items, self.cfg)
            if transition:
                self._apply(transition)
