"""
Guided breathing session.

A breathing session is a one-item sequence lasting ``session_minutes`` with
no transitions. The inhale/exhale cue is derived from elapsed seconds rather
than a second timer, so pausing the session also freezes the cue.
"""

from typing import Optional

import structlog

from ..config.defaults import BreathingParams, SequenceParams
from ..errors import OutOfRangeError, UserInputError
from ..sequence import (
    DisplayState,
    RoutineItem,
    SequenceEvent,
    SequenceParameters,
    SequenceRunner,
    SequenceTransition,
    TickSource,
)
from ..utils.time import format_clock

logger = structlog.get_logger(__name__)

READY_LABEL = "Ready?"
INHALE_LABEL = "Inhale..."
EXHALE_LABEL = "Exhale..."
PAUSED_LABEL = "Paused"
COMPLETE_LABEL = "Session Complete!"


class BreathingSession:
    """Single repeating-phase session with an 8 second breath cycle."""

    def __init__(self, params: Optional[BreathingParams] = None,
                 sequence_params: Optional[SequenceParams] = None,
                 tick_source: Optional[TickSource] = None):
        self.params = params or BreathingParams()
        sequence_params = sequence_params or SequenceParams(min_item_duration=60)
        self._session_minutes = self.params.session_minutes
        self._completed = False

        self.runner = SequenceRunner(
            "breathing",
            SequenceParameters(
                transition_duration=0,
                min_item_duration=sequence_params.min_item_duration,
                tick_interval_seconds=sequence_params.tick_interval_seconds,
            ),
            tick_source=tick_source,
            items=[self._session_item()],
        )
        self.runner.add_listener(self._on_transition)

    @property
    def session_minutes(self) -> int:
        return self._session_minutes

    @property
    def session_seconds(self) -> int:
        return self._session_minutes * 60

    def _session_item(self) -> RoutineItem:
        return RoutineItem.create("Breathing", self.session_seconds)

    def set_session_minutes(self, minutes: int) -> None:
        """
        Change the session length.

        Raises:
            UserInputError: If the session is running
            OutOfRangeError: If minutes is outside the configured bounds
        """
        if self.runner.state.is_running:
            raise UserInputError("Pause or reset the session to change its duration.",
                                 field="session_minutes", value=minutes)

        low, high = self.params.min_session_minutes, self.params.max_session_minutes
        if isinstance(minutes, bool) or not isinstance(minutes, int) or not low <= minutes <= high:
            raise OutOfRangeError(
                f"Session duration must be between {low} and {high} minutes.",
                minimum=low,
                maximum=high,
                field="session_minutes",
                value=minutes
            )

        self._session_minutes = minutes
        # A fresh item id makes a paused session reset rather than resume
        self.runner.set_items([self._session_item()])
        self._completed = False
        logger.info("Breathing session length changed", session_minutes=minutes)

    # Controls

    def start(self) -> bool:
        self._completed = False
        return self.runner.start()

    def pause(self) -> bool:
        return self.runner.pause()

    def resume(self) -> bool:
        self._completed = False
        return self.runner.resume()

    def toggle(self) -> bool:
        """Play/pause button."""
        if self.runner.state.is_running:
            return self.pause()
        return self.resume()

    def reset(self) -> bool:
        self._completed = False
        return self.runner.reset()

    def close(self) -> None:
        self.runner.close()

    def __enter__(self) -> "BreathingSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Display

    def display(self) -> DisplayState:
        return self.runner.display()

    def elapsed_seconds(self) -> int:
        view = self.display()
        if view.active_item_id is None:
            return 0
        return self.session_seconds - view.seconds_remaining

    def time_left(self) -> int:
        view = self.display()
        if view.active_item_id is None:
            return 0 if self._completed else self.session_seconds
        return view.seconds_remaining

    def status_label(self) -> str:
        """Text shown inside the breathing circle."""
        state = self.runner.state
        if self._completed:
            return COMPLETE_LABEL
        if state.is_idle:
            return READY_LABEL
        if state.is_paused:
            return PAUSED_LABEL

        half_cycle = self.params.breath_cycle_seconds // 2
        position = self.elapsed_seconds() % self.params.breath_cycle_seconds
        return INHALE_LABEL if position < half_cycle else EXHALE_LABEL

    def description(self) -> str:
        if self.runner.state.is_running:
            return f"Time left: {format_clock(self.time_left())}"
        return f"Session Duration: {self._session_minutes} minute(s)"

    def _on_transition(self, transition: SequenceTransition) -> None:
        if transition.has(SequenceEvent.SEQUENCE_COMPLETED):
            self._completed = True
            logger.info("Breathing session complete", session_minutes=self._session_minutes)
