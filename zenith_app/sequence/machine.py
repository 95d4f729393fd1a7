"""
Core guided sequence state machine.

Pure functions over ``SequenceState``: each command or tick takes the current
state and the ordered item list and returns a ``SequenceTransition`` when
something changes, or ``None`` when the command does not apply in the current
phase. Scheduling and side effects live in ``runtime``.
"""

from typing import Optional, Sequence

from ..errors import StateTransitionError
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

EMPTY_SEQUENCE_NOTICE = "Add some items to start a routine."

Items = Sequence[RoutineItem]


def total_duration(items: Items, cfg: SequenceParameters) -> int:
    """Sum of item durations plus one transition gap between each consecutive pair."""
    return (sum(item.duration_seconds for item in items)
            + cfg.transition_duration * max(0, len(items) - 1))


def validate_state(state: SequenceState, items: Items, cfg: SequenceParameters) -> None:
    """
    Check the timer invariants.

    Raises:
        StateTransitionError: If the state cannot belong to ``items``
    """
    index = state.current_item_index
    if index is None:
        return

    if not 0 <= index < len(items):
        raise StateTransitionError(
            f"Item index {index} outside sequence of {len(items)} items",
            current_state=state.phase.value,
        )

    duration = items[index].duration_seconds
    if not 0 <= state.seconds_remaining_in_item <= duration:
        raise StateTransitionError(
            f"Item countdown {state.seconds_remaining_in_item}s outside 0..{duration}s",
            current_state=state.phase.value,
        )

    if state.is_transitioning and not 0 <= state.seconds_remaining_in_transition <= cfg.transition_duration:
        raise StateTransitionError(
            f"Transition countdown {state.seconds_remaining_in_transition}s "
            f"outside 0..{cfg.transition_duration}s",
            current_state=state.phase.value,
        )


def start_sequence(
    state: SequenceState,
    items: Items,
    cfg: SequenceParameters,
    empty_notice: str = EMPTY_SEQUENCE_NOTICE,
) -> Optional[SequenceTransition]:
    """Idle -> Running on the first item. An empty list stays Idle with a notice."""
    if not state.is_idle:
        return None

    if not items:
        return SequenceTransition(
            new_state=IDLE_STATE,
            events=(SequenceEvent.NO_ITEMS,),
            trigger="start",
            notice=empty_notice,
        )

    first = items[0]
    return SequenceTransition(
        new_state=state.running_item(0, first.duration_seconds),
        events=(SequenceEvent.STARTED, SequenceEvent.ITEM_STARTED),
        trigger="start",
        item_id=first.id,
    )


def _finish_item(
    state: SequenceState,
    items: Items,
    cfg: SequenceParameters,
    trigger: str,
    finished: SequenceEvent,
) -> SequenceTransition:
    """Leave the active item: into the transition gap, the next item, or completion."""
    index = state.current_item_index
    item = items[index]
    next_index = index + 1

    if next_index >= len(items):
        return SequenceTransition(
            new_state=IDLE_STATE,
            events=(finished, SequenceEvent.SEQUENCE_COMPLETED),
            trigger=trigger,
            item_id=item.id,
        )

    if cfg.transition_duration > 0:
        return SequenceTransition(
            new_state=state.transitioning_to(next_index, cfg.transition_duration),
            events=(finished, SequenceEvent.TRANSITION_STARTED),
            trigger=trigger,
            item_id=item.id,
        )

    return SequenceTransition(
        new_state=state.running_item(next_index, items[next_index].duration_seconds),
        events=(finished, SequenceEvent.ITEM_STARTED),
        trigger=trigger,
        item_id=item.id,
    )


def advance_tick(
    state: SequenceState,
    items: Items,
    cfg: SequenceParameters,
) -> Optional[SequenceTransition]:
    """Apply one elapsed second. No-op unless Running or Transitioning."""
    if state.phase not in (SequencePhase.RUNNING, SequencePhase.TRANSITIONING):
        return None

    validate_state(state, items, cfg)
    index = state.current_item_index
    item = items[index]

    if state.is_transitioning:
        remaining = state.seconds_remaining_in_transition - 1
        if remaining > 0:
            return SequenceTransition(
                new_state=state.with_transition_seconds(remaining),
                trigger="tick",
                item_id=item.id,
            )
        return SequenceTransition(
            new_state=state.running_item(index, item.duration_seconds),
            events=(SequenceEvent.ITEM_STARTED,),
            trigger="tick",
            item_id=item.id,
        )

    remaining = state.seconds_remaining_in_item - 1
    if remaining > 0:
        return SequenceTransition(
            new_state=state.with_item_seconds(remaining),
            trigger="tick",
            item_id=item.id,
        )

    return _finish_item(state.with_item_seconds(0), items, cfg, "tick",
                        SequenceEvent.ITEM_COMPLETED)


def pause_sequence(state: SequenceState) -> Optional[SequenceTransition]:
    """Running/Transitioning -> Paused, counters retained."""
    if state.phase not in (SequencePhase.RUNNING, SequencePhase.TRANSITIONING):
        return None
    return SequenceTransition(
        new_state=state.with_running(False),
        events=(SequenceEvent.PAUSED,),
        trigger="pause",
    )


def resume_sequence(
    state: SequenceState,
    items: Items,
    cfg: SequenceParameters,
    empty_notice: str = EMPTY_SEQUENCE_NOTICE,
) -> Optional[SequenceTransition]:
    """Paused -> previous phase. From Idle this behaves as ``start_sequence``."""
    if state.is_idle:
        return start_sequence(state, items, cfg, empty_notice)
    if state.phase != SequencePhase.PAUSED:
        return None

    validate_state(state, items, cfg)
    return SequenceTransition(
        new_state=state.with_running(True),
        events=(SequenceEvent.RESUMED,),
        trigger="resume",
        item_id=items[state.current_item_index].id,
    )


def skip_item(
    state: SequenceState,
    items: Items,
    cfg: SequenceParameters,
) -> Optional[SequenceTransition]:
    """Running -> as if the active item's counter reached zero."""
    if state.phase != SequencePhase.RUNNING:
        return None

    validate_state(state, items, cfg)
    return _finish_item(state.with_item_seconds(0), items, cfg, "skip",
                        SequenceEvent.ITEM_SKIPPED)


def reset_sequence(state: SequenceState) -> SequenceTransition:
    """Any phase -> Idle with every counter cleared."""
    return SequenceTransition(
        new_state=IDLE_STATE,
        events=(SequenceEvent.RESET,),
        trigger="reset",
    )


def reconcile_items(
    state: SequenceState,
    old_items: Items,
    new_items: Items,
) -> Optional[SequenceTransition]:
    """
    Follow the active item after the host edits its list.

    The active item is located by id. If it was deleted the sequence resets,
    since it cannot continue without its active item; if it moved, the index
    follows it.
    """
    index = state.current_item_index
    if index is None or index >= len(old_items):
        return None

    active_id = old_items[index].id
    new_index = next((i for i, item in enumerate(new_items) if item.id == active_id), None)

    if new_index is None:
        return SequenceTransition(
            new_state=IDLE_STATE,
            events=(SequenceEvent.RESET,),
            trigger="item_removed",
            item_id=active_id,
        )

    if new_index == index:
        return None

    return SequenceTransition(
        new_state=state.with_index(new_index),
        trigger="items_reordered",
        item_id=active_id,
    )


def progress_fraction(state: SequenceState, items: Items, cfg: SequenceParameters) -> float:
    """Elapsed share of the whole timeline, 0.0 when idle."""
    total = total_duration(items, cfg)
    index = state.current_item_index
    if index is None or total <= 0 or index >= len(items):
        return 0.0

    before = sum(item.duration_seconds for item in items[:index])
    gap = cfg.transition_duration

    if state.is_transitioning:
        elapsed = before + gap * (index - 1) + (gap - state.seconds_remaining_in_transition)
    else:
        elapsed = before + gap * index + (items[index].duration_seconds - state.seconds_remaining_in_item)

    return min(1.0, max(0.0, elapsed / total))


def build_display_state(state: SequenceState, items: Items, cfg: SequenceParameters) -> DisplayState:
    """Render-ready view of the timer."""
    index = state.current_item_index
    item = items[index] if index is not None and index < len(items) else None

    if state.is_transitioning:
        seconds = state.seconds_remaining_in_transition
    else:
        seconds = state.seconds_remaining_in_item

    return DisplayState(
        phase=state.phase,
        active_item_id=item.id if item else None,
        active_item_name=item.name if item else None,
        seconds_remaining=seconds,
        is_running=state.is_running,
        is_paused=state.is_paused,
        is_transitioning=state.is_transitioning,
        progress_fraction=progress_fraction(state, items, cfg),
        total_duration_seconds=total_duration(items, cfg),
        item_index=index,
        item_count=len(items),
    )
