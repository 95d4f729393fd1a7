"""Tests for the sequence runner and its tick source ownership."""

import pytest
from unittest.mock import Mock

from zenith_app.sequence import (
    IDLE_STATE,
    ManualTickSource,
    RoutineItem,
    SequenceEvent,
    SequencePhase,
    SequenceRunner,
)


@pytest.fixture
def runner(ticks, two_items, stretch_cfg):
    with SequenceRunner("test", stretch_cfg, ticks, items=two_items) as runner:
        yield runner


class TestRunnerLifecycle:
    """Test commands applied through the runner."""

    def test_start_schedules_single_tick_source(self, runner, ticks):
        assert runner.start() is True

        assert runner.state.phase == SequencePhase.RUNNING
        assert ticks.active_count == 1
        assert runner.has_live_handle

    def test_full_run_takes_53_ticks(self, runner, ticks):
        """Test the [A:30, B:20] scenario end to end."""
        completed = Mock()
        runner.add_listener(lambda t: completed() if t.has(SequenceEvent.SEQUENCE_COMPLETED) else None)
        runner.start()

        ticks.advance(52)
        assert runner.state.phase == SequencePhase.RUNNING
        completed.assert_not_called()

        ticks.advance(1)
        assert runner.state == IDLE_STATE
        completed.assert_called_once()
        # Completion releases the tick source
        assert ticks.active_count == 0

    def test_empty_start_schedules_nothing(self, ticks, stretch_cfg):
        """Test starting with no items leaves the runner idle with a notice."""
        listener = Mock()
        runner = SequenceRunner("empty", stretch_cfg, ticks, empty_notice="Nothing to do")
        runner.add_listener(listener)

        assert runner.start() is False

        assert runner.state == IDLE_STATE
        assert ticks.scheduled_count == 0
        transition = listener.call_args[0][0]
        assert transition.has(SequenceEvent.NO_ITEMS)
        assert transition.notice == "Nothing to do"

    def test_pause_releases_and_resume_reacquires(self, runner, ticks):
        runner.start()
        ticks.advance(5)

        assert runner.pause() is True
        assert ticks.active_count == 0
        ticks.advance(10)
        assert runner.state.seconds_remaining_in_item == 25

        assert runner.resume() is True
        assert ticks.active_count == 1
        ticks.advance(1)
        assert runner.state.seconds_remaining_in_item == 24

    def test_restart_never_stacks_handles(self, runner, ticks):
        """Test that repeated start/reset cycles keep one live handle."""
        for _ in range(5):
            runner.start()
            ticks.advance(2)
            runner.reset()
            runner.start()
            assert ticks.active_count == 1
            runner.reset()

        assert ticks.active_count == 0

    def test_start_while_running_is_ignored(self, runner, ticks):
        runner.start()
        assert runner.start() is False
        assert ticks.scheduled_count == 1

    def test_skip_last_item_completes(self, runner, ticks):
        runner.start()
        ticks.advance(33)  # Now running B
        assert runner.state.current_item_index == 1

        assert runner.skip() is True
        assert runner.state == IDLE_STATE
        assert ticks.active_count == 0

    def test_skip_during_transition_is_ignored(self, runner, ticks):
        runner.start()
        ticks.advance(30)
        assert runner.state.phase == SequencePhase.TRANSITIONING

        assert runner.skip() is False
        assert runner.state.phase == SequencePhase.TRANSITIONING

    def test_close_cancels_live_handle(self, ticks, two_items, stretch_cfg):
        runner = SequenceRunner("closing", stretch_cfg, ticks, items=two_items)
        runner.start()

        runner.close()

        assert ticks.active_count == 0
        assert not runner.has_live_handle


class TestRunnerItems:
    """Test list edits while a sequence is active."""

    def test_removing_active_item_resets(self, runner, ticks, two_items):
        runner.start()
        ticks.advance(3)

        transition = runner.set_items([two_items[1]])

        assert transition.has(SequenceEvent.RESET)
        assert runner.state == IDLE_STATE
        assert ticks.active_count == 0

    def test_moving_items_follows_active(self, runner, ticks, two_items):
        runner.start()
        ticks.advance(3)

        runner.set_items([two_items[1], two_items[0]])

        assert runner.state.current_item_index == 1
        assert runner.display().active_item_name == "A"
        assert runner.state.seconds_remaining_in_item == 27

    def test_adding_item_while_running(self, runner, ticks, two_items):
        runner.start()
        extra = RoutineItem(id="c", name="C", duration_seconds=10)

        assert runner.set_items(two_items + [extra]) is None
        assert runner.display().total_duration_seconds == 66


class TestRunnerTicks:
    """Test stale tick handling and listener isolation."""

    def test_stale_generation_is_ignored(self, runner, ticks):
        runner.start()
        stale_generation = runner._generation
        runner.reset()
        runner.start()

        runner._on_tick(stale_generation)

        assert runner.state.seconds_remaining_in_item == 30

    def test_failing_listener_does_not_break_runner(self, runner, ticks):
        runner.add_listener(Mock(side_effect=RuntimeError("listener bug")))

        runner.start()
        ticks.advance(1)

        assert runner.state.seconds_remaining_in_item == 29

    def test_remove_listener(self, runner):
        listener = Mock()
        runner.add_listener(listener)
        runner.remove_listener(listener)

        runner.start()

        listener.assert_not_called()

    def test_independent_runners_share_nothing(self, two_items, stretch_cfg):
        source = ManualTickSource()
        first = SequenceRunner("first", stretch_cfg, source, items=two_items)
        second = SequenceRunner("second", stretch_cfg, source, items=two_items)

        first.start()
        source.advance(4)
        second.start()
        source.advance(1)

        assert first.state.seconds_remaining_in_item == 25
        assert second.state.seconds_remaining_in_item == 29
