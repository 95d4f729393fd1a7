"""Tests for the guided breathing session."""

import pytest

from zenith_app.config.defaults import BreathingParams
from zenith_app.errors import OutOfRangeError, UserInputError
from zenith_app.routines.breathing import (
    COMPLETE_LABEL,
    EXHALE_LABEL,
    INHALE_LABEL,
    PAUSED_LABEL,
    READY_LABEL,
    BreathingSession,
)


@pytest.fixture
def session(ticks):
    with BreathingSession(BreathingParams(), tick_source=ticks) as session:
        yield session


class TestBreathingLabels:
    """Test the status label through a session."""

    def test_ready_before_start(self, session):
        assert session.status_label() == READY_LABEL
        assert session.time_left() == 60
        assert session.description() == "Session Duration: 1 minute(s)"

    def test_breath_cycle(self, session, ticks):
        session.start()
        assert session.status_label() == INHALE_LABEL

        ticks.advance(4)
        assert session.status_label() == EXHALE_LABEL

        ticks.advance(4)
        assert session.status_label() == INHALE_LABEL
        assert session.description() == "Time left: 0:52"

    def test_pause_label(self, session, ticks):
        session.start()
        ticks.advance(2)

        session.toggle()

        assert session.status_label() == PAUSED_LABEL
        assert session.time_left() == 58

    def test_session_complete(self, session, ticks):
        session.start()
        ticks.advance(60)

        assert session.status_label() == COMPLETE_LABEL
        assert session.time_left() == 0
        assert ticks.active_count == 0

    def test_reset_returns_to_ready(self, session, ticks):
        session.start()
        ticks.advance(60)

        session.reset()

        assert session.status_label() == READY_LABEL
        assert session.time_left() == 60


class TestSessionLength:
    """Test changing the session duration."""

    def test_set_minutes_when_idle(self, session):
        session.set_session_minutes(5)

        assert session.session_seconds == 300
        assert session.display().total_duration_seconds == 300

    @pytest.mark.parametrize("minutes", [0, 11, 2.5])
    def test_out_of_range(self, session, minutes):
        with pytest.raises(OutOfRangeError):
            session.set_session_minutes(minutes)

    def test_locked_while_running(self, session):
        session.start()
        with pytest.raises(UserInputError):
            session.set_session_minutes(3)

    def test_change_while_paused_resets(self, session, ticks):
        session.start()
        ticks.advance(10)
        session.pause()

        session.set_session_minutes(2)

        assert session.status_label() == READY_LABEL
        assert session.time_left() == 120
        session.toggle()
        assert session.display().seconds_remaining == 120
