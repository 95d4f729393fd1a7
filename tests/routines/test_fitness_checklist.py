"""Tests for the fitness checklist."""

import pytest

from zenith_app.config.defaults import SequenceParams
from zenith_app.errors import UnknownItemError
from zenith_app.routines.fitness import FITNESS_STORAGE_KEY, FitnessChecklist


@pytest.fixture
def short_workout(store):
    store.put(FITNESS_STORAGE_KEY, [
        {"id": "jj", "name": "Jumping Jacks", "duration_seconds": 3, "completed": False},
        {"id": "pu", "name": "Push-ups", "duration_seconds": 2, "completed": False},
    ])
    return store


@pytest.fixture
def checklist(short_workout, ticks):
    with FitnessChecklist(short_workout, SequenceParams(min_item_duration=1), ticks) as checklist:
        yield checklist


class TestFitnessDefaults:
    """Test seeded exercises."""

    def test_six_default_exercises(self, store, ticks):
        checklist = FitnessChecklist(store, tick_source=ticks)

        assert [item.duration_seconds for item in checklist.items] == [300, 60, 60, 60, 60, 300]
        assert checklist.completed_count() == 0
        assert checklist.runner.cfg.transition_duration == 0
        assert all(entry["completed"] is False for entry in store.get(FITNESS_STORAGE_KEY))


class TestCompletion:
    """Test completion marking."""

    def test_toggle_complete_persists(self, checklist, short_workout, ticks):
        assert checklist.toggle_complete("jj") is True
        assert checklist.completed_count() == 1
        assert checklist.progress_percentage() == pytest.approx(50.0)

        reloaded = FitnessChecklist(short_workout, tick_source=ticks)
        assert reloaded.is_completed("jj")

        assert checklist.toggle_complete("jj") is False
        assert checklist.completed_count() == 0

    def test_toggle_unknown(self, checklist):
        with pytest.raises(UnknownItemError):
            checklist.toggle_complete("nope")

    def test_natural_completion_marks_item(self, checklist, ticks):
        checklist.start()
        ticks.advance(3)

        assert checklist.is_completed("jj")
        assert not checklist.is_completed("pu")

        ticks.advance(2)
        assert checklist.completed_count() == 2
        assert checklist.last_notice == "Workout Complete!"
        assert checklist.summary_text() == "2 of 2 exercises completed."

    def test_skip_never_marks_complete(self, checklist, ticks):
        """Test that skipping, including the last item, leaves items incomplete."""
        checklist.start()
        checklist.skip()
        checklist.skip()

        assert checklist.completed_count() == 0
        assert checklist.display().item_index is None

    def test_progress_with_no_items(self, store, ticks):
        store.put(FITNESS_STORAGE_KEY, [])
        checklist = FitnessChecklist(store, tick_source=ticks)

        assert checklist.progress_percentage() == 0.0

    def test_remove_clears_completed_flag(self, checklist):
        checklist.toggle_complete("jj")
        checklist.remove_item("jj")

        assert checklist.completed_count() == 0
        assert not checklist.is_completed("jj")
