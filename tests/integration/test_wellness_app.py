"""
Integration tests for the application coordinator.

Exercises routines, trackers and suggestions together over one store and one
manual tick source.
"""

import json
import pytest
from datetime import date
from unittest.mock import Mock

from zenith_app.app import WellnessApp
from zenith_app.config.defaults import get_default_config
from zenith_app.sequence import SequencePhase


@pytest.fixture
def client():
    return Mock()


@pytest.fixture
def app(store, ticks, client):
    with WellnessApp(config=get_default_config(), store=store, tick_source=ticks,
                     suggestion_client=client) as app:
        yield app


class TestRoutinesTogether:
    """Test that each routine owns one independent tick handle."""

    def test_default_stretch_routine_runs_to_completion(self, app, ticks):
        # Nine stretches totalling 300s plus eight 3s transitions
        assert app.stretch.total_duration() == 324

        app.stretch.start()
        ticks.advance(323)
        assert app.stretch.display().phase == SequencePhase.RUNNING

        ticks.advance(1)
        assert app.stretch.display().phase == SequencePhase.IDLE
        assert app.stretch.last_notice == "Stretch Routine Complete!"
        assert ticks.active_count == 0

    def test_runners_are_independent(self, app, ticks):
        app.stretch.start()
        app.fitness.start()
        app.breathing.start()
        assert ticks.active_count == 3

        app.stretch.pause()
        ticks.advance(5)

        assert ticks.active_count == 2
        assert app.stretch.display().seconds_remaining == 30
        assert app.fitness.display().seconds_remaining == 295
        assert app.breathing.time_left() == 55

    def test_restart_does_not_stack_handles(self, app, ticks):
        app.stretch.start()
        app.stretch.reset()
        app.stretch.start()
        app.stretch.pause()
        app.stretch.resume()

        assert ticks.active_count == 1
        ticks.advance(1)
        assert app.stretch.display().seconds_remaining == 29

    def test_deleting_active_item_resets(self, app, ticks):
        app.stretch.start()
        ticks.advance(3)
        active = app.stretch.display().active_item_id

        app.stretch.remove_item(active)

        assert app.stretch.display().phase == SequencePhase.IDLE
        assert len(app.stretch.items) == 8
        assert ticks.active_count == 0

    def test_close_cancels_everything(self, store, ticks, client):
        app = WellnessApp(config=get_default_config(), store=store, tick_source=ticks,
                          suggestion_client=client)
        app.stretch.start()
        app.fitness.start()

        app.close()

        assert ticks.active_count == 0


class TestPersistenceAcrossSessions:
    def test_edits_survive_restart(self, store, ticks, client):
        with WellnessApp(config=get_default_config(), store=store, tick_source=ticks,
                         suggestion_client=client) as first:
            first.stretch.add_item("Calf Stretch", 45)
            first.fitness.toggle_complete(first.fitness.items[0].id)
            first.water.add(500)

        with WellnessApp(config=get_default_config(), store=store, tick_source=ticks,
                         suggestion_client=client) as second:
            assert second.stretch.items[-1].name == "Calf Stretch"
            assert second.fitness.completed_count() == 1
            assert second.water.intake_ml == 500


class TestDailySummary:
    def test_summary_collects_trackers(self, app):
        day = date(2024, 3, 9)
        app.water.add(750)
        app.meals.log("Oatmeal", 350, day)
        app.meals.log("Salad", 400, day)
        app.sleep.log(day, 7.5)
        app.weight.log(day, 70)
        app.weight.set_height(175)
        app.moods.log_mood("calm", day)

        summary = app.daily_summary(day)

        assert summary == {
            "date": "2024-03-09",
            "water_ml": 750,
            "water_goal_ml": 2000,
            "water_goal_reached": False,
            "calories": 750,
            "meal_count": 2,
            "sleep_hours": 7.5,
            "weight_kg": 70.0,
            "bmi": 22.9,
            "mood": "Calm",
            "exercises_completed": 0,
            "exercise_count": 6,
        }

    def test_empty_day(self, app):
        summary = app.daily_summary(date(2024, 3, 9))

        assert summary["sleep_hours"] is None
        assert summary["weight_kg"] is None
        assert summary["bmi"] is None
        assert summary["calories"] == 0


class TestSuggestionsThroughApp:
    def test_diet_suggestions_use_weight_tracker(self, app, client):
        app.weight.log("2024-03-09", 95)
        app.weight.set_height(180)
        client.generate.return_value = json.dumps({
            "mainSuggestion": "Small steps add up.",
            "dietTips": ["Add vegetables to each meal"],
            "lifestyleRecommendations": ["Take a daily walk"],
        })

        result = app.suggestions.diet_suggestions(app.weight)

        assert result.ok
        assert 'BMI Category: "Overweight"' in client.generate.call_args[0][0]
