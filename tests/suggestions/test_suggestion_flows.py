"""Tests for the diet and mood chart flows."""

import json
import pytest
from unittest.mock import Mock

from zenith_app.errors import SuggestionUnavailableError
from zenith_app.suggestions import MoodChart, SuggestionService
from zenith_app.suggestions.flows import (
    DIET_PLACEHOLDER,
    EMPTY_JOURNAL_NOTICE,
    MOOD_SUMMARY_PLACEHOLDER,
)
from zenith_app.trackers import MoodJournal, WeightTracker
from zenith_app.trackers.weight import USER_HEIGHT_KEY


@pytest.fixture
def client():
    return Mock()


@pytest.fixture
def service(client):
    return SuggestionService(client)


@pytest.fixture
def weights(store):
    tracker = WeightTracker(store)
    tracker.log("2024-03-09", 70)
    tracker.set_height(175)
    return tracker


@pytest.fixture
def journal(store):
    journal = MoodJournal(store)
    journal.add_entry("2024-03-08", "A stressful day at work", "stressed")
    journal.add_entry("2024-03-09", "Relaxing weekend walk", "relaxed, grateful")
    return journal


class TestDietSuggestions:
    def test_success(self, service, client, weights):
        client.generate.return_value = json.dumps({
            "mainSuggestion": "You're in a healthy range.",
            "dietTips": ["Eat more vegetables", "Stay hydrated"],
            "lifestyleRecommendations": ["Walk daily"],
        })

        result = service.diet_suggestions(weights)

        assert result.ok
        assert result.data.diet_tips == ["Eat more vegetables", "Stay hydrated"]
        prompt = client.generate.call_args[0][0]
        assert "BMI: 22.9" in prompt
        assert client.generate.call_args[1]["flow"] == "diet_suggestions"

    def test_missing_height_is_a_notice(self, service, client, store):
        tracker = WeightTracker(store)
        tracker.log("2024-03-09", 70)

        result = service.diet_suggestions(tracker)

        assert not result.ok
        assert result.notice
        assert result.error is None
        client.generate.assert_not_called()

    def test_corrupt_stored_height_uses_placeholder(self, service, client, store):
        tracker = WeightTracker(store)
        tracker.log("2024-03-09", 70)
        store.put(USER_HEIGHT_KEY, float("nan"))

        result = service.diet_suggestions(tracker)

        assert not result.ok
        assert result.error
        assert result.placeholder == DIET_PLACEHOLDER
        client.generate.assert_not_called()

    def test_service_failure_uses_placeholder(self, service, client, weights):
        client.generate.side_effect = SuggestionUnavailableError("HTTP 500", status_code=500)

        result = service.diet_suggestions(weights)

        assert not result.ok
        assert result.error == "HTTP 500"
        assert result.placeholder == DIET_PLACEHOLDER

    def test_malformed_output_uses_placeholder(self, service, client, weights):
        client.generate.return_value = '{"unexpected": true}'

        result = service.diet_suggestions(weights)

        assert not result.ok
        assert result.placeholder == DIET_PLACEHOLDER


class TestMoodChart:
    def test_empty_journal_is_a_notice(self, service, client, store):
        result = service.mood_chart(MoodJournal(store))

        assert result.notice == EMPTY_JOURNAL_NOTICE
        client.generate.assert_not_called()

    def test_points_sorted_by_date(self, service, client, journal):
        client.generate.return_value = json.dumps({
            "chartData": json.dumps([
                {"date": "2024-03-09", "moodScore": 0.7},
                {"date": "2024-03-08", "moodScore": -0.4},
            ]),
            "summary": "Mood improved over the weekend.",
        })

        result = service.mood_chart(journal)

        assert result.ok
        assert isinstance(result.data, MoodChart)
        assert [point.date for point in result.data.points] == ["2024-03-08", "2024-03-09"]
        assert result.data.summary == "Mood improved over the weekend."
        prompt = client.generate.call_args[0][0]
        assert "Tags: relaxed, grateful" in prompt

    def test_invalid_chart_data(self, service, client, journal):
        client.generate.return_value = json.dumps({"chartData": "oops", "summary": "?"})

        result = service.mood_chart(journal)

        assert not result.ok
        assert result.placeholder == MOOD_SUMMARY_PLACEHOLDER

    def test_service_failure(self, service, client, journal):
        client.generate.side_effect = SuggestionUnavailableError("Network error", flow="mood_chart")

        result = service.mood_chart(journal)

        assert not result.ok
        assert result.error == "Network error"
        assert result.placeholder == MOOD_SUMMARY_PLACEHOLDER
