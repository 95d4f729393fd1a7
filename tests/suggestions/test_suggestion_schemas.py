"""Tests for the suggestion flow schemas and prompts."""

import pytest
from pydantic import ValidationError

from zenith_app.suggestions import (
    DietSuggestionsInput,
    DietSuggestionsOutput,
    MoodChartInput,
    MoodChartOutput,
)
from zenith_app.suggestions.prompts import render_diet_prompt, render_mood_chart_prompt


class TestDietSchemas:
    def test_input_accepts_camel_case(self):
        data = DietSuggestionsInput.model_validate({
            "bmi": 22.9,
            "bmiCategory": "Normal weight",
            "currentWeightKg": 70,
            "heightCm": 175,
        })

        assert data.bmi_category == "Normal weight"
        assert data.current_weight_kg == 70

    def test_input_rejects_non_positive_bmi(self):
        with pytest.raises(ValidationError):
            DietSuggestionsInput(bmi=0, bmi_category="x", current_weight_kg=70, height_cm=175)

    @pytest.mark.parametrize("bmi", [float("nan"), float("inf")])
    def test_input_rejects_non_finite_bmi(self, bmi):
        with pytest.raises(ValidationError):
            DietSuggestionsInput(bmi=bmi, bmi_category="x", current_weight_kg=70, height_cm=175)

    def test_output_from_model_json(self):
        output = DietSuggestionsOutput.model_validate_json(
            '{"mainSuggestion": "Keep it up", "dietTips": ["Eat greens"],'
            ' "lifestyleRecommendations": ["Walk daily"]}'
        )

        assert output.main_suggestion == "Keep it up"
        assert output.diet_tips == ["Eat greens"]
        assert output.lifestyle_recommendations == ["Walk daily"]

    def test_output_requires_main_suggestion(self):
        with pytest.raises(ValidationError):
            DietSuggestionsOutput.model_validate_json('{"dietTips": []}')


class TestMoodChartSchemas:
    def test_input_requires_entries(self):
        with pytest.raises(ValidationError):
            MoodChartInput(journal_entries=[])

    def test_chart_data_string_is_parsed(self):
        output = MoodChartOutput.model_validate_json(
            '{"chartData": "[{\\"date\\": \\"2024-03-09\\", \\"moodScore\\": 0.5}]",'
            ' "summary": "Mostly positive"}'
        )

        points = output.points()
        assert [(point.date, point.mood_score) for point in points] == [("2024-03-09", 0.5)]

    def test_chart_data_array_is_accepted(self):
        """Test that a chart returned as a JSON array instead of a string still parses."""
        output = MoodChartOutput.model_validate({
            "chartData": [{"date": "2024-03-09", "moodScore": -0.25}],
            "summary": "Dip",
        })

        assert output.points()[0].mood_score == -0.25

    @pytest.mark.parametrize("chart_data", [
        "not json",
        '{"date": "2024-03-09"}',
        '[{"date": "2024-03-09", "moodScore": 3}]',
    ])
    def test_invalid_chart_data(self, chart_data):
        output = MoodChartOutput(chart_data=chart_data, summary="")
        with pytest.raises(ValueError):
            output.points()


class TestPrompts:
    def test_diet_prompt_includes_metrics(self):
        prompt = render_diet_prompt(DietSuggestionsInput(
            bmi=27.1, bmi_category="Overweight", current_weight_kg=83, height_cm=175
        ))

        assert "- BMI: 27.1" in prompt
        assert 'BMI Category: "Overweight"' in prompt
        assert "Height: 175" in prompt

    def test_mood_prompt_lists_entries(self):
        prompt = render_mood_chart_prompt(MoodChartInput(journal_entries=[
            {"date": "2024-03-08", "text": "Long day", "tags": ["tired", "stressed"]},
            {"date": "2024-03-09", "text": "Good walk", "tags": []},
        ]))

        assert "Date: 2024-03-08\nText: Long day\nTags: tired, stressed" in prompt
        assert "Date: 2024-03-09" in prompt
