"""Input and output schemas for the AI suggestion flows."""

import json
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class FlowModel(BaseModel):
    """Accepts both snake_case and the model's camelCase keys; rejects NaN and infinity."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)


class DietSuggestionsInput(FlowModel):
    """User metrics sent to the diet suggestion flow."""
    bmi: float = Field(..., gt=0)
    bmi_category: str = Field(..., alias="bmiCategory", min_length=1)
    current_weight_kg: float = Field(..., alias="currentWeightKg", gt=0)
    height_cm: float = Field(..., alias="heightCm", gt=0)


class DietSuggestionsOutput(FlowModel):
    """General diet and lifestyle advice."""
    main_suggestion: str = Field(..., alias="mainSuggestion")
    diet_tips: List[str] = Field(default_factory=list, alias="dietTips")
    lifestyle_recommendations: List[str] = Field(default_factory=list,
                                                 alias="lifestyleRecommendations")


class JournalEntryInput(FlowModel):
    date: str
    text: str
    tags: List[str] = []


class MoodChartInput(FlowModel):
    """Journal entries sent to the mood chart flow."""
    journal_entries: List[JournalEntryInput] = Field(..., alias="journalEntries", min_length=1)


class MoodChartPoint(FlowModel):
    date: str
    mood_score: float = Field(..., alias="moodScore", ge=-1.0, le=1.0)


class MoodChartOutput(FlowModel):
    """Mood trend analysis; ``chart_data`` is itself a JSON string."""
    chart_data: str = Field(..., alias="chartData")
    summary: str

    @field_validator("chart_data", mode="before")
    @classmethod
    def encode_chart_data(cls, value):
        # Models sometimes return the chart as an array instead of a string
        if isinstance(value, (list, dict)):
            return json.dumps(value)
        return value

    def points(self) -> List[MoodChartPoint]:
        """
        Parse ``chart_data`` into validated points.

        Raises:
            ValueError: If the chart data is not a JSON list of points
        """
        try:
            raw = json.loads(self.chart_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Chart data is not valid JSON: {e}") from e
        if not isinstance(raw, list):
            raise ValueError("Chart data must be a list of points")
        try:
            return [MoodChartPoint.model_validate(point) for point in raw]
        except ValidationError as e:
            raise ValueError(f"Invalid chart point: {e}") from e
