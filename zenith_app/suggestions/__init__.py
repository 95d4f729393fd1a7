"""AI-generated diet suggestions and mood charts."""

from .client import GenerativeModelClient
from .flows import MoodChart, SuggestionResult, SuggestionService
from .schemas import (
    DietSuggestionsInput,
    DietSuggestionsOutput,
    MoodChartInput,
    MoodChartOutput,
    MoodChartPoint,
)

__all__ = [
    "DietSuggestionsInput",
    "DietSuggestionsOutput",
    "GenerativeModelClient",
    "MoodChart",
    "MoodChartInput",
    "MoodChartOutput",
    "MoodChartPoint",
    "SuggestionResult",
    "SuggestionService",
]
