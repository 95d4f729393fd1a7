"""
AI suggestion flows.

Each flow validates its input, renders a prompt, calls the model once and
validates the JSON it returns. Service failures never propagate to the caller:
they are logged and turned into a failed ``SuggestionResult`` carrying a
user-visible message and a placeholder.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from ..errors import NoEntriesError, SuggestionUnavailableError
from ..logging.config import get_suggestion_logger
from ..trackers import MoodJournal, WeightTracker
from .client import GenerativeModelClient
from .prompts import render_diet_prompt, render_mood_chart_prompt
from .schemas import (
    DietSuggestionsInput,
    DietSuggestionsOutput,
    MoodChartInput,
    MoodChartOutput,
    MoodChartPoint,
)

logger = get_suggestion_logger(__name__)

DIET_PLACEHOLDER = "Could not load suggestions. Please try again later."
MOOD_SUMMARY_PLACEHOLDER = "Failed to generate summary."
EMPTY_JOURNAL_NOTICE = "Write some journal entries to generate a mood chart."


@dataclass(frozen=True)
class SuggestionResult:
    """Outcome of a suggestion flow."""
    ok: bool
    data: Optional[Any] = None
    error: Optional[str] = None                      # Shown to the user on failure
    placeholder: Optional[str] = None                # Shown in place of the content
    notice: Optional[str] = None                     # Precondition not met, nothing requested


@dataclass(frozen=True)
class MoodChart:
    points: list[MoodChartPoint]
    summary: str


class SuggestionService:
    """Runs the diet and mood chart flows against the generative model."""

    def __init__(self, client: Optional[GenerativeModelClient] = None):
        self.client = client or GenerativeModelClient()

    def diet_suggestions(self, weight_tracker: WeightTracker) -> SuggestionResult:
        try:
            bmi, category, latest, height = weight_tracker.require_bmi()
        except NoEntriesError as e:
            return SuggestionResult(ok=False, notice=e.user_message)

        try:
            request = DietSuggestionsInput(
                bmi=bmi,
                bmi_category=category,
                current_weight_kg=latest.weight_kg,
                height_cm=height,
            )
        except ValidationError as e:
            logger.error("Diet suggestion input invalid", error_count=e.error_count())
            return SuggestionResult(ok=False, error="Your weight or height data looks invalid.",
                                    placeholder=DIET_PLACEHOLDER)

        try:
            text = self.client.generate(render_diet_prompt(request), flow="diet_suggestions")
            output = self._parse(DietSuggestionsOutput, text, "diet_suggestions")
        except SuggestionUnavailableError as e:
            logger.error("Diet suggestions failed", error=str(e), status_code=e.status_code)
            return SuggestionResult(ok=False, error=str(e), placeholder=DIET_PLACEHOLDER)

        logger.info("Diet suggestions generated", bmi=bmi, bmi_category=category,
                    tip_count=len(output.diet_tips))
        return SuggestionResult(ok=True, data=output)

    def mood_chart(self, journal: MoodJournal) -> SuggestionResult:
        if journal.is_empty():
            return SuggestionResult(ok=False, notice=EMPTY_JOURNAL_NOTICE)

        try:
            # ValidationError is a ValueError, handled below
            request = MoodChartInput(journal_entries=journal.export_for_analysis())
            text = self.client.generate(render_mood_chart_prompt(request), flow="mood_chart")
            output = self._parse(MoodChartOutput, text, "mood_chart")
            points = output.points()
        except SuggestionUnavailableError as e:
            logger.error("Mood chart failed", error=str(e), status_code=e.status_code)
            return SuggestionResult(ok=False, error=str(e), placeholder=MOOD_SUMMARY_PLACEHOLDER)
        except ValueError as e:
            logger.error("Mood chart data invalid", error=str(e))
            return SuggestionResult(ok=False, error="Could not generate mood chart.",
                                    placeholder=MOOD_SUMMARY_PLACEHOLDER)

        points = sorted(points, key=lambda point: point.date)
        logger.info("Mood chart generated", point_count=len(points),
                    entry_count=len(request.journal_entries))
        return SuggestionResult(ok=True, data=MoodChart(points=points, summary=output.summary))

    @staticmethod
    def _parse(model, text: str, flow: str):
        try:
            return model.model_validate_json(text)
        except ValidationError as e:
            logger.warning("Model output failed validation", flow=flow, error_count=e.error_count())
            raise SuggestionUnavailableError("AI returned suggestions in an unexpected format",
                                             flow=flow) from e
