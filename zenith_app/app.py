"""
Application coordinator.

Wires configuration, storage, the tick source, the timed routines, the
trackers and the suggestion service into one object a front end can drive.
"""

from datetime import date
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .logging.config import configure_logging
from .persistence import KeyValueStore, create_store
from .routines import BreathingSession, FitnessChecklist, StretchRoutine
from .sequence import ThreadingTickSource, TickSource
from .suggestions import GenerativeModelClient, SuggestionService
from .trackers import (
    MealLog,
    MoodJournal,
    MoodTracker,
    SleepTracker,
    WaterIntakeTracker,
    WeightTracker,
)
from .utils.time import format_day, today

logger = structlog.get_logger(__name__)


class WellnessApp:
    """
    Main coordinator for the wellness application.

    Owns one runner per timed routine; ``close()`` tears all of them down.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        store: Optional[KeyValueStore] = None,
        tick_source: Optional[TickSource] = None,
        suggestion_client: Optional[GenerativeModelClient] = None,
        config_dir: Optional[str] = None,
        setup_logging: bool = False,
    ) -> None:
        self.config = config or ConfigLoader.create(config_dir).load()

        if setup_logging:
            configure_logging(level=self.config.logging.level,
                              format_json=self.config.logging.format_json)

        self.store = store or create_store(self.config.storage.backend,
                                           self.config.storage.db_path)
        self.tick_source = tick_source or ThreadingTickSource()

        self.stretch = StretchRoutine(self.store, self.config.stretch, self.tick_source)
        self.fitness = FitnessChecklist(self.store, self.config.fitness, self.tick_source)
        self.breathing = BreathingSession(self.config.breathing,
                                          self.config.breathing_sequence, self.tick_source)

        self.water = WaterIntakeTracker(self.store, self.config.water)
        self.sleep = SleepTracker(self.store, self.config.sleep)
        self.weight = WeightTracker(self.store, self.config.weight)
        self.meals = MealLog(self.store)
        self.moods = MoodTracker(self.store)
        self.journal = MoodJournal(self.store, self.config.journal)

        self.suggestions = SuggestionService(
            suggestion_client or GenerativeModelClient(self.config.suggestions)
        )

        logger.info("Wellness app initialized", storage=self.config.storage.backend)

    def daily_summary(self, day: Optional[date] = None) -> dict[str, Any]:
        """Headline numbers for the dashboard."""
        day = day or today()
        sleep_entry = self.sleep.entry_for(day)
        weight_entry = self.weight.entry_for(day)
        mood_entry = self.moods.mood_for(day)

        return {
            "date": format_day(day),
            "water_ml": self.water.intake_ml,
            "water_goal_ml": self.water.goal_ml,
            "water_goal_reached": self.water.goal_reached(),
            "calories": self.meals.total_calories(day),
            "meal_count": len(self.meals.meals_for(day)),
            "sleep_hours": sleep_entry.hours if sleep_entry else None,
            "weight_kg": weight_entry.weight_kg if weight_entry else None,
            "bmi": self.weight.bmi(),
            "mood": mood_entry.mood if mood_entry else None,
            "exercises_completed": self.fitness.completed_count(),
            "exercise_count": len(self.fitness.items),
        }

    def close(self) -> None:
        """Cancel every live tick source."""
        for routine in (self.stretch, self.fitness, self.breathing):
            routine.close()
        logger.info("Wellness app closed")

    def __enter__(self) -> "WellnessApp":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
