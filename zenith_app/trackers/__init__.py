"""Daily wellness trackers backed by the key-value store."""

from .meals import MealEntry, MealLog
from .mood import (
    JOURNAL_TAG_SUGGESTIONS,
    MOOD_OPTIONS,
    JournalEntry,
    MoodEntry,
    MoodJournal,
    MoodOption,
    MoodTracker,
)
from .sleep import SleepChartPoint, SleepEntry, SleepTracker
from .water import WaterIntakeTracker
from .weight import WeightChartPoint, WeightEntry, WeightTracker, bmi_category

__all__ = [
    "JOURNAL_TAG_SUGGESTIONS",
    "MOOD_OPTIONS",
    "JournalEntry",
    "MealEntry",
    "MealLog",
    "MoodEntry",
    "MoodJournal",
    "MoodOption",
    "MoodTracker",
    "SleepChartPoint",
    "SleepEntry",
    "SleepTracker",
    "WaterIntakeTracker",
    "WeightChartPoint",
    "WeightEntry",
    "WeightTracker",
    "bmi_category",
]
