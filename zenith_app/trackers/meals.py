"""Meal and calorie log."""

from dataclasses import dataclass

import structlog

from ..errors import EmptyNameError, OutOfRangeError
from ..persistence import KeyValueStore
from ..utils.time import DateLike, format_day
from .base import EntryLog, is_finite_number

logger = structlog.get_logger(__name__)

MEAL_LOG_KEY = "meal_log_entries"


@dataclass(frozen=True)
class MealEntry:
    id: str
    name: str
    calories: float
    date: str


class MealLog:
    """Any number of meals per day."""

    def __init__(self, store: KeyValueStore):
        self.log_store = EntryLog(store, MEAL_LOG_KEY)

    def log(self, name: str, calories: float, day: DateLike) -> MealEntry:
        clean_name = (name or "").strip()
        if not clean_name:
            raise EmptyNameError("Meal name cannot be empty.", field="name", value=name)
        if not is_finite_number(calories):
            raise OutOfRangeError("Calories must be a number.", field="calories", value=calories)
        if calories < 0:
            raise OutOfRangeError("Calories must be zero or a positive number.",
                                  minimum=0, field="calories", value=calories)

        stored = self.log_store.append(
            {"name": clean_name, "calories": calories, "date": format_day(day)}
        )
        logger.info("Meal logged", name=clean_name, calories=calories, date=stored["date"])
        return MealEntry(**stored)

    def delete(self, entry_id: str) -> None:
        self.log_store.delete(entry_id)

    def entries(self) -> list[MealEntry]:
        """All meals, most recent day first; insertion order within a day."""
        entries = [MealEntry(**raw) for raw in self.log_store.load()]
        return sorted(entries, key=lambda entry: entry.date, reverse=True)

    def meals_for(self, day: DateLike) -> list[MealEntry]:
        day_key = format_day(day)
        return [MealEntry(**raw) for raw in self.log_store.load() if raw["date"] == day_key]

    def total_calories(self, day: DateLike) -> float:
        return sum(meal.calories for meal in self.meals_for(day))
