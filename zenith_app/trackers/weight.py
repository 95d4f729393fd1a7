"""Weight log, progress chart and body mass index."""

from dataclasses import dataclass
from typing import Optional

import structlog

from ..config.defaults import WeightParams
from ..errors import NoEntriesError, OutOfRangeError
from ..persistence import KeyValueStore
from ..utils.time import DateLike, chart_label, format_day
from .base import EntryLog, is_finite_number

logger = structlog.get_logger(__name__)

WEIGHT_LOG_KEY = "weight_log_entries"
USER_HEIGHT_KEY = "user_height_cm"

# Upper bounds (exclusive) of each BMI band
BMI_CATEGORIES = (
    (18.5, "Underweight"),
    (25.0, "Normal weight"),
    (30.0, "Overweight"),
    (35.0, "Obesity Class I"),
    (40.0, "Obesity Class II"),
)
BMI_TOP_CATEGORY = "Obesity Class III"


@dataclass(frozen=True)
class WeightEntry:
    id: str
    date: str
    weight_kg: float


@dataclass(frozen=True)
class WeightChartPoint:
    label: str
    weight_kg: float
    full_date: str


def bmi_category(bmi: float) -> str:
    for upper, label in BMI_CATEGORIES:
        if bmi < upper:
            return label
    return BMI_TOP_CATEGORY


class WeightTracker:
    """Dated weight entries, one per day."""

    def __init__(self, store: KeyValueStore, params: Optional[WeightParams] = None):
        self.store = store
        self.params = params or WeightParams()
        self.log_store = EntryLog(store, WEIGHT_LOG_KEY)

    def log(self, day: DateLike, weight_kg: float) -> tuple[WeightEntry, bool]:
        """
        Record a weight for a date, replacing any entry for the same date.

        Raises:
            InvalidDateError: If the date cannot be parsed
            OutOfRangeError: If the weight is outside the accepted range
        """
        day_key = format_day(day)
        if not is_finite_number(weight_kg):
            raise OutOfRangeError("Weight must be a number.", field="weight_kg", value=weight_kg)
        if weight_kg < self.params.min_kg:
            raise OutOfRangeError("Weight must be a positive number.",
                                  minimum=self.params.min_kg, field="weight_kg", value=weight_kg)
        if weight_kg > self.params.max_kg:
            raise OutOfRangeError("Weight seems too high.",
                                  maximum=self.params.max_kg, field="weight_kg", value=weight_kg)

        stored, updated = self.log_store.upsert_by(
            "date", {"date": day_key, "weight_kg": float(weight_kg)}
        )
        logger.info("Weight updated" if updated else "Weight logged",
                    date=day_key, weight_kg=weight_kg)
        return WeightEntry(**stored), updated

    def delete(self, entry_id: str) -> None:
        self.log_store.delete(entry_id)

    def entries(self) -> list[WeightEntry]:
        """All entries, most recent first."""
        entries = [WeightEntry(**raw) for raw in self.log_store.load()]
        return sorted(entries, key=lambda entry: entry.date, reverse=True)

    def entry_for(self, day: DateLike) -> Optional[WeightEntry]:
        day_key = format_day(day)
        return next((entry for entry in self.entries() if entry.date == day_key), None)

    def latest(self) -> Optional[WeightEntry]:
        entries = self.entries()
        return entries[0] if entries else None

    def chart(self) -> list[WeightChartPoint]:
        """Every entry, oldest first."""
        return [
            WeightChartPoint(label=chart_label(entry.date), weight_kg=entry.weight_kg,
                             full_date=entry.date)
            for entry in reversed(self.entries())
        ]

    def has_trend(self) -> bool:
        """A line chart needs at least two points."""
        return len(self.log_store.load()) >= 2

    # Height and BMI

    @property
    def height_cm(self) -> Optional[float]:
        return self.store.get(USER_HEIGHT_KEY)

    def set_height(self, height_cm: float) -> float:
        low, high = self.params.min_height_cm, self.params.max_height_cm
        if (not is_finite_number(height_cm)
                or not low <= height_cm <= high):
            raise OutOfRangeError(f"Height must be between {low:g} and {high:g} cm.",
                                  minimum=low, maximum=high, field="height_cm", value=height_cm)
        self.store.put(USER_HEIGHT_KEY, float(height_cm))
        return float(height_cm)

    def bmi(self) -> Optional[float]:
        """BMI from the latest weight and stored height, None if either is missing."""
        latest = self.latest()
        height = self.height_cm
        if latest is None or not height:
            return None
        meters = height / 100
        return round(latest.weight_kg / (meters * meters), 1)

    def bmi_category(self) -> Optional[str]:
        value = self.bmi()
        return bmi_category(value) if value is not None else None

    def require_bmi(self) -> tuple[float, str, WeightEntry, float]:
        """
        BMI with its inputs, for features that cannot work without them.

        Raises:
            NoEntriesError: If no weight or no height has been recorded
        """
        latest = self.latest()
        height = self.height_cm
        if latest is None or not height:
            raise NoEntriesError("Log your weight and height to calculate your BMI.",
                                 field="bmi")
        value = self.bmi()
        return value, bmi_category(value), latest, height
