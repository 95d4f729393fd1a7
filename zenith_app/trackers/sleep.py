"""Nightly sleep log with a trailing seven day chart."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from ..config.defaults import SleepParams
from ..errors import OutOfRangeError
from ..persistence import KeyValueStore
from ..utils.time import DateLike, chart_label, format_day, parse_day, trailing_days
from .base import EntryLog, is_finite_number

logger = structlog.get_logger(__name__)

SLEEP_LOG_KEY = "sleep_log_entries"


@dataclass(frozen=True)
class SleepEntry:
    id: str
    date: str
    hours: float


@dataclass(frozen=True)
class SleepChartPoint:
    label: str                                       # e.g. "Mar 7"
    hours: float
    full_date: str


class SleepTracker:
    """One sleep entry per night, upserted by date."""

    def __init__(self, store: KeyValueStore, params: Optional[SleepParams] = None):
        self.params = params or SleepParams()
        self.log_store = EntryLog(store, SLEEP_LOG_KEY)

    def _validate_hours(self, hours) -> float:
        if not is_finite_number(hours):
            raise OutOfRangeError("Hours slept must be a number.", field="hours", value=hours)
        if hours < self.params.min_hours:
            raise OutOfRangeError(f"Sleep must be at least {self.params.min_hours} hours.",
                                  minimum=self.params.min_hours, field="hours", value=hours)
        if hours > self.params.max_hours:
            raise OutOfRangeError(f"Sleep cannot exceed {self.params.max_hours:g} hours.",
                                  maximum=self.params.max_hours, field="hours", value=hours)
        return float(hours)

    def log(self, day: DateLike, hours: float) -> tuple[SleepEntry, bool]:
        """
        Record hours slept for a night, replacing any entry for the same date.

        Returns:
            The stored entry and True if an existing entry was updated
        """
        day_key = format_day(parse_day(day))
        value = self._validate_hours(hours)

        stored, updated = self.log_store.upsert_by("date", {"date": day_key, "hours": value})
        logger.info("Sleep updated" if updated else "Sleep logged", date=day_key, hours=value)
        return SleepEntry(**stored), updated

    def delete(self, entry_id: str) -> None:
        self.log_store.delete(entry_id)

    def entries(self) -> list[SleepEntry]:
        """All entries, most recent first."""
        entries = [SleepEntry(**raw) for raw in self.log_store.load()]
        return sorted(entries, key=lambda entry: entry.date, reverse=True)

    def entry_for(self, day: DateLike) -> Optional[SleepEntry]:
        day_key = format_day(day)
        return next((entry for entry in self.entries() if entry.date == day_key), None)

    def chart(self, end: Optional[date] = None) -> list[SleepChartPoint]:
        """Last ``chart_days`` days ending at ``end``, oldest first; missing nights are 0."""
        by_date = {entry.date: entry.hours for entry in self.entries()}
        return [
            SleepChartPoint(
                label=chart_label(day),
                hours=by_date.get(day.isoformat(), 0),
                full_date=day.isoformat(),
            )
            for day in trailing_days(self.params.chart_days, end)
        ]

    def has_chart_data(self, end: Optional[date] = None) -> bool:
        return any(point.hours > 0 for point in self.chart(end))
