"""
Mood tracking.

``MoodTracker`` keeps one emoji mood per day for the calendar view.
``MoodJournal`` keeps free-text entries with tags, which also feed the AI
mood chart.
"""

from dataclasses import dataclass
from typing import Any, Optional

import structlog

from ..config.defaults import JournalParams
from ..errors import TextTooShortError, UnknownItemError
from ..persistence import KeyValueStore
from ..utils.time import DateLike, format_day, today
from .base import EntryLog

logger = structlog.get_logger(__name__)

MOOD_LOG_KEY = "mood_log"
MOOD_JOURNAL_KEY = "mood_journal_entries"


@dataclass(frozen=True)
class MoodOption:
    value: str
    label: str
    emoji: str
    color: str


MOOD_OPTIONS = (
    MoodOption("happy", "Happy", "😊", "green"),
    MoodOption("neutral", "Neutral", "😐", "yellow"),
    MoodOption("sad", "Sad", "😞", "blue"),
    MoodOption("anxious", "Anxious", "😟", "orange"),
    MoodOption("calm", "Calm", "😌", "teal"),
    MoodOption("angry", "Angry", "😡", "red"),
)

JOURNAL_TAG_SUGGESTIONS = (
    "grateful", "stressed", "productive", "relaxed",
    "inspired", "tired", "hopeful", "anxious",
)


def mood_option(value: str) -> MoodOption:
    """Look up a mood by value or label, case-insensitively."""
    key = (value or "").strip().lower()
    for option in MOOD_OPTIONS:
        if key in (option.value, option.label.lower()):
            return option
    raise UnknownItemError("Unknown mood", field="mood", value=value)


@dataclass(frozen=True)
class MoodEntry:
    id: str
    date: str
    mood: str
    emoji: str
    color: str


class MoodTracker:
    """Daily emoji mood, one entry per day."""

    def __init__(self, store: KeyValueStore):
        self.log_store = EntryLog(store, MOOD_LOG_KEY)

    def log_mood(self, mood: str, day: Optional[DateLike] = None) -> MoodEntry:
        option = mood_option(mood)
        day_key = format_day(day or today())
        stored, updated = self.log_store.upsert_by("date", {
            "date": day_key,
            "mood": option.label,
            "emoji": option.emoji,
            "color": option.color,
        })
        logger.info("Mood logged", date=day_key, mood=option.value, updated=updated)
        return MoodEntry(**stored)

    def entries(self) -> list[MoodEntry]:
        entries = [MoodEntry(**raw) for raw in self.log_store.load()]
        return sorted(entries, key=lambda entry: entry.date)

    def mood_for(self, day: DateLike) -> Optional[MoodEntry]:
        day_key = format_day(day)
        return next((entry for entry in self.entries() if entry.date == day_key), None)

    def calendar_modifiers(self) -> dict[str, list[str]]:
        """Dates grouped by mood colour for calendar highlighting."""
        modifiers: dict[str, list[str]] = {}
        for entry in self.entries():
            modifiers.setdefault(entry.color, []).append(entry.date)
        return modifiers


@dataclass(frozen=True)
class JournalEntry:
    id: str
    date: str
    text: str
    tags: str                                        # Normalized "a, b, c"

    @property
    def tag_list(self) -> list[str]:
        return parse_tags(self.tags)


def parse_tags(tags: Optional[str]) -> list[str]:
    """Split comma-separated tags, trimming blanks and duplicates."""
    result: list[str] = []
    for tag in (tags or "").split(","):
        clean = tag.strip()
        if clean and clean not in result:
            result.append(clean)
    return result


def merge_tag(current: Optional[str], tag: str) -> str:
    """Add a suggested tag to a comma-separated tag field unless already present."""
    tags = parse_tags(current)
    if tag.strip() and tag.strip() not in tags:
        tags.append(tag.strip())
    return ", ".join(tags)


class MoodJournal:
    """Free-text journal entries with tags."""

    def __init__(self, store: KeyValueStore, params: Optional[JournalParams] = None):
        self.params = params or JournalParams()
        self.log_store = EntryLog(store, MOOD_JOURNAL_KEY)

    def add_entry(self, day: DateLike, text: str, tags: Optional[str] = None) -> JournalEntry:
        """
        Save a journal entry.

        Raises:
            InvalidDateError: If the date cannot be parsed
            TextTooShortError: If the text is below the minimum length
        """
        day_key = format_day(day)
        minimum = self.params.min_text_length
        if len(text or "") < minimum:
            raise TextTooShortError(
                f"Journal entry must be at least {minimum} characters long.",
                min_length=minimum,
                field="text",
                value=text
            )

        stored = self.log_store.append({
            "date": day_key,
            "text": text,
            "tags": ", ".join(parse_tags(tags)),
        })
        logger.info("Journal entry saved", date=day_key, tag_count=len(parse_tags(tags)))
        return JournalEntry(**stored)

    def delete(self, entry_id: str) -> None:
        self.log_store.delete(entry_id)

    def entries(self) -> list[JournalEntry]:
        """Most recent first; later additions first within a day."""
        raw_entries = self.log_store.load()
        entries = [JournalEntry(**raw) for raw in reversed(raw_entries)]
        return sorted(entries, key=lambda entry: entry.date, reverse=True)

    def is_empty(self) -> bool:
        return not self.log_store.load()

    def tag_suggestions(self) -> list[str]:
        return list(JOURNAL_TAG_SUGGESTIONS[:self.params.suggested_tag_count])

    def merge_tag(self, current: Optional[str], tag: str) -> str:
        return merge_tag(current, tag)

    def export_for_analysis(self) -> list[dict[str, Any]]:
        """Entries as {date, text, tags[]} for the mood chart request."""
        return [
            {"date": entry.date, "text": entry.text, "tags": entry.tag_list}
            for entry in self.entries()
        ]
