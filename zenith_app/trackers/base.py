"""Shared storage helper for trackers that keep a list of dated entries."""

import math
import uuid
from typing import Any, Callable, Optional

import structlog

from ..errors import PersistenceError, UnknownItemError
from ..persistence import KeyValueStore

logger = structlog.get_logger(__name__)


def is_finite_number(value: Any) -> bool:
    """Real int or float, excluding bool, NaN and infinity."""
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def new_entry_id() -> str:
    return str(uuid.uuid4())


class EntryLog:
    """List of JSON entries stored under one key, each with a unique ``id``."""

    def __init__(self, store: KeyValueStore, key: str):
        self.store = store
        self.key = key

    def load(self) -> list[dict[str, Any]]:
        entries = self.store.get(self.key, [])
        if not isinstance(entries, list):
            raise PersistenceError(
                f"Stored value under '{self.key}' is not a list",
                operation="load",
                target=self.key
            )
        return entries

    def save(self, entries: list[dict[str, Any]]) -> None:
        self.store.put(self.key, entries)

    def find(self, predicate: Callable[[dict[str, Any]], bool]) -> Optional[dict[str, Any]]:
        return next((entry for entry in self.load() if predicate(entry)), None)

    def upsert_by(self, field: str, entry: dict[str, Any]) -> tuple[dict[str, Any], bool]:
        """
        Replace the entry whose ``field`` matches, keeping its id, or append.

        Returns:
            The stored entry and whether an existing one was updated
        """
        entries = self.load()
        for index, existing in enumerate(entries):
            if existing.get(field) == entry[field]:
                updated = {**entry, "id": existing["id"]}
                entries[index] = updated
                self.save(entries)
                return updated, True

        created = {**entry, "id": new_entry_id()}
        entries.append(created)
        self.save(entries)
        return created, False

    def append(self, entry: dict[str, Any]) -> dict[str, Any]:
        created = {**entry, "id": new_entry_id()}
        self.save(self.load() + [created])
        return created

    def delete(self, entry_id: str) -> dict[str, Any]:
        """
        Remove an entry by id.

        Raises:
            UnknownItemError: If no entry has that id
        """
        entries = self.load()
        remaining = [entry for entry in entries if entry.get("id") != entry_id]
        if len(remaining) == len(entries):
            raise UnknownItemError("Entry not found", field="id", value=entry_id)

        removed = next(entry for entry in entries if entry.get("id") == entry_id)
        self.save(remaining)
        logger.info("Entry deleted", key=self.key, entry_id=entry_id)
        return removed
