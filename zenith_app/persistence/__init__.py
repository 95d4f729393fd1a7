"""
Persistence module.

Explicit key-value repository interface injected into every page so the
storage mechanism is swappable and tests can run against an in-memory
store.
"""

from .store import InMemoryStore, KeyValueStore, SqliteStore, create_store

__all__ = ["KeyValueStore", "InMemoryStore", "SqliteStore", "create_store"]
