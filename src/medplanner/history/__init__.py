"""
medplanner - Recipe History Persistence.
"""

from medplanner.history.store import (
    DAYS_TO_AVOID,
    HISTORY_KEY,
    HistoryStore,
    InMemoryHistoryStore,
    JsonFileHistoryStore,
    filter_expired,
)

__all__ = [
    "DAYS_TO_AVOID",
    "HISTORY_KEY",
    "HistoryStore",
    "InMemoryHistoryStore",
    "JsonFileHistoryStore",
    "filter_expired",
]
