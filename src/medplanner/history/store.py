"""
History Store Protocol.

Persistence for the "recently used" recipe history. The planner core never
touches a store; callers load a snapshot before generating and save the
returned updated_history afterwards.

Expiry is a store concern: load_history() only returns entries inside the
retention window, and drops expired ones from storage as it goes.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable

from medplanner.core.planner import now_ms
from medplanner.models.entities import HistorySnapshot

logger = logging.getLogger(__name__)

HISTORY_KEY = "med-planner-history"
DAYS_TO_AVOID = 30
MS_PER_DAY = 24 * 60 * 60 * 1000


def filter_expired(snapshot: HistorySnapshot, now: int, days: int = DAYS_TO_AVOID) -> HistorySnapshot:
    """Keep entries used within the last `days` days."""
    cutoff = now - days * MS_PER_DAY
    return {recipe_id: ts for recipe_id, ts in snapshot.items() if ts >= cutoff}


@runtime_checkable
class HistoryStore(Protocol):
    """Load/save access to the recipe history."""

    def load_history(self) -> HistorySnapshot:
        """Return non-expired history entries."""
        ...

    def save_history(self, snapshot: HistorySnapshot) -> None:
        """Replace the stored history with `snapshot`."""
        ...


class InMemoryHistoryStore:
    """Dict-backed store. Applies the same retention rule as the file store."""

    def __init__(
        self,
        snapshot: HistorySnapshot | None = None,
        retention_days: int = DAYS_TO_AVOID,
        clock: Callable[[], int] = now_ms,
    ):
        self._snapshot: HistorySnapshot = dict(snapshot or {})
        self.retention_days = retention_days
        self.clock = clock

    def load_history(self) -> HistorySnapshot:
        self._snapshot = filter_expired(self._snapshot, self.clock(), self.retention_days)
        return dict(self._snapshot)

    def save_history(self, snapshot: HistorySnapshot) -> None:
        self._snapshot = dict(snapshot)

    def clear(self) -> None:
        self._snapshot = {}


class JsonFileHistoryStore:
    """
    History kept in a JSON file under a fixed key.

    File layout:
        {"med-planner-history": {"<recipe id>": <last used, epoch ms>, ...}}

    Other top-level keys in the file are preserved.
    """

    def __init__(
        self,
        path: str | Path,
        retention_days: int = DAYS_TO_AVOID,
        clock: Callable[[], int] = now_ms,
    ):
        self.path = Path(path)
        self.retention_days = retention_days
        self.clock = clock

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8").strip()
        if not text:
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"History file must contain a JSON object: {self.path}")
        return data

    def _write_document(self, document: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document, indent=2, sort_keys=True) + "\n", encoding="utf-8")

    def load_history(self) -> HistorySnapshot:
        document = self._read_document()
        stored = {str(k): int(v) for k, v in document.get(HISTORY_KEY, {}).items()}

        filtered = filter_expired(stored, self.clock(), self.retention_days)
        if len(filtered) != len(stored):
            logger.debug(f"Dropped {len(stored) - len(filtered)} expired history entries")
            document[HISTORY_KEY] = filtered
            self._write_document(document)
        return filtered

    def save_history(self, snapshot: HistorySnapshot) -> None:
        document = self._read_document()
        document[HISTORY_KEY] = dict(snapshot)
        self._write_document(document)
        logger.debug(f"Saved {len(snapshot)} history entries to {self.path}")

    def clear(self) -> None:
        document = self._read_document()
        if document.pop(HISTORY_KEY, None) is not None:
            self._write_document(document)
