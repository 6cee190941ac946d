"""
Explanation history.

Two stores share one interface: a bounded local store for anonymous callers,
and the record store, which is keyed by user and paged. Which one a caller
gets depends only on whether an identity is present. They are never merged.
"""

import json
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import dumbify.database as database
from dumbify.constants import HISTORY_CAPACITY


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    code: str
    tone: str
    explanation: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "code": self.code,
            "tone": self.tone,
            "explanation": self.explanation,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            id=str(data["id"]),
            code=data["code"],
            tone=data["tone"],
            explanation=data["explanation"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )

    @classmethod
    def from_record(cls, row: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            id=str(row["id"]),
            code=row["code"],
            tone=row["tone"],
            explanation=row["explanation"],
            timestamp=datetime.fromisoformat(row["created_at"]),
        )


class HistoryStore(ABC):
    @abstractmethod
    def add(self, code: str, tone: str, explanation: str) -> HistoryEntry:
        ...

    @abstractmethod
    def list(self, limit: int = HISTORY_CAPACITY, offset: int = 0) -> List[HistoryEntry]:
        """Entries newest first."""

    @abstractmethod
    def delete(self, entry_id: str) -> bool:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    def get_latest(self) -> Optional[HistoryEntry]:
        entries = self.list(limit=1)
        return entries[0] if entries else None


class LocalHistoryStore(HistoryStore):
    """
    Bounded FIFO history, optionally mirrored to a JSON file.

    Once ``capacity`` is reached, each new entry evicts the oldest one by
    insertion order.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, capacity: int = HISTORY_CAPACITY):
        self.path = Path(path) if path else None
        self.capacity = capacity
        self._entries: List[HistoryEntry] = self._load()

    @property
    def entries(self) -> List[HistoryEntry]:
        """Stored entries in insertion order, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, code: str, tone: str, explanation: str) -> HistoryEntry:
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            code=code,
            tone=tone,
            explanation=explanation,
            timestamp=datetime.now(timezone.utc),
        )
        self._entries.append(entry)
        if len(self._entries) > self.capacity:
            del self._entries[: len(self._entries) - self.capacity]
        self._save()
        return entry

    def list(self, limit: int = HISTORY_CAPACITY, offset: int = 0) -> List[HistoryEntry]:
        newest_first = self._entries[::-1]
        return newest_first[offset: offset + limit]

    def delete(self, entry_id: str) -> bool:
        remaining = [e for e in self._entries if e.id != entry_id]
        deleted = len(remaining) != len(self._entries)
        self._entries = remaining
        if deleted:
            self._save()
        return deleted

    def clear(self) -> None:
        self._entries = []
        self._save()

    def _load(self) -> List[HistoryEntry]:
        if not self.path or not self.path.exists():
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            entries = [HistoryEntry.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logging.error(f"Failed to parse local history from {self.path}: {e}")
            return []

        return entries[-self.capacity:] if self.capacity else []

    def _save(self) -> None:
        if not self.path:
            return

        try:
            self.path.write_text(
                json.dumps([e.to_dict() for e in self._entries], ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logging.error(f"Failed to write local history to {self.path}: {e}")


class RecordHistoryStore(HistoryStore):
    """History kept in the explanation record store, scoped to one user."""

    def __init__(self, user_id: str):
        self.user_id = user_id

    def add(self, code: str, tone: str, explanation: str) -> HistoryEntry:
        row = database.save_explanation(self.user_id, code, tone, explanation)
        return HistoryEntry.from_record(row)

    def list(self, limit: int = HISTORY_CAPACITY, offset: int = 0) -> List[HistoryEntry]:
        rows = database.get_user_explanations(self.user_id, limit=limit, offset=offset)
        return [HistoryEntry.from_record(row) for row in rows]

    def delete(self, entry_id: str) -> bool:
        return database.delete_explanation(entry_id, self.user_id)

    def clear(self) -> None:
        database.delete_user_explanations(self.user_id)


def select_history_store(user_id: Optional[str], local: Optional[HistoryStore] = None) -> Optional[HistoryStore]:
    """Signed-in callers use the record store; anonymous ones keep ``local``, which may be None."""
    if user_id:
        return RecordHistoryStore(user_id)
    return local
