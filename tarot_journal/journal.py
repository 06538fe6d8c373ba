"""
Reading journal on top of an abstract key-value record store.

A completed draw becomes a JournalEntry. After that only three things may
change: the narrative (attached once), the free-text notes and the favorite
flag. The storage driver is pluggable through RecordStore; an in-memory one
is provided for tests and single-process use.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Protocol

from pydantic import BaseModel, Field, ValidationError

from .errors import (
    DrawNotCompleteError,
    JournalEntryNotFoundError,
    NarrativeAlreadyAttachedError,
)
from .tarot_core import Draw, is_complete

logger = logging.getLogger(__name__)

KEY_PREFIX = "journal:"


class RecordStore(Protocol):
    """Minimal string key-value store (AsyncStorage, Redis, a DB table, ...)."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> Iterable[str]: ...


class InMemoryRecordStore:
    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterable[str]:
        return list(self._data.keys())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JournalCard(BaseModel):
    card_id: str
    card_name: str
    reversed: bool
    position_id: int
    position_name: str


class JournalEntry(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    spread_id: str
    question: Optional[str] = None
    cards: List[JournalCard]
    narrative: Optional[str] = None
    notes: Optional[str] = None
    is_favorite: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class Journal:
    """Journal service; every mutation is written straight back to the store."""

    def __init__(self, store: Optional[RecordStore] = None):
        self.store = store if store is not None else InMemoryRecordStore()

    @staticmethod
    def _key(entry_id: str) -> str:
        return f"{KEY_PREFIX}{entry_id}"

    def _write(self, entry: JournalEntry) -> JournalEntry:
        self.store.set(self._key(entry.id), entry.model_dump_json())
        return entry

    def _require(self, entry_id: str) -> JournalEntry:
        entry = self.get(entry_id)
        if entry is None:
            raise JournalEntryNotFoundError(f"Journal entry '{entry_id}' not found")
        return entry

    def save_draw(self, draw: Draw) -> JournalEntry:
        """Persist a completed draw as a new entry."""
        if not is_complete(draw):
            raise DrawNotCompleteError(
                f"Draw has {draw.revealed_count}/{len(draw.cards)} positions revealed"
            )
        record = draw.to_record()
        entry = JournalEntry(
            spread_id=record["spread_id"],
            question=record["question"],
            cards=[JournalCard(**c) for c in record["cards"]],
        )
        logger.info("Saved journal entry %s (spread=%s)", entry.id, entry.spread_id)
        return self._write(entry)

    def get(self, entry_id: str) -> Optional[JournalEntry]:
        raw = self.store.get(self._key(entry_id))
        if raw is None:
            return None
        return JournalEntry.model_validate_json(raw)

    def list_entries(self, favorites_only: bool = False) -> List[JournalEntry]:
        """All entries, newest first."""
        entries: List[JournalEntry] = []
        for key in self.store.keys():
            if not key.startswith(KEY_PREFIX):
                continue
            raw = self.store.get(key)
            if raw is None:
                continue
            try:
                entry = JournalEntry.model_validate_json(raw)
            except ValidationError as e:
                logger.warning("Skipping unreadable journal record %s: %d errors", key, e.error_count())
                continue
            if favorites_only and not entry.is_favorite:
                continue
            entries.append(entry)
        entries.sort(key=lambda e: e.created_at, reverse=True)
        return entries

    def attach_narrative(self, entry_id: str, narrative: str) -> JournalEntry:
        entry = self._require(entry_id)
        if entry.narrative is not None:
            raise NarrativeAlreadyAttachedError(f"Entry '{entry_id}' already has a narrative")
        entry.narrative = narrative
        entry.updated_at = _utcnow()
        return self._write(entry)

    def update_notes(self, entry_id: str, notes: Optional[str]) -> JournalEntry:
        entry = self._require(entry_id)
        entry.notes = notes or None
        entry.updated_at = _utcnow()
        return self._write(entry)

    def set_favorite(self, entry_id: str, is_favorite: bool) -> JournalEntry:
        entry = self._require(entry_id)
        entry.is_favorite = bool(is_favorite)
        entry.updated_at = _utcnow()
        return self._write(entry)

    def toggle_favorite(self, entry_id: str) -> JournalEntry:
        entry = self._require(entry_id)
        return self.set_favorite(entry_id, not entry.is_favorite)

    def delete(self, entry_id: str) -> bool:
        if self.store.get(self._key(entry_id)) is None:
            return False
        self.store.delete(self._key(entry_id))
        logger.info("Deleted journal entry %s", entry_id)
        return True
