"""Owner-scoped journal entry storage on top of JsonStore.

Entries are kept in one JSON object keyed by entry id. There is no update
operation: once written, an entry's mood and playlist stay as they were.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone

from pydantic import ValidationError

from moodmix.models.entry import JournalEntry
from moodmix.models.mood import Mood
from moodmix.models.track import Track
from moodmix.persistence import JsonStore

logger = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc).isoformat()


class EntryStore:
    """Create / query / delete journal entries in a JSON file."""

    def __init__(self, path: str) -> None:
        self._store = JsonStore(path)

    @property
    def path(self) -> str:
        return self._store.path

    async def _records(self) -> list[JournalEntry]:
        data = await self._store.load(default={})
        entries = []
        for entry_id, raw in data.items():
            try:
                entries.append(JournalEntry.model_validate(raw))
            except ValidationError:
                logger.warning("Skipping malformed entry %s in %s", entry_id, self.path)
        return entries

    async def create(
        self,
        owner: str,
        title: str,
        content: str,
        mood: Mood,
        playlist: Iterable[Track],
    ) -> JournalEntry:
        entry = JournalEntry(
            id=uuid.uuid4().hex,
            owner=owner,
            title=title,
            content=content,
            mood=mood,
            playlist=tuple(playlist),
            created_at=_now(),
        )
        record = entry.model_dump(mode="json")
        await self._store.update(lambda d: {**d, entry.id: record}, default={})
        return entry

    async def get(self, entry_id: str) -> JournalEntry | None:
        data = await self._store.load(default={})
        raw = data.get(entry_id)
        if raw is None:
            return None
        try:
            return JournalEntry.model_validate(raw)
        except ValidationError:
            logger.warning("Malformed entry %s in %s", entry_id, self.path)
            return None

    async def list(self, owner: str) -> list[JournalEntry]:
        """Entries belonging to ``owner``, newest first."""
        owned = [e for e in await self._records() if e.owner == owner]
        # Insertion order breaks ties between identical timestamps
        ranked = sorted(
            enumerate(owned), key=lambda p: (p[1].created_at, p[0]), reverse=True
        )
        return [e for _, e in ranked]

    async def delete(self, entry_id: str) -> bool:
        removed = False

        def _drop(data: dict) -> dict:
            nonlocal removed
            removed = data.pop(entry_id, None) is not None
            return data

        await self._store.update(_drop, default={})
        return removed

    async def delete_by_owner(self, owner: str) -> int:
        """Delete every entry of ``owner``. Returns the number removed.

        The file itself is removed once no owner has entries left.
        """
        removed = 0

        def _drop(data: dict) -> dict:
            nonlocal removed
            kept = {k: v for k, v in data.items() if v.get("owner") != owner}
            removed = len(data) - len(kept)
            return kept

        await self._store.update(_drop, default={}, remove_empty=True)
        return removed
