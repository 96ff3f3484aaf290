"""Journal service: runs the mood → playlist pipeline when an entry is created.

This is the only place the classifier and selector run. Viewing an entry
just recomputes its gradient from the id.
"""

from __future__ import annotations

import logging
import random

from moodmix.catalog import MoodCatalog
from moodmix.classifier import MoodClassifier
from moodmix.entries import EntryStore
from moodmix.gradients import GradientPalette, gradient_for
from moodmix.models.entry import EntryView, JournalEntry, Mix
from moodmix.models.mood import CLASSIFIABLE_MOODS
from moodmix.selector import DEFAULT_PLAYLIST_SIZE, select_playlist

logger = logging.getLogger(__name__)


class JournalError(Exception):
    """Base class for journal service errors."""


class EmptyEntryError(JournalError):
    pass


class EntryNotFoundError(JournalError):
    pass


class JournalService:
    """Creates, reads and deletes entries for an owner.

    The catalog, palette, classifier and random source are all injected so
    tests can pin every one of them.
    """

    def __init__(
        self,
        store: EntryStore,
        catalog: MoodCatalog,
        palette: GradientPalette,
        classifier: MoodClassifier | None = None,
        playlist_size: int = DEFAULT_PLAYLIST_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.palette = palette
        self.rng = rng or random.Random()
        self.classifier = classifier or MoodClassifier(
            fallback_moods=catalog.moods() or CLASSIFIABLE_MOODS, rng=self.rng
        )
        self.playlist_size = playlist_size

    def compose_mix(self, title: str, content: str) -> Mix:
        text = f"{title} {content}"
        mood = self.classifier.classify(text)
        playlist = select_playlist(mood, self.catalog, self.playlist_size, rng=self.rng)
        return Mix(mood=mood, playlist=tuple(playlist))

    async def create_entry(self, owner: str, title: str, content: str) -> JournalEntry:
        if not (title or "").strip() and not (content or "").strip():
            raise EmptyEntryError("Entry is empty")
        mix = self.compose_mix(title, content)
        entry = await self.store.create(
            owner, title, content, mood=mix.mood, playlist=mix.playlist
        )
        logger.info("Created entry %s (%s, %d tracks)", entry.id, entry.mood.value,
                    len(entry.playlist))
        return entry

    async def list_entries(self, owner: str) -> list[JournalEntry]:
        return await self.store.list(owner)

    async def get_entry(self, owner: str, entry_id: str) -> JournalEntry:
        entry = await self.store.get(entry_id)
        if entry is None or entry.owner != owner:
            raise EntryNotFoundError(f"Entry {entry_id} not found")
        return entry

    async def delete_entry(self, owner: str, entry_id: str) -> None:
        await self.get_entry(owner, entry_id)
        await self.store.delete(entry_id)
        logger.info("Deleted entry %s", entry_id)

    async def clear_entries(self, owner: str) -> int:
        removed = await self.store.delete_by_owner(owner)
        logger.info("Cleared %d entries for owner %s", removed, owner)
        return removed

    def gradient(self, entry: JournalEntry) -> str:
        return gradient_for(entry.mood, entry.id, self.palette)

    def view(self, entry: JournalEntry) -> EntryView:
        return EntryView(**entry.model_dump(), gradient=self.gradient(entry))
