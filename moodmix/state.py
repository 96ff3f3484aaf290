"""Typed application state.

Holds the process-wide constants (catalog, palette) and the journal service
built from them. FastAPI routes receive this via `Depends(get_state)`.
"""

from __future__ import annotations

import os
import random
from dataclasses import dataclass, field

from moodmix.catalog import MoodCatalog, default_catalog
from moodmix.config import entries_path, load_config
from moodmix.entries import EntryStore
from moodmix.gradients import GradientPalette, default_palette
from moodmix.journal import JournalService


@dataclass
class AppState:
    """Everything the routers need.

    ``catalog`` and ``palette`` are read-only; ``service`` is rebuilt by
    `apply_config` when the config changes.
    """

    config: dict = field(default_factory=load_config)
    catalog: MoodCatalog = field(default_factory=default_catalog)
    palette: GradientPalette = field(default_factory=default_palette)
    rng: random.Random = field(default_factory=random.Random)
    service: JournalService | None = None

    def __post_init__(self) -> None:
        if self.service is None:
            self.apply_config(self.config)

    def apply_config(self, config: dict) -> None:
        self.config = dict(config)
        path = entries_path(self.config)
        store = self.service.store if self.service is not None else None
        # Reuse the store and its write lock while the file is unchanged
        if store is None or store.path != os.path.abspath(path):
            store = EntryStore(path)
        self.service = JournalService(
            store=store,
            catalog=self.catalog,
            palette=self.palette,
            playlist_size=int(self.config["playlist_size"]),
            rng=self.rng,
        )


# ---------------------------------------------------------------------------
# Singleton + FastAPI dependency
# ---------------------------------------------------------------------------

_app_state: AppState | None = None


def get_state() -> AppState:
    """FastAPI dependency — returns the singleton AppState.

    Usage in routers::

        @router.get("/api/entries")
        async def entries(state: AppState = Depends(get_state)):
            ...
    """
    global _app_state
    if _app_state is None:
        _app_state = AppState()
    return _app_state


def reset_state(**overrides) -> AppState:
    """Create a fresh AppState (for testing or app restart)."""
    global _app_state
    _app_state = AppState(**overrides)
    return _app_state
