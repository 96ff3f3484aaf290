"""Playlist selection from the mood catalog."""

from __future__ import annotations

import random

from moodmix.catalog import MoodCatalog
from moodmix.models.mood import Mood
from moodmix.models.track import Track

DEFAULT_PLAYLIST_SIZE = 5


def select_playlist(
    mood: Mood | str,
    catalog: MoodCatalog,
    n: int = DEFAULT_PLAYLIST_SIZE,
    rng: random.Random | None = None,
) -> list[Track]:
    """Up to ``n`` tracks from ``mood``'s bucket, in random order.

    Unknown moods use the Default bucket. The catalog's own ordering is
    never touched; the shuffle runs on a copy.
    """
    if n <= 0:
        return []
    tracks = list(catalog.tracks_for(mood))
    (rng or random).shuffle(tracks)
    return tracks[:n]
