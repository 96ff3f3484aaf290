"""Mood-indexed track catalog: schema, invariants and the built-in dataset."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from moodmix.models.mood import Mood
from moodmix.models.track import Track

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog or palette violates its structural invariants."""


# ---------------------------------------------------------------------------
# MoodCatalog
# ---------------------------------------------------------------------------

class MoodCatalog(Mapping):
    """Read-only mapping of Mood → tuple of Tracks.

    Invariants checked at construction:
    - every key is a known mood label
    - every non-default bucket is non-empty
    - the Default bucket exists (it may be empty)

    Lookups for a mood that has no bucket fall back to Default.
    """

    def __init__(self, buckets: Mapping) -> None:
        normalized: dict[Mood, tuple[Track, ...]] = {}
        for key, tracks in buckets.items():
            mood = Mood.parse(key)
            if mood is None:
                raise CatalogError(f"Unknown mood label in catalog: {key!r}")
            items = tuple(
                t if isinstance(t, Track) else Track.model_validate(t)
                for t in tracks
            )
            if not items and mood is not Mood.DEFAULT:
                raise CatalogError(f"Catalog bucket {mood.value!r} is empty")
            normalized[mood] = items
        if Mood.DEFAULT not in normalized:
            raise CatalogError("Catalog has no Default bucket")
        self._buckets = MappingProxyType(normalized)

    def __getitem__(self, mood) -> tuple[Track, ...]:
        key = Mood.parse(mood)
        if key is None:
            raise KeyError(mood)
        return self._buckets[key]

    def __iter__(self) -> Iterator[Mood]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def tracks_for(self, mood) -> tuple[Track, ...]:
        """Bucket for ``mood``, or the Default bucket when it has none."""
        key = Mood.parse(mood)
        bucket = self._buckets.get(key) if key is not None else None
        if bucket is None:
            logger.debug("No catalog bucket for %r, using Default", mood)
            return self._buckets[Mood.DEFAULT]
        return bucket

    def moods(self) -> list[Mood]:
        """Non-default moods present in the catalog, in catalog order."""
        return [m for m in self._buckets if m is not Mood.DEFAULT]


# ---------------------------------------------------------------------------
# Built-in dataset
# ---------------------------------------------------------------------------

def _yt(title: str, artist: str, video_id: str) -> dict:
    return {
        "title": title,
        "artist": artist,
        "url": f"https://www.youtube.com/watch?v={video_id}",
    }


CATALOG_DATA: dict[str, list[dict]] = {
    "Dreamy": [
        _yt("Weightless", "Marconi Union", "qYnA9wWFHLI"),
        _yt("Daydreaming", "Radiohead", "TTAU7lLDZYU"),
        _yt("Space Song", "Beach House", "RBtlPT23PTM"),
        _yt("Cherry", "Chromatics", "CjQMZEJbXno"),
        _yt("Mystery of Love", "Sufjan Stevens", "4WJ30C66rKs"),
        _yt("Apocalypse", "Cigarettes After Sex", "sElE_BfQ67s"),
        _yt("Fade Into You", "Mazzy Star", "ImKY6TZEyrI"),
        _yt("Silver Springs", "Fleetwood Mac", "eDmwFhDxh-Q"),
        _yt("Dreams", "Fleetwood Mac", "GwZlpPr751A"),
        _yt("Heroes", "David Bowie", "lXgkuM2NhYI"),
    ],
    "Sad": [
        _yt("Gymnopédie No.1", "Erik Satie", "S-Xm7s9eGxU"),
        _yt("Holocene", "Bon Iver", "TWcyIpul8OE"),
        _yt("Liability", "Lorde", "BtvJaNeELic"),
        _yt("Skinny Love", "Bon Iver", "ssdgFoHLwnk"),
        _yt("Fourth of July", "Sufjan Stevens", "JTeKpWp8Psw"),
        _yt("Fix You", "Coldplay", "k4V3Mo61fJM"),
        _yt("I Will Follow You Into The Dark", "Death Cab for Cutie", "NDHY1D0tKRA"),
        _yt("Between The Bars", "Elliott Smith", "hPD-a1FjUtU"),
        _yt("Exile", "Taylor Swift ft. Bon Iver", "osdoLjUNFnA"),
        _yt("Slow Dancing in a Burning Room", "John Mayer", "32GZ3suxRn4"),
    ],
    "Energetic": [
        _yt("Midnight City", "M83", "dX3k_QDnzHE"),
        _yt("Can't Stop", "Red Hot Chili Peppers", "BfOdWSiyWQA"),
        _yt("D.A.N.C.E", "Justice", "sy1dYFGkPUE"),
        _yt("Lisztomania", "Phoenix", "4BJDNw7o6so"),
        _yt("Electric Feel", "MGMT", "MmZexg8sxyk"),
        _yt("Tongue Tied", "Grouplove", "1x1wjGKHjBI"),
        _yt("Walking On A Dream", "Empire of the Sun", "eimgRedLkkU"),
        _yt("Mr. Brightside", "The Killers", "gGdGFtwCNBE"),
        _yt("Dog Days Are Over", "Florence + The Machine", "iWOyfLBYtuU"),
        _yt("Kids", "MGMT", "fe4EK4HSPkI"),
    ],
    "Floating": [
        _yt("Cornfield Chase", "Hans Zimmer", "1V_xRb0x9aw"),
        _yt("Intro", "The xx", "hhnZkNj7kAo"),
        _yt("An Ending (Ascent)", "Brian Eno", "aKw5mbcE7EY"),
        _yt("Xtal", "Aphex Twin", "Nevnq7MvVTI"),
        _yt("Time", "Hans Zimmer", "RxabLA7UQ9k"),
        _yt("On The Nature of Daylight", "Max Richter", "rVN1B-tUpgs"),
        _yt("Avril 14th", "Aphex Twin", "PeLuQ6X2ixI"),
        _yt("Clair de Lune", "Debussy", "CvFH_6DNRCY"),
        _yt("Experience", "Ludovico Einaudi", "_VONMkKkdf4"),
        _yt("Opus", "Eric Prydz", "iRA82xLsb_w"),
    ],
    "Default": [
        _yt("Resonance", "Home", "8GW6sLrK40k"),
        _yt("After Dark", "Mr. Kitty", "s51VEr2Nhss"),
        _yt("SimpsonWave", "Lofi", "aWIE0PX1uXk"),
        _yt("Sunset Lover", "Petit Biscuit", "wuCK-7RQMZ0"),
    ],
}


def default_catalog() -> MoodCatalog:
    """Build the built-in catalog."""
    return MoodCatalog(CATALOG_DATA)
