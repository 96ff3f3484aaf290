"""Deterministic gradient assignment.

Every entry gets a gradient derived from its id, so the choice never has to
be stored. The id is hashed with the classic ``hash * 31 + code unit``
recurrence (written as ``c + (hash << 5) - hash``) over UTF-16 code units,
wrapped to a signed 32-bit integer after each step so the result matches
fixed-width implementations of the same recurrence bit for bit.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from moodmix.catalog import CatalogError
from moodmix.models.mood import Mood

_UINT32 = 0x1_0000_0000
_INT32_MAX = 0x7FFF_FFFF


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value > _INT32_MAX else value


def _utf16_units(text: str) -> Iterator[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def string_hash(text: str) -> int:
    """Signed 32-bit rolling hash of ``text``."""
    h = 0
    for unit in _utf16_units(text):
        h = _to_int32(unit + _to_int32(h << 5) - h)
    return h


# ---------------------------------------------------------------------------
# GradientPalette
# ---------------------------------------------------------------------------

class GradientPalette(Mapping):
    """Read-only mapping of Mood → tuple of gradient tokens.

    Every list must be non-empty (it is used as a modulus) and a Default
    list must exist. Lists may differ in length between moods.
    """

    def __init__(self, palettes: Mapping) -> None:
        normalized: dict[Mood, tuple[str, ...]] = {}
        for key, tokens in palettes.items():
            mood = Mood.parse(key)
            if mood is None:
                raise CatalogError(f"Unknown mood label in palette: {key!r}")
            items = tuple(tokens)
            if not items:
                raise CatalogError(f"Palette for {mood.value!r} is empty")
            normalized[mood] = items
        if Mood.DEFAULT not in normalized:
            raise CatalogError("Palette has no Default entry")
        self._palettes = MappingProxyType(normalized)

    def __getitem__(self, mood) -> tuple[str, ...]:
        key = Mood.parse(mood)
        if key is None:
            raise KeyError(mood)
        return self._palettes[key]

    def __iter__(self) -> Iterator[Mood]:
        return iter(self._palettes)

    def __len__(self) -> int:
        return len(self._palettes)

    def tokens_for(self, mood) -> tuple[str, ...]:
        key = Mood.parse(mood)
        tokens = self._palettes.get(key) if key is not None else None
        return tokens if tokens is not None else self._palettes[Mood.DEFAULT]


def gradient_for(
    mood: Mood | str,
    entity_id: str | None,
    palette: GradientPalette | None = None,
) -> str:
    """Stable gradient token for ``entity_id`` within ``mood``'s palette.

    An empty or missing id maps to the first token of the palette. Without
    an explicit ``palette`` the built-in one is used.
    """
    if palette is None:
        palette = _DEFAULT_PALETTE
    tokens = palette.tokens_for(mood)
    if not entity_id:
        return tokens[0]
    return tokens[abs(string_hash(entity_id)) % len(tokens)]


# ---------------------------------------------------------------------------
# Built-in palette (full Tailwind class strings so the CSS build keeps them)
# ---------------------------------------------------------------------------

PALETTE_DATA: dict[str, list[str]] = {
    "Sad": [
        "bg-gradient-to-br from-slate-500 to-slate-800",
        "bg-gradient-to-br from-sky-700 to-slate-900",
        "bg-gradient-to-br from-blue-800 to-black",
        "bg-gradient-to-br from-indigo-800 to-slate-900",
        "bg-gradient-to-br from-zinc-600 to-blue-900",
        "bg-gradient-to-br from-cyan-900 to-zinc-900",
    ],
    "Dreamy": [
        "bg-gradient-to-br from-indigo-500 to-purple-500",
        "bg-gradient-to-br from-purple-500 to-fuchsia-500",
        "bg-gradient-to-br from-fuchsia-500 to-pink-500",
        "bg-gradient-to-br from-pink-500 to-rose-500",
        "bg-gradient-to-br from-violet-400 to-indigo-700",
        "bg-gradient-to-br from-purple-900 to-black",
        "bg-gradient-to-br from-rose-300 to-purple-600",
    ],
    "Energetic": [
        "bg-gradient-to-br from-red-500 to-orange-500",
        "bg-gradient-to-br from-orange-500 to-amber-500",
        "bg-gradient-to-br from-amber-500 to-yellow-500",
        "bg-gradient-to-br from-lime-500 to-green-500",
        "bg-gradient-to-br from-rose-500 to-red-600",
        "bg-gradient-to-br from-yellow-400 to-pink-500",
        "bg-gradient-to-br from-fuchsia-500 to-orange-400",
        "bg-gradient-to-br from-green-400 to-cyan-500",
    ],
    "Floating": [
        "bg-gradient-to-br from-emerald-500 to-teal-500",
        "bg-gradient-to-br from-teal-500 to-cyan-500",
        "bg-gradient-to-br from-sky-500 to-blue-500",
        "bg-gradient-to-br from-blue-600 to-indigo-600",
        "bg-gradient-to-br from-cyan-400 to-indigo-900",
    ],
    "Default": [
        "bg-gradient-to-br from-red-500 to-orange-500",
        "bg-gradient-to-br from-orange-500 to-amber-500",
        "bg-gradient-to-br from-amber-500 to-yellow-500",
        "bg-gradient-to-br from-lime-500 to-green-500",
        "bg-gradient-to-br from-emerald-500 to-teal-500",
        "bg-gradient-to-br from-teal-500 to-cyan-500",
        "bg-gradient-to-br from-sky-500 to-blue-500",
        "bg-gradient-to-br from-blue-600 to-indigo-600",
        "bg-gradient-to-br from-indigo-500 to-purple-500",
        "bg-gradient-to-br from-purple-500 to-fuchsia-500",
        "bg-gradient-to-br from-fuchsia-500 to-pink-500",
        "bg-gradient-to-br from-pink-500 to-rose-500",
        "bg-gradient-to-br from-rose-500 to-red-600",
        "bg-gradient-to-br from-slate-500 to-slate-800",
        "bg-gradient-to-br from-blue-800 to-black",
        "bg-gradient-to-br from-purple-900 to-black",
    ],
}


def default_palette() -> GradientPalette:
    return GradientPalette(PALETTE_DATA)


_DEFAULT_PALETTE = default_palette()
