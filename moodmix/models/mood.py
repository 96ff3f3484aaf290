"""Mood labels and the request/response models of the mood endpoints."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from moodmix.models.track import Track


class Mood(str, Enum):
    """Emotional-tone categories that index the catalog and the palette."""

    SAD = "Sad"
    DREAMY = "Dreamy"
    ENERGETIC = "Energetic"
    FLOATING = "Floating"
    DEFAULT = "Default"

    @classmethod
    def parse(cls, value: str | Mood | None) -> Mood | None:
        """Case-insensitive lookup by label; None for anything unknown."""
        if isinstance(value, Mood):
            return value
        if not value:
            return None
        key = str(value).strip().lower()
        for mood in cls:
            if mood.value.lower() == key:
                return mood
        return None


# Labels the classifier may emit (everything but the fallback bucket).
CLASSIFIABLE_MOODS: tuple[Mood, ...] = (
    Mood.DREAMY,
    Mood.SAD,
    Mood.ENERGETIC,
    Mood.FLOATING,
)


class ClassifyRequest(BaseModel):
    """Body for POST /api/mood/classify."""

    text: str = ""


class ClassifyResponse(BaseModel):
    mood: Mood
    keyword: str | None = None  # None when the random fallback picked the mood


class MoodInfo(BaseModel):
    """One row of GET /api/moods."""

    mood: Mood
    track_count: int
    gradient_count: int


class MoodListResponse(BaseModel):
    moods: list[MoodInfo]


class PlaylistResponse(BaseModel):
    mood: Mood
    tracks: list[Track]


class GradientResponse(BaseModel):
    mood: Mood
    id: str
    gradient: str
