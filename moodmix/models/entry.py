"""Journal entry models: stored entries, API views and chart data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from moodmix.models.mood import Mood
from moodmix.models.track import Track


# ---------------------------------------------------------------------------
# Stored entry
# ---------------------------------------------------------------------------

class JournalEntry(BaseModel):
    """A saved journal entry as persisted in entries.json.

    ``mood`` and ``playlist`` are computed once at creation and the model is
    frozen: an entry's mix never changes afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    owner: str
    title: str = ""
    content: str = ""
    mood: Mood
    playlist: tuple[Track, ...] = ()
    created_at: str  # ISO-8601, UTC


class Mix(BaseModel):
    """Output of the classify → select pipeline for one submission."""

    model_config = ConfigDict(frozen=True)

    mood: Mood
    playlist: tuple[Track, ...] = ()


# ---------------------------------------------------------------------------
# Request / response models for entry routes
# ---------------------------------------------------------------------------

class EntryCreate(BaseModel):
    """Create a new entry (POST /api/entries)."""

    title: str = ""
    content: str = ""


class EntryView(JournalEntry):
    """Entry as shown in the timeline / now-playing panel."""

    gradient: str


class EntryListResponse(BaseModel):
    entries: list[EntryView]


# ---------------------------------------------------------------------------
# Mood chart
# ---------------------------------------------------------------------------

class MoodPoint(BaseModel):
    """One point of the mood-over-time series."""

    date: str       # short label, e.g. "Oct 25"
    full_date: str  # ISO date
    mood: str
    value: int
    label: str


class MoodSummaryRow(BaseModel):
    mood: str
    count: int
    share: float


class MoodChartResponse(BaseModel):
    points: list[MoodPoint] = []
    summary: list[MoodSummaryRow] = []
    average: float | None = None
    band: str | None = None  # "Low" | "Mellow" | "Flow" | "High"
