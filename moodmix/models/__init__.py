"""Pydantic v2 models for MoodMix API types."""

from moodmix.models.common import ErrorResponse, SuccessResponse
from moodmix.models.config import AppConfig, ConfigUpdate
from moodmix.models.entry import (
    EntryCreate,
    EntryListResponse,
    EntryView,
    JournalEntry,
    Mix,
    MoodChartResponse,
    MoodPoint,
    MoodSummaryRow,
)
from moodmix.models.mood import (
    CLASSIFIABLE_MOODS,
    ClassifyRequest,
    ClassifyResponse,
    GradientResponse,
    Mood,
    MoodInfo,
    MoodListResponse,
    PlaylistResponse,
)
from moodmix.models.track import Track, youtube_video_id

__all__ = [
    # common
    "ErrorResponse",
    "SuccessResponse",
    # config
    "AppConfig",
    "ConfigUpdate",
    # entry
    "EntryCreate",
    "EntryListResponse",
    "EntryView",
    "JournalEntry",
    "Mix",
    "MoodChartResponse",
    "MoodPoint",
    "MoodSummaryRow",
    # mood
    "CLASSIFIABLE_MOODS",
    "ClassifyRequest",
    "ClassifyResponse",
    "GradientResponse",
    "Mood",
    "MoodInfo",
    "MoodListResponse",
    "PlaylistResponse",
    # track
    "Track",
    "youtube_video_id",
]
