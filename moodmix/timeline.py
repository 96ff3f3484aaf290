"""Mood-over-time series for the stats chart."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from moodmix.models.entry import JournalEntry, MoodChartResponse, MoodPoint, MoodSummaryRow

# Chart height per mood (0–100 energy scale)
MOOD_VALUES = {
    "Sad": 20,
    "Dreamy": 50,
    "Floating": 75,
    "Energetic": 100,
}

MOOD_LABELS = {
    "Sad": "Low Energy",
    "Dreamy": "Mellow",
    "Floating": "Flow State",
    "Energetic": "High Energy",
}

NEUTRAL_VALUE = 50


def energy_band(value: float) -> str:
    """Axis band for a chart value."""
    if value <= 25:
        return "Low"
    if value <= 50:
        return "Mellow"
    if value <= 75:
        return "Flow"
    return "High"


def _mood_name(mood) -> str:
    return getattr(mood, "value", None) or str(mood)


def _entries_frame(entries: Sequence[JournalEntry]) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"created_at": e.created_at, "mood": _mood_name(e.mood)} for e in entries],
        columns=["created_at", "mood"],
    )
    if df.empty:
        return df
    df["ts"] = pd.to_datetime(df["created_at"], utc=True, format="ISO8601")
    df["value"] = df["mood"].map(MOOD_VALUES).fillna(NEUTRAL_VALUE).astype(int)
    return df.sort_values("ts", kind="mergesort").reset_index(drop=True)


def mood_series(entries: Sequence[JournalEntry]) -> list[MoodPoint]:
    """Chart points, oldest first."""
    df = _entries_frame(entries)
    points = []
    for _, row in df.iterrows():
        ts = row["ts"]
        mood = row["mood"]
        points.append(MoodPoint(
            date=f"{ts:%b} {ts.day}",
            full_date=ts.date().isoformat(),
            mood=mood,
            value=int(row["value"]),
            label=MOOD_LABELS.get(mood, mood),
        ))
    return points


def mood_summary(entries: Sequence[JournalEntry]) -> tuple[list[MoodSummaryRow], float | None]:
    """Per-mood counts (most frequent first) and the mean chart value."""
    df = _entries_frame(entries)
    if df.empty:
        return [], None
    counts = df["mood"].value_counts()
    total = int(counts.sum())
    rows = [
        MoodSummaryRow(mood=str(mood), count=int(n), share=round(int(n) / total, 3))
        for mood, n in counts.items()
    ]
    return rows, round(float(df["value"].mean()), 1)


def mood_chart(entries: Sequence[JournalEntry]) -> MoodChartResponse:
    summary, average = mood_summary(entries)
    return MoodChartResponse(
        points=mood_series(entries),
        summary=summary,
        average=average,
        band=energy_band(average) if average is not None else None,
    )
