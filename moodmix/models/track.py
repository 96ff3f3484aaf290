"""Track model for one playable catalog item."""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, ConfigDict, computed_field

_YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com", "music.youtube.com"}


def youtube_video_id(url: str) -> str | None:
    """Extract the YouTube video id from a watch URL or a youtu.be short link."""
    if not url:
        return None
    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    if host == "youtu.be":
        vid = parsed.path.lstrip("/").split("/", 1)[0]
        return vid or None
    if host in _YOUTUBE_HOSTS:
        if parsed.path == "/watch":
            ids = parse_qs(parsed.query).get("v")
            return ids[0] if ids else None
        # /embed/<id>, /shorts/<id>
        parts = [p for p in parsed.path.split("/") if p]
        if len(parts) == 2 and parts[0] in ("embed", "shorts"):
            return parts[1]
    return None


class Track(BaseModel):
    """A single catalog track.

    Frozen so catalog buckets can be shared across requests without copies
    of the tracks themselves, and so tracks are hashable.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    artist: str
    url: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def video_id(self) -> str | None:
        """Video id used by the embedded player (None for non-YouTube urls)."""
        return youtube_video_id(self.url)
