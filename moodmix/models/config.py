"""Application config models — maps to config.json."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AppConfig(BaseModel):
    """Full application config as persisted in config.json."""

    playlist_size: int = 5
    entries_file: str = "output/entries.json"
    guest_cookie_name: str = "sonic_guest_id"
    owner_header: str = "X-Owner-Key"


class ConfigUpdate(BaseModel):
    """Partial config update (PUT /api/config).

    ``entries_file`` is only settable in config.json itself. Unknown keys,
    that one included, are rejected with a 422.
    """

    model_config = ConfigDict(extra="forbid")

    playlist_size: int | None = Field(default=None, ge=1, le=50)
    guest_cookie_name: str | None = None
    owner_header: str | None = None
