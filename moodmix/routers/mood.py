"""Mood routes: classification, per-mood playlists, catalog overview, gradients."""

from fastapi import APIRouter, Depends, Query

from moodmix.gradients import gradient_for
from moodmix.models.common import NOT_FOUND
from moodmix.models.mood import (
    ClassifyRequest,
    ClassifyResponse,
    GradientResponse,
    Mood,
    MoodListResponse,
    PlaylistResponse,
)
from moodmix.routers._helpers import parse_mood
from moodmix.selector import select_playlist
from moodmix.state import AppState, get_state

router = APIRouter(prefix="/api", tags=["mood"])


@router.post("/mood/classify", response_model=ClassifyResponse)
async def classify_text(body: ClassifyRequest, state: AppState = Depends(get_state)):
    classifier = state.service.classifier
    hit = classifier.matched_keyword(body.text)
    if hit is not None:
        return {"mood": hit[0], "keyword": hit[1]}
    return {"mood": classifier.classify(body.text), "keyword": None}


@router.get("/moods", response_model=MoodListResponse)
async def list_moods(state: AppState = Depends(get_state)):
    moods = []
    for mood in Mood:
        moods.append({
            "mood": mood,
            "track_count": len(state.catalog.tracks_for(mood)),
            "gradient_count": len(state.palette.tokens_for(mood)),
        })
    return {"moods": moods}


@router.get("/moods/{mood}/playlist", response_model=PlaylistResponse, responses=NOT_FOUND)
async def mood_playlist(
    mood: str,
    n: int | None = Query(default=None, ge=1, le=50),
    state: AppState = Depends(get_state),
):
    label = parse_mood(mood)
    size = n if n is not None else int(state.config["playlist_size"])
    tracks = select_playlist(label, state.catalog, size, rng=state.rng)
    return {"mood": label, "tracks": tracks}


@router.get("/gradient", response_model=GradientResponse)
async def gradient(
    id: str = "",
    mood: str = "Default",
    state: AppState = Depends(get_state),
):
    # Unknown moods fall back to the Default palette rather than failing
    label = Mood.parse(mood) or Mood.DEFAULT
    return {"mood": label, "id": id, "gradient": gradient_for(label, id, state.palette)}
