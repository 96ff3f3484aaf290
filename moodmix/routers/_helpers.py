"""Shared dependencies used across multiple routers."""

import logging
import uuid

from fastapi import Depends, HTTPException, Request, Response

from moodmix.journal import JournalService
from moodmix.models.mood import Mood
from moodmix.state import AppState, get_state

logger = logging.getLogger(__name__)

GUEST_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def get_owner(
    request: Request,
    response: Response,
    state: AppState = Depends(get_state),
) -> str:
    """Owner key from the header, else the guest cookie, else a new guest id.

    A freshly minted guest id is set as a cookie on the response so the
    browser keeps it for later requests.
    """
    header = state.config["owner_header"]
    cookie = state.config["guest_cookie_name"]
    owner = (request.headers.get(header) or request.cookies.get(cookie) or "").strip()
    if owner:
        return owner
    owner = str(uuid.uuid4())
    response.set_cookie(cookie, owner, max_age=GUEST_COOKIE_MAX_AGE, samesite="lax")
    logger.info("Issued guest owner key %s", owner)
    return owner


def get_service(state: AppState = Depends(get_state)) -> JournalService:
    return state.service


def parse_mood(value: str) -> Mood:
    mood = Mood.parse(value)
    if mood is None:
        raise HTTPException(status_code=404, detail=f"Unknown mood: {value}")
    return mood
