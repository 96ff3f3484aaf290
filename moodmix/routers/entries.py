"""Journal entry routes. Creating an entry runs the mood pipeline."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from moodmix.journal import EmptyEntryError, EntryNotFoundError, JournalService
from moodmix.models.common import BAD_REQUEST, NOT_FOUND, SuccessResponse
from moodmix.models.entry import (
    EntryCreate,
    EntryListResponse,
    EntryView,
    MoodChartResponse,
)
from moodmix.routers._helpers import get_owner, get_service
from moodmix.timeline import mood_chart

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.post("", response_model=EntryView, status_code=201, responses=BAD_REQUEST)
async def create_entry(
    body: EntryCreate,
    owner: str = Depends(get_owner),
    service: JournalService = Depends(get_service),
):
    try:
        entry = await service.create_entry(owner, body.title, body.content)
    except EmptyEntryError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return service.view(entry)


@router.get("", response_model=EntryListResponse)
async def list_entries(
    owner: str = Depends(get_owner),
    service: JournalService = Depends(get_service),
):
    entries = await service.list_entries(owner)
    return {"entries": [service.view(e) for e in entries]}


@router.delete("", response_model=SuccessResponse)
async def clear_entries(
    owner: str = Depends(get_owner),
    service: JournalService = Depends(get_service),
):
    removed = await service.clear_entries(owner)
    return {"ok": True, "deleted": removed}


# Must be registered before /{entry_id}
@router.get("/chart", response_model=MoodChartResponse)
async def entries_chart(
    owner: str = Depends(get_owner),
    service: JournalService = Depends(get_service),
):
    return mood_chart(await service.list_entries(owner))


@router.get("/{entry_id}", response_model=EntryView, responses=NOT_FOUND)
async def get_entry(
    entry_id: str,
    owner: str = Depends(get_owner),
    service: JournalService = Depends(get_service),
):
    try:
        entry = await service.get_entry(owner, entry_id)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Entry not found")
    return service.view(entry)


@router.delete("/{entry_id}", response_model=SuccessResponse, responses=NOT_FOUND)
async def delete_entry(
    entry_id: str,
    owner: str = Depends(get_owner),
    service: JournalService = Depends(get_service),
):
    try:
        await service.delete_entry(owner, entry_id)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Entry not found")
    return {"ok": True, "deleted": 1}
