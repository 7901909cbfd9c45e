from fastapi import APIRouter, Depends, HTTPException, Query

from manasooth.schemas.mood import MoodCreate, MoodResponse, MoodListResponse, MoodSummaryResponse
from manasooth.services.mood import (
    MoodEntryNotFoundError, add_entry, list_entries, delete_entry, summarize, to_response
)
from manasooth.services.storage import LocalStore, get_store

router = APIRouter(prefix="/mood", tags=["mood"])


@router.post("", response_model=MoodResponse)
async def log_mood(mood_in: MoodCreate, store: LocalStore = Depends(get_store)):
    entry = await add_entry(store, mood_in)
    return to_response(entry)


@router.get("", response_model=MoodListResponse)
async def get_mood_entries(store: LocalStore = Depends(get_store)):
    entries = await list_entries(store)
    return MoodListResponse(entries=[to_response(e) for e in entries], notices=store.notices)


@router.get("/summary", response_model=MoodSummaryResponse)
async def get_mood_summary(days: int = Query(7, ge=1, le=365), store: LocalStore = Depends(get_store)):
    entries = await list_entries(store)
    return summarize(entries, days)


@router.delete("/{entry_id}")
async def remove_mood_entry(entry_id: str, store: LocalStore = Depends(get_store)):
    try:
        await delete_entry(store, entry_id)
    except MoodEntryNotFoundError:
        raise HTTPException(404, "Mood entry not found")
    return {"message": "The selected mood entry has been removed."}
