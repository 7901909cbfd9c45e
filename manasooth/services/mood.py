import uuid
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from manasooth.schemas.mood import MOOD_LABELS, MoodCreate, MoodEntry, MoodResponse
from manasooth.services.storage import LocalStore, StorageKeys


class MoodEntryNotFoundError(LookupError):
    pass


def to_response(entry: MoodEntry) -> MoodResponse:
    return MoodResponse(**entry.model_dump(), label=MOOD_LABELS[entry.mood_level])


async def list_entries(store: LocalStore) -> List[MoodEntry]:
    """Most recent first."""
    entries = await store.load_records(StorageKeys.MOOD_ENTRIES, MoodEntry)
    return sorted(entries, key=lambda e: e.date, reverse=True)


async def add_entry(store: LocalStore, mood_in: MoodCreate) -> MoodEntry:
    logged_at = mood_in.date or datetime.now(timezone.utc)
    if logged_at.tzinfo is None:
        logged_at = logged_at.replace(tzinfo=timezone.utc)
    logged_at = logged_at.astimezone(timezone.utc)
    entry = MoodEntry(
        id=str(uuid.uuid4()),
        date=logged_at,
        mood_level=mood_in.mood_level,
        notes=mood_in.notes or None,
        activities=mood_in.activities,
    )
    entries = await list_entries(store)
    entries.insert(0, entry)
    await store.save_records(StorageKeys.MOOD_ENTRIES, entries)
    return entry


async def delete_entry(store: LocalStore, entry_id: str) -> None:
    entries = await list_entries(store)
    remaining = [e for e in entries if e.id != entry_id]
    if len(remaining) == len(entries):
        raise MoodEntryNotFoundError(entry_id)
    await store.save_records(StorageKeys.MOOD_ENTRIES, remaining)


def _utc_day(entry: MoodEntry) -> date:
    logged_at = entry.date
    if logged_at.tzinfo is None:
        return logged_at.date()
    return logged_at.astimezone(timezone.utc).date()


def summarize(entries: List[MoodEntry], days: int = 7, today: Optional[date] = None) -> dict:
    today = today or datetime.now(timezone.utc).date()
    since = today - timedelta(days=days - 1)
    recent = [e for e in entries if _utc_day(e) >= since]
    if not recent:
        return {"entries": 0, "avg_mood": None, "streak": 0, "by_day": []}

    avg = round(sum(e.mood_level for e in recent) / len(recent), 2)

    # Streak: consecutive days up to today with at least one entry
    days_set = {_utc_day(e) for e in entries}
    streak = 0
    d = today
    while d in days_set:
        streak += 1
        d = d - timedelta(days=1)

    by = {}
    for e in recent:
        by.setdefault(_utc_day(e), []).append(e.mood_level)
    by_day = [{"date": k, "avg": round(sum(v) / len(v), 2)} for k, v in sorted(by.items())]
    return {"entries": len(recent), "avg_mood": avg, "streak": streak, "by_day": by_day}
