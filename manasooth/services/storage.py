"""Per-client key-value storage.

Every record family lives as one JSON blob under a fixed key, the same way a
browser keeps it in local storage. Nothing is indexed; callers read the whole
value, change it, and write the whole value back.
"""
import json
import logging
from typing import Any, List, Optional, Type, TypeVar

from fastapi import Depends
from pydantic import BaseModel, TypeAdapter, ValidationError
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from manasooth.core.client import get_client_id
from manasooth.database import get_db
from manasooth.models.storage import StorageEntry

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class StorageKeys:
    CURRENT_ASSESSMENT_SCORES = "manasooth_current_assessment_scores"
    PROGRESS_DATA = "manasooth_progress_data"
    USER_GOALS = "manasooth_user_goals"
    MOOD_ENTRIES = "manasooth_mood_entries"
    SELECTED_ASSESSMENT_FLOW = "manasooth_selected_assessment_flow"

    ALL = (
        CURRENT_ASSESSMENT_SCORES,
        PROGRESS_DATA,
        USER_GOALS,
        MOOD_ENTRIES,
        SELECTED_ASSESSMENT_FLOW,
    )


KEY_LABELS = {
    StorageKeys.CURRENT_ASSESSMENT_SCORES: "current assessment scores",
    StorageKeys.PROGRESS_DATA: "assessment history",
    StorageKeys.USER_GOALS: "goals",
    StorageKeys.MOOD_ENTRIES: "mood entries",
    StorageKeys.SELECTED_ASSESSMENT_FLOW: "assessment flow",
}


class LocalStore:
    def __init__(self, db: AsyncSession, client_id: str):
        self.db = db
        self.client_id = client_id
        # user-facing messages about recovered problems, returned with the response
        self.notices: List[str] = []

    async def _entry(self, key: str) -> Optional[StorageEntry]:
        result = await self.db.execute(
            select(StorageEntry)
            .where(StorageEntry.client_id == self.client_id)
            .where(StorageEntry.key == key)
        )
        return result.scalar_one_or_none()

    async def get_item(self, key: str) -> Optional[str]:
        entry = await self._entry(key)
        return entry.value if entry else None

    async def set_item(self, key: str, value: str) -> None:
        entry = await self._entry(key)
        if entry:
            entry.value = value
        else:
            entry = StorageEntry(client_id=self.client_id, key=key, value=value)
        self.db.add(entry)
        await self.db.commit()

    async def remove_item(self, key: str) -> None:
        await self.db.execute(
            delete(StorageEntry)
            .where(StorageEntry.client_id == self.client_id)
            .where(StorageEntry.key == key)
        )
        await self.db.commit()

    async def clear(self) -> int:
        result = await self.db.execute(
            delete(StorageEntry).where(StorageEntry.client_id == self.client_id)
        )
        await self.db.commit()
        return result.rowcount or 0

    async def load_json(self, key: str, default: Any) -> Any:
        """Parse the blob under ``key``.

        A blob that is not valid JSON, or whose top-level type differs from
        ``default``'s, is discarded: the key is removed and ``default`` is
        returned, with a notice queued for the caller to show.
        """
        raw = await self.get_item(key)
        if raw is None:
            return default
        try:
            value = json.loads(raw)
        except ValueError as e:
            await self._discard(key, f"invalid JSON ({e})")
            return default
        if not isinstance(value, type(default)):
            await self._discard(key, f"expected {type(default).__name__}, got {type(value).__name__}")
            return default
        return value

    async def save_json(self, key: str, value: Any) -> None:
        await self.set_item(key, json.dumps(value))

    async def load_records(self, key: str, model: Type[M]) -> List[M]:
        """Load an array blob as a list of ``model``; a malformed row resets the key."""
        rows = await self.load_json(key, [])
        try:
            return TypeAdapter(List[model]).validate_python(rows)
        except ValidationError as e:
            await self._discard(key, f"{e.error_count()} invalid record field(s)")
            return []

    async def save_records(self, key: str, records: List[BaseModel]) -> None:
        await self.save_json(key, [r.model_dump(mode="json") for r in records])

    async def _discard(self, key: str, reason: str) -> None:
        logger.warning("Discarding corrupted storage key %s for client %s: %s", key, self.client_id, reason)
        await self.remove_item(key)
        label = KEY_LABELS.get(key, key)
        self.notices.append(f"Stored data for {label} was corrupted and has been reset.")


async def get_store(
    db: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> LocalStore:
    return LocalStore(db, client_id)
