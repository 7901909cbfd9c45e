from typing import List

from manasooth.schemas.progress import CompletedAssessmentSet
from manasooth.services.storage import LocalStore, StorageKeys


async def load_history(store: LocalStore) -> List[CompletedAssessmentSet]:
    """Completed assessment sets, oldest first."""
    history = await store.load_records(StorageKeys.PROGRESS_DATA, CompletedAssessmentSet)
    return sorted(history, key=lambda h: h.date)


async def append_history(store: LocalStore, entry: CompletedAssessmentSet) -> None:
    history = await store.load_records(StorageKeys.PROGRESS_DATA, CompletedAssessmentSet)
    history.append(entry)
    await store.save_records(StorageKeys.PROGRESS_DATA, history)
