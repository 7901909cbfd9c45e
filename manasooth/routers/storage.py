from fastapi import APIRouter, Depends, HTTPException

from manasooth.services.storage import LocalStore, StorageKeys, get_store

router = APIRouter(prefix="/storage", tags=["storage"])


@router.get("/{key}")
async def read_key(key: str, store: LocalStore = Depends(get_store)):
    if key not in StorageKeys.ALL:
        raise HTTPException(404, "Unknown storage key")
    default = {} if key == StorageKeys.CURRENT_ASSESSMENT_SCORES else []
    value = await store.load_json(key, default)
    return {"key": key, "value": value, "notices": store.notices}


@router.delete("")
async def clear_storage(store: LocalStore = Depends(get_store)):
    removed = await store.clear()
    return {"message": "All stored data has been cleared.", "removed": removed}
