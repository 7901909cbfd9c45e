# manasooth/core/client.py
from fastapi import Header, HTTPException, status

CLIENT_ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"

async def get_client_id(
    x_client_id: str | None = Header(None, pattern=CLIENT_ID_PATTERN)
) -> str:
    """Storage namespace of the calling device. There is no login; the id only
    keeps one browser's data apart from another's."""
    if not x_client_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing X-Client-Id header",
        )
    return x_client_id
