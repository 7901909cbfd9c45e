from fastapi import APIRouter, HTTPException

from manasooth.data.helplines import government_helplines, ngo_and_private_helplines
from manasooth.schemas.support import Helpline, HelplineDirectory

router = APIRouter(prefix="/support", tags=["support"])


@router.get("/helplines", response_model=HelplineDirectory)
async def list_helplines():
    return HelplineDirectory(
        government=government_helplines,
        ngo_and_private=ngo_and_private_helplines,
    )


@router.get("/helplines/{helpline_id}", response_model=Helpline)
async def get_helpline(helpline_id: str):
    for helpline in government_helplines + ngo_and_private_helplines:
        if helpline["id"] == helpline_id:
            return helpline
    raise HTTPException(404, "Helpline not found")
