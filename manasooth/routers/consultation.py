from fastapi import APIRouter, HTTPException
from datetime import date
from typing import List

from manasooth.ai.flows import book_consultation
from manasooth.data.helplines import consultation_time_slots
from manasooth.schemas.ai import BookConsultationInput, BookConsultationOutput

router = APIRouter(prefix="/consultation", tags=["consultation"])


@router.get("/slots", response_model=List[str])
async def get_time_slots():
    return consultation_time_slots


@router.post("/book", response_model=BookConsultationOutput)
async def book(booking_in: BookConsultationInput):
    try:
        day = date.fromisoformat(booking_in.date)
    except ValueError:
        raise HTTPException(400, "Date must be in YYYY-MM-DD format")
    if day < date.today():
        raise HTTPException(400, "Please select a date that is not in the past.")
    if booking_in.time not in consultation_time_slots:
        raise HTTPException(400, "Please select one of the available time slots.")

    return await book_consultation(booking_in)
