from pydantic import BaseModel, Field, field_validator
from datetime import datetime, date
from typing import List, Optional, Union

MOOD_LABELS = {
    5: "Great",
    4: "Good",
    3: "Okay",
    2: "Bad",
    1: "Awful",
}


class MoodEntry(BaseModel):
    id: str
    date: datetime
    mood_level: int = Field(..., ge=1, le=5)
    notes: Optional[str] = None
    activities: List[str] = []


class MoodCreate(BaseModel):
    mood_level: int = Field(..., ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=1000)
    # list, or a comma-separated string such as "work, exercise"
    activities: Union[List[str], str] = []
    date: Optional[datetime] = None

    @field_validator("activities")
    @classmethod
    def split_activities(cls, v):
        items = v.split(",") if isinstance(v, str) else v
        return [a.strip() for a in items if a.strip()]


class MoodResponse(MoodEntry):
    label: str


class MoodListResponse(BaseModel):
    entries: List[MoodResponse]
    notices: List[str] = []


class MoodDaySummary(BaseModel):
    date: date
    avg: float


class MoodSummaryResponse(BaseModel):
    entries: int
    avg_mood: Optional[float]
    streak: int
    by_day: List[MoodDaySummary]
