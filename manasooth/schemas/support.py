from pydantic import BaseModel
from typing import List, Optional


class Helpline(BaseModel):
    id: str
    name: str
    contact: str
    description: str
    availability: Optional[str] = None
    notes: Optional[str] = None


class HelplineDirectory(BaseModel):
    government: List[Helpline]
    ngo_and_private: List[Helpline]
