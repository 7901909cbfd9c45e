from pydantic import BaseModel, Field
from typing import Optional


class ConversationMessage(BaseModel):
    text: str = Field(..., min_length=1, max_length=200)


class ConversationReply(BaseModel):
    reply: str
    stage: str
    assessment_type: Optional[str] = None
    question_index: Optional[int] = None  # only while a question is open
    score: Optional[int] = None
