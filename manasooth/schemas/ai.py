from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Tone = Literal["empathetic", "motivational", "calm", "neutral", "direct"]


class ActiveGoalForAI(BaseModel):
    description: str
    assessment_name: str


class AnalyzeAssessmentInput(BaseModel):
    who5_score: int = Field(..., ge=0, le=100)
    gad7_score: int = Field(..., ge=0, le=21)
    phq9_score: int = Field(..., ge=0, le=27)
    user_context: Optional[str] = None
    preferred_recommendation_types: Optional[List[str]] = None
    active_goals: Optional[List[ActiveGoalForAI]] = None


class AnalyzeAssessmentOutput(BaseModel):
    # the model answers in camelCase, as the prompt asks
    model_config = ConfigDict(populate_by_name=True)

    feedback: str
    recommendations: str
    requires_consultation: bool = Field(..., alias="requiresConsultation")


class ChatMessage(BaseModel):
    sender: Literal["user", "ai"]
    text: str


class ChatbotInput(BaseModel):
    message: str = Field(..., min_length=1)
    preferred_tone: Optional[Tone] = None
    history: List[ChatMessage] = []


class ChatbotOutput(BaseModel):
    response: str


class BookConsultationInput(BaseModel):
    date: str  # YYYY-MM-DD
    time: str  # hh:mm AM/PM
    user_name: Optional[str] = None


class BookConsultationOutput(BaseModel):
    success: bool
    message: str
    booking_id: Optional[str] = None
