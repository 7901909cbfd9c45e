from pydantic import BaseModel
from datetime import datetime
from typing import Dict, List, Optional

from manasooth.schemas.goal import GoalResponse


class CompletedAssessmentSet(BaseModel):
    date: datetime
    who5_score: Optional[int] = None
    gad7_score: Optional[int] = None
    phq9_score: Optional[int] = None
    ai_feedback: Optional[str] = None
    ai_recommendations: Optional[str] = None
    requires_consultation: Optional[bool] = None

    def score_for(self, assessment_type: str) -> Optional[int]:
        return getattr(self, f"{assessment_type}_score")


class AnalyzeRequest(BaseModel):
    user_context: Optional[str] = None
    preferred_recommendation_types: Optional[List[str]] = None


class AnalysisResponse(BaseModel):
    who5_score: int
    gad7_score: int
    phq9_score: int
    interpretations: Dict[str, str]
    feedback: str
    recommendations: str
    requires_consultation: bool
    saved: bool  # appended to the assessment history
    notices: List[str] = []


class ReportResponse(BaseModel):
    date: Optional[datetime]
    who5_score: Optional[int]
    gad7_score: Optional[int]
    phq9_score: Optional[int]
    interpretations: Dict[str, str]
    ai_feedback: Optional[str]
    ai_recommendations: Optional[str]
    requires_consultation: Optional[bool]
    notices: List[str] = []


class ProgressResponse(BaseModel):
    history: List[CompletedAssessmentSet]
    goals: List[GoalResponse]
    notices: List[str] = []
