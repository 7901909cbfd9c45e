from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Literal, Optional

from manasooth.schemas.assessment import AssessmentType

GoalStatus = Literal["active", "achieved", "missed", "archived"]
GoalDefinitionType = Literal["reach_specific_score", "improve_current_score"]

REACH_SPECIFIC_SCORE = "reach_specific_score"
IMPROVE_CURRENT_SCORE = "improve_current_score"


class UserGoal(BaseModel):
    id: str
    assessment_type: AssessmentType
    goal_definition_type: GoalDefinitionType
    target_value: int  # a score, or a number of points to improve by
    target_date: Optional[date] = None
    start_date: datetime
    status: GoalStatus = "active"
    start_score: int
    current_score: Optional[int] = None
    notes: Optional[str] = None
    description: Optional[str] = None


class GoalCreate(BaseModel):
    assessment_type: AssessmentType
    goal_definition_type: GoalDefinitionType = REACH_SPECIFIC_SCORE
    target_value: int = Field(..., ge=0)
    target_date: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=1000)


class GoalStatusUpdate(BaseModel):
    status: GoalStatus


class GoalResponse(UserGoal):
    progress: float  # 0–100
    overdue: bool


class GoalDashboardResponse(BaseModel):
    active: List[GoalResponse]
    completed: List[GoalResponse]  # achieved or missed
    archived: List[GoalResponse]
    notices: List[str] = []
