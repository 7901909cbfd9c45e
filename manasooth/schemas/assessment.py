from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

AssessmentType = Literal["who5", "gad7", "phq9"]


class QuestionOption(BaseModel):
    text: str
    value: int


class Question(BaseModel):
    id: str
    text: str
    options: List[QuestionOption]


class InterpretationBand(BaseModel):
    min: int
    max: int
    label: str


class AssessmentResponse(BaseModel):
    type: AssessmentType
    name: str
    scoring_note: str
    max_score: int
    higher_is_better: bool
    questions: List[Question]
    interpretation: List[InterpretationBand]


class FlowCreate(BaseModel):
    types: List[AssessmentType] = Field(..., min_length=1)


class FlowResponse(BaseModel):
    flow: List[AssessmentType]
    next: Optional[str]


class AnswersSubmit(BaseModel):
    answers: Dict[str, int]


class SubmitResponse(BaseModel):
    type: AssessmentType
    score: int
    interpretation: str
    next: str  # next assessment type, or "results"
    is_last_in_flow: bool
    notices: List[str] = []


class CurrentScores(BaseModel):
    who5: Optional[int] = None
    gad7: Optional[int] = None
    phq9: Optional[int] = None
    notices: List[str] = []
