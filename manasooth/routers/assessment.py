from fastapi import APIRouter, Depends, HTTPException
from typing import List

from manasooth.data.assessments import ASSESSMENT_FLOW
from manasooth.schemas.assessment import (
    AssessmentResponse, FlowCreate, FlowResponse, AnswersSubmit, SubmitResponse, CurrentScores
)
from manasooth.services.assessment import (
    RESULTS, start_flow, get_flow, load_current_scores, submit_answers
)
from manasooth.services.scoring import (
    UnknownAssessmentError, InvalidAnswersError, get_assessment, interpret_score
)
from manasooth.services.storage import LocalStore, get_store

router = APIRouter(prefix="/assessments", tags=["assessments"])


def _to_response(assessment: dict) -> AssessmentResponse:
    return AssessmentResponse(
        type=assessment["type"],
        name=assessment["name"],
        scoring_note=assessment["scoring_note"],
        max_score=assessment["max_score"],
        higher_is_better=assessment["higher_is_better"],
        questions=assessment["questions"],
        interpretation=[
            {"min": low, "max": high, "label": label}
            for low, high, label in assessment["interpretation"]
        ],
    )


@router.get("", response_model=List[AssessmentResponse])
async def list_assessments():
    return [_to_response(get_assessment(t)) for t in ASSESSMENT_FLOW]


@router.post("/flow", response_model=FlowResponse)
async def select_flow(flow_in: FlowCreate, store: LocalStore = Depends(get_store)):
    flow = await start_flow(store, flow_in.types)
    if not flow:
        raise HTTPException(400, "Could not determine the assessment flow. Please try again.")
    return FlowResponse(flow=flow, next=flow[0])


@router.get("/flow", response_model=FlowResponse)
async def read_flow(store: LocalStore = Depends(get_store)):
    flow = await get_flow(store)
    return FlowResponse(flow=flow, next=flow[0] if flow else None)


@router.get("/scores/current", response_model=CurrentScores)
async def read_current_scores(store: LocalStore = Depends(get_store)):
    scores = await load_current_scores(store)
    return CurrentScores(**scores, notices=store.notices)


@router.get("/{assessment_type}", response_model=AssessmentResponse)
async def read_assessment(assessment_type: str):
    try:
        return _to_response(get_assessment(assessment_type))
    except UnknownAssessmentError as e:
        raise HTTPException(404, str(e))


@router.post("/{assessment_type}/submit", response_model=SubmitResponse)
async def submit_assessment(
    assessment_type: str,
    submit_in: AnswersSubmit,
    store: LocalStore = Depends(get_store),
):
    try:
        score, next_step = await submit_answers(store, assessment_type, submit_in.answers)
    except UnknownAssessmentError as e:
        raise HTTPException(404, str(e))
    except InvalidAnswersError as e:
        raise HTTPException(400, str(e))

    return SubmitResponse(
        type=assessment_type,
        score=score,
        interpretation=interpret_score(assessment_type, score),
        next=next_step,
        is_last_in_flow=next_step == RESULTS,
        notices=store.notices,
    )
