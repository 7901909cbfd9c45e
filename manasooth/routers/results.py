from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from manasooth.ai.client import LLMClient, get_llm
from manasooth.schemas.progress import AnalyzeRequest, AnalysisResponse, ReportResponse, ProgressResponse
from manasooth.services.goals import sync_goals_with_scores, to_response
from manasooth.services.history import load_history
from manasooth.services.results import NoScoresError, analyze_current_scores, latest_report, history_to_csv
from manasooth.services.storage import LocalStore, get_store

router = APIRouter(tags=["results"])


@router.post("/results/analyze", response_model=AnalysisResponse)
async def analyze_results(
    request: AnalyzeRequest,
    store: LocalStore = Depends(get_store),
    llm: LLMClient = Depends(get_llm),
):
    try:
        return await analyze_current_scores(
            store, llm,
            user_context=request.user_context,
            preferred_recommendation_types=request.preferred_recommendation_types,
        )
    except NoScoresError as e:
        raise HTTPException(404, str(e))


@router.get("/results/report", response_model=ReportResponse)
async def get_report(store: LocalStore = Depends(get_store)):
    try:
        return await latest_report(store)
    except NoScoresError as e:
        raise HTTPException(404, str(e))


@router.get("/results/export", response_class=PlainTextResponse)
async def export_history(store: LocalStore = Depends(get_store)):
    history = await load_history(store)
    return PlainTextResponse(
        history_to_csv(history),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="manasooth_progress.csv"'},
    )


@router.get("/progress", response_model=ProgressResponse)
async def get_progress(store: LocalStore = Depends(get_store)):
    history = await load_history(store)
    goals = await sync_goals_with_scores(store, history)
    return ProgressResponse(
        history=history,
        goals=[to_response(g) for g in goals],
        notices=store.notices,
    )
