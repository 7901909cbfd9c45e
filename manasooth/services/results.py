import csv
import io
import logging
from datetime import datetime, timezone
from typing import List, Optional

from manasooth.ai.client import AIServiceError, LLMClient
from manasooth.ai.flows import analyze_assessment
from manasooth.data.assessments import ASSESSMENT_NAMES, WHO5, GAD7, PHQ9
from manasooth.schemas.ai import ActiveGoalForAI, AnalyzeAssessmentInput, AnalyzeAssessmentOutput
from manasooth.schemas.progress import CompletedAssessmentSet, AnalysisResponse, ReportResponse
from manasooth.services.assessment import load_current_scores
from manasooth.services.goals import load_goals
from manasooth.services.history import append_history, load_history
from manasooth.services.scoring import interpretations, requires_consultation
from manasooth.services.storage import LocalStore

logger = logging.getLogger(__name__)

FALLBACK_ANALYSIS = AnalyzeAssessmentOutput(
    feedback="Could not load AI feedback.",
    recommendations="Could not load AI recommendations.",
    requiresConsultation=False,
)


class NoScoresError(LookupError):
    pass


async def active_goals_for_ai(store: LocalStore) -> List[ActiveGoalForAI]:
    goals = await load_goals(store)
    return [
        ActiveGoalForAI(
            description=g.description or f"Goal for {ASSESSMENT_NAMES[g.assessment_type]}",
            assessment_name=ASSESSMENT_NAMES[g.assessment_type],
        )
        for g in goals
        if g.status == "active"
    ]


async def analyze_current_scores(
    store: LocalStore,
    llm: LLMClient,
    user_context: Optional[str] = None,
    preferred_recommendation_types: Optional[List[str]] = None,
) -> AnalysisResponse:
    scores = await load_current_scores(store)
    if not scores:
        raise NoScoresError("No assessment scores found. Please complete the assessments first.")

    # assessments skipped in this sitting are sent as 0
    analysis_in = AnalyzeAssessmentInput(
        who5_score=scores.get(WHO5, 0),
        gad7_score=scores.get(GAD7, 0),
        phq9_score=scores.get(PHQ9, 0),
        user_context=user_context,
        preferred_recommendation_types=preferred_recommendation_types,
        active_goals=await active_goals_for_ai(store),
    )

    saved = False
    try:
        result = await analyze_assessment(llm, analysis_in)
    except AIServiceError as e:
        logger.error("AI Analysis Error: %s", e, exc_info=True)
        store.notices.append("Could not retrieve AI insights. Please try again later.")
        result = FALLBACK_ANALYSIS
        consult = False
    else:
        consult = result.requires_consultation or requires_consultation(
            scores.get(WHO5), scores.get(GAD7), scores.get(PHQ9)
        )
        await append_history(store, CompletedAssessmentSet(
            date=datetime.now(timezone.utc),
            who5_score=analysis_in.who5_score,
            gad7_score=analysis_in.gad7_score,
            phq9_score=analysis_in.phq9_score,
            ai_feedback=result.feedback,
            ai_recommendations=result.recommendations,
            requires_consultation=consult,
        ))
        saved = True

    return AnalysisResponse(
        who5_score=analysis_in.who5_score,
        gad7_score=analysis_in.gad7_score,
        phq9_score=analysis_in.phq9_score,
        interpretations=interpretations(scores),
        feedback=result.feedback,
        recommendations=result.recommendations,
        requires_consultation=consult,
        saved=saved,
        notices=store.notices,
    )


async def latest_report(store: LocalStore) -> ReportResponse:
    """The history entry for the current scores, else the newest entry.

    With no history at all, current scores alone still make a report.
    """
    scores = await load_current_scores(store)
    history = await load_history(store)

    entry = None
    if history:
        if scores:
            matches = [
                h for h in history
                if h.who5_score == scores.get(WHO5)
                and h.gad7_score == scores.get(GAD7)
                and h.phq9_score == scores.get(PHQ9)
            ]
            if matches:
                entry = matches[-1]
            else:
                store.notices.append(
                    "Displaying the most recent historical report as current scores "
                    "didn't match a specific entry."
                )
        entry = entry or history[-1]

    if entry:
        return ReportResponse(
            date=entry.date,
            who5_score=entry.who5_score,
            gad7_score=entry.gad7_score,
            phq9_score=entry.phq9_score,
            interpretations=interpretations({
                WHO5: entry.who5_score, GAD7: entry.gad7_score, PHQ9: entry.phq9_score,
            }),
            ai_feedback=entry.ai_feedback,
            ai_recommendations=entry.ai_recommendations,
            requires_consultation=entry.requires_consultation,
            notices=store.notices,
        )
    if scores:
        return ReportResponse(
            date=None,
            who5_score=scores.get(WHO5),
            gad7_score=scores.get(GAD7),
            phq9_score=scores.get(PHQ9),
            interpretations=interpretations(scores),
            ai_feedback=None,
            ai_recommendations=None,
            requires_consultation=None,
            notices=store.notices,
        )
    raise NoScoresError("No assessment results found.")


def history_to_csv(history: List[CompletedAssessmentSet]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(["date", "who5_score", "gad7_score", "phq9_score", "requires_consultation"])
    for h in history:
        writer.writerow([
            h.date.isoformat(),
            "" if h.who5_score is None else h.who5_score,
            "" if h.gad7_score is None else h.gad7_score,
            "" if h.phq9_score is None else h.phq9_score,
            "" if h.requires_consultation is None else str(h.requires_consultation).lower(),
        ])
    return buf.getvalue()
