import logging
from typing import Dict, List, Tuple

from manasooth.data.assessments import ASSESSMENT_FLOW, ASSESSMENTS
from manasooth.services.scoring import get_assessment, score_answers
from manasooth.services.storage import LocalStore, StorageKeys

logger = logging.getLogger(__name__)

RESULTS = "results"


def order_flow(types: List[str]) -> List[str]:
    """Canonical order, duplicates dropped."""
    for t in types:
        get_assessment(t)
    return [t for t in ASSESSMENT_FLOW if t in types]


async def start_flow(store: LocalStore, types: List[str]) -> List[str]:
    flow = order_flow(types)
    await store.save_json(StorageKeys.SELECTED_ASSESSMENT_FLOW, flow)
    # a new sitting starts from a clean slate
    await store.remove_item(StorageKeys.CURRENT_ASSESSMENT_SCORES)
    return flow


async def get_flow(store: LocalStore) -> List[str]:
    flow = await store.load_json(StorageKeys.SELECTED_ASSESSMENT_FLOW, [])
    return [t for t in flow if t in ASSESSMENTS]


async def load_current_scores(store: LocalStore) -> Dict[str, int]:
    scores = await store.load_json(StorageKeys.CURRENT_ASSESSMENT_SCORES, {})
    return {t: v for t, v in scores.items() if t in ASSESSMENTS and isinstance(v, int)}


async def record_score(store: LocalStore, assessment_type: str, score: int) -> None:
    scores = await load_current_scores(store)
    scores[assessment_type] = score
    await store.save_json(StorageKeys.CURRENT_ASSESSMENT_SCORES, scores)


async def advance_flow(store: LocalStore, assessment_type: str) -> str:
    """Drop the finished type from the stored flow and say where to go next."""
    raw = await store.get_item(StorageKeys.SELECTED_ASSESSMENT_FLOW)
    if raw is None:
        return RESULTS

    flow = [t for t in await get_flow(store) if t != assessment_type]
    if flow:
        await store.save_json(StorageKeys.SELECTED_ASSESSMENT_FLOW, flow)
        return flow[0]
    await store.remove_item(StorageKeys.SELECTED_ASSESSMENT_FLOW)
    return RESULTS


async def submit_answers(
    store: LocalStore, assessment_type: str, answers: Dict[str, int]
) -> Tuple[int, str]:
    score = score_answers(assessment_type, answers)
    await record_score(store, assessment_type, score)
    next_step = await advance_flow(store, assessment_type)
    logger.info("Client %s scored %s on %s, next: %s", store.client_id, score, assessment_type, next_step)
    return score, next_step
