import logging
import uuid
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from manasooth.data.assessments import ASSESSMENT_NAMES
from manasooth.schemas.goal import (
    UserGoal, GoalCreate, GoalResponse, REACH_SPECIFIC_SCORE, IMPROVE_CURRENT_SCORE
)
from manasooth.schemas.progress import CompletedAssessmentSet
from manasooth.services.history import load_history
from manasooth.services.scoring import get_assessment, higher_is_better
from manasooth.services.storage import LocalStore, StorageKeys

logger = logging.getLogger(__name__)


class GoalError(ValueError):
    pass


class GoalNotFoundError(LookupError):
    pass


def calculate_progress(goal: UserGoal) -> float:
    """Percent of the way from the start score to the goal, 0–100."""
    if goal.status == "achieved":
        return 100.0
    if goal.status in ("missed", "archived"):
        return 0.0
    if goal.current_score is None:
        return 0.0

    start, current, target = goal.start_score, goal.current_score, goal.target_value
    upward = higher_is_better(goal.assessment_type)
    progress = 0.0

    if goal.goal_definition_type == REACH_SPECIFIC_SCORE:
        total_range = abs(target - start)
        if total_range == 0:
            return 100.0 if current == target else 0.0
        if upward:
            if current >= target:
                return 100.0
            if start < target:
                progress = min(max(current - start, 0), total_range) / total_range * 100
        else:
            if current <= target:
                return 100.0
            if start > target:
                progress = min(max(start - current, 0), total_range) / total_range * 100
    elif goal.goal_definition_type == IMPROVE_CURRENT_SCORE:
        # target is the magnitude of the change; direction comes from the assessment
        if target == 0:
            return 0.0
        change = current - start if upward else start - current
        progress = max(0, change) / target * 100

    return min(max(progress, 0.0), 100.0)


def is_goal_met(goal: UserGoal, score: int) -> bool:
    upward = higher_is_better(goal.assessment_type)
    if goal.goal_definition_type == REACH_SPECIFIC_SCORE:
        return score >= goal.target_value if upward else score <= goal.target_value
    change = score - goal.start_score
    return change >= goal.target_value if upward else change <= -goal.target_value


def is_overdue(goal: UserGoal, today: Optional[date] = None) -> bool:
    today = today or date.today()
    return goal.status == "active" and goal.target_date is not None and goal.target_date < today


def describe_goal(assessment_type: str, definition_type: str, target_value: int,
                  target_date: Optional[date]) -> str:
    name = ASSESSMENT_NAMES[assessment_type]
    if definition_type == REACH_SPECIFIC_SCORE:
        description = f"Reach a score of {target_value} for {name}."
    else:
        direction = "increase" if higher_is_better(assessment_type) else "decrease"
        description = f"Improve {name} score by {target_value} points (current goal: {direction} score)."
    if target_date:
        description += f" By {target_date.strftime('%B')} {target_date.day}, {target_date.year}."
    return description


def to_response(goal: UserGoal, today: Optional[date] = None) -> GoalResponse:
    return GoalResponse(
        **goal.model_dump(),
        progress=round(calculate_progress(goal), 2),
        overdue=is_overdue(goal, today),
    )


def latest_completed(history: List[CompletedAssessmentSet]) -> Optional[CompletedAssessmentSet]:
    if not history:
        return None
    return max(history, key=lambda h: h.date)


async def load_goals(store: LocalStore) -> List[UserGoal]:
    return await store.load_records(StorageKeys.USER_GOALS, UserGoal)


async def save_goals(store: LocalStore, goals: List[UserGoal]) -> None:
    await store.save_records(StorageKeys.USER_GOALS, goals)


async def _find(store: LocalStore, goal_id: str) -> Tuple[List[UserGoal], int]:
    goals = await load_goals(store)
    for i, goal in enumerate(goals):
        if goal.id == goal_id:
            return goals, i
    raise GoalNotFoundError(goal_id)


def _check_target(goal_in: GoalCreate) -> None:
    max_score = get_assessment(goal_in.assessment_type)["max_score"]
    if goal_in.target_value > max_score:
        raise GoalError(f"Target value must be between 0 and {max_score} for {ASSESSMENT_NAMES[goal_in.assessment_type]}.")


async def create_goal(store: LocalStore, goal_in: GoalCreate) -> UserGoal:
    _check_target(goal_in)
    latest = latest_completed(await load_history(store))
    start_score = latest.score_for(goal_in.assessment_type) if latest else None

    if start_score is None and goal_in.goal_definition_type == IMPROVE_CURRENT_SCORE:
        raise GoalError(
            f"You need to complete a {ASSESSMENT_NAMES[goal_in.assessment_type]} "
            "assessment first to set an improvement goal."
        )

    goal = UserGoal(
        id=str(uuid.uuid4()),
        assessment_type=goal_in.assessment_type,
        goal_definition_type=goal_in.goal_definition_type,
        target_value=goal_in.target_value,
        target_date=goal_in.target_date,
        start_date=datetime.now(timezone.utc),
        status="active",
        start_score=start_score if start_score is not None else 0,
        notes=goal_in.notes,
        description=describe_goal(
            goal_in.assessment_type, goal_in.goal_definition_type,
            goal_in.target_value, goal_in.target_date,
        ),
    )
    goals = await load_goals(store)
    goals.append(goal)
    await save_goals(store, goals)
    return goal


async def update_goal(store: LocalStore, goal_id: str, goal_in: GoalCreate) -> UserGoal:
    """Edit a goal in place; id, start date, status and start score are kept."""
    _check_target(goal_in)
    goals, i = await _find(store, goal_id)
    existing = goals[i]
    goals[i] = existing.model_copy(update={
        "assessment_type": goal_in.assessment_type,
        "goal_definition_type": goal_in.goal_definition_type,
        "target_value": goal_in.target_value,
        "target_date": goal_in.target_date,
        "notes": goal_in.notes,
        "description": describe_goal(
            goal_in.assessment_type, goal_in.goal_definition_type,
            goal_in.target_value, goal_in.target_date,
        ),
    })
    await save_goals(store, goals)
    return goals[i]


async def set_goal_status(store: LocalStore, goal_id: str, status: str) -> UserGoal:
    goals, i = await _find(store, goal_id)
    goals[i] = goals[i].model_copy(update={"status": status})
    await save_goals(store, goals)
    logger.info("Goal %s marked as %s", goal_id, status)
    return goals[i]


async def delete_goal(store: LocalStore, goal_id: str) -> None:
    goals, i = await _find(store, goal_id)
    del goals[i]
    await save_goals(store, goals)


async def sync_goals_with_scores(
    store: LocalStore, history: List[CompletedAssessmentSet], today: Optional[date] = None
) -> List[UserGoal]:
    """Carry the most recent scores onto active goals and settle their status.

    A goal whose score crosses its target becomes achieved; an unmet goal past
    its target date becomes missed. Goals are written back only when a status
    changed.
    """
    today = today or date.today()
    goals = await load_goals(store)
    if not history:
        return goals

    latest = latest_completed(history)
    changed = False

    for i, goal in enumerate(goals):
        if goal.status != "active":
            continue
        score = latest.score_for(goal.assessment_type)
        if score is None:
            continue

        update = {"current_score": score}
        if is_goal_met(goal, score):
            update["status"] = "achieved"
            store.notices.append(
                f"Congrats on achieving your goal for {ASSESSMENT_NAMES[goal.assessment_type]}!"
            )
            logger.info("Goal %s achieved with score %s", goal.id, score)
            changed = True
        elif goal.target_date and goal.target_date < today:
            update["status"] = "missed"
            logger.info("Goal %s missed (target date %s)", goal.id, goal.target_date)
            changed = True
        goals[i] = goal.model_copy(update=update)

    if changed:
        await save_goals(store, goals)
    return goals
