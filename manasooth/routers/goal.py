from fastapi import APIRouter, Depends, HTTPException
from datetime import date

from manasooth.schemas.goal import (
    GoalCreate, GoalStatusUpdate, GoalResponse, GoalDashboardResponse
)
from manasooth.services.goals import (
    GoalError, GoalNotFoundError,
    load_goals, create_goal, update_goal, set_goal_status, delete_goal, to_response
)
from manasooth.services.storage import LocalStore, get_store

router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("", response_model=GoalResponse)
async def add_goal(goal_in: GoalCreate, store: LocalStore = Depends(get_store)):
    try:
        goal = await create_goal(store, goal_in)
    except GoalError as e:
        raise HTTPException(400, str(e))
    return to_response(goal)


@router.get("", response_model=GoalDashboardResponse)
async def get_goal_dashboard(store: LocalStore = Depends(get_store)):
    today = date.today()
    active, completed, archived = [], [], []
    for goal in await load_goals(store):
        resp = to_response(goal, today)
        if goal.status == "active":
            active.append(resp)
        elif goal.status == "archived":
            archived.append(resp)
        else:
            completed.append(resp)

    return GoalDashboardResponse(
        active=active, completed=completed, archived=archived, notices=store.notices
    )


@router.put("/{goal_id}", response_model=GoalResponse)
async def edit_goal(goal_id: str, goal_in: GoalCreate, store: LocalStore = Depends(get_store)):
    try:
        goal = await update_goal(store, goal_id, goal_in)
    except GoalNotFoundError:
        raise HTTPException(404, "Goal not found")
    except GoalError as e:
        raise HTTPException(400, str(e))
    return to_response(goal)


@router.patch("/{goal_id}/status", response_model=GoalResponse)
async def change_goal_status(
    goal_id: str, status_in: GoalStatusUpdate, store: LocalStore = Depends(get_store)
):
    try:
        goal = await set_goal_status(store, goal_id, status_in.status)
    except GoalNotFoundError:
        raise HTTPException(404, "Goal not found")
    return to_response(goal)


@router.delete("/{goal_id}")
async def remove_goal(goal_id: str, store: LocalStore = Depends(get_store)):
    try:
        await delete_goal(store, goal_id)
    except GoalNotFoundError:
        raise HTTPException(404, "Goal not found")
    return {"message": "The goal has been removed."}
