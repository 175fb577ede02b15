"""
Member pages: dashboard, workout detail and completion.
"""

import math
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from gymdesk.core.errors import PageRedirect
from gymdesk.db.database import get_db
from gymdesk.domain.enums import Role
from gymdesk.models.profile import Profile
from gymdesk.schemas import (
    AssignmentResponse,
    AssignmentSummary,
    ProfileResponse,
    WorkoutExerciseResponse,
    WorkoutResponse,
)
from gymdesk.services.assignment_service import AssignmentService
from gymdesk.services.metrics_service import summarize_assignments
from gymdesk.services.workout_service import WorkoutService
from gymdesk.utils.auth import (
    ADMIN_PATH,
    DASHBOARD_PATH,
    get_current_profile,
    get_current_user_id,
)

router = APIRouter()

# Minutes budgeted per exercise when estimating workout length
MINUTES_PER_EXERCISE = 3


class DashboardPage(BaseModel):
    profile: Optional[ProfileResponse]
    assignments: List[AssignmentResponse]
    pending: List[AssignmentResponse]
    completed: List[AssignmentResponse]
    summary: AssignmentSummary


class WorkoutPage(BaseModel):
    workout: WorkoutResponse
    exercises: List[WorkoutExerciseResponse]
    assignment: AssignmentResponse
    is_completed: bool
    estimated_minutes: int


@router.get("/dashboard", response_model=DashboardPage)
async def dashboard(
    user_id: UUID = Depends(get_current_user_id),
    profile: Optional[Profile] = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """
    Member dashboard with assigned workouts.

    Admins are sent to the admin dashboard.
    """
    if profile is not None and profile.role == Role.ADMIN.value:
        raise PageRedirect(ADMIN_PATH)

    assignments = AssignmentService(db).list_for_member(user_id)
    items = [AssignmentResponse.model_validate(a) for a in assignments]

    return DashboardPage(
        profile=ProfileResponse.model_validate(profile) if profile else None,
        assignments=items,
        pending=[a for a in items if a.completed_at is None],
        completed=[a for a in items if a.completed_at is not None],
        summary=AssignmentSummary(**summarize_assignments(assignments)),
    )


@router.get("/workout/{workout_id}", response_model=WorkoutPage)
async def workout_detail(
    workout_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    A workout assigned to the caller, with its exercises in order.

    Unknown workouts and workouts not assigned to the caller redirect to
    the dashboard.
    """
    workout_service = WorkoutService(db)
    workout = workout_service.get_workout(workout_id)
    if workout is None:
        raise PageRedirect(DASHBOARD_PATH)

    assignment = AssignmentService(db).find_member_assignment(user_id, workout_id)
    if assignment is None:
        raise PageRedirect(DASHBOARD_PATH)

    exercises = workout_service.get_workout_exercises(workout_id)

    return WorkoutPage(
        workout=WorkoutResponse.model_validate(workout),
        exercises=[WorkoutExerciseResponse.model_validate(we) for we in exercises],
        assignment=AssignmentResponse.model_validate(assignment),
        is_completed=assignment.completed_at is not None,
        estimated_minutes=math.ceil(len(exercises) * MINUTES_PER_EXERCISE),
    )


@router.post("/workout/{workout_id}/complete")
async def complete_workout(
    workout_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Mark the caller's assignment of this workout as completed.
    """
    service = AssignmentService(db)
    assignment = service.find_member_assignment(user_id, workout_id)
    if assignment is None:
        raise PageRedirect(DASHBOARD_PATH)

    service.complete_assignment(assignment)

    return RedirectResponse(url=DASHBOARD_PATH, status_code=status.HTTP_303_SEE_OTHER)
