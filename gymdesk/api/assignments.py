"""
Workout assignment pages.
"""

import logging
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from gymdesk.db.database import get_db
from gymdesk.schemas import (
    AssignmentSummary,
    AssignmentWithMemberResponse,
    AssignWorkoutForm,
    MemberSummary,
    WorkoutSummary,
)
from gymdesk.services.assignment_service import AssignmentService
from gymdesk.services.metrics_service import summarize_assignments
from gymdesk.services.profile_service import ProfileService
from gymdesk.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)

router = APIRouter()


class AssignWorkoutPage(BaseModel):
    members: List[MemberSummary]
    workouts: List[WorkoutSummary]
    preselected_member: Optional[UUID]
    preselected_workout: Optional[UUID]


class AssignmentHistoryPage(BaseModel):
    assignments: List[AssignmentWithMemberResponse]
    summary: AssignmentSummary


@router.get("/assignments", response_model=AssignWorkoutPage)
async def assign_workout_page(
    member: Optional[UUID] = Query(None, description="Member to preselect"),
    workout: Optional[UUID] = Query(None, description="Workout to preselect"),
    db: Session = Depends(get_db),
):
    """Assignment form: members and workouts in alphabetical order."""
    members = ProfileService(db).list_members(order_by_name=True)
    workouts = WorkoutService(db).list_workouts(order_by_name=True)

    return AssignWorkoutPage(
        members=[MemberSummary.model_validate(m) for m in members],
        workouts=[WorkoutSummary.model_validate(w) for w in workouts],
        preselected_member=member,
        preselected_workout=workout,
    )


@router.post("/assignments")
async def assign_workout(
    request: AssignWorkoutForm,
    db: Session = Depends(get_db),
):
    """Assign a workout to a member, then return to the admin dashboard."""
    try:
        AssignmentService(db).assign_workout(
            member_id=request.member_id,
            workout_id=request.workout_id,
            notes=request.notes,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.exception("[ASSIGN_WORKOUT] Error assigning workout")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to assign workout: {str(e)}",
        )

    return RedirectResponse(url="/admin", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/assignments/history", response_model=AssignmentHistoryPage)
async def assignment_history(db: Session = Depends(get_db)):
    """Every assignment, newest first, with overall completion stats."""
    assignments = AssignmentService(db).list_assignments()

    return AssignmentHistoryPage(
        assignments=[
            AssignmentWithMemberResponse.model_validate(a) for a in assignments
        ],
        summary=AssignmentSummary(**summarize_assignments(assignments)),
    )
