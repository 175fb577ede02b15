"""
Admin dashboard.
"""

from typing import List
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from gymdesk.db.database import get_db
from gymdesk.models.exercise import Exercise
from gymdesk.models.profile import Profile
from gymdesk.models.workout import Workout
from gymdesk.schemas import (
    AssignmentSummary,
    AssignmentWithMemberResponse,
    ProfileResponse,
)
from gymdesk.services.assignment_service import AssignmentService
from gymdesk.services.metrics_service import summarize_assignments
from gymdesk.services.profile_service import ProfileService
from gymdesk.utils.auth import require_admin

router = APIRouter()

RECENT_ASSIGNMENTS_LIMIT = 10
RECENT_MEMBERS_LIMIT = 5


class AdminDashboardPage(BaseModel):
    profile: ProfileResponse
    total_members: int
    total_workouts: int
    total_exercises: int
    recent_members: List[ProfileResponse]
    recent_assignments: List[AssignmentWithMemberResponse]
    recent_summary: AssignmentSummary


@router.get("", response_model=AdminDashboardPage)
async def admin_dashboard(
    profile: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """
    Gym overview.

    The completion rate covers the most recent assignments only.
    """
    members = ProfileService(db).list_members()
    recent_assignments = AssignmentService(db).list_assignments(
        limit=RECENT_ASSIGNMENTS_LIMIT
    )

    return AdminDashboardPage(
        profile=ProfileResponse.model_validate(profile),
        total_members=len(members),
        total_workouts=db.query(Workout).count(),
        total_exercises=db.query(Exercise).count(),
        recent_members=[
            ProfileResponse.model_validate(m) for m in members[:RECENT_MEMBERS_LIMIT]
        ],
        recent_assignments=[
            AssignmentWithMemberResponse.model_validate(a) for a in recent_assignments
        ],
        recent_summary=AssignmentSummary(**summarize_assignments(recent_assignments)),
    )
