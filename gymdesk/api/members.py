"""
Member management pages.
"""

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from gymdesk.core.errors import PageRedirect
from gymdesk.db.database import get_db
from gymdesk.schemas import AssignmentResponse, AssignmentSummary, ProfileResponse
from gymdesk.services.assignment_service import AssignmentService
from gymdesk.services.metrics_service import completion_rate, summarize_assignments
from gymdesk.services.profile_service import ProfileService

router = APIRouter()

MEMBERS_PATH = "/admin/members"


class MemberWithStats(ProfileResponse):
    total_workouts: int
    completed_workouts: int
    completion_rate: int


class MemberDetailPage(BaseModel):
    member: ProfileResponse
    assignments: List[AssignmentResponse]
    summary: AssignmentSummary


@router.get("/members", response_model=List[MemberWithStats])
async def list_members(db: Session = Depends(get_db)):
    """All members, newest first, with their workout completion stats."""
    return [
        MemberWithStats(
            id=member.id,
            full_name=member.full_name,
            email=member.email,
            role=member.role,
            created_at=member.created_at,
            total_workouts=total,
            completed_workouts=completed,
            completion_rate=completion_rate(completed, total),
        )
        for member, total, completed in ProfileService(db).list_members_with_stats()
    ]


@router.get("/members/{member_id}", response_model=MemberDetailPage)
async def member_detail(member_id: UUID, db: Session = Depends(get_db)):
    """
    One member and their assignment history.

    Unknown ids and non-member profiles redirect to the member list.
    """
    member = ProfileService(db).get_member(member_id)
    if member is None:
        raise PageRedirect(MEMBERS_PATH)

    assignments = AssignmentService(db).list_for_member(member_id)

    return MemberDetailPage(
        member=ProfileResponse.model_validate(member),
        assignments=[AssignmentResponse.model_validate(a) for a in assignments],
        summary=AssignmentSummary(**summarize_assignments(assignments)),
    )
