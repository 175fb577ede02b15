"""
Assignment ledger service.

An assignment links one member to one workout. It is pending until the
member completes it; completion is one-way.
"""

import logging
from uuid import UUID
from datetime import datetime, timezone
from typing import Optional, List
from sqlalchemy.orm import Session, joinedload

from gymdesk.models.assignment import UserWorkout
from gymdesk.models.workout import Workout
from gymdesk.services.exercise_service import blank_to_none
from gymdesk.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class AssignmentService:
    """Service for assigning and completing workouts."""

    def __init__(self, db: Session):
        self.db = db

    def assign_workout(
        self, member_id: UUID, workout_id: UUID, notes: Optional[str] = None
    ) -> UserWorkout:
        """
        Assign a workout to a member.

        The same workout may be assigned to the same member any number of
        times; each call adds a new row.

        Raises:
            ValueError: If the member or the workout does not exist. Admin
                profiles are not members.
        """
        member = ProfileService(self.db).get_member(member_id)
        if member is None:
            raise ValueError(f"Member {member_id} not found")

        workout = self.db.query(Workout).filter(Workout.id == workout_id).first()
        if workout is None:
            raise ValueError(f"Workout {workout_id} not found")

        assignment = UserWorkout(
            user_id=member_id,
            workout_id=workout_id,
            notes=blank_to_none(notes),
        )
        self.db.add(assignment)
        self.db.commit()
        self.db.refresh(assignment)

        logger.info(
            f"[ASSIGN_WORKOUT] Assigned workout {workout_id} to member {member_id}"
        )
        return assignment

    def find_member_assignment(
        self, user_id: UUID, workout_id: UUID
    ) -> Optional[UserWorkout]:
        """
        The member's assignment for a workout.

        When the workout was assigned more than once, the most recent pending
        assignment wins, then the most recent completed one.
        """
        assignments = (
            self.db.query(UserWorkout)
            .filter(
                UserWorkout.user_id == user_id,
                UserWorkout.workout_id == workout_id,
            )
            .order_by(UserWorkout.assigned_at.desc())
            .all()
        )
        if not assignments:
            return None

        for assignment in assignments:
            if assignment.completed_at is None:
                return assignment
        return assignments[0]

    def complete_assignment(self, assignment: UserWorkout) -> UserWorkout:
        """
        Mark an assignment completed now.

        Completing twice keeps the first timestamp. There is no way back to
        pending.
        """
        if assignment.completed_at is not None:
            logger.info(
                f"[COMPLETE_WORKOUT] Assignment {assignment.id} already completed"
            )
            return assignment

        assignment.completed_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(assignment)

        logger.info(f"[COMPLETE_WORKOUT] Completed assignment {assignment.id}")
        return assignment

    def list_for_member(self, user_id: UUID) -> List[UserWorkout]:
        """A member's assignments, newest first, with workouts loaded."""
        return (
            self.db.query(UserWorkout)
            .options(joinedload(UserWorkout.workout))
            .filter(UserWorkout.user_id == user_id)
            .order_by(UserWorkout.assigned_at.desc())
            .all()
        )

    def list_assignments(self, limit: Optional[int] = None) -> List[UserWorkout]:
        """
        All assignments, newest first, with workouts and members loaded.

        Args:
            limit: Optional limit on number of results
        """
        query = (
            self.db.query(UserWorkout)
            .options(joinedload(UserWorkout.workout), joinedload(UserWorkout.profile))
            .order_by(UserWorkout.assigned_at.desc())
        )
        if limit:
            query = query.limit(limit)
        return query.all()
