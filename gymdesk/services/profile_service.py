"""
Profile and member registry service.
"""

import logging
from uuid import UUID
from typing import Optional, List, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import case, func

from gymdesk.domain.enums import Role
from gymdesk.models.assignment import UserWorkout
from gymdesk.models.profile import Profile
from gymdesk.models.user import User

logger = logging.getLogger(__name__)


class ProfileService:
    """Reads and writes profiles, the role-bearing side of an account."""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: UUID) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.id == user_id).first()

    def create_profile(
        self,
        user: User,
        full_name: Optional[str] = None,
        role: Role = Role.CUSTOMER,
    ) -> Profile:
        profile = Profile(
            id=user.id,
            email=user.email,
            full_name=full_name,
            role=role.value,
        )
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def ensure_profile(self, user: User) -> Profile:
        """
        Return the user's profile, creating a default customer profile when
        it is missing.
        """
        profile = self.get_profile(user.id)
        if profile is not None:
            return profile

        logger.warning(
            f"[PROFILE] No profile for user {user.id}, creating customer profile"
        )
        return self.create_profile(user, role=Role.CUSTOMER)

    def set_role(self, email: str, role: Role) -> Optional[Profile]:
        """
        Change the role of the profile belonging to ``email``.

        Creates the profile first if the account has none.

        Returns:
            Updated profile, or None if no user has that email
        """
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            return None

        profile = self.ensure_profile(user)
        profile.role = role.value
        self.db.commit()
        self.db.refresh(profile)
        logger.info(f"[PROFILE] {email} is now {role.value}")
        return profile

    def list_members(self, order_by_name: bool = False) -> List[Profile]:
        """Customers, newest first (or alphabetically for pickers)."""
        query = self.db.query(Profile).filter(Profile.role == Role.CUSTOMER.value)
        if order_by_name:
            query = query.order_by(Profile.full_name)
        else:
            query = query.order_by(Profile.created_at.desc())
        return query.all()

    def get_member(self, member_id: UUID) -> Optional[Profile]:
        """A customer profile, or None for unknown ids and admins."""
        return (
            self.db.query(Profile)
            .filter(Profile.id == member_id, Profile.role == Role.CUSTOMER.value)
            .first()
        )

    def list_members_with_stats(self) -> List[Tuple[Profile, int, int]]:
        """
        Customers newest first, each with total and completed assignment
        counts.
        """
        members = self.list_members()
        if not members:
            return []

        # One grouped query instead of one per member
        member_ids = [m.id for m in members]
        rows = (
            self.db.query(
                UserWorkout.user_id,
                func.count(UserWorkout.id),
                func.sum(case((UserWorkout.completed_at.isnot(None), 1), else_=0)),
            )
            .filter(UserWorkout.user_id.in_(member_ids))
            .group_by(UserWorkout.user_id)
            .all()
        )
        counts = {
            user_id: (total, int(completed or 0)) for user_id, total, completed in rows
        }

        return [(m, *counts.get(m.id, (0, 0))) for m in members]
