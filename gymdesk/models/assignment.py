from sqlalchemy import Column, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
from gymdesk.db.database import Base
from gymdesk.db.types import GUID


class UserWorkout(Base):
    """A workout assigned to a member. Pending until completed_at is set."""

    __tablename__ = "user_workouts"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        GUID(),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    workout_id = Column(
        GUID(),
        ForeignKey("workouts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    assigned_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    completed_at = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)

    workout = relationship("Workout")
    profile = relationship("Profile")

    __table_args__ = (
        Index("idx_user_workouts_user_assigned", "user_id", "assigned_at"),
    )
