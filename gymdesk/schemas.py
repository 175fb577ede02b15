"""
Request and response models shared by several pages.
"""

from typing import List, Optional
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field

from gymdesk.domain.enums import DifficultyLevel, MuscleGroup


class ProfileResponse(BaseModel):
    id: UUID
    full_name: Optional[str]
    email: Optional[str]
    role: str
    created_at: datetime

    class Config:
        from_attributes = True


class MemberSummary(BaseModel):
    id: UUID
    full_name: Optional[str]
    email: Optional[str]

    class Config:
        from_attributes = True


class ExerciseResponse(BaseModel):
    id: UUID
    name: str
    description: Optional[str]
    muscle_groups: List[str] = []
    equipment: Optional[str]
    difficulty_level: str
    instructions: Optional[str]
    media_url: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class WorkoutSummary(BaseModel):
    id: UUID
    name: str
    description: Optional[str]

    class Config:
        from_attributes = True


class WorkoutResponse(WorkoutSummary):
    created_at: datetime


class WorkoutExerciseResponse(BaseModel):
    id: UUID
    sets: Optional[int]
    reps: Optional[int]
    weight: Optional[float]
    rest_seconds: Optional[int]
    notes: Optional[str]
    order_index: int
    exercise: ExerciseResponse

    class Config:
        from_attributes = True


class AssignmentResponse(BaseModel):
    id: UUID
    user_id: UUID
    assigned_at: datetime
    completed_at: Optional[datetime]
    notes: Optional[str]
    workout: WorkoutSummary

    class Config:
        from_attributes = True


class AssignmentWithMemberResponse(AssignmentResponse):
    profile: MemberSummary


class AssignmentSummary(BaseModel):
    """Counts over a list of assignments."""

    total: int
    completed: int
    pending: int
    completion_rate: int


# Form submissions


class ExerciseForm(BaseModel):
    """Create/edit exercise form."""

    name: str = Field(..., min_length=1, description="Exercise name")
    difficulty_level: DifficultyLevel = Field(..., description="Difficulty level")
    description: Optional[str] = None
    muscle_groups: List[MuscleGroup] = Field(default_factory=list)
    equipment: Optional[str] = Field(
        None, description="Leave empty for bodyweight exercises"
    )
    instructions: Optional[str] = None
    media_url: Optional[str] = Field(
        None, description="Link to a demonstration video or GIF"
    )


class WorkoutExerciseForm(BaseModel):
    """One exercise slot in a workout, in display order."""

    exercise_id: UUID
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    rest_seconds: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class WorkoutForm(BaseModel):
    """Create/edit workout form."""

    name: str = Field(..., min_length=1, description="Workout name")
    description: Optional[str] = None
    exercises: List[WorkoutExerciseForm] = Field(default_factory=list)


class AssignWorkoutForm(BaseModel):
    member_id: UUID = Field(..., description="Member receiving the workout")
    workout_id: UUID = Field(..., description="Workout to assign")
    notes: Optional[str] = Field(
        None, description="Specific instructions for this assignment"
    )
