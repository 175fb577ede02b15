"""
Exercise catalog service.

Handles CRUD operations for exercises.
"""

import logging
from uuid import UUID
from typing import Optional, List, Iterable
from sqlalchemy.orm import Session

from gymdesk.domain.enums import DifficultyLevel
from gymdesk.models.exercise import Exercise

logger = logging.getLogger(__name__)


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Empty form fields are stored as NULL."""
    if value is None:
        return None
    return value if value.strip() else None


class ExerciseService:
    """Service for managing the exercise catalog."""

    def __init__(self, db: Session):
        self.db = db

    def list_exercises(self, order_by_name: bool = False) -> List[Exercise]:
        """
        Get all exercises.

        Args:
            order_by_name: Alphabetical order (for pickers) instead of newest first
        """
        query = self.db.query(Exercise)
        if order_by_name:
            query = query.order_by(Exercise.name)
        else:
            query = query.order_by(Exercise.created_at.desc())
        return query.all()

    def get_exercise(self, exercise_id: UUID) -> Optional[Exercise]:
        return self.db.query(Exercise).filter(Exercise.id == exercise_id).first()

    def create_exercise(
        self,
        name: str,
        difficulty_level: DifficultyLevel,
        description: Optional[str] = None,
        muscle_groups: Optional[Iterable[str]] = None,
        equipment: Optional[str] = None,
        instructions: Optional[str] = None,
        media_url: Optional[str] = None,
    ) -> Exercise:
        """
        Create a catalog entry.

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("Exercise name is required")

        exercise = Exercise(
            name=name,
            difficulty_level=DifficultyLevel(difficulty_level).value,
            description=blank_to_none(description),
            muscle_groups=_muscle_group_values(muscle_groups),
            equipment=blank_to_none(equipment),
            instructions=blank_to_none(instructions),
            media_url=blank_to_none(media_url),
        )
        self.db.add(exercise)
        self.db.commit()
        self.db.refresh(exercise)

        logger.info(f"[CREATE_EXERCISE] Created exercise {exercise.id} ({name})")
        return exercise

    def update_exercise(
        self,
        exercise_id: UUID,
        name: str,
        difficulty_level: DifficultyLevel,
        description: Optional[str] = None,
        muscle_groups: Optional[Iterable[str]] = None,
        equipment: Optional[str] = None,
        instructions: Optional[str] = None,
        media_url: Optional[str] = None,
    ) -> Optional[Exercise]:
        """
        Overwrite every editable field of an exercise.

        Returns:
            Updated exercise, or None if it does not exist

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("Exercise name is required")

        exercise = self.get_exercise(exercise_id)
        if exercise is None:
            return None

        exercise.name = name
        exercise.difficulty_level = DifficultyLevel(difficulty_level).value
        exercise.description = blank_to_none(description)
        exercise.muscle_groups = _muscle_group_values(muscle_groups)
        exercise.equipment = blank_to_none(equipment)
        exercise.instructions = blank_to_none(instructions)
        exercise.media_url = blank_to_none(media_url)

        self.db.commit()
        self.db.refresh(exercise)
        return exercise

    def delete_exercise(self, exercise_id: UUID) -> bool:
        """
        Delete an exercise.

        Workouts that use it are not consulted; the database drops their
        workout_exercises rows.

        Returns:
            True if a row was deleted
        """
        deleted = (
            self.db.query(Exercise)
            .filter(Exercise.id == exercise_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()

        if deleted:
            logger.info(f"[DELETE_EXERCISE] Deleted exercise {exercise_id}")
        return bool(deleted)


def _muscle_group_values(muscle_groups: Optional[Iterable[str]]) -> List[str]:
    values = []
    for group in muscle_groups or []:
        value = getattr(group, "value", group)
        if value not in values:
            values.append(value)
    return values
