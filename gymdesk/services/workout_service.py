"""
Workout composer service.

Workouts are saved in separate steps (workout row, then its exercise
slots) without a surrounding transaction. A failure between the steps
leaves the workout row in place and is logged.
"""

import logging
from uuid import UUID
from typing import Optional, List, Sequence, Tuple
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func

from gymdesk.models.assignment import UserWorkout
from gymdesk.models.exercise import Exercise
from gymdesk.models.workout import Workout, WorkoutExercise
from gymdesk.schemas import WorkoutExerciseForm
from gymdesk.services.exercise_service import blank_to_none

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for creating, editing and listing workouts."""

    def __init__(self, db: Session):
        self.db = db

    def list_workouts(self, order_by_name: bool = False) -> List[Workout]:
        query = self.db.query(Workout)
        if order_by_name:
            query = query.order_by(Workout.name)
        else:
            query = query.order_by(Workout.created_at.desc())
        return query.all()

    def list_workouts_with_stats(self) -> List[Tuple[Workout, int, int]]:
        """
        Workouts newest first with their exercise and assignment counts.
        """
        workouts = self.list_workouts()
        if not workouts:
            return []

        workout_ids = [w.id for w in workouts]

        # Batch both counts instead of querying per workout
        exercise_counts = dict(
            self.db.query(WorkoutExercise.workout_id, func.count(WorkoutExercise.id))
            .filter(WorkoutExercise.workout_id.in_(workout_ids))
            .group_by(WorkoutExercise.workout_id)
            .all()
        )
        assignment_counts = dict(
            self.db.query(UserWorkout.workout_id, func.count(UserWorkout.id))
            .filter(UserWorkout.workout_id.in_(workout_ids))
            .group_by(UserWorkout.workout_id)
            .all()
        )

        return [
            (w, exercise_counts.get(w.id, 0), assignment_counts.get(w.id, 0))
            for w in workouts
        ]

    def get_workout(self, workout_id: UUID) -> Optional[Workout]:
        return self.db.query(Workout).filter(Workout.id == workout_id).first()

    def get_workout_exercises(self, workout_id: UUID) -> List[WorkoutExercise]:
        """Exercise slots of a workout in execution order."""
        return (
            self.db.query(WorkoutExercise)
            .options(joinedload(WorkoutExercise.exercise))
            .filter(WorkoutExercise.workout_id == workout_id)
            .order_by(WorkoutExercise.order_index)
            .all()
        )

    def create_workout(
        self,
        name: str,
        description: Optional[str],
        exercises: Sequence[WorkoutExerciseForm],
    ) -> Workout:
        """
        Create a workout and its exercise slots.

        An empty exercise list is accepted.

        Raises:
            ValueError: If name is empty or an exercise does not exist
        """
        if not name:
            raise ValueError("Workout name is required")
        self._check_exercises_exist(exercises)

        workout = Workout(name=name, description=blank_to_none(description))
        self.db.add(workout)
        self.db.commit()
        self.db.refresh(workout)
        logger.info(f"[CREATE_WORKOUT] Created workout {workout.id} ({name})")

        try:
            self._insert_exercises(workout.id, exercises)
        except Exception:
            self.db.rollback()
            logger.exception(
                f"[CREATE_WORKOUT] Workout {workout.id} saved without exercises"
            )
            raise

        return workout

    def update_workout(
        self,
        workout_id: UUID,
        name: str,
        description: Optional[str],
        exercises: Sequence[WorkoutExerciseForm],
    ) -> Optional[Workout]:
        """
        Update a workout and replace all of its exercise slots.

        Existing slots are deleted and the submitted list is inserted with
        order_index equal to list position.

        Returns:
            Updated workout, or None if it does not exist

        Raises:
            ValueError: If name is empty or an exercise does not exist
        """
        if not name:
            raise ValueError("Workout name is required")

        workout = self.get_workout(workout_id)
        if workout is None:
            return None
        self._check_exercises_exist(exercises)

        workout.name = name
        workout.description = blank_to_none(description)
        self.db.commit()

        removed = (
            self.db.query(WorkoutExercise)
            .filter(WorkoutExercise.workout_id == workout_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info(
            f"[UPDATE_WORKOUT] Removed {removed} exercise(s) from workout {workout_id}"
        )

        try:
            self._insert_exercises(workout_id, exercises)
        except Exception:
            self.db.rollback()
            logger.exception(
                f"[UPDATE_WORKOUT] Workout {workout_id} left without exercises"
            )
            raise

        self.db.refresh(workout)
        return workout

    def delete_workout(self, workout_id: UUID) -> bool:
        """
        Delete a workout. Its exercise slots and assignments cascade.

        Returns:
            True if a row was deleted
        """
        deleted = (
            self.db.query(Workout)
            .filter(Workout.id == workout_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()

        if deleted:
            logger.info(f"[DELETE_WORKOUT] Deleted workout {workout_id}")
        return bool(deleted)

    def _insert_exercises(
        self, workout_id: UUID, exercises: Sequence[WorkoutExerciseForm]
    ) -> None:
        if not exercises:
            return

        rows = [
            WorkoutExercise(
                workout_id=workout_id,
                exercise_id=item.exercise_id,
                sets=item.sets,
                reps=item.reps,
                weight=item.weight,
                rest_seconds=item.rest_seconds,
                notes=blank_to_none(item.notes),
                order_index=index,
            )
            for index, item in enumerate(exercises)
        ]
        self.db.add_all(rows)
        self.db.commit()

    def _check_exercises_exist(self, exercises: Sequence[WorkoutExerciseForm]) -> None:
        exercise_ids = {item.exercise_id for item in exercises}
        if not exercise_ids:
            return

        found = {
            row.id
            for row in self.db.query(Exercise.id)
            .filter(Exercise.id.in_(exercise_ids))
            .all()
        }
        missing = exercise_ids - found
        if missing:
            raise ValueError(
                f"Unknown exercise id(s): {', '.join(sorted(str(m) for m in missing))}"
            )
