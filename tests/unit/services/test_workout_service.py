"""
Unit tests for WorkoutService.

Covers the two-step create, the replace-all edit and cascading deletes.
"""

from uuid import uuid4
from datetime import datetime, timezone
import pytest

from gymdesk.models.assignment import UserWorkout
from gymdesk.models.workout import Workout, WorkoutExercise
from gymdesk.schemas import WorkoutExerciseForm
from gymdesk.services.workout_service import WorkoutService


def _slots(test_db, workout_id):
    test_db.expire_all()
    return (
        test_db.query(WorkoutExercise)
        .filter(WorkoutExercise.workout_id == workout_id)
        .order_by(WorkoutExercise.order_index)
        .all()
    )


class TestCreateWorkout:
    """Tests for create_workout."""

    def test_create_assigns_order_by_position(self, test_db, make_exercise):
        bench = make_exercise("Bench Press")
        row = make_exercise("Barbell Row")
        service = WorkoutService(test_db)

        workout = service.create_workout(
            name="Upper Body",
            description="Push and pull",
            exercises=[
                WorkoutExerciseForm(exercise_id=row.id, sets=4, reps=8, weight=60.0),
                WorkoutExerciseForm(exercise_id=bench.id, sets=3, reps=10, rest_seconds=90),
            ],
        )

        slots = _slots(test_db, workout.id)
        assert [s.exercise_id for s in slots] == [row.id, bench.id]
        assert [s.order_index for s in slots] == [0, 1]
        assert slots[0].weight == 60.0
        assert slots[1].rest_seconds == 90

    def test_create_without_exercises_is_accepted(self, test_db):
        workout = WorkoutService(test_db).create_workout(
            name="Rest Day", description=None, exercises=[]
        )

        assert test_db.query(Workout).filter(Workout.id == workout.id).count() == 1
        assert _slots(test_db, workout.id) == []

    def test_blank_description_stored_as_null(self, test_db):
        workout = WorkoutService(test_db).create_workout(
            name="Mobility", description="", exercises=[]
        )
        assert workout.description is None

    def test_unknown_exercise_rejected_before_writing(self, test_db):
        with pytest.raises(ValueError, match="Unknown exercise"):
            WorkoutService(test_db).create_workout(
                name="Broken",
                description=None,
                exercises=[WorkoutExerciseForm(exercise_id=uuid4())],
            )

        assert test_db.query(Workout).count() == 0

    def test_failure_after_first_write_leaves_workout(
        self, test_db, make_exercise, monkeypatch
    ):
        """The workout row is kept when saving its exercises fails."""
        squat = make_exercise("Squat")
        service = WorkoutService(test_db)

        def _fail(workout_id, exercises):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(service, "_insert_exercises", _fail)

        with pytest.raises(RuntimeError):
            service.create_workout(
                name="Leg Day",
                description=None,
                exercises=[WorkoutExerciseForm(exercise_id=squat.id)],
            )

        workout = test_db.query(Workout).filter(Workout.name == "Leg Day").first()
        assert workout is not None
        assert _slots(test_db, workout.id) == []


class TestUpdateWorkout:
    """Tests for update_workout."""

    def test_update_replaces_all_slots(self, test_db, make_exercise, make_workout):
        """After an edit the slots exactly match the submitted list."""
        a = make_exercise("A")
        b = make_exercise("B")
        c = make_exercise("C")
        workout = make_workout("Full Body", [a, b, c])

        WorkoutService(test_db).update_workout(
            workout.id,
            name="Full Body v2",
            description="Shorter",
            exercises=[
                WorkoutExerciseForm(exercise_id=c.id, sets=5),
                WorkoutExerciseForm(exercise_id=a.id, sets=2),
            ],
        )

        slots = _slots(test_db, workout.id)
        assert [s.exercise_id for s in slots] == [c.id, a.id]
        assert [s.order_index for s in slots] == [0, 1]
        assert [s.sets for s in slots] == [5, 2]
        assert test_db.query(WorkoutExercise).count() == 2

        refreshed = test_db.query(Workout).filter(Workout.id == workout.id).first()
        assert refreshed.name == "Full Body v2"
        assert refreshed.description == "Shorter"

    def test_update_with_empty_list_clears_slots(
        self, test_db, make_exercise, make_workout
    ):
        workout = make_workout("Temp", [make_exercise("A")])

        WorkoutService(test_db).update_workout(
            workout.id, name="Temp", description=None, exercises=[]
        )

        assert _slots(test_db, workout.id) == []

    def test_update_missing_workout_returns_none(self, test_db):
        result = WorkoutService(test_db).update_workout(
            uuid4(), name="Ghost", description=None, exercises=[]
        )
        assert result is None

    def test_update_leaves_other_workouts_alone(
        self, test_db, make_exercise, make_workout
    ):
        a = make_exercise("A")
        first = make_workout("First", [a])
        second = make_workout("Second", [a])

        WorkoutService(test_db).update_workout(
            first.id, name="First", description=None, exercises=[]
        )

        assert len(_slots(test_db, second.id)) == 1


class TestDeleteWorkout:
    """Tests for delete_workout."""

    def test_delete_cascades_slots_and_assignments(
        self, test_db, make_exercise, make_workout, member_account, make_assignment
    ):
        workout = make_workout("Doomed", [make_exercise("A"), make_exercise("B")])
        make_assignment(member_account[1], workout)

        assert WorkoutService(test_db).delete_workout(workout.id) is True

        test_db.expire_all()
        assert test_db.query(Workout).count() == 0
        assert test_db.query(WorkoutExercise).count() == 0
        assert test_db.query(UserWorkout).count() == 0

    def test_delete_missing_returns_false(self, test_db):
        assert WorkoutService(test_db).delete_workout(uuid4()) is False


class TestListWorkouts:
    """Tests for list_workouts_with_stats."""

    def test_counts_per_workout_newest_first(
        self, test_db, make_exercise, make_workout, member_account, make_assignment
    ):
        a = make_exercise("A")
        b = make_exercise("B")
        older = make_workout(
            "Older", [a, b], created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)
        )
        newer = make_workout(
            "Newer", [], created_at=datetime(2024, 2, 1, tzinfo=timezone.utc)
        )
        make_assignment(member_account[1], older)
        make_assignment(member_account[1], older)

        rows = WorkoutService(test_db).list_workouts_with_stats()

        assert [(w.name, ex, asg) for w, ex, asg in rows] == [
            ("Newer", 0, 0),
            ("Older", 2, 2),
        ]
        assert rows[0][0].id == newer.id
