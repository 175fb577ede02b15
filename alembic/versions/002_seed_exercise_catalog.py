"""Seed a starter exercise catalog

Revision ID: 002_seed_exercise_catalog
Revises: 001_create_gym_schema

"""

from typing import Sequence, Union
import uuid

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002_seed_exercise_catalog"
down_revision: Union[str, None] = "001_create_gym_schema"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Fixed UUIDs so seeded rows can be found again on downgrade
EXERCISES = [
    (
        uuid.UUID("00000000-0000-0000-0000-000000000001"),
        "Push-ups",
        ["chest", "triceps", "shoulders"],
        None,
        "beginner",
        "Hands under shoulders, lower your chest to the floor and press back up.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000002"),
        "Bench Press",
        ["chest", "triceps"],
        "Barbell",
        "intermediate",
        "Lower the bar to mid-chest with control, then press to lockout.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000003"),
        "Barbell Squat",
        ["quadriceps", "glutes", "hamstrings"],
        "Barbell",
        "intermediate",
        "Brace, sit down between your heels until thighs are parallel, stand up.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000004"),
        "Deadlift",
        ["back", "hamstrings", "glutes"],
        "Barbell",
        "advanced",
        "Keep the bar over mid-foot, hinge at the hips and stand tall.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000005"),
        "Pull-ups",
        ["back", "biceps"],
        "Pull-up bar",
        "intermediate",
        "From a dead hang, pull until your chin clears the bar.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000006"),
        "Overhead Press",
        ["shoulders", "triceps"],
        "Barbell",
        "intermediate",
        "Press the bar from the front rack to overhead, squeezing glutes.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000007"),
        "Dumbbell Curl",
        ["biceps", "forearms"],
        "Dumbbells",
        "beginner",
        "Curl the dumbbells keeping elbows pinned to your sides.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000008"),
        "Walking Lunges",
        ["quadriceps", "glutes"],
        None,
        "beginner",
        "Step forward, drop the back knee toward the floor, alternate legs.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-000000000009"),
        "Standing Calf Raises",
        ["calves"],
        None,
        "beginner",
        "Rise onto the balls of your feet, pause, lower slowly.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-00000000000a"),
        "Plank",
        ["core"],
        None,
        "beginner",
        "Hold a straight line from head to heels on forearms and toes.",
    ),
    (
        uuid.UUID("00000000-0000-0000-0000-00000000000b"),
        "Rowing Machine",
        ["cardio", "back"],
        "Rower",
        "beginner",
        "Drive with the legs, then lean back and pull the handle to your ribs.",
    ),
]


def upgrade() -> None:
    connection = op.get_bind()
    for exercise_id, name, muscle_groups, equipment, difficulty, instructions in EXERCISES:
        connection.execute(
            sa.text(
                """
                INSERT INTO exercises
                    (id, name, muscle_groups, equipment, difficulty_level, instructions, created_at)
                VALUES
                    (:id, :name, :muscle_groups, :equipment, :difficulty_level, :instructions, now())
                """
            ),
            {
                "id": str(exercise_id),
                "name": name,
                "muscle_groups": muscle_groups,
                "equipment": equipment,
                "difficulty_level": difficulty,
                "instructions": instructions,
            },
        )


def downgrade() -> None:
    connection = op.get_bind()
    connection.execute(
        sa.text("DELETE FROM exercises WHERE id = ANY(CAST(:ids AS uuid[]))"),
        {"ids": [str(e[0]) for e in EXERCISES]},
    )
