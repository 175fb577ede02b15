"""
Domain vocabularies shared by models, services and routes.
"""

from enum import Enum


class Role(str, Enum):
    """Profile role flag. Decides which pages a caller may open."""

    ADMIN = "admin"
    CUSTOMER = "customer"


class DifficultyLevel(str, Enum):
    """Exercise difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class MuscleGroup(str, Enum):
    """Muscle groups an exercise can be tagged with."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    CORE = "core"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CARDIO = "cardio"
