from .user import User
from .profile import Profile
from .exercise import Exercise
from .workout import Workout, WorkoutExercise
from .assignment import UserWorkout

__all__ = [
    "User",
    "Profile",
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "UserWorkout",
]
