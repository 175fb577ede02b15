"""
Completion metrics.

Summarizes assignment lists into the counts shown on dashboards.
"""

import math
from typing import Iterable

from gymdesk.models.assignment import UserWorkout


def completion_rate(completed: int, total: int) -> int:
    """
    Percentage of completed assignments, rounded to the nearest integer.

    Halves round up. Returns 0 when there is nothing to complete.
    """
    if total <= 0:
        return 0
    return int(math.floor(completed * 100 / total + 0.5))


def summarize_assignments(assignments: Iterable[UserWorkout]) -> dict:
    """
    Count total, completed and pending assignments.

    Args:
        assignments: Assignment rows

    Returns:
        Dict with total, completed, pending and completion_rate
    """
    total = 0
    completed = 0
    for assignment in assignments:
        total += 1
        if assignment.completed_at is not None:
            completed += 1

    return {
        "total": total,
        "completed": completed,
        "pending": total - completed,
        "completion_rate": completion_rate(completed, total),
    }
