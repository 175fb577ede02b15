"""
Workout composer pages.
"""

import logging
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from gymdesk.core.errors import PageRedirect
from gymdesk.db.database import get_db
from gymdesk.schemas import (
    ExerciseResponse,
    WorkoutExerciseResponse,
    WorkoutForm,
    WorkoutResponse,
)
from gymdesk.services.exercise_service import ExerciseService
from gymdesk.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)

router = APIRouter()

WORKOUTS_PATH = "/admin/workouts"


class WorkoutWithStats(WorkoutResponse):
    exercise_count: int
    assignment_count: int


class CreateWorkoutPage(BaseModel):
    exercises: List[ExerciseResponse]


class EditWorkoutPage(BaseModel):
    workout: WorkoutResponse
    workout_exercises: List[WorkoutExerciseResponse]
    all_exercises: List[ExerciseResponse]


@router.get("/workouts", response_model=List[WorkoutWithStats])
async def list_workouts(db: Session = Depends(get_db)):
    """Workout library, newest first, with exercise and assignment counts."""
    return [
        WorkoutWithStats(
            id=workout.id,
            name=workout.name,
            description=workout.description,
            created_at=workout.created_at,
            exercise_count=exercise_count,
            assignment_count=assignment_count,
        )
        for workout, exercise_count, assignment_count in WorkoutService(
            db
        ).list_workouts_with_stats()
    ]


@router.get("/workouts/create", response_model=CreateWorkoutPage)
async def create_workout_page(db: Session = Depends(get_db)):
    """Empty workout form with the exercises to choose from."""
    exercises = ExerciseService(db).list_exercises(order_by_name=True)
    return CreateWorkoutPage(
        exercises=[ExerciseResponse.model_validate(ex) for ex in exercises]
    )


@router.post("/workouts/create")
async def create_workout(
    request: WorkoutForm,
    db: Session = Depends(get_db),
):
    """
    Create a workout and its exercise list, then return to the list.

    The form only submits once an exercise is added; an empty list is still
    accepted here.
    """
    try:
        WorkoutService(db).create_workout(
            name=request.name,
            description=request.description,
            exercises=request.exercises,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.exception("[CREATE_WORKOUT] Error creating workout")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create workout: {str(e)}",
        )

    return RedirectResponse(url=WORKOUTS_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/workouts/{workout_id}/edit", response_model=EditWorkoutPage)
async def edit_workout_page(workout_id: UUID, db: Session = Depends(get_db)):
    """Workout form filled with its current exercise list."""
    service = WorkoutService(db)
    workout = service.get_workout(workout_id)
    if workout is None:
        raise PageRedirect(WORKOUTS_PATH)

    return EditWorkoutPage(
        workout=WorkoutResponse.model_validate(workout),
        workout_exercises=[
            WorkoutExerciseResponse.model_validate(we)
            for we in service.get_workout_exercises(workout_id)
        ],
        all_exercises=[
            ExerciseResponse.model_validate(ex)
            for ex in ExerciseService(db).list_exercises(order_by_name=True)
        ],
    )


@router.post("/workouts/{workout_id}/edit")
async def update_workout(
    workout_id: UUID,
    request: WorkoutForm,
    db: Session = Depends(get_db),
):
    """
    Save a workout, replacing its whole exercise list, then return to the
    list.
    """
    try:
        workout = WorkoutService(db).update_workout(
            workout_id,
            name=request.name,
            description=request.description,
            exercises=request.exercises,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.exception(f"[UPDATE_WORKOUT] Error updating workout {workout_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update workout: {str(e)}",
        )

    if workout is None:
        raise PageRedirect(WORKOUTS_PATH)

    return RedirectResponse(url=WORKOUTS_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/workouts/{workout_id}/delete")
async def delete_workout(workout_id: UUID, db: Session = Depends(get_db)):
    """Delete a workout along with its exercise list and assignments."""
    try:
        WorkoutService(db).delete_workout(workout_id)
    except Exception as e:
        logger.exception(f"[DELETE_WORKOUT] Error deleting workout {workout_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete workout: {str(e)}",
        )

    return RedirectResponse(url=WORKOUTS_PATH, status_code=status.HTTP_303_SEE_OTHER)
