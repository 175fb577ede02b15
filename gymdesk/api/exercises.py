"""
Exercise catalog pages.
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
from gymdesk.domain.enums import DifficultyLevel, MuscleGroup
from gymdesk.schemas import ExerciseForm, ExerciseResponse
from gymdesk.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)

router = APIRouter()

EXERCISES_PATH = "/admin/exercises"


class ExerciseFormOptions(BaseModel):
    """Choices offered by the exercise form."""

    muscle_groups: List[str]
    difficulty_levels: List[str]


class EditExercisePage(BaseModel):
    exercise: ExerciseResponse
    options: ExerciseFormOptions


def _form_options() -> ExerciseFormOptions:
    return ExerciseFormOptions(
        muscle_groups=[g.value for g in MuscleGroup],
        difficulty_levels=[d.value for d in DifficultyLevel],
    )


@router.get("/exercises", response_model=List[ExerciseResponse])
async def list_exercises(db: Session = Depends(get_db)):
    """Exercise library, newest first."""
    return [
        ExerciseResponse.model_validate(ex)
        for ex in ExerciseService(db).list_exercises()
    ]


@router.get("/exercises/create", response_model=ExerciseFormOptions)
async def create_exercise_page():
    """Empty exercise form."""
    return _form_options()


@router.post("/exercises/create")
async def create_exercise(
    request: ExerciseForm,
    db: Session = Depends(get_db),
):
    """Add an exercise to the library, then return to the list."""
    try:
        ExerciseService(db).create_exercise(
            name=request.name,
            difficulty_level=request.difficulty_level,
            description=request.description,
            muscle_groups=request.muscle_groups,
            equipment=request.equipment,
            instructions=request.instructions,
            media_url=request.media_url,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.exception("[CREATE_EXERCISE] Error creating exercise")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create exercise: {str(e)}",
        )

    return RedirectResponse(url=EXERCISES_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/exercises/{exercise_id}/edit", response_model=EditExercisePage)
async def edit_exercise_page(exercise_id: UUID, db: Session = Depends(get_db)):
    """Exercise form filled with the current values."""
    exercise = ExerciseService(db).get_exercise(exercise_id)
    if exercise is None:
        raise PageRedirect(EXERCISES_PATH)

    return EditExercisePage(
        exercise=ExerciseResponse.model_validate(exercise),
        options=_form_options(),
    )


@router.post("/exercises/{exercise_id}/edit")
async def update_exercise(
    exercise_id: UUID,
    request: ExerciseForm,
    db: Session = Depends(get_db),
):
    """Save exercise changes, then return to the list."""
    try:
        exercise = ExerciseService(db).update_exercise(
            exercise_id,
            name=request.name,
            difficulty_level=request.difficulty_level,
            description=request.description,
            muscle_groups=request.muscle_groups,
            equipment=request.equipment,
            instructions=request.instructions,
            media_url=request.media_url,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.exception(f"[UPDATE_EXERCISE] Error updating exercise {exercise_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update exercise: {str(e)}",
        )

    if exercise is None:
        raise PageRedirect(EXERCISES_PATH)

    return RedirectResponse(url=EXERCISES_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/exercises/{exercise_id}/delete")
async def delete_exercise(exercise_id: UUID, db: Session = Depends(get_db)):
    """
    Delete an exercise, even if workouts still use it.
    """
    try:
        ExerciseService(db).delete_exercise(exercise_id)
    except Exception as e:
        logger.exception(f"[DELETE_EXERCISE] Error deleting exercise {exercise_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete exercise: {str(e)}",
        )

    return RedirectResponse(url=EXERCISES_PATH, status_code=status.HTTP_303_SEE_OTHER)
