"""
Workout routine service.

Routines are owned by one user.  Templates (``is_template``) are
readable by everyone but only their owner may change them.  At most
one routine per user is active.
"""

import datetime
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout import WorkoutRoutineRepository, WorkoutSessionRepository
from app.models.workout import WorkoutRoutine
from app.schemas.workout import WorkoutRoutineCreate, WorkoutRoutineResponse, WorkoutRoutineUpdate

logger = logging.getLogger(__name__)


class WorkoutRoutineService:
    """Service for workout routine business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutRoutineRepository(session)
        self.sessions = WorkoutSessionRepository(session)

    def create(self, user_id: int, data: WorkoutRoutineCreate) -> WorkoutRoutineResponse:
        routine = WorkoutRoutine(user_id=user_id, **data.model_dump())
        routine = self.repository.create(routine)
        logger.info("Created routine %s '%s' for user %s", routine.id, routine.name, user_id)
        return WorkoutRoutineResponse.model_validate(routine)

    def list_own(self, user_id: int) -> list[WorkoutRoutineResponse]:
        return [WorkoutRoutineResponse.model_validate(r) for r in self.repository.get_by_user(user_id)]

    def list_templates(self) -> list[WorkoutRoutineResponse]:
        return [WorkoutRoutineResponse.model_validate(r) for r in self.repository.get_templates()]

    def get_active(self, user_id: int) -> WorkoutRoutineResponse:
        routine = self.repository.get_active(user_id)
        if routine is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active routine")
        return WorkoutRoutineResponse.model_validate(routine)

    def get(self, user_id: int, routine_id: int) -> WorkoutRoutineResponse:
        return WorkoutRoutineResponse.model_validate(self.get_readable(user_id, routine_id))

    def update(self, user_id: int, routine_id: int, data: WorkoutRoutineUpdate) -> WorkoutRoutineResponse:
        routine = self._get_editable(user_id, routine_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(routine, key, value)
        routine.updated_at = datetime.datetime.utcnow()
        routine = self.repository.update(routine)
        logger.info("Updated routine %s for user %s", routine_id, user_id)
        return WorkoutRoutineResponse.model_validate(routine)

    def delete(self, user_id: int, routine_id: int) -> None:
        self._get_editable(user_id, routine_id)
        self.sessions.clear_routine(routine_id)
        self.repository.delete(routine_id)
        logger.info("Deleted routine %s for user %s", routine_id, user_id)

    def activate(self, user_id: int, routine_id: int) -> WorkoutRoutineResponse:
        routine = self._get_editable(user_id, routine_id)
        routine = self.repository.activate(routine)
        logger.info("Activated routine %s for user %s", routine_id, user_id)
        return WorkoutRoutineResponse.model_validate(routine)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_readable(self, user_id: int, routine_id: int) -> WorkoutRoutine:
        """Routine owned by *user_id* or a template."""
        routine = self.repository.get_by_id(routine_id)
        if not routine:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Routine not found")
        if routine.user_id != user_id and not routine.is_template:
            logger.warning("User %s denied read access to routine %s", user_id, routine_id)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to access this routine")
        return routine

    def _get_editable(self, user_id: int, routine_id: int) -> WorkoutRoutine:
        routine = self.repository.get_by_id(routine_id)
        if not routine:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Routine not found")
        if routine.user_id != user_id:
            logger.warning("User %s denied write access to routine %s", user_id, routine_id)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to modify this routine")
        return routine
