"""
Workout session service.

Logged workouts plus simple totals.  A session may reference a routine
the user can read (own or template).
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout import WorkoutSessionRepository
from app.models.workout import WorkoutSession
from app.schemas.workout import WorkoutSessionCreate, WorkoutSessionResponse, WorkoutStatsResponse
from app.services.workout_routine_service import WorkoutRoutineService

logger = logging.getLogger(__name__)

DEFAULT_RANGE_DAYS = 30


class WorkoutSessionService:
    """Service for workout session business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutSessionRepository(session)
        self.routines = WorkoutRoutineService(session)

    def create(self, user_id: int, data: WorkoutSessionCreate) -> WorkoutSessionResponse:
        if data.routine_id is not None:
            self.routines.get_readable(user_id, data.routine_id)

        entry = WorkoutSession(user_id=user_id, **data.model_dump())
        entry = self.repository.create(entry)
        logger.info("Logged workout %s on %s for user %s", entry.id, entry.date, user_id)
        return WorkoutSessionResponse.model_validate(entry)

    def get_range(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
    ) -> list[WorkoutSessionResponse]:
        """Sessions in ``[start, end]``, most recent first.  Defaults to the last 30 days."""
        end = end or datetime.date.today()
        start = start or end - datetime.timedelta(days=DEFAULT_RANGE_DAYS)
        if start > end:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must not be after end")
        entries = self.repository.get_by_user_date_range(user_id, start, end)
        return [WorkoutSessionResponse.model_validate(e) for e in entries]

    def get_by_id(self, user_id: int, entry_id: int) -> WorkoutSessionResponse:
        return WorkoutSessionResponse.model_validate(self._get_owned_entry(user_id, entry_id))

    def delete(self, user_id: int, entry_id: int) -> None:
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("Deleted workout %s for user %s", entry_id, user_id)

    def get_stats(self, user_id: int, today: Optional[datetime.date] = None) -> WorkoutStatsResponse:
        today = today or datetime.date.today()
        entries = self.repository.get_all_by_user(user_id)
        return WorkoutStatsResponse(
            total_sessions=len(entries),
            total_duration_min=sum(e.duration_min for e in entries),
            total_sets=sum(len(ex.get("sets") or []) for e in entries for ex in e.exercises or []),
            sessions_last_7_days=self.repository.count_between(
                user_id, today - datetime.timedelta(days=6), today,
            ),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_entry(self, user_id: int, entry_id: int) -> WorkoutSession:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout session not found")
        return entry
