"""
Sleep service.

Nightly entries (date-keyed upsert), the sleep profile with its score
and recommendations, and sleep goals.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.sleep import SleepRepository
from app.models.sleep import SleepAssessment, SleepEntry, SleepGoal
from app.routinize.sleep_score import (
    build_sleep_recommendations,
    compute_sleep_score,
    compute_sleep_stats,
    default_profile,
    duration_between,
)
from app.schemas.sleep import (
    SleepAssessmentCreate,
    SleepAssessmentResponse,
    SleepEntryCreate,
    SleepEntryResponse,
    SleepGoalResponse,
    SleepGoalUpdate,
    SleepProfile,
    SleepRecommendation,
    SleepScoreResponse,
    SleepStatsResponse,
)

logger = logging.getLogger(__name__)


class SleepService:
    """Service for sleep business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = SleepRepository(session)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def upsert_entry(
        self, user_id: int, date: datetime.date, data: SleepEntryCreate,
    ) -> tuple[SleepEntryResponse, bool]:
        """Create or merge the entry for *date*.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        values = data.model_dump(exclude_unset=True)
        if data.duration_min is None:
            values["duration_min"] = duration_between(data.bed_time, data.wake_time)

        existing = self.repository.get_by_user_and_date(user_id, date)
        if existing:
            for key, value in values.items():
                if value is not None:
                    setattr(existing, key, value)
            existing.updated_at = datetime.datetime.utcnow()
            entry = self.repository.save_entry(existing)
            logger.info("Updated sleep entry %s for user %s", date, user_id)
            return SleepEntryResponse.model_validate(entry), False

        entry = SleepEntry(user_id=user_id, date=date, **values)
        entry = self.repository.save_entry(entry)
        logger.info("Logged sleep entry %s for user %s", date, user_id)
        return SleepEntryResponse.model_validate(entry), True

    def get_entries(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        limit: Optional[int] = None,
    ) -> list[SleepEntryResponse]:
        entries = self.repository.get_entries(user_id, start=start, end=end, limit=limit)
        return [SleepEntryResponse.model_validate(e) for e in entries]

    def get_entry(self, user_id: int, date: datetime.date) -> SleepEntryResponse:
        return SleepEntryResponse.model_validate(self._get_entry_or_404(user_id, date))

    def delete_entry(self, user_id: int, date: datetime.date) -> None:
        entry = self._get_entry_or_404(user_id, date)
        self.repository.delete_entry(entry)
        logger.info("Deleted sleep entry %s for user %s", date, user_id)

    def get_stats(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
    ) -> SleepStatsResponse:
        return compute_sleep_stats(self.session, user_id, start, end)

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def create_assessment(self, user_id: int, data: SleepAssessmentCreate) -> SleepAssessmentResponse:
        assessment = SleepAssessment(user_id=user_id, **data.model_dump())
        assessment = self.repository.create_assessment(assessment)
        logger.info("Stored sleep assessment %s for user %s", assessment.id, user_id)
        return SleepAssessmentResponse.model_validate(assessment)

    def get_profile(self, user_id: int) -> SleepAssessmentResponse:
        """Latest assessment, or the default profile when none exists."""
        assessment = self.repository.get_latest_assessment(user_id)
        if assessment is None:
            return SleepAssessmentResponse(**default_profile().model_dump(), is_default=True)
        return SleepAssessmentResponse.model_validate(assessment)

    def get_score(self, user_id: int, as_of: Optional[datetime.date] = None) -> SleepScoreResponse:
        profile = self.get_profile(user_id)
        return compute_sleep_score(self.session, user_id, profile, as_of or datetime.date.today())

    def get_recommendations(self, user_id: int) -> list[SleepRecommendation]:
        profile: SleepProfile = self.get_profile(user_id)
        return build_sleep_recommendations(profile)

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------

    def set_goal(self, user_id: int, data: SleepGoalUpdate) -> SleepGoalResponse:
        goal = self.repository.get_goal(user_id)
        if goal is None:
            goal = SleepGoal(user_id=user_id, **data.model_dump())
        else:
            for key, value in data.model_dump().items():
                setattr(goal, key, value)
            goal.updated_at = datetime.datetime.utcnow()
        goal = self.repository.save_goal(goal)
        logger.info("Saved sleep goal for user %s", user_id)
        return SleepGoalResponse.model_validate(goal)

    def get_goal(self, user_id: int) -> SleepGoalResponse:
        goal = self.repository.get_goal(user_id)
        if goal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No sleep goal set")
        return SleepGoalResponse.model_validate(goal)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry_or_404(self, user_id: int, date: datetime.date) -> SleepEntry:
        entry = self.repository.get_by_user_and_date(user_id, date)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No sleep entry for {date}")
        return entry
