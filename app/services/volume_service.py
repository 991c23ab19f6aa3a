"""
Volume landmark service.

Resolves the experience level (explicit, then the latest training
assessment, then ``intermediate``), records weekly progressions and
maps scoring errors to HTTP 400.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout import TrainingAssessmentRepository, VolumeProgressionRepository
from app.models.workout import VolumeProgression
from app.routinize.muscle_groups import LEVELS, MUSCLE_GROUPS, normalize_muscle_group
from app.routinize.volume_landmarks import (
    adaptation_response,
    compute_volume_landmarks,
    compute_volume_recommendations,
    optimal_volume_for_goal,
    week_start,
)
from app.schemas.workout import (
    MuscleGroupInfo,
    VolumeLandmarksResponse,
    VolumeProgressionCreate,
    VolumeProgressionResponse,
    VolumeRecommendation,
    VolumeTargets,
)

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = "intermediate"


class VolumeService:
    """Service for volume landmark business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.progressions = VolumeProgressionRepository(session)
        self.assessments = TrainingAssessmentRepository(session)

    def resolve_level(self, user_id: int, level: Optional[str] = None) -> str:
        if level is not None:
            return level
        assessment = self.assessments.get_latest(user_id)
        if assessment is not None:
            stored = (assessment.assessment_data or {}).get("experience_level")
            if stored in LEVELS:
                return stored
        return DEFAULT_LEVEL

    def get_landmarks(
        self, user_id: int, level: Optional[str] = None, as_of: Optional[datetime.date] = None,
    ) -> VolumeLandmarksResponse:
        level = self.resolve_level(user_id, level)
        try:
            return compute_volume_landmarks(self.session, user_id, level, as_of or datetime.date.today())
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    def get_recommendations(
        self, user_id: int, level: Optional[str] = None, as_of: Optional[datetime.date] = None,
    ) -> list[VolumeRecommendation]:
        level = self.resolve_level(user_id, level)
        try:
            return compute_volume_recommendations(self.session, user_id, level, as_of or datetime.date.today())
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    def get_targets(
        self, user_id: int, goal: str, muscle_group: str, level: Optional[str] = None,
    ) -> VolumeTargets:
        level = self.resolve_level(user_id, level)
        try:
            return optimal_volume_for_goal(goal, level, muscle_group)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    def record_progression(
        self, user_id: int, data: VolumeProgressionCreate, as_of: Optional[datetime.date] = None,
    ) -> VolumeProgressionResponse:
        try:
            response = adaptation_response(data.sets_performed, data.target_sets, data.fatigue_level)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        entry = VolumeProgression(
            user_id=user_id,
            muscle_group=normalize_muscle_group(data.muscle_group),
            week_start=week_start(as_of or datetime.date.today()),
            sets_performed=data.sets_performed,
            target_sets=data.target_sets,
            adaptation_response=response,
            fatigue_level=data.fatigue_level,
            notes=data.notes,
        )
        entry = self.progressions.create(entry)
        logger.info(
            "Recorded %s progression for user %s week %s: %s",
            entry.muscle_group, user_id, entry.week_start, response,
        )
        return VolumeProgressionResponse.model_validate(entry)

    def get_progressions(
        self, user_id: int, weeks: int = 4, as_of: Optional[datetime.date] = None,
    ) -> list[VolumeProgressionResponse]:
        """Progressions for the last *weeks* weeks (current week included), chronological."""
        until = week_start(as_of or datetime.date.today())
        since = until - datetime.timedelta(weeks=weeks - 1)
        entries = self.progressions.get_between(user_id, since, until)
        return [VolumeProgressionResponse.model_validate(p) for p in entries]

    @staticmethod
    def muscle_groups() -> list[MuscleGroupInfo]:
        return [MuscleGroupInfo(**g.model_dump()) for g in MUSCLE_GROUPS]
