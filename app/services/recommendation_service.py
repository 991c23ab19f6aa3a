"""
Personalized recommendation service.

Users read and dismiss their own recommendations and can generate new
ones from their data:

- volume recommendations that change the volume become ``training``
  recommendations,
- high-priority sleep recommendations become ``recovery`` ones.

A generated recommendation is skipped while one with the same title is
still open (not implemented and not expired).  Professionals write
recommendations for clients and record the outcome.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.recommendation import RecommendationRepository
from app.db.repositories.user import UserRepository
from app.models.recommendation import PersonalizedRecommendation
from app.schemas.recommendation import RecommendationCreate, RecommendationImplement, RecommendationResponse
from app.schemas.sleep import SleepRecommendation
from app.schemas.workout import VolumeRecommendation
from app.services.sleep_service import SleepService
from app.services.volume_service import VolumeService

logger = logging.getLogger(__name__)

_ADJUSTMENT_PRIORITY: dict[str, str] = {
    "deload": "high",
    "decrease": "high",
    "increase": "medium",
}


def _from_volume(rec: VolumeRecommendation) -> dict:
    verb = rec.adjustment_type.capitalize()
    return {
        "type": "training",
        "title": f"{verb} {rec.muscle_group} volume",
        "description": (
            f"{rec.reasoning} Target: {rec.recommended_volume} weekly sets "
            f"(currently {rec.current_volume}) over {rec.timeline_weeks} week(s)."
        ),
        "priority": _ADJUSTMENT_PRIORITY.get(rec.adjustment_type, "medium"),
        "base_reason": f"Volume landmarks ({rec.trend} trend)",
        "data_points": rec.model_dump(),
    }


def _from_sleep(rec: SleepRecommendation) -> dict:
    return {
        "type": "recovery",
        "title": rec.title,
        "description": rec.description,
        "priority": rec.priority,
        "base_reason": f"Sleep profile ({rec.category})",
        "data_points": {
            "category": rec.category,
            "implementation_difficulty": rec.implementation_difficulty,
            "expected_impact": rec.expected_impact,
        },
    }


class RecommendationService:
    """Service for personalized recommendation business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = RecommendationRepository(session)
        self.users = UserRepository(session)

    # ------------------------------------------------------------------
    # User
    # ------------------------------------------------------------------

    def list_for_user(
        self, user_id: int, rec_type: Optional[str] = None, include_expired: bool = False,
    ) -> list[RecommendationResponse]:
        recs = self.repository.get_by_user(user_id, rec_type=rec_type, include_expired=include_expired)
        return [RecommendationResponse.model_validate(r) for r in recs]

    def get(self, user_id: int, rec_id: int) -> RecommendationResponse:
        return RecommendationResponse.model_validate(self._get_owned(user_id, rec_id))

    def delete(self, user_id: int, rec_id: int) -> None:
        self._get_owned(user_id, rec_id)
        self.repository.delete(rec_id)
        logger.info("User %s dismissed recommendation %s", user_id, rec_id)

    def generate(
        self,
        user_id: int,
        as_of: Optional[datetime.date] = None,
        now: Optional[datetime.datetime] = None,
    ) -> list[RecommendationResponse]:
        """Derive recommendations from volume and sleep data.  Returns only the new ones."""
        now = now or datetime.datetime.utcnow()
        expires_at = now + datetime.timedelta(days=settings.RECOMMENDATION_TTL_DAYS)

        candidates = [
            _from_volume(r)
            for r in VolumeService(self.session).get_recommendations(user_id, as_of=as_of)
            if r.adjustment_type != "maintain"
        ]
        candidates += [
            _from_sleep(r)
            for r in SleepService(self.session).get_recommendations(user_id)
            if r.priority == "high"
        ]

        open_titles = self.repository.get_open_titles(user_id, now)
        new_recs = []
        for values in candidates:
            if values["title"] in open_titles:
                continue
            open_titles.add(values["title"])
            new_recs.append(PersonalizedRecommendation(
                user_id=user_id, created_at=now, expires_at=expires_at, **values,
            ))

        if new_recs:
            self.repository.create_many(new_recs)
        logger.info(
            "Generated %d recommendations for user %s (%d candidates)", len(new_recs), user_id, len(candidates),
        )
        return [RecommendationResponse.model_validate(r) for r in new_recs]

    # ------------------------------------------------------------------
    # Professional
    # ------------------------------------------------------------------

    def create_for_client(self, client_id: int, data: RecommendationCreate) -> RecommendationResponse:
        self._get_client(client_id)
        values = data.model_dump()
        if values["expires_at"] is None:
            values["expires_at"] = datetime.datetime.utcnow() + datetime.timedelta(
                days=settings.RECOMMENDATION_TTL_DAYS)
        rec = self.repository.create(PersonalizedRecommendation(user_id=client_id, **values))
        logger.info("Created recommendation %s for client %s", rec.id, client_id)
        return RecommendationResponse.model_validate(rec)

    def list_for_client(self, client_id: int) -> list[RecommendationResponse]:
        self._get_client(client_id)
        recs = self.repository.get_by_user(client_id, include_expired=True)
        return [RecommendationResponse.model_validate(r) for r in recs]

    def implement(self, professional_id: int, rec_id: int, data: RecommendationImplement) -> RecommendationResponse:
        rec = self.repository.get_by_id(rec_id)
        if not rec:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recommendation not found")
        if rec.implemented:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Recommendation already implemented")

        rec.implemented = True
        rec.result = data.result
        rec.implemented_by = professional_id
        rec.implemented_at = datetime.datetime.utcnow()
        rec = self.repository.update(rec)
        logger.info("Recommendation %s marked implemented by %s", rec_id, professional_id)
        return RecommendationResponse.model_validate(rec)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned(self, user_id: int, rec_id: int) -> PersonalizedRecommendation:
        rec = self.repository.get_by_id(rec_id)
        if not rec or rec.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recommendation not found")
        return rec

    def _get_client(self, client_id: int) -> None:
        if not self.users.get_by_id(client_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
