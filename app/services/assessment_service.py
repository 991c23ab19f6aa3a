"""
Training assessment service.
"""

import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout import TrainingAssessmentRepository
from app.models.workout import TrainingAssessment
from app.schemas.workout import TrainingAssessmentCreate, TrainingAssessmentResponse

logger = logging.getLogger(__name__)


class AssessmentService:
    """Service for training assessments."""

    def __init__(self, session: Session):
        self.repository = TrainingAssessmentRepository(session)

    def create(self, user_id: int, data: TrainingAssessmentCreate) -> TrainingAssessmentResponse:
        assessment = self.repository.create(TrainingAssessment(user_id=user_id, assessment_data=data.assessment_data))
        logger.info("Stored training assessment %s for user %s", assessment.id, user_id)
        return TrainingAssessmentResponse.model_validate(assessment)

    def get_latest(self, user_id: int) -> TrainingAssessmentResponse:
        assessment = self.repository.get_latest(user_id)
        if assessment is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No training assessment found")
        return TrainingAssessmentResponse.model_validate(assessment)

    def get_history(self, user_id: int) -> list[TrainingAssessmentResponse]:
        return [TrainingAssessmentResponse.model_validate(a) for a in self.repository.get_all_by_user(user_id)]
