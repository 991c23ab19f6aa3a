"""
Training assessment endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.workout import TrainingAssessmentCreate, TrainingAssessmentResponse
from app.services.assessment_service import AssessmentService

router = APIRouter()


@router.post("", summary="Store a training assessment.", response_model=TrainingAssessmentResponse,
             status_code=status.HTTP_201_CREATED, )
def create_assessment(data: TrainingAssessmentCreate, db: Session = Depends(get_db),
                      user: User = Depends(get_current_user), ):
    service = AssessmentService(db)
    return service.create(user.id, data)


@router.get("", summary="Assessment history (newest first).", response_model=list[TrainingAssessmentResponse], )
def list_assessments(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = AssessmentService(db)
    return service.get_history(user.id)


@router.get("/latest", summary="Latest training assessment.", response_model=TrainingAssessmentResponse, )
def get_latest(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = AssessmentService(db)
    return service.get_latest(user.id)
