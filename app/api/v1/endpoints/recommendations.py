"""
Personalized recommendation endpoints.

``/clients/...`` and ``/{id}/implement`` are for professionals.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_superuser, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.recommendation import (
    RecommendationCreate,
    RecommendationImplement,
    RecommendationResponse,
    RecommendationType,
)
from app.services.recommendation_service import RecommendationService

router = APIRouter()


@router.get("", summary="List own recommendations.", response_model=list[RecommendationResponse], )
def list_recommendations(type: Optional[RecommendationType] = Query(None, description="Filter by type"),
                         include_expired: bool = Query(False),
                         db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecommendationService(db)
    return service.list_for_user(user.id, type, include_expired)


@router.post("/generate", summary="Generate recommendations from training and sleep data.",
             response_model=list[RecommendationResponse], status_code=status.HTTP_201_CREATED, )
def generate_recommendations(as_of: Optional[datetime.date] = Query(None, description="Reference date"),
                             db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecommendationService(db)
    return service.generate(user.id, as_of)


@router.post("/clients/{client_id}", summary="Write a recommendation for a client.",
             response_model=RecommendationResponse, status_code=status.HTTP_201_CREATED, )
def create_for_client(client_id: int, data: RecommendationCreate, db: Session = Depends(get_db),
                      user: User = Depends(get_current_superuser), ):
    service = RecommendationService(db)
    return service.create_for_client(client_id, data)


@router.get("/clients/{client_id}", summary="All recommendations of a client.",
            response_model=list[RecommendationResponse], )
def list_for_client(client_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_superuser), ):
    service = RecommendationService(db)
    return service.list_for_client(client_id)


@router.get("/{rec_id}", summary="Get a recommendation.", response_model=RecommendationResponse, )
def get_recommendation(rec_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecommendationService(db)
    return service.get(user.id, rec_id)


@router.delete("/{rec_id}", summary="Dismiss a recommendation.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_recommendation(rec_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecommendationService(db)
    service.delete(user.id, rec_id)


@router.post("/{rec_id}/implement", summary="Record that a recommendation was implemented.",
             response_model=RecommendationResponse, )
def implement_recommendation(rec_id: int, data: RecommendationImplement, db: Session = Depends(get_db),
                             user: User = Depends(get_current_superuser), ):
    service = RecommendationService(db)
    return service.implement(user.id, rec_id, data)
