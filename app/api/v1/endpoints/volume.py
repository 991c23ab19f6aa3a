"""
Volume landmark endpoints.

``level`` defaults to the ``experience_level`` of the latest training
assessment, then ``intermediate``.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.workout import (
    ExperienceLevel,
    MuscleGroupInfo,
    VolumeGoal,
    VolumeLandmarksResponse,
    VolumeProgressionCreate,
    VolumeProgressionResponse,
    VolumeRecommendation,
    VolumeTargets,
)
from app.services.volume_service import VolumeService

router = APIRouter()


@router.get("/muscle-groups", summary="Static landmark table.", response_model=list[MuscleGroupInfo], )
def list_muscle_groups(user: User = Depends(get_current_user)):
    return VolumeService.muscle_groups()


@router.get("/landmarks", summary="Weekly volume vs MEV/MAV/MRV per muscle group.",
            response_model=VolumeLandmarksResponse, )
def get_landmarks(level: Optional[ExperienceLevel] = Query(None, description="Experience level override"),
                  as_of: Optional[datetime.date] = Query(None, description="Last day of the 7-day window"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = VolumeService(db)
    return service.get_landmarks(user.id, level, as_of)


@router.get("/recommendations", summary="Volume adjustments per muscle group.",
            response_model=list[VolumeRecommendation], )
def get_recommendations(level: Optional[ExperienceLevel] = Query(None, description="Experience level override"),
                        as_of: Optional[datetime.date] = Query(None, description="Reference date"),
                        db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = VolumeService(db)
    return service.get_recommendations(user.id, level, as_of)


@router.get("/targets", summary="Weekly set range for a training goal.", response_model=VolumeTargets, )
def get_targets(goal: VolumeGoal = Query(..., description="strength, hypertrophy or endurance"),
                muscle_group: str = Query(..., min_length=1, description="English key or Spanish name"),
                level: Optional[ExperienceLevel] = Query(None, description="Experience level override"),
                db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = VolumeService(db)
    return service.get_targets(user.id, goal, muscle_group, level)


@router.post("/progressions", summary="Record this week's volume feedback.",
             response_model=VolumeProgressionResponse, status_code=status.HTTP_201_CREATED, )
def record_progression(data: VolumeProgressionCreate,
                       as_of: Optional[datetime.date] = Query(None, description="Any day of the recorded week"),
                       db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = VolumeService(db)
    return service.record_progression(user.id, data, as_of)


@router.get("/progressions", summary="Volume feedback for recent weeks (chronological).",
            response_model=list[VolumeProgressionResponse], )
def list_progressions(weeks: int = Query(4, ge=1, le=52, description="Number of weeks, current included"),
                      as_of: Optional[datetime.date] = Query(None, description="Reference date"),
                      db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = VolumeService(db)
    return service.get_progressions(user.id, weeks, as_of)
