"""
Sleep endpoints.

Nightly entries (date-keyed upsert), stats, the sleep profile and its
score, recommendations and goals.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.sleep import (
    SleepAssessmentCreate,
    SleepAssessmentResponse,
    SleepEntryCreate,
    SleepEntryResponse,
    SleepGoalResponse,
    SleepGoalUpdate,
    SleepRecommendation,
    SleepScoreResponse,
    SleepStatsResponse,
)
from app.services.sleep_service import SleepService

router = APIRouter()


@router.get("/entries", summary="List sleep entries (most recent first).", response_model=list[SleepEntryResponse], )
def list_entries(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                 end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                 limit: Optional[int] = Query(None, ge=1, le=366, description="Max entries to return"),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.get_entries(user.id, start, end, limit)


@router.put("/entries/{date}", summary="Create or update the sleep entry for a date.",
            response_model=SleepEntryResponse, )
def upsert_entry(date: datetime.date, data: SleepEntryCreate, response: Response, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    """Upsert: creates the entry if it doesn't exist, merges data if it does."""
    service = SleepService(db)
    entry, created = service.upsert_entry(user.id, date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("/entries/{date}", summary="Get the sleep entry for a date.", response_model=SleepEntryResponse, )
def get_entry(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.get_entry(user.id, date)


@router.delete("/entries/{date}", summary="Delete the sleep entry for a date.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_entry(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    service.delete_entry(user.id, date)


@router.get("/stats", summary="Sleep stats and entry-based sleep score.", response_model=SleepStatsResponse, )
def get_stats(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
              end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.get_stats(user.id, start, end)


@router.post("/assessment", summary="Submit the sleep questionnaire.", response_model=SleepAssessmentResponse,
             status_code=status.HTTP_201_CREATED, )
def create_assessment(data: SleepAssessmentCreate, db: Session = Depends(get_db),
                      user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.create_assessment(user.id, data)


@router.get("/assessment", summary="Current sleep profile (default profile if none submitted).",
            response_model=SleepAssessmentResponse, )
def get_assessment(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.get_profile(user.id)


@router.get("/score", summary="Profile-based sleep score.", response_model=SleepScoreResponse, )
def get_score(as_of: Optional[datetime.date] = Query(None, description="Reference date (default: today)"),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.get_score(user.id, as_of)


@router.get("/recommendations", summary="Sleep recommendations from the profile.",
            response_model=list[SleepRecommendation], )
def get_recommendations(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.get_recommendations(user.id)


@router.put("/goal", summary="Set sleep targets.", response_model=SleepGoalResponse, )
def set_goal(data: SleepGoalUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.set_goal(user.id, data)


@router.get("/goal", summary="Get sleep targets.", response_model=SleepGoalResponse, )
def get_goal(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SleepService(db)
    return service.get_goal(user.id)
