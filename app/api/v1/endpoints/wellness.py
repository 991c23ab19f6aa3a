"""
Mood & wellness endpoints: mood check-ins, activity logs and stats.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.wellness import (
    ActivityCategory,
    ActivityLogCreate,
    ActivityLogResponse,
    ActivityLogUpdate,
    MoodEntryCreate,
    MoodEntryResponse,
    MoodEntryUpdate,
    WellnessStatsResponse,
)
from app.services.wellness_service import ActivityLogService, MoodService, WellnessStatsService

router = APIRouter()


# ---------------------------------------------------------------------------
# Mood
# ---------------------------------------------------------------------------

@router.post("/mood", summary="Log a mood check-in.", response_model=MoodEntryResponse,
             status_code=status.HTTP_201_CREATED, )
def create_mood(data: MoodEntryCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = MoodService(db)
    return service.create(user.id, data)


@router.get("/mood", summary="List mood check-ins (most recent first).", response_model=list[MoodEntryResponse], )
def list_mood(start: Optional[datetime.date] = Query(None), end: Optional[datetime.date] = Query(None),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = MoodService(db)
    return service.list_entries(user.id, start, end)


@router.put("/mood/{entry_id}", summary="Update a mood check-in.", response_model=MoodEntryResponse, )
def update_mood(entry_id: int, data: MoodEntryUpdate, db: Session = Depends(get_db),
                user: User = Depends(get_current_user), ):
    service = MoodService(db)
    return service.update(user.id, entry_id, data)


@router.delete("/mood/{entry_id}", summary="Delete a mood check-in.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_mood(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = MoodService(db)
    service.delete(user.id, entry_id)


# ---------------------------------------------------------------------------
# Activities
# ---------------------------------------------------------------------------

@router.post("/activities", summary="Log a wellness activity.", response_model=ActivityLogResponse,
             status_code=status.HTTP_201_CREATED, )
def create_activity(data: ActivityLogCreate, db: Session = Depends(get_db),
                    user: User = Depends(get_current_user), ):
    service = ActivityLogService(db)
    return service.create(user.id, data)


@router.get("/activities", summary="List wellness activities.", response_model=list[ActivityLogResponse], )
def list_activities(start: Optional[datetime.date] = Query(None), end: Optional[datetime.date] = Query(None),
                    category: Optional[ActivityCategory] = Query(None),
                    db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ActivityLogService(db)
    return service.list_entries(user.id, start, end, category)


@router.put("/activities/{entry_id}", summary="Update a wellness activity.", response_model=ActivityLogResponse, )
def update_activity(entry_id: int, data: ActivityLogUpdate, db: Session = Depends(get_db),
                    user: User = Depends(get_current_user), ):
    service = ActivityLogService(db)
    return service.update(user.id, entry_id, data)


@router.delete("/activities/{entry_id}", summary="Delete a wellness activity.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_activity(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ActivityLogService(db)
    service.delete(user.id, entry_id)


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

@router.get("/stats", summary="Mood and activity aggregates.", response_model=WellnessStatsResponse, )
def get_stats(start: Optional[datetime.date] = Query(None), end: Optional[datetime.date] = Query(None),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WellnessStatsService(db)
    return service.get_stats(user.id, start, end)
