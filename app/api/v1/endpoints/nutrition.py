"""
Nutrition diary endpoints: food entries, daily macro goals and stats.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.nutrition import (
    MealType,
    NutritionEntryCreate,
    NutritionEntryResponse,
    NutritionEntryUpdate,
    NutritionGoalResponse,
    NutritionGoalSet,
    NutritionStatsResponse,
)
from app.services.nutrition_service import NutritionService

router = APIRouter()


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@router.post("/entries", summary="Log a food entry.", response_model=NutritionEntryResponse,
             status_code=status.HTTP_201_CREATED, )
def create_entry(data: NutritionEntryCreate, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.create_entry(user.id, data)


@router.get("/entries", summary="List food entries (most recent first).",
            response_model=list[NutritionEntryResponse], )
def list_entries(date: Optional[datetime.date] = Query(None, description="Single day; overrides start/end"),
                 start: Optional[datetime.date] = Query(None), end: Optional[datetime.date] = Query(None),
                 meal_type: Optional[MealType] = Query(None), limit: Optional[int] = Query(None, ge=1, le=500),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.list_entries(user.id, date, start, end, meal_type, limit)


@router.get("/entries/{entry_id}", summary="Get a food entry.", response_model=NutritionEntryResponse, )
def get_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.get_entry(user.id, entry_id)


@router.put("/entries/{entry_id}", summary="Update a food entry.", response_model=NutritionEntryResponse, )
def update_entry(entry_id: int, data: NutritionEntryUpdate, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.update_entry(user.id, entry_id, data)


@router.delete("/entries/{entry_id}", summary="Delete a food entry.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    service.delete_entry(user.id, entry_id)


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------

@router.post("/goals", summary="Set new daily targets (previous ones are deactivated).",
             response_model=NutritionGoalResponse, status_code=status.HTTP_201_CREATED, )
def set_goal(data: NutritionGoalSet, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.set_goal(user.id, data)


@router.get("/goals", summary="Active daily targets.", response_model=NutritionGoalResponse, )
def get_goal(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.get_goal(user.id)


@router.get("/goals/history", summary="All targets, newest first.", response_model=list[NutritionGoalResponse], )
def get_goal_history(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.get_goal_history(user.id)


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

@router.get("/stats", summary="Daily totals, meal breakdown, macro split and 7-day trend.",
            response_model=NutritionStatsResponse, )
def get_stats(date: Optional[datetime.date] = Query(None, description="Defaults to today"),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.get_stats(user.id, date)
