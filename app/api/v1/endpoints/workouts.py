"""
Workout session endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.workout import WorkoutSessionCreate, WorkoutSessionResponse, WorkoutStatsResponse
from app.services.workout_session_service import WorkoutSessionService

router = APIRouter()


@router.post("", summary="Log a workout session.", response_model=WorkoutSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: WorkoutSessionCreate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    service = WorkoutSessionService(db)
    return service.create(user.id, data)


@router.get("", summary="List workout sessions (default: last 30 days).",
            response_model=list[WorkoutSessionResponse], )
def list_sessions(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSessionService(db)
    return service.get_range(user.id, start, end)


@router.get("/stats", summary="Workout totals.", response_model=WorkoutStatsResponse, )
def get_stats(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSessionService(db)
    return service.get_stats(user.id)


@router.get("/{session_id}", summary="Get a workout session.", response_model=WorkoutSessionResponse, )
def get_session(session_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSessionService(db)
    return service.get_by_id(user.id, session_id)


@router.delete("/{session_id}", summary="Delete a workout session.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSessionService(db)
    service.delete(user.id, session_id)
