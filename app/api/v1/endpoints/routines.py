"""
Workout routine endpoints.

Static paths (``/templates``, ``/active``) are declared before
``/{routine_id}``.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.workout import WorkoutRoutineCreate, WorkoutRoutineResponse, WorkoutRoutineUpdate
from app.services.workout_routine_service import WorkoutRoutineService

router = APIRouter()


@router.get("", summary="List own routines (newest first).", response_model=list[WorkoutRoutineResponse], )
def list_routines(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    return service.list_own(user.id)


@router.post("", summary="Create a routine.", response_model=WorkoutRoutineResponse,
             status_code=status.HTTP_201_CREATED, )
def create_routine(data: WorkoutRoutineCreate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    return service.create(user.id, data)


@router.get("/templates", summary="List template routines.", response_model=list[WorkoutRoutineResponse], )
def list_templates(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    return service.list_templates()


@router.get("/active", summary="Get the active routine.", response_model=WorkoutRoutineResponse, )
def get_active(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    return service.get_active(user.id)


@router.get("/{routine_id}", summary="Get a routine (own or template).", response_model=WorkoutRoutineResponse, )
def get_routine(routine_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    return service.get(user.id, routine_id)


@router.put("/{routine_id}", summary="Update a routine.", response_model=WorkoutRoutineResponse, )
def update_routine(routine_id: int, data: WorkoutRoutineUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    return service.update(user.id, routine_id, data)


@router.delete("/{routine_id}", summary="Delete a routine.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_routine(routine_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    service.delete(user.id, routine_id)


@router.post("/{routine_id}/activate", summary="Make this the only active routine.",
             response_model=WorkoutRoutineResponse, )
def activate_routine(routine_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutRoutineService(db)
    return service.activate(user.id, routine_id)
