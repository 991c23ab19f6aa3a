"""
Emotional journal endpoints.
"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.wellness import JournalEntryCreate, JournalEntryResponse, JournalEntryUpdate
from app.services.wellness_service import JournalService

router = APIRouter()


@router.post("", summary="Write a journal entry.", response_model=JournalEntryResponse,
             status_code=status.HTTP_201_CREATED, )
def create_entry(data: JournalEntryCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = JournalService(db)
    return service.create(user.id, data)


@router.get("", summary="List journal entries.", response_model=list[JournalEntryResponse], )
def list_entries(search: Optional[str] = Query(None, description="Title or content contains"),
                 order: Literal["asc", "desc"] = Query("desc", description="Sort by date"),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = JournalService(db)
    return service.list_entries(user.id, search, order)


@router.get("/{entry_id}", summary="Get a journal entry.", response_model=JournalEntryResponse, )
def get_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = JournalService(db)
    return service.get(user.id, entry_id)


@router.put("/{entry_id}", summary="Update a journal entry.", response_model=JournalEntryResponse, )
def update_entry(entry_id: int, data: JournalEntryUpdate, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    service = JournalService(db)
    return service.update(user.id, entry_id, data)


@router.delete("/{entry_id}", summary="Delete a journal entry.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = JournalService(db)
    service.delete(user.id, entry_id)
