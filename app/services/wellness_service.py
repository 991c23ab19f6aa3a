"""
Wellness services: emotional journal, mood check-ins, activity logs.

All rows are private to their owner; rows of other users are reported
as not found.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.wellness import ActivityLogRepository, JournalRepository, MoodEntryRepository
from app.models.wellness import JournalEntry, MoodEntry, WellnessActivityLog
from app.routinize.wellness_stats import compute_wellness_stats
from app.schemas.wellness import (
    ActivityLogCreate,
    ActivityLogResponse,
    ActivityLogUpdate,
    JournalEntryCreate,
    JournalEntryResponse,
    JournalEntryUpdate,
    MoodEntryCreate,
    MoodEntryResponse,
    MoodEntryUpdate,
    WellnessStatsResponse,
)

logger = logging.getLogger(__name__)


def _apply(row, data) -> None:
    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(row, key, value)


class JournalService:
    """Service for emotional journal business logic."""

    def __init__(self, session: Session):
        self.repository = JournalRepository(session)

    def create(self, user_id: int, data: JournalEntryCreate) -> JournalEntryResponse:
        entry = self.repository.create(JournalEntry(user_id=user_id, **data.model_dump()))
        logger.info("Created journal entry %s for user %s", entry.id, user_id)
        return JournalEntryResponse.model_validate(entry)

    def list_entries(
        self, user_id: int, search: Optional[str] = None, order: str = "desc",
    ) -> list[JournalEntryResponse]:
        entries = self.repository.get_by_user(user_id, search=search, ascending=(order == "asc"))
        return [JournalEntryResponse.model_validate(e) for e in entries]

    def get(self, user_id: int, entry_id: int) -> JournalEntryResponse:
        return JournalEntryResponse.model_validate(self._get_owned_entry(user_id, entry_id))

    def update(self, user_id: int, entry_id: int, data: JournalEntryUpdate) -> JournalEntryResponse:
        entry = self._get_owned_entry(user_id, entry_id)
        _apply(entry, data)
        entry.updated_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        logger.info("Updated journal entry %s for user %s", entry_id, user_id)
        return JournalEntryResponse.model_validate(entry)

    def delete(self, user_id: int, entry_id: int) -> None:
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("Deleted journal entry %s for user %s", entry_id, user_id)

    def _get_owned_entry(self, user_id: int, entry_id: int) -> JournalEntry:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal entry not found")
        return entry


class MoodService:
    """Service for mood check-ins."""

    def __init__(self, session: Session):
        self.repository = MoodEntryRepository(session)

    def create(self, user_id: int, data: MoodEntryCreate) -> MoodEntryResponse:
        entry = self.repository.create(MoodEntry(user_id=user_id, **data.model_dump()))
        logger.info("Logged mood entry %s for user %s", entry.id, user_id)
        return MoodEntryResponse.model_validate(entry)

    def list_entries(
        self, user_id: int, start: Optional[datetime.date] = None, end: Optional[datetime.date] = None,
    ) -> list[MoodEntryResponse]:
        return [MoodEntryResponse.model_validate(e) for e in self.repository.get_by_user(user_id, start, end)]

    def update(self, user_id: int, entry_id: int, data: MoodEntryUpdate) -> MoodEntryResponse:
        entry = self._get_owned_entry(user_id, entry_id)
        _apply(entry, data)
        entry.updated_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        logger.info("Updated mood entry %s for user %s", entry_id, user_id)
        return MoodEntryResponse.model_validate(entry)

    def delete(self, user_id: int, entry_id: int) -> None:
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("Deleted mood entry %s for user %s", entry_id, user_id)

    def _get_owned_entry(self, user_id: int, entry_id: int) -> MoodEntry:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mood entry not found")
        return entry


class ActivityLogService:
    """Service for wellness activity logs."""

    def __init__(self, session: Session):
        self.repository = ActivityLogRepository(session)

    def create(self, user_id: int, data: ActivityLogCreate) -> ActivityLogResponse:
        entry = self.repository.create(WellnessActivityLog(user_id=user_id, **data.model_dump()))
        logger.info("Logged %s activity %s for user %s", entry.category, entry.id, user_id)
        return ActivityLogResponse.model_validate(entry)

    def list_entries(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        category: Optional[str] = None,
    ) -> list[ActivityLogResponse]:
        logs = self.repository.get_by_user(user_id, start, end, category)
        return [ActivityLogResponse.model_validate(e) for e in logs]

    def update(self, user_id: int, entry_id: int, data: ActivityLogUpdate) -> ActivityLogResponse:
        entry = self._get_owned_entry(user_id, entry_id)
        _apply(entry, data)
        entry = self.repository.update(entry)
        logger.info("Updated activity log %s for user %s", entry_id, user_id)
        return ActivityLogResponse.model_validate(entry)

    def delete(self, user_id: int, entry_id: int) -> None:
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("Deleted activity log %s for user %s", entry_id, user_id)

    def _get_owned_entry(self, user_id: int, entry_id: int) -> WellnessActivityLog:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity log not found")
        return entry


class WellnessStatsService:
    """Aggregates over mood entries and activity logs."""

    def __init__(self, session: Session):
        self.session = session

    def get_stats(
        self, user_id: int, start: Optional[datetime.date] = None, end: Optional[datetime.date] = None,
    ) -> WellnessStatsResponse:
        if start and end and start > end:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must not be after end")
        return compute_wellness_stats(self.session, user_id, start, end)
