"""
Wellness repositories.

Journal entries, mood check-ins and activity logs are all simple
per-user, date-keyed rows.
"""

import datetime
from typing import Optional

from sqlalchemy import func, or_
from sqlmodel import Session, select

from app.models.wellness import JournalEntry, MoodEntry, WellnessActivityLog


class JournalRepository:
    """Repository for JournalEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: JournalEntry) -> JournalEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[JournalEntry]:
        return self.session.get(JournalEntry, entry_id)

    def get_by_user(
        self, user_id: int, search: Optional[str] = None, ascending: bool = False,
    ) -> list[JournalEntry]:
        """Entries ordered by date; *search* matches title or content (case-insensitive)."""
        statement = select(JournalEntry).where(JournalEntry.user_id == user_id)
        if search:
            needle = search.lower()
            statement = statement.where(or_(
                func.lower(JournalEntry.title).contains(needle),
                func.lower(JournalEntry.content).contains(needle),
            ))
        if ascending:
            statement = statement.order_by(JournalEntry.date, JournalEntry.id)
        else:
            statement = statement.order_by(JournalEntry.date.desc(), JournalEntry.id.desc())
        return list(self.session.exec(statement).all())

    def update(self, entry: JournalEntry) -> JournalEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False


class MoodEntryRepository:
    """Repository for MoodEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: MoodEntry) -> MoodEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[MoodEntry]:
        return self.session.get(MoodEntry, entry_id)

    def get_by_user(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
    ) -> list[MoodEntry]:
        """Check-ins in ``[start, end]``, most recent first."""
        statement = select(MoodEntry).where(MoodEntry.user_id == user_id)
        if start is not None:
            statement = statement.where(MoodEntry.date >= start)
        if end is not None:
            statement = statement.where(MoodEntry.date <= end)
        statement = statement.order_by(MoodEntry.date.desc(), MoodEntry.id.desc())
        return list(self.session.exec(statement).all())

    def update(self, entry: MoodEntry) -> MoodEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False


class ActivityLogRepository:
    """Repository for WellnessActivityLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WellnessActivityLog) -> WellnessActivityLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[WellnessActivityLog]:
        return self.session.get(WellnessActivityLog, entry_id)

    def get_by_user(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        category: Optional[str] = None,
    ) -> list[WellnessActivityLog]:
        statement = select(WellnessActivityLog).where(WellnessActivityLog.user_id == user_id)
        if start is not None:
            statement = statement.where(WellnessActivityLog.date >= start)
        if end is not None:
            statement = statement.where(WellnessActivityLog.date <= end)
        if category is not None:
            statement = statement.where(WellnessActivityLog.category == category)
        statement = statement.order_by(WellnessActivityLog.date.desc(), WellnessActivityLog.id.desc())
        return list(self.session.exec(statement).all())

    def update(self, entry: WellnessActivityLog) -> WellnessActivityLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
