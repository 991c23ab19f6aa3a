"""
Sleep repository.

Handles database operations for :class:`SleepEntry`,
:class:`SleepAssessment` and :class:`SleepGoal`.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.sleep import SleepAssessment, SleepEntry, SleepGoal


class SleepRepository:
    """Repository for sleep database operations."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> Optional[SleepEntry]:
        statement = select(SleepEntry).where(SleepEntry.user_id == user_id, SleepEntry.date == date)
        return self.session.exec(statement).first()

    def get_entries(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        limit: Optional[int] = None,
    ) -> list[SleepEntry]:
        """Entries in ``[start, end]`` (either bound optional), most recent first."""
        statement = select(SleepEntry).where(SleepEntry.user_id == user_id)
        if start is not None:
            statement = statement.where(SleepEntry.date >= start)
        if end is not None:
            statement = statement.where(SleepEntry.date <= end)
        statement = statement.order_by(SleepEntry.date.desc())
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def save_entry(self, entry: SleepEntry) -> SleepEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_entry(self, entry: SleepEntry) -> None:
        self.session.delete(entry)
        self.session.commit()

    # ------------------------------------------------------------------
    # Assessments
    # ------------------------------------------------------------------

    def get_latest_assessment(self, user_id: int) -> Optional[SleepAssessment]:
        statement = (
            select(SleepAssessment)
            .where(SleepAssessment.user_id == user_id)
            .order_by(SleepAssessment.created_at.desc(), SleepAssessment.id.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def create_assessment(self, assessment: SleepAssessment) -> SleepAssessment:
        self.session.add(assessment)
        self.session.commit()
        self.session.refresh(assessment)
        return assessment

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------

    def get_goal(self, user_id: int) -> Optional[SleepGoal]:
        statement = select(SleepGoal).where(SleepGoal.user_id == user_id)
        return self.session.exec(statement).first()

    def save_goal(self, goal: SleepGoal) -> SleepGoal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal
