"""
Workout repositories.

Routines, logged sessions, weekly volume progressions and training
assessments.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.workout import TrainingAssessment, VolumeProgression, WorkoutRoutine, WorkoutSession


class WorkoutRoutineRepository:
    """Repository for WorkoutRoutine database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, routine: WorkoutRoutine) -> WorkoutRoutine:
        self.session.add(routine)
        self.session.commit()
        self.session.refresh(routine)
        return routine

    def get_by_id(self, routine_id: int) -> Optional[WorkoutRoutine]:
        return self.session.get(WorkoutRoutine, routine_id)

    def get_by_user(self, user_id: int) -> list[WorkoutRoutine]:
        """User's own routines, newest first."""
        statement = (
            select(WorkoutRoutine)
            .where(WorkoutRoutine.user_id == user_id)
            .order_by(WorkoutRoutine.created_at.desc(), WorkoutRoutine.id.desc())
        )
        return list(self.session.exec(statement).all())

    def get_templates(self) -> list[WorkoutRoutine]:
        statement = (
            select(WorkoutRoutine)
            .where(WorkoutRoutine.is_template == True)  # noqa: E712
            .order_by(WorkoutRoutine.name)
        )
        return list(self.session.exec(statement).all())

    def get_active(self, user_id: int) -> Optional[WorkoutRoutine]:
        statement = select(WorkoutRoutine).where(
            WorkoutRoutine.user_id == user_id,
            WorkoutRoutine.is_active == True,  # noqa: E712
        )
        return self.session.exec(statement).first()

    def activate(self, routine: WorkoutRoutine) -> WorkoutRoutine:
        """Deactivate every routine of the owner, then activate *routine*, in one commit."""
        for other in self.get_by_user(routine.user_id):
            if other.is_active and other.id != routine.id:
                other.is_active = False
                self.session.add(other)
        routine.is_active = True
        routine.updated_at = datetime.datetime.utcnow()
        self.session.add(routine)
        self.session.commit()
        self.session.refresh(routine)
        return routine

    def update(self, routine: WorkoutRoutine) -> WorkoutRoutine:
        self.session.add(routine)
        self.session.commit()
        self.session.refresh(routine)
        return routine

    def delete(self, routine_id: int) -> bool:
        routine = self.get_by_id(routine_id)
        if routine:
            self.session.delete(routine)
            self.session.commit()
            return True
        return False


class WorkoutSessionRepository:
    """Repository for WorkoutSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WorkoutSession) -> WorkoutSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[WorkoutSession]:
        return self.session.get(WorkoutSession, entry_id)

    def get_by_user_date_range(
        self, user_id: int, start: datetime.date, end: datetime.date,
    ) -> list[WorkoutSession]:
        """Sessions in ``[start, end]``, most recent first."""
        statement = (
            select(WorkoutSession)
            .where(
                WorkoutSession.user_id == user_id,
                WorkoutSession.date >= start,
                WorkoutSession.date <= end,
            )
            .order_by(WorkoutSession.date.desc(), WorkoutSession.id.desc())
        )
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: int) -> list[WorkoutSession]:
        statement = (
            select(WorkoutSession)
            .where(WorkoutSession.user_id == user_id)
            .order_by(WorkoutSession.date.desc())
        )
        return list(self.session.exec(statement).all())

    def count_between(self, user_id: int, start: datetime.date, end: datetime.date) -> int:
        statement = (
            select(func.count())
            .select_from(WorkoutSession)
            .where(
                WorkoutSession.user_id == user_id,
                WorkoutSession.date >= start,
                WorkoutSession.date <= end,
            )
        )
        return self.session.exec(statement).one()

    def clear_routine(self, routine_id: int) -> None:
        """Detach sessions from a routine that is about to be deleted."""
        statement = select(WorkoutSession).where(WorkoutSession.routine_id == routine_id)
        for entry in self.session.exec(statement).all():
            entry.routine_id = None
            self.session.add(entry)

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False


class VolumeProgressionRepository:
    """Repository for VolumeProgression database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: VolumeProgression) -> VolumeProgression:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_between(
        self, user_id: int, since: datetime.date, until: datetime.date,
    ) -> list[VolumeProgression]:
        """Progressions with ``since <= week_start <= until``, chronological."""
        statement = (
            select(VolumeProgression)
            .where(
                VolumeProgression.user_id == user_id,
                VolumeProgression.week_start >= since,
                VolumeProgression.week_start <= until,
            )
            .order_by(VolumeProgression.week_start, VolumeProgression.created_at, VolumeProgression.id)
        )
        return list(self.session.exec(statement).all())


class TrainingAssessmentRepository:
    """Repository for TrainingAssessment database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, assessment: TrainingAssessment) -> TrainingAssessment:
        self.session.add(assessment)
        self.session.commit()
        self.session.refresh(assessment)
        return assessment

    def get_latest(self, user_id: int) -> Optional[TrainingAssessment]:
        statement = (
            select(TrainingAssessment)
            .where(TrainingAssessment.user_id == user_id)
            .order_by(TrainingAssessment.created_at.desc(), TrainingAssessment.id.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def get_all_by_user(self, user_id: int) -> list[TrainingAssessment]:
        statement = (
            select(TrainingAssessment)
            .where(TrainingAssessment.user_id == user_id)
            .order_by(TrainingAssessment.created_at.desc(), TrainingAssessment.id.desc())
        )
        return list(self.session.exec(statement).all())
