"""
Personalized recommendation repository.
"""

import datetime
from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, select

from app.models.recommendation import PersonalizedRecommendation


class RecommendationRepository:
    """Repository for PersonalizedRecommendation database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, rec: PersonalizedRecommendation) -> PersonalizedRecommendation:
        self.session.add(rec)
        self.session.commit()
        self.session.refresh(rec)
        return rec

    def create_many(self, recs: list[PersonalizedRecommendation]) -> list[PersonalizedRecommendation]:
        self.session.add_all(recs)
        self.session.commit()
        for rec in recs:
            self.session.refresh(rec)
        return recs

    def get_by_id(self, rec_id: int) -> Optional[PersonalizedRecommendation]:
        return self.session.get(PersonalizedRecommendation, rec_id)

    def get_by_user(
        self,
        user_id: int,
        rec_type: Optional[str] = None,
        include_expired: bool = False,
        now: Optional[datetime.datetime] = None,
    ) -> list[PersonalizedRecommendation]:
        """Recommendations newest first.  Expired ones are hidden unless asked for."""
        statement = select(PersonalizedRecommendation).where(PersonalizedRecommendation.user_id == user_id)
        if rec_type is not None:
            statement = statement.where(PersonalizedRecommendation.type == rec_type)
        if not include_expired:
            now = now or datetime.datetime.utcnow()
            statement = statement.where(or_(
                PersonalizedRecommendation.expires_at == None,  # noqa: E711
                PersonalizedRecommendation.expires_at > now,
            ))
        statement = statement.order_by(
            PersonalizedRecommendation.created_at.desc(), PersonalizedRecommendation.id.desc(),
        )
        return list(self.session.exec(statement).all())

    def get_open_titles(self, user_id: int, now: datetime.datetime) -> set[str]:
        """Titles of unimplemented, unexpired recommendations."""
        statement = select(PersonalizedRecommendation.title).where(
            PersonalizedRecommendation.user_id == user_id,
            PersonalizedRecommendation.implemented == False,  # noqa: E712
            or_(
                PersonalizedRecommendation.expires_at == None,  # noqa: E711
                PersonalizedRecommendation.expires_at > now,
            ),
        )
        return set(self.session.exec(statement).all())

    def update(self, rec: PersonalizedRecommendation) -> PersonalizedRecommendation:
        self.session.add(rec)
        self.session.commit()
        self.session.refresh(rec)
        return rec

    def delete(self, rec_id: int) -> bool:
        rec = self.get_by_id(rec_id)
        if rec:
            self.session.delete(rec)
            self.session.commit()
            return True
        return False
