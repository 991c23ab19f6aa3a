"""
User repository.

Account lookups for authentication and for resolving the clients a
professional writes recommendations for.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for :class:`User` rows."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup; rows created before lowercasing still match."""
        statement = select(User).where(func.lower(User.email) == email.strip().lower())
        return self.session.exec(statement).first()

