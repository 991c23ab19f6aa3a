"""
User service.

Registration, credential checks and token issuing. Emails are compared
case-insensitively and stored lowercased.
"""

import logging
from datetime import timedelta
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin

logger = logging.getLogger(__name__)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class UserService:
    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate, is_superuser: bool = False) -> User:
        """
        Create an account.

        ``is_superuser`` creates a professional account; the public
        registration endpoint never sets it.

        Raises:
            HTTPException 400: email already registered
        """
        email = user_data.email.lower()
        if self.repository.get_by_email(email):
            logger.warning("Registration rejected: %s already registered", email)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = self.repository.add(User(
            email=email,
            hashed_password=get_password_hash(user_data.password),
            full_name=user_data.full_name,
            is_superuser=is_superuser,
        ))
        logger.info("Registered %s %s (id=%s)", "professional" if is_superuser else "user", user.email, user.id)
        return user

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Check credentials and issue a bearer token whose subject is the email.

        Raises:
            HTTPException 401: unknown email or wrong password
            HTTPException 403: inactive account
        """
        user = self.repository.get_by_email(login_data.email)
        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.warning("Failed login for %s", login_data.email)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password",
                                headers=_BEARER_CHALLENGE)
        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        token = create_access_token(data={"sub": user.email},
                                    expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
        return Token(access_token=token, token_type="bearer")

    def resolve_token_subject(self, email: str) -> Optional[User]:
        """The active account a token was issued for, or None."""
        user = self.repository.get_by_email(email)
        if user is None or not user.is_active:
            return None
        return user
