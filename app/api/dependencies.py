"""
Authentication dependencies shared by the v1 routers.
"""

import logging

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.security import decode_access_token, oauth2_scheme
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail,
                         headers={"WWW-Authenticate": "Bearer"})


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    email = decode_access_token(token)
    if not email:
        raise _unauthorized("Invalid or expired token")
    user = UserService(db).resolve_token_subject(email)
    if user is None:
        raise _unauthorized("User not found or inactive")
    return user


def get_current_superuser(user: User = Depends(get_current_user)) -> User:
    """Require a professional account (trainer, nutritionist or admin)."""
    if not user.is_professional:
        logger.warning("User %s attempted a professional-only operation", user.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Professional account required")
    return user
