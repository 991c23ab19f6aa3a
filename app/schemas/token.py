"""
Token API schemas.
"""

from pydantic import BaseModel


class Token(BaseModel):
    """Bearer token returned by ``/auth/token`` and ``/auth/login``."""
    access_token: str
    token_type: str = "bearer"
