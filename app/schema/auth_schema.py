from typing import Optional

from pydantic import BaseModel, EmailStr


class TokenPayload(BaseModel):
    """Payload for Bearer Access Token"""
    sub: str  # user id from the auth provider
    email: Optional[EmailStr] = None
    exp: Optional[int] = None
