from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union

from jose import jwt

from app.config import settings


def create_access_token(
    subject: Union[str, Any], email: Optional[str] = None, expires_delta: timedelta = None
) -> str:
    """
    Creates an access token in the shape the auth provider issues.

    Used for local development and tests; in production tokens come
    from the hosted sign-in flow.

    Parameters:
        subject (Union[str, Any]): The user id, stored in the ``sub`` claim.
        email (str, optional): Added as the ``email`` claim when given.
        expires_delta (timedelta, optional): The expiration time for the access token. Defaults to None.

    Returns:
        str: The encoded access token.
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
    to_encode = {"exp": expire, "sub": str(subject)}
    if email:
        to_encode["email"] = email
    encoded_jwt = jwt.encode(
        to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )
    return encoded_jwt
