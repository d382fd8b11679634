from datetime import date
from typing import Optional

from fastapi import Depends, status, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt
from pydantic import ValidationError

from app.config import settings
from app.database import SessionLocal
from app.date_util import today as current_day
from app.log import get_logger
from app.router.service.streak_service import StreakTracker
from app.schema.auth_schema import TokenPayload

log = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenPayload:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = jwt.decode(credentials.credentials, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        token_data = TokenPayload(**payload)
    except (jwt.JWTError, ValidationError) as e:
        log.info("Rejected token: %s", e)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials") from e
    return token_data


def get_current_user_id(token: TokenPayload = Depends(get_token)) -> str:
    if not token.sub.strip():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials")
    return token.sub


def get_streak_tracker() -> StreakTracker:
    return StreakTracker(SessionLocal)


def get_today() -> date:
    return current_day()
