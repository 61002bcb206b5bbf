from datetime import datetime, timedelta
from typing import Optional
import uuid

from jose import JWTError, jwt

from sheetcollab.core.config import settings


def create_session_token(user_id: uuid.UUID, expires_delta: Optional[timedelta] = None) -> str:
    """Создание JWT токена сессии для пользователя"""
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(days=settings.session_ttl_days)

    to_encode = {"sub": str(user_id), "exp": expire, "type": "session"}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def read_session_token(token: Optional[str]) -> Optional[uuid.UUID]:
    """Извлечение идентификатора пользователя из токена сессии"""
    if not token:
        return None

    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    if payload.get("type") != "session":
        return None

    try:
        return uuid.UUID(payload.get("sub"))
    except (TypeError, ValueError):
        return None
