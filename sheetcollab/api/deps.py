from typing import Optional
import uuid

from fastapi import Cookie, Response

from sheetcollab.core.config import settings
from sheetcollab.core.security import create_session_token, read_session_token


async def get_session_user_id(
    response: Response,
    session_token: Optional[str] = Cookie(None, alias=settings.session_cookie_name)
) -> uuid.UUID:
    """Идентификатор пользователя из cookie сессии.

    Для нового или просроченного токена выдается новый идентификатор;
    cookie обновляется в каждом ответе.
    """
    user_id = read_session_token(session_token) or uuid.uuid4()

    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(user_id),
        max_age=settings.session_ttl_days * 24 * 60 * 60,
        httponly=True,
        samesite="lax"
    )
    return user_id
