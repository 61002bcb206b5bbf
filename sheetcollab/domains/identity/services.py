from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid

from sheetcollab.db.repositories.user_repository import UserRepository, UserAlreadyExists
from sheetcollab.domains.identity.entities import User

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для работы с пользователями сессий"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def find_or_create(self, user_id: uuid.UUID) -> User:
        """Получение пользователя сессии; создается при первом обращении"""
        user = await self.user_repository.get_by_uuid(user_id)
        if user:
            return user

        try:
            user = await self.user_repository.create(User.create_user(user_id))
        except UserAlreadyExists:
            # Параллельный запрос успел создать пользователя первым
            user = await self.user_repository.get_by_uuid(user_id)
            if user is None:
                raise
            return user

        logger.info(f"Created user {user.uuid} ({user.name})")
        return user

    async def save_user(self, user: User) -> User:
        return await self.user_repository.update(user)

    async def get_users(self, user_ids: List[uuid.UUID]) -> List[User]:
        """Получение пользователей по списку идентификаторов"""
        return await self.user_repository.get_many(user_ids)
