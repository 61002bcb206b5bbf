from typing import Optional, List, TYPE_CHECKING
import uuid

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from sheetcollab.core.errors import PersistenceError
from sheetcollab.db.models.user import User as UserModel
from sheetcollab.db.repositories.base import Repository, ids_from_json, ids_to_json

if TYPE_CHECKING:
    from sheetcollab.domains.identity.entities import User


class UserAlreadyExists(PersistenceError):
    """Пользователь с таким uuid уже создан"""


class UserRepository(Repository):
    """Репозиторий для работы с пользователями"""

    async def create(self, user: "User") -> "User":
        """Создание нового пользователя"""
        db_user = UserModel(
            uuid=user.uuid,
            name=user.name,
            sheet_ids=ids_to_json(user.sheet_ids)
        )

        try:
            await self._add(db_user)
        except PersistenceError as e:
            if isinstance(e.__cause__, IntegrityError):
                raise UserAlreadyExists(f"User {user.uuid} already exists") from e.__cause__
            raise
        return self._to_domain(db_user)

    async def get_by_uuid(self, user_uuid: uuid.UUID) -> Optional["User"]:
        """Получение пользователя по UUID"""
        result = await self._execute(
            select(UserModel)
            .execution_options(populate_existing=True)
            .where(UserModel.uuid == user_uuid)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def get_many(self, user_uuids: List[uuid.UUID]) -> List["User"]:
        """Получение пользователей в порядке переданных идентификаторов"""
        if not user_uuids:
            return []

        result = await self._execute(
            select(UserModel)
            .execution_options(populate_existing=True)
            .where(UserModel.uuid.in_(user_uuids))
        )
        found = {db_user.uuid: self._to_domain(db_user) for db_user in result.scalars().all()}
        return [found[user_uuid] for user_uuid in user_uuids if user_uuid in found]

    async def update(self, user: "User") -> "User":
        """Обновление пользователя"""
        stmt = (
            update(UserModel)
            .where(UserModel.uuid == user.uuid)
            .values(
                name=user.name,
                sheet_ids=ids_to_json(user.sheet_ids)
            )
        )

        await self._execute(stmt)
        await self._commit()
        return await self.get_by_uuid(user.uuid)

    def _to_domain(self, db_user: UserModel) -> "User":
        """Преобразование модели БД в доменную сущность"""
        from sheetcollab.domains.identity.entities import User

        return User(
            uuid=db_user.uuid,
            name=db_user.name,
            sheet_ids=ids_from_json(db_user.sheet_ids),
            created_at=db_user.created_at,
            updated_at=db_user.updated_at
        )
