from typing import Iterable, List
import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sheetcollab.core.errors import PersistenceError

logger = logging.getLogger(__name__)


def ids_to_json(ids: Iterable[uuid.UUID]) -> List[str]:
    """Список uuid в виде, пригодном для JSON-колонки"""
    return [str(item) for item in ids]


def ids_from_json(values: Iterable[str]) -> List[uuid.UUID]:
    return [uuid.UUID(str(value)) for value in values or []]


class Repository:
    """Общая логика репозиториев: выполнение запросов и фиксация изменений"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            await self._fail(e)

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail(e)

    async def _add(self, db_object) -> None:
        """Сохранение нового объекта с немедленной фиксацией"""
        self.session.add(db_object)
        await self._commit()
        try:
            await self.session.refresh(db_object)
        except SQLAlchemyError as e:
            await self._fail(e)

    async def _fail(self, error: SQLAlchemyError):
        logger.error(f"Database error in {type(self).__name__}: {error}")
        await self.session.rollback()
        raise PersistenceError(str(error)) from error
