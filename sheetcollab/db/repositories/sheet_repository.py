from typing import Optional, List, TYPE_CHECKING
import uuid

from sqlalchemy import select, update

from sheetcollab.db.models.sheet import Sheet as SheetModel, Revision as RevisionModel
from sheetcollab.db.repositories.base import Repository, ids_from_json, ids_to_json

if TYPE_CHECKING:
    from sheetcollab.domains.sheets.entities import Sheet, Revision


class SheetRepository(Repository):
    """Репозиторий для работы с листами"""

    async def create(self, sheet: "Sheet") -> "Sheet":
        """Создание нового листа"""
        db_sheet = SheetModel(
            uuid=sheet.uuid,
            name=sheet.name,
            owner_ids=ids_to_json(sheet.owner_ids),
            collaborator_ids=ids_to_json(sheet.collaborator_ids),
            chat_channel_ids=ids_to_json(sheet.chat_channel_ids),
            revision_ids=ids_to_json(sheet.revision_ids)
        )

        await self._add(db_sheet)
        return self._to_domain(db_sheet)

    async def get_by_uuid(self, sheet_uuid: uuid.UUID) -> Optional["Sheet"]:
        """Получение листа по UUID"""
        result = await self._execute(
            select(SheetModel)
            .execution_options(populate_existing=True)
            .where(SheetModel.uuid == sheet_uuid)
        )
        db_sheet = result.scalar_one_or_none()
        return self._to_domain(db_sheet) if db_sheet else None

    async def get_many(self, sheet_uuids: List[uuid.UUID]) -> List["Sheet"]:
        """Получение листов в порядке переданных идентификаторов"""
        if not sheet_uuids:
            return []

        result = await self._execute(
            select(SheetModel)
            .execution_options(populate_existing=True)
            .where(SheetModel.uuid.in_(sheet_uuids))
        )
        found = {db_sheet.uuid: self._to_domain(db_sheet) for db_sheet in result.scalars().all()}
        return [found[sheet_uuid] for sheet_uuid in sheet_uuids if sheet_uuid in found]

    async def update(self, sheet: "Sheet") -> "Sheet":
        """Обновление листа целиком (последняя запись побеждает)"""
        stmt = (
            update(SheetModel)
            .where(SheetModel.uuid == sheet.uuid)
            .values(
                name=sheet.name,
                owner_ids=ids_to_json(sheet.owner_ids),
                collaborator_ids=ids_to_json(sheet.collaborator_ids),
                chat_channel_ids=ids_to_json(sheet.chat_channel_ids),
                revision_ids=ids_to_json(sheet.revision_ids)
            )
        )

        await self._execute(stmt)
        await self._commit()
        return await self.get_by_uuid(sheet.uuid)

    def _to_domain(self, db_sheet: SheetModel) -> "Sheet":
        """Преобразование модели БД в доменную сущность"""
        from sheetcollab.domains.sheets.entities import Sheet

        return Sheet(
            uuid=db_sheet.uuid,
            name=db_sheet.name,
            owner_ids=ids_from_json(db_sheet.owner_ids),
            collaborator_ids=ids_from_json(db_sheet.collaborator_ids),
            chat_channel_ids=ids_from_json(db_sheet.chat_channel_ids),
            revision_ids=ids_from_json(db_sheet.revision_ids),
            created_at=db_sheet.created_at,
            updated_at=db_sheet.updated_at
        )


class RevisionRepository(Repository):
    """Репозиторий для работы с ревизиями"""

    async def create(self, revision: "Revision") -> "Revision":
        """Создание новой ревизии"""
        db_revision = RevisionModel(
            uuid=revision.uuid,
            sheet_id=revision.sheet_id,
            data=revision.data,
            comment_message=revision.comment.message,
            comment_by=revision.comment.by
        )

        await self._add(db_revision)
        return self._to_domain(db_revision)

    async def get_by_uuid(self, revision_uuid: uuid.UUID) -> Optional["Revision"]:
        """Получение ревизии по UUID"""
        result = await self._execute(
            select(RevisionModel)
            .execution_options(populate_existing=True)
            .where(RevisionModel.uuid == revision_uuid)
        )
        db_revision = result.scalar_one_or_none()
        return self._to_domain(db_revision) if db_revision else None

    async def get_many(self, revision_uuids: List[uuid.UUID]) -> List["Revision"]:
        """Получение ревизий в порядке переданных идентификаторов"""
        if not revision_uuids:
            return []

        result = await self._execute(
            select(RevisionModel)
            .execution_options(populate_existing=True)
            .where(RevisionModel.uuid.in_(revision_uuids))
        )
        found = {db_revision.uuid: self._to_domain(db_revision) for db_revision in result.scalars().all()}
        return [found[revision_uuid] for revision_uuid in revision_uuids if revision_uuid in found]

    def _to_domain(self, db_revision: RevisionModel) -> "Revision":
        """Преобразование модели БД в доменную сущность"""
        from sheetcollab.domains.sheets.entities import Comment, Revision

        return Revision(
            uuid=db_revision.uuid,
            sheet_id=db_revision.sheet_id,
            data=db_revision.data,
            comment=Comment(message=db_revision.comment_message, by=db_revision.comment_by),
            created_at=db_revision.created_at,
            updated_at=db_revision.updated_at
        )
