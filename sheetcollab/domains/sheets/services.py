from typing import Any, Optional, List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
import json
import logging
import uuid

from sheetcollab.core.errors import DomainError, ParseError
from sheetcollab.db.repositories.collaboration_repository import ChatChannelRepository
from sheetcollab.db.repositories.sheet_repository import SheetRepository, RevisionRepository
from sheetcollab.domains.collaboration.entities import ChatChannel
from sheetcollab.domains.identity.entities import User
from sheetcollab.domains.identity.services import IdentityService
from sheetcollab.domains.sheets.entities import (
    INITIAL_COMMIT_MESSAGE, PopulatedSheet, Revision, Sheet
)

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity и -Infinity не входят в JSON
    raise ValueError(f"Unexpected token {name} in JSON")


def parse_content(raw: Any) -> Any:
    """Содержимое ревизии: строка разбирается как JSON, остальное как есть"""
    if not isinstance(raw, str):
        return raw

    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError(f"{type(e).__name__}: {e}") from e


def parse_id(value: Any) -> Optional[uuid.UUID]:
    """Идентификатор из пути или тела запроса; None, если он некорректен"""
    if isinstance(value, uuid.UUID):
        return value
    if value is None:
        return None

    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class SheetService:
    """Сервис листов: создание, добавление ревизий, возврат и копирование"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.identity_service = IdentityService(session)
        self.sheet_repository = SheetRepository(session)
        self.revision_repository = RevisionRepository(session)
        self.chat_channel_repository = ChatChannelRepository(session)

    async def create_sheet(self, session_user_id: uuid.UUID, name: Optional[str], raw_data: Any) -> PopulatedSheet:
        """Создание листа вместе с каналом чата и начальной ревизией.

        Записи выполняются строго по очереди: канал, ревизия, лист,
        пользователь. При сбое последующие шаги не выполняются, а уже
        записанные сущности остаются в базе.
        """
        data = parse_content(raw_data)

        user = await self.identity_service.find_or_create(session_user_id)
        owned_sheets = await self._populate_user_sheets(user)
        logger.debug(f"User {user.uuid} owns {len(owned_sheets)} sheets")
        user = await self.identity_service.save_user(user)

        chat_channel = ChatChannel.create_channel(participants=[user.uuid])
        revision = Revision.create_revision(
            sheet_id=None,
            data=data,
            message=INITIAL_COMMIT_MESSAGE,
            by=user.name
        )
        sheet = Sheet.create_sheet(
            name=name,
            owner_id=user.uuid,
            chat_channel_id=chat_channel.uuid,
            revision_id=revision.uuid
        )
        revision.sheet_id = sheet.uuid
        chat_channel.sheet_id = sheet.uuid
        user.add_sheet(sheet.uuid)

        await self.chat_channel_repository.create(chat_channel)
        await self.revision_repository.create(revision)
        sheet = await self.sheet_repository.create(sheet)
        await self.identity_service.save_user(user)

        logger.info(f"Sheet {sheet.uuid} created by user {user.uuid}")
        return await self.populate_members(sheet)

    async def get_sheet(self, sheet_id: Any) -> PopulatedSheet:
        """Получение листа с раскрытыми участниками"""
        sheet = await self._get_sheet(sheet_id)
        return await self.populate_members(sheet)

    async def update_sheet(
        self,
        sheet_id: Any,
        raw_data: Any,
        message: Optional[str],
        session_user_id: uuid.UUID
    ) -> Sheet:
        """Добавление новой ревизии в конец истории листа"""
        data = parse_content(raw_data)

        user = await self.identity_service.find_or_create(session_user_id)
        sheet = await self._get_sheet(sheet_id)

        revision = Revision.create_revision(
            sheet_id=sheet.uuid,
            data=data,
            message=message,
            by=user.name
        )
        sheet = await self._append_revision(sheet, revision)

        logger.info(f"Revision {revision.uuid} appended to sheet {sheet.uuid} by user {user.uuid}")
        return sheet

    async def revert_sheet(self, sheet_id: Any, revision_id: Any, session_user_id: uuid.UUID) -> Sheet:
        """Возврат листа к одной из его ревизий через её копию"""
        user = await self.identity_service.find_or_create(session_user_id)
        sheet = await self._get_sheet(sheet_id)

        revision = await self._get_revision(revision_id)
        if not revision.belongs_to(sheet.uuid):
            raise DomainError("revision is not in revisions of target sheet")

        clone = revision.clone(by=user.name)
        sheet = await self._append_revision(sheet, clone)

        logger.info(f"Sheet {sheet.uuid} reverted to revision {revision.uuid} by user {user.uuid}")
        return sheet

    async def duplicate_latest_revision(self, sheet_id: Any, session_user_id: uuid.UUID) -> Sheet:
        """Копирование последней ревизии листа"""
        user = await self.identity_service.find_or_create(session_user_id)
        sheet = await self._get_sheet(sheet_id)

        revisions = await self.populate_revisions(sheet)
        if not revisions:
            raise DomainError("sheet has no revisions")

        clone = revisions[-1].clone(by=user.name)
        sheet = await self._append_revision(sheet, clone)

        logger.info(f"Latest revision of sheet {sheet.uuid} duplicated by user {user.uuid}")
        return sheet

    async def get_history(self, sheet_id: Any) -> Tuple[Sheet, List[Revision]]:
        """История ревизий листа в хронологическом порядке"""
        sheet = await self._get_sheet(sheet_id)
        return sheet, await self.populate_revisions(sheet)

    async def populate_members(self, sheet: Sheet) -> PopulatedSheet:
        """Раскрытие владельцев, соавторов и каналов чата листа"""
        owners = await self.identity_service.get_users(sheet.owner_ids)
        collaborators = await self.identity_service.get_users(sheet.collaborator_ids)
        chat_channels = await self.chat_channel_repository.get_many(sheet.chat_channel_ids)
        return PopulatedSheet(
            sheet=sheet,
            owners=owners,
            collaborators=collaborators,
            chat_channels=chat_channels
        )

    async def populate_revisions(self, sheet: Sheet) -> List[Revision]:
        return await self.revision_repository.get_many(sheet.revision_ids)

    async def _populate_user_sheets(self, user: User) -> List[Sheet]:
        return await self.sheet_repository.get_many(user.sheet_ids)

    async def _append_revision(self, sheet: Sheet, revision: Revision) -> Sheet:
        # Ревизия должна существовать раньше, чем лист на неё сошлется
        sheet.append_revision(revision)
        await self.revision_repository.create(revision)
        return await self.sheet_repository.update(sheet)

    async def _get_sheet(self, sheet_id: Any) -> Sheet:
        sheet_uuid = parse_id(sheet_id)
        sheet = await self.sheet_repository.get_by_uuid(sheet_uuid) if sheet_uuid else None
        if not sheet:
            raise DomainError.no_such_sheet()
        return sheet

    async def _get_revision(self, revision_id: Any) -> Revision:
        revision_uuid = parse_id(revision_id)
        revision = await self.revision_repository.get_by_uuid(revision_uuid) if revision_uuid else None
        if not revision:
            raise DomainError.no_such_revision()
        return revision


class RevisionService:
    """Сервис для чтения ревизий"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.revision_repository = RevisionRepository(session)

    async def get_revision(self, revision_id: Any) -> Revision:
        """Получение ревизии по идентификатору"""
        revision_uuid = parse_id(revision_id)
        revision = await self.revision_repository.get_by_uuid(revision_uuid) if revision_uuid else None
        if not revision:
            raise DomainError.no_such_revision(DomainError.REVISION)
        return revision
