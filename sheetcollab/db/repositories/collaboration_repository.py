from typing import Optional, List, TYPE_CHECKING
import uuid

from sqlalchemy import select

from sheetcollab.db.models.collaboration import ChatChannel as ChatChannelModel
from sheetcollab.db.repositories.base import Repository, ids_from_json, ids_to_json

if TYPE_CHECKING:
    from sheetcollab.domains.collaboration.entities import ChatChannel


class ChatChannelRepository(Repository):
    """Репозиторий для работы с каналами чата"""

    async def create(self, channel: "ChatChannel") -> "ChatChannel":
        """Создание нового канала"""
        db_channel = ChatChannelModel(
            uuid=channel.uuid,
            sheet_id=channel.sheet_id,
            user_ids=ids_to_json(channel.user_ids)
        )

        await self._add(db_channel)
        return self._to_domain(db_channel)

    async def get_by_uuid(self, channel_uuid: uuid.UUID) -> Optional["ChatChannel"]:
        """Получение канала по UUID"""
        result = await self._execute(
            select(ChatChannelModel)
            .execution_options(populate_existing=True)
            .where(ChatChannelModel.uuid == channel_uuid)
        )
        db_channel = result.scalar_one_or_none()
        return self._to_domain(db_channel) if db_channel else None

    async def get_many(self, channel_uuids: List[uuid.UUID]) -> List["ChatChannel"]:
        """Получение каналов в порядке переданных идентификаторов"""
        if not channel_uuids:
            return []

        result = await self._execute(
            select(ChatChannelModel)
            .execution_options(populate_existing=True)
            .where(ChatChannelModel.uuid.in_(channel_uuids))
        )
        found = {db_channel.uuid: self._to_domain(db_channel) for db_channel in result.scalars().all()}
        return [found[channel_uuid] for channel_uuid in channel_uuids if channel_uuid in found]

    def _to_domain(self, db_channel: ChatChannelModel) -> "ChatChannel":
        """Преобразование модели БД в доменную сущность"""
        from sheetcollab.domains.collaboration.entities import ChatChannel

        return ChatChannel(
            uuid=db_channel.uuid,
            sheet_id=db_channel.sheet_id,
            user_ids=ids_from_json(db_channel.user_ids),
            created_at=db_channel.created_at,
            updated_at=db_channel.updated_at
        )
