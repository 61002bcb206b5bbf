import uuid
from datetime import datetime
from typing import Optional, List


class ChatChannel:
    """Канал чата участников листа"""

    def __init__(
        self,
        uuid: uuid.UUID,
        sheet_id: Optional[uuid.UUID] = None,
        user_ids: Optional[List[uuid.UUID]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.sheet_id = sheet_id
        self.user_ids = list(user_ids or [])
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    @classmethod
    def create_channel(cls, participants: List[uuid.UUID], sheet_id: Optional[uuid.UUID] = None) -> "ChatChannel":
        """Создание канала; лист привязывается позже, когда известен его uuid"""
        return cls(
            uuid=uuid.uuid4(),
            sheet_id=sheet_id,
            user_ids=participants
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChatChannel):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"ChatChannel(uuid={self.uuid}, sheet={self.sheet_id}, users={len(self.user_ids)})"
