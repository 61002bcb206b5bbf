import uuid
from datetime import datetime
from typing import Optional, List


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        uuid: uuid.UUID,
        name: str,
        sheet_ids: Optional[List[uuid.UUID]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.name = name
        self.sheet_ids = list(sheet_ids or [])
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    def add_sheet(self, sheet_id: uuid.UUID) -> None:
        """Добавление листа в список листов пользователя"""
        self.sheet_ids.append(sheet_id)
        self.updated_at = datetime.utcnow()

    @classmethod
    def create_user(cls, user_id: uuid.UUID, name: Optional[str] = None) -> "User":
        """Создание пользователя для идентификатора сессии"""
        return cls(
            uuid=user_id,
            name=name or f"user-{user_id.hex[:8]}"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"User(uuid={self.uuid}, name={self.name}, sheets={len(self.sheet_ids)})"
