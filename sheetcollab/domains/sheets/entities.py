import copy
import uuid
from datetime import datetime
from typing import Any, Optional, List

INITIAL_COMMIT_MESSAGE = "initial commit"


class Comment:
    """Комментарий к ревизии: сообщение и имя автора"""

    def __init__(self, message: Optional[str], by: Optional[str]):
        self.message = message
        self.by = by

    def __eq__(self, other) -> bool:
        if not isinstance(other, Comment):
            return False
        return self.message == other.message and self.by == other.by

    def __repr__(self) -> str:
        return f"Comment(message={self.message!r}, by={self.by!r})"


class Revision:
    """Неизменяемый снимок содержимого листа"""

    def __init__(
        self,
        uuid: uuid.UUID,
        sheet_id: Optional[uuid.UUID],
        data: Any,
        comment: Comment,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.sheet_id = sheet_id
        self.data = data
        self.comment = comment
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    @classmethod
    def create_revision(
        cls,
        sheet_id: Optional[uuid.UUID],
        data: Any,
        message: Optional[str],
        by: Optional[str]
    ) -> "Revision":
        """Создание новой ревизии с новым идентификатором"""
        return cls(
            uuid=uuid.uuid4(),
            sheet_id=sheet_id,
            data=data,
            comment=Comment(message=message, by=by)
        )

    def clone(self, by: Optional[str]) -> "Revision":
        """Копия ревизии от имени другого пользователя.

        Новый uuid, то же содержимое и тот же лист; исходная ревизия
        не изменяется.
        """
        return Revision.create_revision(
            sheet_id=self.sheet_id,
            data=copy.deepcopy(self.data),
            message=f"cloned from revision {self.uuid}",
            by=by
        )

    def belongs_to(self, sheet_id: uuid.UUID) -> bool:
        return self.sheet_id == sheet_id

    def __eq__(self, other) -> bool:
        if not isinstance(other, Revision):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Revision(uuid={self.uuid}, sheet_id={self.sheet_id}, comment={self.comment})"


class Sheet:
    """Сущность листа с историей ревизий"""

    def __init__(
        self,
        uuid: uuid.UUID,
        name: Optional[str],
        owner_ids: Optional[List[uuid.UUID]] = None,
        collaborator_ids: Optional[List[uuid.UUID]] = None,
        chat_channel_ids: Optional[List[uuid.UUID]] = None,
        revision_ids: Optional[List[uuid.UUID]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.name = name
        self.owner_ids = list(owner_ids or [])
        self.collaborator_ids = list(collaborator_ids or [])
        self.chat_channel_ids = list(chat_channel_ids or [])
        self.revision_ids = list(revision_ids or [])
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    def append_revision(self, revision: Revision) -> None:
        """Добавление ревизии в конец истории"""
        self.revision_ids.append(revision.uuid)
        self.updated_at = datetime.utcnow()

    @property
    def latest_revision_id(self) -> Optional[uuid.UUID]:
        return self.revision_ids[-1] if self.revision_ids else None

    @classmethod
    def create_sheet(
        cls,
        name: Optional[str],
        owner_id: uuid.UUID,
        chat_channel_id: uuid.UUID,
        revision_id: uuid.UUID
    ) -> "Sheet":
        """Создание нового листа с каналом чата и начальной ревизией"""
        return cls(
            uuid=uuid.uuid4(),
            name=name,
            owner_ids=[owner_id],
            chat_channel_ids=[chat_channel_id],
            revision_ids=[revision_id]
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sheet):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Sheet(uuid={self.uuid}, name={self.name}, revisions={len(self.revision_ids)})"


class PopulatedSheet:
    """Лист вместе с раскрытыми владельцами, соавторами и каналами чата"""

    def __init__(self, sheet: Sheet, owners: list, collaborators: list, chat_channels: list):
        self.sheet = sheet
        self.owners = owners
        self.collaborators = collaborators
        self.chat_channels = chat_channels

    def __repr__(self) -> str:
        return f"PopulatedSheet(sheet={self.sheet}, owners={len(self.owners)})"
