from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Optional, List
import uuid
from datetime import datetime

from sheetcollab.domains.collaboration.schemas import ChatChannelSummary
from sheetcollab.domains.identity.schemas import UserSummary


class SheetCreate(BaseModel):
    """Схема для создания листа"""
    name: Optional[str] = Field(None, max_length=255)
    # Структура либо её JSON-сериализация в строке
    data: Any = None


class SheetUpdate(BaseModel):
    """Схема для добавления ревизии"""
    # Любое значение; некорректный идентификатор означает отсутствующий лист
    id: Any = None
    data: Any = None
    message: Optional[str] = None


class SheetReverse(BaseModel):
    """Схема для возврата к ревизии"""
    revision: Any = None


class CommentResponse(BaseModel):
    message: Optional[str]
    by: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class RevisionResponse(BaseModel):
    """Схема для ответа с данными ревизии"""
    uuid: uuid.UUID
    sheet_id: uuid.UUID
    data: Any
    comment: CommentResponse
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SheetResponse(BaseModel):
    """Схема для ответа с данными листа (ссылки в виде идентификаторов)"""
    uuid: uuid.UUID
    name: Optional[str]
    owners: List[uuid.UUID]
    collaborators: List[uuid.UUID]
    chat_channels: List[uuid.UUID]
    revisions: List[uuid.UUID]
    created_at: datetime
    updated_at: datetime


class PopulatedSheetResponse(BaseModel):
    """Схема для ответа с листом, у которого раскрыты участники и каналы"""
    uuid: uuid.UUID
    name: Optional[str]
    owners: List[UserSummary]
    collaborators: List[UserSummary]
    chat_channels: List[ChatChannelSummary]
    revisions: List[uuid.UUID]
    created_at: datetime
    updated_at: datetime


class SheetHistoryResponse(BaseModel):
    """Схема для истории ревизий листа"""
    sheet_id: uuid.UUID
    revisions: List[RevisionResponse]
    total: int
