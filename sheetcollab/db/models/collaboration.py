from sqlalchemy import Column, JSON, Uuid

from sheetcollab.db.base import BaseModel


class ChatChannel(BaseModel):
    __tablename__ = "chat_channels"

    sheet_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    user_ids = Column(JSON, nullable=False, default=list)
