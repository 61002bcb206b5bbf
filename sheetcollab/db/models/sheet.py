from sqlalchemy import Column, String, Text, JSON, Uuid

from sheetcollab.db.base import BaseModel


class Sheet(BaseModel):
    __tablename__ = "sheets"

    name = Column(String(255), nullable=True)
    owner_ids = Column(JSON, nullable=False, default=list)
    collaborator_ids = Column(JSON, nullable=False, default=list)
    chat_channel_ids = Column(JSON, nullable=False, default=list)
    # Порядок элементов совпадает с хронологией ревизий
    revision_ids = Column(JSON, nullable=False, default=list)


class Revision(BaseModel):
    __tablename__ = "revisions"

    # Без ForeignKey: ревизия сохраняется раньше своего листа
    sheet_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    data = Column(JSON, nullable=True)
    comment_message = Column(Text, nullable=True)
    comment_by = Column(String(100), nullable=True)
