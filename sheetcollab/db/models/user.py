from sqlalchemy import Column, String, JSON

from sheetcollab.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    # Идентификаторы листов пользователя в виде строк
    sheet_ids = Column(JSON, nullable=False, default=list)
