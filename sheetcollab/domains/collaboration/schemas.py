from pydantic import BaseModel, ConfigDict
import uuid


class ChatChannelSummary(BaseModel):
    """Проекция канала чата внутри листа"""
    uuid: uuid.UUID

    model_config = ConfigDict(from_attributes=True)
