from pydantic import BaseModel, ConfigDict
import uuid


class UserSummary(BaseModel):
    """Проекция пользователя: только имя"""
    uuid: uuid.UUID
    name: str

    model_config = ConfigDict(from_attributes=True)
