from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"

    # Сессия пользователя хранится в cookie в виде подписанного JWT
    session_cookie_name: str = "sheet_session"
    session_ttl_days: int = 30

    db_echo: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
