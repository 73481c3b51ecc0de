# todo_api/core/config.py
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    database_url: str = "sqlite:///./todos.db"
    db_echo: bool = False
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    cors_allow_origins: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
