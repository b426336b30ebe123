from pathlib import Path

from pydantic import ConfigDict
from pydantic_settings import BaseSettings
from functools import lru_cache

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    LOCALES_DIR: str = str(BASE_DIR / 'locales')
    DEFAULT_LOCALE: str = 'en'
    DUMP_DICTIONARIES: bool = False
    LOG_LEVEL: str = 'INFO'
    HOST: str = '127.0.0.1'
    PORT: int = 8000

    model_config = ConfigDict(env_file = ".env")

@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
