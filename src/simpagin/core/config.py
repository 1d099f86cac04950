from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from simpagin.domain.entities.constants import (
    DEFAULT_FRAME_LENGTH,
    DEFAULT_ITEMS_ON_PAGE,
    DEFAULT_PREFIX,
)

# Загружаем .env из корня проекта
env_path = Path(__file__).parent.parent.parent.parent / ".env"
load_dotenv(env_path)


class PaginatorConfig(BaseSettings):
    """Настройки пагинатора по умолчанию."""
    PAGINATOR_ITEMS_ON_PAGE: int = DEFAULT_ITEMS_ON_PAGE  # элементов на странице
    PAGINATOR_FRAME_LENGTH: int = DEFAULT_FRAME_LENGTH  # страниц в окне навигации
    PAGINATOR_STRICT: bool = False  # бросать исключения вместо нормализации входа
    PAGINATOR_KEYBOARD_PREFIX: str = DEFAULT_PREFIX

    model_config = SettingsConfigDict(env_file=str(env_path), env_file_encoding="utf-8", extra="allow")
