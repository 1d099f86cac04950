from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simpagin.common.logs import logger


class PaginationParams(BaseModel):
    """Параметры пагинации из запроса (обычно строки query string)."""

    page: int = Field(default=1, description="Номер активной страницы")
    items_count: int = Field(default=0, description="Общее количество элементов")
    items_on_page: Optional[int] = Field(default=None, description="Элементов на странице (None - из настроек)")
    frame_length: Optional[int] = Field(default=None, description="Страниц в окне (None - из настроек)")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("page", "items_count", mode="before")
    @classmethod
    def _coerce_required(cls, value: Any) -> int:
        if value is None or value == "":
            return 0
        return _to_int(value)

    @field_validator("items_on_page", "frame_length", mode="before")
    @classmethod
    def _coerce_optional(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        return _to_int(value)


def _to_int(value: Any) -> int:
    """Привести значение к int; нечисловое значение становится 0 и позже нормализуется."""
    try:
        if isinstance(value, (bool, int, float)):
            return int(value)
        return int(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Некорректный параметр пагинации: {value!r}, используем 0")
        return 0
