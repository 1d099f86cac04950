"""Константы пагинации."""

# Нижние границы входных параметров
MIN_ITEMS_ON_PAGE = 1
MIN_FRAME_LENGTH = 2

# Значения по умолчанию
DEFAULT_ITEMS_ON_PAGE = 10
DEFAULT_FRAME_LENGTH = 10

# Номер страницы-заглушки для отсутствующего соседа
SENTINEL_PAGE_NUMBER = 0

# Префикс callback_data для клавиатуры навигации
DEFAULT_PREFIX = "pg"
