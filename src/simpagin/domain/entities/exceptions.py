"""Ошибки строгого режима пагинации."""


class PaginationError(ValueError):
    """Базовая ошибка пагинации."""

    def __init__(self, message: str, value: int):
        super().__init__(message)
        self.value = value


class InvalidActivePageError(PaginationError):
    """Активная страница вне диапазона [1, pages_count]."""


class InvalidItemsCountError(PaginationError):
    """Отрицательное количество элементов."""


class InvalidItemsOnPageError(PaginationError):
    """Размер страницы меньше минимального."""


class InvalidFrameLengthError(PaginationError):
    """Длина окна навигации меньше минимальной."""
