from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Optional

from simpagin.domain.entities.constants import SENTINEL_PAGE_NUMBER


class PageKind(StrEnum):
    PREVIOUS = "previous"  # Скроллер назад
    MIDDLE = "middle"  # Страница в окне навигации
    NEXT = "next"  # Скроллер вперёд


PageFormatter = Callable[["Page"], str]


@dataclass
class Page:
    """
    Страница пагинатора

    Номер 0 означает отсутствующую страницу (например, предыдущей для первой).
    """

    index: int = 0  # смещение первого элемента страницы в общем списке
    number: int = SENTINEL_PAGE_NUMBER
    is_active: bool = False
    kind: PageKind = PageKind.MIDDLE
    formatter: Optional[PageFormatter] = field(default=None, compare=False, repr=False)

    @property
    def is_sentinel(self) -> bool:
        """Страница-заглушка для отсутствующего соседа."""
        return self.number <= SENTINEL_PAGE_NUMBER

    def format(self) -> str:
        """
        Строковое представление страницы

        :return: результат formatter, если он задан; иначе номер страницы
            или пустая строка для заглушки
        """
        if self.formatter is not None:
            return self.formatter(self)
        if self.number > 0:
            return str(self.number)
        return ""

    def __str__(self) -> str:
        return self.format()
