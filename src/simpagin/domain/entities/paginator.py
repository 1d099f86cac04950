from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, TypeVar

from simpagin.domain.entities.page import Page, PageFormatter, PageKind

T = TypeVar("T")


@dataclass
class Paginator:
    """Результат расчёта пагинации."""

    active_page: int
    items_count: int
    items_on_page: int
    frame_length: int
    pages_count: int
    previous_page: Optional[Page] = None
    next_page: Optional[Page] = None
    pages: list[Page] = field(default_factory=list)
    formatter: Optional[PageFormatter] = field(default=None, compare=False, repr=False)

    @property
    def has_previous(self) -> bool:
        """Есть ли предыдущая страница."""
        return self.previous_page is not None

    @property
    def has_next(self) -> bool:
        """Есть ли следующая страница."""
        return self.next_page is not None

    @property
    def active(self) -> Optional[Page]:
        """Активная страница окна (None, если окно пустое)."""
        for page in self.pages:
            if page.is_active:
                return page
        return None

    @property
    def offset(self) -> int:
        """Индекс первого элемента активной страницы."""
        return (self.active_page - 1) * self.items_on_page

    def scroller(self, kind: PageKind) -> Page:
        """
        Страница-скроллер для отрисовки

        :param kind: PageKind.PREVIOUS или PageKind.NEXT
        :return: соседняя страница, либо заглушка с номером 0, если соседа нет
        """
        if kind == PageKind.PREVIOUS:
            page = self.previous_page
        elif kind == PageKind.NEXT:
            page = self.next_page
        else:
            raise ValueError(f"Скроллер может быть только PREVIOUS или NEXT, получено: {kind}")
        if page is not None:
            return page
        return Page(kind=kind, formatter=self.formatter)

    def set_formatter(self, formatter: Optional[PageFormatter]) -> "Paginator":
        """
        Установить одну функцию форматирования для всех страниц пагинатора

        :param formatter: функция Page -> str
        :return: тот же пагинатор (для цепочек вызовов)
        """
        self.formatter = formatter
        if self.previous_page is not None:
            self.previous_page.formatter = formatter
        for page in self.pages:
            page.formatter = formatter
        if self.next_page is not None:
            self.next_page.formatter = formatter
        return self

    def render(self) -> str:
        """Склеить предыдущую, все страницы окна и следующую без разделителей."""
        return "".join(page.format() for page in self)

    def get_start_index(self) -> int:
        """
        Индекс первого элемента на странице

        Страница берётся по позиции active_page - 1 в окне, а не по флагу is_active,
        поэтому значение совпадает с offset только когда окно начинается с первой страницы.
        """
        position = self.active_page - 1
        if position >= len(self.pages):
            return 0
        return self.pages[position].index

    def page_items(self, items: Sequence[T]) -> list[T]:
        """
        Вырезать элементы активной страницы

        :param items: полный список элементов
        :return: элементы активной страницы
        """
        if self.pages_count == 0:
            return []
        start = self.offset
        end = min(start + self.items_on_page, len(items))
        return list(items[start:end])

    def __iter__(self) -> Iterator[Page]:
        yield self.scroller(PageKind.PREVIOUS)
        yield from self.pages
        yield self.scroller(PageKind.NEXT)

    def __str__(self) -> str:
        return self.render()
