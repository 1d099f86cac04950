"""Расчёт окна пагинации."""

from simpagin.common.logs import logger
from simpagin.domain.entities.constants import MIN_FRAME_LENGTH, MIN_ITEMS_ON_PAGE
from simpagin.domain.entities.exceptions import (
    InvalidActivePageError,
    InvalidFrameLengthError,
    InvalidItemsCountError,
    InvalidItemsOnPageError,
    PaginationError,
)
from simpagin.domain.entities.page import Page, PageKind
from simpagin.domain.entities.paginator import Paginator


def count_pages(items_count: int, items_on_page: int) -> int:
    """
    Количество страниц (округление вверх)

    :param items_count: общее количество элементов
    :param items_on_page: элементов на странице (>= 1)
    :return: количество страниц, не меньше 0
    """
    return max(0, -(-items_count // items_on_page))


def _frame_start(active_page: int, pages_count: int, frame_length: int) -> int:
    """Номер первой страницы окна, чтобы активная страница была примерно в центре."""
    distance_to_left = frame_length // 2
    distance_to_right = frame_length - distance_to_left

    start = 1
    if active_page > distance_to_left + 1:
        start = active_page - distance_to_left
        # Упёрлись в правый край: сдвигаем окно влево
        if active_page > pages_count - distance_to_right:
            start -= active_page - (pages_count - distance_to_right) - 1
    # Окно длиннее списка страниц
    return max(1, start)


def _validate(active_page: int, items_count: int, items_on_page: int, frame_length: int) -> None:
    """Проверка входа для строгого режима."""
    if items_on_page < MIN_ITEMS_ON_PAGE:
        raise InvalidItemsOnPageError(
            f"items_on_page должно быть >= {MIN_ITEMS_ON_PAGE}, получено {items_on_page}", items_on_page
        )
    if items_count < 0:
        raise InvalidItemsCountError(f"items_count не может быть отрицательным: {items_count}", items_count)
    pages_count = count_pages(items_count, items_on_page)
    if active_page < 1 or active_page > max(pages_count, 1):
        raise InvalidActivePageError(
            f"Страница {active_page} вне диапазона [1, {max(pages_count, 1)}]", active_page
        )
    if frame_length < MIN_FRAME_LENGTH:
        raise InvalidFrameLengthError(
            f"frame_length должно быть >= {MIN_FRAME_LENGTH}, получено {frame_length}", frame_length
        )


def paginate(
    active_page: int,
    items_count: int,
    items_on_page: int,
    frame_length: int,
    *,
    strict: bool = False,
) -> Paginator:
    """
    Рассчитать пагинатор.

    Некорректные значения нормализуются: items_on_page < 1 становится 1,
    активная страница вне [1, pages_count] становится 1, frame_length < 2 становится 2.

    :param active_page: номер активной страницы (начиная с 1)
    :param items_count: общее количество элементов
    :param items_on_page: количество элементов на странице
    :param frame_length: сколько страниц показывать в окне навигации
    :param strict: бросать PaginationError вместо нормализации

    :return: Paginator: рассчитанные страницы окна и соседние страницы
    """
    if strict:
        try:
            _validate(active_page, items_count, items_on_page, frame_length)
        except PaginationError as e:
            logger.warning(f"Отклонены параметры пагинации: {e}")
            raise

    if items_on_page < MIN_ITEMS_ON_PAGE:
        logger.debug(f"items_on_page={items_on_page} -> {MIN_ITEMS_ON_PAGE}")
        items_on_page = MIN_ITEMS_ON_PAGE

    pages_count = count_pages(items_count, items_on_page)

    if active_page < 1 or active_page > pages_count:
        if active_page != 1:
            logger.debug(f"active_page={active_page} вне [1, {pages_count}] -> 1")
        active_page = 1

    if frame_length < MIN_FRAME_LENGTH:
        logger.debug(f"frame_length={frame_length} -> {MIN_FRAME_LENGTH}")
        frame_length = MIN_FRAME_LENGTH

    pg = Paginator(
        active_page=active_page,
        items_count=items_count,
        items_on_page=items_on_page,
        frame_length=frame_length,
        pages_count=pages_count,
    )

    # Индекс скроллеров считается от номера страницы без вычета единицы
    if active_page > 1:
        pg.previous_page = Page(
            index=(active_page - 1) * items_on_page,
            number=active_page - 1,
            kind=PageKind.PREVIOUS,
        )
    if active_page < pages_count:
        pg.next_page = Page(
            index=(active_page + 1) * items_on_page,
            number=active_page + 1,
            kind=PageKind.NEXT,
        )

    start = _frame_start(active_page, pages_count, frame_length)
    for i in range(min(frame_length, pages_count)):
        number = start + i
        pg.pages.append(
            Page(
                index=(number - 1) * items_on_page,
                number=number,
                is_active=number == active_page,
                kind=PageKind.MIDDLE,
            )
        )

    return pg
