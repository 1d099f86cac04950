from abc import ABC, abstractmethod
from typing import Optional

from simpagin.domain.entities.page import PageFormatter
from simpagin.domain.entities.paginator import Paginator
from simpagin.domain.entities.params import PaginationParams


class PaginatorServiceInterface(ABC):
    def __init__(self, items_on_page: int, frame_length: int, strict: bool = False):
        """
        Инициализация сервиса пагинации

        :param items_on_page: элементов на странице по умолчанию
        :param frame_length: страниц в окне навигации по умолчанию
        :param strict: бросать PaginationError вместо нормализации входа
        """
        self.items_on_page = items_on_page
        self.frame_length = frame_length
        self.strict = strict

    @abstractmethod
    def build(
        self,
        active_page: int,
        items_count: int,
        items_on_page: Optional[int] = None,
        frame_length: Optional[int] = None,
        formatter: Optional[PageFormatter] = None,
    ) -> Paginator:
        """
        Построить пагинатор

        :param active_page: номер активной страницы
        :param items_count: общее количество элементов
        :param items_on_page: элементов на странице (None - из настроек)
        :param frame_length: страниц в окне навигации (None - из настроек)
        :param formatter: функция форматирования страниц
        :return: рассчитанный пагинатор
        """
        raise NotImplementedError

    @abstractmethod
    def build_from_params(
        self,
        params: PaginationParams,
        formatter: Optional[PageFormatter] = None,
    ) -> Paginator:
        """Построить пагинатор по параметрам запроса."""
        raise NotImplementedError
