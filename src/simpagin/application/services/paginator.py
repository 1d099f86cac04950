from typing import Optional

from simpagin.common.logs import logger
from simpagin.common.utils.pagination import paginate
from simpagin.core.config import PaginatorConfig
from simpagin.domain.entities.page import PageFormatter
from simpagin.domain.entities.paginator import Paginator
from simpagin.domain.entities.params import PaginationParams
from simpagin.domain.services.paginator import PaginatorServiceInterface


class PaginatorService(PaginatorServiceInterface):
    def __init__(self, config: PaginatorConfig):
        super().__init__(
            items_on_page=config.PAGINATOR_ITEMS_ON_PAGE,
            frame_length=config.PAGINATOR_FRAME_LENGTH,
            strict=config.PAGINATOR_STRICT,
        )
        self.config = config

    def build(
        self,
        active_page: int,
        items_count: int,
        items_on_page: Optional[int] = None,
        frame_length: Optional[int] = None,
        formatter: Optional[PageFormatter] = None,
    ) -> Paginator:
        if items_on_page is None:
            items_on_page = self.items_on_page
        if frame_length is None:
            frame_length = self.frame_length

        pg = paginate(
            active_page,
            items_count,
            items_on_page,
            frame_length,
            strict=self.strict,
        )
        logger.debug(
            f"Пагинатор: страница {pg.active_page}/{pg.pages_count}, "
            f"окно {[p.number for p in pg.pages]}"
        )

        if formatter is not None:
            pg.set_formatter(formatter)
        return pg

    def build_from_params(
        self,
        params: PaginationParams,
        formatter: Optional[PageFormatter] = None,
    ) -> Paginator:
        return self.build(
            params.page,
            params.items_count,
            items_on_page=params.items_on_page,
            frame_length=params.frame_length,
            formatter=formatter,
        )
