import pytest

from simpagin.application.services.paginator import PaginatorService
from simpagin.core.config import PaginatorConfig
from simpagin.domain.entities.page import Page


@pytest.fixture
def comma_formatter():
    """Форматтер "<номер>,", как в эталонных сценариях."""

    def formatter(page: Page) -> str:
        return f"{page.number},"

    return formatter


@pytest.fixture
def config() -> PaginatorConfig:
    return PaginatorConfig(
        PAGINATOR_ITEMS_ON_PAGE=5,
        PAGINATOR_FRAME_LENGTH=3,
        PAGINATOR_STRICT=False,
        PAGINATOR_KEYBOARD_PREFIX="pg",
    )


@pytest.fixture
def service(config: PaginatorConfig) -> PaginatorService:
    return PaginatorService(config)
