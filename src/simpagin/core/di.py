from dishka import Container, Provider, Scope, make_container, provide

from simpagin.application.services.paginator import PaginatorService
from simpagin.application.widgets.keyboards import PaginationKeyboard
from simpagin.core.config import PaginatorConfig
from simpagin.domain.services.paginator import PaginatorServiceInterface


class ConfigProvider(Provider):
    @provide(scope=Scope.APP)
    def get_paginator_config(self) -> PaginatorConfig:
        return PaginatorConfig()


class ServiceProvider(Provider):
    @provide(scope=Scope.APP)
    def get_paginator_service(self, config: PaginatorConfig) -> PaginatorServiceInterface:
        return PaginatorService(config)


class WidgetProvider(Provider):
    """Провайдер UI-виджетов"""

    @provide(scope=Scope.REQUEST)
    def get_pagination_keyboard(self, config: PaginatorConfig) -> PaginationKeyboard:
        """
        Предоставляет экземпляр клавиатуры навигации

        :return: PaginationKeyboard с префиксом из настроек
        """

        return PaginationKeyboard(prefix=config.PAGINATOR_KEYBOARD_PREFIX)


def create_container() -> Container:
    container = make_container(
        ConfigProvider(),
        ServiceProvider(),
        WidgetProvider(),
    )

    return container
