"""Готовые функции форматирования страниц пагинатора."""
from simpagin.domain.entities.page import Page, PageFormatter, PageKind


def plain_formatter(page: Page) -> str:
    """
    Номер страницы как есть

    :param page: страница пагинатора
    :return: номер страницы или пустая строка для заглушки
    """
    return str(page.number) if page.number > 0 else ""


def make_link_formatter(
    url_template: str = "?p={number}",
    prev_label: str = "&laquo;",
    next_label: str = "&raquo;",
) -> PageFormatter:
    """
    Фабрика форматтера в разметке списка <li>

    :param url_template: шаблон ссылки, доступны {number} и {index}
    :param prev_label: текст кнопки "назад"
    :param next_label: текст кнопки "вперёд"
    :return: функция Page -> str
    """

    def formatter(page: Page) -> str:
        if page.kind == PageKind.MIDDLE:
            if page.is_active:
                return f'<li class="active"><span>{page.number}</span></li>'
            href = url_template.format(number=page.number, index=page.index)
            return f'<li><a href="{href}">{page.number}</a></li>'

        label = prev_label if page.kind == PageKind.PREVIOUS else next_label
        if page.is_sentinel:
            return f'<li class="disabled"><span>{label}</span></li>'
        href = url_template.format(number=page.number, index=page.index)
        return f'<li><a href="{href}">{label}</a></li>'

    return formatter


bootstrap_formatter = make_link_formatter()
