"""
Виджет навигации по страницам для inline-клавиатуры Telegram.
"""
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from simpagin.domain.entities.constants import DEFAULT_PREFIX
from simpagin.domain.entities.page import Page, PageKind
from simpagin.domain.entities.paginator import Paginator


class PaginationKeyboard:
    """
    Клавиатура навигации по страницам

    Строит одну строку кнопок [⬅️] [страницы окна...] [➡️] по рассчитанному пагинатору.
    """

    def __init__(
        self,
        *,
        prefix: str = DEFAULT_PREFIX,
        prev_text: str = "⬅️",
        next_text: str = "➡️",
        show_disabled: bool = True,
    ):
        """
        Инициализация виджета

        :param prefix: префикс для callback_data (для избежания конфликтов)
        :param prev_text: текст кнопки "назад"
        :param next_text: текст кнопки "вперёд"
        :param show_disabled: показывать ли неактивные скроллеры на краях
        """
        self.prefix = prefix
        self.prev_text = prev_text
        self.next_text = next_text
        self.show_disabled = show_disabled

    @property
    def noop_data(self) -> str:
        return f"{self.prefix}:noop"

    def page_data(self, number: int) -> str:
        return f"{self.prefix}:page:{number}"

    def _button(self, page: Page) -> InlineKeyboardButton | None:
        if page.kind == PageKind.MIDDLE:
            if page.is_active:
                return InlineKeyboardButton(text=f"· {page.number} ·", callback_data=self.noop_data)
            return InlineKeyboardButton(text=str(page.number), callback_data=self.page_data(page.number))

        text = self.prev_text if page.kind == PageKind.PREVIOUS else self.next_text
        if page.is_sentinel:
            if not self.show_disabled:
                return None
            return InlineKeyboardButton(text=" ", callback_data=self.noop_data)
        return InlineKeyboardButton(text=text, callback_data=self.page_data(page.number))

    def build_keyboard(self, pg: Paginator) -> InlineKeyboardMarkup:
        """
        Построение клавиатуры навигации

        :param pg: рассчитанный пагинатор
        :return: inline-клавиатура; пустая, если страниц нет.
            Больше 8 кнопок в строке Telegram не допускает, лишние переносятся
        """
        kb = InlineKeyboardBuilder()
        if not pg.pages:
            return kb.as_markup()

        buttons = [b for b in (self._button(page) for page in pg) if b is not None]
        kb.row(*buttons)
        return kb.as_markup()

    def parse_callback(self, data: str | None) -> int | None:
        """
        Разбор callback_data кнопки

        :param data: callback_data из CallbackQuery
        :return: номер выбранной страницы или None (чужой префикс, noop, мусор)
        """
        if not data:
            return None
        parts = data.split(":")
        if len(parts) != 3 or parts[0] != self.prefix or parts[1] != "page":
            return None
        try:
            number = int(parts[2])
        except ValueError:
            return None
        return number if number > 0 else None
