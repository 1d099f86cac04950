import logging

from pydantic_settings import SettingsConfigDict, BaseSettings


class LoggerSettings(BaseSettings):
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow"
    )

    def get_logging_level(self) -> int:
        return getattr(logging, self.LOG_LEVEL.upper(), logging.WARNING)


# Библиотека не трогает корневой логгер, пока приложение само не вызовет setup_logging()
logger = logging.getLogger("simpagin")
logger.addHandler(logging.NullHandler())


def setup_logging(settings: LoggerSettings | None = None) -> None:
    """
    Настроить вывод логов для приложения, использующего simpagin

    :param settings: настройки логирования (по умолчанию читаются из окружения / .env)
    """
    settings = settings or LoggerSettings()
    logging.basicConfig(
        level=settings.get_logging_level(),
        format="%(asctime)s : %(levelname)s : %(module)s : %(funcName)s: %(message)s",
        datefmt="%d-%b-%y %H:%M:%S",
    )
    logger.setLevel(settings.get_logging_level())
