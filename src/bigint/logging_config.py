"""
Logging — Централизованная настройка логирования bigint

Библиотека по умолчанию молчит: на корневой логгер пакета ставится
NullHandler (см. src/bigint/__init__.py). Приложение, которому нужен вывод,
вызывает setup_logging().

Использование:
    from src.bigint.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("isqrt converged after %d iterations", iterations)
"""

import logging
import sys
from typing import Final, Optional, TextIO

# Имя корневого логгера пакета
ROOT_LOGGER_NAME: Final[str] = "bigint"

# Уровень по умолчанию для setup_logging
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO

# Format: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE
LOG_FORMAT: Final[str] = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class BigIntLogFormatter(logging.Formatter):
    """Formatter для структурированного вывода: время, уровень, компонент."""

    def __init__(self) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _logger_name(name: str) -> str:
    # Модули импортируются как src.bigint.*, логгеры живут под "bigint"
    if name.startswith("src."):
        name = name[len("src."):]
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return name


def get_logger(name: str) -> logging.Logger:
    """
    Получение логгера компонента в иерархии "bigint".

    Args:
        name: Имя модуля (обычно __name__)

    Returns:
        logging.Logger, дочерний для корневого логгера пакета
    """
    return logging.getLogger(_logger_name(name))


def setup_logging(
    level: int = DEFAULT_LOG_LEVEL,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Настройка консольного вывода для логгеров пакета.

    Повторный вызов заменяет ранее установленный консольный handler,
    а не добавляет ещё один.

    Args:
        level: Уровень логирования (default: INFO)
        stream: Поток вывода (default: sys.stderr)

    Returns:
        Корневой логгер пакета
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, "_bigint_console", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(BigIntLogFormatter())
    handler._bigint_console = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    return root
