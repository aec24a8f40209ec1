"""
Тесты для настройки логирования

Проверяет:
1. Имена логгеров в иерархии "bigint"
2. setup_logging не дублирует handlers
3. Формат вывода
4. Debug-сообщения алгоритмов
"""

import io
import logging

import pytest

from src.bigint.domain.integer import Int
from src.bigint.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging
from src.bigint.math.number_theory import isqrt, next_prime


@pytest.fixture
def root_logger():
    """Восстанавливает состояние корневого логгера пакета после теста."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestGetLogger:
    """Тесты get_logger"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("src.bigint.math.number_theory", "bigint.math.number_theory"),
            ("bigint.core", "bigint.core"),
            ("bigint", "bigint"),
            ("app", "bigint.app"),
        ],
    )
    def test_names(self, name: str, expected: str) -> None:
        """Логгер всегда под корнем пакета"""
        assert get_logger(name).name == expected

    def test_package_silent_by_default(self) -> None:
        """На корневом логгере стоит NullHandler"""
        import src.bigint  # noqa: F401

        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in root.handlers)


class TestSetupLogging:
    """Тесты setup_logging"""

    def test_no_duplicate_handlers(self, root_logger) -> None:
        """Повторный вызов заменяет консольный handler"""
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())
        console = [h for h in root_logger.handlers if getattr(h, "_bigint_console", False)]
        assert len(console) == 1

    def test_output_format(self, root_logger) -> None:
        """[время] [уровень] [компонент] сообщение"""
        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        get_logger("src.bigint.test").info("hello %d", 42)
        line = stream.getvalue().strip()
        assert "[INFO    ]" in line
        assert "[bigint.test]" in line
        assert line.endswith("hello 42")

    def test_level_filters(self, root_logger) -> None:
        """DEBUG не выводится при уровне INFO"""
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        get_logger("bigint.test").debug("hidden")
        assert stream.getvalue() == ""


class TestAlgorithmLogging:
    """Debug-сообщения алгоритмов"""

    def test_isqrt_reports_iterations(self, caplog) -> None:
        """isqrt пишет число итераций"""
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
        isqrt(Int(10**30))
        assert any("isqrt" in r.getMessage() for r in caplog.records)

    def test_next_prime_reports_candidates(self, caplog) -> None:
        """next_prime пишет число проверенных кандидатов"""
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
        next_prime(Int(90))
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("next_prime(90)") for m in messages)
