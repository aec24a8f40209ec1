"""
Errors — Таксономия ошибок целочисленной арифметики

Все ошибки выбрасываются синхронно в точке некорректного вызова и не
перехватываются внутри ядра. Каждый вид ошибки также наследуется от
соответствующего встроенного исключения Python, чтобы стандартные
обработчики (ValueError, ZeroDivisionError) продолжали работать.

Иерархия:
    IntError
    ├── InvalidLiteral   (ValueError)        — некорректный текстовый литерал
    ├── DivideByZero     (ZeroDivisionError) — деление / остаток на ноль
    ├── DomainError      (ValueError)        — аргумент вне области определения
    └── InvalidArgument  (ValueError)        — некорректный параметр операции
"""


class IntError(Exception):
    """Базовый класс всех ошибок пакета bigint."""

    pass


class InvalidLiteral(IntError, ValueError):
    """
    Некорректный текстовый литерал целого числа.

    Допустимый литерал: необязательный знак '+' или '-', затем одна или
    более ASCII цифр. Пустая строка и одиночный знак невалидны.
    """

    pass


class DivideByZero(IntError, ZeroDivisionError):
    """Деление или взятие остатка с нулевым делителем."""

    pass


class DomainError(IntError, ValueError):
    """
    Аргумент вне области определения функции.

    Примеры: факториал отрицательного числа, корень из отрицательного числа,
    логарифм неположительного числа или по основанию < 2,
    ноль в отрицательной степени.
    """

    pass


class InvalidArgument(IntError, ValueError):
    """Некорректный параметр операции (например, отрицательное число цифр)."""

    pass
