"""
bigint — целые числа произвольной точности в десятичном представлении.

Пакет содержит:
- core/      : представление (знак + цифры little-endian) и поразрядную арифметику
- domain/    : value type Int и сериализуемую модель IntegerPayload
- math/      : теоретико-числовые алгоритмы, случайные числа, системы счисления
- contracts/ : JSON Schema контракты
"""

import logging

from src.bigint.core.digits import DIGIT_BASE, Sign
from src.bigint.domain import (
    MINUS_ONE,
    ONE,
    TWO,
    ZERO,
    Int,
    IntegerPayload,
    IntLike,
    as_int,
)
from src.bigint.errors import (
    DivideByZero,
    DomainError,
    IntError,
    InvalidArgument,
    InvalidLiteral,
)
from src.bigint.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging
from src.bigint.math import (
    RANDOM_DIGITS_AUTO,
    RANDOM_MAX_DIGITS_DEFAULT,
    RandomConfig,
    RandomIntGenerator,
    factorial,
    format_radix,
    gcd,
    ilog,
    is_prime,
    isqrt,
    lcm,
    next_prime,
    parse_radix,
    power,
    random_int,
)

# Библиотека молчит, пока приложение не вызовет setup_logging()
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Representation
    "DIGIT_BASE",
    "Sign",
    # Value type
    "Int",
    "IntLike",
    "as_int",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "TWO",
    "IntegerPayload",
    # Errors
    "IntError",
    "InvalidLiteral",
    "DivideByZero",
    "DomainError",
    "InvalidArgument",
    # Number theory
    "factorial",
    "gcd",
    "ilog",
    "is_prime",
    "isqrt",
    "lcm",
    "next_prime",
    "power",
    # Random
    "RANDOM_DIGITS_AUTO",
    "RANDOM_MAX_DIGITS_DEFAULT",
    "RandomConfig",
    "RandomIntGenerator",
    "random_int",
    # Radix
    "format_radix",
    "parse_radix",
    # Logging
    "get_logger",
    "setup_logging",
]
