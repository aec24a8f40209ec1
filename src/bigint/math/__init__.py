"""
Math modules для bigint

Теоретико-числовые алгоритмы, генерация случайных чисел и системы
счисления поверх value type Int.
"""

# Number Theory
from src.bigint.math.number_theory import (
    factorial,
    gcd,
    ilog,
    is_prime,
    isqrt,
    lcm,
    next_prime,
    power,
)

# Random
from src.bigint.math.random_gen import (
    RANDOM_DIGITS_AUTO,
    RANDOM_MAX_DIGITS_DEFAULT,
    RandomConfig,
    RandomIntGenerator,
    random_int,
)

# Radix
from src.bigint.math.radix import (
    RADIX_MAX,
    RADIX_MIN,
    char_to_digit,
    format_radix,
    parse_radix,
)

__all__ = [
    # Number Theory
    "factorial",
    "gcd",
    "ilog",
    "is_prime",
    "isqrt",
    "lcm",
    "next_prime",
    "power",
    # Random: Constants
    "RANDOM_DIGITS_AUTO",
    "RANDOM_MAX_DIGITS_DEFAULT",
    # Random: Types
    "RandomConfig",
    "RandomIntGenerator",
    # Random: Functions
    "random_int",
    # Radix: Constants
    "RADIX_MAX",
    "RADIX_MIN",
    # Radix: Functions
    "char_to_digit",
    "format_radix",
    "parse_radix",
]
