"""
Core representation primitives для bigint

Десятичное little-endian представление модуля числа, нормализация
и поразрядная арифметика над модулями.
"""

from src.bigint.core.digits import (
    # Constants
    DIGIT_BASE,
    # Types
    Sign,
    # Normalization
    normalize,
    pad,
    power_of_ten,
    # Literals
    digits_from_native,
    is_literal,
    parse_literal,
    render,
    # Magnitude arithmetic
    add_magnitudes,
    compare_magnitudes,
    decrement_magnitude,
    divmod_magnitudes,
    increment_magnitude,
    multiply_magnitudes,
    subtract_magnitudes,
)

__all__ = [
    # Constants
    "DIGIT_BASE",
    # Types
    "Sign",
    # Normalization
    "normalize",
    "pad",
    "power_of_ten",
    # Literals
    "digits_from_native",
    "is_literal",
    "parse_literal",
    "render",
    # Magnitude arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "decrement_magnitude",
    "divmod_magnitudes",
    "increment_magnitude",
    "multiply_magnitudes",
    "subtract_magnitudes",
]
