"""
Domain models and value objects.

Contains the arbitrary-precision Int value type and its serialized payload.
"""

from src.bigint.domain.integer import (
    MINUS_ONE,
    ONE,
    TWO,
    ZERO,
    Int,
    IntLike,
    as_int,
)
from src.bigint.domain.payload import CANONICAL_DIGITS_PATTERN, IntegerPayload

__all__ = [
    # Int value type
    "Int",
    "IntLike",
    "as_int",
    # Constants
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "TWO",
    # Payload model
    "IntegerPayload",
    "CANONICAL_DIGITS_PATTERN",
]
