"""
Contract Validation Module

JSON Schema контракт сериализованного Int.
"""

from .validators import (
    SCHEMA_DIR,
    IntegerContract,
    dump_integer_payload,
    load_integer_schema,
    validate_integer_payload,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "IntegerContract",
    # Functions
    "load_integer_schema",
    "validate_integer_payload",
    "dump_integer_payload",
]
