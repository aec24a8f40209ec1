"""
IntegerPayload — Сериализуемая модель целого числа

Immutable Pydantic модель для передачи Int через JSON.
Полная совместимость с JSON Schema (src/bigint/contracts/schema/integer.json).

Формат:
    {"sign": -1 | 0 | 1, "digits": "<модуль, старшая цифра первой>"}

Ноль: {"sign": 0, "digits": "0"}.
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator

from src.bigint.core.digits import Sign
from src.bigint.domain.integer import Int

# Канонический модуль: "0" либо без ведущих нулей
CANONICAL_DIGITS_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"


class IntegerPayload(BaseModel):
    """
    Модель сериализованного Int.

    Immutable модель (frozen=True): изменения создают новый экземпляр.
    """

    sign: Sign = Field(..., description="Знак числа (-1, 0, 1)")
    digits: str = Field(
        ...,
        min_length=1,
        pattern=CANONICAL_DIGITS_PATTERN,
        description="Модуль числа, старшая цифра первой, без ведущих нулей",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_sign_consistency(self) -> "IntegerPayload":
        """
        Согласованность знака и модуля.

        sign == ZERO тогда и только тогда, когда digits == "0".
        """
        if (self.sign == Sign.ZERO) != (self.digits == "0"):
            raise ValueError(
                f"sign {int(self.sign)} is inconsistent with digits {self.digits!r}"
            )
        return self

    @classmethod
    def from_int(cls, value: Int) -> "IntegerPayload":
        """
        Построение payload из Int.

        Args:
            value: Исходное число

        Returns:
            IntegerPayload
        """
        return cls(sign=value.sign, digits=str(abs(value)))

    @property
    def literal(self) -> str:
        """Канонический литерал ("-42", "0", "7")."""
        return "-" + self.digits if self.sign == Sign.NEGATIVE else self.digits

    def to_int(self) -> Int:
        """Восстановление Int."""
        return Int(self.literal)
