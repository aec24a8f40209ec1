"""
Random — Генерация случайных неотрицательных Int

Источник случайности внедряется снаружи (любой объект с интерфейсом
random.Random, например random.Random(seed) в тестах или
random.SystemRandom в продакшене). По умолчанию генератор создаёт
random.Random, засеянный из энтропии ОС, один раз на экземпляр.

Алгоритм:
1. Число цифр: заданное или равномерно из [0, max_digits]
2. Каждая цифра равномерно из [0, 9]
3. Старшая цифра 0 перевыбирается из [1, 9] (инвариант нормализации)
"""

import random
from dataclasses import dataclass
from typing import Final, Optional

from src.bigint.domain.integer import Int
from src.bigint.errors import InvalidArgument
from src.bigint.logging_config import get_logger

logger = get_logger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Sentinel: число цифр выбирается случайно
RANDOM_DIGITS_AUTO: Final[int] = -1

# Максимальное число цифр при случайном выборе длины.
# Совпадает с sys.int_info.default_max_str_digits в CPython.
RANDOM_MAX_DIGITS_DEFAULT: Final[int] = 4300


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RandomConfig:
    """Конфигурация генератора случайных Int."""

    max_digits: int = RANDOM_MAX_DIGITS_DEFAULT

    def __post_init__(self) -> None:
        if self.max_digits < 0:
            raise InvalidArgument(f"max_digits must be non-negative, got {self.max_digits}")


# =============================================================================
# GENERATOR
# =============================================================================


class RandomIntGenerator:
    """
    Генератор случайных неотрицательных Int с внедряемым источником.

    Examples:
        >>> gen = RandomIntGenerator(rng=random.Random(42))
        >>> gen.generate(5).num_digits
        5
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[RandomConfig] = None,
    ):
        """
        Args:
            rng: источник случайности (default: random.Random, засеянный из ОС)
            config: конфигурация (default: RandomConfig())
        """
        self.rng = rng if rng is not None else random.Random()
        self.config = config or RandomConfig()

    def generate(self, digits: int = RANDOM_DIGITS_AUTO) -> Int:
        """
        Случайное неотрицательное Int.

        Args:
            digits: Точное число цифр (0 → ноль) или RANDOM_DIGITS_AUTO

        Returns:
            Int ровно с `digits` цифрами либо со случайной длиной
            в [0, config.max_digits]

        Raises:
            InvalidArgument: Если digits < -1
            TypeError: Если digits не int
        """
        if isinstance(digits, bool) or not isinstance(digits, int):
            raise TypeError(f"digits must be an int, got {type(digits).__name__!r}")

        if digits < RANDOM_DIGITS_AUTO:
            raise InvalidArgument(
                f"`digits` must be a non-negative integer or {RANDOM_DIGITS_AUTO}, got {digits}"
            )

        count = (
            self.rng.randint(0, self.config.max_digits)
            if digits == RANDOM_DIGITS_AUTO
            else digits
        )

        values = [self.rng.randint(0, 9) for _ in range(count)]

        # старшая цифра не может быть нулём
        if values and values[-1] == 0:
            values[-1] = self.rng.randint(1, 9)

        logger.debug("random: generated %d digits (requested %d)", count, digits)
        return Int.from_digits(values)


def random_int(
    digits: int = RANDOM_DIGITS_AUTO,
    rng: Optional[random.Random] = None,
) -> Int:
    """
    Удобная обёртка над RandomIntGenerator.generate.

    Без rng создаёт новый генератор, засеянный из энтропии ОС; для
    частых вызовов выгоднее держать собственный RandomIntGenerator.
    """
    return RandomIntGenerator(rng=rng).generate(digits)
