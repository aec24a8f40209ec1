"""
Digits — Представление и нормализация десятичных цифр

Модуль содержит примитивы над модулем числа (magnitude), хранящимся как
список десятичных цифр 0..9 в порядке little-endian (младшая цифра первой):

    число:  12345000
    digit:  0 0 0 5 4 3 2 1
    index:  0 1 2 3 4 5 6 7

Знак хранится отдельно (Sign) и в этом модуле используется только при
разборе и отрисовке литералов. Все арифметические функции работают с
неотрицательными модулями и возвращают нормализованный результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализованная последовательность не имеет старших нулей
2. Ноль представлен ПУСТОЙ последовательностью
3. Sign.ZERO тогда и только тогда, когда последовательность пуста
   (обеспечивается вызывающим кодом после normalize)
4. Основание строго 10: на этом держится оценка "≤ 9 вычитаний на разряд"
   в divmod_magnitudes
"""

from enum import IntEnum
from typing import Final, List, Sequence, Tuple

from src.bigint.errors import InvalidLiteral

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание внутреннего представления
DIGIT_BASE: Final[int] = 10

# Символы знака в литерале
SIGN_CHARS: Final[str] = "+-"

_ORD_ZERO: Final[int] = ord("0")


# =============================================================================
# ENUMS
# =============================================================================


class Sign(IntEnum):
    """Знак целого числа: -1, 0 или +1."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(digits: List[int]) -> List[int]:
    """
    Удаление старших нулей (in place).

    Если последовательность стала пустой, вызывающий код обязан
    выставить знак Sign.ZERO.

    Args:
        digits: Цифры little-endian

    Returns:
        Тот же список без старших нулей

    Examples:
        >>> normalize([3, 2, 1, 0, 0])
        [3, 2, 1]
        >>> normalize([0, 0])
        []
    """
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def pad(digits: List[int], n: int) -> List[int]:
    """
    Добавление n нулей в старшие разряды (in place).

    Используется для выравнивания длин операндов перед поразрядной
    арифметикой; результат всегда нормализуется после вычисления.

    Args:
        digits: Цифры little-endian
        n: Количество нулей (n <= 0 — без изменений)

    Returns:
        Тот же список, дополненный нулями
    """
    if n > 0:
        digits.extend([0] * n)
    return digits


def power_of_ten(exponent: int) -> List[int]:
    """
    Модуль 10^exponent за O(exponent) без умножений.

    Examples:
        >>> power_of_ten(3)
        [0, 0, 0, 1]
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return [0] * exponent + [1]


# =============================================================================
# ЛИТЕРАЛЫ
# =============================================================================


def is_literal(text: str) -> bool:
    """
    Проверка текстового литерала: [+-]?[0-9]+

    Допускаются только ASCII цифры (не str.isdigit, который принимает
    любые Unicode цифры). Пробелы недопустимы.

    Examples:
        >>> is_literal("+007")
        True
        >>> is_literal("-")
        False
        >>> is_literal(" 1")
        False
    """
    if not text:
        return False

    start = 1 if text[0] in SIGN_CHARS else 0
    if start == len(text):
        # Одиночный знак
        return False

    return all("0" <= ch <= "9" for ch in text[start:])


def parse_literal(text: str) -> Tuple[Sign, List[int]]:
    """
    Разбор текстового литерала в (знак, цифры little-endian).

    Ведущие нули принимаются и отбрасываются нормализацией.

    Args:
        text: Литерал вида [+-]?[0-9]+

    Returns:
        (sign, digits), удовлетворяющие инвариантам представления

    Raises:
        InvalidLiteral: Если литерал не соответствует грамматике

    Examples:
        >>> parse_literal("-120")
        (<Sign.NEGATIVE: -1>, [0, 2, 1])
        >>> parse_literal("+000")
        (<Sign.ZERO: 0>, [])
    """
    if not is_literal(text):
        raise InvalidLiteral(f"Wrong integer literal: {text!r}")

    sign = Sign.NEGATIVE if text[0] == "-" else Sign.POSITIVE
    start = 1 if text[0] in SIGN_CHARS else 0

    digits = [ord(ch) - _ORD_ZERO for ch in reversed(text[start:])]
    normalize(digits)

    if not digits:
        sign = Sign.ZERO

    return sign, digits


def digits_from_native(value: int) -> Tuple[Sign, List[int]]:
    """
    Конверсия нативного int в (знак, цифры little-endian).

    Args:
        value: Нативное целое

    Returns:
        (sign, digits)

    Examples:
        >>> digits_from_native(-305)
        (<Sign.NEGATIVE: -1>, [5, 0, 3])
    """
    if value == 0:
        return Sign.ZERO, []

    sign = Sign.POSITIVE if value > 0 else Sign.NEGATIVE
    value = abs(value)

    digits: List[int] = []
    while value > 0:
        value, digit = divmod(value, DIGIT_BASE)
        digits.append(digit)

    return sign, digits


def render(sign: Sign, digits: Sequence[int]) -> str:
    """
    Каноническая текстовая форма.

    Ноль → "0", отрицательные с префиксом "-", положительные без префикса,
    цифры от старшей к младшей.

    Examples:
        >>> render(Sign.NEGATIVE, [0, 2, 1])
        '-120'
        >>> render(Sign.ZERO, [])
        '0'
    """
    if sign == Sign.ZERO:
        return "0"

    body = "".join(chr(_ORD_ZERO + d) for d in reversed(digits))
    return "-" + body if sign == Sign.NEGATIVE else body


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхстороннее сравнение нормализованных модулей.

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1

    return 0


# =============================================================================
# АДДИТИВНЫЕ ОПЕРАЦИИ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Сложение модулей "в столбик" с переносом.

    Операнды выравниваются по длине и получают один дополнительный
    старший разряд под перенос.

    Examples:
        >>> add_magnitudes([9, 9], [1])
        [0, 0, 1]
    """
    size = max(len(a), len(b)) + 1

    num1 = pad(list(a), size - 1 - len(a))
    num2 = pad(list(b), size - 1 - len(b))
    result = [0] * size

    for i in range(size - 1):
        result[i] += num1[i] + num2[i]
        result[i + 1] = result[i] // DIGIT_BASE
        result[i] %= DIGIT_BASE

    return normalize(result)


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Вычитание модулей "в столбик" с заёмом.

    Требует |a| >= |b| (проверяется вызывающим кодом через
    compare_magnitudes). Результат может быть пустым (ноль).

    Examples:
        >>> subtract_magnitudes([0, 0, 1], [1])
        [9, 9]
    """
    size = len(a)

    num1 = list(a)
    num2 = pad(list(b), size - len(b))
    result = [0] * size

    for i in range(size):
        if num1[i] < num2[i]:
            # заём из старшего разряда; при |a| >= |b| старший разряд существует
            num1[i + 1] -= 1
            num1[i] += DIGIT_BASE
        result[i] = num1[i] - num2[i]

    return normalize(result)


def increment_magnitude(digits: List[int]) -> List[int]:
    """
    Быстрое |x| + 1 (in place).

    Затрагивает только младшую серию девяток, O(1) амортизированно.
    Пустая последовательность (ноль) превращается в [1].
    """
    # запасной разряд под перенос
    digits.append(0)

    i = 0
    while digits[i] == 9:
        digits[i] = 0
        i += 1
    digits[i] += 1

    return normalize(digits)


def decrement_magnitude(digits: List[int]) -> List[int]:
    """
    Быстрое |x| - 1 (in place).

    Затрагивает только младшую серию нулей. Требует непустой
    последовательности; результат [1] → [] (ноль).

    Raises:
        ValueError: Если digits пуст (модуль нуля нельзя уменьшить)
    """
    if not digits:
        raise ValueError("Cannot decrement the magnitude of zero")

    i = 0
    while digits[i] == 0:
        digits[i] = 9
        i += 1
    digits[i] -= 1

    return normalize(digits)


# =============================================================================
# МУЛЬТИПЛИКАТИВНЫЕ ОПЕРАЦИИ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Умножение модулей "в столбик", O(n·m).

    Перенос распространяется сразу на каждой позиции; старшая позиция
    всегда < 10, так как |a|·|b| < 10^(len(a)+len(b)).

    Examples:
        >>> multiply_magnitudes([2, 1], [2, 1])
        [4, 4, 1]
    """
    if not a or not b:
        return []

    result = [0] * (len(a) + len(b))

    for i, da in enumerate(a):
        if da == 0:
            continue
        for j, db in enumerate(b):
            result[i + j] += da * db
            result[i + j + 1] += result[i + j] // DIGIT_BASE
            result[i + j] %= DIGIT_BASE

    return normalize(result)


def _compare_shifted(remainder: Sequence[int], divisor: Sequence[int], shift: int) -> int:
    """Сравнение remainder с divisor·10^shift (оба нормализованы)."""
    shifted_len = len(divisor) + shift
    if len(remainder) != shifted_len:
        return 1 if len(remainder) > shifted_len else -1

    for i in range(len(remainder) - 1, shift - 1, -1):
        d = divisor[i - shift]
        if remainder[i] != d:
            return 1 if remainder[i] > d else -1

    # младшие shift разрядов сдвинутого делителя нулевые
    return 1 if any(remainder[:shift]) else 0


def _subtract_shifted(remainder: List[int], divisor: Sequence[int], shift: int) -> None:
    """remainder -= divisor·10^shift (in place), требует remainder >= divisor·10^shift."""
    borrow = 0
    for j, d in enumerate(divisor):
        i = j + shift
        value = remainder[i] - d - borrow
        if value < 0:
            value += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        remainder[i] = value

    i = len(divisor) + shift
    while borrow:
        if remainder[i] == 0:
            remainder[i] = DIGIT_BASE - 1
        else:
            remainder[i] -= 1
            borrow = 0
        i += 1

    normalize(remainder)


def divmod_magnitudes(a: Sequence[int], b: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Деление модулей "уголком": (|a| // |b|, |a| % |b|).

    Алгоритм:
        k = len(a) - len(b) + 1 разрядов частного.
        Для i = k-1 .. 0 из остатка вычитается b·10^i, пока помещается;
        каждое вычитание увеличивает i-й разряд частного.

    Сдвинутый делитель не материализуется: переход к следующей степени
    десяти — это смена смещения, O(1). Внутренний цикл выполняется не
    более 9 раз на разряд (основание 10, старшая цифра b ненулевая),
    итого O(k) вычитаний по O(n) каждое, т.е. O(n²).

    Args:
        a: Модуль делимого (нормализован)
        b: Модуль делителя (нормализован, непустой)

    Returns:
        (quotient, remainder), оба нормализованы

    Raises:
        ValueError: Если b пуст (деление на ноль проверяется выше по стеку)

    Examples:
        >>> divmod_magnitudes([0, 0, 1], [7])
        ([4, 1], [2])
    """
    if not b:
        raise ValueError("Divisor magnitude must be non-empty")

    if len(a) < len(b):
        return [], list(a)

    size = len(a) - len(b) + 1
    remainder = list(a)
    quotient = [0] * size

    for shift in range(size - 1, -1, -1):
        while _compare_shifted(remainder, b, shift) >= 0:  # <= 9 раз
            _subtract_shifted(remainder, b, shift)
            quotient[shift] += 1

    return normalize(quotient), normalize(remainder)
