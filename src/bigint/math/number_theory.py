"""
Number Theory — Теоретико-числовые алгоритмы над Int

Все алгоритмы выражены через аддитивные и мультипликативные операции Int
и не обращаются к представлению напрямую (кроме быстрых инкремента /
декремента модуля и затравки 10^k для метода Ньютона).

Функции:
- factorial: n! через быстрый декремент счётчика
- power: возведение в степень (square-and-multiply), опционально по модулю
- isqrt: целый квадратный корень, метод Ньютона
- ilog: целый логарифм по основанию >= 2
- gcd / lcm: алгоритм Евклида
- is_prime / next_prime: пробное деление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательная степень ненулевого основания даёт 0 (целочисленное
   усечение), а не обратную величину
2. При заданном модуле КАЖДОЕ промежуточное произведение берётся по модулю
3. isqrt(n)² <= n < (isqrt(n) + 1)²
4. gcd >= 0, lcm >= 0
"""

from typing import Optional

from src.bigint.core.digits import (
    Sign,
    decrement_magnitude,
    increment_magnitude,
    power_of_ten,
)
from src.bigint.domain.integer import MINUS_ONE, ONE, TWO, ZERO, Int, IntLike, as_int
from src.bigint.errors import DomainError
from src.bigint.logging_config import get_logger

logger = get_logger(__name__)

_TEN = Int(10)


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: IntLike) -> Int:
    """
    Факториал n! = 1·2·…·n, 0! = 1.

    Счётчик уменьшается быстрым декрементом модуля вместо полного
    вычитания.

    Args:
        n: Неотрицательное целое

    Returns:
        n!

    Raises:
        DomainError: Если n < 0

    Examples:
        >>> factorial(5)
        Int('120')
    """
    n = as_int(n)
    if n.is_negative:
        raise DomainError(f"Negative integer have no factorial: {n}")

    result = ONE
    counter = list(n.digits)

    while counter:
        result = result * Int.from_digits(counter)
        decrement_magnitude(counter)

    return result


# =============================================================================
# POWER
# =============================================================================


def power(base: IntLike, exponent: IntLike, modulus: Optional[IntLike] = None) -> Int:
    """
    Возведение в степень: base**exponent или (base**exponent) % modulus.

    Порядок обработки:
    1. |base| == 1 → ±1 (только -1 в нечётной степени даёт -1)
    2. exponent < 0 → DomainError при base == 0, иначе 0
    3. Square-and-multiply; при заданном modulus каждое произведение
       берётся по модулю (остаток с усечением, знак делимого)

    Args:
        base: Основание
        exponent: Показатель
        modulus: Модуль (None или 0 — без модуля)

    Returns:
        Результат возведения в степень

    Raises:
        DomainError: 0 в отрицательной степени

    Examples:
        >>> power(2, 10, 1000)
        Int('24')
        >>> power(2, 10, 0)
        Int('1024')
        >>> power(-1, 3)
        Int('-1')
        >>> power(5, -2)
        Int('0')
    """
    base = as_int(base)
    exponent = as_int(exponent)
    mod = None if modulus is None else as_int(modulus)
    if mod is not None and mod.is_zero:
        mod = None  # 0: без модуля

    # |base| == 1: результат определяется знаком и чётностью показателя
    if base.num_digits == 1 and base.digits[0] == 1:
        return MINUS_ONE if base.is_negative and exponent.is_odd else ONE

    if exponent.is_negative:
        if base.is_zero:
            raise DomainError("Math domain error: zero cannot be raised to a negative power")
        return ZERO

    num = base
    n = exponent
    result = ONE  # x**0 == 1

    while not n.is_zero:
        if n.is_odd:
            result = result * num if mod is None else (result * num) % mod
        num = num * num if mod is None else (num * num) % mod
        n = n / TWO

    return result


# =============================================================================
# SQUARE ROOT
# =============================================================================


def isqrt(n: IntLike) -> Int:
    """
    Целый квадратный корень floor(sqrt(n)).

    Значения < 16 берутся из таблицы. Для больших n — метод Ньютона
    x = (x + n / x) / 2 с затравкой 10^(digits/2 - 1). Первый шаг из
    затравки снизу даёт x >= floor(sqrt(n)); дальше итерации монотонно
    убывают и останавливаются, когда следующий шаг не меньше текущего.
    Это исключает зацикливание x ↔ x+1 при n = k² - 1.

    Args:
        n: Неотрицательное целое

    Returns:
        floor(sqrt(n))

    Raises:
        DomainError: Если n < 0

    Examples:
        >>> isqrt(1000000)
        Int('1000')
        >>> isqrt(99)
        Int('9')
    """
    n = as_int(n)
    if n.is_negative:
        raise DomainError(f"Cannot compute square root of a negative integer: {n}")

    if n.is_zero:
        return ZERO
    if n < 4:
        return ONE
    if n < 9:
        return TWO
    if n < 16:
        return Int(3)

    # n >= 16 → минимум 2 цифры → показатель затравки >= 0
    current = Int.from_digits(power_of_ten(n.num_digits // 2 - 1))
    current = (current + n / current) / TWO

    iterations = 1
    while True:
        following = (current + n / current) / TWO
        iterations += 1
        if following >= current:
            break
        current = following

    logger.debug("isqrt: %d-digit input converged after %d iterations", n.num_digits, iterations)
    return current


# =============================================================================
# LOGARITHM
# =============================================================================


def ilog(n: IntLike, base: IntLike = 10) -> Int:
    """
    Целый логарифм floor(log_base(n)).

    Для base == 10 — O(1) по количеству цифр; иначе число делений
    до обнуления частного.

    Args:
        n: Положительное целое
        base: Основание >= 2 (default: 10)

    Returns:
        floor(log_base(n))

    Raises:
        DomainError: Если n <= 0 или base < 2

    Examples:
        >>> ilog(1000)
        Int('3')
        >>> ilog(1024, 2)
        Int('10')
    """
    n = as_int(n)
    base = as_int(base)

    if not n.is_positive or base < 2:
        raise DomainError(f"Math domain error: log({n}, {base})")

    if base == _TEN:
        return Int(n.num_digits - 1)

    result = ZERO
    value = n / base
    while not value.is_zero:
        result = result.incremented()
        value = value / base

    return result


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(a: IntLike, b: IntLike) -> Int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    a, b = b, a % b пока b != 0. Результат неотрицателен;
    gcd(0, 0) == 0.

    Examples:
        >>> gcd(12, -18)
        Int('6')
    """
    a = as_int(a)
    b = as_int(b)

    while not b.is_zero:
        a, b = b, a % b

    return abs(a)


def lcm(a: IntLike, b: IntLike) -> Int:
    """
    Наименьшее общее кратное: |a·b| / gcd(a, b).

    Если один из операндов 0 — результат 0.

    Examples:
        >>> lcm(4, 6)
        Int('12')
    """
    a = as_int(a)
    b = as_int(b)

    if a.is_zero or b.is_zero:
        return ZERO

    return abs(a * b) / gcd(a, b)


# =============================================================================
# PRIMES
# =============================================================================


def is_prime(n: IntLike) -> bool:
    """
    Проверка простоты пробным делением до sqrt(n).

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime(1)
        False
    """
    n = as_int(n)

    if n < 2:
        return False
    if n.is_even:
        return n == TWO

    divisor = Int(3)
    while divisor * divisor <= n:
        if (n % divisor).is_zero:
            return False
        divisor = divisor + TWO

    return True


def next_prime(n: IntLike) -> Int:
    """
    Наименьшее простое число, строго большее n.

    Для n < 2 → 2. Иначе кандидат стартует с ближайшего нечётного <= n
    и увеличивается на 2 быстрым инкрементом модуля.

    Examples:
        >>> next_prime(13)
        Int('17')
        >>> next_prime(-5)
        Int('2')
    """
    n = as_int(n)

    if n < 2:
        return TWO

    candidate = list(n.digits)  # n >= 2, модуль положителен
    if n.is_even:
        decrement_magnitude(candidate)

    tested = 0
    while True:
        increment_magnitude(candidate)
        increment_magnitude(candidate)
        tested += 1

        prime = Int.from_digits(candidate, Sign.POSITIVE)
        if is_prime(prime):
            logger.debug("next_prime(%s): found after %d candidates", n, tested)
            return prime
