"""
Тесты для Number Theory

Проверяемые инварианты:
1. factorial: 0! = 1, DomainError для отрицательных
2. power: особые случаи |base| == 1, отрицательная степень, модуль
3. isqrt: isqrt(n)² <= n < (isqrt(n)+1)², включая n = k² - 1
4. ilog: основание 10 и произвольное
5. gcd / lcm: делимость и lcm·gcd == |a·b|
6. next_prime: минимальность найденного простого
"""

import math

import pytest

from src.bigint.domain.integer import Int
from src.bigint.errors import DomainError
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


# =============================================================================
# ТЕСТЫ: Factorial
# =============================================================================


class TestFactorial:
    """Тесты factorial"""

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 25, 100])
    def test_matches_native(self, n: int) -> None:
        """Совпадение с math.factorial"""
        assert int(factorial(Int(n))) == math.factorial(n)

    def test_accepts_native_and_literal(self) -> None:
        """Аргумент приводится к Int"""
        assert factorial(5) == 120
        assert factorial("6") == 720

    def test_negative_raises(self) -> None:
        """factorial(-1) → DomainError"""
        with pytest.raises(DomainError, match="factorial"):
            factorial(Int("-1"))


# =============================================================================
# ТЕСТЫ: Power
# =============================================================================


class TestPower:
    """Тесты power"""

    def test_modpow_scenario(self) -> None:
        """pow(2, 10, 1000) == 24"""
        assert str(power(Int("2"), Int("10"), Int("1000"))) == "24"

    @pytest.mark.parametrize("base,exp", [(2, 0), (2, 1), (3, 13), (-3, 7), (-3, 8), (10, 50), (0, 0), (0, 5)])
    def test_matches_native(self, base: int, exp: int) -> None:
        """Без модуля совпадает с нативным **"""
        assert int(power(base, exp)) == base**exp

    @pytest.mark.parametrize("base,exp,mod", [(4, 13, 497), (7, 560, 561), (123456789, 98765, 1000000007), (3, 200, 10**20)])
    def test_modular_matches_native(self, base: int, exp: int, mod: int) -> None:
        """С положительными операндами совпадает с pow(a, b, m)"""
        assert int(power(base, exp, mod)) == pow(base, exp, mod)

    def test_huge_modular_exponent(self) -> None:
        """Модульное возведение с огромным показателем остаётся быстрым"""
        exp = 10**60 + 3
        mod = 10**9 + 7
        assert int(power(Int(5), Int(exp), Int(mod))) == pow(5, exp, mod)

    def test_magnitude_one_base(self) -> None:
        """|base| == 1: знак и чётность показателя"""
        assert power(1, 12345) == 1
        assert power(-1, 3) == -1
        assert power(-1, 4) == 1
        assert power(-1, -3) == -1
        assert power(1, -5) == 1

    def test_negative_exponent_truncates(self) -> None:
        """Отрицательная степень ненулевого основания → 0"""
        assert power(5, -2) == 0
        assert power(-7, -1) == 0

    def test_zero_negative_exponent_raises(self) -> None:
        """0 в отрицательной степени → DomainError"""
        with pytest.raises(DomainError):
            power(0, -1)

    def test_zero_modulus_means_no_reduction(self) -> None:
        """Модуль 0 — возведение без модуля"""
        assert power(2, 10, 0) == Int(1024)
        assert power(Int(-3), Int(5), Int(0)) == -243
        assert pow(Int(7), 3, 0) == 343

    def test_negative_base_with_modulus(self) -> None:
        """Остаток берёт знак делимого"""
        # (-2)^3 = -8, -8 % 5 == -3 при усечении
        assert power(-2, 3, 5) == -3


# =============================================================================
# ТЕСТЫ: Square Root
# =============================================================================


class TestIsqrt:
    """Тесты isqrt"""

    def test_scenario(self) -> None:
        """isqrt(1000000) == 1000"""
        assert str(isqrt(Int("1000000"))) == "1000"

    @pytest.mark.parametrize("n", list(range(0, 40)))
    def test_small_values(self, n: int) -> None:
        """Табличные значения и первые шаги Ньютона"""
        assert int(isqrt(n)) == math.isqrt(n)

    @pytest.mark.parametrize("k", [5, 10, 31, 100, 1000, 12345, 10**10 + 7])
    def test_perfect_square_neighbours(self, k: int) -> None:
        """k² - 1, k², k² + 1 — без зацикливания"""
        for n in (k * k - 1, k * k, k * k + 1):
            root = isqrt(Int(n))
            assert int(root) == math.isqrt(n)

    def test_large_value_bounds(self) -> None:
        """isqrt(n)² <= n < (isqrt(n)+1)²"""
        n = Int(3**301 + 17)
        root = isqrt(n)
        assert root * root <= n
        assert (root + 1) * (root + 1) > n

    def test_negative_raises(self) -> None:
        """Корень из отрицательного → DomainError"""
        with pytest.raises(DomainError, match="square root"):
            isqrt(-4)


# =============================================================================
# ТЕСТЫ: Logarithm
# =============================================================================


class TestIlog:
    """Тесты ilog"""

    @pytest.mark.parametrize("n,expected", [(1, 0), (9, 0), (10, 1), (999, 2), (1000, 3), (10**40, 40)])
    def test_base_ten(self, n: int, expected: int) -> None:
        """Основание 10 — по числу цифр"""
        assert ilog(n) == expected

    @pytest.mark.parametrize("n,base,expected", [(1, 2, 0), (1024, 2, 10), (1023, 2, 9), (80, 3, 3), (81, 3, 4), (35, 36, 0)])
    def test_other_bases(self, n: int, base: int, expected: int) -> None:
        """Произвольное основание — повторным делением"""
        assert ilog(n, base) == expected

    @pytest.mark.parametrize("n,base", [(0, 10), (-5, 10), (10, 1), (10, 0), (10, -2)])
    def test_domain_errors(self, n: int, base: int) -> None:
        """n <= 0 или base < 2 → DomainError"""
        with pytest.raises(DomainError):
            ilog(n, base)


# =============================================================================
# ТЕСТЫ: GCD / LCM
# =============================================================================


class TestGcdLcm:
    """Тесты gcd и lcm"""

    @pytest.mark.parametrize(
        "a,b",
        [(12, 18), (-12, 18), (12, -18), (-12, -18), (17, 5), (0, 9), (9, 0), (2**64, 6**30), (123456789, 987654321)],
    )
    def test_gcd_matches_native(self, a: int, b: int) -> None:
        """gcd неотрицателен и совпадает с math.gcd"""
        assert int(gcd(a, b)) == math.gcd(a, b)

    def test_gcd_zero_zero(self) -> None:
        """gcd(0, 0) == 0"""
        assert gcd(0, 0) == 0

    @pytest.mark.parametrize("a,b", [(4, 6), (-4, 6), (21, -6), (-7, -3), (2**40, 3**20)])
    def test_lcm_times_gcd(self, a: int, b: int) -> None:
        """lcm·gcd == |a·b|, gcd делит оба операнда"""
        g = gcd(a, b)
        assert (Int(a) % g).is_zero
        assert (Int(b) % g).is_zero
        assert lcm(a, b) * g == abs(Int(a) * Int(b))
        assert int(lcm(a, b)) == math.lcm(a, b)

    def test_lcm_with_zero(self) -> None:
        """lcm с нулём == 0"""
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0


# =============================================================================
# ТЕСТЫ: Primes
# =============================================================================


def native_is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


class TestPrimes:
    """Тесты is_prime и next_prime"""

    @pytest.mark.parametrize("n", [-7, 0, 1, 2, 3, 4, 9, 25, 97, 561, 7919, 1000003])
    def test_is_prime(self, n: int) -> None:
        """Пробное деление"""
        assert is_prime(n) == native_is_prime(n)

    @pytest.mark.parametrize("n,expected", [(-100, 2), (0, 2), (1, 2), (2, 3), (3, 5), (13, 17), (14, 17), (89, 97), (1000, 1009)])
    def test_next_prime(self, n: int, expected: int) -> None:
        """Известные значения"""
        assert next_prime(n) == expected

    @pytest.mark.parametrize("n", [2, 7, 24, 100, 113, 1000000])
    def test_next_prime_is_minimal(self, n: int) -> None:
        """Результат > n и между ними нет простых"""
        prime = int(next_prime(Int(n)))
        assert prime > n
        assert native_is_prime(prime)
        assert not any(native_is_prime(m) for m in range(n + 1, prime))
