"""
Int — Целое число произвольной точности

Immutable value type: знак + модуль в виде десятичных цифр little-endian.
Любая операция возвращает новый экземпляр; составные операторы (+=, *=, ...)
переприсваивают имя результату соответствующего бинарного оператора.

Семантика деления — усечение к нулю (как в C, НЕ как // в Python):
    a == (a / b) * b + a % b   для любого b != 0
    знак a % b совпадает со знаком a (либо остаток равен нулю)

Поэтому Int реализует / (__truediv__), % и divmod(), но не //.

Операнды-нативные int принимаются с обеих сторон бинарных операторов.

Examples:
    >>> Int("123456789123456789") * 2
    Int('246913578246913578')
    >>> Int(-7) / 2, Int(-7) % 2
    (Int('-3'), Int('-1'))
    >>> pow(Int(2), 10, 1000)
    Int('24')
"""

from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar, Union

from src.bigint.core.digits import (
    DIGIT_BASE,
    Sign,
    add_magnitudes,
    compare_magnitudes,
    decrement_magnitude,
    digits_from_native,
    divmod_magnitudes,
    increment_magnitude,
    multiply_magnitudes,
    normalize,
    parse_literal,
    render,
    subtract_magnitudes,
)
from src.bigint.errors import DivideByZero, InvalidArgument

T = TypeVar("T")

IntLike = Union["Int", int, str]


class Int:
    """
    Целое число произвольной точности в десятичном представлении.

    Конструирование:
        Int()          → 0
        Int("-0042")   → -42 (литерал [+-]?[0-9]+, иначе InvalidLiteral)
        Int(12345)     → из нативного int
        Int(other)     → копия другого Int

    Инварианты:
        - нет старших нулей, ноль — пустая последовательность цифр
        - sign == Sign.ZERO тогда и только тогда, когда цифр нет
        - равенство — поэлементное совпадение знака и цифр
    """

    __slots__ = ("_sign", "_digits", "_hash")

    _sign: Sign
    _digits: Tuple[int, ...]
    _hash: int

    def __init__(self, value: IntLike = 0) -> None:
        if isinstance(value, Int):
            sign, digits = value._sign, value._digits
        elif isinstance(value, str):
            sign, parsed = parse_literal(value)
            digits = tuple(parsed)
        elif isinstance(value, int):
            sign, converted = digits_from_native(value)
            digits = tuple(converted)
        else:
            raise TypeError(
                f"Int() argument must be a str, int or Int, not {type(value).__name__!r}"
            )

        object.__setattr__(self, "_sign", sign)
        object.__setattr__(self, "_digits", digits)

    @classmethod
    def _from_parts(cls, sign: Sign, digits: Iterable[int]) -> "Int":
        # digits уже нормализованы; знак нуля выставляется здесь для всех производителей
        obj = object.__new__(cls)
        digits = tuple(digits)
        object.__setattr__(obj, "_sign", sign if digits else Sign.ZERO)
        object.__setattr__(obj, "_digits", digits)
        return obj

    @classmethod
    def from_digits(cls, digits: Iterable[int], sign: Sign = Sign.POSITIVE) -> "Int":
        """
        Конструирование из цифр little-endian и знака.

        Старшие нули отбрасываются; пустой результат даёт ноль
        независимо от переданного знака.

        Args:
            digits: Цифры 0..9, младшая первой
            sign: Знак (default: POSITIVE)

        Returns:
            Нормализованный Int

        Raises:
            InvalidArgument: Если цифра вне 0..9 или знак ZERO при ненулевых цифрах
        """
        values = list(digits)
        for d in values:
            if not isinstance(d, int) or not 0 <= d < DIGIT_BASE:
                raise InvalidArgument(f"Digit must be an integer in [0, 9], got {d!r}")

        normalize(values)
        if values and sign == Sign.ZERO:
            raise InvalidArgument("Sign.ZERO is only valid for an empty digit sequence")

        return cls._from_parts(Sign(sign), values)

    @classmethod
    def parse(cls, text: str) -> "Int":
        """Разбор текстового литерала (hook для текстовой обёртки)."""
        return cls(text)

    # =========================================================================
    # IMMUTABILITY
    # =========================================================================

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Int is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Int is immutable")

    def __copy__(self) -> "Int":
        return self

    def __deepcopy__(self, memo: dict) -> "Int":
        return self

    def __reduce__(self):
        return (Int, (str(self),))

    # =========================================================================
    # EXAMINATION
    # =========================================================================

    @property
    def sign(self) -> Sign:
        """Знак числа."""
        return self._sign

    @property
    def digits(self) -> Tuple[int, ...]:
        """Цифры модуля little-endian (пустой tuple для нуля)."""
        return self._digits

    @property
    def num_digits(self) -> int:
        """Количество десятичных цифр (0 для нуля)."""
        return len(self._digits)

    @property
    def is_zero(self) -> bool:
        return self._sign == Sign.ZERO

    @property
    def is_positive(self) -> bool:
        return self._sign == Sign.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self._sign == Sign.NEGATIVE

    @property
    def is_even(self) -> bool:
        return self.is_zero or self._digits[0] % 2 == 0

    @property
    def is_odd(self) -> bool:
        return not self.is_even

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare(self, other: IntLike) -> int:
        """
        Трёхстороннее сравнение.

        Порядок проверок:
        1. Разные знаки решают сразу: POSITIVE > ZERO > NEGATIVE
        2. Равные знаки, разная длина: длиннее больше для положительных,
           меньше для отрицательных
        3. Равная длина: поразрядно от старшей цифры с тем же переворотом

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        that = as_int(other)

        if self._sign != that._sign:
            return 1 if self._sign > that._sign else -1

        result = compare_magnitudes(self._digits, that._digits)
        return -result if self._sign == Sign.NEGATIVE else result

    def __eq__(self, other: object) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self._sign == that._sign and self._digits == that._digits

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: IntLike) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.compare(that) < 0

    def __le__(self, other: IntLike) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.compare(that) <= 0

    def __gt__(self, other: IntLike) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.compare(that) > 0

    def __ge__(self, other: IntLike) -> bool:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self.compare(that) >= 0

    def __hash__(self) -> int:
        # Int(5) == 5, поэтому хэш обязан совпадать с hash(5);
        # значение неизменяемо, хэш вычисляется один раз
        try:
            return self._hash
        except AttributeError:
            pass
        value = hash(self.to_integer())
        object.__setattr__(self, "_hash", value)
        return value

    # =========================================================================
    # ADDITIVE OPERATORS
    # =========================================================================

    def __pos__(self) -> "Int":
        return self

    def __neg__(self) -> "Int":
        return Int._from_parts(Sign(-self._sign), self._digits)

    def __abs__(self) -> "Int":
        return -self if self._sign == Sign.NEGATIVE else self

    def _add(self, rhs: "Int") -> "Int":
        if self.is_zero or rhs.is_zero:
            return rhs if self.is_zero else self

        # разные знаки: a + b = a - (-b)
        if self._sign != rhs._sign:
            return self._sub(-rhs)

        return Int._from_parts(self._sign, add_magnitudes(self._digits, rhs._digits))

    def _sub(self, rhs: "Int") -> "Int":
        if self.is_zero or rhs.is_zero:
            return -rhs if self.is_zero else self

        # разные знаки: a - b = a + (-b)
        if self._sign != rhs._sign:
            return self._add(-rhs)

        # знаки равны: вычитаем меньший модуль из большего
        order = compare_magnitudes(self._digits, rhs._digits)
        if order == 0:
            return ZERO
        if order > 0:
            return Int._from_parts(
                self._sign, subtract_magnitudes(self._digits, rhs._digits)
            )
        return Int._from_parts(
            Sign(-self._sign), subtract_magnitudes(rhs._digits, self._digits)
        )

    def __add__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self._add(that)

    def __radd__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that._add(self)

    def __sub__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self._sub(that)

    def __rsub__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that._sub(self)

    def incremented(self) -> "Int":
        """
        Быстрое self + 1.

        Работает только с младшей серией девяток (или нулей для
        отрицательных), без полного сложения.
        """
        if self.is_zero:
            return ONE

        digits = list(self._digits)
        if self._sign == Sign.POSITIVE:
            increment_magnitude(digits)
        else:
            decrement_magnitude(digits)

        return Int._from_parts(self._sign, digits)

    def decremented(self) -> "Int":
        """Быстрое self - 1 (зеркально incremented)."""
        if self.is_zero:
            return MINUS_ONE

        digits = list(self._digits)
        if self._sign == Sign.POSITIVE:
            decrement_magnitude(digits)
        else:
            increment_magnitude(digits)

        return Int._from_parts(self._sign, digits)

    # =========================================================================
    # MULTIPLICATIVE OPERATORS
    # =========================================================================

    def _mul(self, rhs: "Int") -> "Int":
        if self.is_zero or rhs.is_zero:
            return ZERO

        sign = Sign.POSITIVE if self._sign == rhs._sign else Sign.NEGATIVE
        return Int._from_parts(sign, multiply_magnitudes(self._digits, rhs._digits))

    def _divmod(self, rhs: "Int") -> Tuple["Int", "Int"]:
        if rhs.is_zero:
            raise DivideByZero("Divide by zero.")

        # |self| < |rhs| по числу цифр: частное 0, остаток равен делимому
        if self.num_digits < rhs.num_digits:
            return ZERO, self

        quotient, remainder = divmod_magnitudes(self._digits, rhs._digits)
        sign = Sign.POSITIVE if self._sign == rhs._sign else Sign.NEGATIVE

        return (
            Int._from_parts(sign, quotient),
            Int._from_parts(self._sign, remainder),
        )

    def __mul__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self._mul(that)

    def __rmul__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that._mul(self)

    def __truediv__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self._divmod(that)[0]

    def __rtruediv__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that._divmod(self)[0]

    def __mod__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self._divmod(that)[1]

    def __rmod__(self, other: IntLike) -> "Int":
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that._divmod(self)[1]

    def __divmod__(self, other: IntLike) -> Tuple["Int", "Int"]:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return self._divmod(that)

    def __rdivmod__(self, other: IntLike) -> Tuple["Int", "Int"]:
        that = _coerce(other)
        if that is None:
            return NotImplemented
        return that._divmod(self)

    def __pow__(self, exponent: IntLike, modulus: Optional[IntLike] = None) -> "Int":
        from src.bigint.math.number_theory import power

        that = _coerce(exponent)
        if that is None:
            return NotImplemented
        return power(self, that, modulus)

    def __rpow__(self, base: IntLike) -> "Int":
        from src.bigint.math.number_theory import power

        that = _coerce(base)
        if that is None:
            return NotImplemented
        return power(that, self)

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def to_integer(self, target: Callable[[int], T] = int) -> T:
        """
        Конверсия в нативный целый тип.

        Цифры накапливаются от старшей к младшей средствами целевого типа
        (result = result * 10 + digit), затем применяется знак. Переполнение
        целевого типа фиксированной ширины не контролируется.

        Args:
            target: Конструктор целевого типа (default: int)

        Returns:
            Значение целевого типа
        """
        result = target(0)
        for d in reversed(self._digits):
            result = result * DIGIT_BASE + d
        return -result if self._sign == Sign.NEGATIVE else result

    def __int__(self) -> int:
        return self.to_integer()

    def __index__(self) -> int:
        return self.to_integer()

    def __bool__(self) -> bool:
        return not self.is_zero

    def __str__(self) -> str:
        return render(self._sign, self._digits)

    def __repr__(self) -> str:
        return f"Int('{self}')"


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> Optional[Int]:
    """Int → как есть, нативный int → Int, иначе None (NotImplemented)."""
    if isinstance(value, Int):
        return value
    if isinstance(value, int):
        return Int(value)
    return None


def as_int(value: IntLike) -> Int:
    """
    Приведение Int / int / литерала к Int.

    Raises:
        InvalidLiteral: Если строка не является литералом
        TypeError: Для прочих типов
    """
    if isinstance(value, Int):
        return value
    if isinstance(value, (int, str)):
        return Int(value)
    raise TypeError(f"Expected Int, int or str, got {type(value).__name__!r}")


# Часто используемые значения
ZERO: Int = Int()
ONE: Int = Int(1)
MINUS_ONE: Int = Int(-1)
TWO: Int = Int(2)
