"""
Radix — Разбор и форматирование Int в системах счисления 2..36

Hooks для текстовой обёртки: она вызывает parse_radix / format_radix
и не зависит от внутреннего представления цифр.

Цифры: 0-9, затем A(10) .. Z(35) в любом регистре.

Разбор — конечный автомат:

    BEGIN_BLANK --blank--> BEGIN_BLANK
    BEGIN_BLANK --sign---> SIGN
    BEGIN_BLANK|SIGN|INT_PART --digit--> INT_PART
    INT_PART|END_BLANK --blank--> END_BLANK
    любое другое сочетание → OTHER (ошибка)

Допустимые конечные состояния: INT_PART, END_BLANK.
"""

from enum import Enum
from typing import Final

from src.bigint.domain.integer import ZERO, Int, IntLike, as_int
from src.bigint.errors import InvalidArgument, InvalidLiteral

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

RADIX_MIN: Final[int] = 2
RADIX_MAX: Final[int] = 36

DIGIT_CHARS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

BLANK_CHARS: Final[str] = " \t\r\n"


# =============================================================================
# ENUMS
# =============================================================================


class ParseState(str, Enum):
    """Состояние автомата разбора."""

    BEGIN_BLANK = "BEGIN_BLANK"
    SIGN = "SIGN"
    INT_PART = "INT_PART"
    END_BLANK = "END_BLANK"
    OTHER = "OTHER"


class CharEvent(str, Enum):
    """Класс очередного символа."""

    BLANK = "BLANK"
    SIGN = "SIGN"
    NUMBER = "NUMBER"
    OTHER = "OTHER"


_TRANSITIONS: Final[dict] = {
    (ParseState.BEGIN_BLANK, CharEvent.BLANK): ParseState.BEGIN_BLANK,
    (ParseState.BEGIN_BLANK, CharEvent.SIGN): ParseState.SIGN,
    (ParseState.BEGIN_BLANK, CharEvent.NUMBER): ParseState.INT_PART,
    (ParseState.SIGN, CharEvent.NUMBER): ParseState.INT_PART,
    (ParseState.INT_PART, CharEvent.NUMBER): ParseState.INT_PART,
    (ParseState.INT_PART, CharEvent.BLANK): ParseState.END_BLANK,
    (ParseState.END_BLANK, CharEvent.BLANK): ParseState.END_BLANK,
}


# =============================================================================
# HELPERS
# =============================================================================


def _validate_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be an int, got {type(base).__name__!r}")
    if not RADIX_MIN <= base <= RADIX_MAX:
        raise InvalidArgument(f"Invalid base {base}: must be in [{RADIX_MIN}, {RADIX_MAX}]")


def char_to_digit(ch: str, base: int) -> int:
    """
    Значение символа-цифры в системе base, либо -1.

    Examples:
        >>> char_to_digit("F", 16)
        15
        >>> char_to_digit("9", 8)
        -1
    """
    value = DIGIT_CHARS.find(ch.lower()) if len(ch) == 1 else -1
    return value if 0 <= value < base else -1


def _classify(ch: str, base: int) -> CharEvent:
    if ch in BLANK_CHARS:
        return CharEvent.BLANK
    if char_to_digit(ch, base) != -1:
        return CharEvent.NUMBER
    if ch in "+-":
        return CharEvent.SIGN
    return CharEvent.OTHER


# =============================================================================
# PARSE / FORMAT
# =============================================================================


def parse_radix(text: str, base: int = 10) -> Int:
    """
    Разбор текста в Int по основанию base.

    Пробельные символы ( \\t\\r\\n) допускаются до и после числа.

    Args:
        text: Текст числа
        base: Основание 2..36 (default: 10)

    Returns:
        Int

    Raises:
        InvalidArgument: Если base вне [2, 36]
        InvalidLiteral: Если текст не является числом в системе base

    Examples:
        >>> parse_radix("cafebabe", 16)
        Int('3405691582')
        >>> parse_radix("  -z ", 36)
        Int('-35')
    """
    _validate_base(base)

    negative = False
    value = ZERO
    radix = Int(base)

    state = ParseState.BEGIN_BLANK
    for ch in text:
        event = _classify(ch, base)
        state = _TRANSITIONS.get((state, event), ParseState.OTHER)

        if state == ParseState.OTHER:
            break
        if event == CharEvent.SIGN:
            negative = ch == "-"
        elif event == CharEvent.NUMBER:
            value = value * radix + char_to_digit(ch, base)

    if state not in (ParseState.INT_PART, ParseState.END_BLANK):
        raise InvalidLiteral(f"Invalid literal for base {base}: {text!r}")

    return -value if negative else value


def format_radix(value: IntLike, base: int = 10) -> str:
    """
    Текстовая форма Int по основанию base (строчные буквы).

    Examples:
        >>> format_radix(255, 16)
        'ff'
        >>> format_radix(-5, 2)
        '-101'
    """
    _validate_base(base)
    value = as_int(value)

    if value.is_zero:
        return "0"

    radix = Int(base)
    magnitude = abs(value)
    chars = []
    while not magnitude.is_zero:
        magnitude, digit = divmod(magnitude, radix)
        chars.append(DIGIT_CHARS[int(digit)])

    text = "".join(reversed(chars))
    return "-" + text if value.is_negative else text
