"""
Numeric Strings — Каноническое строковое представление чисел

Модуль приводит числа к канонической десятичной строке без экспоненты
и предоставляет вспомогательные операции над ней:
- Раскрытие научной нотации (1.0E-7 → 0.0000001)
- Подсчёт значащих дробных разрядов
- Усечение до заданного числа дробных разрядов (floor)
- Сортируемые base-36 коды (alphadecimal)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_canonical_string идемпотентна
2. Каноническая строка никогда не содержит экспоненты
3. Подсчёт разрядов выполняется по строке, а не по двоичному float
"""

import math
import re
from decimal import ROUND_FLOOR, Decimal, InvalidOperation, localcontext
from typing import Final, Union

NumericValue = Union[int, float, Decimal, str]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Число со знаком, дробной частью и экспонентой; пробелы по краям допустимы
NUMERIC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$"
)

ALPHADECIMAL_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonNumericValueError(ValueError):
    """Значение не является числом там, где число обязательно."""

    pass


# =============================================================================
# ПРОВЕРКА И КОНВЕРСИЯ
# =============================================================================


def is_numeric(value: object) -> bool:
    """
    Проверка, является ли значение числом или числовой строкой.

    bool не считается числом. NaN/Inf не считаются числами.

    Examples:
        >>> is_numeric("1.5e3")
        True
        >>> is_numeric(" -.5 ")
        True
        >>> is_numeric("any")
        False
        >>> is_numeric("")
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, str):
        return NUMERIC_PATTERN.match(value) is not None
    return False


def _has_exponent(text: str) -> bool:
    return "e" in text or "E" in text


def _expand_exponent(number: Decimal) -> str:
    """Раскрытие экспоненты с отбрасыванием хвостовых дробных нулей."""
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_canonical_string(number: object) -> str:
    """
    Приведение числа к канонической десятичной строке без экспоненты.

    Строки без экспоненты возвращаются как есть (без пробелов по краям).
    Целые float теряют суффикс ".0". Нечисловые значения возвращаются
    как str(number), что сохраняет пустые настройки пустыми.

    Args:
        number: int, float, Decimal или числовая строка

    Returns:
        Каноническая строка

    Examples:
        >>> to_canonical_string("1.0E-7")
        '0.0000001'
        >>> to_canonical_string(1e-07)
        '0.0000001'
        >>> to_canonical_string(3.0)
        '3'
        >>> to_canonical_string("1.250")
        '1.250'
    """
    if not is_numeric(number):
        return str(number)

    if isinstance(number, int):
        return str(number)

    if isinstance(number, float):
        text = repr(number)
        if not _has_exponent(text):
            return text[:-2] if text.endswith(".0") else text
        return _expand_exponent(Decimal(text))

    text = str(number).strip()
    if not _has_exponent(text):
        return text
    return _expand_exponent(Decimal(text))


def to_decimal(value: NumericValue) -> Decimal:
    """
    Точная конверсия числа в Decimal через каноническую строку.

    Float конвертируется через repr, а не через двоичное значение,
    поэтому 0.1 → Decimal("0.1").

    Raises:
        NonNumericValueError: Если значение не числовое
    """
    if not is_numeric(value):
        raise NonNumericValueError(f"Value must be numeric, got {value!r}")
    try:
        return Decimal(to_canonical_string(value))
    except InvalidOperation as e:
        raise NonNumericValueError(f"Value must be numeric, got {value!r}") from e


# =============================================================================
# ДРОБНЫЕ РАЗРЯДЫ
# =============================================================================


def count_decimal_digits(number: NumericValue) -> int:
    """
    Количество значащих дробных разрядов числа.

    Хвостовые нули не учитываются. Результат задаёт рабочую точность
    (scale) для точной десятичной арифметики.

    Raises:
        NonNumericValueError: Если значение не числовое

    Examples:
        >>> count_decimal_digits("10")
        0
        >>> count_decimal_digits("1.250")
        2
        >>> count_decimal_digits(1e-7)
        7
    """
    if not is_numeric(number):
        raise NonNumericValueError(f"Value must be numeric, got {number!r}")

    text = to_canonical_string(number)
    if "." not in text:
        return 0
    return len(text.split(".", 1)[1].rstrip("0"))


def truncate_decimal(decimal: NumericValue, fractional_digits: int) -> Union[float, Decimal]:
    """
    Усечение числа до fractional_digits дробных разрядов.

    Формула: floor(decimal * 10^n) / 10^n

    ВАЖНО: округление всегда к минус бесконечности, а не к нулю:
    truncate_decimal(-1.01, 0) == -2.

    int/float считаются в двоичном float и возвращают float.
    Decimal/str считаются точно и возвращают Decimal.

    Raises:
        ValueError: Если fractional_digits < 0
        NonNumericValueError: Если значение не числовое

    Examples:
        >>> truncate_decimal(1.999, 2)
        1.99
        >>> truncate_decimal(-1.01, 0)
        -2.0
        >>> truncate_decimal("1.999", 2)
        Decimal('1.99')
    """
    if fractional_digits < 0:
        raise ValueError(f"fractional_digits must be non-negative, got {fractional_digits}")

    if isinstance(decimal, (int, float)) and not isinstance(decimal, bool):
        if not math.isfinite(decimal):
            raise NonNumericValueError(f"Value must be numeric, got {decimal!r}")
        factor = 10**fractional_digits
        return math.floor(decimal * factor) / factor

    exact = to_decimal(decimal)
    quantum = Decimal(1).scaleb(-fractional_digits)
    with localcontext() as ctx:
        ctx.prec = max(exact.adjusted(), 0) + fractional_digits + 2
        return exact.quantize(quantum, rounding=ROUND_FLOOR)


# =============================================================================
# ALPHADECIMAL
# =============================================================================


def int_to_alphadecimal(i: int = 0) -> str:
    """
    Сортируемый код целого числа.

    Первый символ кодирует длину, далее base-36 цифры. Коды сортируются
    как строки без нарушения числового порядка:
    00, 01, ..., 0z, 110, 111, ..., 1zz, 2100, ...

    Raises:
        ValueError: Если i < 0

    Examples:
        >>> int_to_alphadecimal(0)
        '00'
        >>> int_to_alphadecimal(36)
        '110'
    """
    if i < 0:
        raise ValueError(f"i must be non-negative, got {i}")

    digits = []
    remaining = int(i)
    while True:
        remaining, index = divmod(remaining, 36)
        digits.append(ALPHADECIMAL_DIGITS[index])
        if remaining == 0:
            break
    num = "".join(reversed(digits))
    return chr(len(num) + ord("0") - 1) + num


def alphadecimal_to_int(code: str = "00") -> int:
    """
    Декодирование сортируемого кода обратно в целое.

    Examples:
        >>> alphadecimal_to_int("110")
        36
    """
    return int(code[1:], 36)
