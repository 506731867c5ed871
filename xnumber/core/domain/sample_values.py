"""
Sample Values — Генерация примерных значений полей

Случайное значение в пределах настроенных (или выведенных из хранения)
границ поля. Для детерминизма передайте random.Random с seed.
"""

import random
from decimal import Decimal
from typing import Optional

from xnumber.core.domain.field_settings import (
    DecimalFieldSettings,
    FloatFieldSettings,
    IntegerFieldSettings,
    NumericFieldSettings,
)
from xnumber.core.math.numeric_strings import (
    count_decimal_digits,
    to_canonical_string,
    truncate_decimal,
)

# Значащих цифр double
FLOAT_SIGNIFICANT_DIGITS = 14

DEFAULT_INTEGER_SAMPLE_MAX = 999


def _integer_sample(settings: IntegerFieldSettings, rng: random.Random) -> str:
    floor, ceil = settings.hard_bounds()
    low = max(int(Decimal(settings.min)) if settings.min else 0, int(floor))
    high = min(
        int(Decimal(settings.max)) if settings.max else DEFAULT_INTEGER_SAMPLE_MAX,
        int(ceil),
    )

    # Одна граница задана и лежит по другую сторону от значения по умолчанию
    if low > high:
        if settings.max:
            low = int(floor)
        else:
            high = int(ceil)
    return str(rng.randint(low, high))


def _decimal_sample(settings: DecimalFieldSettings, rng: random.Random) -> str:
    floor, ceil = settings.hard_bounds()

    # precision - scale цифр слева от точки: 3 цифры → [-999, 999]
    limit = Decimal(10 ** (settings.precision - settings.scale) - 1)
    low = max(Decimal(settings.min) if settings.min else -limit, Decimal(floor))
    high = min(Decimal(settings.max) if settings.max else limit, Decimal(ceil))

    if low > high:
        if settings.max:
            low = Decimal(floor)
        else:
            high = Decimal(ceil)

    # min = 1.234, max = 1.33 → не меньше 3 дробных разрядов
    digits = max(count_decimal_digits(low), count_decimal_digits(high))
    scale = rng.randint(min(digits, settings.scale), max(digits, settings.scale))

    value = float(low) + rng.random() * float(high - low)
    sample = Decimal(to_canonical_string(truncate_decimal(value, scale)))
    # Двоичное округление может увести усечённое значение ниже low
    return to_canonical_string(max(sample, low))


def _float_sample(settings: FloatFieldSettings, rng: random.Random) -> str:
    integer_part = str(rng.randint(1, 10**FLOAT_SIGNIFICANT_DIGITS - 1))
    integer_part = integer_part[: rng.randint(1, FLOAT_SIGNIFICANT_DIGITS)]
    fraction_width = FLOAT_SIGNIFICANT_DIGITS - len(integer_part)
    fraction = str(rng.randint(0, 10**fraction_width - 1)).zfill(fraction_width).rstrip("0")
    magnitude = float(f"{integer_part}.{fraction}" if fraction else integer_part)

    floor, _ = settings.hard_bounds()
    high = float(settings.max) if settings.max else magnitude + 1
    low = float(settings.min) if settings.min else -magnitude - 1
    if floor is not None:
        low = max(low, float(floor))

    if low > high:
        if settings.max:
            low = float(floor) if floor is not None else high - magnitude
        else:
            high = low + magnitude
    return to_canonical_string(low + rng.random() * (high - low))


def generate_sample_value(
    settings: NumericFieldSettings,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Случайное допустимое значение поля как каноническая строка.

    Args:
        settings: Настройки поля
        rng: Генератор случайных чисел (optional)

    Returns:
        Каноническая строка значения

    Raises:
        TypeError: Неизвестный тип настроек
    """
    rng = rng or random.Random()

    if isinstance(settings, IntegerFieldSettings):
        return _integer_sample(settings, rng)
    if isinstance(settings, DecimalFieldSettings):
        return _decimal_sample(settings, rng)
    if isinstance(settings, FloatFieldSettings):
        return _float_sample(settings, rng)

    raise TypeError(f"Unsupported field settings type: {type(settings).__name__}")
