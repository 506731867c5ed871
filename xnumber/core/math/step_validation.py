"""
Step Validation — Проверка кратности значения шагу

Модуль определяет, лежит ли значение на сетке с шагом step,
начинающейся в min (если задан).

Проверка трёхуровневая, каждый следующий уровень исправляет ложные
отказы предыдущего:
1. Точная десятичная арифметика (целочисленный остаток либо остаток fmod
   со смежными шагами)
2. Проверка с ограниченной ошибкой в double precision (как в WebKit
   NumberInputType)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. step <= 0 → False
2. min > value → False
3. Исключения наружу не выходят: нечисловой ввод → False
4. Точность Decimal задаётся локальным контекстом на каждый вызов,
   глобальный контекст не изменяется
"""

import logging
import math
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    localcontext,
)
from typing import Final, Optional

from xnumber.core.math.numeric_strings import (
    NumericValue,
    count_decimal_digits,
    is_numeric,
    to_decimal,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Разрядность мантиссы double: значения больше step * 2^53 не дают
# осмысленного остатка
DOUBLE_MANTISSA_BITS: Final[int] = 53

# Разрядность мантиссы single: остатки меньше step * 2^-24 допустимы
SINGLE_MANTISSA_BITS: Final[int] = 24

# Запас разрядов поверх целой и дробной частей операндов
PRECISION_GUARD_DIGITS: Final[int] = 4


# =============================================================================
# КОНТЕКСТ ТОЧНОСТИ
# =============================================================================


def _working_context(fractional_digits: int, *operands: Decimal) -> Context:
    """
    Контекст Decimal, вмещающий операнды и их сумму/разность без округления.

    Args:
        fractional_digits: Число дробных разрядов, с которым идёт работа
        operands: Участвующие в вычислениях значения

    Returns:
        Новый Context (не глобальный)
    """
    integer_digits = max(max(op.adjusted(), 0) + 1 for op in operands)
    return Context(
        prec=integer_digits + fractional_digits + PRECISION_GUARD_DIGITS,
        rounding=ROUND_HALF_EVEN,
        traps=[InvalidOperation, DivisionByZero],
    )


def _round_half_away(value: float) -> float:
    # round() в Python банковский, здесь нужен half away from zero
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


# =============================================================================
# УРОВНИ ПРОВЕРКИ
# =============================================================================


def _exact_step_match(
    value: Decimal,
    step: Decimal,
    floor: Decimal,
    ceil: Decimal,
    scale: int,
) -> bool:
    """
    Точная проверка в десятичной арифметике.

    Целый шаг и целое значение: остаток (ceil - floor) по step.
    Иначе: остаток fmod(value, step), приведённый к разрядности входов,
    и два смежных значения remainder - step, remainder - 2*step.
    """
    value_digits = count_decimal_digits(value)

    if scale == 0 and value_digits == 0:
        # floor может быть дробным минимумом
        floor_digits = count_decimal_digits(floor)
        with localcontext(_working_context(floor_digits, value, step, floor, ceil)):
            return (ceil - floor) % step == 0

    # Остаток float может оказаться рядом с целым шагом: 0.3 % 0.1 = 0.0999...
    digits = max(scale, value_digits)
    value_float = float(value)
    if not math.isfinite(value_float):
        return False
    remainder = to_decimal(math.fmod(value_float, float(step)))

    with localcontext(_working_context(digits, value, step, remainder)):
        remainder = remainder.quantize(Decimal(1).scaleb(-digits))
        sub = remainder - step
        sub_sub = sub - step

    return remainder == 0 or sub == 0 or sub_sub == 0


def _float_step_match(value: Decimal, step: Decimal, minimum: Optional[Decimal]) -> bool:
    """
    Проверка с ограниченной ошибкой в double precision.

    Остатки, непредставимые в single precision (меньше step * 2^-24),
    считаются допустимыми.
    """
    anchor = float(minimum) if minimum is not None else 0.0
    step_float = float(step)
    scaled_value = abs(float(value) - anchor)

    # Если value больше step * 2^53, остаток от деления не представим
    # даже в single precision и не имеет смысла
    if scaled_value / 2.0**DOUBLE_MANTISSA_BITS > step_float:
        return True

    remainder = abs(scaled_value - step_float * _round_half_away(scaled_value / step_float))
    acceptable_error = step_float / 2.0**SINGLE_MANTISSA_BITS

    return acceptable_error >= remainder or remainder >= step_float - acceptable_error


# =============================================================================
# IS VALID STEP
# =============================================================================


def is_valid_step(
    value: NumericValue,
    step: NumericValue,
    min: Optional[NumericValue] = None,
) -> bool:
    """
    Проверка, что value кратно step (со смещением на min, если задан).

    Предусловие: value и step числовые. Нечисловые значения не приводят
    к исключению, а дают False.

    Порядок решений:
        1. scale = count_decimal_digits(step)
        2. step <= 0 → False
        3. min задан и min > value → False
        4. |value| == step → True
        5. (floor, ceil): (min, value) | (step, value) при value > step |
           (value, step)
        6. Точная десятичная проверка
        7. Проверка double precision с допуском step / 2^24

    ВАЖНО: без min интервал строится от step или value (что меньше),
    без нормализации к нулю. Эта асимметрия сохраняется намеренно.

    Args:
        value: Проверяемое значение
        step: Шаг сетки (должен быть > 0)
        min: Начало сетки (optional)

    Returns:
        True если value лежит на сетке, иначе False

    Examples:
        >>> is_valid_step(0.3, 0.1)
        True
        >>> is_valid_step(10, 3)
        False
        >>> is_valid_step(9, 3)
        True
        >>> is_valid_step(-0.1, 0.1, -9999999.99)
        True
    """
    if not is_numeric(value) or not is_numeric(step):
        logger.debug("Non-numeric step check input: value=%r step=%r", value, step)
        return False
    if min is not None and not is_numeric(min):
        logger.debug("Non-numeric step check minimum: min=%r", min)
        return False

    scale = count_decimal_digits(step)
    value_dec = to_decimal(value)
    step_dec = to_decimal(step)
    min_dec = to_decimal(min) if min is not None else None

    if step_dec <= 0:
        return False

    if min_dec is not None:
        # Дальнейшая проверка не имеет смысла
        if min_dec > value_dec:
            return False
        floor, ceil = min_dec, value_dec
    elif value_dec > step_dec:
        floor, ceil = step_dec, value_dec
    else:
        floor, ceil = value_dec, step_dec

    if abs(value_dec) == step_dec:
        logger.debug("Step match: |%s| equals step", value_dec)
        return True

    if _exact_step_match(value_dec, step_dec, floor, ceil, scale):
        logger.debug("Step match: exact remainder (value=%s step=%s)", value_dec, step_dec)
        return True

    matched = _float_step_match(value_dec, step_dec, min_dec)
    logger.debug(
        "Step %s: float tolerance (value=%s step=%s min=%s)",
        "match" if matched else "mismatch",
        value_dec,
        step_dec,
        min_dec,
    )
    return matched
