"""
Storage Ranges — Диапазоны значений по размеру хранения

Статическая таблица минимумов/максимумов для именованных целочисленных
размеров (tiny/small/medium/normal/big) и синтез диапазона для
DECIMAL(precision, scale).

Все границы — канонические десятичные строки: big-значения не
помещаются в float без потери точности.

ВАЖНО: unsigned максимум для big ограничен signed 64-bit максимумом
(9223372036854775807), а не истинным 18446744073709551615. Валидаторы
целых значений не принимают числа больше signed 64-bit.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Final, Mapping, Optional, Tuple, Union

from xnumber.core.math.numeric_strings import NumericValue, to_decimal

# =============================================================================
# STORAGE RANGE
# =============================================================================


@dataclass(frozen=True)
class StorageRange:
    """Диапазон значений одного размера хранения."""

    signed_min: str
    signed_max: str
    unsigned_max: str

    def bounds(self, unsigned: bool = False) -> Tuple[str, str]:
        """
        Жёсткие границы (floor, ceil) с учётом знаковости.

        Returns:
            ("0", unsigned_max) для unsigned, иначе (signed_min, signed_max)
        """
        if unsigned:
            return "0", self.unsigned_max
        return self.signed_min, self.signed_max

    def contains(self, value: NumericValue, unsigned: bool = False) -> bool:
        """Проверка, что значение помещается в диапазон."""
        floor, ceil = self.bounds(unsigned)
        exact = to_decimal(value)
        return Decimal(floor) <= exact <= Decimal(ceil)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownStorageSizeError(ValueError):
    """Запрошен неизвестный именованный размер хранения."""

    pass


# =============================================================================
# ТАБЛИЦА РАЗМЕРОВ
# =============================================================================

STORAGE_SIZES: Final[Mapping[str, StorageRange]] = {
    "tiny": StorageRange(
        signed_min="-128",
        signed_max="127",
        unsigned_max="255",
    ),
    "small": StorageRange(
        signed_min="-32768",
        signed_max="32767",
        unsigned_max="65535",
    ),
    "medium": StorageRange(
        signed_min="-8388608",
        signed_max="8388607",
        unsigned_max="16777215",
    ),
    "normal": StorageRange(
        signed_min="-2147483648",
        signed_max="2147483647",
        unsigned_max="4294967295",
    ),
    "big": StorageRange(
        signed_min="-9223372036854775808",
        signed_max="9223372036854775807",
        # Истинный максимум 18446744073709551615 не проходит валидацию целых
        unsigned_max="9223372036854775807",
    ),
}

SizeSpec = Union[str, Tuple[int, int], Mapping[str, int]]


def _decimal_range(precision: int, scale: int) -> StorageRange:
    if precision < 0 or scale < 0:
        raise ValueError(
            f"precision and scale must be non-negative, got precision={precision}, scale={scale}"
        )
    if scale > precision:
        raise ValueError(f"scale {scale} cannot exceed precision {precision}")

    integers = "9" * (precision - scale)
    decimals = "9" * scale
    maximum = (integers or "0") + (f".{decimals}" if decimals else "")
    return StorageRange(
        signed_min=f"-{maximum}",
        signed_max=maximum,
        unsigned_max=maximum,
    )


def ranges_for(
    size: Optional[SizeSpec] = None,
) -> Union[StorageRange, Mapping[str, StorageRange]]:
    """
    Диапазон значений для размера хранения.

    Args:
        size: Имя размера ("tiny".."big"), пара (precision, scale),
              mapping {"precision": p, "scale": s} или None

    Returns:
        StorageRange для заданного размера, либо вся таблица при size=None

    Raises:
        UnknownStorageSizeError: Неизвестное имя размера
        ValueError: Некорректные precision/scale

    Examples:
        >>> ranges_for("tiny").signed_max
        '127'
        >>> ranges_for((5, 2)).signed_max
        '999.99'
        >>> ranges_for({"precision": 2, "scale": 2}).signed_min
        '-0.99'
    """
    if size is None:
        return dict(STORAGE_SIZES)

    if isinstance(size, str):
        try:
            return STORAGE_SIZES[size]
        except KeyError:
            raise UnknownStorageSizeError(
                f"Unknown storage size {size!r}, expected one of {sorted(STORAGE_SIZES)}"
            ) from None

    if isinstance(size, Mapping):
        if "precision" not in size or "scale" not in size:
            raise ValueError(f"Size mapping must define precision and scale, got {dict(size)}")
        return _decimal_range(int(size["precision"]), int(size["scale"]))

    precision, scale = size
    return _decimal_range(int(precision), int(scale))
