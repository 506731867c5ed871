"""
Field Settings — Модели настроек числовых полей

Immutable Pydantic модели настроек трёх типов числовых полей:
- integer (размер хранения tiny..big, signed/unsigned)
- decimal (DECIMAL(precision, scale), signed/unsigned)
- float (без фиксированного диапазона)

Числовые настройки (step, min, max) хранятся как канонические строки:
значения big/decimal не помещаются в float без потери точности.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, Final, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from xnumber.core.contracts import validate_settings
from xnumber.core.math.numeric_strings import (
    NumericValue,
    count_decimal_digits,
    is_numeric,
    to_canonical_string,
)
from xnumber.core.math.step_validation import is_valid_step
from xnumber.core.storage.ranges import StorageRange, ranges_for

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Шаг без ограничения кратности
ANY_STEP: Final[str] = "any"

DEFAULT_INTEGER_SIZE: Final[str] = "normal"
DEFAULT_DECIMAL_PRECISION: Final[int] = 10
DEFAULT_DECIMAL_SCALE: Final[int] = 2

# Целое с возможным знаком: 0, 1, 10, 101
INTEGER_VALUE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[-+]?([1-9]\d*|0)")

# Целое или дробь без хвостовых нулей: .1, 0.01, 10.01
DECIMAL_VALUE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[-+]?(((0?\.)|([1-9]\d*\.))\d*[1-9]|([1-9]\d*|0))"
)


# =============================================================================
# ENUMS
# =============================================================================


class FieldType(str, Enum):
    """Тип числового поля"""

    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"


# =============================================================================
# BOUNDS
# =============================================================================


@dataclass(frozen=True)
class FieldBounds:
    """
    Эффективные границы поля.

    floor/ceil — жёсткие границы хранения, min/max — настроенные
    границы, зажатые в [floor, ceil]. None означает отсутствие границы.
    """

    floor: Optional[str]
    ceil: Optional[str]
    min: Optional[str]
    max: Optional[str]


def clamp_low(value: Optional[str], floor: Optional[str]) -> Optional[str]:
    """Поднять value до floor (пустое значение становится floor)."""
    if floor is None:
        return value
    if value is None or Decimal(value) < Decimal(floor):
        return floor
    return value


def clamp_high(value: Optional[str], ceil: Optional[str]) -> Optional[str]:
    """Опустить value до ceil (пустое значение становится ceil)."""
    if ceil is None:
        return value
    if value is None or Decimal(value) > Decimal(ceil):
        return ceil
    return value


def decimal_step(scale: int) -> str:
    """
    Минимальный шаг DECIMAL со scale дробными разрядами.

    Examples:
        >>> decimal_step(2)
        '0.01'
        >>> decimal_step(0)
        '1'
    """
    return to_canonical_string(Decimal(1).scaleb(-scale))


# =============================================================================
# BASE SETTINGS MODEL
# =============================================================================


class NumericFieldSettings(BaseModel, ABC):
    """
    Базовые настройки числового поля.

    Immutable модель (frozen=True). Пустая строка в step/min/max
    означает «не задано». Экземпляры создаются только у конкретных
    типов полей.
    """

    field_type: ClassVar[FieldType]
    value_pattern: ClassVar[re.Pattern[str]] = DECIMAL_VALUE_PATTERN

    step: str = Field("", description="Шаг изменения значения")
    min: str = Field("", description="Минимальное допустимое значение")
    max: str = Field("", description="Максимальное допустимое значение")
    prefix: str = Field("", description="Префикс ('$ ' или 'pound|pounds')")
    suffix: str = Field("", description="Суффикс (' m' или 'pound|pounds')")
    placeholder: str = Field("", description="Подсказка в пустом поле")
    unsigned: bool = Field(False, description="Только неотрицательные значения")

    model_config = {"frozen": True}

    @field_validator("step", "min", "max", mode="before")
    @classmethod
    def canonicalize_numeric(cls, v: Any, info: ValidationInfo) -> str:
        """Числа приводятся к канонической строке, пустые значения к ''."""
        if v is None:
            return ""
        if isinstance(v, str) and v.strip() == "":
            return ""
        if info.field_name == "step" and v == ANY_STEP and cls.field_type is FieldType.FLOAT:
            return ANY_STEP
        if not is_numeric(v):
            raise ValueError(f"{info.field_name} must be numeric or blank, got {v!r}")
        return to_canonical_string(v)

    @field_validator("step")
    @classmethod
    def validate_step_positive(cls, v: str) -> str:
        if v not in ("", ANY_STEP) and Decimal(v) <= 0:
            raise ValueError(f"step must be positive, got {v}")
        return v

    @model_validator(mode="after")
    def validate_limits(self) -> "NumericFieldSettings":
        """
        Согласованность step/min/max с хранением и друг с другом.

        - min <= max
        - step/min/max не мельче разрядности хранения, отсюда step >= base_step
        - step <= max (или ceil), если тот положителен
        - min и max в [floor, ceil]
        - max лежит на сетке step от min (сетка начинается в min)
        """
        if self.min and self.max and Decimal(self.min) > Decimal(self.max):
            raise ValueError(f"min {self.min} exceeds max {self.max}")

        base_step = self.base_step
        if base_step != ANY_STEP:
            storage_digits = count_decimal_digits(base_step)
            for name in ("step", "min", "max"):
                value = getattr(self, name)
                if value and count_decimal_digits(value) > storage_digits:
                    raise ValueError(
                        f"{name} {value} has more than {storage_digits} decimal digits"
                    )

        floor, ceil = self.hard_bounds()
        for name in ("min", "max"):
            value = getattr(self, name)
            if not value:
                continue
            if floor is not None and Decimal(value) < Decimal(floor):
                raise ValueError(f"{name} {value} is less than {floor}")
            if ceil is not None and Decimal(value) > Decimal(ceil):
                raise ValueError(f"{name} {value} is greater than {ceil}")

        step = self.effective_step
        if step == ANY_STEP:
            return self

        upper = self.max or ceil
        if upper is not None and Decimal(upper) > 0 and Decimal(step) > Decimal(upper):
            raise ValueError(f"step {step} exceeds max {upper}")
        if self.min and self.max and not is_valid_step(self.max, step, self.min):
            raise ValueError(f"max {self.max} is not a multiple of step {step} from min {self.min}")

        return self

    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def base_step(self) -> str:
        """Шаг по умолчанию для типа поля."""

    @property
    def effective_step(self) -> str:
        """Настроенный шаг или шаг по умолчанию."""
        return self.step or self.base_step

    @property
    def size_label(self) -> str:
        """Человекочитаемое имя размера хранения."""
        return self.field_type.value

    def storage_range(self) -> Optional[StorageRange]:
        """Диапазон хранения (None, если тип не ограничен)."""
        return None

    def hard_bounds(self) -> Tuple[Optional[str], Optional[str]]:
        """
        Жёсткие границы (floor, ceil).

        Unsigned поле: floor = "0". Иначе floor = signed минимум хранения.
        """
        storage = self.storage_range()
        if storage is not None:
            return storage.bounds(self.unsigned)
        return ("0" if self.unsigned else None), None

    def bounds(self) -> FieldBounds:
        """
        Эффективные границы поля.

        Пустой min становится floor, пустой max становится ceil.
        """
        floor, ceil = self.hard_bounds()

        return FieldBounds(
            floor=floor,
            ceil=ceil,
            min=clamp_low(self.min or None, floor),
            max=clamp_high(self.max or None, ceil),
        )

    @staticmethod
    def is_empty(value: Any) -> bool:
        """
        Проверка пустого значения.

        None и пустая строка пусты; 0 и "0" — нет.
        """
        if value is None:
            return True
        return isinstance(value, str) and value.strip() == ""

    def check_value(self, value: NumericValue, label: str = "Value") -> List[str]:
        """
        Проверка значения на соответствие ограничениям хранения.

        Args:
            value: Сохраняемое значение
            label: Имя поля для сообщений

        Returns:
            Список нарушений (пустой, если значение допустимо)
        """
        if self.is_empty(value):
            return []

        text = to_canonical_string(value)
        if not is_numeric(text) or self.value_pattern.fullmatch(text) is None:
            return [f"{label} is not a valid number."]

        violations = []
        exact = Decimal(text)

        if self.unsigned and exact < 0:
            violations.append(
                f"{label}: the {self.field_type.value} must be larger or equal to 0."
            )

        storage = self.storage_range()
        if storage is None:
            return violations

        if not self.unsigned and exact < Decimal(storage.signed_min):
            violations.append(
                f"{label}: the signed {self.size_label} value may be no less than "
                f"{storage.signed_min}."
            )

        sign = "unsigned" if self.unsigned else "signed"
        ceil = storage.bounds(self.unsigned)[1]
        if exact > Decimal(ceil):
            violations.append(
                f"{label}: the {sign} {self.size_label} value may be no greater than {ceil}."
            )

        return violations


# =============================================================================
# FIELD TYPES
# =============================================================================


class IntegerFieldSettings(NumericFieldSettings):
    """Настройки целочисленного поля."""

    field_type: ClassVar[FieldType] = FieldType.INTEGER
    value_pattern: ClassVar[re.Pattern[str]] = INTEGER_VALUE_PATTERN

    step: str = Field("1", description="Шаг изменения значения")
    size: Literal["tiny", "small", "medium", "normal", "big"] = Field(
        DEFAULT_INTEGER_SIZE, description="Размер хранения"
    )

    @property
    def base_step(self) -> str:
        return "1"

    @property
    def size_label(self) -> str:
        return self.size

    def storage_range(self) -> Optional[StorageRange]:
        return ranges_for(self.size)


class DecimalFieldSettings(NumericFieldSettings):
    """Настройки поля DECIMAL(precision, scale)."""

    field_type: ClassVar[FieldType] = FieldType.DECIMAL

    precision: int = Field(
        DEFAULT_DECIMAL_PRECISION,
        ge=10,
        le=32,
        description="Общее число цифр, включая дробные",
    )
    scale: int = Field(
        DEFAULT_DECIMAL_SCALE, ge=0, le=10, description="Число цифр после точки"
    )

    @model_validator(mode="before")
    @classmethod
    def default_step_from_scale(cls, data: Any) -> Any:
        """Шаг по умолчанию = 10^-scale."""
        if not isinstance(data, dict) or "step" in data:
            return data
        scale = data.get("scale", DEFAULT_DECIMAL_SCALE)
        # Некорректный scale отклонит валидация поля
        if isinstance(scale, int) and not isinstance(scale, bool) and 0 <= scale <= 10:
            data = {**data, "step": decimal_step(scale)}
        return data

    @property
    def base_step(self) -> str:
        return decimal_step(self.scale)

    @property
    def size_label(self) -> str:
        return f"decimal({self.precision},{self.scale})"

    def storage_range(self) -> Optional[StorageRange]:
        return ranges_for((self.precision, self.scale))


class FloatFieldSettings(NumericFieldSettings):
    """Настройки поля с плавающей точкой (64 bit IEEE)."""

    field_type: ClassVar[FieldType] = FieldType.FLOAT

    step: str = Field(ANY_STEP, description="Шаг изменения значения или 'any'")

    @property
    def base_step(self) -> str:
        return ANY_STEP


SETTINGS_MODELS: Dict[FieldType, Type[NumericFieldSettings]] = {
    FieldType.INTEGER: IntegerFieldSettings,
    FieldType.DECIMAL: DecimalFieldSettings,
    FieldType.FLOAT: FloatFieldSettings,
}


def settings_from_dict(field_type: FieldType | str, data: Dict[str, Any]) -> NumericFieldSettings:
    """
    Построение модели настроек из сырого dict.

    Сначала dict проверяется JSON Schema контрактом, затем строится модель.

    Raises:
        jsonschema.ValidationError: Если dict не соответствует схеме
        pydantic.ValidationError: Если значения нарушают ограничения модели
    """
    field_type = FieldType(field_type)
    validate_settings(field_type.value, data)
    return SETTINGS_MODELS[field_type].model_validate(data)
