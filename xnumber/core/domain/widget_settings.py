"""
Widget Settings — Настройки режима отображения формы

Каждый режим отображения (form display mode) может переопределить
настройки поля: значение по умолчанию, шаг, границы, префикс/суффикс,
placeholder. Итоговые настройки режима вычисляются слиянием:

    widget (если задано) → field (если задано) → None

с последующим зажатием min/max в жёсткие границы хранения.
"""

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from xnumber.core.domain.field_settings import (
    ANY_STEP,
    NumericFieldSettings,
    clamp_high,
    clamp_low,
)
from xnumber.core.math.numeric_strings import (
    NumericValue,
    is_numeric,
    to_canonical_string,
    to_decimal,
)

NUMERIC_KEYS = ("step", "min", "max")
TEXT_KEYS = ("prefix", "suffix", "placeholder")


# =============================================================================
# WIDGET SETTINGS
# =============================================================================


class WidgetSettings(BaseModel):
    """
    Переопределения одного режима отображения.

    Пустая строка означает «взять из настроек поля».
    """

    default_value: str = Field("", description="Значение по умолчанию режима")
    step: str = Field("", description="Шаг режима")
    min: str = Field("", description="Минимум режима")
    max: str = Field("", description="Максимум режима")
    prefix: str = Field("", description="Префикс режима")
    suffix: str = Field("", description="Суффикс режима")
    placeholder: str = Field("", description="Placeholder режима")

    model_config = {"frozen": True}

    @field_validator("default_value", "step", "min", "max", mode="before")
    @classmethod
    def canonicalize_numeric(cls, v: Any, info: ValidationInfo) -> str:
        if v is None:
            return ""
        if isinstance(v, str) and v.strip() == "":
            return ""
        if info.field_name == "step" and v == ANY_STEP:
            return ANY_STEP
        if not is_numeric(v):
            raise ValueError(f"{info.field_name} must be numeric or blank, got {v!r}")
        return to_canonical_string(v)


class DisplaySettings(BaseModel):
    """
    Итоговые настройки режима отображения.

    floor/ceil — жёсткие границы хранения, base_step и
    base_default_value — значения уровня поля.
    """

    default_value: Optional[str] = None
    step: str
    min: Optional[str] = None
    max: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    placeholder: Optional[str] = None
    base_default_value: Optional[str] = None
    base_step: str
    floor: Optional[str] = None
    ceil: Optional[str] = None

    model_config = {"frozen": True}


# =============================================================================
# RESOLUTION
# =============================================================================


def _pick_numeric(mode_value: str, field_value: str) -> Optional[str]:
    for candidate in (mode_value, field_value):
        if candidate == ANY_STEP or is_numeric(candidate):
            return candidate
    return None


def resolve_display_settings(
    field: NumericFieldSettings,
    widget: Optional[WidgetSettings] = None,
    base_default_value: Optional[NumericValue] = None,
) -> DisplaySettings:
    """
    Слияние настроек режима отображения с настройками поля.

    Args:
        field: Настройки поля
        widget: Переопределения режима (optional)
        base_default_value: Значение по умолчанию уровня поля (optional)

    Returns:
        DisplaySettings с зажатыми в [floor, ceil] границами
    """
    widget = widget or WidgetSettings()

    base_default = (
        to_canonical_string(base_default_value) if is_numeric(base_default_value) else None
    )
    default_value = widget.default_value if is_numeric(widget.default_value) else base_default

    numeric = {key: _pick_numeric(getattr(widget, key), getattr(field, key)) for key in NUMERIC_KEYS}
    text = {key: getattr(widget, key) or getattr(field, key) or None for key in TEXT_KEYS}

    bounds = field.bounds()

    return DisplaySettings(
        default_value=default_value,
        step=numeric["step"] or field.base_step,
        min=clamp_low(numeric["min"], bounds.floor),
        max=clamp_high(numeric["max"], bounds.ceil),
        base_default_value=base_default,
        base_step=field.base_step,
        floor=bounds.floor,
        ceil=bounds.ceil,
        **text,
    )


def select_affix(affix: Optional[str], count: NumericValue = 1) -> Optional[str]:
    """
    Выбор формы префикса/суффикса по количеству.

    "pound|pounds": единственное число при count == 1, иначе множественное.

    Examples:
        >>> select_affix("pound|pounds", 1)
        'pound'
        >>> select_affix("pound|pounds", "2.5")
        'pounds'
        >>> select_affix("$ ", 3)
        '$ '
    """
    if not affix:
        return None

    forms = affix.split("|")
    if len(forms) == 1:
        return forms[0]
    return forms[0] if to_decimal(count) == Decimal(1) else forms[1]


def summarize(display: DisplaySettings) -> List[str]:
    """Строки 'name: value' для краткого описания режима."""
    return [
        f"{name}: {'None' if value is None else value}"
        for name, value in display.model_dump().items()
    ]
