"""NUMBER ELEMENT: проверка введённого числового значения

Элемент ввода числа с настройками режима отображения. Проверяет:
1. Число ли это (иначе дальнейшие проверки не выполняются)
2. value >= min (если задан)
3. value <= max (если задан)
4. Кратность шагу со смещением на min (если step задан и не 'any')

Пустое значение считается валидным: обязательность проверяется
уровнем выше.

Интеграция:
- Настройки берутся из resolve_display_settings
- Кратность шагу проверяется через is_valid_step
- Сырой ввод приводится к канонической строке через value_callback
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple

from xnumber.core.domain.field_settings import ANY_STEP, NumericFieldSettings
from xnumber.core.domain.widget_settings import (
    WidgetSettings,
    resolve_display_settings,
    select_affix,
)
from xnumber.core.math.numeric_strings import NumericValue, is_numeric, to_canonical_string
from xnumber.core.math.step_validation import is_valid_step


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class NumberValidationResult:
    """Результат проверки значения."""

    valid: bool
    errors: Tuple[str, ...]
    value: Optional[str]  # Каноническое значение (None для пустого/нечислового)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NumberElementConfig:
    """Конфигурация элемента.

    Шаблоны сообщений принимают name, min, max.
    """

    any_step: str = ANY_STEP
    not_a_number_message: str = "{name} must be a number."
    below_min_message: str = "{name} must be higher than or equal to {min}."
    above_max_message: str = "{name} must be lower than or equal to {max}."
    step_mismatch_message: str = "{name} is not a valid number."


# =============================================================================
# NUMBER ELEMENT
# =============================================================================


@dataclass(frozen=True)
class NumberElement:
    """Элемент ввода числа.

    Все числовые атрибуты хранятся как канонические строки.
    """

    name: str
    title: str = ""
    default_value: Optional[str] = None
    step: Optional[str] = None
    min: Optional[str] = None
    max: Optional[str] = None
    field_prefix: Optional[str] = None
    field_suffix: Optional[str] = None
    placeholder: Optional[str] = None
    config: NumberElementConfig = field(default_factory=NumberElementConfig)

    @classmethod
    def from_settings(
        cls,
        name: str,
        field_settings: NumericFieldSettings,
        widget: Optional[WidgetSettings] = None,
        item_value: Optional[NumericValue] = None,
        title: str = "",
        base_default_value: Optional[NumericValue] = None,
    ) -> "NumberElement":
        """Построение элемента из настроек поля и режима отображения.

        Args:
            name: Машинное имя элемента
            field_settings: Настройки поля
            widget: Переопределения режима отображения (optional)
            item_value: Текущее сохранённое значение (optional)
            title: Заголовок для сообщений (optional)
            base_default_value: Значение по умолчанию уровня поля (optional)
        """
        display = resolve_display_settings(field_settings, widget, base_default_value)

        current = to_canonical_string(item_value) if is_numeric(item_value) else None
        default_value = display.default_value if is_numeric(display.default_value) else current

        # Форма префикса/суффикса зависит от количества
        count = default_value if default_value is not None else 1

        return cls(
            name=name,
            title=title,
            default_value=default_value,
            step=display.step,
            min=display.min,
            max=display.max,
            field_prefix=select_affix(display.prefix, count),
            field_suffix=select_affix(display.suffix, count),
            placeholder=display.placeholder,
        )

    @property
    def label(self) -> str:
        return self.title or self.name

    @staticmethod
    def value_callback(raw: object) -> Optional[str]:
        """
        Приведение сырого ввода к канонической строке.

        Очень малые и большие float приходят в научной нотации,
        каноническая строка её раскрывает.

        Returns:
            Каноническая строка или None для нечислового ввода
        """
        if is_numeric(raw):
            return to_canonical_string(raw)
        return None

    def validate(self, value: object) -> NumberValidationResult:
        """
        Проверка значения.

        Args:
            value: Введённое значение (строка или число)

        Returns:
            NumberValidationResult со всеми найденными ошибками
        """
        if value is None or value == "":
            return NumberValidationResult(valid=True, errors=(), value=None)

        name = self.label

        if not is_numeric(value):
            message = self.config.not_a_number_message.format(name=name)
            return NumberValidationResult(valid=False, errors=(message,), value=None)

        canonical = to_canonical_string(value)
        exact = Decimal(canonical)
        errors = []

        if self.min is not None and exact < Decimal(self.min):
            errors.append(self.config.below_min_message.format(name=name, min=self.min))

        if self.max is not None and exact > Decimal(self.max):
            errors.append(self.config.above_max_message.format(name=name, max=self.max))

        if self.step is not None and self.step.lower() != self.config.any_step:
            if not is_valid_step(canonical, self.step, self.min):
                errors.append(self.config.step_mismatch_message.format(name=name))

        return NumberValidationResult(valid=not errors, errors=tuple(errors), value=canonical)
