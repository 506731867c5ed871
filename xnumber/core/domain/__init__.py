"""
Domain models and value objects.

Contains numeric field settings, display-mode settings and sample values.
"""

from xnumber.core.domain.field_settings import (
    ANY_STEP,
    DecimalFieldSettings,
    FieldBounds,
    FieldType,
    FloatFieldSettings,
    IntegerFieldSettings,
    NumericFieldSettings,
    SETTINGS_MODELS,
    decimal_step,
    settings_from_dict,
)
from xnumber.core.domain.sample_values import generate_sample_value
from xnumber.core.domain.widget_settings import (
    DisplaySettings,
    WidgetSettings,
    resolve_display_settings,
    select_affix,
    summarize,
)

__all__ = [
    # Field settings
    "ANY_STEP",
    "FieldType",
    "FieldBounds",
    "NumericFieldSettings",
    "IntegerFieldSettings",
    "DecimalFieldSettings",
    "FloatFieldSettings",
    "SETTINGS_MODELS",
    "decimal_step",
    "settings_from_dict",
    # Widget settings
    "WidgetSettings",
    "DisplaySettings",
    "resolve_display_settings",
    "select_affix",
    "summarize",
    # Sample values
    "generate_sample_value",
]
