"""
Settings Contract Validation Module

Модуль для валидации сырых настроек числовых полей по JSON Schema.
"""

from .validators import (
    SETTINGS_VALIDATORS,
    ContractValidator,
    DecimalSettingsValidator,
    FloatSettingsValidator,
    IntegerSettingsValidator,
    SchemaLoader,
    validate_settings,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntegerSettingsValidator",
    "DecimalSettingsValidator",
    "FloatSettingsValidator",
    "SETTINGS_VALIDATORS",
    # Functions
    "validate_settings",
]
