"""
JSON Schema Settings Validators

Модуль для валидации «сырых» настроек числовых полей (dict из
конфигурации или пользовательского ввода) до построения моделей.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (в schema/ рядом с модулем):
- integer_field_settings.json
- decimal_field_settings.json
- float_field_settings.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ внутри пакета contracts.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'integer_field_settings')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded settings schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов настроек.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class IntegerSettingsValidator(ContractValidator):
    """Валидатор настроек целочисленного поля."""

    def __init__(self):
        super().__init__("integer_field_settings")


class DecimalSettingsValidator(ContractValidator):
    """Валидатор настроек поля DECIMAL(precision, scale)."""

    def __init__(self):
        super().__init__("decimal_field_settings")


class FloatSettingsValidator(ContractValidator):
    """Валидатор настроек поля с плавающей точкой."""

    def __init__(self):
        super().__init__("float_field_settings")


SETTINGS_VALIDATORS: Dict[str, type[ContractValidator]] = {
    "integer": IntegerSettingsValidator,
    "decimal": DecimalSettingsValidator,
    "float": FloatSettingsValidator,
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_settings(field_type: str, data: Dict[str, Any]) -> None:
    """
    Валидация сырых настроек поля по схеме его типа.

    Args:
        field_type: 'integer', 'decimal' или 'float'
        data: Сырые настройки

    Raises:
        ValueError: Неизвестный тип поля
        ValidationError: Если данные не соответствуют схеме
    """
    try:
        validator_cls = SETTINGS_VALIDATORS[field_type]
    except KeyError:
        raise ValueError(
            f"Unknown field type {field_type!r}, expected one of {sorted(SETTINGS_VALIDATORS)}"
        ) from None
    validator_cls().validate(data)
