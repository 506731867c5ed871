"""
Тесты для JSON Schema контрактов настроек

Проверяет:
1. Загрузку и кэширование схем
2. Валидацию integer/decimal/float настроек
3. Соответствие model_dump моделей их схемам
"""

import json

import jsonschema
import pytest

from xnumber.core.contracts import (
    DecimalSettingsValidator,
    FloatSettingsValidator,
    IntegerSettingsValidator,
    SchemaLoader,
    validate_settings,
)
from xnumber.core.domain import (
    DecimalFieldSettings,
    FloatFieldSettings,
    IntegerFieldSettings,
)

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        first = loader.load_schema("integer_field_settings")
        assert loader.load_schema("integer_field_settings") is first

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("currency_field_settings")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALIDATORS
# =============================================================================


class TestIntegerContract:
    """Тесты для integer_field_settings.json"""

    def test_valid(self) -> None:
        validator = IntegerSettingsValidator()
        assert validator.is_valid({"size": "tiny", "min": "-5", "max": 100, "unsigned": False})
        assert validator.is_valid({"min": ""})

    @pytest.mark.parametrize(
        "data",
        [{"size": "huge"}, {"min": "abc"}, {"step": "any"}, {"unsigned": "yes"}, {"extra": 1}],
    )
    def test_invalid(self, data) -> None:
        assert IntegerSettingsValidator().is_valid(data) is False

    def test_all_errors_reported(self) -> None:
        errors = list(
            IntegerSettingsValidator().iter_errors({"size": "huge", "min": "abc", "unsigned": "yes"})
        )
        assert len(errors) == 3

    def test_validate_raises(self) -> None:
        with pytest.raises(jsonschema.ValidationError):
            validate_settings("integer", {"size": "huge"})


class TestDecimalContract:
    """Тесты для decimal_field_settings.json"""

    def test_valid(self) -> None:
        validate_settings("decimal", {"precision": 32, "scale": 10, "step": "1.0E-7"})

    @pytest.mark.parametrize(
        "data", [{"precision": 9}, {"precision": 33}, {"scale": -1}, {"scale": 11}, {"size": "tiny"}]
    )
    def test_invalid(self, data) -> None:
        assert DecimalSettingsValidator().is_valid(data) is False


class TestFloatContract:
    """Тесты для float_field_settings.json"""

    @pytest.mark.parametrize("step", ["any", "0.5", 0.25, ""])
    def test_valid_steps(self, step) -> None:
        validate_settings("float", {"step": step})

    def test_invalid_step(self) -> None:
        assert FloatSettingsValidator().is_valid({"step": "every"}) is False


def test_unknown_field_type() -> None:
    with pytest.raises(ValueError, match="Unknown field type 'currency'"):
        validate_settings("currency", {})


# =============================================================================
# MODEL DUMP
# =============================================================================


@pytest.mark.parametrize(
    "settings, validator_cls",
    [
        (IntegerFieldSettings(size="big", unsigned=True, min=1), IntegerSettingsValidator),
        (DecimalFieldSettings(precision=12, scale=4, max="1.0E+3"), DecimalSettingsValidator),
        (FloatFieldSettings(prefix="~"), FloatSettingsValidator),
    ],
)
def test_model_dump_matches_schema(settings, validator_cls) -> None:
    """Сериализованная модель проходит свою схему"""
    validator_cls().validate(settings.model_dump())
