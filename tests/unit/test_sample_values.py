"""
Тесты для генерации примерных значений

Проверяет:
1. Значения лежат в настроенных границах
2. Число дробных разрядов не превышает scale
3. Детерминизм при заданном seed
4. Значения проходят ограничения хранения поля
"""

import random
from decimal import Decimal
from typing import ClassVar

import pytest

from xnumber.core.domain import (
    DecimalFieldSettings,
    FieldType,
    FloatFieldSettings,
    IntegerFieldSettings,
    NumericFieldSettings,
    generate_sample_value,
)
from xnumber.core.math import count_decimal_digits, is_numeric


class TestIntegerSamples:
    """Тесты для integer"""

    def test_within_configured_bounds(self) -> None:
        rng = random.Random(42)
        settings = IntegerFieldSettings(min=5, max=10)
        for _ in range(100):
            assert 5 <= int(generate_sample_value(settings, rng)) <= 10

    def test_default_bounds(self) -> None:
        rng = random.Random(7)
        for _ in range(100):
            assert 0 <= int(generate_sample_value(IntegerFieldSettings(), rng)) <= 999


class TestDecimalSamples:
    """Тесты для decimal"""

    def test_default_precision(self) -> None:
        rng = random.Random(1)
        settings = DecimalFieldSettings()
        for _ in range(100):
            sample = generate_sample_value(settings, rng)
            assert -Decimal("99999999") <= Decimal(sample) <= Decimal("99999999")
            assert count_decimal_digits(sample) <= 2

    def test_narrow_bounds(self) -> None:
        """min = 1.25, max = 1.5: два дробных разряда"""
        rng = random.Random(3)
        settings = DecimalFieldSettings(min="1.25", max="1.5")
        for _ in range(100):
            sample = generate_sample_value(settings, rng)
            assert Decimal("1.25") <= Decimal(sample) <= Decimal("1.5")
            assert count_decimal_digits(sample) <= 2


class TestFloatSamples:
    """Тесты для float"""

    def test_within_configured_bounds(self) -> None:
        rng = random.Random(11)
        settings = FloatFieldSettings(min=-1, max=1)
        for _ in range(100):
            sample = generate_sample_value(settings, rng)
            assert "e" not in sample.lower()
            assert -1 <= float(sample) <= 1

    def test_deterministic_with_seed(self) -> None:
        first = generate_sample_value(FloatFieldSettings(), random.Random(5))
        second = generate_sample_value(FloatFieldSettings(), random.Random(5))
        assert first == second
        assert is_numeric(first)


class _CurrencySettings(NumericFieldSettings):
    field_type: ClassVar[FieldType] = FieldType.DECIMAL

    @property
    def base_step(self) -> str:
        return "0.01"


class TestStorageConstraints:
    """Примерные значения проходят check_value поля"""

    @pytest.mark.parametrize(
        "settings",
        [
            IntegerFieldSettings(size="tiny"),
            IntegerFieldSettings(size="tiny", unsigned=True),
            IntegerFieldSettings(size="small", min=1000),
            IntegerFieldSettings(max=-5000),
            DecimalFieldSettings(unsigned=True),
            DecimalFieldSettings(unsigned=True, max="0.5"),
            DecimalFieldSettings(min="99999999.5"),
            FloatFieldSettings(unsigned=True),
        ],
    )
    def test_samples_pass_check_value(self, settings) -> None:
        rng = random.Random(2024)
        for _ in range(50):
            sample = generate_sample_value(settings, rng)
            assert settings.check_value(sample) == []

    def test_tiny_within_storage(self) -> None:
        rng = random.Random(8)
        for _ in range(100):
            assert 0 <= int(generate_sample_value(IntegerFieldSettings(size="tiny"), rng)) <= 127

    def test_configured_bounds_respected(self) -> None:
        rng = random.Random(9)
        settings = IntegerFieldSettings(max=-5000)
        for _ in range(100):
            assert int(generate_sample_value(settings, rng)) <= -5000


def test_unsupported_settings_type() -> None:
    with pytest.raises(TypeError, match="Unsupported field settings type"):
        generate_sample_value(_CurrencySettings())
