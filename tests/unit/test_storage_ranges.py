"""
Тесты для модуля Storage Ranges

Проверяет:
1. Литеральные границы именованных размеров
2. Ограничение unsigned big до signed 64-bit максимума
3. Синтез диапазона DECIMAL(precision, scale)
4. Ошибки неизвестных размеров и некорректных precision/scale
"""

import pytest

from xnumber.core.storage.ranges import (
    STORAGE_SIZES,
    StorageRange,
    UnknownStorageSizeError,
    ranges_for,
)

# =============================================================================
# ИМЕНОВАННЫЕ РАЗМЕРЫ
# =============================================================================


class TestNamedSizes:
    """Тесты для tiny..big"""

    def test_tiny(self) -> None:
        tiny = ranges_for("tiny")
        assert tiny.signed_min == "-128"
        assert tiny.signed_max == "127"
        assert tiny.unsigned_max == "255"

    @pytest.mark.parametrize(
        "size, signed_min, signed_max, unsigned_max",
        [
            ("small", "-32768", "32767", "65535"),
            ("medium", "-8388608", "8388607", "16777215"),
            ("normal", "-2147483648", "2147483647", "4294967295"),
        ],
    )
    def test_literal_bounds(self, size, signed_min, signed_max, unsigned_max) -> None:
        storage = ranges_for(size)
        assert (storage.signed_min, storage.signed_max, storage.unsigned_max) == (
            signed_min,
            signed_max,
            unsigned_max,
        )

    def test_big_unsigned_capped_at_signed_max(self) -> None:
        """unsigned big = 9223372036854775807, а не 18446744073709551615"""
        big = ranges_for("big")
        assert big.signed_min == "-9223372036854775808"
        assert big.signed_max == "9223372036854775807"
        assert big.unsigned_max == "9223372036854775807"

    def test_full_table_without_argument(self) -> None:
        table = ranges_for()
        assert list(table) == ["tiny", "small", "medium", "normal", "big"]
        assert all(isinstance(storage, StorageRange) for storage in table.values())

    def test_full_table_is_a_copy(self) -> None:
        """Изменение возвращённой таблицы не затрагивает STORAGE_SIZES"""
        table = ranges_for()
        table.pop("tiny")
        assert "tiny" in STORAGE_SIZES

    def test_unknown_size_raises(self) -> None:
        with pytest.raises(UnknownStorageSizeError, match="Unknown storage size 'huge'"):
            ranges_for("huge")

    def test_unknown_size_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ranges_for("huge")


# =============================================================================
# DECIMAL(precision, scale)
# =============================================================================


class TestDecimalSizes:
    """Тесты для синтеза диапазона DECIMAL"""

    def test_precision_scale_tuple(self) -> None:
        storage = ranges_for((5, 2))
        assert storage.signed_max == "999.99"
        assert storage.signed_min == "-999.99"
        assert storage.unsigned_max == "999.99"

    def test_precision_scale_mapping(self) -> None:
        assert ranges_for({"precision": 5, "scale": 2}).signed_max == "999.99"

    def test_scale_equals_precision(self) -> None:
        """Нет целых разрядов → ведущий 0"""
        assert ranges_for({"precision": 2, "scale": 2}).signed_max == "0.99"

    def test_zero_scale(self) -> None:
        """Нет дробных разрядов → нет точки"""
        assert ranges_for((3, 0)).signed_max == "999"

    def test_scale_exceeding_precision_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot exceed precision"):
            ranges_for((2, 3))

    def test_negative_values_raise(self) -> None:
        with pytest.raises(ValueError, match="must be non-negative"):
            ranges_for((-1, 0))

    def test_incomplete_mapping_raises(self) -> None:
        with pytest.raises(ValueError, match="must define precision and scale"):
            ranges_for({"precision": 5})


# =============================================================================
# STORAGE RANGE
# =============================================================================


class TestStorageRange:
    """Тесты для StorageRange.bounds / contains"""

    def test_bounds_by_sign(self) -> None:
        tiny = ranges_for("tiny")
        assert tiny.bounds() == ("-128", "127")
        assert tiny.bounds(unsigned=True) == ("0", "255")

    def test_contains_signed(self) -> None:
        tiny = ranges_for("tiny")
        assert tiny.contains("127") is True
        assert tiny.contains(-128) is True
        assert tiny.contains(128) is False

    def test_contains_unsigned(self) -> None:
        tiny = ranges_for("tiny")
        assert tiny.contains(255, unsigned=True) is True
        assert tiny.contains(-1, unsigned=True) is False

    def test_contains_beyond_float_precision(self) -> None:
        """Границы big сравниваются точно"""
        big = ranges_for("big")
        assert big.contains("9223372036854775807") is True
        assert big.contains("9223372036854775808") is False

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ranges_for("tiny").signed_max = "1"
