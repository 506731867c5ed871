"""Storage — диапазоны значений по размерам хранения."""

from .ranges import (
    STORAGE_SIZES,
    StorageRange,
    UnknownStorageSizeError,
    ranges_for,
)

__all__ = [
    "STORAGE_SIZES",
    "StorageRange",
    "UnknownStorageSizeError",
    "ranges_for",
]
