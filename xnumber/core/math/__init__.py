"""
Core math modules для xnumber

Каноническое представление чисел и проверка кратности шагу.
"""

# Numeric Strings
from xnumber.core.math.numeric_strings import (
    # Constants
    ALPHADECIMAL_DIGITS,
    NUMERIC_PATTERN,
    # Exceptions
    NonNumericValueError,
    # Types
    NumericValue,
    # Functions
    alphadecimal_to_int,
    count_decimal_digits,
    int_to_alphadecimal,
    is_numeric,
    to_canonical_string,
    to_decimal,
    truncate_decimal,
)

# Step Validation
from xnumber.core.math.step_validation import (
    DOUBLE_MANTISSA_BITS,
    SINGLE_MANTISSA_BITS,
    is_valid_step,
)

__all__ = [
    # Numeric Strings — Constants
    "ALPHADECIMAL_DIGITS",
    "NUMERIC_PATTERN",
    # Numeric Strings — Exceptions
    "NonNumericValueError",
    # Numeric Strings — Types
    "NumericValue",
    # Numeric Strings — Functions
    "alphadecimal_to_int",
    "count_decimal_digits",
    "int_to_alphadecimal",
    "is_numeric",
    "to_canonical_string",
    "to_decimal",
    "truncate_decimal",
    # Step Validation — Constants
    "DOUBLE_MANTISSA_BITS",
    "SINGLE_MANTISSA_BITS",
    # Step Validation — Functions
    "is_valid_step",
]
