"""
Core math modules

Примитивы над десятичными digit-векторами (младшая цифра первой).
"""

# Decimal Digits
from src.core.math.decimal_digits import (
    # Constants
    DECIMAL_DIGITS,
    MAX_DIGIT,
    MIN_DIGIT,
    NEGATIVE_SIGN,
    RADIX,
    # Exceptions
    InvalidArgument,
    # Validation / normalization
    is_normalized,
    is_zero_digits,
    normalize_digits,
    validate_digits,
    # Comparison
    abs_less,
    # Schoolbook arithmetic
    add_magnitudes,
    mul_magnitudes,
    sub_magnitudes,
    # Conversion
    digits_from_int,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Constants
    "DECIMAL_DIGITS",
    "MAX_DIGIT",
    "MIN_DIGIT",
    "NEGATIVE_SIGN",
    "RADIX",
    # Exceptions
    "InvalidArgument",
    # Validation / normalization
    "is_normalized",
    "is_zero_digits",
    "normalize_digits",
    "validate_digits",
    # Comparison
    "abs_less",
    # Schoolbook arithmetic
    "add_magnitudes",
    "mul_magnitudes",
    "sub_magnitudes",
    # Conversion
    "digits_from_int",
    "format_decimal",
    "parse_decimal",
]
