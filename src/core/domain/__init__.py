"""
Domain models and value objects.

Contains the BigInt value type, the BigIntVariable binding and the
named-function operation surface.
"""

from src.core.domain.bigint import BigInt
from src.core.domain.bigint_variable import BigIntVariable
from src.core.domain.operations import (
    add,
    decrement,
    equals,
    greater_or_equal,
    greater_than,
    increment,
    less_or_equal,
    less_than,
    make_from_integer,
    make_from_string,
    make_zero,
    multiply,
    negate,
    subtract,
    to_decimal_string,
)
from src.core.math.decimal_digits import InvalidArgument

__all__ = [
    # Types
    "BigInt",
    "BigIntVariable",
    # Exceptions
    "InvalidArgument",
    # Construction
    "make_zero",
    "make_from_integer",
    "make_from_string",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "negate",
    # Comparison
    "equals",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    # Increment / decrement
    "increment",
    "decrement",
    # Formatting
    "to_decimal_string",
]
