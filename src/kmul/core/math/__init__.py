"""
Core math modules для kmul

Целочисленные примитивы и умножение Карацубы с точной арифметикой.
"""

# Integer Guards
from kmul.core.math.integer_guards import (
    # Constants
    DECIMAL_BASE,
    RECURSION_FLOOR_SPLIT,
    # Sign checks
    is_positive,
    is_valid_integer,
    is_zero,
    # Split point
    ceil_half,
    # Validation
    validate_non_negative,
    validate_operands,
)

# Digit Counter
from kmul.core.math.digit_count import digit_count

# Karatsuba
from kmul.core.math.karatsuba import (
    KaratsubaInvariantViolation,
    KaratsubaTrace,
    Split,
    checked_multiply,
    multiply,
    multiply_traced,
    split_operand,
)

# Backends
from kmul.core.math.backends import (
    BackendUnavailableError,
    IntegerBackend,
    from_small_unsigned,
    is_backend_available,
    to_backend,
)

__all__ = [
    # Integer Guards — Constants
    "DECIMAL_BASE",
    "RECURSION_FLOOR_SPLIT",
    # Integer Guards — Sign checks
    "is_positive",
    "is_valid_integer",
    "is_zero",
    # Integer Guards — Split point
    "ceil_half",
    # Integer Guards — Validation
    "validate_non_negative",
    "validate_operands",
    # Digit Counter
    "digit_count",
    # Karatsuba — Exceptions
    "KaratsubaInvariantViolation",
    # Karatsuba — Types
    "KaratsubaTrace",
    "Split",
    # Karatsuba — Functions
    "checked_multiply",
    "multiply",
    "multiply_traced",
    "split_operand",
    # Backends
    "BackendUnavailableError",
    "IntegerBackend",
    "from_small_unsigned",
    "is_backend_available",
    "to_backend",
]
