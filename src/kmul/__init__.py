"""
kmul — Karatsuba multiplication of arbitrarily large non-negative integers.
"""

from kmul.core.math import checked_multiply, digit_count, multiply, multiply_traced

__version__ = "0.1.0"

__all__ = [
    "checked_multiply",
    "digit_count",
    "multiply",
    "multiply_traced",
]
