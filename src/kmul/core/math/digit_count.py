"""
Digit Counter — количество десятичных цифр целого произвольной точности

Соглашение: digit_count(0) == 0 (не 1). Ядро Karatsuba опирается на это
соглашение при вычислении split point для нулевых операндов.
"""

from typing import Any

from kmul.core.math.integer_guards import DECIMAL_BASE, is_positive


def digit_count(value: Any) -> int:
    """
    Количество цифр value в основании DECIMAL_BASE.

    Последовательно делит value на основание (truncating division),
    пока частное строго больше нуля.

    Args:
        value: Неотрицательное целое (int или gmpy2.mpz)

    Returns:
        Количество цифр; 0 для value == 0

    Examples:
        >>> digit_count(0)
        0
        >>> digit_count(9)
        1
        >>> digit_count(10)
        2
        >>> digit_count(100)
        3
    """
    count = 0
    quotient = value

    while is_positive(quotient):
        count += 1
        quotient //= DECIMAL_BASE

    return count
