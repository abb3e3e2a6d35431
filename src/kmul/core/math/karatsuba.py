"""
Karatsuba — умножение целых произвольной точности

Модуль реализует divide-and-conquer умножение Карацубы в основании 10:
- Split операнда на старшую и младшую половины по границе цифр
- Три рекурсивных умножения вместо четырёх
- Рекомбинация частичных произведений без округлений
- Трассировка рекурсии (вызовы, base cases, глубина)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. multiply(x, y) == x * y точно, для любых неотрицательных x, y
2. Рекурсия останавливается при split point n < RECURSION_FLOOR_SPLIT
3. Каждый рекурсивный шаг порождает ровно три дочерних вызова
4. abcd проверяется на неотрицательность только после обоих вычитаний

ФОРМУЛЫ:
    x = a * B^n + b,  y = c * B^n + d
    ac = a * c,  bd = b * d
    abcd = (a + b)(c + d) - ac - bd
    x * y = ac * B^(2n) + abcd * B^n + bd
"""

import logging
from dataclasses import dataclass
from typing import Any, NamedTuple

from kmul.core.math.digit_count import digit_count
from kmul.core.math.integer_guards import (
    DECIMAL_BASE,
    RECURSION_FLOOR_SPLIT,
    ceil_half,
    validate_operands,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class KaratsubaInvariantViolation(ArithmeticError):
    """
    Нарушение алгебраического тождества Карацубы: abcd < 0.

    Для корректного целочисленного типа не возникает никогда.
    Сигнализирует о неисправном backend (неточные +, -, //, %).
    """

    pass


# =============================================================================
# TYPES
# =============================================================================


class Split(NamedTuple):
    """Разложение операнда: value = high * B^n + low, 0 <= low < B^n."""

    high: Any
    low: Any
    n: int


@dataclass(frozen=True)
class KaratsubaTrace:
    """Статистика рекурсии одного умножения."""

    calls: int  # Все вызовы рекурсивного шага, включая верхний
    base_cases: int  # Вызовы, завершившиеся прямым умножением
    max_depth: int  # Глубина самого глубокого вызова (верхний = 0)


class _TraceCounter:
    def __init__(self) -> None:
        self.calls = 0
        self.base_cases = 0
        self.max_depth = 0

    def enter(self, depth: int) -> None:
        self.calls += 1
        if depth > self.max_depth:
            self.max_depth = depth

    def freeze(self) -> KaratsubaTrace:
        return KaratsubaTrace(
            calls=self.calls,
            base_cases=self.base_cases,
            max_depth=self.max_depth,
        )


# =============================================================================
# SPLIT
# =============================================================================


def split_operand(value: Any, n: int) -> Split:
    """
    Разделение операнда на старшую и младшую половины по n младшим цифрам.

    Args:
        value: Неотрицательное целое
        n: Количество младших цифр в low (>= 0)

    Returns:
        Split(high=value // B^n, low=value % B^n, n=n)

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> split_operand(1234, 2)
        Split(high=12, low=34, n=2)
        >>> split_operand(7, 0)
        Split(high=7, low=0, n=0)
    """
    if n < 0:
        raise ValueError(f"split point must be non-negative, got {n}")

    power = DECIMAL_BASE**n
    return Split(high=value // power, low=value % power, n=n)


# =============================================================================
# MULTIPLY
# =============================================================================


def _karatsuba(x: Any, y: Any, depth: int, counter: _TraceCounter | None) -> Any:
    if counter is not None:
        counter.enter(depth)

    size = max(digit_count(x), digit_count(y))
    n = ceil_half(size)

    # Recursion floor: операнды из 0-2 цифр
    if n < RECURSION_FLOOR_SPLIT:
        if counter is not None:
            counter.base_cases += 1
        return x * y

    a, b, _ = split_operand(x, n)
    c, d, _ = split_operand(y, n)

    ac = _karatsuba(a, c, depth + 1, counter)
    bd = _karatsuba(b, d, depth + 1, counter)
    abcd = _karatsuba(a + b, c + d, depth + 1, counter)

    abcd = abcd - ac
    abcd = abcd - bd
    if abcd < 0:
        raise KaratsubaInvariantViolation(
            f"Karatsuba cross term is negative: abcd={abcd} at split n={n}. "
            f"Integer backend arithmetic is not exact."
        )

    return ac * DECIMAL_BASE ** (2 * n) + abcd * DECIMAL_BASE**n + bd


def multiply(x: Any, y: Any) -> Any:
    """
    Произведение x * y по алгоритму Карацубы.

    Предусловие (не проверяется): x >= 0 и y >= 0. Для проверки
    на стороне вызывающего кода используйте checked_multiply.

    Args:
        x: Первый операнд (int или gmpy2.mpz)
        y: Второй операнд

    Returns:
        Точное произведение того же целочисленного типа

    Raises:
        KaratsubaInvariantViolation: Если backend нарушил тождество Карацубы

    Examples:
        >>> multiply(12, 34)
        408
        >>> multiply(1234, 5678)
        7006652
    """
    if logger.isEnabledFor(logging.DEBUG):
        size = max(digit_count(x), digit_count(y))
        logger.debug(
            "karatsuba multiply: size=%d split=%d", size, ceil_half(size)
        )

    return _karatsuba(x, y, 0, None)


def multiply_traced(x: Any, y: Any) -> tuple[Any, KaratsubaTrace]:
    """
    Умножение с трассировкой рекурсии.

    Returns:
        (product, trace), где product совпадает с multiply(x, y)
    """
    counter = _TraceCounter()
    product = _karatsuba(x, y, 0, counter)
    trace = counter.freeze()

    logger.debug(
        "karatsuba trace: calls=%d base_cases=%d max_depth=%d",
        trace.calls,
        trace.base_cases,
        trace.max_depth,
    )
    return product, trace


def checked_multiply(x: Any, y: Any) -> Any:
    """
    multiply с валидацией операндов на стороне вызывающего кода.

    Raises:
        ValueError: Если операнд отрицателен или не является целым
    """
    validate_operands(x, y)
    return multiply(x, y)
