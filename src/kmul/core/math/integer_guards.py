"""
Integer Guards — целочисленные примитивы для Karatsuba

Модуль содержит константы и проверки, на которые опирается ядро умножения:
- Основание системы счисления и порог рекурсии
- Проверки знака (is_positive / is_zero) для произвольной точности
- Точное целочисленное округление вверх для split point
- Валидация операндов на стороне вызывающего кода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все значения, с которыми работает ядро, неотрицательны
2. Никаких float-вычислений: split point считается точно для любых размеров
3. Ядро (multiply) не вызывает валидацию; её вызывает только вызывающий код
"""

import numbers
from typing import Any, Final

# =============================================================================
# КОНСТАНТЫ АЛГОРИТМА
# =============================================================================

# Основание, в котором считаются цифры и выполняется split
DECIMAL_BASE: Final[int] = 10

# Порог рекурсии: при split point n < RECURSION_FLOOR_SPLIT
# выполняется прямое умножение без дальнейшей рекурсии
RECURSION_FLOOR_SPLIT: Final[int] = 2


# =============================================================================
# ПРОВЕРКИ ЗНАКА
# =============================================================================


def is_positive(value: Any) -> bool:
    """
    Проверка v > 0 для целого произвольной точности.

    Args:
        value: int или совместимый тип (например, gmpy2.mpz)

    Returns:
        True если value строго больше нуля
    """
    return value > 0


def is_zero(value: Any) -> bool:
    """Проверка v == 0."""
    return value == 0


def is_valid_integer(value: Any) -> bool:
    """
    Проверка, что значение является целым произвольной точности.

    bool формально является int, но операндом умножения не считается.
    gmpy2.mpz зарегистрирован как numbers.Integral и проходит проверку.

    Examples:
        >>> is_valid_integer(10**100)
        True
        >>> is_valid_integer(True)
        False
        >>> is_valid_integer(1.0)
        False
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Integral)


# =============================================================================
# SPLIT POINT
# =============================================================================


def ceil_half(size: int) -> int:
    """
    Точное ceil(size / 2) без перехода во float.

    Для size = 0, 1, 2, 3 возвращает 0, 1, 1, 2.

    Args:
        size: Количество цифр (>= 0)

    Returns:
        Округлённая вверх половина size

    Raises:
        ValueError: Если size < 0
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    return (size + 1) // 2


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: Any, name: str) -> None:
    """
    Валидация, что значение является неотрицательным целым.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не целое или value < 0
    """
    if not is_valid_integer(value):
        raise ValueError(
            f"{name} must be a non-negative integer, got {type(value).__name__}"
        )

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_operands(x: Any, y: Any) -> None:
    """
    Валидация пары операндов умножения.

    Raises:
        ValueError: Если хотя бы один операнд отрицателен или не целый
    """
    validate_non_negative(x, "x")
    validate_non_negative(y, "y")
