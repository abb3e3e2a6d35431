"""
Тесты для Karatsuba — умножение целых произвольной точности

Проверяемые инварианты:
1. multiply(x, y) == x * y (сравнение с native умножением)
2. Поглощение нулём, единица как нейтральный элемент, коммутативность
3. Recursion floor для операндов из 0, 1, 2 и 3 цифр
4. Три дочерних вызова на каждый рекурсивный шаг
5. KaratsubaInvariantViolation при неточном backend
6. Fuzz до нескольких тысяч цифр
"""

import logging
import random

import pytest

from kmul.core.math.karatsuba import (
    KaratsubaInvariantViolation,
    KaratsubaTrace,
    Split,
    checked_multiply,
    multiply,
    multiply_traced,
    split_operand,
)

PI_64 = 3141592653589793238462643383279502884197169399375105820974944592
E_64 = 2718281828459045235360287471352662497757247093699959574966967627


# =============================================================================
# ТЕСТЫ: Split
# =============================================================================


class TestSplitOperand:
    """Тесты split_operand: value = high * 10^n + low."""

    def test_even_split(self):
        assert split_operand(1234, 2) == Split(high=12, low=34, n=2)

    def test_low_half_keeps_leading_zeros_numerically(self):
        """Младшая половина 1005 при n=2 равна 5."""
        assert split_operand(1005, 2) == Split(high=10, low=5, n=2)

    def test_zero_split_point(self):
        """n = 0: весь операнд в high."""
        assert split_operand(987, 0) == Split(high=987, low=0, n=0)

    def test_split_wider_than_operand(self):
        """n больше числа цифр: весь операнд в low."""
        assert split_operand(42, 5) == Split(high=0, low=42, n=5)

    def test_recombination_identity(self):
        rng = random.Random(7)
        for _ in range(20):
            value = rng.randrange(10**80)
            n = rng.randint(0, 90)
            high, low, _ = split_operand(value, n)
            assert high * 10**n + low == value
            assert 0 <= low < 10**n

    def test_negative_split_point_rejected(self):
        with pytest.raises(ValueError, match="split point must be non-negative"):
            split_operand(10, -1)


# =============================================================================
# ТЕСТЫ: Сценарии
# =============================================================================


class TestMultiplyScenarios:
    """End-to-end сценарии."""

    def test_two_digit(self):
        assert multiply(12, 34) == 408

    def test_four_digit(self):
        assert multiply(1234, 5678) == 7006652

    def test_zero_times_large(self):
        assert multiply(0, 123456789) == 0

    def test_all_nines(self):
        assert multiply(99999, 99999) == 9999800001

    def test_sixty_four_digit_operands(self):
        """64 x 64 цифры: сравнение с независимым native умножением."""
        product = multiply(PI_64, E_64)
        assert product == PI_64 * E_64
        assert len(str(product)) == 127


# =============================================================================
# ТЕСТЫ: Алгебраические свойства
# =============================================================================


class TestMultiplyProperties:
    """Поглощение нулём, единица, коммутативность."""

    VALUES = [0, 1, 7, 10, 99, 123, 1000, 98765, 10**20 + 3, PI_64]

    def test_zero_absorption(self):
        for x in self.VALUES:
            assert multiply(x, 0) == 0
            assert multiply(0, x) == 0

    def test_identity(self):
        for x in self.VALUES:
            assert multiply(x, 1) == x
            assert multiply(1, x) == x

    def test_commutativity(self):
        for x in self.VALUES:
            for y in self.VALUES:
                assert multiply(x, y) == multiply(y, x)

    def test_unbalanced_operands(self):
        """Операнды сильно разной длины."""
        assert multiply(7, 10**50 + 1) == 7 * (10**50 + 1)
        assert multiply(10**50 + 1, 123) == (10**50 + 1) * 123


# =============================================================================
# ТЕСТЫ: Recursion floor
# =============================================================================


class TestRecursionFloor:
    """Операнды с максимальным числом цифр 0, 1, 2 и 3."""

    @pytest.mark.parametrize(
        "x,y",
        [
            (0, 0),  # size 0 → n = 0
            (0, 5),  # size 1 → n = 1
            (7, 8),  # size 1 → n = 1
            (99, 99),  # size 2 → n = 1
            (10, 3),  # size 2 → n = 1
        ],
    )
    def test_floor_is_direct_multiplication(self, x, y):
        """size <= 2: один вызов, сразу base case."""
        product, trace = multiply_traced(x, y)
        assert product == x * y
        assert trace == KaratsubaTrace(calls=1, base_cases=1, max_depth=0)

    @pytest.mark.parametrize("x,y", [(100, 0), (123, 4), (999, 999), (500, 999)])
    def test_three_digits_recurse(self, x, y):
        """size 3 → n = 2: рекурсия на один уровень вниз или глубже."""
        product, trace = multiply_traced(x, y)
        assert product == x * y
        assert trace.calls > 1
        assert trace.max_depth >= 1

    def test_three_digit_trace_shape(self):
        """123 * 4: три base case на глубине 1."""
        product, trace = multiply_traced(123, 4)
        assert product == 492
        assert trace == KaratsubaTrace(calls=4, base_cases=3, max_depth=1)

    def test_exhaustive_small_operands(self):
        """Пары малых операндов на границах 9/10, 99/100, 999/1000."""
        values = list(range(0, 12)) + [98, 99, 100, 101, 998, 999, 1000]
        for x in values:
            for y in values:
                assert multiply(x, y) == x * y


# =============================================================================
# ТЕСТЫ: Трассировка
# =============================================================================


class TestMultiplyTraced:
    """Тесты multiply_traced."""

    def test_four_digit_trace(self):
        """1234 * 5678: (12,56), (34,78) — base; (46,134) — ещё один уровень."""
        product, trace = multiply_traced(1234, 5678)
        assert product == 7006652
        assert trace == KaratsubaTrace(calls=7, base_cases=5, max_depth=2)

    def test_three_children_per_recursive_call(self):
        rng = random.Random(3)
        for digits in (4, 10, 64, 200):
            x = rng.randrange(10**digits)
            y = rng.randrange(10**digits)
            _, trace = multiply_traced(x, y)
            recursive_calls = trace.calls - trace.base_cases
            assert trace.calls == 3 * recursive_calls + 1

    def test_depth_is_logarithmic(self):
        """Глубина растёт как log2(size), а не линейно."""
        _, trace = multiply_traced(PI_64, E_64)
        assert trace.max_depth <= 10

    def test_same_product_as_multiply(self):
        product, _ = multiply_traced(PI_64, E_64)
        assert product == multiply(PI_64, E_64)


# =============================================================================
# ТЕСТЫ: Ошибки и валидация
# =============================================================================


class _LossyAdd(int):
    """Целое с неточным сложением: a + b всегда 0."""

    def __add__(self, other):
        return _LossyAdd(0)

    __radd__ = __add__

    def __floordiv__(self, other):
        return _LossyAdd(int(self) // int(other))

    def __mod__(self, other):
        return _LossyAdd(int(self) % int(other))


class TestMultiplyErrors:
    """Ошибки ядра и проверки вызывающего кода."""

    def test_invariant_violation_on_inexact_backend(self):
        """(a+b)(c+d) == 0 при ac, bd > 0 → abcd < 0."""
        with pytest.raises(KaratsubaInvariantViolation, match="cross term is negative"):
            multiply(_LossyAdd(1234), _LossyAdd(5678))

    def test_invariant_violation_is_arithmetic_error(self):
        assert issubclass(KaratsubaInvariantViolation, ArithmeticError)

    def test_checked_multiply_valid(self):
        assert checked_multiply(1234, 5678) == 7006652

    def test_checked_multiply_rejects_negative(self):
        with pytest.raises(ValueError, match="x must be non-negative"):
            checked_multiply(-1, 5)
        with pytest.raises(ValueError, match="y must be non-negative"):
            checked_multiply(5, -1)

    def test_checked_multiply_rejects_non_integers(self):
        with pytest.raises(ValueError, match="non-negative integer"):
            checked_multiply(1.5, 2)
        with pytest.raises(ValueError, match="non-negative integer"):
            checked_multiply(True, 2)
        with pytest.raises(ValueError, match="non-negative integer"):
            checked_multiply("12", 2)


# =============================================================================
# ТЕСТЫ: Логирование
# =============================================================================


class TestMultiplyLogging:
    """DEBUG логирование только на верхнем уровне."""

    def test_debug_logs_top_level_once(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="kmul.core.math.karatsuba"):
            multiply(PI_64, E_64)

        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["karatsuba multiply: size=64 split=32"]

    def test_trace_summary_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="kmul.core.math.karatsuba"):
            multiply_traced(1234, 5678)

        assert "karatsuba trace: calls=7 base_cases=5 max_depth=2" in caplog.text


# =============================================================================
# ТЕСТЫ: Fuzz
# =============================================================================


class TestMultiplyFuzz:
    """Случайные операнды от 1 до нескольких тысяч цифр."""

    @pytest.mark.parametrize(
        "digits,trials",
        [
            (1, 50),
            (2, 50),
            (3, 50),
            (5, 30),
            (17, 20),
            (64, 10),
            (257, 5),
            (1000, 2),
            (3000, 1),
        ],
    )
    def test_matches_native_multiplication(self, digits, trials):
        rng = random.Random(digits)
        for _ in range(trials):
            x = rng.randrange(10 ** (digits - 1), 10**digits)
            y = rng.randrange(10 ** (rng.randint(1, digits) - 1), 10**digits)
            assert multiply(x, y) == x * y

    def test_mixed_sizes(self):
        rng = random.Random(20220418)
        for _ in range(30):
            x = rng.randrange(10 ** rng.randint(0, 300))
            y = rng.randrange(10 ** rng.randint(0, 300))
            assert multiply(x, y) == x * y
