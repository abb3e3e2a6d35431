"""
Integer Backends — выбор реализации целых произвольной точности

Ядро Karatsuba работает с любым целочисленным типом, поддерживающим
+, -, *, //, %, ** и сравнение с нулём:
- PYTHON: встроенный int
- GMPY2: gmpy2.mpz (привязка к GNU MP, опциональная зависимость kmul[gmp])

Отсутствие gmpy2 при явном запросе backend — ошибка, а не тихий fallback.
"""

from enum import Enum
from typing import Any

from kmul.core.math.integer_guards import validate_non_negative


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BackendUnavailableError(RuntimeError):
    """Запрошенный backend не установлен в окружении."""

    pass


# =============================================================================
# ENUMS
# =============================================================================


class IntegerBackend(str, Enum):
    """Реализация целых произвольной точности."""

    PYTHON = "python"
    GMPY2 = "gmpy2"


# =============================================================================
# LOADING
# =============================================================================


def _load_gmpy2() -> Any:
    try:
        import gmpy2
    except ImportError as e:
        raise BackendUnavailableError(
            "gmpy2 backend requested but gmpy2 is not installed "
            "(install with: pip install 'kmul[gmp]')"
        ) from e
    return gmpy2


def is_backend_available(backend: IntegerBackend) -> bool:
    """
    Проверка доступности backend без exception.

    Returns:
        True если backend может быть использован
    """
    if backend is IntegerBackend.PYTHON:
        return True

    try:
        _load_gmpy2()
    except BackendUnavailableError:
        return False
    return True


# =============================================================================
# CONSTRUCTION
# =============================================================================


def from_small_unsigned(u: int, backend: IntegerBackend = IntegerBackend.PYTHON) -> Any:
    """
    Конструирование значения backend из небольшого беззнакового целого.

    Args:
        u: Неотрицательное native целое
        backend: Целевой backend

    Returns:
        int или gmpy2.mpz

    Raises:
        ValueError: Если u отрицательное или не целое
        BackendUnavailableError: Если backend не установлен
    """
    validate_non_negative(u, "u")
    return to_backend(u, backend)


def to_backend(value: Any, backend: IntegerBackend) -> Any:
    """
    Конверсия целого в тип указанного backend.

    Raises:
        BackendUnavailableError: Если backend не установлен
    """
    if backend is IntegerBackend.GMPY2:
        gmpy2 = _load_gmpy2()
        return gmpy2.mpz(value)

    return int(value)
