"""
KaratsubaConfig — конфигурация запуска умножения

Параметры окружения:
- KMUL_BACKEND: python | gmpy2
- KMUL_MAX_STR_DIGITS: лимит конверсии int <-> str (0 = без лимита)
- KMUL_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
"""

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final, Iterator, Mapping, Optional

from kmul.core.math.backends import IntegerBackend


# =============================================================================
# CONSTANTS
# =============================================================================

# Минимальный ненулевой лимит, который принимает sys.set_int_max_str_digits
MIN_INT_STR_DIGITS: Final[int] = 640

LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)

ENV_BACKEND: Final[str] = "KMUL_BACKEND"
ENV_MAX_STR_DIGITS: Final[str] = "KMUL_MAX_STR_DIGITS"
ENV_LOG_LEVEL: Final[str] = "KMUL_LOG_LEVEL"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class KaratsubaConfig:
    """Конфигурация kmul.

    Ядро умножения конфигурации не читает: она влияет только на
    выбор backend, конверсию десятичного текста и логирование.
    """

    backend: IntegerBackend = IntegerBackend.PYTHON
    max_str_digits: int = 0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        # IntegerBackend("bad") -> ValueError
        object.__setattr__(self, "backend", IntegerBackend(self.backend))
        object.__setattr__(self, "log_level", str(self.log_level).upper())

        if self.max_str_digits < 0 or 0 < self.max_str_digits < MIN_INT_STR_DIGITS:
            raise ValueError(
                f"max_str_digits must be 0 or >= {MIN_INT_STR_DIGITS}, "
                f"got {self.max_str_digits}"
            )

        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        backend: Optional[str] = None,
        max_str_digits: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> "KaratsubaConfig":
        """
        Загрузка конфигурации из переменных окружения.

        Явно переданные параметры имеют приоритет над окружением: переменная,
        перекрытая параметром, не читается и не валидируется.

        Args:
            environ: Источник переменных (default: os.environ)
            backend: Перекрывает KMUL_BACKEND
            max_str_digits: Перекрывает KMUL_MAX_STR_DIGITS
            log_level: Перекрывает KMUL_LOG_LEVEL

        Returns:
            KaratsubaConfig; отсутствующие значения берутся по умолчанию

        Raises:
            ValueError: Если итоговое значение невалидно
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        if max_str_digits is None:
            raw_digits = env.get(ENV_MAX_STR_DIGITS)
            try:
                max_str_digits = (
                    defaults.max_str_digits if raw_digits is None else int(raw_digits)
                )
            except ValueError as e:
                raise ValueError(
                    f"{ENV_MAX_STR_DIGITS} must be an integer, got {raw_digits!r}"
                ) from e

        return cls(
            backend=backend or env.get(ENV_BACKEND, defaults.backend.value),
            max_str_digits=max_str_digits,
            log_level=log_level or env.get(ENV_LOG_LEVEL, defaults.log_level),
        )


def apply_int_str_limit(config: KaratsubaConfig) -> None:
    """
    Установка лимита конверсии int <-> str для процесса.

    Изменяет глобальное состояние интерпретатора; вызывается только CLI.
    """
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(config.max_str_digits)


@contextmanager
def int_str_limit(max_str_digits: int = 0) -> Iterator[None]:
    """
    Временный лимит конверсии int <-> str на время блока.

    Предыдущий лимит процесса восстанавливается при выходе, в том числе
    по exception. Используется доменными моделями для десятичного текста
    произвольной длины.

    Args:
        max_str_digits: Лимит внутри блока (0 = без лимита)
    """
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return

    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(max_str_digits)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)
