"""
Multiplication — модели запроса и результата умножения

Immutable Pydantic модели на границе ядра:
- MultiplicationRequest: два неотрицательных операнда (int или десятичный текст)
- MultiplicationResult: операнды, произведение и статистика рекурсии

Полная совместимость с JSON Schema (contracts/schema/multiplication_*.json):
to_contract() представляет большие целые десятичными строками.
"""

import re
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

from kmul.core.contracts import validate_multiplication_request
from kmul.core.domain.config import int_str_limit
from kmul.core.math.backends import IntegerBackend, to_backend
from kmul.core.math.digit_count import digit_count
from kmul.core.math.integer_guards import is_valid_integer
from kmul.core.math.karatsuba import multiply_traced

SCHEMA_VERSION: Final[str] = "1"

_DECIMAL_TEXT: Final[re.Pattern[str]] = re.compile(r"^[0-9]+$")


def _coerce_operand(v: Any) -> Any:
    """Десятичный текст и gmpy2.mpz -> int; bool и float отклоняются."""
    if isinstance(v, bool):
        raise ValueError("operand must be an integer, got bool")

    if isinstance(v, float):
        raise ValueError(f"operand must be an integer, got float {v}")

    if isinstance(v, str):
        text = v.strip()
        if not _DECIMAL_TEXT.match(text):
            raise ValueError(f"operand must be non-negative decimal text, got {v!r}")
        with int_str_limit():
            return int(text)

    if is_valid_integer(v):
        return int(v)

    return v


class _DecimalTextModel(BaseModel):
    """Базовая модель с целыми произвольной длины в repr/str."""

    def __repr__(self) -> str:
        with int_str_limit():
            return super().__repr__()

    def __str__(self) -> str:
        with int_str_limit():
            return super().__str__()


# =============================================================================
# NESTED MODELS
# =============================================================================


class RecursionTrace(BaseModel):
    """Статистика рекурсии Карацубы."""

    calls: int = Field(..., ge=1, description="Вызовы рекурсивного шага")
    base_cases: int = Field(..., ge=1, description="Вызовы на recursion floor")
    max_depth: int = Field(..., ge=0, description="Максимальная глубина")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_tree_shape(self) -> "RecursionTrace":
        """Каждый не-floor вызов порождает ровно три дочерних."""
        recursive_calls = self.calls - self.base_cases
        if recursive_calls < 0 or self.calls != 3 * recursive_calls + 1:
            raise ValueError(
                f"inconsistent trace: calls={self.calls}, base_cases={self.base_cases}"
            )
        return self


# =============================================================================
# REQUEST
# =============================================================================


class MultiplicationRequest(_DecimalTextModel):
    """
    Запрос на умножение двух неотрицательных целых.

    Операнды принимаются как int, gmpy2.mpz или десятичный текст.
    """

    x: int = Field(..., ge=0, description="Первый операнд")
    y: int = Field(..., ge=0, description="Второй операнд")
    backend: IntegerBackend = Field(
        default=IntegerBackend.PYTHON, description="Backend целых произвольной точности"
    )

    model_config = {"frozen": True}

    @field_validator("x", "y", mode="before")
    @classmethod
    def parse_operand(cls, v: Any) -> Any:
        """Разбор десятичного текста и отклонение bool/float."""
        return _coerce_operand(v)

    def to_contract(self) -> dict[str, Any]:
        """Представление для контракта multiplication_request."""
        with int_str_limit():
            x_text, y_text = str(self.x), str(self.y)

        return {
            "schema_version": SCHEMA_VERSION,
            "x": x_text,
            "y": y_text,
            "backend": self.backend.value,
        }

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "MultiplicationRequest":
        """
        Конструирование из JSON документа с проверкой по схеме.

        Raises:
            jsonschema.ValidationError: Если документ не соответствует схеме
        """
        validate_multiplication_request(data)
        return cls(
            x=data["x"],
            y=data["y"],
            backend=data.get("backend", IntegerBackend.PYTHON.value),
        )


# =============================================================================
# RESULT
# =============================================================================


class MultiplicationResult(_DecimalTextModel):
    """Результат умножения."""

    x: int = Field(..., ge=0, description="Первый операнд")
    y: int = Field(..., ge=0, description="Второй операнд")
    product: int = Field(..., ge=0, description="Произведение x * y")
    product_digits: int = Field(..., ge=0, description="Цифр в произведении")
    backend: IntegerBackend = Field(..., description="Использованный backend")
    trace: RecursionTrace

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_product_digits(self) -> "MultiplicationResult":
        """product_digits согласован с product (digit_count(0) == 0)."""
        expected = digit_count(self.product)
        if self.product_digits != expected:
            raise ValueError(
                f"product_digits={self.product_digits} does not match "
                f"product ({expected} digits)"
            )
        return self

    def to_contract(self) -> dict[str, Any]:
        """Представление для контракта multiplication_result."""
        with int_str_limit():
            x_text, y_text = str(self.x), str(self.y)
            product_text = str(self.product)

        return {
            "schema_version": SCHEMA_VERSION,
            "x": x_text,
            "y": y_text,
            "product": product_text,
            "product_digits": self.product_digits,
            "backend": self.backend.value,
            "trace": {
                "calls": self.trace.calls,
                "base_cases": self.trace.base_cases,
                "max_depth": self.trace.max_depth,
            },
        }


# =============================================================================
# EXECUTION
# =============================================================================


def compute_product(request: MultiplicationRequest) -> MultiplicationResult:
    """
    Выполнение запроса через ядро Карацубы.

    Args:
        request: Валидированный запрос

    Returns:
        MultiplicationResult с произведением и трассировкой

    Raises:
        BackendUnavailableError: Если backend запроса не установлен
    """
    x = to_backend(request.x, request.backend)
    y = to_backend(request.y, request.backend)

    product, trace = multiply_traced(x, y)
    product = int(product)

    return MultiplicationResult(
        x=request.x,
        y=request.y,
        product=product,
        product_digits=digit_count(product),
        backend=request.backend,
        trace=RecursionTrace(
            calls=trace.calls,
            base_cases=trace.base_cases,
            max_depth=trace.max_depth,
        ),
    )
