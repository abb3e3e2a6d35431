"""
Contract Validation Module

Модуль для валидации JSON контрактов запроса и результата умножения.
"""

from .validators import (
    MULTIPLICATION_REQUEST,
    MULTIPLICATION_RESULT,
    SCHEMA_DIR,
    SchemaLoader,
    contract_validator,
    validate_multiplication_request,
    validate_multiplication_result,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "MULTIPLICATION_REQUEST",
    "MULTIPLICATION_RESULT",
    # Classes
    "SchemaLoader",
    # Functions
    "contract_validator",
    "validate_multiplication_request",
    "validate_multiplication_result",
]
