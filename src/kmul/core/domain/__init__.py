"""
Domain models and configuration.

Contains the request/result models at the boundary of the multiplication core
and the runtime configuration.
"""

from kmul.core.domain.config import (
    ENV_BACKEND,
    ENV_LOG_LEVEL,
    ENV_MAX_STR_DIGITS,
    MIN_INT_STR_DIGITS,
    KaratsubaConfig,
    apply_int_str_limit,
    int_str_limit,
)
from kmul.core.domain.multiplication import (
    SCHEMA_VERSION,
    MultiplicationRequest,
    MultiplicationResult,
    RecursionTrace,
    compute_product,
)

__all__ = [
    # Config
    "ENV_BACKEND",
    "ENV_LOG_LEVEL",
    "ENV_MAX_STR_DIGITS",
    "MIN_INT_STR_DIGITS",
    "KaratsubaConfig",
    "apply_int_str_limit",
    "int_str_limit",
    # Multiplication models
    "SCHEMA_VERSION",
    "MultiplicationRequest",
    "MultiplicationResult",
    "RecursionTrace",
    "compute_product",
]
