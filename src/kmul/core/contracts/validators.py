"""
JSON Schema Contract Validators

Валидация JSON документов запроса и результата умножения по схемам
из kmul/core/contracts/schema/ (jsonschema, Draft 2020-12):
- multiplication_request.json: операнды десятичным текстом
- multiplication_result.json: каноническое произведение и трассировка рекурсии
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

MULTIPLICATION_REQUEST: Final[str] = "multiplication_request"
MULTIPLICATION_RESULT: Final[str] = "multiplication_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с meta-validation и кэшем.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(
                    f"Invalid JSON Schema in {schema_name}.json: {e.message}"
                ) from e

            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


@lru_cache(maxsize=None)
def contract_validator(schema_name: str) -> Draft202012Validator:
    """
    Валидатор контракта; один экземпляр на схему за процесс.

    Raises:
        FileNotFoundError: Если схема не поставлена с пакетом
    """
    return Draft202012Validator(SchemaLoader().load_schema(schema_name))


def validate_multiplication_request(data: Dict[str, Any]) -> None:
    """
    Валидация документа multiplication_request.

    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    contract_validator(MULTIPLICATION_REQUEST).validate(data)


def validate_multiplication_result(data: Dict[str, Any]) -> None:
    """
    Валидация документа multiplication_result.

    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    contract_validator(MULTIPLICATION_RESULT).validate(data)
