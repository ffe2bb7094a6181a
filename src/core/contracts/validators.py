"""
JSON Schema Contract Validators

Сериализованный Timestamp (TimestampRecord.model_dump()) проверяется против
contracts/schema/universal_time.json (JSON Schema Draft 2020-12).

Схема проходит meta-валидацию при загрузке и кэшируется по (имя, каталог).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

import jsonschema
from jsonschema import Draft202012Validator

# contracts/schema/ в корне проекта
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

UNIVERSAL_TIME_SCHEMA: Final[str] = "universal_time"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


class UniversalTimeValidator:
    """Валидатор сериализованного Timestamp."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._validator = Draft202012Validator(load_schema(UNIVERSAL_TIME_SCHEMA, schema_dir))

    def validate(self, data: dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: dict[str, Any]) -> bool:
        return self._validator.is_valid(data)


def validate_universal_time(data: dict[str, Any]) -> None:
    """
    Валидация сериализованного Timestamp.

    Args:
        data: Данные для валидации (например, TimestampRecord.model_dump())

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    UniversalTimeValidator().validate(data)
