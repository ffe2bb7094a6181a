"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора universal_time:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (minimum/exclusiveMaximum/const)
- Интеграция с Pydantic моделью TimestampRecord
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SCHEMA_DIR,
    UniversalTimeValidator,
    load_schema,
    validate_universal_time,
)
from src.core.domain import Timestamp, TimestampRecord


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_universal_time():
    """Валидный universal_time для тестирования."""
    return {
        "schema_version": "1",
        "days": 1116,
        "seconds": 61445,
        "nanoseconds": 123456789.5,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_load_schema_universal_time():
    """Проверка загрузки схемы."""
    schema = load_schema("universal_time")

    assert schema["properties"]["schema_version"]["const"] == "1"
    assert schema["properties"]["seconds"]["exclusiveMaximum"] == 86400


def test_load_schema_caches_schemas():
    """Проверка кэширования схем."""
    schema1 = load_schema("universal_time", SCHEMA_DIR)
    schema2 = load_schema("universal_time", SCHEMA_DIR)

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_load_schema_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    with pytest.raises(FileNotFoundError):
        load_schema("non_existent_schema")


def test_load_schema_rejects_invalid_schema(tmp_path):
    """Невалидная JSON Schema отклоняется meta-валидацией."""
    (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        load_schema("broken", tmp_path)


def test_validator_uses_schema_dir(tmp_path):
    """UniversalTimeValidator загружает схему из переданного каталога."""
    (tmp_path / "universal_time.json").write_text(
        '{"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}',
        encoding="utf-8",
    )

    validator = UniversalTimeValidator(tmp_path)

    assert validator.is_valid({"anything": "goes"})
    assert not UniversalTimeValidator().is_valid({"anything": "goes"})


# =============================================================================
# TESTS - UNIVERSAL TIME VALIDATION
# =============================================================================


def test_universal_time_validator_accepts_valid_data(valid_universal_time):
    """Валидация правильного universal_time."""
    validator = UniversalTimeValidator()
    validator.validate(valid_universal_time)  # Не должно выбросить исключение
    assert validator.is_valid(valid_universal_time)


def test_universal_time_validate_function(valid_universal_time):
    """Проверка функции validate_universal_time."""
    validate_universal_time(valid_universal_time)


def test_universal_time_accepts_negative_days(valid_universal_time):
    """Отрицательные days (до эпохи) допустимы."""
    data = valid_universal_time.copy()
    data["days"] = -5000
    validate_universal_time(data)


def test_universal_time_rejects_missing_required_field(valid_universal_time):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_universal_time.copy()
    del data["seconds"]

    with pytest.raises(ValidationError) as exc_info:
        validate_universal_time(data)
    assert "'seconds' is a required property" in str(exc_info.value)


def test_universal_time_rejects_wrong_type(valid_universal_time):
    """Валидация отклоняет неправильный тип данных."""
    data = valid_universal_time.copy()
    data["days"] = "not_an_integer"

    with pytest.raises(ValidationError) as exc_info:
        validate_universal_time(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_universal_time_rejects_fractional_seconds(valid_universal_time):
    """Дробные seconds не являются integer."""
    data = valid_universal_time.copy()
    data["seconds"] = 10.5

    with pytest.raises(ValidationError):
        validate_universal_time(data)


def test_universal_time_rejects_seconds_out_of_day(valid_universal_time):
    """seconds >= 86400 — не каноническая форма."""
    data = valid_universal_time.copy()
    data["seconds"] = 86400

    with pytest.raises(ValidationError):
        validate_universal_time(data)


def test_universal_time_rejects_negative_nanoseconds(valid_universal_time):
    """Отрицательные nanoseconds — не каноническая форма."""
    data = valid_universal_time.copy()
    data["nanoseconds"] = -1.0

    with pytest.raises(ValidationError):
        validate_universal_time(data)


def test_universal_time_rejects_full_second_nanoseconds(valid_universal_time):
    """nanoseconds == 1e9 — не каноническая форма."""
    data = valid_universal_time.copy()
    data["nanoseconds"] = 1.0e9

    with pytest.raises(ValidationError):
        validate_universal_time(data)


def test_universal_time_rejects_wrong_schema_version(valid_universal_time):
    """Неизвестная версия схемы отклоняется."""
    data = valid_universal_time.copy()
    data["schema_version"] = "2"

    with pytest.raises(ValidationError):
        validate_universal_time(data)


def test_universal_time_rejects_additional_properties(valid_universal_time):
    """Лишние поля отклоняются."""
    data = valid_universal_time.copy()
    data["tz"] = "UTC"

    with pytest.raises(ValidationError):
        validate_universal_time(data)


def test_is_valid_rejects_multiple_violations():
    """is_valid возвращает False без exception при нескольких нарушениях."""
    validator = UniversalTimeValidator()

    invalid_data = {
        "schema_version": "1",
        "days": 1.5,  # not integer - НАРУШЕНИЕ
        "seconds": -1,  # minimum: 0 - НАРУШЕНИЕ
        "nanoseconds": 2.0e9,  # exclusiveMaximum: 1e9 - НАРУШЕНИЕ
    }

    assert validator.is_valid(invalid_data) is False
    with pytest.raises(ValidationError):
        validator.validate(invalid_data)


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


def test_timestamp_record_dump_matches_schema():
    """model_dump() TimestampRecord проходит JSON Schema."""
    ts = Timestamp(0, 0, 0.0) - Timestamp(0, 0, 1.0)
    record = TimestampRecord.from_timestamp(ts)
    validate_universal_time(record.model_dump())


def test_timestamp_record_json_mode_matches_schema():
    """model_dump(mode='json') TimestampRecord проходит JSON Schema."""
    record = TimestampRecord.from_timestamp(Timestamp(42, 86399, 999999999.0))
    validate_universal_time(record.model_dump(mode="json"))
