"""
Precision Request — сериализованный запрос вывода

Запрос {"value": number, "precision": integer 1..21} описан схемой
schema/precision_request.json (JSON Schema Draft 2020-12) и является
сериализованной формой F64Display: F64Display.to_request() даёт валидный
запрос, display_from_request() восстанавливает handle.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator, SchemaError

from f64precision.core.domain.display import F64Display, to_precision

# Схема запроса, устанавливается вместе с пакетом
REQUEST_SCHEMA_PATH: Final[Path] = (
    Path(__file__).parent / "schema" / "precision_request.json"
)


# =============================================================================
# SCHEMA
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(path: Path = REQUEST_SCHEMA_PATH) -> dict[str, Any]:
    """
    Загрузка и meta-validation схемы запроса.

    Результат кэшируется по пути, поэтому его нельзя мутировать.

    Raises:
        FileNotFoundError: если файла схемы нет
        ValueError: если файл не является валидной JSON Schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e

    return schema


@lru_cache(maxsize=None)
def _request_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema())


# =============================================================================
# ЗАПРОСЫ
# =============================================================================


def request_errors(data: Any) -> list[str]:
    """
    Все нарушения схемы в запросе, по одному сообщению на нарушение.

    Сообщения упорядочены по пути поля ("precision: ...", "value: ...");
    нарушения уровня объекта (лишние или отсутствующие поля) идут первыми
    с префиксом "request".

    Examples:
        >>> request_errors({"value": 1.0, "precision": 3})
        []
        >>> request_errors({"value": 1.0, "precision": 0})
        ['precision: 0 is less than the minimum of 1']
    """
    errors = sorted(_request_validator().iter_errors(data), key=lambda e: list(e.path))
    return [f"{'.'.join(map(str, e.path)) or 'request'}: {e.message}" for e in errors]


def validate_precision_request(data: Any) -> None:
    """
    Проверка запроса против схемы.

    Raises:
        jsonschema.ValidationError: первое найденное нарушение
    """
    _request_validator().validate(data)


def display_from_request(data: Any) -> F64Display:
    """
    F64Display из сериализованного запроса.

    JSON Schema считает 3.0 целым, поэтому precision приводится к int
    после валидации.

    Raises:
        jsonschema.ValidationError: если запрос не соответствует схеме
    """
    validate_precision_request(data)
    return to_precision(data["value"], int(data["precision"]))
