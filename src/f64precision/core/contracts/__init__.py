"""
Contracts Module

Сериализованная форма F64Display и её JSON Schema.
"""

from .request import (
    REQUEST_SCHEMA_PATH,
    display_from_request,
    load_schema,
    request_errors,
    validate_precision_request,
)

__all__ = [
    # Constants
    "REQUEST_SCHEMA_PATH",
    # Functions
    "load_schema",
    "request_errors",
    "validate_precision_request",
    "display_from_request",
]
