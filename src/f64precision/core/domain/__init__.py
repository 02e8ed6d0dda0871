"""
Domain models and value objects.

Contains the display handle produced by to_precision.
"""

from f64precision.core.domain.display import (
    INFINITY_TEXT,
    MAX_PRECISION,
    MIN_PRECISION,
    MINUS_TEXT,
    NAN_TEXT,
    ZERO_TEXT,
    F64Display,
    PrecisionContractViolation,
    TextSink,
    format_positional,
    to_precision,
)

__all__ = [
    # Constants
    "MIN_PRECISION",
    "MAX_PRECISION",
    "NAN_TEXT",
    "ZERO_TEXT",
    "INFINITY_TEXT",
    "MINUS_TEXT",
    # Exceptions
    "PrecisionContractViolation",
    # Types
    "F64Display",
    "TextSink",
    # Functions
    "format_positional",
    "to_precision",
]
