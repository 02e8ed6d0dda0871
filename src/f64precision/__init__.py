"""
f64precision — вывод float с заданным числом значащих цифр.

Форма вывода повторяет JavaScript Number.prototype.toPrecision, но значение
сначала округляется, а затем печатается кратчайшим round-trip
представлением, поэтому результат не побитово идентичен toPrecision.

    >>> from f64precision import to_precision
    >>> str(to_precision(1234.0, 3))
    '1230'
    >>> f"{to_precision(0.1234, 3)}"
    '0.123'
"""

from f64precision.core.domain import (
    F64Display,
    PrecisionContractViolation,
    to_precision,
)

__version__ = "0.1.0"

__all__ = [
    "F64Display",
    "PrecisionContractViolation",
    "to_precision",
]
