"""
F64Display — отображение float с заданной точностью

Immutable Pydantic модель (value, precision), создаваемая через to_precision
и превращаемая в текст при выводе. Между созданием и выводом ничего не
вычисляется и не мутирует.

ПОЛИТИКА ВЫВОДА:
    NaN          → "NaN"
    ±0           → "0"            (знак нуля не выводится)
    x < 0        → "-" + вывод |x|  (включая -Inf → "-∞")
    +Inf         → "∞"
    иначе        → строка binary64 для to_sig_figs(|x|, precision)

Строка binary64 — кратчайшее round-trip представление (repr), развёрнутое в
позиционную запись без экспоненты и без хвостового ".0": 1230.0 → "1230",
1e+21 → "1000000000000000000000", 1e-07 → "0.0000001". Цифры сверх
precision возможны, если у округлённого значения нет короткого десятичного
представления.
"""

import logging
import math
import operator
from decimal import Decimal
from typing import Any, Final, Protocol

from pydantic import BaseModel, Field

from f64precision.core.math.numerical_safeguards import DECIMAL_CONTEXT
from f64precision.core.math.sig_figs import to_sig_figs

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Минимальная точность (значащих цифр)
MIN_PRECISION: Final[int] = 1

# Максимальная точность: предел осмысленной десятичной точности binary64
MAX_PRECISION: Final[int] = 21


# =============================================================================
# ФИКСИРОВАННЫЕ ПРЕДСТАВЛЕНИЯ
# =============================================================================

NAN_TEXT: Final[str] = "NaN"
ZERO_TEXT: Final[str] = "0"
INFINITY_TEXT: Final[str] = "∞"
MINUS_TEXT: Final[str] = "-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PrecisionContractViolation(ValueError):
    """
    Точность вне диапазона [MIN_PRECISION, MAX_PRECISION].

    Ошибка программиста: невалидная точность никогда не доходит до
    округления, handle с такой точностью не создаётся.
    """

    pass


# =============================================================================
# SINK
# =============================================================================


class TextSink(Protocol):
    """Любой объект с методом write(str): io.StringIO, файл, sys.stdout."""

    def write(self, text: str, /) -> Any: ...


# =============================================================================
# DISPLAY HANDLE
# =============================================================================


class F64Display(BaseModel):
    """
    Handle для вывода float с заданным числом значащих цифр.

    Создаётся через to_precision. Прямое создание тоже валидирует точность
    (pydantic.ValidationError), но сообщение о нарушении контракта даёт
    только to_precision.
    """

    value: float = Field(..., description="Исходное значение binary64 (любое, включая NaN/Inf)")
    precision: int = Field(
        ...,
        ge=MIN_PRECISION,
        le=MAX_PRECISION,
        strict=True,
        description="Число значащих цифр",
    )

    model_config = {"frozen": True}

    def render(self) -> str:
        """
        Текстовое представление value с precision значащими цифрами.

        Returns:
            Строка согласно политике вывода модуля
        """
        x = self.value

        if math.isnan(x):
            return NAN_TEXT

        if x == 0.0:
            return ZERO_TEXT

        sign = ""
        if x < 0.0:
            sign = MINUS_TEXT
            x = -x

        if math.isinf(x):
            return sign + INFINITY_TEXT

        rounded = to_sig_figs(x, self.precision)

        # Округление за sys.float_info.max
        if math.isinf(rounded):
            return sign + INFINITY_TEXT

        return sign + format_positional(rounded)

    def write_to(self, sink: TextSink) -> int:
        """
        Запись текста в sink.

        Исключения sink'а пробрасываются без изменений.

        Args:
            sink: Объект с методом write(str)

        Returns:
            Количество записанных символов
        """
        text = self.render()
        sink.write(text)
        return len(text)

    def to_request(self) -> dict[str, Any]:
        """Сериализация в dict, соответствующий схеме precision_request."""
        return {"value": self.value, "precision": self.precision}

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        return format(self.render(), format_spec)


# =============================================================================
# ENTRY POINT
# =============================================================================


def to_precision(x: float, p: int) -> F64Display:
    """
    Handle для вывода x с p значащими цифрами.

    Args:
        x: Любое значение, приводимое к float (включая NaN/Inf)
        p: Точность, MIN_PRECISION <= p <= MAX_PRECISION

    Returns:
        F64Display, выводимый через str(), format() или write_to()

    Raises:
        PrecisionContractViolation: если p вне [MIN_PRECISION, MAX_PRECISION]
        TypeError: если p не целое (bool тоже не принимается)

    Examples:
        >>> str(to_precision(1234.0, 3))
        '1230'
        >>> str(to_precision(0.9999, 3))
        '1'
        >>> str(to_precision(float("-inf"), 3))
        '-∞'
    """
    if isinstance(p, bool):
        raise TypeError("precision must be an integer, got bool")

    p = operator.index(p)

    if not MIN_PRECISION <= p <= MAX_PRECISION:
        logger.debug("Rejected precision %d for value %r", p, x)
        raise PrecisionContractViolation(
            f"precision must satisfy {MIN_PRECISION} <= p ({p}) <= {MAX_PRECISION}"
        )

    return F64Display(value=float(x), precision=p)


# =============================================================================
# HOST FORMATTER
# =============================================================================


def format_positional(value: float) -> str:
    """
    Кратчайшее round-trip представление value в позиционной записи.

    Args:
        value: Конечное значение

    Returns:
        Строка без экспоненты и без хвостового ".0"

    Examples:
        >>> format_positional(1230.0)
        '1230'
        >>> format_positional(1e21)
        '1000000000000000000000'
        >>> format_positional(1e-07)
        '0.0000001'
        >>> format_positional(0.7)
        '0.7'
    """
    return format(Decimal(repr(value)).normalize(context=DECIMAL_CONTEXT), "f")
