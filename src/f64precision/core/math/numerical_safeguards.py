"""
Numerical Safeguards — безопасные примитивы binary64

Модуль содержит примитивы, на которых построены локатор десятичной экспоненты
и округление до значащих цифр:
- Проверка конечности float (NaN/Inf)
- Степени десяти в binary64 с IEEE-семантикой переполнения
- Округление "half away from zero", точное для любого binary64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. pow10 никогда не бросает OverflowError (переполнение → inf, как в IEEE-754)
2. round_half_away_from_zero не зависит от banker's rounding встроенного round()
3. Все операции детерминированы и воспроизводимы: decimal-арифметика идёт
   в собственном контексте DECIMAL_CONTEXT, а не в контексте вызывающего кода
"""

import math
import sys
from decimal import ROUND_HALF_EVEN, Context
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ BINARY64
# =============================================================================

# Максимальный показатель n, при котором 10^n конечно в binary64 (1e308)
MAX_FINITE_POW10: Final[int] = sys.float_info.max_10_exp

# Количество десятичных цифр, гарантированно точно представимых в binary64.
# Масштабированное значение с таким числом цифр — целое число < 2^53.
FLOAT_PATH_MAX_DIGITS: Final[int] = sys.float_info.dig

# Максимальный показатель n, при котором 10^n представимо в binary64 точно
EXACT_POW10_MAX: Final[int] = 22

# Число значащих цифр, которых достаточно для round-trip любого binary64
ROUND_TRIP_DIGITS: Final[int] = 17

# Контекст decimal для округления и вывода. decimal.getcontext() принадлежит
# вызывающему коду и может иметь любую точность и режим округления.
# prec с запасом покрывает ROUND_TRIP_DIGITS, диапазон экспонент покрывает
# субнормальные значения и sys.float_info.max.
DECIMAL_CONTEXT: Final[Context] = Context(
    prec=40,
    rounding=ROUND_HALF_EVEN,
    Emin=-999999,
    Emax=999999,
)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# СТЕПЕНИ ДЕСЯТИ
# =============================================================================


def pow10(n: int) -> float:
    """
    10^n, вычисленное в binary64.

    Python бросает OverflowError для 10.0 ** 309, тогда как IEEE-754 даёт inf.
    Сравнения в локаторе экспоненты рассчитаны на IEEE-поведение, поэтому
    переполнение здесь превращается в inf. Отрицательные n уходят в
    субнормальные значения и 0.0 без ошибок.

    Args:
        n: Целый показатель

    Returns:
        Ближайший к 10^n binary64, inf при переполнении

    Examples:
        >>> pow10(3)
        1000.0
        >>> pow10(-2)
        0.01
        >>> pow10(309)
        inf
        >>> pow10(-400)
        0.0
    """
    if n > MAX_FINITE_POW10:
        return math.inf
    return 10.0**n


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> float:
    """
    Округление до целого, половины — от нуля.

    Встроенный round() использует banker's rounding (round(2.5) == 2), а
    классическая формула floor(x + 0.5) ошибается на 0.49999999999999994,
    потому что сложение само округляет. Здесь дробная часть abs(value) -
    floor(abs(value)) вычисляется точно (теорема Штербенца), так что решение
    принимается по точному значению.

    Args:
        value: Исходное значение

    Returns:
        Округлённое значение как float. NaN/Inf возвращаются без изменений,
        знак нуля сохраняется.

    Examples:
        >>> round_half_away_from_zero(2.5)
        3.0
        >>> round_half_away_from_zero(-2.5)
        -3.0
        >>> round_half_away_from_zero(0.49999999999999994)
        0.0
    """
    if not is_valid_float(value):
        return value

    magnitude = abs(value)
    whole = math.floor(magnitude)

    if magnitude - whole >= 0.5:
        whole += 1

    return math.copysign(float(whole), value)
