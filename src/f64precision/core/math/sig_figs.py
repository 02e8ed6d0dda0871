"""
Significant Figures — округление до значащих цифр

Округляет x до sf значащих десятичных цифр (половины — от нуля) и возвращает
ближайший binary64, компенсируя ошибку двоичного представления.

АЛГОРИТМ:
    e = ten_power_leq(x)
    p = e - sf + 1                  (разряд младшей сохраняемой цифры)

    p >= 0:  tens = 10^p;   round(x / tens) * tens
    p <  0:  tens = 10^-p;  round(x * tens) / tens

Для p < 0 значение 10^p непредставимо точно, поэтому масштаб берётся как
10^-p: x * tens попадает в область целых, round даёт точное целое, а
финальное деление — единственное округление.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Идемпотентность: to_sig_figs(to_sig_figs(x, sf), sf) == to_sig_figs(x, sf)
2. Симметрия знака: to_sig_figs(-x, sf) == -to_sig_figs(x, sf)
3. Перенос через степень десяти (0.9999 → 1.0 при sf=3) допустим: экспонента
   заново не ищется, результат просто попадает в следующую декаду
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from f64precision.core.math.decimal_exponent import ten_power_leq
from f64precision.core.math.numerical_safeguards import (
    DECIMAL_CONTEXT,
    EXACT_POW10_MAX,
    FLOAT_PATH_MAX_DIGITS,
    MAX_FINITE_POW10,
    ROUND_TRIP_DIGITS,
    pow10,
    round_half_away_from_zero,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TO SIG FIGS
# =============================================================================


def to_sig_figs(x: float, sf: int) -> float:
    """
    Округление x до sf значащих цифр.

    Пока sf <= FLOAT_PATH_MAX_DIGITS, работа идёт в binary64: масштабированное
    значение — целое < 2^53 и представимо точно. Для большего sf, а также
    когда масштаб 10^-p выходит за диапазон binary64 (субнормальные x),
    округляется кратчайшее десятичное представление x (repr). Обратное
    масштабирование всегда даёт одно корректное округление.

    Args:
        x: Ненулевое конечное значение
        sf: Число значащих цифр (>= 1)

    Returns:
        Ближайший binary64 к x, округлённому до sf значащих цифр.
        Переполнение за sys.float_info.max даёт ±inf.

    Raises:
        ValueError: если sf < 1
        ExponentDomainViolation: если x == 0, NaN или Inf

    Examples:
        >>> to_sig_figs(1234.0, 3)
        1230.0
        >>> to_sig_figs(9999.0, 3)
        10000.0
        >>> to_sig_figs(0.1234, 3)
        0.123
        >>> to_sig_figs(0.125, 2)
        0.13
    """
    if sf < 1:
        raise ValueError(f"significant figures must be >= 1, got {sf}")

    exponent = ten_power_leq(x)
    place = exponent - sf + 1

    if sf >= ROUND_TRIP_DIGITS:
        return x

    if sf > FLOAT_PATH_MAX_DIGITS:
        return _round_shortest_repr(x, sf)

    if -place > MAX_FINITE_POW10:
        logger.debug(
            "Scale 10^%d is out of binary64 range for %r, rounding in decimal",
            -place,
            x,
        )
        return _round_shortest_repr(x, sf)

    digits = _scale_to_place(x, place)

    # Перенос в следующую декаду: 999.9 → 1000 при sf=3.
    # Результат строится в масштабе новой декады, как для уже округлённого значения.
    if abs(digits) == pow10(sf):
        digits /= 10.0
        place += 1

    return _unscale_from_place(digits, place)


# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ
# =============================================================================


def _scale_to_place(x: float, place: int) -> float:
    """Целое число единиц разряда 10^place в x (округлённое от нуля)."""
    if place >= 0:
        return round_half_away_from_zero(x / pow10(place))
    return round_half_away_from_zero(x * pow10(-place))


def _unscale_from_place(digits: float, place: int) -> float:
    """
    digits * 10^place с одним корректным округлением.

    При |place| > EXACT_POW10_MAX степень 10^place в binary64 неточна и
    умножение/деление дало бы второе округление, поэтому произведение
    строится в decimal.
    """
    if abs(place) > EXACT_POW10_MAX:
        return float(Decimal(int(digits)).scaleb(place, context=DECIMAL_CONTEXT))
    if place >= 0:
        return digits * pow10(place)
    return digits / pow10(-place)


def _round_shortest_repr(x: float, sf: int) -> float:
    """
    Округление кратчайшего round-trip представления x в decimal.

    Вызывается для sf < ROUND_TRIP_DIGITS, так что квантование укладывается
    в точность DECIMAL_CONTEXT. Обратное преобразование
    float(Decimal) округляется корректно (одно округление).
    """
    shortest = Decimal(repr(x))
    exponent = shortest.adjusted() - sf + 1
    quantum = Decimal(1).scaleb(exponent, context=DECIMAL_CONTEXT)
    rounded = shortest.quantize(
        quantum, rounding=ROUND_HALF_UP, context=DECIMAL_CONTEXT
    )
    return float(rounded)
