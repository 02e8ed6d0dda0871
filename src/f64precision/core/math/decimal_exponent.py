"""
Decimal Exponent — локатор десятичной экспоненты

Для ненулевого конечного x находит целое e такое, что

    10^e <= |x| < 10^(e+1)

где обе степени десяти вычислены в binary64 (см. pow10).

АЛГОРИТМ:
    e0 = floor(log10(|x|))
    Если 10^(e0+1) <= |x|  → e0 + 1   (log10 округлился вниз)
    Если |x| < 10^e0       → e0 - 1   (log10 округлился вверх до целого)
    Иначе                  → e0

log10 неточен вблизи степеней десяти, но ошибается не более чем на единицу
после floor, поэтому одной коррекции в каждую сторону достаточно.
Скобка проверяется assert'ом после коррекции: её нарушение — численный баг.
"""

import math

from f64precision.core.math.numerical_safeguards import is_valid_float, pow10


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExponentDomainViolation(ValueError):
    """
    Нарушение контракта локатора экспоненты: x == 0 или x не конечен.

    Десятичная экспонента определена только для ненулевых конечных чисел.
    Форматтер отфильтровывает 0, NaN и Inf до вызова, поэтому это исключение
    означает ошибку вызывающего кода.
    """

    pass


# =============================================================================
# TEN POWER LEQ
# =============================================================================


def ten_power_leq(x: float) -> int:
    """
    Целое e такое, что 10^e <= |x| < 10^(e+1).

    Args:
        x: Ненулевое конечное значение (знак игнорируется)

    Returns:
        Десятичная экспонента |x|

    Raises:
        ExponentDomainViolation: если x == 0, NaN или Inf

    Examples:
        >>> ten_power_leq(1.0)
        0
        >>> ten_power_leq(-1.0)
        0
        >>> ten_power_leq(0.1)
        -1
        >>> ten_power_leq(0.99999999999)
        -1
        >>> ten_power_leq(1234.0)
        3
    """
    if not is_valid_float(x):
        raise ExponentDomainViolation(
            f"power of 10 only makes sense on finite numbers, got {x}"
        )

    if x == 0.0:
        raise ExponentDomainViolation(
            "power of 10 only makes sense on nonzero numbers"
        )

    magnitude = abs(x)
    exponent = math.floor(math.log10(magnitude))

    # log10 может ошибиться на 1 из-за точности float
    if pow10(exponent + 1) <= magnitude:
        exponent += 1
    elif magnitude < pow10(exponent):
        exponent -= 1

    assert pow10(exponent) <= magnitude < pow10(exponent + 1), (
        f"decimal exponent bracket failed: 10^{exponent} <= {magnitude!r} "
        f"< 10^{exponent + 1} does not hold"
    )

    return exponent
