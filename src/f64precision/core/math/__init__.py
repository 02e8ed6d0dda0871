"""
Core math modules для f64precision

Численные примитивы binary64: десятичная экспонента и округление до
значащих цифр.
"""

# Numerical Safeguards
from f64precision.core.math.numerical_safeguards import (
    DECIMAL_CONTEXT,
    EXACT_POW10_MAX,
    FLOAT_PATH_MAX_DIGITS,
    MAX_FINITE_POW10,
    ROUND_TRIP_DIGITS,
    is_valid_float,
    pow10,
    round_half_away_from_zero,
)

# Decimal Exponent
from f64precision.core.math.decimal_exponent import (
    ExponentDomainViolation,
    ten_power_leq,
)

# Significant Figures
from f64precision.core.math.sig_figs import to_sig_figs

__all__ = [
    # Numerical Safeguards — Constants
    "DECIMAL_CONTEXT",
    "EXACT_POW10_MAX",
    "FLOAT_PATH_MAX_DIGITS",
    "MAX_FINITE_POW10",
    "ROUND_TRIP_DIGITS",
    # Numerical Safeguards — Functions
    "is_valid_float",
    "pow10",
    "round_half_away_from_zero",
    # Decimal Exponent
    "ExponentDomainViolation",
    "ten_power_leq",
    # Significant Figures
    "to_sig_figs",
]
