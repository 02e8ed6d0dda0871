"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку конечности float
2. pow10: точные степени, IEEE-переполнение и underflow
3. Округление half away from zero
"""

import math

import pytest

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

# =============================================================================
# ТЕСТЫ ПАРАМЕТРОВ
# =============================================================================


class TestConstants:
    """Тесты параметров binary64"""

    def test_binary64_limits(self) -> None:
        """Параметры соответствуют IEEE-754 binary64"""
        assert MAX_FINITE_POW10 == 308
        assert FLOAT_PATH_MAX_DIGITS == 15
        assert EXACT_POW10_MAX == 22
        assert ROUND_TRIP_DIGITS == 17

    def test_float_path_digits_below_2_pow_53(self) -> None:
        """Целые с FLOAT_PATH_MAX_DIGITS цифрами представимы точно"""
        assert 10**FLOAT_PATH_MAX_DIGITS < 2**53

    def test_decimal_context_covers_binary64(self) -> None:
        """Контекст decimal вмещает round-trip цифры и весь диапазон экспонент"""
        assert DECIMAL_CONTEXT.prec > ROUND_TRIP_DIGITS
        assert DECIMAL_CONTEXT.Emin < -340
        assert DECIMAL_CONTEXT.Emax > MAX_FINITE_POW10


# =============================================================================
# ТЕСТЫ ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-0.0)
        assert is_valid_float(1.5)
        assert is_valid_float(5e-324)
        assert is_valid_float(1.7976931348623157e308)

    def test_non_finite_values(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ POW10
# =============================================================================


class TestPow10:
    """Тесты для pow10"""

    def test_exact_powers(self) -> None:
        """Степени до 10^22 представимы точно"""
        for n in range(EXACT_POW10_MAX + 1):
            assert pow10(n) == float(10**n)

    def test_negative_powers(self) -> None:
        """Отрицательные степени близки к 10^-n"""
        assert pow10(-1) == pytest.approx(0.1, rel=1e-15)
        assert pow10(-5) == pytest.approx(1e-5, rel=1e-15)

    def test_overflow_is_inf(self) -> None:
        """Переполнение даёт inf, а не OverflowError"""
        assert pow10(MAX_FINITE_POW10 + 1) == math.inf
        assert pow10(1000) == math.inf

    def test_largest_finite_power(self) -> None:
        """10^308 конечно"""
        assert math.isfinite(pow10(MAX_FINITE_POW10))

    def test_underflow(self) -> None:
        """Глубокий underflow даёт 0.0, субнормальные степени > 0"""
        assert pow10(-400) == 0.0
        assert pow10(-323) > 0.0

    def test_monotonic(self) -> None:
        """pow10 строго возрастает на конечном диапазоне"""
        values = [pow10(n) for n in range(-323, MAX_FINITE_POW10 + 1)]
        assert all(a < b for a, b in zip(values, values[1:]))


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfAwayFromZero:
    """Тесты для round_half_away_from_zero"""

    def test_halves_away_from_zero(self) -> None:
        """Половины округляются от нуля (не banker's rounding)"""
        assert round_half_away_from_zero(0.5) == 1.0
        assert round_half_away_from_zero(1.5) == 2.0
        assert round_half_away_from_zero(2.5) == 3.0
        assert round_half_away_from_zero(-0.5) == -1.0
        assert round_half_away_from_zero(-2.5) == -3.0

    def test_non_halves(self) -> None:
        """Не-половины округляются к ближайшему"""
        assert round_half_away_from_zero(2.4999) == 2.0
        assert round_half_away_from_zero(2.5001) == 3.0
        assert round_half_away_from_zero(-123.4) == -123.0
        assert round_half_away_from_zero(999.9) == 1000.0

    def test_largest_double_below_half(self) -> None:
        """0.49999999999999994 → 0 (floor(x + 0.5) здесь ошибается)"""
        just_below_half = math.nextafter(0.5, 0.0)
        assert round_half_away_from_zero(just_below_half) == 0.0
        assert round_half_away_from_zero(-just_below_half) == 0.0

    def test_large_integers_unchanged(self) -> None:
        """Значения >= 2^52 уже целые"""
        value = 2.0**52 + 1.0
        assert round_half_away_from_zero(value) == value
        assert round_half_away_from_zero(1e300) == 1e300

    def test_sign_of_zero_preserved(self) -> None:
        """Отрицательное значение, округлённое до нуля, даёт -0.0"""
        result = round_half_away_from_zero(-0.3)
        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0

    def test_returns_float(self) -> None:
        """Результат — float, а не int"""
        assert isinstance(round_half_away_from_zero(2.5), float)

    def test_non_finite_passthrough(self) -> None:
        """NaN/Inf возвращаются без изменений"""
        assert math.isnan(round_half_away_from_zero(float("nan")))
        assert round_half_away_from_zero(math.inf) == math.inf
        assert round_half_away_from_zero(-math.inf) == -math.inf
