from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.special import gammainc
from scipy.stats import chi2

from simrng.errors import NonConvergentInversionError, SimrngError
from simrng.stats.critical import (
    TABLE_MAX_DEGREES,
    chi_squared_critical_value,
    critical_value,
    gamma_inverse,
    regularized_lower_gamma,
    table_critical_value,
)


def _truncate(value: float, decimals: int = 2) -> float:
    factor = 10**decimals
    return math.floor(value * factor) / factor


class TestRegularizedLowerGamma:
    @pytest.mark.parametrize(
        "a, x",
        [(0.5, 0.1), (1.0, 1.0), (2.5, 3.0), (5.0, 20.0), (50.0, 45.0), (3.0, 300.0)],
    )
    def test_matches_scipy(self, a, x) -> None:
        assert regularized_lower_gamma(a, x) == pytest.approx(gammainc(a, x), abs=1e-7)

    def test_zero(self) -> None:
        assert regularized_lower_gamma(2.0, 0.0) == 0.0


class TestCriticalValues:
    @pytest.mark.parametrize("df, expected", [(3, 7.81), (5, 11.07), (7, 14.06)])
    def test_textbook_values(self, df, expected) -> None:
        assert _truncate(chi_squared_critical_value(df, 0.05)) == expected
        assert _truncate(table_critical_value(df, 0.05)) == expected

    @pytest.mark.parametrize("df", [1, 2, 4, 10, 30, 60, 100])
    @pytest.mark.parametrize("alpha", [0.01, 0.05, 0.1])
    def test_newton_matches_scipy(self, df, alpha) -> None:
        assert chi_squared_critical_value(df, alpha) == pytest.approx(chi2.isf(alpha, df), rel=1e-6)

    def test_fractional_degrees(self) -> None:
        assert chi_squared_critical_value(2.5) == pytest.approx(chi2.isf(0.05, 2.5), rel=1e-6)

    def test_table_clamps_large_degrees(self) -> None:
        with pytest.warns(UserWarning, match="exceed the table"):
            value = table_critical_value(250, 0.05)
        assert value == pytest.approx(chi2.isf(0.05, TABLE_MAX_DEGREES))

    def test_table_needs_integer_degrees(self) -> None:
        with pytest.raises(ValueError, match="integer"):
            table_critical_value(2.5)

    @pytest.mark.parametrize("method", ["newton", "table"])
    def test_dispatch(self, method) -> None:
        assert critical_value(4, 0.05, method=method) == pytest.approx(chi2.isf(0.05, 4), rel=1e-6)

    def test_unknown_method(self) -> None:
        with pytest.raises(ValueError, match="Unknown"):
            critical_value(4, 0.05, method="bisection")  # type: ignore[arg-type]

    @pytest.mark.parametrize("df, alpha", [(0, 0.05), (-1, 0.05), (3, 0.0), (3, 1.0)])
    def test_invalid_arguments(self, df, alpha) -> None:
        with pytest.raises(ValueError):
            chi_squared_critical_value(df, alpha)


class TestGammaInverse:
    def test_inverts_regularized_gamma(self) -> None:
        x = gamma_inverse(0.3, 2.0)
        assert regularized_lower_gamma(2.0, x) == pytest.approx(0.3, abs=1e-8)

    def test_non_convergence(self) -> None:
        with pytest.raises(NonConvergentInversionError) as excinfo:
            gamma_inverse(0.95, 2.5, max_iterations=1)

        assert isinstance(excinfo.value, SimrngError)
        assert isinstance(excinfo.value, RuntimeError)

    @pytest.mark.parametrize("z", [0.0, 1.0, 1.5])
    def test_probability_out_of_range(self, z) -> None:
        with pytest.raises(ValueError):
            gamma_inverse(z, 1.0)
