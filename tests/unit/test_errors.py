from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from simrng.errors import (
    DegenerateRangeError,
    EmptySampleError,
    InvalidIntervalCountError,
    NonConvergentInversionError,
    SimrngError,
)


@pytest.mark.parametrize(
    "error, builtin",
    [
        (EmptySampleError(), ValueError),
        (InvalidIntervalCountError(0), ValueError),
        (DegenerateRangeError(1.0, 1.0), ValueError),
        (NonConvergentInversionError(0.95, 2.0, 100, 3.1), RuntimeError),
    ],
)
def test_errors_derive_from_base_and_builtin(error, builtin) -> None:
    assert isinstance(error, SimrngError)
    assert isinstance(error, builtin)


def test_interval_count_messages() -> None:
    assert "must be >= 1" in str(InvalidIntervalCountError(0))
    error = InvalidIntervalCountError(20, 10)
    assert "sample size (10)" in str(error)
    assert error.intervals == 20
    assert error.sample_size == 10


def test_non_convergence_keeps_context() -> None:
    error = NonConvergentInversionError(0.95, 2.0, 100, 3.1)
    assert (error.z, error.a, error.iterations, error.last) == (0.95, 2.0, 100, 3.1)
    assert "did not converge" in str(error)
