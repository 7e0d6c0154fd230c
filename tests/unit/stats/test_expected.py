from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from simrng.families.configuration import make_distribution
from simrng.stats.expected import expected_frequencies, expected_probabilities
from simrng.stats.partition import Partition
from simrng.types import FamilyName
from tests.utils.mocks import fixed_mass_distribution


class TestExpectedFrequencies:
    def test_scaled_by_sample_size(self) -> None:
        distribution = make_distribution(FamilyName.UNIFORM, {"lower": 0.0, "upper": 5.0})
        expected = expected_frequencies(distribution, Partition(0.0, 5.0, 5), 200)

        np.testing.assert_allclose(expected, np.full(5, 40.0))

    @pytest.mark.parametrize(
        "family, parameters",
        [
            (FamilyName.UNIFORM, {"lower": -1.0, "upper": 3.0}),
            (FamilyName.NORMAL, {"mean": 1.0, "sd": 0.5}),
            (FamilyName.EXPONENTIAL, {"lambda_": 1.5}),
            (FamilyName.POISSON, {"lambda_": 2.5}),
        ],
    )
    def test_vector_matches_distribution_partition(self, family, parameters) -> None:
        distribution = make_distribution(family, parameters)
        partition = distribution.partition_for(Partition(-1.0, 7.0, 5))
        probabilities = expected_probabilities(distribution, partition)

        assert probabilities.shape == (partition.intervals,)
        assert (probabilities >= 0).all()

    def test_wrong_length_is_rejected(self) -> None:
        distribution = fixed_mass_distribution([0.5, 0.5])
        with pytest.raises(ValueError, match="for 3 bins"):
            expected_probabilities(distribution, Partition(0.0, 3.0, 3))

    def test_negative_mass_is_rejected(self) -> None:
        distribution = fixed_mass_distribution([1.5, -0.5])
        with pytest.raises(ValueError, match="non-negative"):
            expected_probabilities(distribution, Partition(0.0, 2.0, 2))
