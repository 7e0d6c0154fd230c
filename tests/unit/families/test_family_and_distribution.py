from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from simrng.families import ParametricFamilyDistribution, ParametricFamilyRegister
from tests.unit.families.test_basic import TestBaseFamily


class TestFamilyRegistrationAndSampling(TestBaseFamily):
    def test_family_registration_and_distribution_sampling(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={
                self.PDF: lambda p, x: 1.0 if 0.0 <= x <= 1.0 else 0.0,
                self.CDF: lambda p, x: x if 0.0 <= x <= 1.0 else (0.0 if x < 0.0 else 1.0),
                self.PPF: lambda p, q: q,
            },
        )

        ParametricFamilyRegister.register(fam)

        distr = fam.distribution("base", value=0.0)
        assert isinstance(distr, ParametricFamilyDistribution)
        assert distr.family is fam

        n = 128
        sample = distr.sample(n)
        assert len(sample) == n
        arr = sample.array
        assert (arr >= 0.0).all() and (arr <= 1.0).all()

        computations = distr.analytical_computations
        assert set(computations) == {self.PDF, self.CDF, self.PPF}
        assert computations[self.CDF](0.25) == pytest.approx(0.25)
        assert computations[self.PPF](0.75) == pytest.approx(0.75)

    def test_characteristics_receive_base_parameters(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={self.PDF: lambda p, x: p.value + x},
        )
        ParametricFamilyRegister.register(fam)

        distr = fam("alt", value=1.5)
        assert distr.parametrization_name == "alt"
        assert distr.calculate_characteristic(self.PDF, 1.0) == pytest.approx(4.0)

    def test_analytical_computations_are_cached(self) -> None:
        fam = self.make_default_family()
        ParametricFamilyRegister.register(fam)

        distr = fam.distribution(value=1.0)
        assert distr.analytical_computations is distr.analytical_computations

    def test_describe(self) -> None:
        fam = self.make_default_family()
        ParametricFamilyRegister.register(fam)

        assert fam.distribution("alt", value=2.0).describe() == {
            "family": "Default",
            "parametrization": "alt",
            "parameters": {"value": 2.0},
        }


class TestRegister:
    def test_duplicate_family(self) -> None:
        fam = TestBaseFamily().make_default_family()
        ParametricFamilyRegister.register(fam)
        with pytest.raises(ValueError, match="already found"):
            ParametricFamilyRegister.register(fam)

    def test_unknown_family_lists_known(self) -> None:
        ParametricFamilyRegister.register(TestBaseFamily().make_default_family(name="Known"))
        with pytest.raises(ValueError, match="known: Known"):
            ParametricFamilyRegister.get("Missing")
