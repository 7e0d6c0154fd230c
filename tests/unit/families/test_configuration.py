"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import pytest

from simrng.families.configuration import (
    configure_families_register,
    make_distribution,
    reset_families_register,
)
from simrng.families.registry import ParametricFamilyRegister
from simrng.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        registry2 = configure_families_register()
        assert self.registry is registry2

    def test_families_registered(self):
        """Exactly the four built-in families are registered."""
        assert set(ParametricFamilyRegister.names()) == set(FamilyName)

    def test_reset_families_register(self):
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        assert registry1 is not registry2

    def test_registry_get_family_method(self):
        normal_family = self.registry.get(FamilyName.NORMAL)
        assert normal_family.name == FamilyName.NORMAL

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")

    def test_make_distribution(self):
        dist = make_distribution(FamilyName.EXPONENTIAL, {"beta": 4.0}, "scale")
        assert dist.family_name == FamilyName.EXPONENTIAL
        assert dist.family.to_base(dist.parameters).parameters == {"lambda_": 0.25}

    def test_make_distribution_unknown_family(self):
        with pytest.raises(ValueError, match="No family Cauchy"):
            make_distribution("Cauchy", {})

    def test_make_distribution_unknown_parametrization(self):
        with pytest.raises(ValueError, match="no parametrization 'shape'"):
            make_distribution(FamilyName.EXPONENTIAL, {"beta": 4.0}, "shape")

    @pytest.mark.parametrize(
        "parameters",
        [{"lambda_": 1.0, "beta": 2.0}, {}],
        ids=["unexpected", "missing"],
    )
    def test_make_distribution_bad_parameter_names(self, parameters):
        with pytest.raises(ValueError, match="Invalid parameters for Exponential"):
            make_distribution(FamilyName.EXPONENTIAL, parameters)


def test_concurrent_first_configuration():
    reset_families_register()
    threads_count = 8
    barrier = threading.Barrier(threads_count)
    failures: list[BaseException] = []

    def configure() -> None:
        barrier.wait()
        try:
            configure_families_register()
        except BaseException as exc:  # noqa: BLE001
            failures.append(exc)

    threads = [threading.Thread(target=configure) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert failures == []
    assert set(ParametricFamilyRegister.names()) == set(FamilyName)
