from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import Any

from simrng.families import ParametricFamily, Parametrization, constraint
from simrng.types import (
    GenericCharacteristicName,
    UnivariateContinuous,
)
from tests.utils.mocks import MockSamplingStrategy


class TestBaseFamily:
    PDF: GenericCharacteristicName = "pdf"
    CDF: GenericCharacteristicName = "cdf"
    PPF: GenericCharacteristicName = "ppf"

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, Callable[..., Any]] | None = None,
        name: str = "Default",
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: lambda p, x: x,
                self.CDF: lambda p, x: x,
                self.PPF: lambda p, x: x,
            }
        fam = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,
            sampling_strategy=MockSamplingStrategy(),
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value >= 0")
            def check_value(self) -> bool:
                return self.value >= 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=self.value * 2)  # type: ignore[call-arg]

        return fam
