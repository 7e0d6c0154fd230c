from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from typing import Any

import pytest

from simrng.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from simrng.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily
from tests.utils.mocks import MockSamplingStrategy


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:  # noqa: ANN001 (test signature)
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["kind"],
            distr_characteristics={},
            sampling_strategy=MockSamplingStrategy(),
        )

        @parametrization(family=family, name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Kind, "__family__", None) is family
        assert getattr(Kind, "__param_name__", None) == "kind"
        assert hasattr(Kind, "__dataclass_fields__")
        with pytest.raises(dataclasses.FrozenInstanceError):
            obj.value = 2.0  # type: ignore[misc]

    def test_undeclared_parametrization_name(self) -> None:
        family = self.make_default_family()
        with pytest.raises(ValueError, match="does not declare"):

            @family.parametrization(name="other")
            class Other(Parametrization):
                value: float

    def test_duplicate_parametrization_name(self) -> None:
        family = self.make_default_family()
        with pytest.raises(ValueError, match="already registered"):

            @family.parametrization(name="base")
            class Again(Parametrization):
                value: float

    def test_static_constraint_is_rejected(self) -> None:
        family = ParametricFamily(
            name="StaticConstraint",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(TypeError, match="instance method"):

            @family.parametrization(name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint(description="never")
                def check() -> bool:
                    return False

    # ---------- Validation and conversion ----------

    def test_constraint_violation_message(self) -> None:
        family = self.make_default_family()
        with pytest.raises(ValueError, match='Constraint "value >= 0" does not hold'):
            family.distribution(value=-1.0)

    def test_base_is_validated_after_conversion(self) -> None:
        family = self.make_default_family()
        with pytest.raises(ValueError, match="value >= 0"):
            family.distribution("alt", value=-0.5)

    def test_get_base_parameters_uses_family_logic(self) -> None:
        family = self.make_default_family()

        BaseCls = family.parametrizations["base"]
        AltCls = family.parametrizations["alt"]

        base_params = BaseCls(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        alt_params = AltCls(value=3.0)  # type: ignore[call-arg]
        base_from_alt = family.to_base(alt_params)
        assert isinstance(base_from_alt, BaseCls)
        assert base_from_alt.value == 6.0  # type: ignore[attr-defined]
