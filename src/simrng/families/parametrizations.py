"""
Parametrization classes and constraints for distribution families.

A parametrization is a frozen dataclass holding parameter values; methods
decorated with :func:`constraint` are collected when the class is registered
with :func:`parametrization` and checked by :meth:`Parametrization.validate`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING

from simrng.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from simrng.families.parametric_family import ParametricFamily

_CONSTRAINT_MARK = "__constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Predicate returning True if the constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """Base class for distribution parametrizations."""

    # Set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    def validate(self) -> None:
        """
        Check every registered constraint.

        Raises
        ------
        ValueError
            If any constraint does not hold.
        """
        for constraint_ in self._constraints:
            if not constraint_.check(self):
                raise ValueError(f'Constraint "{constraint_.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert to the family's base parametrization.

        The base parametrization returns itself.
        """
        return self


def constraint(description: str) -> Callable[[Callable[[Any], bool]], Callable[[Any], bool]]:
    """Mark an instance method as a parameter constraint."""

    def decorator(func: Callable[[Any], bool]) -> Callable[[Any], bool]:
        setattr(func, _CONSTRAINT_MARK, description)
        return func

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class is turned into a frozen dataclass if it is not one already and
    its ``@constraint`` methods are collected.
    """

    def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
        collected: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, (staticmethod, classmethod)):
                if hasattr(attr.__func__, _CONSTRAINT_MARK):
                    raise TypeError(f"@constraint '{attr_name}' must be an instance method")
                continue
            if isfunction(attr) and hasattr(attr, _CONSTRAINT_MARK):
                collected.append(
                    ParametrizationConstraint(description=getattr(attr, _CONSTRAINT_MARK), check=attr)
                )
        return collected

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
