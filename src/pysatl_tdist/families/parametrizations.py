"""
Parameterization classes and constraint declarations.

This module provides the abstractions used to describe the parameter set of a
distribution: a frozen dataclass per parametrization, with its validity
rules declared as ``@constraint`` predicates.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_tdist.errors import InvalidParametersError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_tdist.types import ParametrizationName


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
    """
    Abstract base class for distribution parametrizations.

    Concrete parametrizations are declared with :func:`parametrization`,
    which turns them into frozen dataclasses and collects their constraints.
    """

    # Set by the @parametrization decorator
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", {})
        return {f: getattr(self, f) for f in fields}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get a copy of the constraints for this parametrization."""
        return list(self._constraints)

    def violated_constraints(self) -> list[ParametrizationConstraint]:
        """Return the constraints that do not hold, in declaration order."""
        return [c for c in self._constraints if not c.check(self)]

    def is_valid(self) -> bool:
        """Whether every constraint holds."""
        return all(c.check(self) for c in self._constraints)

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        InvalidParametersError
            If any constraint is not satisfied.
        """
        for c in self._constraints:
            if not c.check(self):
                raise InvalidParametersError(
                    f'Constraint "{c.description}" does not hold for {self.parameters}'
                )


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool. The marker
    attributes ``__is_constraint`` and ``__constraint_description`` are set
    on the wrapper.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    constraints: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                kind = "@staticmethod" if isinstance(attr, staticmethod) else "@classmethod"
                raise TypeError(f"@constraint '{attr_name}' must be an instance method, not {kind}")
            continue

        if not isfunction(attr) or not getattr(attr, "__is_constraint", False):
            continue
        desc = getattr(attr, "__constraint_description", attr.__name__)
        constraints.append(ParametrizationConstraint(description=desc, check=attr))
    return constraints


def parametrization(
    *, name: ParametrizationName
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator declaring a class as a named parametrization.

    Parameters
    ----------
    name : str
        Name of the parametrization.

    Notes
    -----
    Converts the class to a frozen slotted dataclass if it is not one already,
    and stores the ``@constraint`` methods found on it.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        constraints = _collect_constraints(cls)
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__param_name__ = name
        cls._constraints = constraints
        return cls

    return decorator
