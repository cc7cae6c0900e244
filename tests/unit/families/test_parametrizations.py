from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from typing import Any

import pytest

from pysatl_tdist.errors import InvalidParametersError
from pysatl_tdist.families import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)


@parametrization(name="positive")
class Positive(Parametrization):
    value: float

    @constraint(description="value > 0")
    def check_value_positive(self) -> bool:
        return self.value > 0

    @constraint(description="value < 10")
    def check_value_small(self) -> bool:
        return self.value < 10


class TestParametrizationAPI:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"
        assert check_positive.__name__ == "check_positive"

    def test_decorator_builds_frozen_dataclass(self) -> None:
        obj = Positive(value=1.25)  # type: ignore[call-arg]

        assert obj.name == "positive"
        assert obj.parameters == {"value": 1.25}
        assert hasattr(Positive, "__dataclass_fields__")
        with pytest.raises(dataclasses.FrozenInstanceError):
            obj.value = 2.0  # type: ignore[misc]

    def test_constraints_are_collected_in_order(self) -> None:
        descriptions = [c.description for c in Positive(value=1.0).constraints]  # type: ignore[call-arg]

        assert descriptions == ["value > 0", "value < 10"]

    def test_constraints_cannot_be_mutated_through_instance(self) -> None:
        first = Positive(value=1.0)  # type: ignore[call-arg]
        first.constraints.append(ParametrizationConstraint("never", lambda _: False))

        second = Positive(value=2.0)  # type: ignore[call-arg]

        assert len(first.constraints) == 2
        assert len(second.constraints) == 2
        assert second.is_valid()

    @pytest.mark.parametrize(
        "value, violated",
        [(5.0, []), (-1.0, ["value > 0"]), (12.0, ["value < 10"])],
    )
    def test_violated_constraints(self, value, violated) -> None:
        params = Positive(value=value)  # type: ignore[call-arg]

        assert [c.description for c in params.violated_constraints()] == violated
        assert params.is_valid() is (not violated)

    def test_validate_raises_invalid_parameters(self) -> None:
        with pytest.raises(InvalidParametersError, match="value > 0"):
            Positive(value=-1.0).validate()  # type: ignore[call-arg]

        Positive(value=1.0).validate()  # type: ignore[call-arg]

    @pytest.mark.parametrize("wrapper", [staticmethod, classmethod])
    def test_constraint_must_be_instance_method(self, wrapper) -> None:
        with pytest.raises(TypeError, match="instance method"):

            @parametrization(name="broken")
            class Broken(Parametrization):
                value: float

                check = wrapper(constraint("always")(lambda *_: True))
