from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, overload, runtime_checkable

from pysatl_tdist.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """Support of a univariate continuous distribution; the real line by default."""


__all__ = [
    "Support",
    "ContinuousSupport",
]
