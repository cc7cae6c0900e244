"""
Core Type Definitions
=====================

Numeric aliases, the interval primitive and name enumerations shared by the
Student-t distribution and its helpers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    CONTINUOUS : str
        Continuous probability distribution.
    """

    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind.
    dimension : int
        Spatial dimension (1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ParametrizationName = str
"""Type alias for parametrization names."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint.
    right : float, default=inf
        Right endpoint.
    left_closed : bool, default=True
        Whether the left endpoint belongs to the interval. Forced to False
        when ``left`` is ``-inf``.
    right_closed : bool, default=True
        Whether the right endpoint belongs to the interval. Forced to False
        when ``right`` is ``inf``.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        # infinities are limits, never members
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check whether point(s) lie in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            Scalar answer for scalar input, element-wise mask otherwise.
        """
        arr = np.asarray(x, dtype=float)

        above = (arr >= self.left) if self.left_closed else (arr > self.left)
        below = (arr <= self.right) if self.right_closed else (arr < self.right)
        result = above & below

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


class FamilyName(StrEnum):
    STUDENT_T = "StudentT"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "ParametrizationName",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FamilyName",
]
