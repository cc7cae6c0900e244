"""
Distribution Interfaces
=======================

This module defines the public :class:`ContinuousDistribution` protocol: the
surface shared by univariate continuous distributions of this package.

Notes
-----
- Characteristics accept scalars or NumPy arrays and answer in kind.
- Moment accessors raise :class:`~pysatl_tdist.errors.UndefinedMomentError`
  when the moment does not exist for the current parameters.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_tdist.distributions.sampling import ArraySample
    from pysatl_tdist.distributions.support import Support
    from pysatl_tdist.rng import RandomSource
    from pysatl_tdist.types import EuclideanDistributionType, Number, NumericArray


@runtime_checkable
class ContinuousDistribution(Protocol):
    """Public interface of a univariate continuous distribution."""

    @property
    def distribution_type(self) -> EuclideanDistributionType: ...

    @property
    def support(self) -> Support: ...

    @property
    def random_source(self) -> RandomSource: ...

    @property
    def mean(self) -> float: ...

    @property
    def variance(self) -> float: ...

    @property
    def std_dev(self) -> float: ...

    @property
    def minimum(self) -> float: ...

    @property
    def maximum(self) -> float: ...

    def density(self, x: Number | NumericArray) -> float | NumericArray: ...

    def density_ln(self, x: Number | NumericArray) -> float | NumericArray: ...

    def cumulative_distribution(self, x: Number | NumericArray) -> float | NumericArray: ...

    def sample(self) -> float: ...

    def samples(self) -> Iterator[float]: ...

    def sample_array(self, n: int) -> ArraySample: ...


__all__ = [
    "ContinuousDistribution",
]
