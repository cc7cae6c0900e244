"""
Random Sources
==============

Uniform and standard-normal random number sources used by samplers, plus the
derived Gamma and chi-squared variates the Student-t sampler needs.

- :class:`RandomSource`: protocol every injected generator must satisfy.
- :class:`NumpyRandomSource`: default implementation backed by
  :func:`numpy.random.default_rng`.
- :func:`standard_gamma` / :func:`chi_squared`: variates built only from the
  two primitive draws of a :class:`RandomSource`.

Notes
-----
- Sources are stateful and not thread-safe; callers sharing one source across
  threads must serialize access themselves.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Minimal random number generator interface."""

    def uniform(self) -> float:
        """Draw from the uniform distribution on ``[0, 1)``."""
        ...

    def standard_normal(self) -> float:
        """Draw from the standard normal distribution."""
        ...


class NumpyRandomSource:
    """
    Random source backed by a NumPy :class:`~numpy.random.Generator`.

    Parameters
    ----------
    seed : int, numpy.random.SeedSequence or None, optional
        Seed forwarded to :func:`numpy.random.default_rng`. ``None`` draws
        fresh entropy from the operating system.
    """

    __slots__ = ("_generator",)

    def __init__(self, seed: int | np.random.SeedSequence | None = None) -> None:
        self._generator = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Underlying NumPy generator."""
        return self._generator

    def uniform(self) -> float:
        return float(self._generator.random())

    def standard_normal(self) -> float:
        return float(self._generator.standard_normal())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._generator.bit_generator.__class__.__name__})"


def ensure_random_source(source: object) -> RandomSource:
    """
    Check that ``source`` can be used as a random source.

    Raises
    ------
    TypeError
        If ``source`` is ``None`` or lacks ``uniform``/``standard_normal``.
    """
    if source is None:
        raise TypeError("Random source must not be None")
    if not isinstance(source, RandomSource):
        raise TypeError(
            f"{type(source).__name__} is not a random source: "
            "uniform() and standard_normal() are required"
        )
    return source


def _positive_uniform(source: RandomSource) -> float:
    u = source.uniform()
    while u <= 0.0:
        u = source.uniform()
    return u


def standard_gamma(source: RandomSource, shape: float) -> float:
    """
    Draw from ``Gamma(shape, 1)`` with the Marsaglia & Tsang method.

    Parameters
    ----------
    source : RandomSource
        Generator providing uniform and normal draws.
    shape : float
        Shape parameter, must be positive.

    Returns
    -------
    float
        A Gamma variate.

    Notes
    -----
    Shapes below one are boosted: ``G(a) = G(a + 1) * U ** (1 / a)``.
    """
    if shape < 1.0:
        boost = _positive_uniform(source) ** (1.0 / shape)
        return standard_gamma(source, shape + 1.0) * boost

    # Marsaglia & Tsang's variable names
    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    while True:
        x = source.standard_normal()
        y = 1.0 + c * x
        if y <= 0.0:
            continue
        v = y * y * y
        u = _positive_uniform(source)
        x2 = x * x
        if u < 1.0 - 0.0331 * x2 * x2:
            return d * v
        if math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
            return d * v


def chi_squared(source: RandomSource, dof: float) -> float:
    """Draw from the chi-squared distribution with ``dof`` degrees of freedom."""
    return 2.0 * standard_gamma(source, 0.5 * dof)


__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "ensure_random_source",
    "standard_gamma",
    "chi_squared",
]
