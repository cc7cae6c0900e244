"""
Student-t distribution implementation.

Contains the generalized (location-scale) Student-t distribution and the
standalone sampling functions that back it.

Probability density function:
    f(x) = Γ((ν+1)/2) / (Γ(ν/2) √(νπ) σ) * (1 + ((x-μ)/σ)²/ν)^(-(ν+1)/2)

with location μ, scale σ > 0 and degrees of freedom ν > 0. ``ν = 1`` is the
Cauchy distribution; as ``ν → ∞`` the distribution approaches N(μ, σ²), and
``ν = inf`` is evaluated as that normal limit.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from enum import Enum
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betaincc, betaln, digamma, ndtr, ndtri, stdtrit

from pysatl_tdist.config import DEFAULT_CONFIG
from pysatl_tdist.distributions.sampling import ArraySample
from pysatl_tdist.distributions.support import ContinuousSupport
from pysatl_tdist.errors import UndefinedMomentError
from pysatl_tdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_tdist.rng import NumpyRandomSource, chi_squared, ensure_random_source
from pysatl_tdist.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pysatl_tdist.config import DistributionConfig
    from pysatl_tdist.rng import RandomSource
    from pysatl_tdist.types import EuclideanDistributionType, Number, NumericArray

logger = logging.getLogger(__name__)


class _Omitted(Enum):
    """Marker for an argument the caller did not pass."""

    TOKEN = 0


_OMITTED = _Omitted.TOKEN


@parametrization(name="locScaleDoF")
class LocationScaleDoF(Parametrization):
    """
    Location-scale parametrization of the Student-t distribution.

    Parameters
    ----------
    location : float
        Centre of the distribution (μ)
    scale : float
        Spread of the distribution (σ)
    dof : float
        Degrees of freedom (ν), not necessarily an integer
    """

    location: float
    scale: float
    dof: float

    @constraint(description="location is not NaN")
    def check_location_not_nan(self) -> bool:
        return not math.isnan(self.location)

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        """Check that scale is positive (NaN fails)."""
        return self.scale > 0

    @constraint(description="dof > 0")
    def check_dof_positive(self) -> bool:
        """Check that degrees of freedom are positive (NaN fails)."""
        return self.dof > 0


def _make_parameters(location: float, scale: float, dof: float) -> LocationScaleDoF:
    return cast(
        LocationScaleDoF,
        LocationScaleDoF(location=float(location), scale=float(scale), dof=float(dof)),  # type: ignore[call-arg]
    )


def _checked_parameters(
    location: float, scale: float, dof: float, config: DistributionConfig
) -> LocationScaleDoF:
    parameters = _make_parameters(location, scale, dof)
    if config.check_parameters:
        parameters.validate()
    elif not parameters.is_valid():
        logger.debug("Parameter checking disabled, accepting invalid %s", parameters.parameters)
    return parameters


def _scalar_or_array(values: NumericArray) -> float | NumericArray:
    if np.ndim(values) == 0:
        return float(values)
    return values


def _draw(source: RandomSource, location: float, scale: float, dof: float) -> float:
    if math.isnan(location) or not (scale > 0 and dof > 0):
        return math.nan

    z = source.standard_normal()
    if dof == math.inf:
        return location + scale * z
    v = chi_squared(source, dof)
    if v <= 0.0:
        # chi-squared draw underflowed for tiny dof
        return location + math.copysign(math.inf, z)
    return location + scale * z / math.sqrt(v / dof)


def _stream(source: RandomSource, location: float, scale: float, dof: float) -> Iterator[float]:
    while True:
        yield _draw(source, location, scale, dof)


def student_t_sample(
    random_source: RandomSource,
    location: float,
    scale: float,
    dof: float,
    *,
    config: DistributionConfig = DEFAULT_CONFIG,
) -> float:
    """
    Draw one Student-t variate without building a distribution object.

    The variate is ``location + scale * Z / sqrt(V / dof)`` with ``Z`` standard
    normal and ``V`` chi-squared with ``dof`` degrees of freedom, both drawn
    from ``random_source``.

    Parameters
    ----------
    random_source : RandomSource
        Generator to draw from.
    location, scale, dof : float
        Distribution parameters.
    config : DistributionConfig, optional
        Validation policy, strict by default.

    Returns
    -------
    float
        A sample.

    Raises
    ------
    TypeError
        If ``random_source`` is None or not a random source.
    InvalidParametersError
        If checking is enabled and the parameters are invalid.
    """
    source = ensure_random_source(random_source)
    p = _checked_parameters(location, scale, dof, config)
    return _draw(source, p.location, p.scale, p.dof)


def student_t_samples(
    random_source: RandomSource,
    location: float,
    scale: float,
    dof: float,
    *,
    config: DistributionConfig = DEFAULT_CONFIG,
) -> Iterator[float]:
    """
    Infinite lazy stream of independent Student-t variates.

    Arguments are validated when this function is called, not when the first
    value is requested. See :func:`student_t_sample` for the parameters.
    """
    source = ensure_random_source(random_source)
    p = _checked_parameters(location, scale, dof, config)
    return _stream(source, p.location, p.scale, p.dof)


class StudentTDistribution:
    """
    Generalized (location-scale) Student-t distribution.

    Parameters
    ----------
    location : float, default 0.0
        Location μ; mean, mode and median of the distribution.
    scale : float, default 1.0
        Scale σ, must be positive.
    dof : float, default 1.0
        Degrees of freedom ν, must be positive.
    random_source : RandomSource, optional
        Generator used by the sampling methods. A fresh
        :class:`~pysatl_tdist.rng.NumpyRandomSource` when omitted; an explicit
        ``None`` is rejected.
    config : DistributionConfig, optional
        Validation policy. Strict checking when omitted.

    Raises
    ------
    InvalidParametersError
        If checking is enabled and the parameters violate a constraint.
    TypeError
        If ``random_source`` is None or not a random source, whatever the
        configuration.

    Notes
    -----
    Every setter re-validates the full (location, scale, dof) triple and
    leaves the distribution untouched when validation fails.

    The instance is not thread-safe: concurrent sampling through one
    distribution shares its random source.
    """

    __slots__ = ("_config", "_parameters", "_random_source")

    def __init__(
        self,
        location: float = 0.0,
        scale: float = 1.0,
        dof: float = 1.0,
        *,
        random_source: RandomSource | _Omitted = _OMITTED,
        config: DistributionConfig | None = None,
    ) -> None:
        self._config = DEFAULT_CONFIG if config is None else config
        self._parameters = _checked_parameters(location, scale, dof, self._config)
        self._random_source = (
            NumpyRandomSource()
            if random_source is _OMITTED
            else ensure_random_source(random_source)
        )

    def __repr__(self) -> str:
        p = self._parameters
        return f"StudentT(Location = {p.location}, Scale = {p.scale}, DoF = {p.dof})"

    @staticmethod
    def is_valid_parameter_set(location: float, scale: float, dof: float) -> bool:
        """
        Check a parameter triple without side effects.

        Returns
        -------
        bool
            False iff ``scale <= 0``, ``dof <= 0`` or any value is NaN.
        """
        return _make_parameters(location, scale, dof).is_valid()

    # --- parameters ------------------------------------------------------

    @property
    def family_name(self) -> str:
        return FamilyName.STUDENT_T

    @property
    def parameters(self) -> LocationScaleDoF:
        """Current parameters as an immutable parametrization object."""
        return self._parameters

    @property
    def config(self) -> DistributionConfig:
        return self._config

    def set_parameters(self, location: float, scale: float, dof: float) -> None:
        """
        Replace all three parameters at once.

        Raises
        ------
        InvalidParametersError
            If checking is enabled and the new triple is invalid; the
            distribution is left unchanged.
        """
        self._parameters = _checked_parameters(location, scale, dof, self._config)
        logger.debug("Parameters set to %s", self._parameters.parameters)

    @property
    def location(self) -> float:
        return self._parameters.location

    @location.setter
    def location(self, value: float) -> None:
        p = self._parameters
        self.set_parameters(value, p.scale, p.dof)

    @property
    def scale(self) -> float:
        return self._parameters.scale

    @scale.setter
    def scale(self, value: float) -> None:
        p = self._parameters
        self.set_parameters(p.location, value, p.dof)

    @property
    def degrees_of_freedom(self) -> float:
        return self._parameters.dof

    @degrees_of_freedom.setter
    def degrees_of_freedom(self, value: float) -> None:
        p = self._parameters
        self.set_parameters(p.location, p.scale, value)

    dof = degrees_of_freedom

    @property
    def random_source(self) -> RandomSource:
        """Generator used for sampling. Never None."""
        return self._random_source

    @random_source.setter
    def random_source(self, value: RandomSource) -> None:
        # rejected regardless of config.check_parameters
        self._random_source = ensure_random_source(value)

    # --- descriptors -----------------------------------------------------

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        """The whole real line."""
        return ContinuousSupport()

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    # --- moments and summary statistics ----------------------------------

    @property
    def mean(self) -> float:
        """
        Mean of the distribution, the location.

        Returned for every ``dof`` even though the integral diverges for
        ``dof <= 1``.
        """
        return self._parameters.location

    @property
    def mode(self) -> float:
        return self._parameters.location

    @property
    def median(self) -> float:
        return self._parameters.location

    @property
    def variance(self) -> float:
        """
        Variance ``scale² * dof / (dof - 2)``.

        Returns
        -------
        float
            Finite for ``dof > 2`` (``scale²`` at ``dof = inf``), ``inf`` for
            ``1 < dof <= 2``.

        Raises
        ------
        UndefinedMomentError
            If ``dof <= 1``.

        Notes
        -----
        Some numerical libraries return ``dof / (dof - 2) / scale``, which
        only matches the density for ``scale = 1``. The value here is the
        second central moment of the density this class evaluates.
        """
        p = self._parameters
        if p.dof > 2.0:
            return p.scale * p.scale / (1.0 - 2.0 / p.dof)
        if p.dof > 1.0:
            return math.inf
        raise UndefinedMomentError(f"Variance is undefined for dof = {p.dof} <= 1")

    @property
    def std_dev(self) -> float:
        """
        Standard deviation ``scale * sqrt(dof / (dof - 2))``.

        Same domain as :attr:`variance`.
        """
        p = self._parameters
        if p.dof > 2.0:
            return p.scale / math.sqrt(1.0 - 2.0 / p.dof)
        if p.dof > 1.0:
            return math.inf
        raise UndefinedMomentError(f"Standard deviation is undefined for dof = {p.dof} <= 1")

    @property
    def skewness(self) -> float:
        """Skewness, zero by symmetry; undefined for ``dof <= 3``."""
        dof = self._parameters.dof
        if dof > 3.0:
            return 0.0
        raise UndefinedMomentError(f"Skewness is undefined for dof = {dof} <= 3")

    def kurtosis(self, excess: bool = False) -> float:
        """
        Raw or excess kurtosis.

        Parameters
        ----------
        excess : bool, default False
            Return the excess kurtosis ``6 / (dof - 4)`` instead of the raw one.

        Returns
        -------
        float
            Finite for ``dof > 4``, ``inf`` for ``2 < dof <= 4``.

        Raises
        ------
        UndefinedMomentError
            If ``dof <= 2``.
        """
        dof = self._parameters.dof
        if dof > 4.0:
            excess_kurtosis = 6.0 / (dof - 4.0)
            return excess_kurtosis if excess else excess_kurtosis + 3.0
        if dof > 2.0:
            return math.inf
        raise UndefinedMomentError(f"Kurtosis is undefined for dof = {dof} <= 2")

    @property
    def entropy(self) -> float:
        """Differential entropy in nats."""
        p = self._parameters
        if p.dof == math.inf:
            return 0.5 * math.log(2.0 * math.pi * math.e) + math.log(p.scale)
        half_dof = 0.5 * p.dof
        half_dof_plus = 0.5 * (p.dof + 1.0)
        return float(
            half_dof_plus * (digamma(half_dof_plus) - digamma(half_dof))
            + 0.5 * math.log(p.dof)
            + betaln(half_dof, 0.5)
            + math.log(p.scale)
        )

    # --- characteristics -------------------------------------------------

    def density(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Probability density function.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the density

        Returns
        -------
        float or NumericArray
            Density values, same shape as ``x``

        Notes
        -----
        Evaluated as ``exp(density_ln(x))`` so that large ``dof`` neither
        overflows nor loses precision in the normalizing constant.
        """
        return _scalar_or_array(np.exp(self._log_density(x)))

    def density_ln(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Logarithm of the density, computed from the log-Beta function directly.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        float or NumericArray
            Log-density values, same shape as ``x``
        """
        return _scalar_or_array(self._log_density(x))

    def _log_density(self, x: Number | NumericArray) -> NumericArray:
        p = self._parameters
        with np.errstate(invalid="ignore", divide="ignore"):
            d = (np.asarray(x, dtype=np.float64) - p.location) / p.scale
            if p.dof == math.inf:
                log_kernel = -0.5 * d * d - 0.5 * np.log(2.0 * np.pi)
            else:
                # Gamma((dof + 1) / 2) / (Gamma(dof / 2) sqrt(pi)) == 1 / B(dof / 2, 1 / 2)
                log_kernel = (
                    -0.5 * (p.dof + 1.0) * np.log1p(d * d / p.dof)
                    - betaln(0.5 * p.dof, 0.5)
                    - 0.5 * np.log(p.dof)
                )
            return cast("NumericArray", log_kernel - np.log(p.scale))

    def cumulative_distribution(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Cumulative distribution function via the regularized incomplete Beta.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the CDF

        Returns
        -------
        float or NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        p = self._parameters
        with np.errstate(invalid="ignore", divide="ignore"):
            xs = np.asarray(x, dtype=np.float64)
            t = (xs - p.location) / p.scale
            if p.dof == math.inf:
                return _scalar_or_array(ndtr(t))
            # t² / (dof + t²) keeps its digits when t² is tiny next to dof
            tail = 0.5 * betaincc(0.5, 0.5 * p.dof, 1.0 / (1.0 + p.dof / (t * t)))
            return _scalar_or_array(np.where(xs >= p.location, 1.0 - tail, tail))

    def inverse_cumulative_distribution(self, prob: Number | NumericArray) -> float | NumericArray:
        """
        Percent point function (inverse CDF).

        Parameters
        ----------
        prob : Number or NumericArray
            Probabilities from [0, 1]

        Returns
        -------
        float or NumericArray
            Quantiles; ``-inf`` at 0 and ``inf`` at 1

        Raises
        ------
        ValueError
            If a probability is outside [0, 1]
        """
        probs = np.asarray(prob, dtype=np.float64)
        if np.any((probs < 0) | (probs > 1)):
            raise ValueError("Probability must be in [0, 1]")

        p = self._parameters
        standard = ndtri(probs) if p.dof == math.inf else stdtrit(p.dof, probs)
        quantiles = np.where(
            probs == 0.0,
            -np.inf,
            np.where(probs == 1.0, np.inf, p.location + p.scale * standard),
        )
        return _scalar_or_array(quantiles)

    cdf = cumulative_distribution
    ppf = inverse_cumulative_distribution

    def log_likelihood(self, data: ArraySample | Iterable[float] | NumericArray) -> float:
        """
        Log-likelihood of observations.

        Parameters
        ----------
        data : ArraySample, array-like
            Observations; an :class:`ArraySample` must be univariate.

        Returns
        -------
        float
            Sum of :meth:`density_ln` over the observations.
        """
        if isinstance(data, ArraySample):
            if data.dim != 1:
                raise ValueError(f"Expected a univariate sample, got dimension {data.dim}")
            values = data.array.ravel()
        elif isinstance(data, np.ndarray):
            values = data.astype(np.float64, copy=False).ravel()
        else:
            values = np.fromiter(data, dtype=np.float64)
        return float(np.sum(self._log_density(values)))

    # --- sampling --------------------------------------------------------

    def sample(self) -> float:
        """Draw one variate from :attr:`random_source`."""
        p = self._parameters
        return _draw(self._random_source, p.location, p.scale, p.dof)

    def samples(self) -> Iterator[float]:
        """
        Infinite lazy stream of variates.

        Each value is drawn with the parameters and random source current at
        the time it is requested.
        """
        while True:
            yield self.sample()

    def sample_array(self, n: int) -> ArraySample:
        """
        Draw ``n`` variates into an ``(n, 1)`` sample.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        return ArraySample.from_stream(self.samples(), n)


__all__ = [
    "LocationScaleDoF",
    "StudentTDistribution",
    "student_t_sample",
    "student_t_samples",
]
