"""
Tests for Student-t sampling

Single draws, lazy streams, bulk samples and the standalone sampling
functions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from itertools import islice

import numpy as np
import pytest

from pysatl_tdist.config import UNCHECKED_CONFIG
from pysatl_tdist.errors import InvalidParametersError
from pysatl_tdist.families.builtins.continuous.student_t import (
    StudentTDistribution,
    student_t_sample,
    student_t_samples,
)
from pysatl_tdist.rng import NumpyRandomSource

from .base import BaseDistributionTest


class ConstantSource:
    """Deterministic source: fixed normal draw, uniform draws cycling through a list."""

    def __init__(self, normal: float, uniforms: list[float]) -> None:
        self.normal = normal
        self._uniforms = uniforms
        self._position = 0
        self.calls = 0

    def uniform(self) -> float:
        self.calls += 1
        value = self._uniforms[self._position % len(self._uniforms)]
        self._position += 1
        return value

    def standard_normal(self) -> float:
        self.calls += 1
        return self.normal


class TestStudentTSampling(BaseDistributionTest):
    """Statistical and structural properties of samples."""

    def test_sample_returns_float(self):
        dist = StudentTDistribution(0.0, 1.0, 3.0, random_source=self.make_source())

        assert type(dist.sample()) is float

    def test_same_seed_same_stream(self):
        first = StudentTDistribution(1.0, 2.0, 4.0, random_source=NumpyRandomSource(seed=7))
        second = StudentTDistribution(1.0, 2.0, 4.0, random_source=NumpyRandomSource(seed=7))

        assert list(islice(first.samples(), 20)) == list(islice(second.samples(), 20))

    def test_injected_source_is_used(self):
        source = ConstantSource(normal=0.0, uniforms=[0.5])
        dist = StudentTDistribution(3.0, 2.0, 5.0, random_source=source)

        # Z = 0 puts every draw on the location
        assert dist.sample() == 3.0
        assert source.calls > 0

    def test_replacing_random_source(self):
        dist = StudentTDistribution(-1.0, 1.0, 2.0, random_source=self.make_source())

        dist.random_source = ConstantSource(normal=0.0, uniforms=[0.25])

        assert dist.sample() == -1.0

    def test_samples_is_lazy_and_unbounded(self):
        source = ConstantSource(normal=0.0, uniforms=[0.5])
        dist = StudentTDistribution(random_source=source)

        stream = dist.samples()
        assert source.calls == 0

        taken = list(islice(stream, 1000))
        assert len(taken) == 1000
        assert next(stream) == 0.0

    def test_samples_returns_fresh_iterators(self):
        dist = StudentTDistribution(random_source=self.make_source())

        first, second = dist.samples(), dist.samples()

        assert first is not second
        assert math.isfinite(next(first))
        assert math.isfinite(next(second))

    def test_samples_follow_parameter_updates(self):
        dist = StudentTDistribution(random_source=ConstantSource(normal=0.0, uniforms=[0.5]))
        stream = dist.samples()

        assert next(stream) == 0.0
        dist.location = 10.0
        assert next(stream) == 10.0

    def test_sample_array_shape(self):
        dist = StudentTDistribution(0.0, 1.0, 5.0, random_source=self.make_source())

        sample = dist.sample_array(250)

        assert sample.shape == (250, 1)
        assert len(sample) == 250
        assert np.isfinite(sample.array).all()

    def test_sample_array_rejects_negative_size(self):
        with pytest.raises(ValueError):
            StudentTDistribution().sample_array(-1)

    def test_empirical_moments(self):
        dist = StudentTDistribution(5.0, 2.0, 10.0, random_source=self.make_source())

        values = dist.sample_array(100_000).array.ravel()

        assert float(values.mean()) == pytest.approx(dist.mean, abs=0.05)
        assert float(values.var(ddof=1)) == pytest.approx(dist.variance, rel=0.05)

    @pytest.mark.parametrize(
        "location, scale, dof",
        [(0.0, 1.0, 0.5), (2.0, 0.5, 1.0), (-3.0, 4.0, 3.0), (1.0, 1.0, 25.0)],
        ids=["dof=0.5", "cauchy", "dof=3", "dof=25"],
    )
    def test_empirical_quantiles_match_cdf(self, location, scale, dof):
        dist = StudentTDistribution(location, scale, dof, random_source=self.make_source())
        values = dist.sample_array(20_000).array.ravel()

        for prob in (0.05, 0.25, 0.5, 0.75, 0.95):
            fraction = float(np.mean(values <= dist.ppf(prob)))
            assert fraction == pytest.approx(prob, abs=0.015)

    def test_infinite_dof_draws_are_normal(self):
        dist = StudentTDistribution(1.0, 2.0, math.inf, random_source=NumpyRandomSource(seed=5))
        reference = NumpyRandomSource(seed=5)

        draws = list(islice(dist.samples(), 3))

        assert draws == [1.0 + 2.0 * reference.standard_normal() for _ in range(3)]

    def test_unchecked_invalid_parameters_sample_nan(self):
        dist = StudentTDistribution(0.0, 1.0, -1.0, config=UNCHECKED_CONFIG)

        assert all(math.isnan(v) for v in islice(dist.samples(), 5))


class TestStandaloneSampling(BaseDistributionTest):
    """Module level sampling functions."""

    def test_single_draw(self):
        value = student_t_sample(self.make_source(), 1.0, 2.0, 3.0)

        assert isinstance(value, float)
        assert math.isfinite(value)

    def test_single_draw_matches_distribution_method(self):
        dist = StudentTDistribution(1.0, 2.0, 3.0, random_source=NumpyRandomSource(seed=3))

        assert student_t_sample(NumpyRandomSource(seed=3), 1.0, 2.0, 3.0) == dist.sample()

    @pytest.mark.parametrize(
        "location, scale, dof",
        [(0.0, 0.0, 1.0), (0.0, 1.0, -1.0), (math.nan, 1.0, 1.0)],
    )
    def test_invalid_parameters_raise(self, location, scale, dof):
        with pytest.raises(InvalidParametersError):
            student_t_sample(self.make_source(), location, scale, dof)
        with pytest.raises(InvalidParametersError):
            student_t_samples(self.make_source(), location, scale, dof)

    def test_invalid_parameters_allowed_when_unchecked(self):
        value = student_t_sample(self.make_source(), 0.0, -1.0, 1.0, config=UNCHECKED_CONFIG)

        assert math.isnan(value)

    @pytest.mark.parametrize("config", [None, UNCHECKED_CONFIG])
    def test_none_source_always_rejected(self, config):
        kwargs = {} if config is None else {"config": config}

        with pytest.raises(TypeError):
            student_t_sample(None, 0.0, 1.0, 1.0, **kwargs)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            student_t_samples(None, 0.0, 1.0, 1.0, **kwargs)  # type: ignore[arg-type]

    def test_stream_is_lazy(self):
        source = ConstantSource(normal=1.0, uniforms=[0.5])

        stream = student_t_samples(source, 0.0, 1.0, 4.0)

        assert source.calls == 0
        assert all(math.isfinite(v) for v in islice(stream, 100))
        assert source.calls > 0

    def test_stream_mean(self):
        stream = student_t_samples(self.make_source(), -2.0, 0.5, 8.0)

        values = np.fromiter(islice(stream, 50_000), dtype=np.float64)

        assert float(values.mean()) == pytest.approx(-2.0, abs=0.02)
