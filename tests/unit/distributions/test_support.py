from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from pysatl_tdist.distributions.support import ContinuousSupport, Support


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_real_line_doesnt_contain_inf(self, infinity):
        support = ContinuousSupport()
        assert infinity not in support
        assert support.contains(infinity) is False

    def test_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))

        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    def test_bounded_closed_interval(self):
        support = ContinuousSupport(-1.0, 2.0)

        assert support.contains(np.array([-1.0, 2.0, 2.5])).tolist() == [True, True, False]

    def test_inf_bound_is_not_closed(self):
        assert ContinuousSupport().left_closed is False
        assert ContinuousSupport().right_closed is False

    def test_is_support(self):
        assert isinstance(ContinuousSupport(), Support)
