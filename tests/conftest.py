from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_tdist.rng import NumpyRandomSource

pytest.importorskip("scipy")


@pytest.fixture
def seeded_source() -> NumpyRandomSource:
    return NumpyRandomSource(seed=20250101)
