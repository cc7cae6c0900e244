"""
Distributions subpackage

Interfaces and containers shared by the distributions of PySATL t-dist:

- continuous distribution protocol (:mod:`.distribution`);
- array-backed samples (:mod:`.sampling`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import ContinuousDistribution
from .sampling import ArraySample
from .support import ContinuousSupport, Support

__all__ = [
    # distribution
    "ContinuousDistribution",
    # sampling
    "ArraySample",
    # support
    "Support",
    "ContinuousSupport",
]
