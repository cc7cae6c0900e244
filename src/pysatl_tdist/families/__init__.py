"""
Distribution families and their parametrizations.

This package provides the parametrization framework (constraint declaration
and validation) and the built-in distributions that use it.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    LocationScaleDoF,
    StudentTDistribution,
    student_t_sample,
    student_t_samples,
)
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)

__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
    "LocationScaleDoF",
    "StudentTDistribution",
    "student_t_sample",
    "student_t_samples",
]
