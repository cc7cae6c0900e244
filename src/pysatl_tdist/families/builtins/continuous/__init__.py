"""
Built-in continuous distributions.

This module contains implementations of continuous distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_tdist.families.builtins.continuous.student_t import (
    LocationScaleDoF,
    StudentTDistribution,
    student_t_sample,
    student_t_samples,
)

__all__ = [
    "LocationScaleDoF",
    "StudentTDistribution",
    "student_t_sample",
    "student_t_samples",
]
