"""
Exception types raised by distribution objects.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParametersError(DistributionError, ValueError):
    """
    Raised when a parameter set violates the constraints of its parametrization.

    Only raised while parameter checking is enabled in the active
    :class:`~pysatl_tdist.config.DistributionConfig`.
    """


class UndefinedMomentError(DistributionError, ArithmeticError):
    """Raised when a requested moment does not exist for the current parameters."""


__all__ = [
    "DistributionError",
    "InvalidParametersError",
    "UndefinedMomentError",
]
