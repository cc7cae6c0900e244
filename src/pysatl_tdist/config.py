"""
Distribution Configuration
==========================

Validation policy handed to distribution objects at construction time.

Notes
-----
- There is no process-wide switch: every distribution carries the
  :class:`DistributionConfig` it was built with.
- With ``check_parameters=False`` invalid parameters are stored as given and
  surface as NaN (or otherwise meaningless) results later on.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class DistributionConfig:
    """
    Validation policy of a distribution.

    Parameters
    ----------
    check_parameters : bool, default True
        Whether parameter sets are validated on construction, on every
        mutation and in the static sampling functions.
    """

    check_parameters: bool = True

    def with_checks(self, enabled: bool) -> DistributionConfig:
        """Return a copy with parameter checking switched on or off."""
        return replace(self, check_parameters=enabled)


DEFAULT_CONFIG = DistributionConfig()
"""Strict configuration used when none is supplied."""

UNCHECKED_CONFIG = DistributionConfig(check_parameters=False)
"""Configuration that stores parameters without validating them."""


__all__ = [
    "DistributionConfig",
    "DEFAULT_CONFIG",
    "UNCHECKED_CONFIG",
]
