"""
Sampling Interfaces
===================

Array-backed container returned by bulk sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Any

    import numpy.typing as npt


class ArraySample:
    """
    Array-backed sample container of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_stream(cls, stream: Iterable[float], n: int) -> ArraySample:
        """
        Collect the first ``n`` values of a univariate stream.

        Parameters
        ----------
        stream : Iterable[float]
            Source of scalar draws; only ``n`` of them are consumed.
        n : int
            Number of values to take.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        values = np.fromiter(islice(stream, n), dtype=np.float64, count=n)
        return cls(values.reshape(n, 1))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    @property
    def dim(self) -> int:
        """Alias for dimension attribute."""
        return self.dimension

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


__all__ = [
    "ArraySample",
]
