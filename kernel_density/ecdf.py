"""
Empirical cumulative distribution function and order statistics.

:class:`Ecdf` keeps a sorted private copy of the sample and answers repeated
queries by binary search. The module-level functions answer one-off queries
on an unsorted sample without sorting all of it.
"""

from __future__ import annotations

import math

import numpy as np

from ._checks import as_float, as_points, as_sample
from .errors import InvalidInputError

__all__ = ["Ecdf", "ecdf", "p", "percentile", "rank"]


def _check_proportion(proportion: float) -> float:
    proportion = as_float(proportion, "proportion")
    if not 0.0 < proportion <= 1.0:
        raise InvalidInputError(f"proportion must lie in (0, 1], got {proportion}")
    return proportion


def _check_percentile(q: float) -> float:
    q = as_float(q, "percentile")
    if not 0.0 < q <= 100.0:
        raise InvalidInputError(f"percentile must lie in (0, 100], got {q}")
    return q


def _check_rank(r: int, n: int) -> int:
    if isinstance(r, bool) or int(r) != r or not 1 <= r <= n:
        raise InvalidInputError(f"rank must be an integer in [1, {n}], got {r}")
    return int(r)


def _proportion_rank(proportion: float, n: int) -> int:
    # rounding first keeps 0.3 * 10 at rank 3 rather than 4
    return max(1, math.ceil(round(proportion * n, 9)))


class Ecdf:
    """Empirical CDF of a sample.

    Args:
        x: Sample values, at least one.
    """

    def __init__(self, x) -> None:
        sorted_x = np.sort(as_sample(x))
        sorted_x.flags.writeable = False
        self._sorted = sorted_x

    @property
    def n(self) -> int:
        return int(self._sorted.shape[0])

    @property
    def sorted_sample(self) -> np.ndarray:
        return self._sorted

    def value(self, x):
        """Fraction of sample values less than or equal to ``x``."""
        pts, scalar = as_points(x)
        counts = np.searchsorted(self._sorted, pts, side="right")
        out = counts / self.n
        return float(out[0]) if scalar else out

    __call__ = value

    def p(self, proportion: float) -> float:
        """Smallest sample value whose ECDF reaches ``proportion``."""
        proportion = _check_proportion(proportion)
        return float(self._sorted[_proportion_rank(proportion, self.n) - 1])

    def percentile(self, q: float) -> float:
        return self.p(_check_percentile(q) / 100.0)

    def rank(self, r: int) -> float:
        """The ``r``-th smallest value, 1-based."""
        return float(self._sorted[_check_rank(r, self.n) - 1])

    def min(self) -> float:
        return float(self._sorted[0])

    def max(self) -> float:
        return float(self._sorted[-1])

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Ecdf(n={self.n})"


def ecdf(x, t) -> float:
    """Fraction of ``x`` less than or equal to ``t``, without sorting."""
    x = as_sample(x)
    pts, scalar = as_points(t)
    out = (x[None, :] <= pts[:, None]).mean(axis=1)
    return float(out[0]) if scalar else out


def rank(x, r: int) -> float:
    """The ``r``-th smallest value of an unsorted sample (selection, not sort)."""
    x = as_sample(x)
    r = _check_rank(r, len(x))
    return float(np.partition(x, r - 1)[r - 1])


def p(x, proportion: float) -> float:
    x = as_sample(x)
    proportion = _check_proportion(proportion)
    return rank(x, _proportion_rank(proportion, len(x)))


def percentile(x, q: float) -> float:
    return p(x, _check_percentile(q) / 100.0)
