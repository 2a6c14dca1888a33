"""
Kernel density and CDF estimation for a fixed sample.

For a sample x_1..x_n, kernel K with cumulative form W and bandwidth h:

    f(x) = 1/(n h) sum_i K((x - x_i)/h)
    F(x) = 1/n     sum_i W((x - x_i)/h)

An estimator copies its sample at construction and is read-only afterwards,
so one instance can be queried from several threads at once.
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from ._checks import as_points, as_sample, check_bandwidth
from .bandwidth import select_bandwidth
from .confidence import confidence_band, dkw_epsilon
from .ecdf import Ecdf
from .kernels import Kernel, get_kernel

__all__ = ["KernelDensityEstimator", "new_estimator", "density", "cdf"]

logger = logging.getLogger(__name__)

# evaluation points per block; keeps the (points x sample) matrix bounded
_BLOCK_ELEMENTS = 1 << 20


class KernelDensityEstimator:
    """Univariate fixed-bandwidth kernel density estimator.

    Args:
        x: Sample values (finite, at least one).
        kernel: Kernel name (see :data:`kernel_density.KERNELS`) or instance.
        bandwidth: Positive bandwidth, or the name of a selector
            ('silverman', 'scott', 'robust', 'cv') applied to the sample.

    Raises:
        InvalidInputError: empty or non-finite sample, unknown kernel or
            selector, non-positive bandwidth.
        DegenerateSampleError: a selector was requested for a sample with
            zero spread.
    """

    def __init__(
        self,
        x,
        kernel: Union[str, Kernel] = "gaussian",
        bandwidth: Union[float, str] = "silverman",
    ) -> None:
        sample = as_sample(x)
        k = get_kernel(kernel)
        if isinstance(bandwidth, str):
            h = select_bandwidth(sample, method=bandwidth, kernel=k)
        else:
            h = bandwidth
        self._x = sample
        self._kernel = k
        self._h = check_bandwidth(h)
        self._ecdf = Ecdf(sample)
        logger.debug(
            "estimator n=%d kernel=%s h=%g", len(sample), k.name, self._h
        )

    @property
    def sample(self) -> np.ndarray:
        """Read-only copy of the sample."""
        return self._x

    @property
    def kernel(self) -> Kernel:
        return self._kernel

    @property
    def bandwidth(self) -> float:
        return self._h

    @property
    def n(self) -> int:
        return int(self._x.shape[0])

    @property
    def ecdf(self) -> Ecdf:
        """Empirical CDF of the same sample."""
        return self._ecdf

    def _reduce(self, x, fn) -> np.ndarray:
        pts, scalar = as_points(x)
        out = np.empty(pts.shape[0], dtype=float)
        block = max(1, _BLOCK_ELEMENTS // self.n)
        for start in range(0, pts.shape[0], block):
            chunk = pts[start : start + block]
            u = (chunk[:, None] - self._x[None, :]) / self._h
            out[start : start + block] = fn(u).sum(axis=1)
        return float(out[0]) if scalar else out

    def density(self, x):
        """Estimated density at ``x`` (scalar or array-like)."""
        return self._reduce(x, self._kernel.pdf) / (self.n * self._h)

    def cdf(self, x):
        """Estimated CDF at ``x`` (scalar or array-like)."""
        return self._reduce(x, self._kernel.cdf) / self.n

    __call__ = density

    def confidence_band(self, x, alpha: float = 0.05, smoothed: bool = False):
        """DKW band at ``x`` with false-coverage probability ``alpha``.

        The band is centred on the empirical CDF unless ``smoothed`` is
        true, in which case it is centred on :meth:`cdf` as an approximation.
        """
        return confidence_band(self, x, dkw_epsilon(self.n, alpha), smoothed)

    def __repr__(self) -> str:
        return (
            f"KernelDensityEstimator(n={self.n}, kernel={self._kernel.name!r}, "
            f"bandwidth={self._h:.6g})"
        )


def new_estimator(x, kernel="gaussian", bandwidth="silverman") -> KernelDensityEstimator:
    """Build a :class:`KernelDensityEstimator`."""
    return KernelDensityEstimator(x, kernel=kernel, bandwidth=bandwidth)


def density(estimator: KernelDensityEstimator, x):
    return estimator.density(x)


def cdf(estimator: KernelDensityEstimator, x):
    return estimator.cdf(x)
