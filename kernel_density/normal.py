"""
Parametric reference densities.

:class:`NormalDensity` is the closed-form normal curve, useful as the true
distribution when checking a kernel estimate, a KS test or a DKW band.
"""

from __future__ import annotations

import numpy as np
from scipy.special import ndtr  # type: ignore

from ._checks import as_float, as_points
from .errors import InvalidInputError

__all__ = ["NormalDensity"]


class NormalDensity:
    """Normal distribution with the given mean and variance.

    Args:
        mean: Location, any finite real.
        variance: Scale squared, positive and finite.

    Raises:
        InvalidInputError: non-finite mean, or non-positive or non-finite
            variance.
    """

    def __init__(self, mean: float = 0.0, variance: float = 1.0) -> None:
        mean = as_float(mean, "mean")
        variance = as_float(variance, "variance")
        if not np.isfinite(mean):
            raise InvalidInputError(f"mean must be finite, got {mean}")
        if not np.isfinite(variance) or variance <= 0:
            raise InvalidInputError(
                f"variance must be positive and finite, got {variance}"
            )
        self._mean = mean
        self._variance = variance

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._variance

    def density(self, x):
        """``exp(-(x - mean)^2 / (2 variance)) / sqrt(2 pi variance)``."""
        pts, scalar = as_points(x)
        coefficient = 1.0 / np.sqrt(2.0 * np.pi * self._variance)
        out = coefficient * np.exp(-((pts - self._mean) ** 2) / (2.0 * self._variance))
        return float(out[0]) if scalar else out

    def cdf(self, x):
        """Standard normal CDF of ``(x - mean) / sqrt(variance)``."""
        pts, scalar = as_points(x)
        out = ndtr((pts - self._mean) / np.sqrt(self._variance))
        return float(out[0]) if scalar else out

    __call__ = density

    def __repr__(self) -> str:
        return f"NormalDensity(mean={self._mean:g}, variance={self._variance:g})"
