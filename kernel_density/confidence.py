"""
Distribution-free confidence bands for the empirical CDF.

The Dvoretzky–Kiefer–Wolfowitz inequality with Massart's tight constant
gives, for a sample of size n drawn from any continuous F,

    P( sup_x |F_n(x) - F(x)| > eps ) <= 2 exp(-2 n eps^2),

so eps = sqrt( ln(2/alpha) / (2n) ) bounds the deviation of the empirical
step CDF F_n with probability at least 1 - alpha. The band depends only on
(n, alpha), never on the kernel or bandwidth. Centring it on a smoothed
kernel CDF instead of F_n is an approximation with no such guarantee.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ._checks import as_float, check_alpha
from .ecdf import Ecdf
from .errors import InvalidInputError

__all__ = ["dkw_epsilon", "band_limits", "confidence_band", "ecdf_band"]


def dkw_epsilon(n: int, alpha: float) -> float:
    """
    Half-width of the DKW band.

    Parameters
    ----------
    n : int
        Sample size, at least 1.
    alpha : float
        Tolerated false-coverage probability, strictly between 0 and 1.

    Returns
    -------
    float
        ``sqrt(log(2 / alpha) / (2 n))``.

    Examples
    --------
    >>> round(dkw_epsilon(100, 0.05), 4)
    0.1358
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise InvalidInputError(f"n must be a positive integer, got {n!r}")
    alpha = check_alpha(alpha)
    return float(np.sqrt(np.log(2.0 / alpha) / (2.0 * n)))


def band_limits(values, epsilon: float):
    """Clamp ``values -/+ epsilon`` to the probability range [0, 1]."""
    epsilon = as_float(epsilon, "epsilon")
    if not np.isfinite(epsilon) or epsilon < 0:
        raise InvalidInputError(f"epsilon must be finite and >= 0, got {epsilon}")
    v = np.asarray(values, dtype=float)
    lower = np.clip(v - epsilon, 0.0, 1.0)
    upper = np.clip(v + epsilon, 0.0, 1.0)
    if v.ndim == 0:
        return float(lower), float(upper)
    return lower, upper


def confidence_band(estimator, x, epsilon: float, smoothed: bool = False):
    """Lower and upper CDF bounds at ``x``.

    Args:
        estimator: A fitted :class:`~kernel_density.KernelDensityEstimator`.
        x: Point or points at which to evaluate the band.
        epsilon: Band half-width, usually from :func:`dkw_epsilon`.
        smoothed: Centre the band on the kernel CDF instead of the empirical
            CDF. The DKW coverage guarantee only holds for the empirical CDF.

    Returns:
        ``(lower, upper)``, floats for scalar ``x`` and arrays otherwise.
    """
    centre = estimator.cdf(x) if smoothed else estimator.ecdf.value(x)
    return band_limits(centre, epsilon)


def ecdf_band(x, alpha: float = 0.05) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """DKW band evaluated at the sorted sample points.

    Returns:
        ``(x_sorted, lower, upper)`` for the right-continuous empirical CDF.
    """
    e = Ecdf(x)
    eps = dkw_epsilon(e.n, alpha)
    pts = e.sorted_sample
    lower, upper = band_limits(e.value(pts), eps)
    return pts, lower, upper
