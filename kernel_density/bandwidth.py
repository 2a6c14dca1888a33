"""
Bandwidth selectors for univariate kernel density estimation.

Normal-reference rules (Silverman, Scott and the robust Silverman variant)
are closed-form functions of the sample spread. The cross-validated
selector minimises the K-fold held-out negative log-likelihood with a
golden-section search on a log scale.

Spread-based rules refuse zero-spread samples instead of returning a zero
bandwidth; callers decide how to handle the degenerate case.
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional, Tuple

import numpy as np

from ._checks import as_sample
from .cv import LikelihoodCVScorer
from .errors import DegenerateSampleError, InvalidInputError
from .kernels import Kernel

__all__ = [
    "silverman_bandwidth",
    "scott_bandwidth",
    "robust_bandwidth",
    "cv_bandwidth",
    "select_bandwidth",
    "BANDWIDTH_METHODS",
]

logger = logging.getLogger(__name__)

_PHI = (1 + np.sqrt(5)) / 2


def _scaled(x: np.ndarray) -> Tuple[float, np.ndarray]:
    # dividing by max |x| first keeps squares of huge values from overflowing
    s = float(np.max(np.abs(x)))
    if s == 0:
        return 1.0, x
    return s, x / s


def _spread(x: np.ndarray) -> float:
    s, xs = _scaled(x)
    sigma = s * float(np.std(xs, ddof=1))
    if not np.isfinite(sigma):
        raise InvalidInputError("sample spread overflows a float")
    if sigma <= 0:
        raise DegenerateSampleError(
            "sample has zero variance; bandwidth would be zero"
        )
    return sigma


def _finite(h: float) -> float:
    h = float(h)
    if not np.isfinite(h):
        raise InvalidInputError("bandwidth overflows a float")
    return h


def silverman_bandwidth(x) -> float:
    """Silverman's rule of thumb, ``1.06 * sigma * n^(-1/5)``.

    Args:
        x: Sample values, at least two of them.

    Returns:
        The bandwidth.

    Raises:
        InvalidInputError: fewer than two values.
        DegenerateSampleError: all values are identical.
    """
    x = as_sample(x, min_size=2)
    h = _finite(1.06 * _spread(x) * len(x) ** (-1 / 5))
    logger.debug("silverman bandwidth n=%d h=%g", len(x), h)
    return h


def scott_bandwidth(x) -> float:
    """Scott's rule, ``1.059 * sigma * n^(-1/5)``."""
    x = as_sample(x, min_size=2)
    return _finite(1.059 * _spread(x) * len(x) ** (-1 / 5))


def robust_bandwidth(x) -> float:
    """Silverman's robust rule, ``0.9 * min(sigma, IQR/1.349) * n^(-1/5)``.

    The interquartile range is ignored when it is zero, so heavily tied
    samples fall back to the standard deviation.
    """
    x = as_sample(x, min_size=2)
    sigma = _spread(x)
    s, xs = _scaled(x)
    q75, q25 = np.percentile(xs, [75, 25])
    iqr = s * float(q75 - q25)
    dispersion = min(sigma, iqr / 1.349) if iqr > 0 else sigma
    return _finite(0.9 * dispersion * len(x) ** (-1 / 5))


def cv_bandwidth(
    x,
    kernel: str | Kernel = "gaussian",
    folds: int = 5,
    h_bounds: Optional[Tuple[float, float]] = None,
    tol: float = 1e-3,
    max_iter: int = 40,
) -> float:
    """
    Select a bandwidth by K-fold likelihood cross-validation.

    Parameters
    ----------
    x : array-like, shape (n_samples,)
        Data samples.
    kernel : str or Kernel, default='gaussian'
        Kernel used for the held-out density.
    folds : int, default=5
        Number of folds.
    h_bounds : tuple of float, optional
        (min_bandwidth, max_bandwidth) search bounds. Defaults to
        (0.1 * h_s, 3 * h_s) where h_s is Silverman's bandwidth.
    tol : float, default=1e-3
        Width of the final log-bandwidth bracket.
    max_iter : int, default=40
        Maximum number of golden-section steps.

    Returns
    -------
    float
        Bandwidth minimising the held-out negative log-likelihood.

    Notes
    -----
    A ``UserWarning`` is issued when the optimum lies on a search bound,
    which usually means the bounds are too narrow.
    """
    scorer = LikelihoodCVScorer(x, folds=folds, kernel=kernel)
    if h_bounds is None:
        h_s = silverman_bandwidth(scorer.x)
        h_bounds = (0.1 * h_s, 3.0 * h_s)
    a, b = float(h_bounds[0]), float(h_bounds[1])
    if not (0 < a < b and np.isfinite(b)):
        raise InvalidInputError(f"invalid h_bounds {h_bounds!r}")

    log_a, log_b = np.log(a), np.log(b)
    c = log_b - (log_b - log_a) / _PHI
    d = log_a + (log_b - log_a) / _PHI
    f_c = scorer.score(np.exp(c))
    f_d = scorer.score(np.exp(d))
    for _ in range(max_iter):
        if abs(log_b - log_a) < tol:
            break
        if f_c < f_d:
            log_b, f_d = d, f_c
            d = c
            c = log_b - (log_b - log_a) / _PHI
            f_c = scorer.score(np.exp(c))
        else:
            log_a, f_c = c, f_d
            c = d
            d = log_a + (log_b - log_a) / _PHI
            f_d = scorer.score(np.exp(d))
    h = float(np.exp((log_a + log_b) / 2))

    edge = 2 * tol
    if abs(np.log(h) - np.log(a)) < edge or abs(np.log(b) - np.log(h)) < edge:
        warnings.warn(
            f"cross-validated bandwidth {h:.4g} lies on the search bound "
            f"({a:.4g}, {b:.4g})",
            UserWarning,
            stacklevel=2,
        )
    logger.debug("cv bandwidth h=%g after %d fold evaluations", h, scorer.evals)
    return h


BANDWIDTH_METHODS = {
    "silverman": silverman_bandwidth,
    "scott": scott_bandwidth,
    "robust": robust_bandwidth,
}


def select_bandwidth(
    x, method: str = "silverman", kernel: str | Kernel = "gaussian", **kwargs
) -> float:
    """Selects a bandwidth with the named rule.

    Args:
        x: Sample values.
        method: One of 'silverman', 'scott', 'robust' or 'cv'.
        kernel: Kernel, used only by the 'cv' method.
        **kwargs: Extra options forwarded to :func:`cv_bandwidth`.

    Returns:
        The bandwidth.
    """
    if not isinstance(method, str):
        raise InvalidInputError(f"method must be a name, got {method!r}")
    m = method.lower()
    if m == "cv":
        return cv_bandwidth(x, kernel=kernel, **kwargs)
    try:
        rule = BANDWIDTH_METHODS[m]
    except KeyError:
        raise InvalidInputError(f"Unknown method '{method}'.") from None
    if kwargs:
        raise InvalidInputError(
            f"method '{method}' takes no options, got {sorted(kwargs)}"
        )
    return rule(x)
