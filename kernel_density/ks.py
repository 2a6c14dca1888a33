"""
Two-sample Kolmogorov–Smirnov test.

The statistic is the largest gap between the two empirical CDFs. Its
significance uses the asymptotic Kolmogorov distribution with Stephens'
small-sample correction,

    Q_KS(lambda) = 2 sum_{j>=1} (-1)^(j-1) exp(-2 j^2 lambda^2),
    lambda = (sqrt(m) + 0.12 + 0.11 / sqrt(m)) * D,   m = n1 n2 / (n1 + n2),

which is reasonable once both samples have more than seven points.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ._checks import as_float, as_sample
from .errors import InvalidInputError

__all__ = [
    "KSTestResult",
    "ks_test",
    "ks_statistic",
    "reject_probability",
    "critical_value",
]

_MIN_SIZE = 8


@dataclass(frozen=True)
class KSTestResult:
    """Outcome of :func:`ks_test`.

    Attributes:
        is_rejected: True when the samples look drawn from different
            distributions at the requested confidence.
        statistic: Maximum distance between the two empirical CDFs.
        reject_probability: Probability with which the null hypothesis
            (same distribution) is rejected.
        critical_value: Statistic above which the null is rejected.
        confidence: Requested confidence level.
    """

    is_rejected: bool
    statistic: float
    reject_probability: float
    critical_value: float
    confidence: float


def _check_confidence(confidence: float) -> float:
    confidence = as_float(confidence, "confidence")
    if not 0.0 < confidence < 1.0:
        raise InvalidInputError(f"confidence must lie in (0, 1), got {confidence}")
    return confidence


def _check_sizes(n1: int, n2: int) -> None:
    if n1 < _MIN_SIZE or n2 < _MIN_SIZE:
        raise InvalidInputError(
            f"both samples need at least {_MIN_SIZE} values, got {n1} and {n2}"
        )


def _q_ks(lam: float, terms: int = 200, tol: float = 1e-8) -> float:
    if lam == 0.0:
        return 1.0
    minus_two_lam_sq = -2.0 * lam * lam
    q = 0.0
    for j in range(1, terms):
        term = (1.0 if j % 2 else -1.0) * 2.0 * np.exp(minus_two_lam_sq * j * j)
        q += term
        if abs(term) < tol:
            return min(q, 1.0)
    # only fails to converge for lambda ~ 0, where Q_KS ~ 1
    return 1.0


def ks_statistic(xs, ys) -> float:
    """Largest absolute difference between the empirical CDFs of two samples."""
    xs = np.sort(as_sample(xs))
    ys = np.sort(as_sample(ys))
    pooled = np.concatenate([xs, ys])
    f_x = np.searchsorted(xs, pooled, side="right") / len(xs)
    f_y = np.searchsorted(ys, pooled, side="right") / len(ys)
    return float(np.max(np.abs(f_x - f_y)))


def reject_probability(statistic: float, n1: int, n2: int) -> float:
    """Probability of rejecting equality given an observed statistic."""
    _check_sizes(n1, n2)
    factor = np.sqrt(n1 * n2 / (n1 + n2))
    lam = (factor + 0.12 + 0.11 / factor) * float(statistic)
    p = 1.0 - _q_ks(lam)
    return float(min(max(p, 0.0), 1.0))


def critical_value(n1: int, n2: int, confidence: float) -> float:
    """Smallest statistic rejected at ``confidence``, found by bisection."""
    confidence = _check_confidence(confidence)
    _check_sizes(n1, n2)
    low, high = 0.0, 1.0
    while low + 1e-8 < high:
        mid = low + (high - low) / 2.0
        if reject_probability(mid, n1, n2) > confidence:
            high = mid
        else:
            low = mid
    return high


def ks_test(xs, ys, confidence: float = 0.95) -> KSTestResult:
    """
    Test whether two samples come from the same distribution.

    Parameters
    ----------
    xs, ys : array-like
        Samples, each with more than seven values.
    confidence : float, default=0.95
        Confidence level in (0, 1).

    Returns
    -------
    KSTestResult
    """
    confidence = _check_confidence(confidence)
    xs = as_sample(xs)
    ys = as_sample(ys)
    _check_sizes(len(xs), len(ys))
    statistic = ks_statistic(xs, ys)
    p = reject_probability(statistic, len(xs), len(ys))
    return KSTestResult(
        is_rejected=p > confidence,
        statistic=statistic,
        reject_probability=p,
        critical_value=critical_value(len(xs), len(ys), confidence),
        confidence=confidence,
    )
