from __future__ import annotations

import numpy as np

from .errors import InvalidInputError


def as_sample(sample, min_size: int = 1) -> np.ndarray:
    """Return a private, read-only float64 copy of ``sample``."""
    x = np.array(sample, dtype=float).ravel()
    if x.shape[0] < min_size:
        raise InvalidInputError(
            f"need at least {min_size} sample value(s), got {x.shape[0]}"
        )
    if not np.all(np.isfinite(x)):
        raise InvalidInputError("sample values must be finite")
    x.flags.writeable = False
    return x


def as_points(x) -> tuple[np.ndarray, bool]:
    """Return ``x`` as a 1-d float array and whether it was a scalar."""
    arr = np.asarray(x, dtype=float)
    scalar = arr.ndim == 0
    arr = arr.ravel()
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("evaluation points must be finite")
    return arr, scalar


def as_float(value, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{what} must be a number, got {value!r}") from None


def check_bandwidth(h) -> float:
    h = as_float(h, "bandwidth")
    if not np.isfinite(h) or h <= 0:
        raise InvalidInputError(f"bandwidth must be positive and finite, got {h}")
    return h


def check_alpha(alpha) -> float:
    alpha = as_float(alpha, "alpha")
    if not 0.0 < alpha < 1.0:
        raise InvalidInputError(f"alpha must lie in (0, 1), got {alpha}")
    return alpha
