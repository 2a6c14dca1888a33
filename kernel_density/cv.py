"""
Cross-validation utilities for kernel density bandwidth selection.

This module defines a LikelihoodCVScorer class that evaluates the K-fold
held-out negative log-likelihood of a kernel density estimate for a given
bandwidth.
"""

from __future__ import annotations

import numpy as np
from sklearn.model_selection import KFold  # type: ignore

from ._checks import as_sample, check_bandwidth
from .errors import InvalidInputError
from .kernels import Kernel, get_kernel

__all__ = ["LikelihoodCVScorer"]

# floor for held-out densities so compact kernels give a finite score
_DENSITY_FLOOR = np.finfo(float).tiny


class LikelihoodCVScorer:
    """Cross-validation scorer for kernel density estimation.

    Args:
        x: Sample values.
        folds: Number of folds for K-fold cross-validation.
        kernel: Kernel name or instance.
    """

    def __init__(
        self, x: np.ndarray, folds: int = 5, kernel: str | Kernel = "gaussian"
    ) -> None:
        self.x = as_sample(x, min_size=2)
        if not (2 <= folds <= len(self.x)):
            raise InvalidInputError(
                f"`folds` must be between 2 and {len(self.x)}, got {folds}"
            )
        self.kf = KFold(n_splits=folds, shuffle=True, random_state=0)
        self.kernel = get_kernel(kernel)
        self.evals = 0

    def score(self, h: float) -> float:
        """Computes the mean held-out negative log-likelihood.

        Args:
            h: Bandwidth value.

        Returns:
            Negative log-likelihood per held-out point.
        """
        h = check_bandwidth(h)
        total = 0.0
        for train_idx, test_idx in self.kf.split(self.x):
            xtr, xte = self.x[train_idx], self.x[test_idx]
            u = (xte[:, None] - xtr[None, :]) / h
            dens = self.kernel.pdf(u).sum(axis=1) / (len(xtr) * h)
            total -= np.log(np.maximum(dens, _DENSITY_FLOOR)).sum()
            self.evals += 1
        return float(total / len(self.x))
