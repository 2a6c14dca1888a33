"""
kernel_density: Univariate kernel density estimation with confidence bands.

This package estimates a smooth density and CDF from a sample of real
observations using fixed-bandwidth kernel smoothing, and bounds the
empirical CDF with a distribution-free Dvoretzky–Kiefer–Wolfowitz band.

Key Features
------------
- Seven kernels, each paired with its exact cumulative form
- Silverman, Scott, robust and cross-validated bandwidth selectors
- Vectorised density and CDF evaluation on immutable estimators
- DKW confidence bands, empirical CDF and order statistics
- Two-sample Kolmogorov–Smirnov test
- Closed-form normal density as a reference curve

Main Functions
--------------
KernelDensityEstimator : Density/CDF estimator for a fixed sample
silverman_bandwidth : Silverman's rule-of-thumb bandwidth
dkw_epsilon : Half-width of the DKW confidence band
confidence_band : Clamped lower/upper CDF bounds at given points
ks_test : Two-sample Kolmogorov–Smirnov test

Example
-------
>>> import numpy as np
>>> from kernel_density import KernelDensityEstimator, dkw_epsilon
>>> x = np.random.normal(0, 1, 500)
>>> kde = KernelDensityEstimator(x, kernel="epanechnikov")
>>> kde.density(0.0), kde.cdf(0.0)
>>> eps = dkw_epsilon(len(x), 0.05)
>>> lower, upper = kde.confidence_band(np.linspace(-3, 3, 50), alpha=0.05)
"""

from .bandwidth import (
    BANDWIDTH_METHODS,
    cv_bandwidth,
    robust_bandwidth,
    scott_bandwidth,
    select_bandwidth,
    silverman_bandwidth,
)
from .confidence import band_limits, confidence_band, dkw_epsilon, ecdf_band
from .cv import LikelihoodCVScorer
from .ecdf import Ecdf, ecdf, p, percentile, rank
from .errors import DegenerateSampleError, InvalidInputError, KernelDensityError
from .estimator import KernelDensityEstimator, cdf, density, new_estimator
from .kernels import (
    KERNELS,
    Cosine,
    Epanechnikov,
    Gaussian,
    Kernel,
    Quartic,
    Triangular,
    Triweight,
    Uniform,
    get_kernel,
)
from .ks import KSTestResult, critical_value, ks_statistic, ks_test, reject_probability
from .normal import NormalDensity

__all__ = [
    "Kernel",
    "Uniform",
    "Triangular",
    "Epanechnikov",
    "Quartic",
    "Triweight",
    "Gaussian",
    "Cosine",
    "KERNELS",
    "get_kernel",
    "silverman_bandwidth",
    "scott_bandwidth",
    "robust_bandwidth",
    "cv_bandwidth",
    "select_bandwidth",
    "BANDWIDTH_METHODS",
    "LikelihoodCVScorer",
    "NormalDensity",
    "KernelDensityEstimator",
    "new_estimator",
    "density",
    "cdf",
    "dkw_epsilon",
    "band_limits",
    "confidence_band",
    "ecdf_band",
    "Ecdf",
    "ecdf",
    "p",
    "percentile",
    "rank",
    "ks_test",
    "ks_statistic",
    "reject_probability",
    "critical_value",
    "KSTestResult",
    "KernelDensityError",
    "InvalidInputError",
    "DegenerateSampleError",
]
