# kernels.py
# Univariate smoothing kernels paired with their cumulative forms.
# Conventions:
#   u = (x - x_i) / h
#   K(u) >= 0, K(u) = K(-u), integral of K over the reals is 1
#   W(u) = integral of K from -inf to u, so W(-inf) = 0 and W(+inf) = 1
#
# Compact kernels live on [-1, 1]. Their W is a polynomial (or sine) that
# already equals 0 at u = -1 and 1 at u = 1, so it is evaluated on u
# clipped to [-1, 1].

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from scipy.special import ndtr  # type: ignore

from .errors import InvalidInputError

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
]

_INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)


class Kernel(ABC):
    """Base class for a kernel K and its antiderivative W.

    Subclasses must implement both :meth:`pdf` and :meth:`cdf`; a kernel
    without a cumulative form cannot be instantiated.
    """

    name: str = ""
    support: float = 1.0

    @abstractmethod
    def pdf(self, u: np.ndarray) -> np.ndarray:
        """Kernel value K(u)."""

    @abstractmethod
    def cdf(self, u: np.ndarray) -> np.ndarray:
        """Cumulative kernel W(u)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


def _inside(u: np.ndarray) -> np.ndarray:
    return np.abs(u) <= 1.0


class Uniform(Kernel):
    """K(u) = 1/2 on |u| <= 1."""

    name = "uniform"

    def pdf(self, u):
        u = np.asarray(u, dtype=float)
        return np.where(_inside(u), 0.5, 0.0)

    def cdf(self, u):
        u = np.clip(np.asarray(u, dtype=float), -1.0, 1.0)
        return 0.5 * (u + 1.0)


class Triangular(Kernel):
    """K(u) = 1 - |u| on |u| <= 1."""

    name = "triangular"

    def pdf(self, u):
        u = np.asarray(u, dtype=float)
        return np.maximum(0.0, 1.0 - np.abs(u))

    def cdf(self, u):
        u = np.clip(np.asarray(u, dtype=float), -1.0, 1.0)
        return np.where(u <= 0.0, 0.5 * (1.0 + u) ** 2, 1.0 - 0.5 * (1.0 - u) ** 2)


class Epanechnikov(Kernel):
    """K(u) = 3/4 (1 - u^2) on |u| <= 1."""

    name = "epanechnikov"

    def pdf(self, u):
        u = np.asarray(u, dtype=float)
        return 0.75 * np.maximum(0.0, 1.0 - u * u)

    def cdf(self, u):
        u = np.clip(np.asarray(u, dtype=float), -1.0, 1.0)
        return 0.5 + 0.25 * (3.0 * u - u**3)


class Quartic(Kernel):
    """Quartic (biweight) kernel, K(u) = 15/16 (1 - u^2)^2 on |u| <= 1."""

    name = "quartic"

    def pdf(self, u):
        u = np.asarray(u, dtype=float)
        return np.where(_inside(u), (15.0 / 16.0) * (1.0 - u * u) ** 2, 0.0)

    def cdf(self, u):
        u = np.clip(np.asarray(u, dtype=float), -1.0, 1.0)
        w = 0.5 + (15.0 / 16.0) * (u - 2.0 * u**3 / 3.0 + u**5 / 5.0)
        return np.clip(w, 0.0, 1.0)


class Triweight(Kernel):
    """K(u) = 35/32 (1 - u^2)^3 on |u| <= 1."""

    name = "triweight"

    def pdf(self, u):
        u = np.asarray(u, dtype=float)
        return np.where(_inside(u), (35.0 / 32.0) * (1.0 - u * u) ** 3, 0.0)

    def cdf(self, u):
        u = np.clip(np.asarray(u, dtype=float), -1.0, 1.0)
        w = 0.5 + (35.0 / 32.0) * (u - u**3 + 0.6 * u**5 - u**7 / 7.0)
        # rounding can overshoot [0, 1] by an ulp at u = +-1
        return np.clip(w, 0.0, 1.0)


class Gaussian(Kernel):
    """Standard normal kernel with unbounded support."""

    name = "gaussian"
    support = np.inf

    def pdf(self, u):
        u = np.asarray(u, dtype=float)
        # exp underflows to 0 for |u| > ~38, which is the correct limit
        return _INV_SQRT_2PI * np.exp(-0.5 * u * u)

    def cdf(self, u):
        return ndtr(np.asarray(u, dtype=float))


class Cosine(Kernel):
    """K(u) = pi/4 cos(pi u / 2) on |u| <= 1."""

    name = "cosine"

    def pdf(self, u):
        u = np.asarray(u, dtype=float)
        return np.where(_inside(u), 0.25 * np.pi * np.cos(0.5 * np.pi * u), 0.0)

    def cdf(self, u):
        u = np.clip(np.asarray(u, dtype=float), -1.0, 1.0)
        return 0.5 + 0.5 * np.sin(0.5 * np.pi * u)


KERNELS: dict[str, type[Kernel]] = {
    "uniform": Uniform,
    "triangular": Triangular,
    "epanechnikov": Epanechnikov,
    "epan": Epanechnikov,
    "quartic": Quartic,
    "biweight": Quartic,
    "triweight": Triweight,
    "gaussian": Gaussian,
    "gauss": Gaussian,
    "normal": Gaussian,
    "cosine": Cosine,
}


def get_kernel(kernel: str | Kernel) -> Kernel:
    """
    Resolve a kernel name or instance to a :class:`Kernel`.

    Parameters
    ----------
    kernel : str or Kernel
        One of the names in ``KERNELS`` (case-insensitive) or a kernel
        instance, which is returned unchanged.

    Returns
    -------
    Kernel
    """
    if isinstance(kernel, Kernel):
        return kernel
    if not isinstance(kernel, str):
        raise InvalidInputError(f"kernel must be a name or Kernel, got {kernel!r}")
    try:
        return KERNELS[kernel.lower()]()
    except KeyError:
        raise InvalidInputError(f"Unknown kernel: {kernel}") from None
