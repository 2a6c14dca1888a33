import numpy as np
import pytest
from scipy.integrate import trapezoid

from kernel_density.errors import InvalidInputError
from kernel_density.kernels import (
    KERNELS,
    Epanechnikov,
    Gaussian,
    Kernel,
    Uniform,
    get_kernel,
)

NAMES = ["uniform", "triangular", "epanechnikov", "quartic", "triweight", "gaussian", "cosine"]


@pytest.mark.parametrize("name", NAMES)
def test_kernel_integrates_to_one(name):
    k = get_kernel(name)
    lim = 8.0 if np.isinf(k.support) else 1.5
    u = np.linspace(-lim, lim, 60001)
    assert abs(trapezoid(k.pdf(u), u) - 1.0) < 1e-3


@pytest.mark.parametrize("name", NAMES)
def test_kernel_symmetric_and_non_negative(name):
    k = get_kernel(name)
    u = np.linspace(-3, 3, 601)
    assert np.all(k.pdf(u) >= 0)
    assert np.allclose(k.pdf(u), k.pdf(-u))


@pytest.mark.parametrize("name", NAMES)
def test_cumulative_kernel_limits_and_monotone(name):
    k = get_kernel(name)
    u = np.linspace(-10, 10, 4001)
    w = k.cdf(u)
    assert np.all(np.diff(w) >= 0)
    assert np.all((w >= 0) & (w <= 1))
    assert k.cdf(-1e6) == pytest.approx(0.0, abs=1e-12)
    assert k.cdf(1e6) == pytest.approx(1.0, abs=1e-12)
    assert k.cdf(0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("name", NAMES)
def test_cumulative_kernel_derivative_matches_kernel(name):
    k = get_kernel(name)
    # stay clear of the uniform kernel's jumps at +-1
    u = np.concatenate([np.linspace(-0.95, 0.95, 39), [-2.5, 1.7, 3.0]])
    eps = 1e-5
    deriv = (k.cdf(u + eps) - k.cdf(u - eps)) / (2 * eps)
    assert np.allclose(deriv, k.pdf(u), atol=1e-5)


def test_compact_kernels_vanish_outside_support():
    for name in NAMES[:-2] + ["cosine"]:
        k = get_kernel(name)
        assert np.all(k.pdf(np.array([-1.01, 1.01, 5.0, -40.0])) == 0.0)


def test_specific_kernel_values():
    assert Uniform().pdf(1.0) == 0.5
    assert Epanechnikov().pdf(0.0) == pytest.approx(0.75)
    assert get_kernel("quartic").pdf(0.0) == pytest.approx(15 / 16)
    assert get_kernel("triweight").pdf(0.0) == pytest.approx(35 / 32)
    assert get_kernel("cosine").pdf(0.0) == pytest.approx(np.pi / 4)
    assert Gaussian().pdf(0.0) == pytest.approx(1 / np.sqrt(2 * np.pi))
    assert get_kernel("triangular").cdf(0.5) == pytest.approx(0.875)


def test_gaussian_far_tail_is_zero_not_nan():
    k = Gaussian()
    assert k.pdf(1e4) == 0.0
    assert np.isfinite(k.cdf(-1e4))


def test_get_kernel_aliases_and_instances():
    assert get_kernel("Biweight") == get_kernel("quartic")
    assert isinstance(get_kernel("gauss"), Gaussian)
    inst = Epanechnikov()
    assert get_kernel(inst) is inst
    assert set(NAMES) <= set(KERNELS)


def test_get_kernel_unknown():
    with pytest.raises(InvalidInputError):
        get_kernel("parabolic")
    with pytest.raises(ValueError):
        get_kernel(3)


def test_kernel_without_cumulative_form_cannot_be_built():
    class Half(Kernel):
        name = "half"

        def pdf(self, u):
            return np.zeros_like(u)

    with pytest.raises(TypeError):
        Half()
