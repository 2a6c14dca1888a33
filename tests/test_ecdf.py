import numpy as np
import pytest

from kernel_density import Ecdf, InvalidInputError, ecdf, p, percentile, rank


@pytest.fixture
def samples():
    return [9.0, 8.0, 7.0, 6.0, 5.0, 4.0, 3.0, 2.0, 1.0, 0.0]


def test_empty_sample_fails():
    with pytest.raises(InvalidInputError):
        Ecdf([])
    with pytest.raises(InvalidInputError):
        ecdf([], 0.0)


def test_value_counts_ties_and_steps(samples):
    e = Ecdf(samples + [4.0, 4.0])
    assert e.value(4.0) == pytest.approx(7 / 12)
    assert e.value(3.5) == pytest.approx(4 / 12)
    assert e.value(-1.0) == 0.0
    assert e.value(9.0) == 1.0
    assert ecdf(samples + [4.0, 4.0], 4.0) == e.value(4.0)


def test_single_use_and_multiple_use_agree():
    rng = np.random.default_rng(6)
    x = rng.integers(0, 20, size=200).astype(float)
    e = Ecdf(x)
    t = np.arange(-1, 21, 0.5)
    assert np.allclose(e.value(t), ecdf(x, t))
    assert np.all(np.diff(e.value(t)) >= 0)


def test_min_max_and_len(samples):
    e = Ecdf(samples)
    assert e.min() == 0.0
    assert e.max() == 9.0
    assert len(e) == 10


def test_rank(samples):
    e = Ecdf(samples)
    for r in range(1, 11):
        assert e.rank(r) == r - 1
        assert rank(samples, r) == r - 1
    for bad in [0, 11, 1.5]:
        with pytest.raises(InvalidInputError):
            e.rank(bad)
        with pytest.raises(InvalidInputError):
            rank(samples, bad)


def test_p_and_percentile(samples):
    e = Ecdf(samples)
    assert e.p(1.0) == 9.0
    assert e.p(0.05) == 0.0
    assert e.p(0.3) == 2.0
    assert e.percentile(30) == 2.0
    assert e.percentile(50) == 4.0
    assert p(samples, 0.3) == e.p(0.3)
    assert percentile(samples, 100) == 9.0


@pytest.mark.parametrize("bad", [0.0, -0.5, 1.01])
def test_p_out_of_range(samples, bad):
    with pytest.raises(InvalidInputError):
        Ecdf(samples).p(bad)
    with pytest.raises(InvalidInputError):
        p(samples, bad)


def test_percentile_out_of_range(samples):
    with pytest.raises(InvalidInputError):
        Ecdf(samples).percentile(0)
    with pytest.raises(InvalidInputError):
        percentile(samples, 100.5)


def test_percentile_is_inverse_of_value():
    rng = np.random.default_rng(7)
    x = rng.normal(size=57)
    e = Ecdf(x)
    for q in [1, 10, 33.3, 50, 99, 100]:
        v = e.percentile(q)
        assert e.value(v) >= q / 100 - 1e-12


def test_caller_sample_is_not_sorted_in_place(samples):
    data = np.array(samples)
    Ecdf(data)
    rank(data, 3)
    assert list(data) == samples


@pytest.mark.parametrize("bad", [None, "half"])
def test_non_numeric_proportion_and_percentile(samples, bad):
    e = Ecdf(samples)
    with pytest.raises(InvalidInputError):
        e.p(bad)
    with pytest.raises(InvalidInputError):
        e.percentile(bad)
    with pytest.raises(InvalidInputError):
        p(samples, bad)
