import numpy as np
import pytest

from kernel_density.cv import LikelihoodCVScorer


@pytest.mark.parametrize("folds", [2, 10])
def test_scorer_valid_folds(folds):
    x = np.arange(10, dtype=float)
    scorer = LikelihoodCVScorer(x, folds=folds)
    nll = scorer.score(h=1.0)
    assert np.isfinite(nll)
    assert scorer.evals == folds


def test_scorer_invalid_folds():
    x = np.arange(5, dtype=float)
    for bad_folds in [0, 1, 6]:
        with pytest.raises(ValueError):
            LikelihoodCVScorer(x, folds=bad_folds)


def test_compact_kernel_score_is_finite_when_points_fall_outside():
    x = np.array([0.0, 0.1, 0.2, 50.0, 50.1, 50.2])
    scorer = LikelihoodCVScorer(x, folds=2, kernel="epanechnikov")
    assert np.isfinite(scorer.score(0.01))


def test_oversmoothing_scores_worse():
    rng = np.random.default_rng(3)
    x = rng.normal(size=200)
    scorer = LikelihoodCVScorer(x, folds=5)
    assert scorer.score(0.4) < scorer.score(5.0)
