import numpy as np
import pytest

from powerlaw_engine.bootstrap import semiparametric_sample, significance, trials_for_epsilon
from powerlaw_engine.config import override_settings
from powerlaw_engine.distributions.models import PowerLaw
from powerlaw_engine.exceptions import ConfigValidationError
from powerlaw_engine.utils.rng import make_rng


@pytest.mark.parametrize("epsilon,trials", [(0.5, 1), (0.1, 25), (0.05, 100), (0.01, 2500), (0.3, 3)])
def test_trials_for_epsilon(epsilon, trials):
    assert trials_for_epsilon(epsilon) == trials


@pytest.mark.parametrize("epsilon", [0.0, 1.0, -0.1, 2.0])
def test_trials_for_epsilon_rejects_out_of_range(epsilon):
    with pytest.raises(ConfigValidationError):
        trials_for_epsilon(epsilon)


def test_exactly_one_of_trials_or_epsilon():
    data = [1.0, 2.0, 3.0]
    with pytest.raises(ConfigValidationError):
        significance(data)
    with pytest.raises(ConfigValidationError):
        significance(data, 10, epsilon=0.1)
    with pytest.raises(ConfigValidationError):
        significance(data, 0)


def test_p_value_is_a_fraction_and_reproducible():
    data = PowerLaw(1.0, 2.5).sample_many(80, make_rng(5))
    first = significance(data, 12, rng=make_rng(99))
    second = significance(data, 12, rng=make_rng(99))
    assert first == second
    assert 0.0 <= first <= 1.0
    assert first * 12 == pytest.approx(round(first * 12))


def test_epsilon_drives_trial_count():
    data = PowerLaw(1.0, 2.5).sample_many(50, make_rng(6))
    calls = []
    with override_settings(progress_interval=1):
        significance(data, epsilon=0.3, rng=make_rng(1), progress=lambda done, total: calls.append((done, total)))
    assert calls == [(1, 3), (2, 3)]


def test_progress_callback_cadence():
    data = PowerLaw(1.0, 2.5).sample_many(40, make_rng(7))
    calls = []
    with override_settings(progress_interval=2):
        significance(data, 5, rng=make_rng(2), progress=lambda done, total: calls.append((done, total)))
    assert calls == [(2, 5), (4, 5)]


def test_given_model_sets_the_threshold():
    data = PowerLaw(1.0, 2.5).sample_many(60, make_rng(8))
    # a badly wrong model is far from the data, so hardly any synthetic fit is worse
    wrong = PowerLaw(1.0, 6.0)
    assert wrong.significance(data, 10, rng=make_rng(3)) <= 0.2


def test_significance_on_discrete_data():
    data = PowerLaw(1, 2.5, "discrete").sample_many(40, make_rng(10))
    p_value = significance(data, 3, variant="discrete", rng=make_rng(4))
    assert p_value in (0.0, 1 / 3, 2 / 3, 1.0)


def test_semiparametric_sample_draws_head_from_observed():
    observed = np.array([1, 2, 3, 5, 6, 7, 9, 12])
    model = PowerLaw(5, 2.5, "discrete")
    draws = semiparametric_sample(model, observed, 500, make_rng(12))
    assert draws.dtype == np.int64
    head = draws[draws < 5]
    assert set(head.tolist()) <= {1, 2, 3}
    assert 100 < head.size < 280


def test_semiparametric_sample_without_head_is_pure_model():
    model = PowerLaw(2.0, 2.5)
    draws = semiparametric_sample(model, [2.0, 3.0, 10.0], 50, make_rng(14))
    assert draws.dtype == float
    assert draws.min() >= 2.0
