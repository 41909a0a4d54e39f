import numpy as np
import pytest

from powerlaw_engine.distributions import discrete
from powerlaw_engine.distributions.models import PowerLaw
from powerlaw_engine.exceptions import InvalidParameterError
from powerlaw_engine.special import hurwitz_zeta
from powerlaw_engine.utils.rng import make_rng


def test_cdf_inverse_round_trip():
    model = PowerLaw(5, 2.5, "discrete")
    for i in range(5, 100):
        assert discrete.cdf_inverse(model, model.cdf_complement(i)) == i


@pytest.mark.parametrize(
    "x_min,exponent,values",
    [
        (3, 1.5, [161, 221, 241, 242, 243]),
        (3, 1.51, range(3, 303)),
        (3, 2.0, range(3, 303)),
        (20, 1.51, range(20, 320)),
        (1, 3.5, range(1, 120)),
        (7, 2.73, range(7, 307)),
    ],
)
def test_cdf_inverse_exact_tail_probability(x_min, exponent, values):
    model = PowerLaw(x_min, exponent, "discrete")
    for i in values:
        assert discrete.cdf_inverse(model, model.cdf_complement(i)) == i


def test_cdf_inverse_rejects_non_positive_probability():
    with pytest.raises(InvalidParameterError):
        discrete.cdf_inverse(PowerLaw(1, 2.0, "discrete"), 0.0)


def test_probabilities_normalised_by_hurwitz_zeta():
    model = PowerLaw(2, 2.0, "discrete")
    norm = hurwitz_zeta(2.0, 2.0)
    assert model.density(2) == pytest.approx(0.25 / norm)
    assert model.cdf_complement(2) == pytest.approx(1.0)
    assert model.cdf(3) == pytest.approx(1.0 - hurwitz_zeta(2.0, 3.0) / norm)


def test_samples_are_integers_above_x_min():
    draws = PowerLaw(3, 2.5, "discrete").sample_many(200, make_rng(3))
    assert draws.dtype == np.int64
    assert draws.min() >= 3


def test_cumulative_counts():
    counts = discrete.cumulative_counts(1, 5, np.array([1, 1, 3, 5]))
    assert counts.tolist() == [2, 2, 3, 3, 4]


def test_exponent_grid_is_inclusive():
    grid = discrete.exponent_grid(1.5, 3.5, 0.01)
    assert grid.size == 201
    assert grid[0] == 1.5
    assert grid[-1] == 3.5
    assert not grid.flags.writeable


def test_fit_exponent_recovers_true_value():
    draws = np.sort(PowerLaw(1, 2.5, "discrete").sample_many(1000, make_rng(21)))
    model = discrete.fit_at(draws, 1)
    assert model.x_min == 1
    assert model.exponent == pytest.approx(2.5, abs=0.15)


def test_ks_distance_by_hand():
    model = PowerLaw(1, 2.0, "discrete")
    zeta2 = np.pi ** 2 / 6.0
    expected = abs(1.0 - 1.25 / zeta2)
    assert model.ks_distance([1, 1, 2]) == pytest.approx(expected, rel=1e-9)
