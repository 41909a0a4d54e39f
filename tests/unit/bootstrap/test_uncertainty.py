import pytest

from powerlaw_engine.bootstrap import uncertainty
from powerlaw_engine.distributions.models import PowerLaw
from powerlaw_engine.exceptions import ConfigValidationError
from powerlaw_engine.utils.rng import make_rng


def test_uncertainties_are_non_negative():
    data = PowerLaw(1.0, 2.5).sample_many(120, make_rng(31))
    spread = uncertainty(data, 8, rng=make_rng(32))
    assert spread.bootstrap_size == 8
    assert spread.exponent_std_dev >= 0.0
    assert spread.x_min_std_dev >= 0.0
    assert spread.tail_size_std_dev >= 0.0


def test_uncertainty_is_reproducible_with_seed():
    data = PowerLaw(1.0, 2.5).sample_many(60, make_rng(33))
    assert uncertainty(data, 5, rng=make_rng(7)) == uncertainty(data, 5, rng=make_rng(7))


def test_uncertainty_discrete_variant():
    data = PowerLaw(1, 2.5, "discrete").sample_many(40, make_rng(34))
    spread = uncertainty(data, 3, variant="discrete", rng=make_rng(35))
    assert spread.exponent_std_dev >= 0.0
    assert spread.degenerate_resamples == 0


def test_degenerate_replicates_are_counted(caplog):
    with caplog.at_level("WARNING"):
        spread = uncertainty([2.0] * 5, 4, rng=make_rng(36))
    assert spread.degenerate_resamples == 4
    assert spread.exponent_std_dev == 0.0
    assert spread.x_min_std_dev == 0.0
    assert any("Degenerate fits" in r.message for r in caplog.records)


@pytest.mark.parametrize("size", [0, -3, 2.5])
def test_bootstrap_size_must_be_positive_integer(size):
    with pytest.raises(ConfigValidationError):
        uncertainty([1.0, 2.0, 3.0], size)
