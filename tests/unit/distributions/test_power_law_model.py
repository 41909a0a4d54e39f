import math

import numpy as np
import pytest

from powerlaw_engine.distributions.models import FitResult, PowerLaw, Uncertainties, normalize_variant
from powerlaw_engine.distributions.validation import validate_sample
from powerlaw_engine.exceptions import DataValidationError, InsufficientDataError, InvalidParameterError
from powerlaw_engine.utils.rng import make_rng


def test_variant_aliases():
    assert normalize_variant("pareto") == "continuous"
    assert normalize_variant("Zeta") == "discrete"
    assert normalize_variant("discrete-approximate") == "discrete_approximate"
    with pytest.raises(InvalidParameterError):
        normalize_variant("lognormal")


def test_discrete_models_need_integer_cutoff():
    assert PowerLaw(3.0, 2.0, "discrete").x_min == 3
    with pytest.raises(InvalidParameterError):
        PowerLaw(2.5, 2.0, "discrete")
    with pytest.raises(InvalidParameterError):
        PowerLaw(0, 2.0, "discrete_approximate")
    with pytest.raises(InvalidParameterError):
        PowerLaw(-1.0, 2.0)


def test_models_are_immutable_values():
    model = PowerLaw(1.0, 2.5)
    assert model == PowerLaw(1, 2.5, "pareto")
    with pytest.raises(AttributeError):
        model.exponent = 3.0


def test_degenerate_flag():
    assert PowerLaw(1.0, math.inf).degenerate
    assert not PowerLaw(1.0, 2.0).degenerate


def test_single_sample_types():
    rng = make_rng(1)
    assert isinstance(PowerLaw(1.0, 2.5).sample(rng), float)
    assert isinstance(PowerLaw(1, 2.5, "discrete").sample(rng), int)
    with pytest.raises(InvalidParameterError):
        PowerLaw(1.0, 2.5).sample_many(-1, rng)


def test_generate_mixes_head_and_tail():
    model = PowerLaw(5.0, 2.5)
    observed = np.array([1.0, 2.0, 3.0, 5.0, 6.0, 7.0])
    draws = model.generate(observed, 400, make_rng(2))
    assert draws.shape == (400,)
    head = draws[draws < 5.0]
    assert set(head.tolist()) <= {1.0, 2.0, 3.0}
    assert 0 < head.size < 400


def test_to_dict_payloads():
    model = PowerLaw(2, 2.5, "discrete")
    result = FitResult(model=model, ks_distance=0.1, n=10, n_tail=6, log_likelihood=-12.0)
    payload = result.to_dict()
    assert payload["variant"] == "discrete"
    assert payload["x_min"] == 2
    assert payload["n_tail"] == 6
    assert payload["warnings"] == []
    assert result.exponent == 2.5
    spread = Uncertainties(0.1, 0.2, 0.3, bootstrap_size=5).to_dict()
    assert spread["degenerate_resamples"] == 0


def test_validate_sample():
    assert validate_sample([1, 2, 3], "discrete").dtype == np.int64
    assert validate_sample([0.5, 2.0], "continuous").dtype == float
    with pytest.raises(InsufficientDataError):
        validate_sample([], "continuous")
    with pytest.raises(DataValidationError):
        validate_sample([1.0, float("nan")], "continuous")
    with pytest.raises(DataValidationError):
        validate_sample([0.0, 1.0], "continuous")
    with pytest.raises(DataValidationError):
        validate_sample([1.5, 2.0], "discrete")
    with pytest.raises(DataValidationError):
        validate_sample([0, 2], "discrete_approximate")
    with pytest.raises(DataValidationError):
        validate_sample(["a", "b"], "continuous")
