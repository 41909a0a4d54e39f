import pytest

from powerlaw_engine.config import EngineSettings, configure, get_settings, override_settings
from powerlaw_engine.config.loader import load_config_with_precedence, parse_bool
from powerlaw_engine.config.settings import load_settings
from powerlaw_engine.exceptions import ConfigValidationError


def test_defaults():
    settings = load_settings(environ={})
    assert settings.ks_correct is True
    assert settings.alpha_min == 1.5
    assert settings.alpha_max == 3.5
    assert settings.alpha_step == 0.01
    assert settings.random_seed == 42


def test_environment_overrides_defaults():
    settings = load_settings(environ={"POWERLAW_KS_CORRECT": "0", "POWERLAW_ALPHA_MAX": "4.0"})
    assert settings.ks_correct is False
    assert settings.alpha_max == 4.0


def test_explicit_overrides_beat_environment():
    settings = load_settings({"random_seed": 7, "alpha_min": None}, environ={"POWERLAW_RANDOM_SEED": "3"})
    assert settings.random_seed == 7
    assert settings.alpha_min == 1.5


def test_invalid_environment_value():
    with pytest.raises(ConfigValidationError):
        load_settings(environ={"POWERLAW_KS_CORRECT": "maybe"})


def test_unknown_override_rejected():
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(env_prefix="X_", defaults={"a": 1}, casters={}, overrides={"b": 2}, environ={})
    with pytest.raises(ConfigValidationError):
        configure(ks_corect=False)


@pytest.mark.parametrize(
    "fields",
    [{"alpha_step": 0.0}, {"alpha_min": 3.0, "alpha_max": 2.0}, {"progress_interval": 0}, {"random_seed": -1}],
)
def test_settings_validation(fields):
    with pytest.raises(ConfigValidationError):
        EngineSettings(**fields)


def test_override_settings_restores_previous():
    before = get_settings()
    with override_settings(ks_correct=not before.ks_correct) as inside:
        assert get_settings() is inside
        assert inside.ks_correct is not before.ks_correct
    assert get_settings() is before


def test_round_trip_dict():
    settings = EngineSettings(ks_correct=False, random_seed=5)
    assert EngineSettings.from_dict(settings.to_dict()) == settings


def test_parse_bool():
    assert parse_bool("yes") is True
    assert parse_bool("OFF") is False
    with pytest.raises(ValueError):
        parse_bool("2")
