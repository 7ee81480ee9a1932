"""
Tests for detector/config.py — validation, environment loading, overrides.
"""
import pytest
from detector.config import ConfigError, DetectorConfig
from detector.patterns import BASE64_CHARS


def test_defaults():
    config = DetectorConfig()
    assert config.alphabet == BASE64_CHARS
    assert config.min_secret_length == 20
    assert config.entropy_threshold == 4.5
    assert config.aggressive is False
    assert len(config.charset) == 65


@pytest.mark.parametrize("kwargs", [
    {"alphabet": ""},
    {"min_secret_length": 0},
    {"min_secret_length": -5},
    {"min_secret_length": "20"},
    {"entropy_threshold": 0},
    {"entropy_threshold": -1.0},
    {"entropy_threshold": "4.5"},
    {"entropy_threshold": float("nan")},
    {"entropy_threshold": float("inf")},
    {"aggressive": "false"},
    {"aggressive": 1},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ConfigError):
        DetectorConfig(**kwargs)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_config_is_frozen():
    config = DetectorConfig()
    with pytest.raises(AttributeError):
        config.min_secret_length = 5


def test_duplicate_alphabet_symbols_collapsed():
    config = DetectorConfig(alphabet="aabbc")
    assert config.alphabet == "abc"
    assert config.charset == frozenset("abc")


def test_from_env_defaults():
    assert DetectorConfig.from_env({}) == DetectorConfig()


def test_from_env_values():
    config = DetectorConfig.from_env({
        "COMMITLENS_MIN_SECRET_LENGTH": "16",
        "COMMITLENS_ENTROPY_THRESHOLD": "4.0",
        "COMMITLENS_AGGRESSIVE": "yes",
    })
    assert config.min_secret_length == 16
    assert config.entropy_threshold == 4.0
    assert config.aggressive is True


def test_from_env_bad_number():
    with pytest.raises(ConfigError):
        DetectorConfig.from_env({"COMMITLENS_ENTROPY_THRESHOLD": "high"})


def test_with_overrides_skips_none():
    config = DetectorConfig().with_overrides(min_secret_length=None, entropy_threshold=3.5)
    assert config.min_secret_length == 20
    assert config.entropy_threshold == 3.5


def test_with_overrides_validates():
    with pytest.raises(ConfigError):
        DetectorConfig().with_overrides(min_secret_length=0)


def test_from_env_nan_threshold_rejected():
    with pytest.raises(ConfigError):
        DetectorConfig.from_env({"COMMITLENS_ENTROPY_THRESHOLD": "nan"})


def test_with_overrides_rejects_non_bool_aggressive():
    with pytest.raises(ConfigError):
        DetectorConfig().with_overrides(aggressive="false")
