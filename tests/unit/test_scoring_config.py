import json
from pathlib import Path

import pytest

from offload_scoring.core.config import ScoringConfig
from offload_scoring.domain.exceptions import ConfigurationError
from offload_scoring.domain.models import MissingMetricPolicy


def test_scoring_config_defaults():
    config = ScoringConfig()
    assert config.default_strategy == "performance"
    assert config.policy is MissingMetricPolicy.ABORT
    assert config.enable_tracking is True
    assert config.tracker_capacity == 1000
    assert config.custom_weights == {}


def test_scoring_config_from_env(monkeypatch):
    monkeypatch.setenv("SCORING_DEFAULT_STRATEGY", "weighted_sum")
    monkeypatch.setenv("SCORING_MISSING_POLICY", "ZERO")
    monkeypatch.setenv("SCORING_ENABLE_TRACKING", "off")
    monkeypatch.setenv("SCORING_TRACKER_CAPACITY", "50")
    monkeypatch.setenv("SCORING_QUERY_TIMEOUT_SECONDS", "0.5")
    monkeypatch.setenv("SCORING_CUSTOM_WEIGHTS", "cpu/usage=1.5, memory/free=2")

    config = ScoringConfig.from_env()

    assert config.default_strategy == "weighted_sum"
    assert config.policy is MissingMetricPolicy.ZERO
    assert config.enable_tracking is False
    assert config.tracker_capacity == 50
    assert config.query_timeout_seconds == 0.5
    assert list(config.custom_weights.items()) == [
        ("cpu/usage", 1.5),
        ("memory/free", 2.0),
    ]


def test_scoring_config_from_env_rejects_malformed_weights(monkeypatch):
    monkeypatch.setenv("SCORING_CUSTOM_WEIGHTS", "cpu/usage")

    with pytest.raises(ConfigurationError):
        ScoringConfig.from_env()


def test_scoring_config_from_env_rejects_bad_integer(monkeypatch):
    monkeypatch.setenv("SCORING_TRACKER_CAPACITY", "many")

    with pytest.raises(ConfigurationError):
        ScoringConfig.from_env()


def test_scoring_config_from_file_json(tmp_path: Path):
    data = {
        "default_strategy": "weighted_sum_compact",
        "missing_policy": "zero",
        "tracker_capacity": 10,
    }
    path = tmp_path / "scoring.json"
    path.write_text(json.dumps(data))

    config = ScoringConfig.from_file(str(path))

    assert config.default_strategy == "weighted_sum_compact"
    assert config.policy is MissingMetricPolicy.ZERO
    assert config.tracker_capacity == 10
    assert config.enable_tracking is True


def test_scoring_config_from_file_yaml(tmp_path: Path):
    yaml = pytest.importorskip("yaml")
    data = {
        "default_strategy": "custom_weighted",
        "custom_weights": {"network/bandwidth": 0.5, "cpu/count": 3.0},
        "query_timeout_seconds": 1.5,
    }
    path = tmp_path / "scoring.yaml"
    path.write_text(yaml.safe_dump(data, sort_keys=False))

    config = ScoringConfig.from_file(str(path))

    assert config.default_strategy == "custom_weighted"
    assert list(config.custom_weights) == ["network/bandwidth", "cpu/count"]
    assert config.query_timeout_seconds == 1.5


def test_scoring_config_from_file_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        ScoringConfig.from_file(str(tmp_path / "absent.json"))


def test_scoring_config_from_file_rejects_unknown_format(tmp_path: Path):
    path = tmp_path / "scoring.ini"
    path.write_text("[scoring]")

    with pytest.raises(ConfigurationError):
        ScoringConfig.from_file(str(path))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_strategy": " "},
        {"missing_policy": "ignore"},
        {"tracker_capacity": 0},
        {"query_timeout_seconds": 0},
        {"custom_weights": {"cpu/usage": float("inf")}},
        {"custom_weights": {"": 1.0}},
        {"custom_weights": {"cpu/usage": True}},
        {"tracker_capacity": "10"},
        {"tracker_capacity": 10.5},
        {"query_timeout_seconds": "fast"},
        {"enable_tracking": "yes"},
    ],
)
def test_scoring_config_validate_rejects_invalid_values(kwargs):
    with pytest.raises(ConfigurationError):
        ScoringConfig(**kwargs)


def test_scoring_config_accepts_policy_enum():
    config = ScoringConfig(missing_policy=MissingMetricPolicy.ZERO)

    assert config.policy is MissingMetricPolicy.ZERO


def test_scoring_config_from_file_rejects_string_typed_numbers(tmp_path: Path):
    path = tmp_path / "scoring.json"
    path.write_text(json.dumps({"tracker_capacity": "10"}))

    with pytest.raises(ConfigurationError):
        ScoringConfig.from_file(str(path))
