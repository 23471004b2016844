"""Scoring configuration management helpers."""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from offload_scoring.domain.exceptions import ConfigurationError
from offload_scoring.domain.models import MissingMetricPolicy


def _str_to_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _str_to_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid integer value: {value}") from exc


def _str_to_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid float value: {value}") from exc


def _parse_weights(raw: str | None) -> Dict[str, float]:
    """Parse ``key=weight,key=weight`` preserving order."""
    if not raw or not raw.strip():
        return {}
    weights: Dict[str, float] = {}
    for item in raw.split(","):
        if not item.strip():
            continue
        key, sep, weight = item.partition("=")
        if not sep or not key.strip():
            raise ConfigurationError(f"Invalid weight entry: {item.strip()}")
        weights[key.strip()] = _str_to_float(weight.strip(), 0.0)
    return weights


@dataclass(frozen=True)
class ScoringConfig:
    """Immutable configuration object loaded from env or files."""

    default_strategy: str = "performance"
    missing_policy: str = MissingMetricPolicy.ABORT.value
    enable_tracking: bool = True
    tracker_capacity: int = 1000
    query_timeout_seconds: float = 2.0
    custom_weights: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.validate()

    @property
    def policy(self) -> MissingMetricPolicy:
        return MissingMetricPolicy(self._policy_value())

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        defaults = cls()
        weights_raw = os.getenv("SCORING_CUSTOM_WEIGHTS")
        config = cls(
            default_strategy=os.getenv(
                "SCORING_DEFAULT_STRATEGY", defaults.default_strategy
            ),
            missing_policy=os.getenv("SCORING_MISSING_POLICY", defaults.missing_policy),
            enable_tracking=_str_to_bool(
                os.getenv("SCORING_ENABLE_TRACKING"), defaults.enable_tracking
            ),
            tracker_capacity=_str_to_int(
                os.getenv("SCORING_TRACKER_CAPACITY"), defaults.tracker_capacity
            ),
            query_timeout_seconds=_str_to_float(
                os.getenv("SCORING_QUERY_TIMEOUT_SECONDS"),
                defaults.query_timeout_seconds,
            ),
            custom_weights=(
                _parse_weights(weights_raw)
                if weights_raw is not None
                else defaults.custom_weights
            ),
        )
        return config

    @classmethod
    def from_file(cls, path: str) -> "ScoringConfig":
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        raw = file_path.read_text()
        data: Dict[str, Any]
        suffix = file_path.suffix.lower()
        if suffix == ".json":
            data = json.loads(raw)
        elif suffix in {".yaml", ".yml"}:
            data = cls._load_yaml(raw)
        else:
            raise ConfigurationError("Unsupported config format. Use JSON or YAML.")
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a mapping")
        return cls(**cls._merge_with_defaults(data))

    def validate(self) -> None:
        if not isinstance(self.default_strategy, str) or not self.default_strategy.strip():
            raise ConfigurationError("default_strategy must be a non-empty string")
        allowed = {policy.value for policy in MissingMetricPolicy}
        if self._policy_value() not in allowed:
            raise ConfigurationError(f"missing_policy must be one of {sorted(allowed)}")
        if not isinstance(self.enable_tracking, bool):
            raise ConfigurationError("enable_tracking must be a boolean")
        if isinstance(self.tracker_capacity, bool) or not isinstance(
            self.tracker_capacity, int
        ):
            raise ConfigurationError("tracker_capacity must be an integer")
        if isinstance(self.query_timeout_seconds, bool) or not isinstance(
            self.query_timeout_seconds, (int, float)
        ):
            raise ConfigurationError("query_timeout_seconds must be a number")
        if self.tracker_capacity <= 0:
            raise ConfigurationError("tracker_capacity must be greater than zero")
        if self.query_timeout_seconds <= 0:
            raise ConfigurationError("query_timeout_seconds must be greater than zero")
        if not isinstance(self.custom_weights, dict):
            raise ConfigurationError("custom_weights must be a mapping")
        for key, weight in self.custom_weights.items():
            if not isinstance(key, str) or not key.strip():
                raise ConfigurationError("custom_weights keys must be non-empty strings")
            if (
                isinstance(weight, bool)
                or not isinstance(weight, (int, float))
                or not math.isfinite(weight)
            ):
                raise ConfigurationError(
                    f"custom weight for '{key}' must be a finite number"
                )

    def _policy_value(self) -> str:
        if isinstance(self.missing_policy, MissingMetricPolicy):
            return self.missing_policy.value
        return str(self.missing_policy).strip().lower()

    @classmethod
    def _merge_with_defaults(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        defaults = cls()
        merged = {
            "default_strategy": data.get("default_strategy", defaults.default_strategy),
            "missing_policy": data.get("missing_policy", defaults.missing_policy),
            "enable_tracking": data.get("enable_tracking", defaults.enable_tracking),
            "tracker_capacity": data.get("tracker_capacity", defaults.tracker_capacity),
            "query_timeout_seconds": data.get(
                "query_timeout_seconds", defaults.query_timeout_seconds
            ),
            "custom_weights": data.get("custom_weights", defaults.custom_weights),
        }
        return merged

    @staticmethod
    def _load_yaml(raw: str) -> Dict[str, Any]:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to parse YAML config files") from exc
        return yaml.safe_load(raw) or {}
