"""Domain value objects describing resource metrics and scoring inputs."""

from __future__ import annotations

import math
from enum import Enum
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

CPU_USAGE = "cpu/usage"
CPU_COUNT = "cpu/count"
CPU_FREQ = "cpu/freq"
MEMORY_FREE = "memory/free"
MEMORY_AVAILABLE = "memory/available"
NETWORK_MBPS = "network/mbps"
NETWORK_BANDWIDTH = "network/bandwidth"
NETWORK_RTT = "network/rtt"

WELL_KNOWN_KEYS: Tuple[str, ...] = (
    CPU_USAGE,
    CPU_COUNT,
    CPU_FREQ,
    MEMORY_FREE,
    MEMORY_AVAILABLE,
    NETWORK_MBPS,
    NETWORK_BANDWIDTH,
    NETWORK_RTT,
)


class QueryResult(BaseModel):
    """Outcome of a single resource query: a value or ``unavailable``."""

    model_config = ConfigDict(frozen=True)

    value: Optional[float] = None
    available: bool = False

    @model_validator(mode="after")
    def validate_tag(self) -> "QueryResult":
        if self.available and self.value is None:
            raise ValueError("available results must carry a value")
        if not self.available and self.value is not None:
            raise ValueError("unavailable results must not carry a value")
        return self

    @classmethod
    def ok(cls, value: float) -> "QueryResult":
        return cls(value=float(value), available=True)

    @classmethod
    def unavailable(cls) -> "QueryResult":
        return cls()


class MissingMetricPolicy(str, Enum):
    """How a weighted-sum strategy treats a key that cannot be resolved."""

    ABORT = "abort"
    ZERO = "zero"


class WeightProfile(BaseModel):
    """Ordered resource keys with a parallel vector of weights."""

    model_config = ConfigDict(frozen=True)

    keys: Tuple[str, ...] = Field(..., min_length=1)
    weights: Tuple[float, ...] = Field(..., min_length=1)
    policy: MissingMetricPolicy = MissingMetricPolicy.ABORT

    @model_validator(mode="after")
    def validate_vectors(self) -> "WeightProfile":
        if len(self.keys) != len(self.weights):
            raise ValueError(
                f"keys and weights must have the same length "
                f"({len(self.keys)} != {len(self.weights)})"
            )
        if any(not key or not key.strip() for key in self.keys):
            raise ValueError("resource keys must be non-empty strings")
        if not all(math.isfinite(weight) for weight in self.weights):
            raise ValueError("weights must be finite numbers")
        return self

    @classmethod
    def from_mapping(
        cls,
        weights: Mapping[str, float],
        policy: MissingMetricPolicy = MissingMetricPolicy.ABORT,
    ) -> "WeightProfile":
        """Build a profile preserving the mapping's insertion order."""

        return cls(
            keys=tuple(weights.keys()),
            weights=tuple(float(value) for value in weights.values()),
            policy=policy,
        )

    def with_policy(self, policy: MissingMetricPolicy) -> "WeightProfile":
        return self.model_copy(update={"policy": policy})


FULL_PROFILE = WeightProfile(
    keys=(
        CPU_USAGE,
        CPU_COUNT,
        MEMORY_FREE,
        MEMORY_AVAILABLE,
        NETWORK_MBPS,
        NETWORK_BANDWIDTH,
    ),
    weights=(1.48271, 4.125421, 5.3381723, 9.194717234, 2.323, 1.123),
)

COMPACT_PROFILE = WeightProfile(
    keys=(CPU_USAGE, CPU_COUNT, MEMORY_FREE, MEMORY_AVAILABLE),
    weights=(1.48271, 4.125421, 5.3381723, 9.194717234),
)
