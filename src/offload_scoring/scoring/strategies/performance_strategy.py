"""Non-linear performance model combining network and CPU power laws."""

from __future__ import annotations

import logging
from typing import Optional

from offload_scoring.domain.interfaces import IResourceQuery
from offload_scoring.domain.models import (
    CPU_COUNT,
    CPU_FREQ,
    CPU_USAGE,
    NETWORK_BANDWIDTH,
)
from offload_scoring.scoring.transforms import cpu_score, network_score

from .base import IScoringStrategy


class PerformanceStrategy(IScoringStrategy):
    """Mean of the network sub-score and the CPU sub-score.

    The bandwidth and all three CPU metrics are required. The first metric
    that cannot be resolved ends the evaluation with a score of ``0.0``;
    later keys are not queried.
    """

    CPU_KEYS = (CPU_FREQ, CPU_USAGE, CPU_COUNT)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def name(self) -> str:
        return "performance"

    def score(self, query: IResourceQuery) -> float:
        bandwidth = self._required(query, NETWORK_BANDWIDTH)
        if bandwidth is None:
            return 0.0
        network = network_score(bandwidth)

        cpu_values = []
        for key in self.CPU_KEYS:
            value = self._required(query, key)
            if value is None:
                return 0.0
            cpu_values.append(value)
        freq, usage, count = cpu_values

        return (network + cpu_score(freq, usage, count)) / 2

    def _required(self, query: IResourceQuery, key: str) -> Optional[float]:
        result = query.query(key)
        if not result.available:
            self._logger.debug(
                "metric_unavailable",
                extra={"key": key, "strategy": self.name()},
            )
            return None
        return result.value
