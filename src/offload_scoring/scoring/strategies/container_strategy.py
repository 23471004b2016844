"""Performance model for containerised targets that also weighs RTT."""

from __future__ import annotations

import logging
from typing import Optional

from offload_scoring.domain.interfaces import IResourceQuery
from offload_scoring.domain.models import (
    CPU_COUNT,
    CPU_FREQ,
    CPU_USAGE,
    NETWORK_BANDWIDTH,
    NETWORK_RTT,
)
from offload_scoring.scoring.transforms import (
    cpu_score,
    network_score,
    rtt_rendering_score,
)

from .base import IScoringStrategy


class ContainerStrategy(IScoringStrategy):
    """``network + cpu / 2 + rendering(rtt)``.

    Keys are queried in the order usage, count, freq, bandwidth, rtt. The
    first unavailable key ends the evaluation with ``0.0``.
    """

    QUERY_ORDER = (CPU_USAGE, CPU_COUNT, CPU_FREQ, NETWORK_BANDWIDTH, NETWORK_RTT)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def name(self) -> str:
        return "container"

    def score(self, query: IResourceQuery) -> float:
        values = {}
        for key in self.QUERY_ORDER:
            value = self._required(query, key)
            if value is None:
                return 0.0
            values[key] = value

        cpu = cpu_score(values[CPU_FREQ], values[CPU_USAGE], values[CPU_COUNT])
        network = network_score(values[NETWORK_BANDWIDTH])
        return network + cpu / 2 + rtt_rendering_score(values[NETWORK_RTT])

    def _required(self, query: IResourceQuery, key: str) -> Optional[float]:
        result = query.query(key)
        if not result.available:
            self._logger.debug(
                "metric_unavailable",
                extra={"key": key, "strategy": self.name()},
            )
            return None
        return result.value
