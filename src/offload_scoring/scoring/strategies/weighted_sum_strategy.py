"""Linear weighted-sum scoring over an ordered list of resource keys."""

from __future__ import annotations

import logging

from offload_scoring.domain.interfaces import IResourceQuery
from offload_scoring.domain.models import MissingMetricPolicy, WeightProfile

from .base import IScoringStrategy


class WeightedSumStrategy(IScoringStrategy):
    """Sums ``value * weight`` over the keys of a ``WeightProfile``.

    With ``MissingMetricPolicy.ABORT`` the first unavailable key ends the
    evaluation with ``0.0`` and no further keys are queried. With
    ``MissingMetricPolicy.ZERO`` every key is queried and missing keys
    contribute nothing.
    """

    def __init__(
        self,
        profile: WeightProfile,
        *,
        name: str = "weighted_sum",
        logger: logging.Logger | None = None,
    ) -> None:
        self._profile = profile
        self._name = name
        self._logger = logger or logging.getLogger(__name__)

    @property
    def profile(self) -> WeightProfile:
        return self._profile

    def name(self) -> str:
        return self._name

    def score(self, query: IResourceQuery) -> float:
        abort = self._profile.policy is MissingMetricPolicy.ABORT
        total = 0.0
        for key, weight in zip(self._profile.keys, self._profile.weights):
            result = query.query(key)
            if not result.available:
                self._logger.debug(
                    "metric_unavailable",
                    extra={
                        "key": key,
                        "strategy": self._name,
                        "policy": self._profile.policy.value,
                    },
                )
                if abort:
                    return 0.0
                continue
            total += result.value * weight
        return total
