"""Pure helpers deriving diagnostic metrics from score records."""

from __future__ import annotations

from typing import Dict, List, Sequence

from offload_scoring.analytics.interfaces import IScoreAggregator, ScoreRecord


class ScoreAggregator(IScoreAggregator):
    """Performs read-only calculations on score records."""

    def average_score(self, records: Sequence[ScoreRecord]) -> float:
        finite = [record.score for record in records if record.finite]
        if not finite:
            return 0.0
        return sum(finite) / len(finite)

    def count_zero_scores(self, records: Sequence[ScoreRecord]) -> int:
        return sum(1 for record in records if record.score == 0.0)

    def count_non_finite(self, records: Sequence[ScoreRecord]) -> int:
        return sum(1 for record in records if not record.finite)

    def group_by_target(
        self, records: Sequence[ScoreRecord]
    ) -> Dict[str, List[ScoreRecord]]:
        grouped: Dict[str, List[ScoreRecord]] = {}
        for record in records:
            grouped.setdefault(record.target, []).append(record)
        return grouped

    def group_by_strategy(
        self, records: Sequence[ScoreRecord]
    ) -> Dict[str, List[ScoreRecord]]:
        grouped: Dict[str, List[ScoreRecord]] = {}
        for record in records:
            grouped.setdefault(record.strategy, []).append(record)
        return grouped

    def calculate_percentiles(
        self, records: Sequence[ScoreRecord]
    ) -> Dict[str, float]:
        values = sorted(record.score for record in records if record.finite)
        if not values:
            return {"p50": 0.0, "p95": 0.0, "p99": 0.0}
        return {
            "p50": self._percentile(values, 0.5),
            "p95": self._percentile(values, 0.95),
            "p99": self._percentile(values, 0.99),
        }

    @staticmethod
    def _percentile(values: Sequence[float], quantile: float) -> float:
        index = (len(values) - 1) * quantile
        lower = int(index)
        upper = min(lower + 1, len(values) - 1)
        weight = index - lower
        return values[lower] * (1 - weight) + values[upper] * weight
