"""Score tracking facade that coordinates repository + aggregator."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from offload_scoring.analytics.aggregator import ScoreAggregator
from offload_scoring.analytics.interfaces import (
    IScoreAggregator,
    IScoreRepository,
    ScoreRecord,
)
from offload_scoring.domain.interfaces import IScoreTracker, IScoringCall, ScoreSummary


class ScoreTracker(IScoreTracker):
    """Records diagnostic score events and produces windowed summaries."""

    PERIOD_WINDOWS = {
        "last_hour": timedelta(hours=1),
        "last_24_hours": timedelta(days=1),
        "last_7_days": timedelta(days=7),
    }

    def __init__(
        self,
        repository: IScoreRepository,
        aggregator: IScoreAggregator | None = None,
    ) -> None:
        self._repository = repository
        self._aggregator = aggregator or ScoreAggregator()

    def track(self, call: IScoringCall, score: float) -> None:
        record = ScoreRecord(
            id=str(uuid4()),
            timestamp=datetime.now(timezone.utc),
            target=call.target,
            strategy=call.strategy,
            score=score,
            finite=math.isfinite(score),
        )
        self._repository.save(record)

    def get_summary(self, period: str = "last_24_hours") -> ScoreSummary:
        start, end = self._period_window(period)
        records = self._repository.find_by_date(start, end)
        return ScoreSummary(
            period=period,
            total_scores=len(records),
            zero_scores=self._aggregator.count_zero_scores(records),
            non_finite_scores=self._aggregator.count_non_finite(records),
            average_score=self._aggregator.average_score(records),
        )

    def to_dataframe(self, period: str = "last_24_hours") -> Any:
        """Export the records of ``period`` to a pandas DataFrame."""

        try:
            import pandas as pd  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pandas is required for dataframe export") from exc

        start, end = self._period_window(period)
        records = self._repository.find_by_date(start, end)
        data = [record.model_dump() for record in records]
        return pd.DataFrame(data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _period_window(self, period: str) -> tuple[datetime, datetime]:
        delta = self.PERIOD_WINDOWS.get(period)
        if delta is None:
            raise ValueError(f"Unsupported period '{period}'")
        end = datetime.now(timezone.utc)
        start = end - delta
        return start, end
