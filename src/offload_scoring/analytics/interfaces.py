"""Analytics contracts that separate record storage from aggregation logic."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field


class ScoreRecord(BaseModel):
    """Immutable record of one scoring invocation."""

    id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    target: str
    strategy: str
    score: float
    finite: bool = True

    model_config = ConfigDict(frozen=True)


class IScoreRepository(Protocol):
    """Storage contract for diagnostic score records."""

    def save(self, record: ScoreRecord) -> None:
        """Store the provided record."""

    def find_by_date(self, start: datetime, end: datetime) -> List[ScoreRecord]:
        """Return records whose timestamps fall within the inclusive window."""

    def find_by_target(self, target: str) -> List[ScoreRecord]:
        """Return records produced for the given candidate target."""


class IScoreAggregator(Protocol):
    """Derives diagnostic metrics from stored records."""

    def average_score(self, records: Sequence[ScoreRecord]) -> float:
        """Mean of the finite scores."""

    def count_zero_scores(self, records: Sequence[ScoreRecord]) -> int:
        """Number of records whose score is exactly zero."""

    def count_non_finite(self, records: Sequence[ScoreRecord]) -> int:
        """Number of records whose score is inf or nan."""

    def group_by_target(
        self, records: Sequence[ScoreRecord]
    ) -> Dict[str, List[ScoreRecord]]:
        """Bucket records by candidate target."""
