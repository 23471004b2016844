"""Domain-level interfaces defining contracts between the orchestrator and scoring."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel

from .models import QueryResult


class ScoreSummary(BaseModel):
    """Aggregated diagnostic view of scores produced during a window."""

    period: str
    total_scores: int
    zero_scores: int
    non_finite_scores: int
    average_score: float


class IResourceQuery(Protocol):
    """Resolves a resource key to a measurement. Owned by the orchestrator."""

    def query(self, key: str) -> QueryResult:
        """Return the metric for ``key`` or ``QueryResult.unavailable()``.

        Implementations must be call-bounded: a measurement that cannot be
        produced in time resolves to unavailable instead of blocking.
        """


class IScoringStrategy(Protocol):
    """Stateless function ranking a candidate target from its metrics."""

    def score(self, query: IResourceQuery) -> float:
        """Return a desirability score; higher is better, 0 means unusable."""

    def name(self) -> str:
        """Stable identifier used for binding and observability."""


class IScoringCall(Protocol):
    """Minimal view of a scoring invocation consumed by trackers."""

    @property
    def target(self) -> str: ...

    @property
    def strategy(self) -> str: ...


class IScoreTracker(Protocol):
    """Collects diagnostic score records for observability."""

    def track(self, call: IScoringCall, score: float) -> None:
        """Record the outcome of one scoring invocation."""

    def get_summary(self, period: str) -> ScoreSummary:
        """Retrieve aggregated diagnostics for the requested period label."""
