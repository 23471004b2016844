"""Scoring strategy protocol shared by all strategy variants."""

from __future__ import annotations

from typing import Protocol

from offload_scoring.domain.interfaces import IResourceQuery


class IScoringStrategy(Protocol):
    """Scores a candidate execution target from its resource metrics."""

    def score(self, query: IResourceQuery) -> float:
        """Return a non-negative score where higher means more desirable."""

    def name(self) -> str:
        """Stable identifier used for registry binding and observability."""
