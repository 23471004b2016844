"""Middleware system for scoring cross-cutting concerns."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Callable, Protocol, Sequence

from offload_scoring.domain.interfaces import IResourceQuery, IScoreTracker
from offload_scoring.domain.models import QueryResult


@dataclass(frozen=True)
class ScoringCall:
    """One scoring invocation; created per call and never shared."""

    target: str
    strategy: str
    query: IResourceQuery


class IScoringMiddleware(Protocol):
    """Protocol describing middleware hooks."""

    def process_call(self, call: ScoringCall) -> ScoringCall: ...

    def process_score(self, call: ScoringCall, score: float) -> float: ...


class LoggingResourceQuery(IResourceQuery):
    """Decorates a resource query with per-key debug logging."""

    def __init__(
        self, inner: IResourceQuery, target: str, logger: logging.Logger
    ) -> None:
        self._inner = inner
        self._target = target
        self._logger = logger

    def query(self, key: str) -> QueryResult:
        result = self._inner.query(key)
        self._logger.debug(
            "resource_query",
            extra={
                "target": self._target,
                "key": key,
                "available": result.available,
                "value": result.value,
            },
        )
        return result


class LoggingMiddleware(IScoringMiddleware):
    """Logs scoring invocations, their resource queries and results."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def process_call(self, call: ScoringCall) -> ScoringCall:
        self._logger.info(
            "scoring_request",
            extra={"target": call.target, "strategy": call.strategy},
        )
        return replace(
            call, query=LoggingResourceQuery(call.query, call.target, self._logger)
        )

    def process_score(self, call: ScoringCall, score: float) -> float:
        self._logger.info(
            "scoring_result",
            extra={"target": call.target, "strategy": call.strategy, "score": score},
        )
        if not math.isfinite(score):
            self._logger.warning(
                "non_finite_score",
                extra={"target": call.target, "strategy": call.strategy, "score": score},
            )
        return score


class AnalyticsMiddleware(IScoringMiddleware):
    """Forwards scoring outcomes to the diagnostic tracker."""

    def __init__(self, tracker: IScoreTracker) -> None:
        self._tracker = tracker

    def process_call(self, call: ScoringCall) -> ScoringCall:
        return call

    def process_score(self, call: ScoringCall, score: float) -> float:
        self._tracker.track(call, score)
        return score


class MiddlewareChain:
    """Applies middleware around a handler using chain of responsibility."""

    def __init__(self, middlewares: Sequence[IScoringMiddleware]) -> None:
        self._middlewares = list(middlewares)

    def __len__(self) -> int:
        return len(self._middlewares)

    def execute(
        self, call: ScoringCall, handler: Callable[[ScoringCall], float]
    ) -> float:
        for middleware in self._middlewares:
            call = middleware.process_call(call)

        score = handler(call)

        for middleware in reversed(self._middlewares):
            score = middleware.process_score(call, score)

        return score
