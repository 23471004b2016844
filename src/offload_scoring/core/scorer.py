"""Scorer facade the orchestrator binds to for ranking candidate targets."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from offload_scoring.core.config import ScoringConfig
from offload_scoring.core.middleware import (
    IScoringMiddleware,
    MiddlewareChain,
    ScoringCall,
)
from offload_scoring.domain.interfaces import IResourceQuery, IScoreTracker
from offload_scoring.resources.local import StaticResourceQuery
from offload_scoring.scoring.registry import StrategyRegistry
from offload_scoring.scoring.strategies.base import IScoringStrategy

LOCAL_TARGET = "local"


class Scorer:
    """Uniform entry point that runs the currently bound strategy.

    Exactly one strategy is bound at a time. Rebinding swaps a single
    reference, so concurrent ``score`` calls each run with whichever
    strategy was bound when they started.
    """

    def __init__(
        self,
        config: ScoringConfig,
        registry: StrategyRegistry,
        *,
        tracker: Optional[IScoreTracker] = None,
        middleware: Optional[MiddlewareChain] = None,
        middlewares: Optional[Sequence[IScoringMiddleware]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if middleware is not None and middlewares:
            raise ValueError("Provide either 'middleware' or 'middlewares', not both")
        self._config = config
        self._registry = registry
        self._tracker = tracker
        self._middleware = (
            middleware if middleware is not None else MiddlewareChain(middlewares or [])
        )
        self._logger = logger or logging.getLogger(__name__)
        self._strategy: IScoringStrategy = registry.create(config.default_strategy)

    @property
    def strategy_name(self) -> str:
        return self._strategy.name()

    @property
    def available_strategies(self) -> tuple[str, ...]:
        return self._registry.names()

    def use_strategy(self, name: str) -> None:
        """Bind ``name``; an unknown name leaves the current binding intact."""

        strategy = self._registry.create(name)
        previous = self._strategy.name()
        self._strategy = strategy
        self._logger.info(
            "strategy_bound",
            extra={"strategy": strategy.name(), "previous": previous},
        )

    def score(self, query: IResourceQuery, *, target: str = LOCAL_TARGET) -> float:
        strategy = self._strategy
        call = ScoringCall(target=target, strategy=strategy.name(), query=query)

        def handler(processed: ScoringCall) -> float:
            return strategy.score(processed.query)

        return self._middleware.execute(call, handler)

    def score_metrics(
        self, metrics: Mapping[str, float], *, target: str = LOCAL_TARGET
    ) -> float:
        return self.score(StaticResourceQuery(metrics), target=target)

    @property
    def analytics(self) -> IScoreTracker:
        if not self._tracker:
            raise RuntimeError("Score tracker not configured")
        return self._tracker
