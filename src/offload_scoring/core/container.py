"""Dependency injection container for building fully-wired Scorer instances."""

from __future__ import annotations

from typing import Optional

import httpx

from offload_scoring.analytics.aggregator import ScoreAggregator
from offload_scoring.analytics.memory_repository import InMemoryScoreRepository
from offload_scoring.analytics.tracker import ScoreTracker
from offload_scoring.core.config import ScoringConfig
from offload_scoring.core.middleware import (
    AnalyticsMiddleware,
    LoggingMiddleware,
    MiddlewareChain,
)
from offload_scoring.core.scorer import Scorer
from offload_scoring.domain.interfaces import IScoreTracker
from offload_scoring.resources.http_query import (
    HttpResourceQuery,
    ResourceEndpointConfig,
)
from offload_scoring.scoring.registry import StrategyRegistry, default_registry


class DIContainer:
    """Factory helpers that assemble a Scorer with default wiring."""

    @staticmethod
    def create_scorer(
        *,
        config: Optional[ScoringConfig] = None,
        registry: Optional[StrategyRegistry] = None,
    ) -> Scorer:
        cfg = config or ScoringConfig.from_env()
        strategies = registry or DIContainer.create_registry(cfg)

        tracker: Optional[IScoreTracker] = None
        if cfg.enable_tracking:
            repository = InMemoryScoreRepository(cfg.tracker_capacity)
            tracker = ScoreTracker(repository, ScoreAggregator())

        return Scorer(
            config=cfg,
            registry=strategies,
            tracker=tracker,
            middleware=DIContainer._build_middleware_chain(tracker),
        )

    @staticmethod
    def create_registry(config: ScoringConfig) -> StrategyRegistry:
        return default_registry(
            missing_policy=config.policy,
            custom_weights=config.custom_weights or None,
        )

    @staticmethod
    def create_http_query(
        base_url: str,
        *,
        config: Optional[ScoringConfig] = None,
        http_client: Optional[httpx.Client] = None,
        api_key: Optional[str] = None,
    ) -> HttpResourceQuery:
        cfg = config or ScoringConfig.from_env()
        endpoint = ResourceEndpointConfig(
            base_url=base_url,
            timeout=cfg.query_timeout_seconds,
            api_key=api_key,
        )
        if http_client is not None:
            return HttpResourceQuery(http_client, endpoint)
        client = httpx.Client(timeout=endpoint.timeout)
        return HttpResourceQuery(client, endpoint, owns_client=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _build_middleware_chain(tracker: Optional[IScoreTracker]) -> MiddlewareChain:
        middlewares = [LoggingMiddleware()]
        if tracker is not None:
            middlewares.append(AnalyticsMiddleware(tracker))
        return MiddlewareChain(middlewares)
