"""Name-keyed lookup table that binds strategy names to factories."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Tuple

from offload_scoring.domain.exceptions import (
    StrategyError,
    StrategyRegistrationError,
    UnknownStrategyError,
)
from offload_scoring.domain.models import (
    COMPACT_PROFILE,
    FULL_PROFILE,
    MissingMetricPolicy,
    WeightProfile,
)

from .strategies.base import IScoringStrategy
from .strategies.container_strategy import ContainerStrategy
from .strategies.performance_strategy import PerformanceStrategy
from .strategies.weighted_sum_strategy import WeightedSumStrategy

StrategyFactory = Callable[[], IScoringStrategy]

CUSTOM_WEIGHTED = "custom_weighted"


class StrategyRegistry:
    """Maps normalized strategy names to zero-argument factories."""

    def __init__(self) -> None:
        self._factories: Dict[str, StrategyFactory] = {}

    def register(
        self,
        name: str,
        factory: StrategyFactory,
        *,
        replace: bool = False,
    ) -> None:
        """Add ``factory`` under ``name``.

        Args:
            name: Strategy name; stripped and lower-cased before storing.
            factory: Callable returning a fresh strategy instance.
            replace: Allow overwriting an existing registration.
        """
        key = self._normalize(name)
        if not key:
            raise StrategyRegistrationError("Strategy name must be a non-empty string")
        if not callable(factory):
            raise StrategyRegistrationError(
                "Strategy factory must be callable", context={"name": key}
            )
        if key in self._factories and not replace:
            raise StrategyRegistrationError(
                f"Strategy '{key}' already registered", context={"name": key}
            )
        self._factories[key] = factory

    def unregister(self, name: str) -> None:
        """Drop a registration; unknown names are ignored."""
        self._factories.pop(self._normalize(name), None)

    def create(self, name: str) -> IScoringStrategy:
        key = self._normalize(name)
        try:
            factory = self._factories[key]
        except KeyError as exc:
            raise UnknownStrategyError(
                f"Unknown scoring strategy '{name}'",
                context={"available": ", ".join(self.names()) or "<none>"},
            ) from exc
        strategy = factory()
        if not callable(getattr(strategy, "score", None)) or not callable(
            getattr(strategy, "name", None)
        ):
            raise StrategyError(
                "Factory did not return a scoring strategy", context={"name": key}
            )
        return strategy

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._factories))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._normalize(name) in self._factories

    @staticmethod
    def _normalize(name: str) -> str:
        return name.strip().lower()


def default_registry(
    missing_policy: MissingMetricPolicy = MissingMetricPolicy.ABORT,
    custom_weights: Optional[Mapping[str, float]] = None,
) -> StrategyRegistry:
    """Registry with the built-in strategies, built once at startup."""

    full = FULL_PROFILE.with_policy(missing_policy)
    compact = COMPACT_PROFILE.with_policy(missing_policy)

    registry = StrategyRegistry()
    registry.register("performance", PerformanceStrategy)
    registry.register("container", ContainerStrategy)
    registry.register(
        "weighted_sum", lambda: WeightedSumStrategy(full, name="weighted_sum")
    )
    registry.register(
        "weighted_sum_compact",
        lambda: WeightedSumStrategy(compact, name="weighted_sum_compact"),
    )
    if custom_weights:
        custom = WeightProfile.from_mapping(custom_weights, policy=missing_policy)
        registry.register(
            CUSTOM_WEIGHTED,
            lambda: WeightedSumStrategy(custom, name=CUSTOM_WEIGHTED),
        )
    return registry
