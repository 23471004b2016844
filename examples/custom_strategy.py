"""Demonstrates creating and registering a custom scoring strategy."""

from offload_scoring.core.config import ScoringConfig
from offload_scoring.core.container import DIContainer
from offload_scoring.domain.interfaces import IResourceQuery
from offload_scoring.domain.models import NETWORK_BANDWIDTH
from offload_scoring.scoring.strategies.base import IScoringStrategy
from offload_scoring.scoring.transforms import network_score, rendering_score

RENDER_RESOLUTION = "render/resolution"


class RenderingStrategy(IScoringStrategy):
    """Favours targets with bandwidth to spare for low resolution frames."""

    def name(self) -> str:
        return "rendering"

    def score(self, query: IResourceQuery) -> float:
        bandwidth = query.query(NETWORK_BANDWIDTH)
        resolution = query.query(RENDER_RESOLUTION)
        if not (bandwidth.available and resolution.available):
            return 0.0
        return network_score(bandwidth.value) + rendering_score(resolution.value)


def main() -> None:
    config = ScoringConfig(default_strategy="rendering")
    registry = DIContainer.create_registry(config)
    registry.register("rendering", RenderingStrategy)

    scorer = DIContainer.create_scorer(config=config, registry=registry)
    score = scorer.score_metrics(
        {NETWORK_BANDWIDTH: 250.0, RENDER_RESOLUTION: 4.0},
        target="render-node",
    )
    print("Strategies:", ", ".join(scorer.available_strategies))
    print("Score:", score)


if __name__ == "__main__":
    main()
