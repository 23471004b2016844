"""Basic scoring example using the built-in DI container."""

from offload_scoring.core.config import ScoringConfig
from offload_scoring.core.container import DIContainer
from offload_scoring.resources.local import ResourceStore


def main() -> None:
    scorer = DIContainer.create_scorer(config=ScoringConfig())

    store = ResourceStore()
    store.update_many(
        {
            "network/bandwidth": 100.0,
            "cpu/freq": 2.5,
            "cpu/usage": 0.5,
            "cpu/count": 4.0,
        }
    )

    print("Strategy:", scorer.strategy_name)
    print("Score:", scorer.score(store.snapshot(), target="device-a"))

    scorer.use_strategy("weighted_sum_compact")
    print("Strategy:", scorer.strategy_name)
    print("Score:", scorer.score_metrics({"cpu/usage": 1, "cpu/count": 2}))

    print("Summary:", scorer.analytics.get_summary("last_hour"))


if __name__ == "__main__":
    main()
