from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from offload_scoring.core.config import ScoringConfig
from offload_scoring.core.container import DIContainer
from offload_scoring.resources.local import ResourceStore

DEVICES = {
    "device-a": {
        "network/bandwidth": 100.0,
        "cpu/freq": 2.5,
        "cpu/usage": 0.5,
        "cpu/count": 4.0,
    },
    "device-b": {
        "network/bandwidth": 1000.0,
        "cpu/freq": 3.2,
        "cpu/usage": 20.0,
        "cpu/count": 8.0,
    },
    "device-c": {
        "network/bandwidth": 50.0,
        "cpu/freq": 1.2,
        "cpu/usage": 80.0,
    },
}


def _expected(metrics):
    if not {"network/bandwidth", "cpu/freq", "cpu/usage", "cpu/count"} <= set(metrics):
        return 0.0
    network = 1 / (8770 * metrics["network/bandwidth"] ** -0.9)
    cpu = (
        1 / (5.66 * metrics["cpu/freq"] ** -0.66)
        + 1 / (3.22 * metrics["cpu/usage"] ** -0.241)
        + 1 / (4 * metrics["cpu/count"] ** -0.3)
    ) / 3
    return (network + cpu) / 2


def _device_handler(request: httpx.Request) -> httpx.Response:
    device = request.url.host
    key = request.url.path.removeprefix("/api/v1/resources/")
    metrics = DEVICES.get(device, {})
    if key not in metrics:
        return httpx.Response(404, json={"error": "unknown resource"})
    return httpx.Response(200, json={"value": metrics[key]})


def test_scoring_remote_devices_over_http():
    config = ScoringConfig(query_timeout_seconds=0.5)
    scorer = DIContainer.create_scorer(config=config)
    client = httpx.Client(transport=httpx.MockTransport(_device_handler))

    scores = {
        device: scorer.score(
            DIContainer.create_http_query(
                f"http://{device}:56001", config=config, http_client=client
            ),
            target=device,
        )
        for device in DEVICES
    }

    for device, metrics in DEVICES.items():
        assert scores[device] == pytest.approx(_expected(metrics), rel=1e-9)
    assert scores["device-c"] == 0.0

    summary = scorer.analytics.get_summary("last_hour")
    assert summary.total_scores == 3
    assert summary.zero_scores == 1


def test_concurrent_scoring_is_isolated_per_target():
    scorer = DIContainer.create_scorer(config=ScoringConfig(tracker_capacity=500))
    stores = {}
    for device, metrics in DEVICES.items():
        store = ResourceStore()
        store.update_many(metrics)
        stores[device] = store

    jobs = [device for device in DEVICES for _ in range(50)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(
            pool.map(lambda device: (device, scorer.score(stores[device], target=device)), jobs)
        )

    for device, score in results:
        assert score == pytest.approx(_expected(DEVICES[device]), rel=1e-9)
    assert scorer.analytics.get_summary("last_hour").total_scores == len(jobs)


def test_switching_strategy_between_cycles():
    scorer = DIContainer.create_scorer(config=ScoringConfig(missing_policy="zero"))
    metrics = {"cpu/usage": 10.0, "cpu/count": 4.0, "memory/free": 1.0}

    assert scorer.score_metrics(metrics) == 0.0

    scorer.use_strategy("weighted_sum_compact")

    expected = 10.0 * 1.48271 + 4.0 * 4.125421 + 1.0 * 5.3381723
    assert scorer.score_metrics(metrics) == pytest.approx(expected)
