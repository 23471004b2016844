import pytest

from offload_scoring.domain.models import (
    COMPACT_PROFILE,
    FULL_PROFILE,
    MissingMetricPolicy,
    QueryResult,
    WeightProfile,
)
from offload_scoring.scoring.strategies.weighted_sum_strategy import (
    WeightedSumStrategy,
)


class _FakeQuery:
    def __init__(self, metrics):
        self.metrics = dict(metrics)
        self.calls = []

    def query(self, key: str) -> QueryResult:
        self.calls.append(key)
        if key not in self.metrics:
            return QueryResult.unavailable()
        return QueryResult.ok(self.metrics[key])


def _profile(policy):
    return WeightProfile(keys=("a", "b"), weights=(2.0, 3.0), policy=policy)


def test_weighted_sum_all_present():
    strategy = WeightedSumStrategy(_profile(MissingMetricPolicy.ZERO))

    assert strategy.score(_FakeQuery({"a": 4, "b": 5})) == 23.0


def test_zero_policy_skips_missing_keys():
    query = _FakeQuery({"b": 5})
    strategy = WeightedSumStrategy(_profile(MissingMetricPolicy.ZERO))

    assert strategy.score(query) == 15.0
    assert query.calls == ["a", "b"]


def test_abort_policy_returns_zero_on_missing_key():
    strategy = WeightedSumStrategy(_profile(MissingMetricPolicy.ABORT))

    assert strategy.score(_FakeQuery({"a": 4})) == 0.0


def test_abort_policy_stops_querying_after_missing_key():
    query = _FakeQuery({"b": 5})
    strategy = WeightedSumStrategy(_profile(MissingMetricPolicy.ABORT))

    assert strategy.score(query) == 0.0
    assert query.calls == ["a"]


def test_keys_are_queried_in_profile_order():
    metrics = {key: 1.0 for key in FULL_PROFILE.keys}
    query = _FakeQuery(metrics)

    score = WeightedSumStrategy(FULL_PROFILE).score(query)

    assert query.calls == list(FULL_PROFILE.keys)
    assert score == pytest.approx(sum(FULL_PROFILE.weights))


def test_compact_profile_ignores_network_metrics():
    metrics = {
        "cpu/usage": 10.0,
        "cpu/count": 4.0,
        "memory/free": 2.0,
        "memory/available": 3.0,
    }
    strategy = WeightedSumStrategy(COMPACT_PROFILE, name="weighted_sum_compact")

    expected = 10.0 * 1.48271 + 4.0 * 4.125421 + 2.0 * 5.3381723 + 3.0 * 9.194717234
    assert strategy.score(_FakeQuery(metrics)) == pytest.approx(expected)
    assert strategy.name() == "weighted_sum_compact"


def test_negative_weights_are_summed_verbatim():
    profile = WeightProfile(keys=("a", "b"), weights=(-1.0, 0.5))

    assert WeightedSumStrategy(profile).score(_FakeQuery({"a": 2, "b": 2})) == -1.0
