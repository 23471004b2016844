import math

import pytest

from offload_scoring.scoring.transforms import (
    count_term,
    cpu_score,
    frequency_term,
    network_score,
    rendering_score,
    rtt_rendering_score,
    usage_term,
)


def test_network_score_matches_power_law():
    assert network_score(100) == pytest.approx(1 / (8770 * 100**-0.9), rel=1e-12)


def test_network_score_strictly_increases_with_bandwidth():
    samples = [0.5, 1, 10, 100, 1_000, 10_000]
    scores = [network_score(value) for value in samples]
    assert all(lower < higher for lower, higher in zip(scores, scores[1:]))


def test_cpu_score_is_mean_of_terms():
    expected = (
        1 / (5.66 * 2.5**-0.66) + 1 / (3.22 * 0.5**-0.241) + 1 / (4 * 4**-0.3)
    ) / 3
    assert cpu_score(2.5, 0.5, 4) == pytest.approx(expected, rel=1e-12)
    assert cpu_score(2.5, 0.5, 4) == pytest.approx(
        (frequency_term(2.5) + usage_term(0.5) + count_term(4)) / 3
    )


def test_rendering_score_negative_is_zero():
    assert rendering_score(-1) == 0.0


def test_rendering_score_positive_value():
    assert rendering_score(4) == pytest.approx(0.77 * 4**-0.43, rel=1e-12)


def test_rendering_score_zero_is_infinite():
    assert rendering_score(0) == math.inf


def test_zero_bandwidth_follows_ieee_limit():
    # 0 ** -0.9 is +inf, and 1 / inf collapses to zero
    assert network_score(0) == 0.0


def test_negative_bandwidth_propagates_nan():
    assert math.isnan(network_score(-5))


def test_negative_cpu_metric_propagates_nan():
    assert math.isnan(cpu_score(-2.5, 0.5, 4))


def test_infinite_input_does_not_raise():
    assert network_score(math.inf) == math.inf
    assert math.isnan(network_score(math.nan))


def test_rtt_rendering_score_non_positive_is_zero():
    assert rtt_rendering_score(0) == 0.0
    assert rtt_rendering_score(-0.1) == 0.0


def test_rtt_rendering_score_positive_value():
    assert rtt_rendering_score(16) == pytest.approx(0.77 * 16**-0.43, rel=1e-12)
