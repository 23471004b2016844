"""Inverse power-law transforms used by the performance scoring model.

Each transform maps a raw measurement to a slowly saturating desirability
term. Arithmetic follows IEEE-754 semantics rather than Python's exception
raising ``math.pow``: ``0 ** -x`` is ``inf``, a negative base with a
non-integer exponent is ``nan`` and dividing by an infinite denominator
yields ``0.0``. Inputs are never clamped.
"""

from __future__ import annotations

import math

NETWORK_COEFFICIENT = 8770.0
NETWORK_EXPONENT = -0.9

FREQ_COEFFICIENT = 5.66
FREQ_EXPONENT = -0.66
USAGE_COEFFICIENT = 3.22
USAGE_EXPONENT = -0.241
COUNT_COEFFICIENT = 4.0
COUNT_EXPONENT = -0.3

RENDERING_COEFFICIENT = 0.77
RENDERING_EXPONENT = -0.43


def network_score(bandwidth: float) -> float:
    """Score network capacity; larger bandwidth gives a larger score."""

    return _inverse_power(NETWORK_COEFFICIENT, bandwidth, NETWORK_EXPONENT)


def frequency_term(freq: float) -> float:
    return _inverse_power(FREQ_COEFFICIENT, freq, FREQ_EXPONENT)


def usage_term(usage: float) -> float:
    return _inverse_power(USAGE_COEFFICIENT, usage, USAGE_EXPONENT)


def count_term(count: float) -> float:
    return _inverse_power(COUNT_COEFFICIENT, count, COUNT_EXPONENT)


def cpu_score(freq: float, usage: float, count: float) -> float:
    """Unweighted mean of the frequency, usage and core-count terms."""

    return (frequency_term(freq) + usage_term(usage) + count_term(count)) / 3


def rendering_score(rendering: float) -> float:
    """Score rendering capability; negative readings score zero.

    Not part of the default composite score. Kept as an extension point for
    strategies that weigh rendering capacity.
    """

    if rendering < 0:
        return 0.0
    return RENDERING_COEFFICIENT * _ieee_pow(rendering, RENDERING_EXPONENT)


def rtt_rendering_score(rtt: float) -> float:
    """Rendering term driven by round-trip time; non-positive RTT scores zero."""

    if rtt <= 0:
        return 0.0
    return RENDERING_COEFFICIENT * _ieee_pow(rtt, RENDERING_EXPONENT)


def _inverse_power(coefficient: float, value: float, exponent: float) -> float:
    return _ieee_divide(1.0, coefficient * _ieee_pow(value, exponent))


def _ieee_pow(base: float, exponent: float) -> float:
    if base == 0.0 and exponent < 0:
        if _is_odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf
    if base < 0 and math.isfinite(base) and not float(exponent).is_integer():
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _ieee_divide(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _is_odd_integer(value: float) -> bool:
    return float(value).is_integer() and int(value) % 2 == 1
