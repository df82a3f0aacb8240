from __future__ import annotations

import math
import random

import pytest

from src.volatility_drag.compounding import NormalRate, compound, growth_factors
from src.volatility_drag.means import NonPositiveGrowthFactorError, arithmetic_mean, geometric_mean


def test_identical_elements_both_means_equal_element() -> None:
    values = [1.1, 1.1, 1.1]
    assert arithmetic_mean(values) == pytest.approx(1.1, rel=0, abs=1e-15)
    assert geometric_mean(values) == 1.1


def test_two_unequal_elements_strict_am_gm() -> None:
    values = [1.2, 1.0]
    am = arithmetic_mean(values)
    gm = geometric_mean(values)
    assert am == pytest.approx(1.1)
    assert gm == pytest.approx(math.sqrt(1.2))
    assert gm == pytest.approx(1.0954, abs=1e-4)
    assert gm < am


def test_means_are_order_independent() -> None:
    rng = random.Random(2024)
    values = [rng.uniform(0.5, 1.5) for _ in range(200)]
    shuffled = list(values)
    rng.shuffle(shuffled)
    assert arithmetic_mean(values) == arithmetic_mean(shuffled)
    assert geometric_mean(values) == pytest.approx(geometric_mean(shuffled), rel=1e-12)
    assert arithmetic_mean(list(reversed(values))) == arithmetic_mean(values)


def test_empty_input_is_rejected() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        arithmetic_mean([])
    with pytest.raises(ValueError, match="non-empty"):
        geometric_mean([])


@pytest.mark.parametrize("bad", [0.0, -0.25])
def test_geometric_mean_rejects_non_positive_factor(bad: float) -> None:
    with pytest.raises(NonPositiveGrowthFactorError) as exc_info:
        geometric_mean([1.1, bad, 0.9])
    assert exc_info.value.index == 1
    assert exc_info.value.value == bad
    assert isinstance(exc_info.value, ValueError)


def test_geometric_mean_rejects_nan() -> None:
    with pytest.raises(NonPositiveGrowthFactorError):
        geometric_mean([1.0, math.nan])


def test_geometric_mean_long_sequence_does_not_overflow() -> None:
    values = [10.0] * 400 + [10.5]
    gm = geometric_mean(values)
    assert math.isfinite(gm)
    assert 10.0 < gm < 10.5


@pytest.mark.parametrize("seed", range(25))
def test_am_gm_holds_for_stochastic_trials(seed: int) -> None:
    _, rates = compound(1000.0, 40, NormalRate(0.10, 0.15, seed=seed))
    factors = growth_factors(rates)
    if any(f <= 0 for f in factors):
        pytest.skip("trial hit a total loss")
    assert geometric_mean(factors) <= arithmetic_mean(factors)
