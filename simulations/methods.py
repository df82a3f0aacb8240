# simulations/methods.py

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Optional

from .common import SimulationParameters, TrialResult, format_trial_line

from src.volatility_drag.compounding import FixedRate, compound, growth_factors, make_rate_source
from src.volatility_drag.means import NonPositiveGrowthFactorError, arithmetic_mean, geometric_mean

logger = logging.getLogger(__name__)


SimFn = Callable[[SimulationParameters, Optional[int]], TrialResult]


def simulate_fixed(params: SimulationParameters, seed: Optional[int] = None) -> TrialResult:
    """
    Guaranteed return: every year realizes exactly params.mean_return.
    """
    balance, rates = compound(params.principal, params.years, FixedRate(params.mean_return))

    result = TrialResult(
        method="fixed",
        params=params,
        final_balance=balance,
        rates=rates,
        arithmetic_return=params.mean_return,
        geometric_return=params.mean_return,
    )
    logger.debug(format_trial_line(result))
    return result


def simulate_gaussian(params: SimulationParameters, seed: Optional[int] = None) -> TrialResult:
    """
    Normally distributed annual returns: r ~ N(mean_return, std_dev^2).

    Returns are averaged as growth factors (1 + r):
      - arithmetic_return = arithmetic_mean(factors) - 1
      - geometric_return  = geometric_mean(factors) - 1

    If some year lost 100% or more the geometric mean is undefined; the
    trial still completes, flagged total_loss with geometric_return = nan.
    """
    source = make_rate_source(params.mean_return, params.std_dev, seed=seed)
    balance, rates = compound(params.principal, params.years, source)

    factors = growth_factors(rates)
    arith = arithmetic_mean(factors) - 1.0

    total_loss = False
    try:
        geo = geometric_mean(factors) - 1.0
    except NonPositiveGrowthFactorError as e:
        logger.warning("trial with seed %s hit a total loss: %s", seed, e)
        geo = math.nan
        total_loss = True

    result = TrialResult(
        method="gaussian",
        params=params,
        final_balance=balance,
        rates=rates,
        arithmetic_return=arith,
        geometric_return=geo,
        total_loss=total_loss,
    )
    logger.debug(format_trial_line(result))
    return result


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SimFn:
    name = name.strip().lower()
    if name not in METHODS:
        raise ValueError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


METHODS: Dict[str, SimFn] = {
    "fixed": simulate_fixed,
    "gaussian": simulate_gaussian,
}
