# simulations/run.py

from __future__ import annotations

import logging
from typing import List, Optional

from .common import Scenario, SimulationParameters, TrialResult, summarize_trials
from .methods import get_method

logger = logging.getLogger(__name__)


def trial_seed(seed: Optional[int], index: int) -> Optional[int]:
    """
    Seed for trial `index` (0-based). Streams are spaced apart from the base
    seed so trials never share a sequence; None stays None (OS entropy).
    """
    if seed is None:
        return None
    return seed + 1000 * (index + 1)


def run_experiment(
    method: str,
    params: SimulationParameters,
    seed: Optional[int] = None,
) -> TrialResult:
    """
    Run a single trial and return a TrialResult.

    Parameters
    ----------
    method:
        Name of the method ('fixed' or 'gaussian').
    params:
        Scenario parameters.
    seed:
        RNG seed for this trial; None draws from OS entropy.

    Returns
    -------
    TrialResult
    """
    fn = get_method(method)
    return fn(params, seed)


def run_trials(
    params: SimulationParameters,
    seed: Optional[int] = None,
    method: str = "gaussian",
) -> List[TrialResult]:
    """
    Run params.trials independent trials, one after another.
    """
    results = []
    for i in range(params.trials):
        s = trial_seed(seed, i)
        logger.debug("trial %d/%d (seed=%s)", i + 1, params.trials, s)
        results.append(run_experiment(method, params, seed=s))
    return results


def run_scenario(params: SimulationParameters, seed: Optional[int] = None) -> Scenario:
    """
    Convenience helper: fixed-return baseline, gaussian trials, aggregate.
    """
    baseline = run_experiment("fixed", params)
    trials = run_trials(params, seed=seed)
    aggregate = summarize_trials(trials)
    logger.debug(
        "aggregate over %d trials: arithmetic=%s geometric=%s (excluded=%d)",
        aggregate.trials,
        aggregate.mean_arithmetic_return,
        aggregate.mean_geometric_return,
        aggregate.excluded_trials,
    )
    return Scenario(params=params, baseline=baseline, trials=trials, aggregate=aggregate)
