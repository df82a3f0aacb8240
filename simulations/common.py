# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import math

from src.volatility_drag.means import arithmetic_mean


@dataclass(frozen=True)
class SimulationParameters:
    """
    Scenario parameters shared by every trial of a run.
    """
    principal: float
    years: int
    mean_return: float
    std_dev: float  # 0 => deterministic
    trials: int = 1

    def __post_init__(self) -> None:
        if not self.principal > 0:
            raise ValueError("principal must be > 0")
        if self.years < 1:
            raise ValueError("years must be >= 1")
        if self.std_dev < 0:
            raise ValueError("std_dev must be >= 0")
        if self.trials < 1:
            raise ValueError("trials must be >= 1")


@dataclass
class TrialResult:
    """
    Outcome of one compounding trial.

    arithmetic_return and geometric_return are rates (growth-factor mean
    minus one). geometric_return is nan when total_loss is set: some year
    realized a rate <= -1 and the geometric mean is undefined.
    """
    method: str
    params: SimulationParameters
    final_balance: float
    rates: List[float]
    arithmetic_return: float
    geometric_return: float
    total_loss: bool = False

    def __post_init__(self) -> None:
        # Sanity: one realized rate per year
        if len(self.rates) != self.params.years:
            raise ValueError(
                f"rates length mismatch: expected {self.params.years}, got {len(self.rates)}"
            )

    @property
    def cagr(self) -> float:
        """
        Effective annual rate recovered from the balances alone:
        (final / principal)^(1 / years) - 1.

        Agrees with geometric_return whenever total_loss is False.
        """
        ratio = self.final_balance / self.params.principal
        if not ratio > 0:
            return math.nan
        return ratio ** (1.0 / self.params.years) - 1.0


@dataclass(frozen=True)
class AggregateResult:
    """
    Cross-trial averages of the per-trial arithmetic and geometric returns.
    """
    trials: int
    mean_arithmetic_return: float
    mean_geometric_return: float  # nan if no trial had a defined one
    excluded_trials: int = 0  # total-loss trials left out of the geometric average


def summarize_trials(results: List[TrialResult]) -> AggregateResult:
    """
    Average each trial's arithmetic and geometric return.

    Total-loss trials count towards the arithmetic average but are left out
    of the geometric one.
    """
    if not results:
        raise ValueError("results must be non-empty")

    arith = [r.arithmetic_return for r in results]
    geom = [r.geometric_return for r in results if not r.total_loss]

    return AggregateResult(
        trials=len(results),
        mean_arithmetic_return=arithmetic_mean(arith),
        mean_geometric_return=arithmetic_mean(geom) if geom else math.nan,
        excluded_trials=len(results) - len(geom),
    )


@dataclass
class Scenario:
    """
    Everything a report needs: the fixed-return baseline, the stochastic
    trials, and their aggregate.
    """
    params: SimulationParameters
    baseline: TrialResult
    trials: List[TrialResult] = field(default_factory=list)
    aggregate: Optional[AggregateResult] = None


def format_percent(rate: float) -> str:
    if math.isnan(rate):
        return "n/a"
    return f"{rate * 100.0:.2f}%"


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def format_trial_line(r: TrialResult) -> str:
    """
    Human-friendly one-liner for a trial, used in debug logging.
    """
    return (
        f"{r.method}: avg={format_percent(r.arithmetic_return)}, "
        f"geo={format_percent(r.geometric_return)}, final={format_money(r.final_balance)}"
        + (" (total loss)" if r.total_loss else "")
    )
