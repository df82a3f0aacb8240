# simulations/report.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .common import Scenario, SimulationParameters, format_money, format_percent
from .run import run_scenario

logger = logging.getLogger(__name__)


# Keep the tool intentionally opinionated: the scenario is fixed unless you
# edit the file.
PRINCIPAL = 1_000.0
YEARS = 40
MEAN_RETURN = 0.10
STD_DEV = 0.15
NUM_TRIALS = 10

RULE = "=" * 40

CLOSING_REMARKS = (
    "1. Our effective return rate (geometric mean) is consistently lower than our \"average return\".",
    "2. Actual results can be much worse than the initial prediction if we happen to be very unlucky.",
)


def default_parameters() -> SimulationParameters:
    return SimulationParameters(
        principal=PRINCIPAL,
        years=YEARS,
        mean_return=MEAN_RETURN,
        std_dev=STD_DEV,
        trials=NUM_TRIALS,
    )


def format_report(scenario: Scenario) -> str:
    """
    Render the full text report: header, fixed-return projection, one block
    per trial, the cross-trial averages, and the closing remarks.
    """
    p = scenario.params
    lines: List[str] = [
        f"Initial investment: {format_money(p.principal)}",
        f"Number of years: {p.years}",
        f"Average return: {format_percent(p.mean_return)}",
        f"Standard deviation: {format_percent(p.std_dev)}",
        "",
        "First let's make a prediction by simulating a guaranteed return with our average:",
        RULE,
        f"Final investment: {format_money(scenario.baseline.final_balance)}",
        RULE,
        "",
        f"Now let's try {len(scenario.trials)} trials with gaussian distributed returns "
        f"using {format_percent(p.std_dev)} standard deviation.",
        "We use geometric mean to determine the actual annual return that we are effectively getting.",
        RULE,
    ]

    for i, trial in enumerate(scenario.trials):
        geo = "n/a (total loss)" if trial.total_loss else format_percent(trial.geometric_return)
        lines.extend([
            f"Trial {i + 1}",
            f"Average return: {format_percent(trial.arithmetic_return)}",
            f"Geometric mean: {geo}",
            f"Final investment: {format_money(trial.final_balance)}",
            RULE,
        ])
    lines.append("")

    agg = scenario.aggregate
    if agg is not None:
        lines.append(f"Average average: {format_percent(agg.mean_arithmetic_return)}")
        geo_line = f"Average geometric mean: {format_percent(agg.mean_geometric_return)}"
        if agg.excluded_trials:
            geo_line += f" (excluding {agg.excluded_trials} total-loss trial(s))"
        lines.append(geo_line)
        lines.append("")

    lines.append("Looking at these results, we may notice 2 things.")
    lines.extend(CLOSING_REMARKS)
    lines.append("")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Monte Carlo illustration of arithmetic vs geometric mean returns "
            f"(${PRINCIPAL:,.0f} over {YEARS} years, {MEAN_RETURN:.0%} +/- {STD_DEV:.0%}, {NUM_TRIALS} trials)."
        )
    )
    parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Validate once, before any trial runs
    try:
        params = default_parameters()
    except ValueError as e:
        logger.error("invalid simulation parameters: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    scenario = run_scenario(params)
    print(format_report(scenario))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
