import logging
import math
import random
from typing import List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class RateSource(Protocol):
    def next(self) -> float:
        ...


class FixedRate:
    """
    Deterministic rate source: every period realizes the same rate.
    """

    def __init__(self, rate: float):
        self.rate = float(rate)

    def next(self) -> float:
        return self.rate


class NormalRate:
    """
    NormalRate (stochastic rate source)

    Each call to next() draws one independent annual rate from a normal
    distribution:

        r ~ N(mean, std_dev^2)

    Draws are NOT clamped. A rate <= -1 (losing everything, or more, in a
    single period) is a legal sample and is passed through unchanged.

    The generator is explicit: pass a seed for a reproducible stream, or an
    existing random.Random to share one. With neither, the stream is seeded
    from OS entropy and every run is independent.
    """

    def __init__(
        self,
        mean: float,
        std_dev: float,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if std_dev < 0:
            raise ValueError("std_dev must be >= 0")
        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")

        self.mean = float(mean)
        self.std_dev = float(std_dev)
        self._rng = rng if rng is not None else random.Random(seed)

    def next(self) -> float:
        return self._rng.gauss(self.mean, self.std_dev)


def make_rate_source(
    mean: float,
    std_dev: float,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> RateSource:
    """
    Zero standard deviation collapses to a FixedRate; anything else samples.
    """
    if std_dev < 0:
        raise ValueError("std_dev must be >= 0")
    if std_dev == 0:
        return FixedRate(mean)
    return NormalRate(mean, std_dev, seed=seed, rng=rng)


# ------------------------------------------------------------
# Compounding
# ------------------------------------------------------------

def compound(principal: float, periods: int, rate_source: RateSource) -> Tuple[float, List[float]]:
    """
    Grow principal over `periods` periods, pulling one rate per period.

    Returns (final_balance, rates) where rates holds the realized rate of
    every period in order. periods == 0 returns the principal untouched and
    an empty list.
    """
    if periods < 0:
        raise ValueError("periods must be >= 0")

    balance = float(principal)
    rates: List[float] = []
    for _ in range(periods):
        r = rate_source.next()
        balance *= 1.0 + r
        rates.append(r)

    logger.debug("compounded %s over %d periods -> %s", principal, periods, balance)
    return balance, rates


def compound_fixed(principal: float, periods: int, rate: float) -> float:
    """
    Closed form of compound() with a FixedRate: principal * (1 + rate)^periods.
    """
    if periods < 0:
        raise ValueError("periods must be >= 0")

    base = 1.0 + rate
    try:
        return float(principal) * base ** periods
    except OverflowError:
        # Past the float range the loop saturates to +-inf; match it
        sign = -1.0 if base < 0 and periods % 2 else 1.0
        return math.copysign(math.inf, sign * principal)


def growth_factors(rates: List[float]) -> List[float]:
    """
    Convert rates to growth factors (a 10% return becomes 1.10).
    """
    return [1.0 + r for r in rates]
