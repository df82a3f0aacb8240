import math
from typing import Sequence


class NonPositiveGrowthFactorError(ValueError):
    """
    Raised when a geometric mean is requested over a sequence that holds a
    growth factor <= 0, i.e. a period that lost 100% or more.
    """

    def __init__(self, index: int, value: float):
        super().__init__(
            f"growth factor at index {index} is {value!r}; geometric mean needs every factor > 0"
        )
        self.index = index
        self.value = value


def arithmetic_mean(values: Sequence[float]) -> float:
    """
    Sum of the elements divided by their count.

    math.fsum keeps the result independent of element order.
    """
    if not values:
        raise ValueError("values must be non-empty")
    return math.fsum(values) / len(values)


def geometric_mean(values: Sequence[float]) -> float:
    """
    n-th root of the product of the elements, computed as
    exp(mean(log(x))) so long sequences cannot overflow.

    Every element must be > 0. For growth factors (1 + rate) that means
    every rate > -1.
    """
    if not values:
        raise ValueError("values must be non-empty")

    for i, v in enumerate(values):
        if not v > 0:
            raise NonPositiveGrowthFactorError(i, v)

    # All-equal input: return the element itself rather than exp(log(x)).
    first = values[0]
    if all(v == first for v in values):
        return float(first)

    return math.exp(math.fsum(math.log(v) for v in values) / len(values))
