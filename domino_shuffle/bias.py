"""
Orientation bias: probability that a new 2x2 block gets a horizontal pair.

A bias is any callable `bias(x, y, n) -> float` where (x, y) is the block
center in tiling coordinates and n the order being built. It must be pure,
since it is evaluated once per new block.
"""

import logging
import math
from typing import Callable, Optional

from .config import DEFAULT_ORIENTATION_BIAS
from .errors import BiasOutOfRange

logger = logging.getLogger(__name__)

BiasFunction = Callable[[int, int, int], float]


def constant_bias(p: float) -> BiasFunction:
    """Bias returning p everywhere."""
    def bias(x: int, y: int, n: int) -> float:
        return p
    bias.__name__ = f"constant_bias({p})"
    return bias


class OrientationBias:
    """Wraps a bias function, clamping out-of-range results into [0, 1].

    Every clamped value is logged as a warning and recorded in
    `out_of_range_count` / `last_out_of_range`. With `strict=True` the
    BiasOutOfRange error is raised instead.
    NaN is replaced by the default bias.
    """

    def __init__(self, func: Optional[BiasFunction] = None, strict: bool = False):
        if func is None:
            func = constant_bias(DEFAULT_ORIENTATION_BIAS)
        elif isinstance(func, (int, float)):
            func = constant_bias(float(func))
        self.func = func
        self.strict = strict
        self.out_of_range_count = 0
        self.last_out_of_range: Optional[BiasOutOfRange] = None

    def evaluate(self, x: int, y: int, n: int) -> float:
        value = float(self.func(x, y, n))
        if 0.0 <= value <= 1.0:
            return value

        error = BiasOutOfRange(value, x, y, n)
        if self.strict:
            raise error
        self.out_of_range_count += 1
        self.last_out_of_range = error

        if math.isnan(value):
            clamped = DEFAULT_ORIENTATION_BIAS
        else:
            clamped = min(1.0, max(0.0, value))
        logger.warning("%s, using %s", error, clamped)
        return clamped

    __call__ = evaluate
