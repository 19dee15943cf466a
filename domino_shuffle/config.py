"""
Configuration for the domino shuffling engine.
"""
from typing import Optional

from pydantic import BaseModel, Field

# Probability of a horizontal (north/south) pair when filling a 2x2 block
DEFAULT_ORIENTATION_BIAS = 0.5

# The seed pair is the whole diamond of order 1
SEED_ORDER = 1
FIRST_ITERATION = SEED_ORDER + 1

# Phases run by ShuffleEngine.step(), in order
PHASES = ("collide", "expand", "advance", "create")
NUM_PHASES = len(PHASES)

# Direction letters, as returned by Domino.direction
DIRECTIONS = ("N", "S", "E", "W")

# Character used for an uncovered cell of the diamond in console output
HOLE_CHAR = "."


class ShuffleConfig(BaseModel):
    """Settings for building a ShuffleEngine.

    `bias` is a constant orientation bias; pass a callable to the engine
    directly for position-dependent biases.
    """
    bias: float = Field(DEFAULT_ORIENTATION_BIAS, ge=0.0, le=1.0)
    seed: Optional[int] = None
    order: int = Field(10, ge=SEED_ORDER)  # target order for batch runs
    strict_bias: bool = False  # raise BiasOutOfRange instead of clamping
