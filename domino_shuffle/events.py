"""
Deltas published by ShuffleEngine, one per phase.

A renderer consumes these to animate the tiling; the engine never reads
anything back from it.
"""
from dataclasses import dataclass, field

import numpy as np

from .domino import Domino


@dataclass
class RemovalDelta:
    """Collide phase: dominoes destroyed in head-on collisions."""
    iteration: int
    dominoes: list[Domino] = field(default_factory=list)
    phase: str = "collide"


@dataclass
class RegionDelta:
    """Expand phase: the diamond grew to `order`."""
    iteration: int
    order: int
    mask: np.ndarray
    phase: str = "expand"


@dataclass
class Move:
    domino: Domino
    new_x: int
    new_y: int


@dataclass
class MoveDelta:
    """Advance phase: every survivor with its new position."""
    iteration: int
    moves: list[Move] = field(default_factory=list)
    phase: str = "advance"


@dataclass
class CreationDelta:
    """Create phase: dominoes filling the new 2x2 holes, in scan order."""
    iteration: int
    dominoes: list[Domino] = field(default_factory=list)
    phase: str = "create"
