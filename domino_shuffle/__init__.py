"""
domino_shuffle - random domino tilings of the Aztec diamond

Core components:
- Domino: a 2-cell tile with a direction of travel
- DiamondRegion: boolean mask of the diamond of order n
- ShuffleEngine: the collide / expand / advance / create shuffling steps
- OrientationBias: probability of horizontal pairs, clamped to [0, 1]
"""

from .bias import OrientationBias, constant_bias
from .config import ShuffleConfig
from .domino import Domino, make_pair
from .engine import ShuffleEngine
from .errors import BiasOutOfRange, InvariantViolation
from .events import CreationDelta, Move, MoveDelta, RegionDelta, RemovalDelta
from .random_source import RandomSource, ScriptedRandom
from .region import DiamondRegion, area, cells_occupied_by, empty_cells, occupancy_mask
from .viz import display_tiling, format_tiling
