"""
Domino shuffling engine.

Grows a uniformly random domino tiling of the Aztec diamond one order per
iteration. Each iteration runs four phases, one per call to `step()`:

1. collide - dominoes meeting head-on are destroyed
2. expand  - the diamond grows to the next order (no domino changes)
3. advance - every survivor moves one cell along its velocity
4. create  - the 2x2 holes left in the new diamond get a random pair each

Control returns to the caller between phases so a renderer can animate the
published delta before asking for the next one.
"""

import logging
from typing import Callable, Optional, Union

import numpy as np

from .bias import BiasFunction, OrientationBias
from .config import FIRST_ITERATION, NUM_PHASES, PHASES, SEED_ORDER, DIRECTIONS, ShuffleConfig
from .domino import Domino, make_pair
from .errors import InvariantViolation
from .events import CreationDelta, Move, MoveDelta, RegionDelta, RemovalDelta
from .random_source import RandomSource, SupportsRandom
from .region import DiamondRegion, cells_occupied_by, occupancy_mask

logger = logging.getLogger(__name__)

Delta = Union[RemovalDelta, RegionDelta, MoveDelta, CreationDelta]
Listener = Callable[[Delta], None]


class ShuffleEngine:
    """Owns one growing tiling.

    Attributes:
        iteration: order of the diamond being built by the current phases
        phase_index: next phase to run, index into PHASES
        dominoes: live dominoes
        pending_survivors: dominoes kept by collide, waiting for create
    """

    def __init__(
        self,
        bias: Union[BiasFunction, OrientationBias, float, None] = None,
        rng: Optional[SupportsRandom] = None,
        strict_bias: bool = False,
    ):
        if isinstance(bias, OrientationBias):
            self.bias = bias
        else:
            self.bias = OrientationBias(bias, strict=strict_bias)
        self.rng = rng if rng is not None else RandomSource()
        self._listeners: list[Listener] = []
        self._busy = False
        self.reset()

    @classmethod
    def from_config(cls, config: ShuffleConfig, bias: Optional[BiasFunction] = None) -> "ShuffleEngine":
        """Build an engine from validated settings.

        A callable `bias` overrides the constant `config.bias`.
        """
        return cls(
            bias=bias if bias is not None else config.bias,
            rng=RandomSource(config.seed),
            strict_bias=config.strict_bias,
        )

    def __repr__(self) -> str:
        return (
            f"ShuffleEngine(iteration={self.iteration}, phase={self.phase!r}, "
            f"dominoes={len(self.dominoes)})"
        )

    @property
    def phase(self) -> str:
        """Name of the next phase to run."""
        return PHASES[self.phase_index]

    @property
    def order(self) -> int:
        """Order of the last completed diamond."""
        return self.iteration - 1

    @property
    def busy(self) -> bool:
        return self._busy

    # ------------------------------------------------------------------
    # Driver

    def reset(self) -> None:
        """Back to the initial state with a freshly drawn seed pair."""
        if self._busy:
            logger.debug("reset() ignored: a step is in flight")
            return
        self.iteration = FIRST_ITERATION
        self.phase_index = 0
        self.pending_survivors: list[Domino] = []
        self.region = DiamondRegion(SEED_ORDER)
        self.dominoes = self._create_block(0, 0, SEED_ORDER)

    def step(self) -> Optional[Delta]:
        """Run the next phase and return its delta.

        Returns None without doing anything if a step is already running
        (e.g. a listener calling back into the engine).
        """
        if self._busy:
            logger.debug("step() ignored: a step is in flight")
            return None
        self._busy = True
        try:
            return self._run_phase()
        finally:
            self._busy = False

    def run_iteration(self) -> Optional[list[Delta]]:
        """Run phases until the current iteration is complete.

        From a phase boundary this runs all four phases; from the middle of
        an iteration it runs the remaining ones. Returns the deltas, or None
        if a step is already running.
        """
        if self._busy:
            logger.debug("run_iteration() ignored: a step is in flight")
            return None
        self._busy = True
        try:
            deltas = [self._run_phase()]
            while self.phase_index != 0:
                deltas.append(self._run_phase())
            return deltas
        finally:
            self._busy = False

    def run_to_order(self, n: int) -> Optional[int]:
        """Run full iterations until the settled tiling has order n.

        Returns the number of iterations run, or None if a step is already
        running. Does nothing if the tiling is already at order n or beyond.
        """
        if n < SEED_ORDER:
            raise ValueError(f"Diamond order must be >= {SEED_ORDER}, got {n}")
        if self._busy:
            logger.debug("run_to_order() ignored: a step is in flight")
            return None
        self._busy = True
        iterations = 0
        try:
            # Finish a partially run iteration first
            while self.phase_index != 0:
                self._run_phase()
            while self.order < n:
                for _ in range(NUM_PHASES):
                    self._run_phase()
                iterations += 1
        finally:
            self._busy = False
        logger.info("Reached order %d after %d iterations (%d dominoes)",
                    self.order, iterations, len(self.dominoes))
        return iterations

    def add_listener(self, listener: Listener) -> None:
        """Register a callback receiving every published delta."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _run_phase(self) -> Delta:
        phase = PHASES[self.phase_index]
        delta = getattr(self, f"_{phase}")()

        self.phase_index += 1
        if self.phase_index == NUM_PHASES:
            self.phase_index = 0
            self.iteration += 1

        for listener in list(self._listeners):
            listener(delta)
        return delta

    # ------------------------------------------------------------------
    # Phases

    def _collide(self) -> RemovalDelta:
        by_position = {(d.x, d.y): d for d in self.dominoes}

        # Only look forward from dominoes moving in the positive direction,
        # so each colliding pair is found once
        for d1 in self.dominoes:
            if d1.vx != 1 and d1.vy != 1:
                continue
            d2 = by_position.get(d1.ahead())
            if d2 is not None and d2.vx == -d1.vx and d2.vy == -d1.vy:
                d1.marked_for_removal = True
                d2.marked_for_removal = True

        to_destroy = [d for d in self.dominoes if d.marked_for_removal]
        survivors = [d for d in self.dominoes if not d.marked_for_removal]

        self.pending_survivors = survivors
        self.dominoes = list(survivors)
        logger.debug("iteration %d collide: %d destroyed, %d survive",
                     self.iteration, len(to_destroy), len(survivors))
        return RemovalDelta(self.iteration, to_destroy)

    def _expand(self) -> RegionDelta:
        self.region = DiamondRegion(self.iteration)
        logger.debug("iteration %d expand: area %d", self.iteration, self.region.area)
        return RegionDelta(self.iteration, self.iteration, self.region.mask.copy())

    def _advance(self) -> MoveDelta:
        moves = []
        for domino in self.pending_survivors:
            domino.move()
            moves.append(Move(domino, domino.x, domino.y))
        logger.debug("iteration %d advance: %d moved", self.iteration, len(moves))
        return MoveDelta(self.iteration, moves)

    def _create(self) -> CreationDelta:
        n = self.iteration
        if self.region.n != n:
            self.region = DiamondRegion(n)
        holes = self.region.holes(self.pending_survivors)

        created = []
        size = 2 * n
        # Row-major scan of the hole mask; every block found is consumed
        for row in range(size - 1):
            for col in range(size - 1):
                block = holes[row:row + 2, col:col + 2]
                if block.all():
                    block[:] = False
                    created.extend(self._create_block(col - n + 1, row - n + 1, n))

        if holes.any():
            leftover = [(int(col) - n, int(row) - n) for row, col in np.argwhere(holes)]
            raise InvariantViolation(
                f"{len(leftover)} cells of the order {n} diamond could not be "
                f"grouped into 2x2 blocks: {leftover[:8]}"
            )

        self.dominoes = self.pending_survivors + created
        self.pending_survivors = []
        logger.debug("iteration %d create: %d new dominoes, %d total",
                     n, len(created), len(self.dominoes))
        return CreationDelta(n, created)

    def _create_block(self, cx: int, cy: int, n: int) -> list[Domino]:
        """Random pair for the 2x2 block centered on (cx, cy)."""
        r = self.rng.random()
        p = self.bias.evaluate(cx, cy, n)
        return make_pair(cx, cy, horizontal=r < p)

    # ------------------------------------------------------------------
    # Inspection

    def check_tiling(self) -> None:
        """Check the dominoes exactly cover the diamond of the current order.

        Only meaningful between iterations (phase_index == 0).
        Raises InvariantViolation on any overlap, gap or stray cell.
        """
        if self.phase_index != 0:
            raise ValueError(f"Tiling is only complete between iterations (next phase: {self.phase})")
        n = self.order
        covered = occupancy_mask(self.dominoes, n)
        region = cells_occupied_by(n)
        if not np.array_equal(covered, region):
            gaps = int(np.count_nonzero(region & ~covered))
            strays = int(np.count_nonzero(covered & ~region))
            raise InvariantViolation(
                f"Order {n} tiling is broken: {gaps} uncovered cells, {strays} cells outside the diamond"
            )

    def direction_counts(self) -> dict[str, int]:
        """Number of live dominoes travelling in each direction."""
        counts = {d: 0 for d in DIRECTIONS}
        for domino in self.dominoes:
            counts[domino.direction] += 1
        return counts

    def snapshot(self) -> dict:
        return {
            "iteration": self.iteration,
            "order": self.order,
            "phase": self.phase,
            "dominoes": [d.to_dict() for d in self.dominoes],
        }
