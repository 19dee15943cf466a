"""
Domino model.

Coordinate system:
- x (horizontal), y (vertical) are integer cell coordinates
- the tiling is centered on the origin: a diamond of order n spans x, y in [-n, n)
- y increases DOWNWARD, so "north" means vy = -1
- (x, y) is the top-left cell covered by the domino

Shapes and velocities:
- horizontal domino: w=2, h=1, moves north (0, -1) or south (0, +1)
- vertical domino:   w=1, h=2, moves west (-1, 0) or east (+1, 0)
"""

from dataclasses import dataclass


HORIZONTAL = (2, 1)
VERTICAL = (1, 2)


@dataclass(eq=False)
class Domino:
    """A 2-cell tile travelling one cell per iteration along its short axis.

    Compared by identity: two dominoes at the same position are still
    distinct pieces (the renderer tracks them individually).
    """
    x: int
    y: int
    w: int
    h: int
    vx: int
    vy: int
    marked_for_removal: bool = False

    @property
    def is_horizontal(self) -> bool:
        return self.w == 2

    @property
    def direction(self) -> str:
        """Compass letter of the travel direction (N, S, E or W)."""
        if self.vx == 1:
            return "E"
        if self.vx == -1:
            return "W"
        return "S" if self.vy == 1 else "N"

    def cells(self) -> list[tuple[int, int]]:
        """Cells covered by this domino, as (x, y) pairs."""
        return [
            (x, y)
            for y in range(self.y, self.y + self.h)
            for x in range(self.x, self.x + self.w)
        ]

    def ahead(self) -> tuple[int, int]:
        """Reference cell of the spot one step ahead along the velocity."""
        return (self.x + self.vx, self.y + self.vy)

    def move(self) -> None:
        """Advance one cell along the velocity (mutates)."""
        self.x += self.vx
        self.y += self.vy

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "vx": self.vx,
            "vy": self.vy,
            "direction": self.direction,
        }


def make_pair(cx: int, cy: int, horizontal: bool) -> list[Domino]:
    """Two dominoes filling the 2x2 block centered on the grid point (cx, cy).

    The block covers cells x in [cx-1, cx+1), y in [cy-1, cy+1).
    A horizontal pair is a north-moving domino on top of a south-moving one;
    a vertical pair is a west-moving domino left of an east-moving one.
    The two always move apart, so a fresh pair never collides with itself.
    """
    if horizontal:
        return [
            Domino(cx - 1, cy - 1, *HORIZONTAL, 0, -1),
            Domino(cx - 1, cy, *HORIZONTAL, 0, 1),
        ]
    return [
        Domino(cx - 1, cy - 1, *VERTICAL, -1, 0),
        Domino(cx, cy - 1, *VERTICAL, 1, 0),
    ]
