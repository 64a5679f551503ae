# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Set, Dict, Any

Cell = Tuple[int, int]  # (x, y)

CORNER_RULES = ("fixed", "diagonal")

# Order matters: it fixes neighbour order and therefore heap tie-breaks.
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, 1), (1, -1), (-1, -1), (1, 1),
]


@dataclass
class Grid:
    """
    Rectangular grid with a set of wall cells.

    corner_rule:
      - "fixed":    a cell is enterable only if it is not boxed in by a wall
                    below (y-1) AND a wall to the left (x-1), whatever
                    direction the move comes from.
      - "diagonal": a diagonal move is refused when both cells flanking that
                    move are walls; orthogonal moves only need a free cell.
    """
    width: int
    height: int
    walls: Set[Cell] = field(default_factory=set)
    corner_rule: str = "fixed"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.corner_rule not in CORNER_RULES:
            raise ValueError(f"Unknown corner rule {self.corner_rule!r} (expected one of {CORNER_RULES})")
        self.walls = set(self.walls)

    # -------------------- walls --------------------

    def add_wall(self, c: Cell) -> None:
        self.walls.add(c)

    def remove_wall(self, c: Cell) -> None:
        self.walls.discard(c)

    def toggle_wall(self, c: Cell) -> None:
        if c in self.walls:
            self.walls.remove(c)
        else:
            self.walls.add(c)

    def clear_walls(self) -> None:
        self.walls.clear()

    def contains_wall(self, c: Cell) -> bool:
        return c in self.walls

    # -------------------- traversal --------------------

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid(self, c: Cell) -> bool:
        """In bounds, not a wall, and not boxed in by walls at (x, y-1) and (x-1, y)."""
        if not self.in_bounds(c) or c in self.walls:
            return False
        x, y = c
        return (x, y - 1) not in self.walls or (x - 1, y) not in self.walls

    def can_move(self, frm: Cell, to: Cell) -> bool:
        """Single-step legality under this grid's corner rule."""
        if self.corner_rule == "fixed":
            return self.is_valid(to)

        if not self.in_bounds(to) or to in self.walls:
            return False
        (x, y), (nx, ny) = frm, to
        if nx != x and ny != y:
            return (nx, y) not in self.walls or (x, ny) not in self.walls
        return True

    def get_neighbours(self, of: Cell) -> Optional[List[Cell]]:
        """Enterable neighbours of `of`, or None when there are none."""
        x, y = of
        out: List[Cell] = []
        for dx, dy in DIRECTIONS:
            n = (x + dx, y + dy)
            if self.can_move(of, n):
                out.append(n)
        return out or None

    def with_corner_rule(self, corner_rule: str) -> "Grid":
        """Copy of this grid (same walls) under another corner rule."""
        return Grid(self.width, self.height, set(self.walls), corner_rule)


def new_grid(width: int, height: int, corner_rule: str = "fixed") -> Grid:
    """Empty grid (no walls)."""
    return Grid(width, height, corner_rule=corner_rule)


@dataclass
class SearchResult:
    status: str                   # "found" | "no_path" | "invalid" | "aborted"
    path: Optional[List[Cell]] = None
    cost: Optional[float] = None
    message: str = ""
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == "found"
