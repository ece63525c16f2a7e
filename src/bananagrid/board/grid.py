"""Fixed-size square grid addressed on a Cartesian plane centered at the origin."""

from typing import Dict, Iterator, List, Optional, Tuple

from .errors import OutOfBoundsError
from .models import Orientation


Cell = Tuple[int, int]

DEFAULT_SIDE_LENGTH = 33
EMPTY_GLYPH = "-"


class Grid:
    """
    Square grid of optional letters.

    Only filled cells are stored, so copies cost as much as the number of
    tiles on the board rather than the area of the grid. `x` grows to the
    right and `y` grows upward.

    Coordinates run from `-(side // 2)` to `min + side - 1` on both axes, so
    an even side still has exactly `side` cells per axis and one more cell on
    the negative side of the origin than on the positive side. A plain
    `side // 2` upper bound would give even sides an extra row and column.
    """

    def __init__(self, side_length: int = DEFAULT_SIDE_LENGTH):
        if side_length < 1:
            raise ValueError(f"Side length must be positive, got {side_length}")
        self.side_length = side_length
        self.min = -(side_length // 2)
        self.max = self.min + side_length - 1
        self._cells: Dict[Cell, str] = {}

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.side_length = self.side_length
        clone.min = self.min
        clone.max = self.max
        clone._cells = dict(self._cells)
        return clone

    def in_bounds(self, x: int, y: int) -> bool:
        return self.min <= x <= self.max and self.min <= y <= self.max

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Cell ({x}, {y}) is outside the grid [{self.min}, {self.max}]"
            )

    def get(self, x: int, y: int) -> Optional[str]:
        """Letter at (x, y), or None when the cell is empty."""
        self._check(x, y)
        return self._cells.get((x, y))

    def set(self, x: int, y: int, letter: str) -> None:
        self._check(x, y)
        self._cells[(x, y)] = letter

    def is_empty(self, x: int, y: int) -> bool:
        """Empty cells and cells off the grid both count as empty."""
        return (x, y) not in self._cells

    def is_filled(self, x: int, y: int) -> bool:
        return (x, y) in self._cells

    def filled(self) -> Iterator[Tuple[Cell, str]]:
        return iter(self._cells.items())

    def __len__(self) -> int:
        return len(self._cells)

    def read_run(self, x: int, y: int, orientation: Orientation) -> str:
        """Read filled cells from (x, y) rightward or downward until a gap."""
        dx, dy = (1, 0) if orientation is Orientation.HORIZONTAL else (0, -1)
        letters: List[str] = []
        while (x, y) in self._cells:
            letters.append(self._cells[(x, y)])
            x += dx
            y += dy
        return "".join(letters)

    def runs(self) -> Iterator[Tuple[Cell, Orientation, str]]:
        """
        Yield every maximal run of two or more letters.

        A cell starts a horizontal run when the cell to its left is empty and
        the cell to its right is filled; a vertical run when the cell above is
        empty and the cell below is filled.
        """
        for (x, y) in sorted(self._cells, key=lambda c: (-c[1], c[0])):
            if self.is_empty(x - 1, y) and self.is_filled(x + 1, y):
                yield (x, y), Orientation.HORIZONTAL, self.read_run(x, y, Orientation.HORIZONTAL)
            if self.is_empty(x, y + 1) and self.is_filled(x, y - 1):
                yield (x, y), Orientation.VERTICAL, self.read_run(x, y, Orientation.VERTICAL)

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """(min_x, max_x, min_y, max_y) of the filled cells."""
        if not self._cells:
            return None
        xs = [c[0] for c in self._cells]
        ys = [c[1] for c in self._cells]
        return min(xs), max(xs), min(ys), max(ys)

    def render(self, placeholder: str = EMPTY_GLYPH, trim: bool = False) -> str:
        """Render the grid top row first, one space between cells."""
        if trim:
            box = self.bounding_box()
            if box is None:
                return ""
            min_x, max_x, min_y, max_y = box
        else:
            min_x = min_y = self.min
            max_x = max_y = self.max

        lines = [
            " ".join(self._cells.get((x, y), placeholder) for x in range(min_x, max_x + 1))
            for y in range(max_y, min_y - 1, -1)
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
