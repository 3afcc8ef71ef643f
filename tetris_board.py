"""Board grid and placement validity"""
from typing import Iterable, List, Optional, Tuple

from tetris_shapes import Mask

Cell = Optional[str]


class Board:
    """Fixed-size grid of cells, row 0 at the top. None is empty, otherwise a color.

    Only validity checks bound coordinates; the other accessors trust the caller.
    """

    def __init__(self, cols: int = 10, rows: int = 20):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"board size must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        self.grid: List[List[Cell]] = [[None] * cols for _ in range(rows)]

    def is_occupied(self, x: int, y: int) -> bool:
        if y < 0:
            return False
        return self.grid[y][x] is not None

    def get(self, x: int, y: int) -> Cell:
        return self.grid[y][x]

    def set(self, x: int, y: int, color: str):
        self.grid[y][x] = color

    def full_rows(self) -> List[int]:
        """Indices of full rows, scanned bottom to top."""
        return [y for y in range(self.rows - 1, -1, -1) if all(self.grid[y])]

    def clear_rows(self, rows: Iterable[int]):
        drop = set(rows)
        kept = [row for y, row in enumerate(self.grid) if y not in drop]
        self.grid = [[None] * self.cols for _ in range(self.rows - len(kept))] + kept

    def reset(self):
        self.grid = [[None] * self.cols for _ in range(self.rows)]

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)


def is_valid(board: Board, x: int, y: int, mask: Mask) -> bool:
    """Walls and floor reject; cells above the top row never collide."""
    for r, row in enumerate(mask):
        for c, v in enumerate(row):
            if not v:
                continue
            bx, by = x + c, y + r
            if bx < 0 or bx >= board.cols or by >= board.rows:
                return False
            if by >= 0 and board.is_occupied(bx, by):
                return False
    return True
