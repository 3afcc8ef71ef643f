"""Piece model, clockwise rotation, spawn placement"""
from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from tetris_shapes import Mask, ShapeDefinition


def rotate_clockwise(mask: Mask) -> Mask:
    """rotated[i][j] = mask[n-1-j][i]; returns a new mask."""
    n = len(mask)
    return tuple(tuple(mask[n - 1 - j][i] for j in range(n)) for i in range(n))


@dataclass(frozen=True)
class Piece:
    kind: str
    mask: Mask
    color: str
    x: int
    y: int

    @staticmethod
    def spawn(shape: ShapeDefinition, cols: int) -> "Piece":
        x = cols // 2 - len(shape.mask[0]) // 2
        return Piece(shape.name, shape.mask, shape.color, x, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, dx: int = 0) -> "Piece":
        return replace(self, mask=rotate_clockwise(self.mask), x=self.x + dx)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Board coordinates (x, y) of every set cell, including ones above the board."""
        for r, row in enumerate(self.mask):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r
