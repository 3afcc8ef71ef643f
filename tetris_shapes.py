"""Shape catalog: the seven tetromino kinds, stored in square bounding boxes"""
import random
from dataclasses import dataclass
from typing import Optional, Tuple

Mask = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class ShapeDefinition:
    name: str
    mask: Mask
    color: str

    def __post_init__(self):
        n = len(self.mask)
        if n == 0 or any(len(row) != n for row in self.mask):
            raise ValueError(f"shape {self.name!r} must have a non-empty square mask")

    @property
    def size(self) -> int:
        return len(self.mask)


KINDS: Tuple[ShapeDefinition, ...] = (
    ShapeDefinition("I", ((0, 0, 0, 0),
                          (1, 1, 1, 1),
                          (0, 0, 0, 0),
                          (0, 0, 0, 0)), "#00FFFF"),
    ShapeDefinition("J", ((1, 0, 0),
                          (1, 1, 1),
                          (0, 0, 0)), "#0000FF"),
    ShapeDefinition("L", ((0, 0, 1),
                          (1, 1, 1),
                          (0, 0, 0)), "#FFA500"),
    ShapeDefinition("O", ((1, 1),
                          (1, 1)), "#FFFF00"),
    ShapeDefinition("S", ((0, 1, 1),
                          (1, 1, 0),
                          (0, 0, 0)), "#00FF00"),
    ShapeDefinition("T", ((0, 1, 0),
                          (1, 1, 1),
                          (0, 0, 0)), "#800080"),
    ShapeDefinition("Z", ((1, 1, 0),
                          (0, 1, 1),
                          (0, 0, 0)), "#FF0000"),
)

_BY_NAME = {k.name: k for k in KINDS}


def kinds() -> Tuple[ShapeDefinition, ...]:
    return KINDS


def by_name(name: str) -> ShapeDefinition:
    return _BY_NAME[name]


def pick_random(rng: Optional[random.Random] = None) -> ShapeDefinition:
    """Uniform pick with replacement; the same kind may come up twice in a row."""
    return (rng or random).choice(KINDS)
