from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rng import DeterministicRng


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Cell position on the board. ``y`` is the row index and grows downwards."""

    x: int
    y: int


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def turn_right(self) -> "Direction":
        return Direction((-self.dy, self.dx))

    def turn_left(self) -> "Direction":
        return Direction((self.dy, -self.dx))

    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    @staticmethod
    def random(rng: "DeterministicRng") -> "Direction":
        return _DIRECTIONS[rng.next_int(len(_DIRECTIONS))]


_DIRECTIONS = tuple(Direction)
