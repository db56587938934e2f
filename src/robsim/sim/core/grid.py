from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Sequence

from .errors import EmptyBoard, UnevenRows, UnknownCharacterOnBoard
from .spatial import Coordinates, Direction

if TYPE_CHECKING:
    from .rng import DeterministicRng

EMPTY_MARKER = " "
FOOD_MARKER = "x"


class CellKind(str, Enum):
    EMPTY = "empty"
    FOOD = "food"


@dataclass(slots=True)
class Cell:
    kind: CellKind
    energy_value: int = 0
    ripening_time: int = 0
    ripeness_counter: int = 0
    ripe: bool = False

    @classmethod
    def empty(cls) -> "Cell":
        return cls(kind=CellKind.EMPTY)

    @classmethod
    def food(cls, energy_value: int, ripening_time: int) -> "Cell":
        return cls(
            kind=CellKind.FOOD,
            energy_value=energy_value,
            ripening_time=ripening_time,
            ripeness_counter=ripening_time,
            ripe=True,
        )

    @property
    def has_food(self) -> bool:
        return self.kind is CellKind.FOOD and self.ripe


class Grid:
    """Toroidal board of cells with an incrementally maintained ripe-food count."""

    def __init__(self, rows: Sequence[Sequence[Cell]]):
        if not rows or not rows[0]:
            raise EmptyBoard()
        width = len(rows[0])
        for line, row in enumerate(rows, start=1):
            if len(row) != width:
                raise UnevenRows(line)
        self._rows: List[List[Cell]] = [list(row) for row in rows]
        self._width = width
        self._height = len(self._rows)
        self._ripe_food = sum(1 for row in self._rows for cell in row if cell.has_food)

    @classmethod
    def from_rows(cls, lines: Iterable[str], energy_value: int, ripening_time: int) -> "Grid":
        rows: List[List[Cell]] = []
        width = 0
        for line_number, line in enumerate(lines, start=1):
            row: List[Cell] = []
            for character in line:
                if character == EMPTY_MARKER:
                    row.append(Cell.empty())
                elif character == FOOD_MARKER:
                    row.append(Cell.food(energy_value, ripening_time))
                else:
                    # The reported character is the first one of the row, not the offending one.
                    raise UnknownCharacterOnBoard(line[0])
            if line_number > 1 and len(line) != width:
                raise UnevenRows(line_number)
            width = len(line)
            rows.append(row)
        return cls(rows)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def ripe_food_count(self) -> int:
        return self._ripe_food

    def cell_at(self, position: Coordinates) -> Cell:
        return self._rows[position.y][position.x]

    def resolve_coordinates(self, x: int, y: int) -> Coordinates:
        return Coordinates(x % self._width, y % self._height)

    def neighbor_coordinates(self, position: Coordinates, direction: Direction) -> Coordinates:
        return self.resolve_coordinates(position.x + direction.dx, position.y + direction.dy)

    def has_food(self, position: Coordinates) -> bool:
        return self.cell_at(position).has_food

    def consume_food(self, position: Coordinates) -> int:
        cell = self.cell_at(position)
        if not cell.has_food:
            return 0
        cell.ripe = False
        cell.ripeness_counter = 0
        self._ripe_food -= 1
        return cell.energy_value

    def advance_round(self) -> None:
        for row in self._rows:
            for cell in row:
                if cell.kind is not CellKind.FOOD or cell.ripe:
                    continue
                cell.ripeness_counter += 1
                if cell.ripeness_counter >= cell.ripening_time:
                    cell.ripe = True
                    self._ripe_food += 1

    def random_position(self, rng: "DeterministicRng") -> Coordinates:
        x = rng.next_int(self._width)
        y = rng.next_int(self._height)
        return Coordinates(x, y)
