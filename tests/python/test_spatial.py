from __future__ import annotations

import pytest

from robsim.sim.core.grid import Grid
from robsim.sim.core.rng import DeterministicRng
from robsim.sim.core.spatial import Coordinates, Direction


def _grid(width: int, height: int) -> Grid:
    return Grid.from_rows([" " * width] * height, energy_value=1, ripening_time=1)


def test_turns_are_quarter_rotations():
    assert Direction.UP.turn_right() is Direction.RIGHT
    assert Direction.RIGHT.turn_right() is Direction.DOWN
    assert Direction.DOWN.turn_right() is Direction.LEFT
    assert Direction.LEFT.turn_right() is Direction.UP
    for direction in Direction:
        assert direction.turn_left().turn_right() is direction
        assert direction.turn_right().turn_right() is direction.opposite()
        assert direction.opposite().opposite() is direction


def test_opposite_negates_offsets():
    for direction in Direction:
        opposite = direction.opposite()
        assert (opposite.dx, opposite.dy) == (-direction.dx, -direction.dy)


def test_random_direction_uses_injected_rng():
    rng_a = DeterministicRng(3)
    rng_b = DeterministicRng(3)
    assert [Direction.random(rng_a) for _ in range(20)] == [Direction.random(rng_b) for _ in range(20)]


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (-1, 0, Coordinates(3, 0)),
        (4, 0, Coordinates(0, 0)),
        (0, -1, Coordinates(0, 2)),
        (0, 3, Coordinates(0, 0)),
        (-5, -7, Coordinates(3, 2)),
        (9, 8, Coordinates(1, 2)),
    ],
)
def test_resolve_coordinates_wraps_with_floor_modulo(x, y, expected):
    assert _grid(4, 3).resolve_coordinates(x, y) == expected


def test_stepping_off_each_edge_lands_on_opposite_edge():
    grid = _grid(4, 3)
    assert grid.neighbor_coordinates(Coordinates(0, 1), Direction.LEFT) == Coordinates(3, 1)
    assert grid.neighbor_coordinates(Coordinates(3, 1), Direction.RIGHT) == Coordinates(0, 1)
    assert grid.neighbor_coordinates(Coordinates(2, 0), Direction.UP) == Coordinates(2, 2)
    assert grid.neighbor_coordinates(Coordinates(2, 2), Direction.DOWN) == Coordinates(2, 0)


def test_random_position_stays_in_bounds():
    grid = _grid(5, 2)
    rng = DeterministicRng(11)
    for _ in range(200):
        position = grid.random_position(rng)
        assert 0 <= position.x < 5
        assert 0 <= position.y < 2
