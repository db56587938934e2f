from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from ..core.instructions import Instruction

if TYPE_CHECKING:
    from ..core.agent import Agent
    from ..core.grid import Grid

INSTRUCTION_COST = 1

# Order matters: the first ripe neighbour in this order is the one eaten.
_EAT_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def move(agent: Agent, grid: Grid) -> None:
    agent.position = grid.neighbor_coordinates(agent.position, agent.direction)
    if grid.has_food(agent.position):
        agent.energy += grid.consume_food(agent.position)


def eat(agent: Agent, grid: Grid) -> None:
    x, y = agent.position.x, agent.position.y
    for dx, dy in _EAT_OFFSETS:
        target = grid.resolve_coordinates(x + dx, y + dy)
        if grid.has_food(target):
            agent.position = target
            agent.energy += grid.consume_food(target)
            return


def sniff(agent: Agent, grid: Grid) -> None:
    for _ in range(4):
        agent.direction = agent.direction.turn_right()
        if grid.has_food(grid.neighbor_coordinates(agent.position, agent.direction)):
            return


def execute_instruction(agent: Agent, grid: Grid, instruction: Instruction) -> None:
    if instruction is Instruction.MOVE:
        move(agent, grid)
    elif instruction is Instruction.EAT:
        eat(agent, grid)
    elif instruction is Instruction.SNIFF:
        sniff(agent, grid)
    elif instruction is Instruction.TURN_LEFT:
        agent.direction = agent.direction.turn_left()
    elif instruction is Instruction.TURN_RIGHT:
        agent.direction = agent.direction.turn_right()
    else:
        raise ValueError(f"Unknown instruction: {instruction!r}")


def run_program(agent: Agent, grid: Grid) -> int:
    """Run the agent's program until it ends or the agent runs out of energy.

    Every executed instruction costs ``INSTRUCTION_COST`` energy after it runs.
    Returns the number of instructions executed.
    """

    index = 0
    program = agent.program
    while agent.energy >= 0 and index < len(program):
        execute_instruction(agent, grid, program[index])
        agent.energy -= INSTRUCTION_COST
        index += 1
    return index
