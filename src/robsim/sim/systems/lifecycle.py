from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from ..core.agent import Agent
from ..core.spatial import Direction
from .interpreter import run_program
from .mutation import mutate_program

if TYPE_CHECKING:
    from ..core.config import SimulationConfig
    from ..core.agent import AgentConstants
    from ..core.grid import Grid
    from ..core.rng import DeterministicRng


def draw_will_multiply(agent: Agent, rng: DeterministicRng) -> bool:
    return rng.chance(agent.constants.reproduction_probability)


def spawn_agent(
    agent_id: int,
    config: SimulationConfig,
    constants: AgentConstants,
    grid: Grid,
    rng: DeterministicRng,
) -> Agent:
    position = grid.random_position(rng)
    direction = Direction.random(rng)
    agent = Agent(
        id=agent_id,
        energy=config.initial_energy,
        position=position,
        direction=direction,
        constants=constants,
        program=list(config.initial_program),
    )
    agent.will_multiply = draw_will_multiply(agent, rng)
    return agent


def new_round(agent: Agent, grid: Grid, rng: DeterministicRng) -> None:
    agent.age += 1
    agent.energy -= agent.constants.round_cost
    run_program(agent, grid)
    agent.will_multiply = (
        draw_will_multiply(agent, rng) and agent.energy >= agent.constants.reproduction_threshold
    )


def can_multiply(agent: Agent) -> bool:
    return agent.will_multiply and agent.energy >= agent.constants.reproduction_threshold


def multiply(agent: Agent, rng: DeterministicRng, child_id: int) -> Optional[Agent]:
    if not can_multiply(agent):
        return None

    constants = agent.constants
    child_program = mutate_program(agent.program, constants, rng)
    child_energy = math.floor(agent.energy * constants.parent_energy_fraction)
    agent.energy -= child_energy
    child = Agent(
        id=child_id,
        energy=child_energy,
        position=agent.position,
        direction=agent.direction.opposite(),
        constants=constants,
        program=child_program,
        generation=agent.generation + 1,
    )
    child.will_multiply = draw_will_multiply(child, rng)
    return child
