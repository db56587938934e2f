from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .instructions import Instruction
from .spatial import Coordinates, Direction


@dataclass(frozen=True, slots=True)
class AgentConstants:
    round_cost: int
    parent_energy_fraction: float
    reproduction_threshold: int
    reproduction_probability: float
    instruction_removal_probability: float
    instruction_addition_probability: float
    instruction_change_probability: float
    instruction_pool: Tuple[Instruction, ...]


@dataclass(slots=True)
class Agent:
    id: int
    energy: int
    position: Coordinates
    direction: Direction
    constants: AgentConstants
    program: List[Instruction] = field(default_factory=list)
    age: int = 0
    generation: int = 0
    will_multiply: bool = False

    @property
    def alive(self) -> bool:
        return self.energy >= 0

    @property
    def program_length(self) -> int:
        return len(self.program)
