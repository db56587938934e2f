from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from ..core.instructions import Instruction

if TYPE_CHECKING:
    from ..core.agent import AgentConstants
    from ..core.rng import DeterministicRng


def _draw_instruction(pool: Sequence[Instruction], rng: DeterministicRng) -> Instruction:
    return pool[rng.next_int(len(pool))]


def mutate_program(
    program: Sequence[Instruction], constants: AgentConstants, rng: DeterministicRng
) -> List[Instruction]:
    """Return a mutated copy of ``program``; the input sequence is left untouched.

    Removal, addition and change are independent trials applied in that order,
    so later steps see the result of earlier ones.
    """

    child = list(program)
    pool = constants.instruction_pool

    if rng.chance(constants.instruction_removal_probability) and child:
        child.pop()

    if rng.chance(constants.instruction_addition_probability):
        child.append(_draw_instruction(pool, rng))

    if rng.chance(constants.instruction_change_probability) and child:
        index = rng.next_int(len(child))
        child[index] = _draw_instruction(pool, rng)

    return child
