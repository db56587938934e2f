from __future__ import annotations

from enum import Enum
from typing import Iterable, List


class Instruction(str, Enum):
    MOVE = "i"
    EAT = "j"
    SNIFF = "w"
    TURN_LEFT = "l"
    TURN_RIGHT = "p"

    @classmethod
    def from_char(cls, character: str) -> "Instruction":
        return cls(character)


def parse_program(text: str) -> List[Instruction]:
    """Convert a program string such as ``"ijw"`` into instructions.

    Raises ``ValueError`` on the first character that is not an instruction.
    """

    return [Instruction.from_char(character) for character in text]


def program_to_text(program: Iterable[Instruction]) -> str:
    return "".join(instruction.value for instruction in program)
