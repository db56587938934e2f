from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .metrics import RoundMetrics


@dataclass(frozen=True, slots=True)
class AgentSnapshot:
    id: int
    generation: int
    age: int
    energy: int
    x: int
    y: int
    direction: str
    program: str


@dataclass(slots=True)
class Snapshot:
    round: int
    metrics: Optional[RoundMetrics]
    agents: List[AgentSnapshot]
