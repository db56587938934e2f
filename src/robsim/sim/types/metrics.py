from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SummaryStats:
    minimum: int = 0
    mean: float = 0.0
    maximum: int = 0


@dataclass(slots=True)
class RoundMetrics:
    round: int
    ripe_food: int
    population: int
    births: int
    deaths: int
    program_length: SummaryStats
    energy: SummaryStats
    age: SummaryStats
