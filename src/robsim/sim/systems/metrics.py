from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from ..types.metrics import RoundMetrics, SummaryStats

if TYPE_CHECKING:
    from ..core.agent import Agent
    from ..core.grid import Grid


def summarize(values: Iterable[int]) -> SummaryStats:
    values = list(values)
    if not values:
        return SummaryStats()
    return SummaryStats(minimum=min(values), mean=sum(values) / len(values), maximum=max(values))


def create_metrics(
    round_number: int,
    grid: Grid,
    agents: Sequence[Agent],
    births: int,
    deaths: int,
) -> RoundMetrics:
    return RoundMetrics(
        round=round_number,
        ripe_food=grid.ripe_food_count,
        population=len(agents),
        births=births,
        deaths=deaths,
        program_length=summarize(agent.program_length for agent in agents),
        energy=summarize(agent.energy for agent in agents),
        age=summarize(agent.age for agent in agents),
    )
