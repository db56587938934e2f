from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import IO, Optional, Sequence

from ..sim.types.metrics import RoundMetrics, SummaryStats
from ..sim.types.reporter import Reporter
from ..sim.types.snapshot import AgentSnapshot, Snapshot

CSV_HEADER = [
    "round",
    "ripe_food",
    "population",
    "births",
    "deaths",
    "program_min",
    "program_mean",
    "program_max",
    "energy_min",
    "energy_mean",
    "energy_max",
    "age_min",
    "age_mean",
    "age_max",
]


def format_stats(label: str, stats: SummaryStats) -> str:
    return f"{label}: {stats.minimum}/{stats.mean:.2f}/{stats.maximum}"


def format_round(metrics: RoundMetrics) -> str:
    return ", ".join(
        [
            str(metrics.round),
            f"food: {metrics.ripe_food}",
            f"agents: {metrics.population}",
            format_stats("prog", metrics.program_length),
            format_stats("energy", metrics.energy),
            format_stats("age", metrics.age),
        ]
    )


def format_agent(agent: AgentSnapshot) -> str:
    return (
        f"Agent {agent.id}: age: {agent.age}, energy: {agent.energy}, "
        f"position ({agent.x}, {agent.y}), direction: {agent.direction}, program: {agent.program}"
    )


def format_snapshot(snapshot: Snapshot) -> Sequence[str]:
    return ["* Simulation state."] + [f"* {format_agent(agent)}" for agent in snapshot.agents]


def format_extinction(round_number: int) -> str:
    return f"Round {round_number}. No living agents. Simulation finished."


class ConsoleReporter(Reporter):
    def __init__(self, stream: Optional[IO[str]] = None, snapshots: bool = True):
        self._stream = stream if stream is not None else sys.stdout
        self._snapshots = snapshots

    def on_round(self, metrics: RoundMetrics) -> None:
        print(format_round(metrics), file=self._stream)

    def on_snapshot(self, snapshot: Snapshot) -> None:
        if not self._snapshots:
            return
        for line in format_snapshot(snapshot):
            print(line, file=self._stream)

    def on_extinction(self, round_number: int) -> None:
        print(format_extinction(round_number), file=self._stream)


class CsvReporter(Reporter):
    def __init__(self, path: Path):
        self._file = Path(path).open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(CSV_HEADER)

    def on_round(self, metrics: RoundMetrics) -> None:
        row = [metrics.round, metrics.ripe_food, metrics.population, metrics.births, metrics.deaths]
        for stats in (metrics.program_length, metrics.energy, metrics.age):
            row.extend([stats.minimum, f"{stats.mean:.4f}", stats.maximum])
        self._writer.writerow(row)

    def close(self) -> None:
        self._file.close()


class CompositeReporter(Reporter):
    def __init__(self, reporters: Sequence[Reporter]):
        self._reporters = list(reporters)

    def on_round(self, metrics: RoundMetrics) -> None:
        for reporter in self._reporters:
            reporter.on_round(metrics)

    def on_snapshot(self, snapshot: Snapshot) -> None:
        for reporter in self._reporters:
            reporter.on_snapshot(snapshot)

    def on_extinction(self, round_number: int) -> None:
        for reporter in self._reporters:
            reporter.on_extinction(round_number)

    def close(self) -> None:
        for reporter in self._reporters:
            reporter.close()
