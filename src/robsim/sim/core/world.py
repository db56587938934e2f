from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .agent import Agent
from .config import SimulationConfig
from .grid import Grid
from .instructions import program_to_text
from .rng import DeterministicRng
from ..systems import lifecycle, metrics as metrics_system
from ..types.metrics import RoundMetrics
from ..types.reporter import Reporter
from ..types.snapshot import AgentSnapshot, Snapshot

logger = logging.getLogger(__name__)


class SimulationState(str, Enum):
    RUNNING = "Running"
    COMPLETED = "Completed"
    EXTINCT = "Extinct"


@dataclass(frozen=True, slots=True)
class SimulationResult:
    state: SimulationState
    rounds_completed: int
    extinct_round: Optional[int]
    final_metrics: Optional[RoundMetrics]


class World:
    def __init__(self, config: SimulationConfig, grid: Grid, rng: Optional[DeterministicRng] = None):
        self._config = config
        self._grid = grid
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._constants = config.agent_constants()
        self._agents: List[Agent] = []
        self._birth_queue: List[Agent] = []
        self._next_id = 0
        self._state = SimulationState.RUNNING
        self._round = 0
        self._extinct_round: Optional[int] = None
        self._metrics: Optional[RoundMetrics] = None
        self._history: List[RoundMetrics] = []
        self._bootstrap_population()

    @property
    def agents(self) -> List[Agent]:
        return self._agents

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def round(self) -> int:
        return self._round

    @property
    def metrics(self) -> Optional[RoundMetrics]:
        return self._metrics

    @property
    def history(self) -> List[RoundMetrics]:
        return self._history

    def step(self, round_number: int) -> Optional[RoundMetrics]:
        """Play one round. Returns ``None`` when the population died out."""

        if self._state is not SimulationState.RUNNING:
            raise RuntimeError(f"Simulation already finished: {self._state.value}")

        self._round = round_number
        self._grid.advance_round()
        self._rng.shuffle(self._agents)

        for agent in self._agents:
            lifecycle.new_round(agent, self._grid, self._rng)
            if lifecycle.can_multiply(agent):
                child = lifecycle.multiply(agent, self._rng, self._allocate_id())
                if child is not None:
                    self._birth_queue.append(child)

        births = len(self._birth_queue)
        self._apply_births()
        deaths = self._remove_dead()

        if not self._agents:
            self._state = SimulationState.EXTINCT
            self._extinct_round = round_number
            self._metrics = None
            logger.info("Population extinct in round %d", round_number)
            return None

        metrics = metrics_system.create_metrics(round_number, self._grid, self._agents, births, deaths)
        self._metrics = metrics
        self._history.append(metrics)
        logger.debug(
            "Round %d: population=%d births=%d deaths=%d ripe_food=%d",
            round_number,
            metrics.population,
            births,
            deaths,
            metrics.ripe_food,
        )
        return metrics

    def run(self, reporter: Optional[Reporter] = None) -> SimulationResult:
        if self._state is not SimulationState.RUNNING:
            raise RuntimeError(f"Simulation already finished: {self._state.value}")
        reporter = reporter if reporter is not None else Reporter()
        rounds = self._config.rounds
        interval = self._config.print_interval
        logger.info(
            "Starting simulation: rounds=%d population=%d seed=%s", rounds, len(self._agents), self._rng.seed
        )

        for round_number in range(self._round + 1, rounds + 1):
            metrics = self.step(round_number)
            if metrics is None:
                reporter.on_extinction(round_number)
                return self._result()
            reporter.on_round(metrics)
            if round_number % interval == 0:
                reporter.on_snapshot(self.snapshot(round_number))

        # The run always ends with a full snapshot.
        if rounds % interval != 0:
            reporter.on_snapshot(self.snapshot(rounds))
        self._state = SimulationState.COMPLETED
        logger.info("Simulation completed after %d rounds, population=%d", rounds, len(self._agents))
        return self._result()

    def snapshot(self, round_number: int) -> Snapshot:
        return Snapshot(
            round=round_number,
            metrics=self._metrics,
            agents=[self._agent_snapshot(agent) for agent in self._agents],
        )

    def _result(self) -> SimulationResult:
        return SimulationResult(
            state=self._state,
            rounds_completed=self._round,
            extinct_round=self._extinct_round,
            final_metrics=self._metrics,
        )

    def _bootstrap_population(self) -> None:
        for _ in range(self._config.initial_population):
            agent = lifecycle.spawn_agent(
                self._allocate_id(), self._config, self._constants, self._grid, self._rng
            )
            self._agents.append(agent)

    def _allocate_id(self) -> int:
        agent_id = self._next_id
        self._next_id += 1
        return agent_id

    @staticmethod
    def _agent_snapshot(agent: Agent) -> AgentSnapshot:
        return AgentSnapshot(
            id=agent.id,
            generation=agent.generation,
            age=agent.age,
            energy=agent.energy,
            x=agent.position.x,
            y=agent.position.y,
            direction=agent.direction.name,
            program=program_to_text(agent.program),
        )

    def _apply_births(self) -> None:
        self._agents.extend(self._birth_queue)
        self._birth_queue.clear()

    def _remove_dead(self) -> int:
        deaths = 0
        survivors = []
        for agent in self._agents:
            if agent.alive:
                survivors.append(agent)
            else:
                deaths += 1
        self._agents = survivors
        return deaths
