from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml

from .agent import AgentConstants
from .errors import IncorrectData, MissingParameter
from .instructions import Instruction, parse_program


@dataclass(frozen=True)
class ParameterSpec:
    kind: type
    check: Callable[[Any], bool]
    message: str = "Value out of range."


def _non_negative(value: int) -> bool:
    return value >= 0


def _positive(value: int) -> bool:
    return value >= 1


def _probability(value: float) -> bool:
    return 0.0 <= value <= 1.0


def _non_empty(value: Tuple[Instruction, ...]) -> bool:
    return len(value) > 0


PARAMETER_SCHEMA: Dict[str, ParameterSpec] = {
    "rounds": ParameterSpec(int, _non_negative),
    "initial_population": ParameterSpec(int, _non_negative),
    "initial_energy": ParameterSpec(int, _non_negative),
    "food_energy": ParameterSpec(int, _non_negative),
    "food_ripening_time": ParameterSpec(int, _non_negative),
    "round_cost": ParameterSpec(int, _non_negative),
    "reproduction_threshold": ParameterSpec(int, _non_negative),
    "print_interval": ParameterSpec(int, _positive),
    "reproduction_probability": ParameterSpec(float, _probability),
    "parent_energy_fraction": ParameterSpec(float, _probability),
    "instruction_removal_probability": ParameterSpec(float, _probability),
    "instruction_addition_probability": ParameterSpec(float, _probability),
    "instruction_change_probability": ParameterSpec(float, _probability),
    "initial_program": ParameterSpec(tuple, _non_empty, "Initial program is empty."),
    "instruction_pool": ParameterSpec(tuple, _non_empty, "Instruction pool is empty."),
}


@dataclass
class SimulationConfig:
    rounds: int = 100
    initial_population: int = 10
    initial_energy: int = 20
    food_energy: int = 5
    food_ripening_time: int = 8
    round_cost: int = 1
    reproduction_threshold: int = 10
    print_interval: int = 10
    reproduction_probability: float = 0.2
    parent_energy_fraction: float = 0.5
    instruction_removal_probability: float = 0.01
    instruction_addition_probability: float = 0.01
    instruction_change_probability: float = 0.01
    initial_program: Tuple[Instruction, ...] = (Instruction.SNIFF, Instruction.MOVE, Instruction.EAT)
    instruction_pool: Tuple[Instruction, ...] = field(default_factory=lambda: tuple(Instruction))
    seed: Optional[int] = None

    def agent_constants(self) -> AgentConstants:
        return AgentConstants(
            round_cost=self.round_cost,
            parent_energy_fraction=self.parent_energy_fraction,
            reproduction_threshold=self.reproduction_threshold,
            reproduction_probability=self.reproduction_probability,
            instruction_removal_probability=self.instruction_removal_probability,
            instruction_addition_probability=self.instruction_addition_probability,
            instruction_change_probability=self.instruction_change_probability,
            instruction_pool=tuple(self.instruction_pool),
        )

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        try:
            data = yaml.safe_load(Path(path).read_text()) or {}
        except yaml.YAMLError as exc:
            raise IncorrectData(f"Invalid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise IncorrectData("Configuration must be a mapping of parameter names to values.")
        return load_config(data)


def coerce_parameter(name: str, raw: Any, schema: Mapping[str, ParameterSpec], line: Optional[int] = None) -> Any:
    """Convert one raw parameter value to its schema kind and range-check it."""

    spec = schema.get(name)
    if spec is None:
        raise IncorrectData(f"Unknown parameter name: {name}.", line)

    if spec.kind is tuple:
        if not isinstance(raw, str):
            raise IncorrectData(f"Parameter {name} must be an instruction string.", line)
        try:
            value: Any = tuple(parse_program(raw))
        except ValueError:
            bad = next(c for c in raw if c not in {i.value for i in Instruction})
            raise IncorrectData(f"Unknown instruction: {bad}", line) from None
    elif spec.kind is int:
        if isinstance(raw, bool):
            raise IncorrectData("Wrong type.", line)
        if isinstance(raw, str):
            try:
                raw = int(raw)
            except ValueError:
                raise IncorrectData("Wrong type.", line) from None
        if not isinstance(raw, int):
            raise IncorrectData("Wrong type.", line)
        value = raw
    else:
        if isinstance(raw, bool):
            raise IncorrectData("Wrong type.", line)
        try:
            value = float(raw)
        except (TypeError, ValueError):
            raise IncorrectData("Wrong type.", line) from None

    if not spec.check(value):
        raise IncorrectData(spec.message, line)
    return value


def build_config(
    values: Mapping[str, Any],
    schema: Mapping[str, ParameterSpec] = PARAMETER_SCHEMA,
    seed: Optional[int] = None,
    line: Optional[int] = None,
) -> SimulationConfig:
    """Create a config from already coerced values, checking completeness."""

    for name in schema:
        if name not in values:
            raise MissingParameter(name)

    pool = set(values["instruction_pool"])
    if any(instruction not in pool for instruction in values["initial_program"]):
        raise IncorrectData("Program contains instructions outside the instruction pool.", line)

    known = {f.name for f in fields(SimulationConfig)}
    kwargs = {name: value for name, value in values.items() if name in known}
    return SimulationConfig(seed=seed, **kwargs)


def _coerce_seed(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise IncorrectData("Wrong type.")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise IncorrectData("Wrong type.") from None


def load_config(raw: Mapping[str, Any], schema: Mapping[str, ParameterSpec] = PARAMETER_SCHEMA) -> SimulationConfig:
    seed = _coerce_seed(raw.get("seed"))
    values = {
        name: coerce_parameter(name, value, schema)
        for name, value in raw.items()
        if name != "seed"
    }
    return build_config(values, schema, seed=seed)
