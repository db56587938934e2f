from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from ..sim.core.config import PARAMETER_SCHEMA, ParameterSpec, SimulationConfig, build_config, coerce_parameter
from ..sim.core.errors import IncorrectData
from ..sim.core.grid import Grid


def parse_parameters(
    lines: Iterable[str],
    schema: Mapping[str, ParameterSpec] = PARAMETER_SCHEMA,
    seed: Optional[int] = None,
) -> SimulationConfig:
    """Parse ``name value`` lines into a validated configuration.

    Line-level problems are reported with their line number as soon as they are
    found; missing parameters are only detected once every line was read.
    """

    values: Dict[str, Any] = {}
    line_number = 0
    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        name = tokens[0]
        if name in values:
            raise IncorrectData("Repeated parameter.", line_number)
        if name not in schema:
            raise IncorrectData("Unknown parameter name.", line_number)
        if len(tokens) < 2:
            raise IncorrectData("Missing parameter value.", line_number)
        if len(tokens) > 2:
            raise IncorrectData("Wrong number of values in line.", line_number)
        values[name] = coerce_parameter(name, tokens[1], schema, line_number)
    return build_config(values, schema, seed=seed, line=line_number)


def load_parameters(
    path: Path,
    schema: Mapping[str, ParameterSpec] = PARAMETER_SCHEMA,
    seed: Optional[int] = None,
) -> SimulationConfig:
    path = Path(path)
    if path.suffix in {".yaml", ".yml"}:
        config = SimulationConfig.from_yaml(path)
        if seed is not None:
            config.seed = seed
        return config
    with path.open(encoding="utf-8") as handle:
        return parse_parameters(handle, schema, seed=seed)


def load_board(path: Path, config: SimulationConfig) -> Grid:
    with Path(path).open(encoding="utf-8") as handle:
        lines = [line.rstrip("\r\n") for line in handle]
    return Grid.from_rows(lines, config.food_energy, config.food_ripening_time)
