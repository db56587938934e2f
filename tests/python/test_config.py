from __future__ import annotations

import pytest

from robsim.sim.core.config import PARAMETER_SCHEMA, SimulationConfig, load_config
from robsim.sim.core.errors import ConfigError, IncorrectData, MissingParameter
from robsim.sim.core.instructions import Instruction

RAW = {
    "rounds": 10,
    "initial_population": 4,
    "initial_energy": 12,
    "food_energy": 3,
    "food_ripening_time": 5,
    "round_cost": 1,
    "reproduction_threshold": 6,
    "print_interval": 5,
    "reproduction_probability": 0.25,
    "parent_energy_fraction": 0.5,
    "instruction_removal_probability": 0,
    "instruction_addition_probability": 0.1,
    "instruction_change_probability": 1,
    "initial_program": "wij",
    "instruction_pool": "ijwlp",
}


def test_load_config_converts_values():
    config = load_config(dict(RAW, seed=3))

    assert config.rounds == 10
    assert config.instruction_change_probability == 1.0
    assert isinstance(config.instruction_removal_probability, float)
    assert config.initial_program == (Instruction.SNIFF, Instruction.MOVE, Instruction.EAT)
    assert config.instruction_pool == tuple(Instruction)
    assert config.seed == 3


def test_schema_covers_every_loaded_field():
    config = load_config(RAW)
    for name in PARAMETER_SCHEMA:
        assert hasattr(config, name)


def test_agent_constants_are_copied_from_config():
    config = load_config(RAW)
    constants = config.agent_constants()

    assert constants.round_cost == 1
    assert constants.reproduction_threshold == 6
    assert constants.parent_energy_fraction == 0.5
    assert constants.instruction_pool == config.instruction_pool


@pytest.mark.parametrize("name", sorted(PARAMETER_SCHEMA))
def test_missing_parameter_is_named(name):
    raw = {k: v for k, v in RAW.items() if k != name}
    with pytest.raises(MissingParameter) as excinfo:
        load_config(raw)
    assert excinfo.value.name == name


@pytest.mark.parametrize(
    "name, value",
    [
        ("rounds", -1),
        ("print_interval", 0),
        ("reproduction_probability", 1.5),
        ("parent_energy_fraction", -0.1),
    ],
)
def test_out_of_range_values_are_rejected(name, value):
    with pytest.raises(IncorrectData, match="out of range"):
        load_config(dict(RAW, **{name: value}))


@pytest.mark.parametrize(
    "name, value",
    [("rounds", 2.5), ("initial_energy", "many"), ("reproduction_probability", "often"), ("round_cost", True)],
)
def test_wrong_types_are_rejected(name, value):
    with pytest.raises(IncorrectData, match="Wrong type"):
        load_config(dict(RAW, **{name: value}))


def test_unknown_parameter_is_rejected():
    with pytest.raises(IncorrectData, match="Unknown parameter"):
        load_config(dict(RAW, colour="blue"))


def test_unknown_instruction_character_is_reported():
    with pytest.raises(IncorrectData, match="Unknown instruction: z"):
        load_config(dict(RAW, initial_program="ijz"))


def test_program_outside_pool_is_rejected():
    with pytest.raises(IncorrectData, match="outside the instruction pool"):
        load_config(dict(RAW, initial_program="ip", instruction_pool="i"))


def test_config_errors_are_value_errors():
    assert issubclass(ConfigError, ValueError)


def test_from_yaml_round_trips_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("\n".join(f"{k}: {v}" for k, v in RAW.items()) + "\nseed: 9\n")

    config = SimulationConfig.from_yaml(path)

    assert config.initial_population == 4
    assert config.seed == 9


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- rounds\n- 5\n")

    with pytest.raises(IncorrectData):
        SimulationConfig.from_yaml(path)


@pytest.mark.parametrize("seed", ["abc", True, [1, 2]])
def test_bad_seed_is_rejected(seed):
    with pytest.raises(IncorrectData, match="Wrong type"):
        load_config(dict(RAW, seed=seed))
