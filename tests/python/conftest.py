import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from robsim.sim.core.config import SimulationConfig  # noqa: E402
from robsim.sim.core.instructions import Instruction  # noqa: E402

VALID_PARAMETERS = """\
rounds 5
initial_population 3
initial_energy 10
food_energy 4
food_ripening_time 2
round_cost 1
reproduction_threshold 8
print_interval 2
reproduction_probability 0.5
parent_energy_fraction 0.5
instruction_removal_probability 0.1
instruction_addition_probability 0.1
instruction_change_probability 0.1
initial_program ijw
instruction_pool ijwlp
"""


def make_config(**overrides) -> SimulationConfig:
    values = dict(
        rounds=3,
        initial_population=1,
        initial_energy=10,
        food_energy=5,
        food_ripening_time=3,
        round_cost=1,
        reproduction_threshold=1000,
        print_interval=1,
        reproduction_probability=0.0,
        parent_energy_fraction=0.5,
        instruction_removal_probability=0.0,
        instruction_addition_probability=0.0,
        instruction_change_probability=0.0,
        initial_program=(Instruction.MOVE,),
        instruction_pool=tuple(Instruction),
        seed=1,
    )
    values.update(overrides)
    return SimulationConfig(**values)


@pytest.fixture
def parameters_text() -> str:
    return VALID_PARAMETERS


@pytest.fixture
def config_factory():
    return make_config


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-config-tests",
        action="store_true",
        default=False,
        help="run tests that are intended only for configuration changes",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "config_change: marks tests that should only run when configuration files change",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-config-tests"):
        return

    skip_marker = pytest.mark.skip(
        reason="Run only when configuration is modified (use --run-config-tests)",
    )

    for item in items:
        if "config_change" in item.keywords:
            item.add_marker(skip_marker)
