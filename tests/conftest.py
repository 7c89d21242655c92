import importlib.util
import json
import sys
from pathlib import Path
from uuid import uuid4

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from simulator import SimulationParameters


@pytest.fixture
def load_module():
    def _load(module_path: Path):
        spec = importlib.util.spec_from_file_location(f"testmod_{uuid4().hex}", module_path)
        module = importlib.util.module_from_spec(spec)
        assert spec and spec.loader
        spec.loader.exec_module(module)
        return module

    return _load


@pytest.fixture
def base_parameters() -> SimulationParameters:
    return SimulationParameters(
        trial_count=2000,
        invited_count=150,
        attendance_probability_range=(0.60, 0.90),
        fixed_cost=22000,
        variable_cost_per_guest=125,
        guest_base_count=50,
        budget=30100,
    )


@pytest.fixture
def base_config() -> dict:
    return {
        "trial_count": 500,
        "invited_count": 150,
        "attendance_probability_low": 0.6,
        "attendance_probability_high": 0.9,
        "fixed_cost": 22000,
        "variable_cost_per_guest": 125,
        "guest_base_count": 50,
        "budget": 30100,
        "risk_tolerance": 0.2,
        "seed": 7,
    }


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def write_json():
    def _write(path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    return _write
