import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from config import SimConfig
from errors import InvalidParameters
from io_utils import load_parameters, parameters_from_config


def test_load_parameters_raises_for_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_parameters(str(tmp_path / "missing.json"))


def test_load_parameters_reads_json(tmp_path: Path, base_config: dict, write_json):
    path = tmp_path / "global_parameters.json"
    write_json(path, base_config)
    assert load_parameters(str(path)) == base_config


def test_parameters_from_config_builds_parameters(base_config: dict):
    params = parameters_from_config(base_config)
    assert params.trial_count == 500
    assert params.invited_count == 150
    assert params.attendance_probability_range == (0.6, 0.9)
    assert params.budget == 30100.0


def test_parameters_from_config_accepts_integral_floats(base_config: dict):
    base_config["trial_count"] = 500.0
    assert parameters_from_config(base_config).trial_count == 500


def test_parameters_from_config_lists_missing_keys(base_config: dict):
    del base_config["budget"]
    del base_config["fixed_cost"]
    with pytest.raises(InvalidParameters, match="fixed_cost, budget"):
        parameters_from_config(base_config)


def test_parameters_from_config_rejects_non_numeric(base_config: dict):
    base_config["invited_count"] = "many"
    base_config["trial_count"] = 12.5
    base_config["budget"] = "lots"
    with pytest.raises(InvalidParameters) as exc:
        parameters_from_config(base_config)
    message = str(exc.value)
    assert "'invited_count' must be an integer" in message
    assert "'trial_count' must be an integer" in message
    assert "'budget' must be numeric" in message


def test_shipped_parameters_file_is_valid(project_root: Path):
    cfg = load_parameters(str(project_root / SimConfig().params_path))
    params = parameters_from_config(cfg)
    low, high = params.attendance_probability_range
    assert 0.0 <= low <= high <= 1.0
    assert 0.0 <= float(cfg["risk_tolerance"]) <= 1.0


def test_sim_config_is_frozen():
    cfg = SimConfig()
    assert (cfg.lower_percentile, cfg.upper_percentile) == (2.5, 97.5)
    with pytest.raises(AttributeError):
        cfg.seed = 1
