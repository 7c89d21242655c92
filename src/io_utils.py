import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from errors import InvalidParameters
from simulator import SimulationParameters

INTEGER_KEYS = ("trial_count", "invited_count")
NUMERIC_KEYS = (
    "attendance_probability_low",
    "attendance_probability_high",
    "fixed_cost",
    "variable_cost_per_guest",
    "guest_base_count",
    "budget",
)


def load_parameters(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Parameters file not found: {p.resolve()}")
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def _as_int(value: Any, key: str, errors: List[str]) -> Optional[int]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        errors.append(f"'{key}' must be an integer, got {value!r}.")
        return None
    if not number.is_integer():
        errors.append(f"'{key}' must be an integer, got {value!r}.")
        return None
    return int(number)


def _as_float(value: Any, key: str, errors: List[str]) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        errors.append(f"'{key}' must be numeric, got {value!r}.")
        return None


def parameters_from_config(cfg: Dict[str, Any]) -> SimulationParameters:
    """
    Expected structure (flat):
      {"trial_count": 10000, "invited_count": 150,
       "attendance_probability_low": 0.6, "attendance_probability_high": 0.9,
       "fixed_cost": 22000, "variable_cost_per_guest": 125,
       "guest_base_count": 50, "budget": 30100, ...}
    Extra keys (risk_tolerance, seed) are ignored here.
    Range checks happen in simulator.validate_parameters when the run starts.
    """
    missing = [k for k in INTEGER_KEYS + NUMERIC_KEYS if k not in cfg]
    if missing:
        raise InvalidParameters(f"Parameters missing required keys: {', '.join(missing)}.")

    errors: List[str] = []
    ints = {k: _as_int(cfg[k], k, errors) for k in INTEGER_KEYS}
    nums = {k: _as_float(cfg[k], k, errors) for k in NUMERIC_KEYS}
    if errors:
        raise InvalidParameters("Invalid parameters file:\n- " + "\n- ".join(errors))

    return SimulationParameters(
        trial_count=ints["trial_count"],
        invited_count=ints["invited_count"],
        attendance_probability_range=(
            nums["attendance_probability_low"],
            nums["attendance_probability_high"],
        ),
        fixed_cost=nums["fixed_cost"],
        variable_cost_per_guest=nums["variable_cost_per_guest"],
        guest_base_count=nums["guest_base_count"],
        budget=nums["budget"],
    )
