from dataclasses import dataclass

@dataclass(frozen=True)
class SimConfig:
    params_path: str = "input_parameters/global_parameters.json"
    trial_count: int = 10000
    seed: int = 42
    risk_tolerance: float = 0.20
    # Two-sided 95% interval on the risk column.
    lower_percentile: float = 2.5
    upper_percentile: float = 97.5
