import argparse
import json
from pathlib import Path
import sys

# Allow running without installing the package.
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np

from config import SimConfig
from io_utils import load_parameters, parameters_from_config
from simulator import run
from summarizer import summarize


def parse_args(argv=None) -> argparse.Namespace:
    defaults = SimConfig()
    parser = argparse.ArgumentParser(
        description="Simulate guest turnout and the risk of going over budget."
    )
    parser.add_argument(
        "--params",
        type=Path,
        default=Path(defaults.params_path),
        help="Path to global_parameters.json.",
    )
    parser.add_argument("--trials", type=int, default=None, help="Override trial_count.")
    parser.add_argument("--invited", type=int, default=None, help="Override invited_count.")
    parser.add_argument("--seed", type=int, default=None, help="Override the random seed.")
    parser.add_argument(
        "--risk-tolerance",
        type=float,
        default=None,
        help="Override the acceptable probability of going over budget (0-1).",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    defaults = SimConfig()

    cfg = load_parameters(str(args.params))
    cfg.setdefault("trial_count", defaults.trial_count)
    if args.trials is not None:
        cfg["trial_count"] = args.trials
    if args.invited is not None:
        cfg["invited_count"] = args.invited

    parameters = parameters_from_config(cfg)
    seed = args.seed if args.seed is not None else cfg.get("seed", defaults.seed)
    risk_tolerance = (
        args.risk_tolerance
        if args.risk_tolerance is not None
        else float(cfg.get("risk_tolerance", defaults.risk_tolerance))
    )

    rng = np.random.default_rng(seed)
    print(
        f"Running {parameters.trial_count} trials for {parameters.invited_count} invited guests "
        f"(seed={seed})."
    )
    result_set = run(parameters, rng)
    summary = summarize(
        result_set,
        risk_tolerance,
        percentiles=(defaults.lower_percentile, defaults.upper_percentile),
    )

    payload = {"parameters": cfg, "summary": summary.to_dict()}
    print(json.dumps(payload, indent=2))
    print(f"Recommendation: {summary.overall_recommendation.value}")


if __name__ == "__main__":
    main()
