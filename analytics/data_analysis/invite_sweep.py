import argparse
import json
from pathlib import Path
import sys
from typing import Optional

import numpy as np
import pandas as pd

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from classifier import Recommendation
from config import SimConfig
from io_utils import load_parameters, parameters_from_config
from simulator import SimulationParameters, run
from summarizer import summarize


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare overrun probability across guest-list sizes."
    )
    parser.add_argument(
        "--global-params",
        type=Path,
        default=Path("input_parameters") / "global_parameters.json",
        help="Path to global_parameters.json.",
    )
    parser.add_argument("--start", type=int, default=100, help="Smallest invited count.")
    parser.add_argument("--stop", type=int, default=None, help="Largest invited count (default: invited_count).")
    parser.add_argument("--step", type=int, default=10, help="Step between invited counts.")
    parser.add_argument("--trials", type=int, default=None, help="Override trial_count per point.")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for the sweep.")
    return parser.parse_args()


def sweep_invited_counts(
    parameters: SimulationParameters,
    invited_counts,
    risk_tolerance: float,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """
    Run one full simulation per invited count and tabulate the summaries.

    Every point gets its own child generator spawned from one SeedSequence, so
    the row for a given invited count does not depend on which other counts
    are in the sweep.
    """
    invited_counts = [int(n) for n in invited_counts]
    if not invited_counts:
        raise ValueError("invited_counts must not be empty.")

    children = np.random.SeedSequence(seed).spawn(len(invited_counts))
    rows = []
    for invited, child in zip(invited_counts, children):
        point = SimulationParameters(
            trial_count=parameters.trial_count,
            invited_count=invited,
            attendance_probability_range=parameters.attendance_probability_range,
            fixed_cost=parameters.fixed_cost,
            variable_cost_per_guest=parameters.variable_cost_per_guest,
            guest_base_count=parameters.guest_base_count,
            budget=parameters.budget,
        )
        summary = summarize(run(point, np.random.default_rng(child)), risk_tolerance)
        low, high = summary.risk_confidence_interval
        rows.append(
            {
                "invited_count": invited,
                "overrun_probability": summary.overrun_probability,
                "risk_p2_5": low,
                "risk_p97_5": high,
                "mean_attendee_count": summary.mean_attendee_count,
                "mean_total_cost": summary.mean_total_cost,
                "recommendation": summary.overall_recommendation.value,
            }
        )

    return pd.DataFrame(rows)


def max_invited_within_tolerance(frame: pd.DataFrame) -> Optional[int]:
    ok = frame.loc[frame["recommendation"] == Recommendation.INVITE_ALL.value, "invited_count"]
    if ok.empty:
        return None
    return int(ok.max())


def main() -> None:
    args = parse_args()
    defaults = SimConfig()

    cfg = load_parameters(str(args.global_params))
    if args.trials is not None:
        cfg["trial_count"] = args.trials
    parameters = parameters_from_config(cfg)

    stop = args.stop if args.stop is not None else parameters.invited_count
    if args.step <= 0:
        raise ValueError("--step must be positive.")
    if stop < args.start:
        raise ValueError(f"--stop ({stop}) must be >= --start ({args.start}).")

    risk_tolerance = float(cfg.get("risk_tolerance", defaults.risk_tolerance))
    seed = args.seed if args.seed is not None else cfg.get("seed", defaults.seed)
    counts = range(args.start, stop + 1, args.step)

    print(f"Sweeping invited_count {args.start}..{stop} step {args.step} ({parameters.trial_count} trials each).")
    frame = sweep_invited_counts(parameters, counts, risk_tolerance, seed=seed)

    with pd.option_context("display.width", 120, "display.max_columns", None):
        print(frame.round(3).to_string(index=False))

    best = max_invited_within_tolerance(frame)
    if best is None:
        print(f"No invited count in the sweep keeps overrun probability <= {risk_tolerance:.2f}.")
    else:
        print(f"Largest invited count within tolerance {risk_tolerance:.2f}: {best}")
    print(json.dumps({"risk_tolerance": risk_tolerance, "max_invited_within_tolerance": best}))


if __name__ == "__main__":
    main()
