from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple
import math
import numpy as np
import pandas as pd

from classifier import (
    OverBudgetFlag,
    Recommendation,
    classify_over_budget,
    classify_trial,
)
from cost_model import compute_risk, compute_total_cost
from errors import InvalidParameters


RESULT_COLUMNS = [
    "trial_index",
    "attendance_probability",
    "attendee_count",
    "total_cost",
    "risk",
    "over_budget_flag",
    "recommendation",
]


@dataclass(frozen=True)
class SimulationParameters:
    trial_count: int
    invited_count: int
    attendance_probability_range: Tuple[float, float]
    fixed_cost: float
    variable_cost_per_guest: float
    guest_base_count: float
    budget: float


@dataclass(frozen=True)
class TrialResult:
    trial_index: int
    attendee_count: int
    total_cost: float
    risk: float
    over_budget_flag: OverBudgetFlag
    recommendation: Recommendation
    # Probability drawn for this trial; NaN when the trial was evaluated directly.
    attendance_probability: float = field(default=float("nan"), compare=False)


@dataclass(frozen=True)
class SimulationResultSet:
    parameters: SimulationParameters
    trials: Tuple[TrialResult, ...]

    def __len__(self) -> int:
        return len(self.trials)

    def __iter__(self) -> Iterator[TrialResult]:
        return iter(self.trials)

    def __getitem__(self, idx: int) -> TrialResult:
        return self.trials[idx]

    @property
    def attendee_counts(self) -> np.ndarray:
        return np.array([t.attendee_count for t in self.trials], dtype=int)

    @property
    def total_costs(self) -> np.ndarray:
        return np.array([t.total_cost for t in self.trials], dtype=float)

    @property
    def risks(self) -> np.ndarray:
        return np.array([t.risk for t in self.trials], dtype=float)

    def to_frame(self) -> pd.DataFrame:
        """One row per trial, in trial order, with the enum columns as plain labels."""
        rows = [
            {
                "trial_index": t.trial_index,
                "attendance_probability": t.attendance_probability,
                "attendee_count": t.attendee_count,
                "total_cost": t.total_cost,
                "risk": t.risk,
                "over_budget_flag": t.over_budget_flag.value,
                "recommendation": t.recommendation.value,
            }
            for t in self.trials
        ]
        return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)


def validate_parameters(parameters: SimulationParameters) -> None:
    """
    Check every run input up front and raise InvalidParameters listing all
    violations. Nothing is sampled before this passes.
    """
    errors: List[str] = []

    if not _is_integer(parameters.trial_count) or parameters.trial_count <= 0:
        errors.append(f"trial_count must be a positive integer, got {parameters.trial_count!r}.")

    if not _is_integer(parameters.invited_count) or parameters.invited_count < 0:
        errors.append(f"invited_count must be a non-negative integer, got {parameters.invited_count!r}.")

    prob_range = parameters.attendance_probability_range
    try:
        p_low, p_high = prob_range
    except (TypeError, ValueError):
        errors.append(f"attendance_probability_range must be a (low, high) pair, got {prob_range!r}.")
    else:
        bounds_ok = True
        for label, value in (("low", p_low), ("high", p_high)):
            if not _is_number(value) or not (0.0 <= value <= 1.0):
                errors.append(f"attendance probability {label} bound must be in [0, 1], got {value!r}.")
                bounds_ok = False
        if bounds_ok and p_low > p_high:
            errors.append(f"attendance probability low bound {p_low} exceeds high bound {p_high}.")

    for name in ("fixed_cost", "variable_cost_per_guest", "guest_base_count", "budget"):
        value = getattr(parameters, name)
        if not _is_number(value) or not math.isfinite(value) or value < 0:
            errors.append(f"{name} must be a non-negative number, got {value!r}.")

    if errors:
        raise InvalidParameters("Invalid simulation parameters:\n- " + "\n- ".join(errors))


def sample_attendance_probability(
    probability_range: Tuple[float, float],
    rng: np.random.Generator,
    size: Optional[int] = None,
):
    """
    Uniform draw of the attendance probability from [low, high].
    A degenerate range (p, p) always returns p.
    """
    low, high = probability_range
    return rng.uniform(low, high, size=size)


def sample_attendance(
    invited_count: int,
    probability,
    rng: np.random.Generator,
    size: Optional[int] = None,
):
    """Number of invitees who attend: Binomial(invited_count, probability)."""
    return rng.binomial(invited_count, probability, size=size)


def expected_attendance(invited_count: int, probability: float) -> int:
    """
    Deterministic point estimate ceil(p * n), used to evaluate a single
    scenario without sampling.
    """
    # Rounding first keeps products like 0.6 * 150 = 90.00000000000001 at 90.
    return int(math.ceil(round(probability * invited_count, 9)))


def evaluate_trial(
    parameters: SimulationParameters,
    attendee_count: int,
    trial_index: int = 1,
    attendance_probability: float = float("nan"),
) -> TrialResult:
    total_cost = compute_total_cost(
        parameters.fixed_cost,
        parameters.variable_cost_per_guest,
        parameters.guest_base_count,
        attendee_count,
    )
    risk = compute_risk(parameters.budget, total_cost)
    return TrialResult(
        trial_index=trial_index,
        attendee_count=int(attendee_count),
        total_cost=total_cost,
        risk=risk,
        over_budget_flag=classify_over_budget(risk),
        recommendation=classify_trial(risk),
        attendance_probability=float(attendance_probability),
    )


def run(
    parameters: SimulationParameters,
    rng: Optional[np.random.Generator] = None,
) -> SimulationResultSet:
    """
    Run parameters.trial_count independent trials.

    Each trial draws its own attendance probability from the configured range,
    then a binomial attendee count, then derives cost, risk and the per-trial
    flags. All probabilities are drawn first and all attendee counts second, in
    two vectorised calls, so a given generator state always yields the same
    result set.

    Parameters
    ----------
    parameters : SimulationParameters
        Validated before any draw; InvalidParameters is raised otherwise.
    rng : np.random.Generator, optional
        Source of randomness. A fresh unseeded generator is used when omitted;
        the global numpy random state is never used.
    """
    validate_parameters(parameters)
    if rng is None:
        rng = np.random.default_rng()

    k = parameters.trial_count
    probs = sample_attendance_probability(parameters.attendance_probability_range, rng, size=k)
    attendees = sample_attendance(parameters.invited_count, probs, rng, size=k)

    total_costs = compute_total_cost(
        parameters.fixed_cost,
        parameters.variable_cost_per_guest,
        parameters.guest_base_count,
        attendees,
    )
    risks = compute_risk(parameters.budget, total_costs)

    trials = tuple(
        TrialResult(
            trial_index=idx,
            attendee_count=count,
            total_cost=cost,
            risk=risk,
            over_budget_flag=classify_over_budget(risk),
            recommendation=classify_trial(risk),
            attendance_probability=p,
        )
        for idx, (p, count, cost, risk) in enumerate(
            zip(probs.tolist(), attendees.tolist(), total_costs.tolist(), risks.tolist()),
            start=1,
        )
    )

    return SimulationResultSet(parameters=parameters, trials=trials)


def _as_range(value):
    # Lists from JSON become tuples; anything else is left for validation to reject.
    if isinstance(value, (list, tuple, np.ndarray)):
        return tuple(value)
    return value


def run_simulation(
    trial_count: int,
    invited_count: int,
    attendance_probability_range: Tuple[float, float],
    fixed_cost: float,
    variable_cost_per_guest: float,
    guest_base_count: float,
    budget: float,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> SimulationResultSet:
    """Keyword-friendly entry point. `seed` is only used when no `rng` is given."""
    parameters = SimulationParameters(
        trial_count=trial_count,
        invited_count=invited_count,
        attendance_probability_range=_as_range(attendance_probability_range),
        fixed_cost=fixed_cost,
        variable_cost_per_guest=variable_cost_per_guest,
        guest_base_count=guest_base_count,
        budget=budget,
    )
    if rng is None:
        rng = np.random.default_rng(seed)
    return run(parameters, rng)
