from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union
import numpy as np
import pandas as pd

from classifier import Recommendation, classify_overall
from errors import EmptyResultSet, InvalidParameters
from simulator import SimulationResultSet


DEFAULT_PERCENTILES = (2.5, 97.5)


@dataclass(frozen=True)
class Summary:
    overrun_probability: float
    risk_confidence_interval: Tuple[float, float]
    overall_recommendation: Recommendation
    risk_tolerance: float
    trial_count: int
    mean_attendee_count: float
    mean_total_cost: float
    mean_risk: float

    def to_dict(self) -> Dict[str, Any]:
        low, high = self.risk_confidence_interval
        return {
            "overall_recommendation": self.overall_recommendation.value,
            "overrun_probability": self.overrun_probability,
            "risk_tolerance": self.risk_tolerance,
            "risk_confidence_interval": {"low": low, "high": high},
            "trial_count": self.trial_count,
            "mean_attendee_count": self.mean_attendee_count,
            "mean_total_cost": self.mean_total_cost,
            "mean_risk": self.mean_risk,
        }


def _columns(result_set: Union[SimulationResultSet, pd.DataFrame]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    if isinstance(result_set, pd.DataFrame):
        if "risk" not in result_set.columns:
            raise ValueError("Result frame must contain a 'risk' column.")
        risks = result_set["risk"].to_numpy(dtype=float)
        attendees = result_set.get("attendee_count", pd.Series(np.nan, index=result_set.index)).to_numpy(dtype=float)
        costs = result_set.get("total_cost", pd.Series(np.nan, index=result_set.index)).to_numpy(dtype=float)
        return risks, attendees, costs
    return result_set.risks, result_set.attendee_counts.astype(float), result_set.total_costs


def summarize(
    result_set: Union[SimulationResultSet, pd.DataFrame],
    risk_tolerance: float,
    percentiles: Tuple[float, float] = DEFAULT_PERCENTILES,
) -> Summary:
    """
    Aggregate a run into the values the dashboard shows.

    - overrun_probability: exact share of trials with risk < 0.
    - risk_confidence_interval: empirical percentiles of the risk column using
      numpy's default "linear" method (Hyndman & Fan type 7, also R's quantile
      default), interpolating between order statistics.
    - overall_recommendation: Invite Less only when overrun_probability is
      strictly above risk_tolerance.

    Accepts either a SimulationResultSet or its DataFrame form.
    """
    if not (0.0 <= risk_tolerance <= 1.0):
        raise InvalidParameters(f"risk_tolerance must be in [0, 1], got {risk_tolerance!r}.")

    risks, attendees, costs = _columns(result_set)
    n = len(risks)
    if n == 0:
        raise EmptyResultSet("Cannot summarize an empty result set; run at least one trial first.")

    overrun_probability = int(np.count_nonzero(risks < 0)) / n
    low, high = np.percentile(risks, percentiles)

    return Summary(
        overrun_probability=overrun_probability,
        risk_confidence_interval=(float(low), float(high)),
        overall_recommendation=classify_overall(overrun_probability, risk_tolerance),
        risk_tolerance=float(risk_tolerance),
        trial_count=n,
        mean_attendee_count=float(np.mean(attendees)),
        mean_total_cost=float(np.mean(costs)),
        mean_risk=float(np.mean(risks)),
    )
