from __future__ import annotations

from enum import Enum


class OverBudgetFlag(str, Enum):
    UNDER = "Under"
    EVEN = "Even"
    OVER = "Over"


class Recommendation(str, Enum):
    INVITE_ALL = "Invite All"
    INVITE_LESS = "Invite Less"


def classify_over_budget(risk: float) -> OverBudgetFlag:
    if risk < 0:
        return OverBudgetFlag.OVER
    if risk == 0:
        return OverBudgetFlag.EVEN
    return OverBudgetFlag.UNDER


def classify_trial(risk: float) -> Recommendation:
    """A single trial is fine to invite everyone as long as it does not go over budget."""
    return Recommendation.INVITE_ALL if risk >= 0 else Recommendation.INVITE_LESS


def classify_overall(overrun_probability: float, risk_tolerance: float) -> Recommendation:
    """
    Aggregate decision over a whole run.

    Only a strictly higher overrun probability than the tolerance trims the
    guest list; hitting the tolerance exactly still recommends inviting all.
    """
    if overrun_probability > risk_tolerance:
        return Recommendation.INVITE_LESS
    return Recommendation.INVITE_ALL
