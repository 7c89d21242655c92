from __future__ import annotations

from typing import Union

import numpy as np

Number = Union[int, float, np.ndarray]


def compute_total_cost(
    fixed_cost: float,
    variable_cost_per_guest: float,
    guest_base_count: float,
    attendee_count: Number,
) -> Number:
    """
    Total event cost for a given turnout:
      total = fixed_cost + variable_cost_per_guest * max(0, attendee_count - guest_base_count)

    The first guest_base_count attendees are covered by fixed_cost, so the
    variable term is clamped at zero and the total never drops below fixed_cost.
    Works element-wise when attendee_count is an array.
    """
    extra_guests = np.maximum(0, np.subtract(attendee_count, guest_base_count))
    total = fixed_cost + variable_cost_per_guest * extra_guests
    if np.ndim(total) == 0:
        return total.item() if isinstance(total, np.generic) else total
    return total


def compute_risk(budget: float, total_cost: Number) -> Number:
    """Signed budget margin: positive is money left over, negative is a shortfall."""
    return budget - total_cost
