# MIT License (see LICENSE)
"""
Planet trap at the inner disc edge.

Inside a cavity the gas density drops sharply and the corotation torque
turns positive, stopping inward migration. This is modelled by a factor f
multiplying the inverse semimajor-axis timescale:

    f = 1                                              r >= r_out
    f = 5.5 cos(pi (r_out - r) / (2 h r_edge)) - 4.5   r_in < r < r_out
    f = -10                                            r <= r_in

with r_out = r_edge (1 + h) and r_in = r_edge (1 - h). The cosine argument
runs from 0 to pi across the zone, so f falls smoothly and monotonically
from +1 to -10.
"""
from __future__ import annotations
import math

from ..constants import TRAP_AMPLITUDE, TRAP_OFFSET, TRAP_INNER_FACTOR
from ..errors import DomainError


def trap_factor(r: float, h: float, r_edge: float) -> float:
    """
    Torque reduction/reversal factor at distance r.

    Args:
        r: Distance at which to evaluate (the semimajor axis in practice).
        h: Fractional half-width of the transition zone.
        r_edge: Radius of the inner disc edge.

    Raises:
        DomainError: If r_edge <= 0 or h <= 0.
    """
    if not r_edge > 0.0:
        raise DomainError(f"Inner disc edge must be positive, got r_edge={r_edge}")
    if not h > 0.0:
        raise DomainError(f"Disc edge width must be positive, got h={h}")

    r_out = r_edge * (1.0 + h)
    r_in = r_edge * (1.0 - h)
    if r >= r_out:
        return 1.0
    if r <= r_in:
        return TRAP_INNER_FACTOR
    return TRAP_AMPLITUDE * math.cos(math.pi * (r_out - r) / (2.0 * h * r_edge)) - TRAP_OFFSET
