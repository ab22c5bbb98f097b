# MIT License (see LICENSE)
"""
Power-law disc profile.

The disc is described by two power laws in radius:
    H/r(r)   = 0.02 * (r/3)^beta         (aspect ratio)
    Sigma(r) = Sigma_0 * r^(-alpha)      (gas surface density)

Both are pure functions of the instantaneous radius and the fixed disc
parameters.
"""
from __future__ import annotations

from ..constants import ASPECT_RATIO_REF, ASPECT_RATIO_REF_RADIUS
from ..errors import DomainError


def aspect_ratio(r: float, beta: float = 0.0) -> float:
    """
    Disc aspect ratio H/r at radius r.

    Implements Hr = 0.02 * 3^(-beta) * r^beta, so beta = 0 gives the
    constant reference value 0.02.

    Raises:
        DomainError: If r <= 0.
    """
    if not r > 0.0:
        raise DomainError(f"Aspect ratio needs a positive radius, got r={r}")
    if beta == 0.0:
        return ASPECT_RATIO_REF
    return ASPECT_RATIO_REF * ASPECT_RATIO_REF_RADIUS ** (-beta) * r ** beta


def surface_density(r: float, sigma0: float, alpha: float) -> float:
    """
    Gas surface density Sigma_0 * r^(-alpha) at radius r.

    Raises:
        DomainError: If r <= 0.
    """
    if not r > 0.0:
        raise DomainError(f"Surface density needs a positive radius, got r={r}")
    return sigma0 * r ** (-alpha)
