# MIT License (see LICENSE)
"""
Type I migration timescales.

The characteristic torque timescale of Tanaka & Ward (2004),

    t_wave = (M*/m_p) * (M* / (Sigma a^2)) * (H/r)^4 / Omega(a),

sets the rate of every orbital change. Eccentricity damping and
semimajor-axis evolution are fixed multiples of it:

    t_e = t_wave/0.780 * (1 - 0.14 x^2 + 0.06 x^3),          x = e/(H/r)
    t_a = 2 t_wave / (2.7 + 1.1 alpha) * (H/r)^2 * P(e)

where P(e) (Cresswell & Nelson 2008) slows and eventually reverses the
torque as the eccentricity approaches the disc scale height. P(e) has a pole
at e = 2.02 H/r; the approximation is not continued past it.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from ..constants import (
    ECC_DAMPING_NORM, ECC_DAMPING_C2, ECC_DAMPING_C3,
    SMA_DAMPING_C0, SMA_DAMPING_C1,
    PE_SCALE_1, PE_SCALE_2, PE_SCALE_POLE,
)
from ..errors import DomainError
from .disc import aspect_ratio, surface_density


def angular_frequency(G: float, m_star: float, a: float) -> float:
    """Keplerian angular frequency Omega = sqrt(G M* / a^3)."""
    if not G > 0.0:
        raise DomainError(f"Gravitational constant must be positive, got G={G}")
    if not m_star > 0.0:
        raise DomainError(f"Stellar mass must be positive, got m_star={m_star}")
    if not a > 0.0:
        raise DomainError(f"Semimajor axis must be positive, got a={a}")
    return math.sqrt(G * m_star / (a * a * a))


def wave_timescale(
    G: float,
    m_planet: float,
    m_star: float,
    a: float,
    r: float,
    sigma0: float,
    alpha: float,
    hr: float,
) -> float:
    """
    Tanaka & Ward (2004) wave timescale.

    The surface density is taken at the instantaneous radius r, the orbital
    frequency at the semimajor axis a.

    Args:
        G: Gravitational constant.
        m_planet: Planet mass.
        m_star: Mass of the body the planet orbits.
        a: Semimajor axis.
        r: Instantaneous distance from the star.
        sigma0: Surface density at unit radius.
        alpha: Surface density power-law index.
        hr: Aspect ratio H/r.

    Raises:
        DomainError: If m_planet, a, Sigma(r), m_star or G is not positive.
    """
    if not m_planet > 0.0:
        raise DomainError(f"Planet mass must be positive, got m_planet={m_planet}")
    if not a > 0.0:
        raise DomainError(f"Semimajor axis must be positive, got a={a}")
    sigma = surface_density(r, sigma0, alpha)
    if not sigma > 0.0:
        raise DomainError(f"Surface density must be positive, got sigma={sigma} at r={r}")
    omega = angular_frequency(G, m_star, a)
    return (m_star * m_star / (m_planet * sigma * a * a)) * hr ** 4 / omega


def eccentricity_damping_timescale(t_wave: float, e: float, hr: float) -> float:
    """
    Eccentricity damping timescale t_e.

    Raises:
        DomainError: If hr <= 0, e < 0, or the e/Hr correction is non-positive.
    """
    if not hr > 0.0:
        raise DomainError(f"Aspect ratio must be positive, got hr={hr}")
    if e < 0.0:
        raise DomainError(f"Eccentricity must be non-negative, got e={e}")
    x = e / hr
    bracket = 1.0 - ECC_DAMPING_C2 * x * x + ECC_DAMPING_C3 * x * x * x
    if not bracket > 0.0:
        raise DomainError(
            f"Eccentricity damping correction is non-positive ({bracket}) for e/Hr={x}"
        )
    return (t_wave / ECC_DAMPING_NORM) * bracket


def torque_reversal_factor(e: float, hr: float) -> float:
    """
    Eccentricity-dependent torque factor P(e).

    Equals 1 for circular orbits and diverges at e = 2.02 Hr.

    Raises:
        DomainError: If hr <= 0, e < 0, or e >= 2.02 Hr.
    """
    if not hr > 0.0:
        raise DomainError(f"Aspect ratio must be positive, got hr={hr}")
    if e < 0.0:
        raise DomainError(f"Eccentricity must be non-negative, got e={e}")
    if e >= PE_SCALE_POLE * hr:
        raise DomainError(
            f"Eccentricity e={e} is at or beyond the torque reversal pole "
            f"e = {PE_SCALE_POLE}*Hr = {PE_SCALE_POLE * hr}"
        )
    num = 1.0 + (e / (PE_SCALE_1 * hr)) ** 1.2 + (e / (PE_SCALE_2 * hr)) ** 6
    den = 1.0 - (e / (PE_SCALE_POLE * hr)) ** 4
    return num / den


def semi_major_axis_damping_timescale(t_wave: float, alpha: float, hr: float, pe: float) -> float:
    """Semimajor axis timescale t_a = 2 t_wave / (2.7 + 1.1 alpha) * Hr^2 * P(e)."""
    return (2.0 * t_wave / (SMA_DAMPING_C0 + SMA_DAMPING_C1 * alpha)) * hr * hr * pe


@dataclass(frozen=True)
class DiscTimescales:
    """
    Disc-derived quantities of one evaluation.

    ``pe`` and ``t_a`` are None when the semimajor-axis part of the chain
    was not requested.
    """
    hr: float
    sigma: float
    t_wave: float
    t_e: float
    pe: float | None = None
    t_a: float | None = None


def disc_timescales(
    G: float,
    m_planet: float,
    m_star: float,
    a: float,
    e: float,
    r: float,
    sigma0: float,
    alpha: float,
    beta: float = 0.0,
    semi_major_axis: bool = True,
) -> DiscTimescales:
    """
    Evaluate the timescale chain for a planet at radius r.

    Hr and Sigma are evaluated at r, Omega and the torque normalisation at a.
    With ``semi_major_axis=False`` only t_e is derived, so orbits beyond the
    P(e) pole stay valid when t_a is not needed.
    """
    hr = aspect_ratio(r, beta)
    sigma = surface_density(r, sigma0, alpha)
    t_wave = wave_timescale(G, m_planet, m_star, a, r, sigma0, alpha, hr)
    t_e = eccentricity_damping_timescale(t_wave, e, hr)
    if not semi_major_axis:
        return DiscTimescales(hr=hr, sigma=sigma, t_wave=t_wave, t_e=t_e)
    pe = torque_reversal_factor(e, hr)
    return DiscTimescales(
        hr=hr,
        sigma=sigma,
        t_wave=t_wave,
        t_e=t_e,
        pe=pe,
        t_a=semi_major_axis_damping_timescale(t_wave, alpha, hr, pe),
    )
