# MIT License (see LICENSE)
"""
Osculating orbital elements from Cartesian state.

Elements are those of the two-body problem formed by a particle and its
reference body, with gravitational parameter mu = G (m + m_ref):

    a   = -mu / (v^2 - 2 mu / d)
    e   = |((v^2 - mu/d) r - (r·v) v) / mu|
    inc = acos(h_z / |h|),      h = r × v

Reference:
    Murray & Dermott, Solar System Dynamics, ch. 2.8.
"""
from __future__ import annotations
import math

from ..constants import TINY
from ..errors import OrbitError
from ..types import Orbit, Particle
from ..util import cross, dot, norm, norm2


def particle_to_orbit(G: float, p: Particle, primary: Particle) -> Orbit:
    """
    Orbital elements of p relative to primary.

    Hyperbolic orbits are returned with a < 0 and e > 1.

    Raises:
        OrbitError: If the total mass is not positive, the bodies coincide,
                    the orbit is radial (zero angular momentum) or exactly
                    parabolic.
    """
    mu = G * (p.m + primary.m)
    if not mu > 0.0:
        raise OrbitError(f"Orbit needs positive G*(m + m_primary), got {mu}")

    dr = p.position - primary.position
    dv = p.velocity - primary.velocity
    d = norm(dr)
    if d <= TINY:
        raise OrbitError("Particle and reference body are at the same position")

    hvec = cross(dr, dv)
    h = norm(hvec)
    if h <= TINY:
        raise OrbitError("Orbit is radial (zero specific angular momentum)")

    v2 = norm2(dv)
    energy_term = v2 - 2.0 * mu / d
    if energy_term == 0.0:
        raise OrbitError("Orbit is exactly parabolic; semimajor axis is undefined")
    a = -mu / energy_term

    vr = dot(dr, dv)
    evec = ((v2 - mu / d) * dr - vr * dv) / mu
    e = norm(evec)

    cos_inc = max(-1.0, min(1.0, hvec[2] / h))
    inc = math.acos(cos_inc)

    return Orbit(a=a, e=e, inc=inc, d=d, v=math.sqrt(v2), h=h)


def orbit_to_particle(
    G: float,
    primary: Particle,
    m: float,
    a: float,
    e: float = 0.0,
    inc: float = 0.0,
    f: float = 0.0,
) -> Particle:
    """
    Place a particle of mass m on a bound orbit around primary.

    The node and pericentre lie on the x axis; f is the true anomaly.
    Used to set up simulations.
    """
    if not a > 0.0 or not 0.0 <= e < 1.0:
        raise OrbitError(f"Only bound orbits can be constructed, got a={a}, e={e}")
    mu = G * (m + primary.m)
    if not mu > 0.0:
        raise OrbitError(f"Orbit needs positive G*(m + m_primary), got {mu}")

    p_semi = a * (1.0 - e * e)
    d = p_semi / (1.0 + e * math.cos(f))
    vfac = math.sqrt(mu / p_semi)

    # Perifocal frame, then rotate about x by inc
    x_pf, y_pf = d * math.cos(f), d * math.sin(f)
    vx_pf, vy_pf = -vfac * math.sin(f), vfac * (e + math.cos(f))
    ci, si = math.cos(inc), math.sin(inc)

    return Particle(
        m=m,
        position=primary.position + (x_pf, y_pf * ci, y_pf * si),
        velocity=primary.velocity + (vx_pf, vy_pf * ci, vy_pf * si),
    )
