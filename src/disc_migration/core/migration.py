# MIT License (see LICENSE)
"""
Type I migration force.

Applies accelerations that orbit-average to exponential evolution of the
semimajor axis, eccentricity and inclination (Papaloizou & Larwood 2000):

    a_mig  = -v / tau_a                          (semimajor axis)
    a_ecc  = -2 (v·r) r / (r^2 tau_e)             (eccentricity)
    a_inc  = -2 v_z / tau_inc  z_hat              (inclination)

with v and r measured relative to the body the particle orbits. Positive
timescales damp; negative ones excite. The eccentricity term is radial, so
it leaves the orbital angular momentum unchanged.

Each timescale is taken from the particle's parameters when set
(``tau_a``, ``tau_e``, ``tau_inc``). Otherwise tau_a and tau_e come from the
disc model of the force (``core.timescales``), with the planet trap
(``core.trap``) applied to the semimajor-axis rate. Inclination damping
has no disc-derived form.

Force parameters:
    coordinates                   Coordinates, default JACOBI
    inner_disc_edge               radius of the planet trap
    disc_edge_width               fractional half-width h of the trap zone
    alpha                         surface density index
    initial_disc_surface_density  Sigma_0 at unit radius
    beta                          aspect ratio index, default 0
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import numpy as np

from ..constants import TINY
from ..errors import ConfigurationError, DomainError
from ..params import has_any, read_coordinates, read_float
from ..types import Coordinates, Orbit, Particle
from ..util import dot, norm2
from .frames import com_force
from .orbit import particle_to_orbit
from .timescales import DiscTimescales, disc_timescales
from .trap import trap_factor

logger = logging.getLogger(__name__)

REQUIRED_DISC_PARAMS = (
    "inner_disc_edge",
    "disc_edge_width",
    "alpha",
    "initial_disc_surface_density",
)
DISC_PARAMS = REQUIRED_DISC_PARAMS + ("beta",)

OrbitFunction = Callable[[float, Particle, Particle], Orbit]


@dataclass(frozen=True)
class DiscParameters:
    """Validated disc configuration of a migration force."""
    inner_disc_edge: float
    disc_edge_width: float
    alpha: float
    sigma0: float
    beta: float = 0.0


@dataclass(frozen=True)
class DiscState:
    """Disc model evaluated for one particle in one step."""
    disc: DiscParameters
    orbit: Orbit
    timescales: DiscTimescales


@dataclass
class MigrationForce:
    """
    A Type I migration effect attached to a simulation.

    Attributes:
        params: Force parameters (see module docstring).
        name: Label used in logs and setup files.
    """
    params: dict[str, Any] = field(default_factory=dict)
    name: str = "type_I_migration"

    @property
    def coordinates(self) -> Coordinates:
        coords = read_coordinates(self)
        return Coordinates.JACOBI if coords is None else coords

    def disc_parameters(self) -> DiscParameters | None:
        """
        Read and validate the disc configuration.

        Returns:
            None if no disc parameter is set at all.

        Raises:
            ConfigurationError: If the disc is partly configured or a value
                                is unusable.
        """
        if not has_any(self, DISC_PARAMS):
            return None
        missing = [k for k in REQUIRED_DISC_PARAMS if self.params.get(k) is None]
        if missing:
            raise ConfigurationError(
                f"Disc model of force '{self.name}' is missing parameters: {', '.join(missing)}"
            )
        h = read_float(self, "disc_edge_width", positive=True)
        if h >= 1.0:
            raise ConfigurationError(f"Parameter 'disc_edge_width' must be below 1, got {h}")
        beta = read_float(self, "beta")
        return DiscParameters(
            inner_disc_edge=read_float(self, "inner_disc_edge", positive=True),
            disc_edge_width=h,
            alpha=read_float(self, "alpha"),
            sigma0=read_float(self, "initial_disc_surface_density", positive=True),
            beta=0.0 if beta is None else beta,
        )

    def apply(self, G: float, particles: Sequence[Particle]) -> None:
        """Add this force's accelerations to ``particles``."""
        apply_type_I_migration(G, self, particles)


def disc_state(
    G: float,
    disc: DiscParameters,
    p: Particle,
    source: Particle,
    r: float,
    orbit_fn: OrbitFunction = particle_to_orbit,
    semi_major_axis: bool = True,
) -> DiscState:
    """
    Evaluate the disc model for particle p orbiting source at distance r.

    The torque factor P(e) and t_a are only derived when semi_major_axis
    is set.

    Raises:
        DomainError: If the planet mass is not positive or the disc model is
                     evaluated outside its domain.
        OrbitError: If the orbit of p is undefined.
    """
    if not p.m > 0.0:
        raise DomainError(f"Disc migration needs a positive planet mass, got m={p.m}")
    orbit = orbit_fn(G, p, source)
    timescales = disc_timescales(
        G, p.m, source.m, orbit.a, orbit.e, r,
        disc.sigma0, disc.alpha, disc.beta,
        semi_major_axis=semi_major_axis,
    )
    return DiscState(disc=disc, orbit=orbit, timescales=timescales)


def resolve_inverse_tau_a(tau_a: float | None, state: DiscState | None) -> float:
    """
    Inverse semimajor-axis timescale.

    An explicit tau_a wins; otherwise the disc rate scaled by the planet
    trap at the semimajor axis; otherwise no forcing.
    """
    if tau_a is not None:
        return 1.0 / tau_a
    if state is None:
        return 0.0
    f = trap_factor(state.orbit.a, state.disc.disc_edge_width, state.disc.inner_disc_edge)
    return f / state.timescales.t_a


def resolve_tau_e(tau_e: float | None, state: DiscState | None) -> float:
    """Eccentricity timescale: explicit value, else disc t_e, else inf."""
    if tau_e is not None:
        return tau_e
    if state is None:
        return math.inf
    return state.timescales.t_e


def resolve_tau_inc(tau_inc: float | None) -> float:
    """Inclination timescale: explicit value, else inf."""
    return math.inf if tau_inc is None else tau_inc


def migration_acceleration(
    G: float,
    force: MigrationForce,
    p: Particle,
    source: Particle,
    orbit_fn: OrbitFunction = particle_to_orbit,
) -> np.ndarray:
    """
    Migration acceleration of particle p orbiting source.

    Pure: neither p, source nor force is modified.

    Args:
        G: Gravitational constant.
        force: Migration force configuration.
        p: Particle being forced.
        source: Body p orbits in the chosen frame.
        orbit_fn: Orbital element calculator (only called on the disc path).

    Returns:
        Acceleration [ax, ay, az].

    Raises:
        ConfigurationError: Invalid particle or force parameters.
        DomainError: Non-positive planet mass or non-physical input to the
                     disc model.
        OrbitError: Orbital elements are undefined.
    """
    if not p.m > 0.0:
        raise DomainError(f"Planet mass must be positive, got m={p.m}")

    tau_a = read_float(p, "tau_a", nonzero=True, allow_inf=True)
    tau_e = read_float(p, "tau_e", nonzero=True, allow_inf=True)
    tau_inc = read_float(p, "tau_inc", nonzero=True, allow_inf=True)

    dr = p.position - source.position
    dv = p.velocity - source.velocity
    r2 = norm2(dr)

    state = None
    if tau_a is None or tau_e is None:
        disc = force.disc_parameters()
        if disc is not None:
            state = disc_state(
                G, disc, p, source, math.sqrt(r2), orbit_fn,
                semi_major_axis=tau_a is None,
            )

    invtau_a = resolve_inverse_tau_a(tau_a, state)
    tau_e = resolve_tau_e(tau_e, state)
    tau_inc = resolve_tau_inc(tau_inc)

    a = -dv * invtau_a

    if tau_e < math.inf or tau_inc < math.inf:
        if r2 <= TINY:
            raise DomainError("Particle coincides with the body it orbits")
        prefac = 2.0 * dot(dr, dv) / (r2 * tau_e)
        a -= prefac * dr
        a[2] -= 2.0 * dv[2] / tau_inc

    return a


def apply_type_I_migration(G: float, force: MigrationForce, particles: Sequence[Particle]) -> None:
    """
    Add Type I migration accelerations to every particle.

    Resolves the coordinate frame of the force and hands the per-particle
    evaluation to the frame reducer, with back-reactions on the source
    bodies. For particle coordinates the reference body is the particle
    whose ``primary`` parameter is set.
    """
    coordinates = force.coordinates
    logger.debug(f"Applying '{force.name}' to {len(particles)} particles in {coordinates.value} coordinates")
    com_force(
        G, force, coordinates, particles, migration_acceleration,
        back_reactions_inclusive=True,
        reference_name="primary",
    )


__all__ = [
    "MigrationForce",
    "DiscParameters",
    "DiscState",
    "disc_state",
    "resolve_inverse_tau_a",
    "resolve_tau_e",
    "resolve_tau_inc",
    "migration_acceleration",
    "apply_type_I_migration",
]
