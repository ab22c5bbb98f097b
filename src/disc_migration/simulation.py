# MIT License (see LICENSE)
"""
The host N-body simulation and loop.

The Simulation class acts as the world container and simulation controller.
It manages:
- The list of particles and the attached migration forces.
- Global simulation parameters (G, timestep, integrator choice).
- The main simulation loop (step), which for every acceleration evaluation:
    1. Clears accumulated accelerations.
    2. Adds pairwise point-mass gravity.
    3. Adds every attached force (Type I migration).

Structure:
    - User creates a Simulation.
    - User adds the star, then planets, via add() or add_orbiting().
    - User attaches a MigrationForce via add_force().
    - User calls sim.step() in a loop, or sim.integrate(t_end).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .core.forces import apply_gravity_pairwise
from .core.frames import com_of_pair
from .core.integrators import rk4_step, leapfrog_step
from .core.migration import MigrationForce
from .core.orbit import orbit_to_particle, particle_to_orbit
from .profiler import Profiler
from .types import Orbit, Particle

logger = logging.getLogger(__name__)

INTEGRATORS = {
    "rk4": rk4_step,
    "leapfrog": leapfrog_step,
}


@dataclass
class Simulation:
    """
    N-body simulation with migration forces.

    Attributes:
        G: Gravitational constant (default 1, i.e. code units).
        dt: Timestep.
        integrator: Integration scheme ("rk4" or "leapfrog").
        softening: Plummer softening length for gravity.
        profiler: Optional Profiler instance for timing statistics.
    """
    G: float = 1.0
    dt: float = 1e-3
    integrator: str = "rk4"
    softening: float = 0.0
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list)
    forces: list[MigrationForce] = field(default_factory=list)
    time: float = 0.0

    def __post_init__(self) -> None:
        if self.integrator not in INTEGRATORS:
            raise ValueError(f"Unknown integrator: {self.integrator}")
        self._next_id = 1

    def add(self, particle: Particle) -> int:
        """
        Add a particle to the simulation.

        The first particle added is treated as the central star.

        Returns:
            The assigned particle ID.
        """
        particle.id = self._next_id
        self._next_id += 1
        self.particles.append(particle)
        return particle.id

    def add_orbiting(
        self,
        m: float,
        a: float,
        e: float = 0.0,
        inc: float = 0.0,
        f: float = 0.0,
        **params,
    ) -> Particle:
        """
        Add a particle on a Keplerian orbit around all existing particles.

        The orbit is set up in Jacobi coordinates, i.e. relative to the
        centre of mass of the particles already added.

        Args:
            m: Mass.
            a, e, inc, f: Semimajor axis, eccentricity, inclination and true
                          anomaly.
            **params: Particle parameters (e.g. tau_a=-1e4).
        """
        if not self.particles:
            raise ValueError("Add a central body before adding orbiting particles.")
        p = orbit_to_particle(self.G, self._interior_com(len(self.particles)), m, a, e, inc, f)
        p.params.update(params)
        self.add(p)
        return p

    def add_force(self, force: MigrationForce) -> None:
        """Attach a force; it is applied on every acceleration evaluation."""
        self.forces.append(force)
        logger.info(f"Attached force '{force.name}' ({len(self.forces)} active)")

    def remove_force(self, force: MigrationForce) -> None:
        if force in self.forces:
            self.forces.remove(force)

    def compute_accelerations(self, particles: list[Particle] | None = None) -> None:
        """Fill ``p.acc`` with gravity plus all attached forces."""
        particles = self.particles if particles is None else particles
        for p in particles:
            p.clear_acceleration()
        apply_gravity_pairwise(particles, self.G, self.softening)
        for force in self.forces:
            force.apply(self.G, particles)

    def step(self, dt: float | None = None) -> None:
        """Advance the simulation by one timestep."""
        dt = float(self.dt if dt is None else dt)
        stepper = INTEGRATORS.get(self.integrator)
        if stepper is None:
            raise ValueError(f"Unknown integrator: {self.integrator}")

        prof = self.profiler
        if prof:
            with prof.section("integrate"):
                stepper(self.particles, dt, self._accelerations)
        else:
            stepper(self.particles, dt, self._accelerations)
        self.time += dt

    def integrate(self, t_end: float) -> None:
        """
        Step until the simulation time reaches t_end.

        The last step is shortened to land exactly on t_end.
        """
        logger.debug(f"Integrating from t={self.time} to t={t_end}")
        while self.time < t_end:
            remaining = t_end - self.time
            if remaining <= 1e-12 * max(1.0, abs(t_end)):
                self.time = t_end
                break
            self.step(min(self.dt, remaining))

    def orbits(self) -> list[Orbit]:
        """Jacobi orbits of particles 1..N-1."""
        return [
            particle_to_orbit(self.G, self.particles[i], self._interior_com(i))
            for i in range(1, len(self.particles))
        ]

    def move_to_com(self) -> None:
        """Shift positions and velocities into the centre-of-mass frame."""
        com = self._interior_com(len(self.particles))
        for p in self.particles:
            p.position = p.position - com.position
            p.velocity = p.velocity - com.velocity

    def _accelerations(self, particles: list[Particle]) -> None:
        prof = self.profiler
        if prof:
            with prof.section("forces"):
                self.compute_accelerations(particles)
        else:
            self.compute_accelerations(particles)

    def _interior_com(self, n: int) -> Particle:
        com = Particle(m=0.0)
        for p in self.particles[:n]:
            com = com_of_pair(com, p)
        return com
