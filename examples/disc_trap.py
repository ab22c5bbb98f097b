# examples/disc_trap.py
import logging

from disc_migration.core.migration import MigrationForce
from disc_migration.logging_config import setup_logging
from disc_migration.profiler import Profiler
from disc_migration.simulation import Simulation
from disc_migration.types import Particle

setup_logging(logging.INFO)

prof = Profiler()
sim = Simulation(G=1.0, dt=2e-2, integrator="rk4", profiler=prof)

# Two planets drifting inward through a disc that is truncated at r = 0.5.
# The trap reverses the torque just inside the edge and parks them there.
sim.add(Particle(m=1.0))
sim.add_orbiting(m=1e-5, a=0.7)
sim.add_orbiting(m=2e-5, a=1.0, f=3.0)
sim.move_to_com()
sim.add_force(MigrationForce(params={
    "coordinates": "jacobi",
    "inner_disc_edge": 0.5,
    "disc_edge_width": 0.05,
    "alpha": 1.0,
    "beta": 0.0,
    "initial_disc_surface_density": 2e-9,
}))

for k in range(10):
    sim.integrate(sim.time + 50.0)
    print(f"t={sim.time:7.1f}  " + "  ".join(f"a={o.a:.4f} e={o.e:.4f}" for o in sim.orbits()))

print(prof.stats.summary())
