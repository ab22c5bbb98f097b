# examples/minimal_migration.py
from disc_migration.core.migration import MigrationForce
from disc_migration.simulation import Simulation
from disc_migration.types import Particle

sim = Simulation(G=1.0, dt=1e-2, integrator="rk4")

sim.add(Particle(m=1.0))
planet = sim.add_orbiting(m=1e-5, a=1.0, e=0.05, tau_a=1e3, tau_e=1e2)
sim.move_to_com()
sim.add_force(MigrationForce())

t_end = 50.0
sim.integrate(t_end)

orbit = sim.orbits()[0]
print("t:", sim.time)
print("a:", orbit.a, "e:", orbit.e)
print("pos:", planet.position)
