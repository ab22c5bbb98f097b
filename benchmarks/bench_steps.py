"""
Microbenchmark: time per step vs number of planets.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from disc_migration.core.migration import MigrationForce
from disc_migration.simulation import Simulation
from disc_migration.types import Particle, Coordinates
from disc_migration.profiler import Profiler

def run(n: int, coordinates: Coordinates, steps: int = 200):
    prof = Profiler()
    sim = Simulation(G=1.0, dt=1e-2, integrator="rk4", profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    sim.add(Particle(m=1.0, params={"primary": True}))
    # spread planets outward with small random eccentricities and phases
    for k in range(n):
        a = 1.0 + 0.3 * k
        e = 0.005 * float(rng.random())
        f = 2 * np.pi * float(rng.random())
        sim.add_orbiting(m=1e-6, a=a, e=e, f=f)
    sim.move_to_com()
    sim.add_force(MigrationForce(params={
        "coordinates": coordinates,
        "inner_disc_edge": 0.5,
        "disc_edge_width": 0.05,
        "alpha": 1.0,
        "initial_disc_surface_density": 1e-9,
    }))

    # warmup
    for _ in range(20):
        sim.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for coordinates in Coordinates:
        for n in [1, 5, 10, 25]:
            per_step, summary = run(n, coordinates)
            print(f"{coordinates.value:12s} N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
            for k in ["forces", "integrate"]:
                if k in summary:
                    print(" ", k, summary[k])
            print()
