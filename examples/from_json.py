# examples/from_json.py
import sys

from disc_migration.io import load_simulation, save_simulation

if len(sys.argv) < 2:
    print("usage: python examples/from_json.py setup.json [t_end] [out.json]")
    sys.exit(1)

sim = load_simulation(sys.argv[1])
t_end = float(sys.argv[2]) if len(sys.argv) > 2 else 10.0
sim.integrate(t_end)

for i, orbit in enumerate(sim.orbits(), start=1):
    print(f"particle {i}: a={orbit.a:.6f} e={orbit.e:.6f} inc={orbit.inc:.6f}")

if len(sys.argv) > 3:
    save_simulation(sim, sys.argv[3])
