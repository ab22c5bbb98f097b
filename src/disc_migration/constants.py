# MIT License (see LICENSE)
"""
Numerical constants of the Type I migration model.

The disc coefficients follow Tanaka & Ward (2004) for the wave and damping
timescales and Cresswell & Nelson (2008) for the eccentricity dependence of
the torque (the P(e) factor). All quantities are in simulation units; the
model never assumes SI or cgs.
"""
from __future__ import annotations

# Reference disc aspect ratio H/r at r = 3 (and everywhere when beta = 0).
ASPECT_RATIO_REF: float = 0.02
ASPECT_RATIO_REF_RADIUS: float = 3.0

# Eccentricity damping, t_e = t_wave/0.780 * (1 - 0.14 x^2 + 0.06 x^3), x = e/Hr
ECC_DAMPING_NORM: float = 0.780
ECC_DAMPING_C2: float = 0.14
ECC_DAMPING_C3: float = 0.06

# Semimajor axis damping, t_a = 2 t_wave / (2.7 + 1.1 alpha) * Hr^2 * P(e)
SMA_DAMPING_C0: float = 2.7
SMA_DAMPING_C1: float = 1.1

# Torque reversal factor P(e) scale lengths (in units of Hr)
PE_SCALE_1: float = 2.25
PE_SCALE_2: float = 2.84
PE_SCALE_POLE: float = 2.02

# Planet trap: f = TRAP_AMPLITUDE * cos(...) - TRAP_OFFSET inside the zone,
# 1 outside it and TRAP_INNER_FACTOR inside the inner edge.
TRAP_AMPLITUDE: float = 5.5
TRAP_OFFSET: float = 4.5
TRAP_INNER_FACTOR: float = -10.0

# Below this, separations and angular momenta are treated as zero.
TINY: float = 1e-308
