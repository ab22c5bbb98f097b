# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

All functions operate on 3D vectors represented as numpy arrays of
shape (3,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def zeros3() -> np.ndarray:
    """Fresh float64 zero vector of length 3."""
    return np.zeros(3, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product a · b of two 3D vectors."""
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """3D cross product a × b."""
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ], dtype=np.float64)
