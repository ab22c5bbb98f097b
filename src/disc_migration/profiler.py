# MIT License (see LICENSE)
"""
Simple profiling utilities for performance measurement.

Provides lightweight instrumentation to measure execution time of
simulation phases (forces, integration).

Example:
    profiler = Profiler()
    sim = Simulation(profiler=profiler)
    sim.integrate(100.0)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Accumulates timing samples (in seconds) for named sections."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Compute summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to a stats dict with keys
            'n', 'total_ms', 'mean_ms' and 'max_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "total_ms": 1e3 * sum(times),
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """Context-manager based profiler for timing code sections."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under ``name``."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
