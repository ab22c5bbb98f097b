# MIT License (see LICENSE)
"""
Exceptions raised by the migration model.

All of them derive from ValueError so callers that already guard simulation
setup with ``except ValueError`` keep working.

- DomainError: non-physical input (non-positive radius, mass or semimajor
  axis, eccentricity at or past the P(e) pole, negative timescale).
- ConfigurationError: a required parameter is missing or a present one is
  unusable.
- OrbitError: orbital elements are undefined for the given state.
"""
from __future__ import annotations


class MigrationError(ValueError):
    """Base class for every error raised by disc_migration."""


class DomainError(MigrationError):
    """Input lies outside the domain where the disc model is defined."""


class ConfigurationError(MigrationError):
    """Force or particle parameters are missing or invalid."""


class OrbitError(MigrationError):
    """Orbital elements cannot be computed for the given configuration."""
