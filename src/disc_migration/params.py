# MIT License (see LICENSE)
"""
Named parameter lookup for particles and forces.

Any object carrying a ``params`` mapping is a valid scope. Lookups return
None when a parameter is unset; the ``read_*`` helpers additionally validate
values that are present, so every call site distinguishes three cases:
absent (None), present and valid (the value), present and invalid
(ConfigurationError).
"""
from __future__ import annotations
import math
from numbers import Real
from typing import Any, Iterable

from .errors import ConfigurationError
from .types import Coordinates


def get_param(scope: Any, key: str) -> Any | None:
    """Return the raw value of parameter ``key`` on ``scope``, or None if unset."""
    params = getattr(scope, "params", None)
    if params is None:
        return None
    return params.get(key)


def has_any(scope: Any, keys: Iterable[str]) -> bool:
    """True if at least one of ``keys`` is set on ``scope``."""
    return any(get_param(scope, k) is not None for k in keys)


def read_float(
    scope: Any,
    key: str,
    *,
    positive: bool = False,
    nonzero: bool = False,
    allow_inf: bool = False,
) -> float | None:
    """
    Read a real-valued parameter.

    Args:
        scope: Object with a ``params`` mapping.
        key: Parameter name.
        positive: Reject values <= 0.
        nonzero: Reject exactly zero (timescales that get inverted).
        allow_inf: Accept +/-inf (used for "switched off" timescales).

    Returns:
        The value as float, or None if the parameter is unset.

    Raises:
        ConfigurationError: If the parameter is set but not a usable number.
    """
    raw = get_param(scope, key)
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise ConfigurationError(f"Parameter '{key}' must be a real number, got {raw!r}")
    value = float(raw)
    if math.isnan(value):
        raise ConfigurationError(f"Parameter '{key}' is NaN")
    if math.isinf(value) and not allow_inf:
        raise ConfigurationError(f"Parameter '{key}' must be finite, got {value}")
    if positive and value <= 0.0:
        raise ConfigurationError(f"Parameter '{key}' must be positive, got {value}")
    if nonzero and value == 0.0:
        raise ConfigurationError(f"Parameter '{key}' must be non-zero")
    return value


def read_coordinates(scope: Any, key: str = "coordinates") -> Coordinates | None:
    """
    Read a coordinate-frame selector.

    Accepts a Coordinates member or its (case-insensitive) string name.
    """
    raw = get_param(scope, key)
    if raw is None:
        return None
    if isinstance(raw, Coordinates):
        return raw
    if isinstance(raw, str):
        try:
            return Coordinates(raw.lower())
        except ValueError:
            pass
    valid = ", ".join(c.value for c in Coordinates)
    raise ConfigurationError(f"Parameter '{key}' must be one of {valid}, got {raw!r}")
