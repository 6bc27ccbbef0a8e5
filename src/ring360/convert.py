from __future__ import annotations
import math
from ring360.models.ring import (
    BASE,
    HALF_TURN,
    NEG_HALF_TURN,
    Number,
    Ring360,
    reverse_mod,
)

__all__ = [
    "BASE",
    "HALF_TURN",
    "NEG_HALF_TURN",
    "AngleDomainError",
    "require_finite",
    "to_360",
    "to_360_gis",
    "mod_360",
    "angle_360",
    "angle_360_abs",
]


class AngleDomainError(ValueError):
    pass


def require_finite(value: Number) -> float:
    """Reject NaN/inf before they reach Ring360, which does not validate."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AngleDomainError(f"angle must be a number, got {value!r}")
    if not math.isfinite(value):
        raise AngleDomainError(f"angle must be finite, got {value!r}")
    return float(value)


def to_360(value: Number) -> Ring360:
    """Plain 0..360 convention; raw is kept verbatim."""
    return Ring360(value)


def to_360_gis(value: Number) -> Ring360:
    """±180 convention (longitudes). Same degrees as to_360, rotations from the wrapped value."""
    return Ring360.from_gis(value)


def mod_360(value: Number) -> float:
    return reverse_mod(value)


def angle_360(a: Number, b: Number) -> float:
    """Signed shortest angle from a to b (degrees), in (-180, 180]."""
    return to_360(a).angle(b)


def angle_360_abs(a: Number, b: Number) -> float:
    """Clockwise reading from a to b (degrees), in [0, 360)."""
    return to_360(a).angle_abs(b)
