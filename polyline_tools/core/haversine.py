from __future__ import annotations

import math
from numbers import Real
from typing import Optional, Sequence

from polyline_tools.core.errors import InvalidInput

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def _number(v, what: str) -> float:
    if not isinstance(v, Real) or isinstance(v, bool) or not math.isfinite(v):
        raise InvalidInput(f"{what} is not a number, got {v!r}")
    return float(v)


def _point(p, arg: str) -> tuple[float, float]:
    if not isinstance(p, (list, tuple)) or len(p) != 2:
        raise InvalidInput(f"{arg} is not a [lat, lon] pair, got {p!r}")
    return _number(p[0], f"{arg} latitude"), _number(p[1], f"{arg} longitude")


def haversine(angle: float) -> float:
    """Half-versed sine of an angle in radians."""
    a = _number(angle, "angle")
    return math.sin(a / 2) ** 2


def haversine_distance(
    point_a: Sequence[float],
    point_b: Sequence[float],
    radius: Optional[float] = None,
) -> float:
    """
    Great-circle distance between two [lat, lon] points given in degrees.

    Args:
        point_a: First point.
        point_b: Second point.
        radius: Sphere radius in kilometers. Defaults to Earth's mean radius.

    Returns:
        Distance in the unit of ``radius`` (kilometers by default).
    """
    r = EARTH_RADIUS_KM if radius is None else _number(radius, "radius")
    if r <= 0:
        raise InvalidInput(f"radius must be positive, got {radius!r}")

    lat1, lon1 = map(math.radians, _point(point_a, "point_a"))
    lat2, lon2 = map(math.radians, _point(point_b, "point_b"))

    h = haversine(lat2 - lat1) + math.cos(lat1) * math.cos(lat2) * haversine(lon2 - lon1)
    # Rounding can push h a hair past 1 for antipodal points
    return 2 * r * math.asin(math.sqrt(min(1.0, h)))
