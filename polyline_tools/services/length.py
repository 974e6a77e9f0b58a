from __future__ import annotations

import logging
import math
from typing import List, Optional

from polyline_tools.core.errors import InvalidInput
from polyline_tools.core.haversine import EARTH_RADIUS_KM, _number, haversine_distance
from polyline_tools.core.polyline import DEFAULT_PRECISION, Coord, _check_polyline, decode
from polyline_tools.core.settings import settings

logger = logging.getLogger(__name__)

UNITS = ("kilometer", "meter")
_UNIT_SCALE = {"kilometer": 1.0, "meter": 1000.0}


def _flat(a: Coord, b: Coord) -> float:
    return math.sqrt((b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2)


class Measure:
    """
    Measures decoded polylines.

    With a sphere radius each segment is a haversine distance in the radius'
    unit (km). Without one the segments are summed as flat Euclidean distance
    over raw degree differences.
    """

    def __init__(self, precision: int = DEFAULT_PRECISION, earth_radius_km: float = EARTH_RADIUS_KM):
        self.precision = precision
        self.earth_radius_km = earth_radius_km

    def length(self, polyline: str, radius: Optional[float] = None, unit: Optional[str] = None) -> float:
        _check_polyline(polyline)
        if radius is not None and _number(radius, "radius") <= 0:
            raise InvalidInput(f"radius must be positive, got {radius!r}")
        if unit is not None and unit not in _UNIT_SCALE:
            raise InvalidInput(f"unit must be one of {', '.join(UNITS)}, got {unit!r}")

        pts = decode(polyline, self.precision)
        return self.path_length(pts, radius=radius) * _UNIT_SCALE[unit or "kilometer"]

    def path_length(self, pts: List[Coord], radius: Optional[float] = None) -> float:
        distance = 0.0
        for a, b in zip(pts, pts[1:]):
            if radius is not None:
                distance += haversine_distance(a, b, radius)
            else:
                distance += _flat(a, b)
        logger.debug(f"[length] {len(pts)} points, radius={radius}, distance={distance}")
        return distance

    def geodesic_length(self, polyline: str, unit: Optional[str] = None) -> float:
        """Great-circle length on a sphere of the configured Earth radius."""
        return self.length(polyline, radius=self.earth_radius_km, unit=unit)


def length(polyline: str, radius: Optional[float] = None, unit: Optional[str] = None) -> float:
    return Measure(
        precision=settings.polyline_precision,
        earth_radius_km=settings.earth_radius_km,
    ).length(polyline, radius=radius, unit=unit)
