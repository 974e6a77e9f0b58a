"""Encode, decode, measure and merge Google encoded polylines."""
from __future__ import annotations

from polyline_tools.core.errors import InvalidInput, MalformedEncoding, PolylineError
from polyline_tools.core.haversine import EARTH_RADIUS_KM, haversine, haversine_distance
from polyline_tools.core.polyline import DEFAULT_PRECISION, decode, encode
from polyline_tools.services.length import length
from polyline_tools.services.merge import merge_polylines, merge_two_polylines

__all__ = [
    "DEFAULT_PRECISION",
    "EARTH_RADIUS_KM",
    "InvalidInput",
    "MalformedEncoding",
    "PolylineError",
    "decode",
    "encode",
    "haversine",
    "haversine_distance",
    "length",
    "merge_polylines",
    "merge_two_polylines",
]
