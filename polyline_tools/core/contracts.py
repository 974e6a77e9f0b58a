from __future__ import annotations

from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, Field


# ──────────────────────────────────────────────────────────────
# Shared
# ──────────────────────────────────────────────────────────────

LatLon = Tuple[float, float]    # [lat, lon] in degrees

LengthUnit = Literal["kilometer", "meter"]


# ──────────────────────────────────────────────────────────────
# Codec
# ──────────────────────────────────────────────────────────────

class EncodeRequest(BaseModel):
    points: List[LatLon]


class EncodeResponse(BaseModel):
    polyline: str
    count: int


class DecodeRequest(BaseModel):
    polyline: str
    precision: Optional[int] = Field(default=None, ge=0)


class DecodeResponse(BaseModel):
    points: List[LatLon]
    count: int


# ──────────────────────────────────────────────────────────────
# Measurement
# ──────────────────────────────────────────────────────────────

class LengthRequest(BaseModel):
    polyline: str
    radius: Optional[float] = Field(default=None, gt=0)  # km; omit for flat
    unit: LengthUnit = "kilometer"


class LengthResponse(BaseModel):
    length: float
    unit: LengthUnit
    geodesic: bool


class HaversineRequest(BaseModel):
    a: LatLon
    b: LatLon
    radius: Optional[float] = Field(default=None, gt=0)


class HaversineResponse(BaseModel):
    distance_km: float


# ──────────────────────────────────────────────────────────────
# Merge
# ──────────────────────────────────────────────────────────────

class MergeRequest(BaseModel):
    polylines: List[str] = Field(min_length=1)


class MergeResponse(BaseModel):
    polyline: str
    count: int
