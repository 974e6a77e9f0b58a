from __future__ import annotations

from fastapi import APIRouter, Depends

from polyline_tools.core.contracts import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    HaversineRequest,
    HaversineResponse,
    LengthRequest,
    LengthResponse,
    MergeRequest,
    MergeResponse,
)
from polyline_tools.core.errors import PolylineError, bad_request, raise_http
from polyline_tools.core.haversine import haversine_distance
from polyline_tools.core.polyline import decode, decode_ints, encode
from polyline_tools.core.settings import settings
from polyline_tools.services.length import Measure
from polyline_tools.services.merge import merge_polylines

router = APIRouter(prefix="/polyline")


def get_measure_service() -> Measure:
    return Measure(
        precision=settings.polyline_precision,
        earth_radius_km=settings.earth_radius_km,
    )


@router.post("/encode", response_model=EncodeResponse)
def polyline_encode(req: EncodeRequest) -> EncodeResponse:
    try:
        poly = encode(req.points)
    except PolylineError as e:
        raise_http(e)
    return EncodeResponse(polyline=poly, count=len(req.points))


@router.post("/decode", response_model=DecodeResponse)
def polyline_decode(req: DecodeRequest) -> DecodeResponse:
    precision = settings.polyline_precision if req.precision is None else req.precision
    try:
        pts = decode(req.polyline, precision)
    except PolylineError as e:
        raise_http(e)
    return DecodeResponse(points=pts, count=len(pts))


@router.post("/length", response_model=LengthResponse)
def polyline_length(
    req: LengthRequest,
    svc: Measure = Depends(get_measure_service),
) -> LengthResponse:
    try:
        dist = svc.length(req.polyline, radius=req.radius, unit=req.unit)
    except PolylineError as e:
        raise_http(e)
    return LengthResponse(length=dist, unit=req.unit, geodesic=req.radius is not None)


@router.post("/haversine", response_model=HaversineResponse)
def polyline_haversine(req: HaversineRequest) -> HaversineResponse:
    radius = settings.earth_radius_km if req.radius is None else req.radius
    try:
        dist = haversine_distance(list(req.a), list(req.b), radius)
    except PolylineError as e:
        raise_http(e)
    return HaversineResponse(distance_km=dist)


@router.post("/merge", response_model=MergeResponse)
def polyline_merge(req: MergeRequest) -> MergeResponse:
    if len(req.polylines) > settings.max_merge_polylines:
        bad_request(
            "too_many_polylines",
            f"at most {settings.max_merge_polylines} polylines per merge, got {len(req.polylines)}",
        )
    try:
        poly = merge_polylines(req.polylines)
        count = len(decode_ints(poly))
    except PolylineError as e:
        raise_http(e)
    return MergeResponse(polyline=poly, count=count)
